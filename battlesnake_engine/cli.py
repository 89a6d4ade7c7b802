"""Command line entry point: run the webhook server or decide offline.

Subcommands:

- ``serve``  – run the Flask webhook server
- ``move``   – decide one snapshot file and print the response
- ``replay`` – decide every snapshot in a directory, optionally logging moves
- ``render`` – draw a snapshot (and the chosen move) to an image

``--config path/to/config.json`` supplies server settings; CLI arguments
override config-file values, which override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import time
from collections import Counter
from pathlib import Path

from battlesnake_engine.config.types import ServerConfig
from battlesnake_engine.io.move_log import MoveLogWriter
from battlesnake_engine.io.paths import resolve_within_base, snapshot_paths
from battlesnake_engine.io.payload import PayloadError, load_game_state
from battlesnake_engine.logging_config import configure_logging
from battlesnake_engine.search.budget import Deadline
from battlesnake_engine.strategies.selector import StrategySelector, build_strategies

_DEFAULTS = ServerConfig()


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _coerce_strategies(raw: object, key: str) -> tuple[str, ...]:
    """Accept a comma-separated string or a list of names."""
    if isinstance(raw, str):
        names = [part.strip() for part in raw.split(",") if part.strip()]
    elif isinstance(raw, (list, tuple)):
        names = [_coerce_str(item, key).strip() for item in raw]
    else:
        raise ValueError(f"{key} must be a list or comma-separated string")
    return tuple(names)


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _load_file_config(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        loaded = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return loaded


def build_server_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> ServerConfig:
    """Merge CLI arguments, config-file values, and defaults into a ServerConfig."""
    return ServerConfig(
        host=_get_str(getattr(args, "host", None), "host", file_cfg, _DEFAULTS.host),
        port=_get_int(getattr(args, "port", None), "port", file_cfg, _DEFAULTS.port),
        author=_get_str(None, "author", file_cfg, _DEFAULTS.author),
        color=_get_str(None, "color", file_cfg, _DEFAULTS.color),
        head=_get_str(None, "head", file_cfg, _DEFAULTS.head),
        tail=_get_str(None, "tail", file_cfg, _DEFAULTS.tail),
        version=_get_str(None, "version", file_cfg, _DEFAULTS.version),
        strategies=_coerce_strategies(
            _get_val(args.strategies, "strategies", file_cfg, list(_DEFAULTS.strategies)),
            "strategies",
        ),
        log_level=_get_str(args.log_level, "log_level", file_cfg, _DEFAULTS.log_level),
        timeout_buffer_ms=_get_int(
            getattr(args, "timeout_buffer_ms", None),
            "timeout_buffer_ms",
            file_cfg,
            _DEFAULTS.timeout_buffer_ms,
        ),
    )


def _resolve(path: Path, base_dir: Path | None) -> Path:
    return path if base_dir is None else resolve_within_base(path, base_dir)


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument(
        "--strategies",
        type=str,
        default=None,
        help="Comma-separated strategy names in registration order",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Battlesnake move-decision engine")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the webhook server")
    _add_common_arguments(serve)
    serve.add_argument("--host", type=str, default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--timeout-buffer-ms", type=int, default=None)
    serve.add_argument("--move-log", type=Path, default=None, help="Parquet move log output")
    serve.set_defaults(handler=_handle_serve)

    move = subparsers.add_parser("move", help="Decide one snapshot file")
    _add_common_arguments(move)
    move.add_argument("snapshot", type=Path)
    move.add_argument("--base-dir", type=Path, default=None)
    move.set_defaults(handler=_handle_move)

    replay = subparsers.add_parser("replay", help="Decide every snapshot in a directory")
    _add_common_arguments(replay)
    replay.add_argument("snapshot_dir", type=Path)
    replay.add_argument("--move-log", type=Path, default=None, help="Parquet move log output")
    replay.add_argument("--base-dir", type=Path, default=None)
    replay.set_defaults(handler=_handle_replay)

    render = subparsers.add_parser("render", help="Render a snapshot to an image")
    _add_common_arguments(render)
    render.add_argument("snapshot", type=Path)
    render.add_argument("--output", type=Path, required=True)
    render.add_argument("--theme", type=str, default="default")
    render.add_argument(
        "--decide",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Draw the move the engine would choose",
    )
    render.add_argument("--base-dir", type=Path, default=None)
    render.set_defaults(handler=_handle_render)

    return parser


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_serve(args: argparse.Namespace, config: ServerConfig) -> None:
    from battlesnake_engine.server import create_app

    move_log = MoveLogWriter(args.move_log) if args.move_log is not None else None
    app = create_app(config, move_log=move_log)
    try:
        # The move log writer is not thread safe
        app.run(host=config.host, port=config.port, threaded=move_log is None)
    finally:
        if move_log is not None:
            move_log.close()


def _handle_move(args: argparse.Namespace, config: ServerConfig) -> None:
    state = load_game_state(_resolve(args.snapshot, args.base_dir))
    selector = StrategySelector(build_strategies(config.strategies))
    deadline = Deadline.from_timeout(state.game.timeout, config.timeout_buffer_ms)
    decision = selector.decide(state, deadline)
    response = dict(decision.to_response())
    response["strategy"] = decision.strategy
    print(json.dumps(response, ensure_ascii=False, indent=2))


def _handle_replay(args: argparse.Namespace, config: ServerConfig) -> None:
    snapshot_dir = _resolve(args.snapshot_dir, args.base_dir)
    paths = snapshot_paths(snapshot_dir)
    log_path = _resolve(args.move_log, args.base_dir) if args.move_log is not None else None
    selector = StrategySelector(build_strategies(config.strategies))

    moves: Counter[str] = Counter()
    strategies: Counter[str] = Counter()
    move_log = MoveLogWriter(log_path) if log_path is not None else None
    try:
        for path in paths:
            state = load_game_state(path)
            started = time.perf_counter()
            deadline = Deadline.from_timeout(state.game.timeout, config.timeout_buffer_ms)
            decision = selector.decide(state, deadline)
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            moves[decision.direction.value] += 1
            strategies[decision.strategy] += 1
            if move_log is not None:
                move_log.append(state, decision, elapsed_ms)
    finally:
        if move_log is not None:
            move_log.close()

    summary = {
        "snapshots": len(paths),
        "moves": dict(sorted(moves.items())),
        "strategies": dict(sorted(strategies.items())),
        "move_log": str(log_path) if log_path is not None else None,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


def _handle_render(args: argparse.Namespace, config: ServerConfig) -> None:
    import matplotlib

    matplotlib.use("Agg")
    from battlesnake_engine.viz.render import render_snapshot
    from battlesnake_engine.viz.theme import get_theme

    theme = get_theme(args.theme)
    state = load_game_state(_resolve(args.snapshot, args.base_dir))
    move = None
    if args.decide:
        selector = StrategySelector(build_strategies(config.strategies))
        move = selector.decide(state).direction
    written = render_snapshot(state, args.output, move=move, theme=theme, base_dir=args.base_dir)
    print(json.dumps({"output": str(written)}, ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    file_cfg = _load_file_config(parser, args.config)

    try:
        config = build_server_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(config.log_level)

    try:
        args.handler(args, config)
    except PayloadError as exc:
        parser.error(f"Invalid snapshot: {exc}")
    except (OSError, ValueError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
