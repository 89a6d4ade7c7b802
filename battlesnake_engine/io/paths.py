"""Path helpers for CLI inputs and outputs."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def snapshot_paths(snapshot_dir: Path) -> list[Path]:
    """Return the ``*.json`` snapshots in *snapshot_dir*, sorted by name."""
    if not snapshot_dir.is_dir():
        raise ValueError(f"Snapshot directory not found: {snapshot_dir}")
    return sorted(p for p in snapshot_dir.glob("*.json") if p.is_file())
