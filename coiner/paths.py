from __future__ import annotations

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def log_file_path(log_dir: Path | str, name: str) -> Path:
    """Return ``<log_dir>/<name>.log``, creating the directory."""
    return ensure_dir(Path(log_dir)) / f"{name}.log"
