"""Filesystem helpers used by exports and downloads."""

from __future__ import annotations

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Create the directory if it does not exist and return it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def write_text(path: Path, text: str) -> Path:
    """Write UTF-8 text, creating parent directories, and return the path."""

    ensure_dir(path.parent)
    path.write_text(text, encoding="utf-8")
    return path


def safe_filename(value: str, max_len: int = 120) -> str:
    return "".join(ch if ch.isalnum() or ch in ("-", "_", ".") else "_" for ch in value)[:max_len]
