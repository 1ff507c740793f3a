"""Utility helpers for :mod:`ofd_graphics`."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .exceptions import ConfigurationError

PathLike = Union[str, "os.PathLike[str]"]


def validate_output_path(path: Optional[PathLike]) -> Path:
    """Check that *path* can receive the packaged archive.

    The path must be given, must not point at a directory and its parent
    directory must already exist.
    """

    if path is None:
        raise ConfigurationError("OFD output path (out_path) is not set")
    out_path = Path(path).expanduser()
    if out_path.is_dir():
        raise ConfigurationError(f"OFD output path (out_path) must not be a directory: {out_path}")
    parent = out_path.absolute().parent
    if not parent.exists():
        raise ConfigurationError(
            f"Parent directory of OFD output path [{parent}] does not exist"
        )
    return out_path


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500.0 B")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"


__all__ = ["PathLike", "validate_output_path", "format_file_size"]
