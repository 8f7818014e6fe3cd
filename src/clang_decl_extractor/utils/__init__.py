"""Utilities module initialization."""

from .path_utils import (
    canonicalize_path,
    create_output_filename,
    is_same_file,
    sanitize_for_filesystem,
)

__all__ = [
    "canonicalize_path",
    "create_output_filename",
    "is_same_file",
    "sanitize_for_filesystem",
]
