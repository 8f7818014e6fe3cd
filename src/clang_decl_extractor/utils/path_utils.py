"""Path utilities for file identity checks and output naming."""

import os
import re
import string
from pathlib import Path


def canonicalize_path(path: str) -> str | None:
    """Return the canonical absolute form of an existing path, else None."""
    if not path:
        return None
    try:
        candidate = Path(path)
        if not candidate.exists():
            return None
        return os.path.normcase(str(candidate.resolve()))
    except (OSError, RuntimeError):
        return None


def is_same_file(candidate: str, target_canonical: str | None, target_name: str) -> bool:
    """Decide whether a file stamped by the frontend is the target header.

    Canonical absolute paths are compared when both sides exist on disk.
    Otherwise the base names are compared, which cannot tell apart two
    same-named headers living in different include directories.

    Args:
        candidate: File path as spelled in the AST dump
        target_canonical: Canonical path of the target header (None if unavailable)
        target_name: Base name of the target header

    Returns:
        True if the candidate identifies the target header
    """
    if not candidate:
        return False

    if target_canonical is not None:
        candidate_canonical = canonicalize_path(candidate)
        if candidate_canonical is not None:
            return candidate_canonical == target_canonical

    return candidate == target_name or Path(candidate).name == target_name


def sanitize_for_filesystem(name: str, replacement: str = "_") -> str:
    """Sanitize a string to be safe for use as a filename."""
    if not name:
        return "unnamed"

    valid_chars = set(string.ascii_letters + string.digits + "_-.")
    sanitized = "".join(c if c in valid_chars else replacement for c in name)

    # Collapse multiple replacement characters
    if replacement in sanitized:
        pattern = re.escape(replacement) + "+"
        sanitized = re.sub(pattern, replacement, sanitized)

    sanitized = sanitized.strip(replacement)

    if not sanitized:
        sanitized = "unnamed"

    if len(sanitized) > 200:
        sanitized = sanitized[:200].rstrip(replacement)

    return sanitized


def create_output_filename(header_file: str, suffix: str = "decls") -> str:
    """Create a safe JSON output filename for a parsed header."""
    base_name = sanitize_for_filesystem(Path(header_file).stem)
    return f"{base_name}.{suffix}.json"
