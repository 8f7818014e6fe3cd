#!/usr/bin/env python3

"""File provenance tracking over clang's JSON AST.

The JSON dumper only writes a ``file`` attribute when the file differs from
the last location it wrote; every later location in the same file carries
just ``offset``/``line``/``col``. The file of a node is therefore the last
file stamped anywhere before it in document order. ``includedFrom`` is
written together with a file stamp for every header reached via #include.

Within one node the dumper writes locations in this order: ``loc``
(``spellingLoc`` then ``expansionLoc`` for macro locations), then
``range.begin``, then ``range.end``. The tracker advances the carried file
through all of them so the next node starts from the right value, while the
node itself is attributed to its ``loc`` (expansion location when present).

The carried file is threaded explicitly: ``advance`` takes the current file
and returns it updated, and keeps no per-traversal state of its own.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ....utils.path_utils import canonicalize_path, is_same_file

MACRO_LOCATION_KEYS = ("spellingLoc", "expansionLoc")
RANGE_KEYS = ("begin", "end")


@dataclass(frozen=True)
class Provenance:
    """Resolved origin of a single AST node."""

    file: str | None
    included: bool = False


def _stamped_file(location: dict[str, Any]) -> str | None:
    stamped = location.get("file")
    if isinstance(stamped, str) and stamped:
        return stamped

    begin = location.get("begin")
    if isinstance(begin, dict):
        nested = begin.get("file")
        if isinstance(nested, str) and nested:
            return nested

    return None


def _advance_bare(
    location: dict[str, Any], current_file: str | None
) -> tuple[Provenance, str | None]:
    stamped = _stamped_file(location)
    if stamped is not None:
        current_file = stamped
    included = isinstance(location.get("includedFrom"), dict)
    return Provenance(file=current_file, included=included), current_file


def advance_location(
    location: dict[str, Any], current_file: str | None
) -> tuple[Provenance, str | None]:
    """Resolve one location object against the carried file.

    Args:
        location: A ``loc`` object or one end of a ``range``
        current_file: File carried from earlier locations

    Returns:
        Provenance of the location and the updated carried file
    """
    if any(isinstance(location.get(key), dict) for key in MACRO_LOCATION_KEYS):
        provenance = Provenance(file=current_file)
        for key in MACRO_LOCATION_KEYS:
            part = location.get(key)
            if isinstance(part, dict):
                provenance, current_file = _advance_bare(part, current_file)
        return provenance, current_file

    return _advance_bare(location, current_file)


class ProvenanceTracker:
    """Decides whether AST nodes originate in the target header.

    A node is local when its location carries no ``includedFrom`` marker and
    its resolved file identifies the target header.
    """

    def __init__(self, target_header: str):
        """Initialize tracker for a target header.

        Args:
            target_header: Path of the header being parsed
        """
        self.target_header = target_header
        self.target_name = Path(target_header).name
        self.target_canonical = canonicalize_path(target_header)
        self._match_cache: dict[str, bool] = {}

    def advance(self, node: Any, current_file: str | None) -> tuple[Provenance, str | None]:
        """Resolve a node's provenance and carry the file past its locations.

        Args:
            node: AstNode being visited
            current_file: File carried from the previous node in document order

        Returns:
            The node's provenance and the file carried to the next node
        """
        provenance, current_file = advance_location(node.loc, current_file)

        for key in RANGE_KEYS:
            part = node.range.get(key)
            if isinstance(part, dict):
                _, current_file = advance_location(part, current_file)

        return provenance, current_file

    def is_target_file(self, file: str | None) -> bool:
        """Check whether a stamped file name identifies the target header."""
        if file is None:
            return False

        cached = self._match_cache.get(file)
        if cached is None:
            cached = is_same_file(file, self.target_canonical, self.target_name)
            self._match_cache[file] = cached
        return cached

    def is_local(self, provenance: Provenance) -> bool:
        """Check whether a node with this provenance belongs to the target header."""
        return not provenance.included and self.is_target_file(provenance.file)
