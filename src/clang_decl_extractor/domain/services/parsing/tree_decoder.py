#!/usr/bin/env python3

"""Decoding of clang's JSON AST dump into a navigable node tree.

Each JSON object in the dump becomes an ``AstNode`` with its ``kind``,
optional ``name``, the ``qualType`` of its ``type`` object, its location
objects and its ``inner`` children. The remaining attributes are kept
verbatim for the declaration builders.
"""

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from ....exceptions import TreeDecodeError
from ....infrastructure.logging import get_logger, log_timing
from ...models.declarations import UNKNOWN_TYPE, NodeKind

logger = get_logger(__name__)


@dataclass
class AstNode:
    """A single node of the decoded AST."""

    kind: str
    name: str | None = None
    qual_type: str | None = None
    loc: dict[str, Any] = field(default_factory=dict)
    range: dict[str, Any] = field(default_factory=dict)
    attributes: dict[str, Any] = field(default_factory=dict)
    inner: list["AstNode"] = field(default_factory=list)

    @property
    def node_kind(self) -> NodeKind | None:
        return NodeKind.from_kind(self.kind)

    @property
    def is_implicit(self) -> bool:
        return self.get_bool("isImplicit")

    @property
    def type_string(self) -> str:
        """The node's qualType, or 'unknown' if it has no type."""
        return self.qual_type if self.qual_type is not None else UNKNOWN_TYPE

    def get_string(self, prop: str) -> str | None:
        value = self.attributes.get(prop)
        return value if isinstance(value, str) else None

    def get_bool(self, prop: str) -> bool:
        return self.attributes.get(prop) is True

    def get_object(self, prop: str) -> dict[str, Any] | None:
        value = self.attributes.get(prop)
        return value if isinstance(value, dict) else None

    def get_int(self, prop: str) -> int | None:
        """Read an integer attribute; clang prints literal values as strings."""
        value = self.attributes.get(prop)
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None

    def children_of_kind(self, *kinds: NodeKind) -> Iterator["AstNode"]:
        """Iterate over direct children whose kind is one of ``kinds``."""
        wanted = {kind.value for kind in kinds}
        return (child for child in self.inner if child.kind in wanted)

    def iter_preorder(self) -> Iterator["AstNode"]:
        """Iterate over this node and all descendants in document order."""
        stack: list[AstNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.inner))


def _make_node(obj: dict[str, Any]) -> AstNode:
    kind = obj.get("kind")
    if not isinstance(kind, str):
        # Null child statements (e.g. an empty for-loop init) are dumped as {}
        return AstNode(kind="")

    name = obj.get("name")
    type_obj = obj.get("type")
    qual_type = type_obj.get("qualType") if isinstance(type_obj, dict) else None
    loc = obj.get("loc")
    node_range = obj.get("range")

    return AstNode(
        kind=kind,
        name=name if isinstance(name, str) else None,
        qual_type=qual_type if isinstance(qual_type, str) else None,
        loc=loc if isinstance(loc, dict) else {},
        range=node_range if isinstance(node_range, dict) else {},
        attributes={key: value for key, value in obj.items() if key != "inner"},
    )


def build_tree(obj: Any) -> AstNode:
    """Convert a parsed JSON object into an AstNode tree.

    Conversion is iterative so that deeply nested expression trees from
    inline function bodies do not hit the interpreter's recursion limit.

    Raises:
        TreeDecodeError: If the object is not a well-formed AST node
    """
    if not isinstance(obj, dict):
        raise TreeDecodeError(f"AST root must be a JSON object, got {type(obj).__name__}")

    if not isinstance(obj.get("kind"), str):
        raise TreeDecodeError(f"AST root without a 'kind' string: {sorted(obj)[:8]}")

    root = _make_node(obj)
    pending: list[tuple[AstNode, dict[str, Any]]] = [(root, obj)]

    while pending:
        node, raw = pending.pop()
        children = raw.get("inner", [])
        if not isinstance(children, list):
            raise TreeDecodeError(f"'inner' of {node.kind} is not an array")
        for child_raw in children:
            if not isinstance(child_raw, dict):
                raise TreeDecodeError(f"Child of {node.kind} is not a JSON object")
            child = _make_node(child_raw)
            node.inner.append(child)
            if child.kind:
                pending.append((child, child_raw))

    return root


@log_timing
def decode_ast(text: str) -> AstNode:
    """Decode AST-dump text into a node tree.

    Args:
        text: Standard output of the AST-dump pass

    Returns:
        Root node (normally a TranslationUnitDecl)

    Raises:
        TreeDecodeError: If the text is not a valid JSON AST
    """
    if not text.strip():
        raise TreeDecodeError("AST dump is empty")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeDecodeError(f"Failed to parse clang output: {e}") from e
    except RecursionError as e:
        raise TreeDecodeError("AST dump is nested too deeply to decode") from e

    root = build_tree(payload)
    logger.debug(f"Decoded AST root: {root.kind} with {len(root.inner)} top-level nodes")
    return root
