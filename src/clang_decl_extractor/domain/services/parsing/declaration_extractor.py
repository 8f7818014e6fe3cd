#!/usr/bin/env python3

"""Declaration extraction from a decoded clang AST.

Walks the tree once in document order, resolving each node's provenance
and dispatching local, user-written declaration nodes to their builders.
Every node's children are visited, whether or not the node itself produced
a declaration, so file stamps inside skipped subtrees still advance the
provenance carry.
"""

from collections.abc import Callable

from ....infrastructure.logging import get_logger, log_timing
from ...models.declarations import Declaration, NamespaceDecl, NodeKind
from .declaration_builders import (
    build_class,
    build_enum,
    build_function,
    build_record,
    build_typedef,
)
from .provenance_tracker import Provenance, ProvenanceTracker
from .tree_decoder import AstNode

logger = get_logger(__name__)

Builder = Callable[[AstNode], "Declaration | None"]

# Node kinds that produce a declaration of their own
DECLARATION_BUILDERS: dict[NodeKind, Builder] = {
    NodeKind.FUNCTION: build_function,
    NodeKind.RECORD: build_record,
    NodeKind.ENUM: build_enum,
    NodeKind.TYPEDEF: build_typedef,
    NodeKind.CXX_RECORD: build_class,
}


class DeclarationExtractor:
    """Extracts the declarations physically written in one header.

    Namespaces are flattened by default: their members appear in the result
    in source order, without a NamespaceDecl wrapper. With
    ``group_namespaces`` enabled, a named local namespace becomes a
    NamespaceDecl holding its members' declarations.
    """

    def __init__(
        self,
        target_header: str,
        verbose: bool = False,
        group_namespaces: bool = False,
    ):
        """Initialize extractor for a target header.

        Args:
            target_header: Path of the header being parsed
            verbose: Log every declaration node that is processed
            group_namespaces: Reconstruct namespace grouping
        """
        self.tracker = ProvenanceTracker(target_header)
        self.verbose = verbose
        self.group_namespaces = group_namespaces

    @log_timing
    def extract(self, root: AstNode) -> list[Declaration]:
        """Extract declarations from a decoded AST.

        Args:
            root: Root node returned by the tree decoder

        Returns:
            Declarations in traversal order
        """
        declarations, _ = self._walk(root, None)
        return declarations

    def _build(self, node: AstNode, kind: NodeKind, provenance: Provenance) -> Declaration | None:
        builder = DECLARATION_BUILDERS.get(kind)
        if builder is None:
            return None

        if self.verbose:
            logger.debug(
                f"Processing {node.kind}: {node.name or '<anonymous>'} (file: {provenance.file})"
            )
        return builder(node)

    def _walk_children(
        self, node: AstNode, current_file: str | None
    ) -> tuple[list[Declaration], str | None]:
        declarations: list[Declaration] = []
        for child in node.inner:
            found, current_file = self._walk(child, current_file)
            declarations.extend(found)
        return declarations, current_file

    def _walk(
        self, node: AstNode, current_file: str | None
    ) -> tuple[list[Declaration], str | None]:
        """Visit a node and its subtree.

        Args:
            node: Node to visit
            current_file: File carried from the previous node in document order

        Returns:
            Declarations found in the subtree and the file carried onwards
        """
        provenance, current_file = self.tracker.advance(node, current_file)
        kind = node.node_kind
        is_candidate = (
            kind is not None and not node.is_implicit and self.tracker.is_local(provenance)
        )

        declarations: list[Declaration] = []
        if is_candidate and kind is not NodeKind.NAMESPACE:
            declaration = self._build(node, kind, provenance)
            if declaration is not None:
                declarations.append(declaration)

        members, current_file = self._walk_children(node, current_file)

        if kind is NodeKind.NAMESPACE and is_candidate and self.group_namespaces and node.name:
            declarations.append(NamespaceDecl(name=node.name, declarations=members))
        else:
            declarations.extend(members)

        return declarations, current_file


def extract_declarations(
    root: AstNode,
    target_header: str,
    verbose: bool = False,
    group_namespaces: bool = False,
) -> list[Declaration]:
    """Extract the declarations of ``target_header`` from a decoded AST."""
    extractor = DeclarationExtractor(target_header, verbose, group_namespaces)
    return extractor.extract(root)
