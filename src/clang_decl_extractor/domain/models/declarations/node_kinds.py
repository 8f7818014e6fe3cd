#!/usr/bin/env python3

"""Clang AST node kinds and qualifier spellings.

The AST dump identifies every node by a ``kind`` string. Only the kinds in
``NodeKind`` carry meaning for declaration extraction; every other kind is
walked for provenance tracking and otherwise ignored.
"""

from enum import Enum


class NodeKind(Enum):
    """AST node kinds recognized by the declaration extractor."""

    # Declarations that produce output
    FUNCTION = "FunctionDecl"
    RECORD = "RecordDecl"
    ENUM = "EnumDecl"
    TYPEDEF = "TypedefDecl"
    CXX_RECORD = "CXXRecordDecl"
    NAMESPACE = "NamespaceDecl"

    # Children read by the declaration builders
    PARAMETER = "ParmVarDecl"
    FIELD = "FieldDecl"
    ENUM_CONSTANT = "EnumConstantDecl"
    CXX_METHOD = "CXXMethodDecl"

    @classmethod
    def from_kind(cls, kind: str) -> "NodeKind | None":
        """Map a raw ``kind`` string to a NodeKind, or None if unrecognized."""
        try:
            return cls(kind)
        except ValueError:
            return None


# Children of a CXXRecordDecl collected as methods
METHOD_KINDS = frozenset({NodeKind.CXX_METHOD, NodeKind.FUNCTION})

# CMSIS hardware-access qualifiers are macros over volatile/const:
#   __I / __IM  -> volatile const (read-only register)
#   __O / __OM  -> volatile       (write-only register)
#   __IO / __IOM -> volatile      (read-write register)
VOLATILE_SPELLINGS = frozenset({"volatile", "__I", "__IM", "__O", "__OM", "__IO", "__IOM"})
CONST_SPELLINGS = frozenset({"const", "__I", "__IM"})
QUALIFIER_SPELLINGS = VOLATILE_SPELLINGS | CONST_SPELLINGS

# Spelling clang uses in the qualType of an anonymous aggregate
ANONYMOUS_TYPE_MARKERS = ("(anonymous", "(unnamed")

DEFAULT_PARAMETER_NAME = "param"
UNKNOWN_TYPE = "unknown"
