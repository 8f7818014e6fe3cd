#!/usr/bin/env python3

"""Builders turning individual AST nodes into declaration records.

Each builder looks at one node and its direct children only. Provenance and
implicit-node filtering happen in the extractor before a builder is called;
builders return None when the node carries nothing worth emitting.
"""

from ....infrastructure.logging import get_logger
from ...models.declarations import (
    DEFAULT_PARAMETER_NAME,
    METHOD_KINDS,
    ClassDecl,
    EnumDecl,
    EnumValue,
    FieldDecl,
    FunctionDecl,
    NodeKind,
    StructDecl,
    TypedefInfo,
)
from .field_type_parser import extract_return_type, is_anonymous_type, parse_field_type
from .tree_decoder import AstNode

logger = get_logger(__name__)

NEGATION_OPCODE = "-"


def build_function(node: AstNode) -> FunctionDecl | None:
    """Build a function (or method) declaration.

    Args:
        node: FunctionDecl or CXXMethodDecl node

    Returns:
        FunctionDecl, or None for an unnamed node
    """
    if not node.name:
        return None

    parameters = [
        (param.name or DEFAULT_PARAMETER_NAME, param.type_string)
        for param in node.children_of_kind(NodeKind.PARAMETER)
    ]

    return FunctionDecl(
        name=node.name,
        return_type=extract_return_type(node.type_string),
        parameters=parameters,
        is_virtual=node.get_bool("virtual"),
        is_static=node.get_string("storageClass") == "static",
        is_inline=node.get_bool("inline"),
    )


def build_field(node: AstNode) -> FieldDecl | None:
    """Build a field from a FieldDecl node.

    Unnamed fields are kept only when they hold an anonymous struct/union;
    unnamed bit-field padding is dropped.
    """
    type_str = node.type_string
    if not node.name and not is_anonymous_type(type_str):
        return None

    return parse_field_type(type_str, name=node.name or "")


def _collect_fields(node: AstNode) -> list[FieldDecl]:
    fields = []
    for child in node.children_of_kind(NodeKind.FIELD):
        field_decl = build_field(child)
        if field_decl is not None:
            fields.append(field_decl)
    return fields


def build_record(node: AstNode) -> StructDecl | None:
    """Build a struct/union declaration from a RecordDecl node.

    An anonymous record is emitted only if it has fields; anonymous empty
    records are structural noise.
    """
    fields = _collect_fields(node)
    is_union = node.get_string("tagUsed") == "union"

    if node.name:
        return StructDecl(name=node.name, fields=fields, is_union=is_union)
    if fields:
        return StructDecl(name="", fields=fields, is_union=is_union)
    return None


def _literal_value(node: AstNode) -> int | None:
    """Find the integer value of an enum constant's initializer.

    Looks at the constant's child expressions, then one level deeper. A
    unary minus around a bare literal is applied when clang did not fold the
    expression into a ConstantExpr value.
    """
    for child in node.inner:
        value = child.get_int("value")
        if value is not None:
            return value

        for nested in child.inner:
            value = nested.get_int("value")
            if value is not None:
                if child.kind == "UnaryOperator" and child.get_string("opcode") == NEGATION_OPCODE:
                    return -value
                return value

    return None


def build_enum_values(node: AstNode) -> list[EnumValue]:
    """Build the constants of an enum, applying C's implicit numbering."""
    values = []
    next_value = 0

    for child in node.children_of_kind(NodeKind.ENUM_CONSTANT):
        if not child.name:
            continue

        value = _literal_value(child)
        if value is None:
            value = next_value

        values.append(EnumValue(name=child.name, value=value))
        next_value = value + 1

    return values


def build_enum(node: AstNode) -> EnumDecl | None:
    """Build an enum declaration from an EnumDecl node."""
    values = build_enum_values(node)

    underlying_type = None
    fixed = node.get_object("fixedUnderlyingType")
    if fixed is not None and isinstance(fixed.get("qualType"), str):
        underlying_type = fixed["qualType"]

    if node.name:
        return EnumDecl(name=node.name, values=values, underlying_type=underlying_type)
    if values:
        return EnumDecl(name="", values=values, underlying_type=underlying_type)
    return None


def build_typedef(node: AstNode) -> TypedefInfo | None:
    """Build a typedef from a TypedefDecl node, keeping the type verbatim."""
    if not node.name:
        return None
    return TypedefInfo(name=node.name, underlying_type=node.type_string)


def build_class(node: AstNode) -> ClassDecl | None:
    """Build a C++ class from a CXXRecordDecl node.

    Anonymous classes are never emitted.
    """
    if not node.name:
        return None

    methods = []
    for child in node.children_of_kind(*METHOD_KINDS):
        if child.is_implicit:
            continue
        method = build_function(child)
        if method is not None:
            methods.append(method)

    is_abstract = any(
        child.get_bool("pure") for child in node.children_of_kind(NodeKind.CXX_METHOD)
    )

    logger.debug(f"Class {node.name}: {len(methods)} methods, abstract={is_abstract}")

    return ClassDecl(
        name=node.name,
        methods=methods,
        fields=_collect_fields(node),
        is_abstract=is_abstract,
    )
