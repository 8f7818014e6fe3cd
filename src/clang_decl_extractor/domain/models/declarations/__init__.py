#!/usr/bin/env python3

"""Declaration models extracted from C/C++ headers."""

from typing import Union

from .class_decl import ClassDecl
from .enum_decl import EnumDecl, EnumValue
from .field_decl import FieldDecl
from .function_decl import FunctionDecl
from .macro_decl import Expression, FunctionLike, MacroDecl, MacroKind, SimpleValue, TypeCast
from .namespace_decl import NamespaceDecl
from .node_kinds import (
    ANONYMOUS_TYPE_MARKERS,
    CONST_SPELLINGS,
    DEFAULT_PARAMETER_NAME,
    METHOD_KINDS,
    QUALIFIER_SPELLINGS,
    UNKNOWN_TYPE,
    VOLATILE_SPELLINGS,
    NodeKind,
)
from .struct_decl import StructDecl
from .typedef_info import TypedefInfo

Declaration = Union[
    FunctionDecl,
    StructDecl,
    EnumDecl,
    TypedefInfo,
    MacroDecl,
    NamespaceDecl,
    ClassDecl,
]

__all__ = [
    "ANONYMOUS_TYPE_MARKERS",
    "CONST_SPELLINGS",
    "ClassDecl",
    "DEFAULT_PARAMETER_NAME",
    "Declaration",
    "EnumDecl",
    "EnumValue",
    "Expression",
    "FieldDecl",
    "FunctionDecl",
    "FunctionLike",
    "METHOD_KINDS",
    "MacroDecl",
    "MacroKind",
    "NamespaceDecl",
    "NodeKind",
    "QUALIFIER_SPELLINGS",
    "SimpleValue",
    "StructDecl",
    "TypeCast",
    "TypedefInfo",
    "UNKNOWN_TYPE",
    "VOLATILE_SPELLINGS",
]
