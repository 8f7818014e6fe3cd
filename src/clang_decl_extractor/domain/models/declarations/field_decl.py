#!/usr/bin/env python3

"""Field information model for struct, union and class members."""

from dataclasses import dataclass


@dataclass
class FieldDecl:
    """Information about a struct/union/class field."""

    name: str  # empty only for a member of anonymous nested struct/union type
    type_name: str
    is_volatile: bool = False  # volatile, __IO, __O, __I
    is_const: bool = False  # const, __I
    is_array: bool = False
    array_size: int | None = None
