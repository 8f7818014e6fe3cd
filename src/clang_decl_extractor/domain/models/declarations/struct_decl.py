#!/usr/bin/env python3

"""Struct/union information model."""

from dataclasses import dataclass, field
from typing import ClassVar

from .field_decl import FieldDecl


@dataclass
class StructDecl:
    """Information about a struct or union.

    An empty name marks an anonymous aggregate; such a declaration always
    carries at least one field.
    """

    kind: ClassVar[str] = "struct"

    name: str
    fields: list[FieldDecl] = field(default_factory=list)
    documentation: str | None = None
    is_union: bool = False
