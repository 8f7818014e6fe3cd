#!/usr/bin/env python3

"""C++ class information model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .field_decl import FieldDecl
from .function_decl import FunctionDecl


@dataclass
class ClassDecl:
    """Information about a named C++ class."""

    kind: ClassVar[str] = "class"

    name: str
    methods: list[FunctionDecl] = field(default_factory=list)
    fields: list[FieldDecl] = field(default_factory=list)
    documentation: str | None = None
    is_abstract: bool = False
