#!/usr/bin/env python3

"""Function information model for free functions and methods."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class FunctionDecl:
    """Information about a function or method declaration."""

    kind: ClassVar[str] = "function"

    name: str
    return_type: str
    parameters: list[tuple[str, str]] = field(default_factory=list)
    """Ordered (parameter name, parameter type) pairs"""
    documentation: str | None = None
    is_virtual: bool = False
    is_static: bool = False
    is_inline: bool = False
