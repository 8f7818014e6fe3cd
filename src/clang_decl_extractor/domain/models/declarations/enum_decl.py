#!/usr/bin/env python3

"""Enum information model."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class EnumValue:
    """Information about an enum constant."""

    name: str
    value: int  # signed, IRQ numbers are negative
    documentation: str | None = None


@dataclass
class EnumDecl:
    """Information about an enumeration."""

    kind: ClassVar[str] = "enum"

    name: str
    values: list[EnumValue] = field(default_factory=list)
    documentation: str | None = None
    underlying_type: str | None = None
    """Fixed underlying type, e.g. 'uint8_t' in 'enum E : uint8_t'"""
