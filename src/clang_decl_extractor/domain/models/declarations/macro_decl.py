#!/usr/bin/env python3

"""Preprocessor macro information models.

A macro's right-hand side is classified into one of four shapes:

    #define FOO 42                        -> SimpleValue("42")
    #define FOO (BAR + 1)                 -> Expression("(BAR + 1)")
    #define FOO(x, y) ((x) + (y))         -> FunctionLike(["x", "y"], "((x) + (y))")
    #define GPIOA ((GPIO_TypeDef*) 0x400) -> TypeCast("GPIO_TypeDef", "0x400")
"""

from dataclasses import dataclass, field
from typing import ClassVar, Union


@dataclass
class SimpleValue:
    """Object-like macro with a plain value (possibly empty)."""

    value: str


@dataclass
class Expression:
    """Object-like macro whose value contains operators."""

    text: str


@dataclass
class FunctionLike:
    """Macro with a parenthesized parameter list."""

    args: list[str] = field(default_factory=list)
    body: str = ""


@dataclass
class TypeCast:
    """Object-like macro casting an address to a pointer type."""

    target_type: str
    address_expr: str


MacroKind = Union[SimpleValue, Expression, FunctionLike, TypeCast]


@dataclass
class MacroDecl:
    """Information about a #define."""

    kind: ClassVar[str] = "macro"

    name: str
    macro_kind: MacroKind
    raw_value: str
