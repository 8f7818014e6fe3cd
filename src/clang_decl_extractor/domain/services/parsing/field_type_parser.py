#!/usr/bin/env python3

"""Parsing of clang type strings for fields and function signatures.

Field types arrive as clang prints them, e.g. ``volatile uint32_t[4]`` or
``const char *``. The parser records qualifiers as flags, splits off a
fixed-size array suffix and keeps the remaining base type.
"""

import re

from ...models.declarations import (
    ANONYMOUS_TYPE_MARKERS,
    CONST_SPELLINGS,
    QUALIFIER_SPELLINGS,
    VOLATILE_SPELLINGS,
    FieldDecl,
)

ARRAY_SUFFIX_PATTERN = re.compile(r"\[(\d+)\]")
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_]\w*")
QUALIFIER_PATTERN = re.compile(
    r"\b(?:" + "|".join(sorted(QUALIFIER_SPELLINGS, key=len, reverse=True)) + r")\b"
)
WHITESPACE_PATTERN = re.compile(r"\s+")


def extract_return_type(type_str: str) -> str:
    """Extract the return type from a function type string.

    Example: ``"void (int, char *)"`` -> ``"void"``
    """
    index = type_str.find("(")
    if index == -1:
        return type_str.strip()
    return type_str[:index].strip()


def _strip_qualifiers(type_str: str) -> str:
    stripped = QUALIFIER_PATTERN.sub("", type_str)
    return WHITESPACE_PATTERN.sub(" ", stripped).strip()


def parse_field_type(type_str: str, name: str = "") -> FieldDecl:
    """Parse a field type string into structured field information.

    Args:
        type_str: Type as printed by clang
        name: Field name to record

    Returns:
        FieldDecl with qualifier flags, array info and the bare base type
    """
    tokens = set(IDENTIFIER_PATTERN.findall(type_str))
    is_volatile = bool(tokens & VOLATILE_SPELLINGS)
    is_const = bool(tokens & CONST_SPELLINGS)

    is_array = False
    array_size = None
    base_type = type_str

    array_match = ARRAY_SUFFIX_PATTERN.search(type_str)
    if array_match:
        is_array = True
        array_size = int(array_match.group(1))
        base_type = ARRAY_SUFFIX_PATTERN.sub("", type_str)

    return FieldDecl(
        name=name,
        type_name=_strip_qualifiers(base_type),
        is_volatile=is_volatile,
        is_const=is_const,
        is_array=is_array,
        array_size=array_size,
    )


def is_anonymous_type(type_str: str) -> bool:
    """Check whether a type string names an anonymous struct/union."""
    return any(marker in type_str for marker in ANONYMOUS_TYPE_MARKERS)
