#!/usr/bin/env python3

"""Classification of preprocessor macro definitions.

Consumes the output of ``clang -E -dM``: one ``#define NAME ...`` line per
macro. Each definition is bucketed by the shape of its right-hand side:

- ``NAME(a, b) BODY``   -> FunctionLike (no space before the parenthesis)
- ``NAME ((T*) EXPR)``  -> TypeCast
- ``NAME VALUE`` where VALUE contains an operator -> Expression
- ``NAME VALUE`` otherwise, or a bare ``NAME``    -> SimpleValue

Lines of any other shape are dropped.
"""

import re

from ....infrastructure.logging import get_logger
from ...models.declarations import (
    Expression,
    FunctionLike,
    MacroDecl,
    MacroKind,
    SimpleValue,
    TypeCast,
)

logger = get_logger(__name__)

DEFINE_DIRECTIVE = "#define "

FUNCTION_LIKE_PATTERN = re.compile(r"^(\w+)\(([^)]*)\)(?:\s+(.*))?$")
OBJECT_LIKE_PATTERN = re.compile(r"^(\w+)\s+(.+)$")
BARE_NAME_PATTERN = re.compile(r"^(\w+)$")
TYPE_CAST_PATTERN = re.compile(r"^\(\((\w+)\s*\*\)\s*(.+)\)$")
STRING_LITERAL_PATTERN = re.compile(r"\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*'")

# Arithmetic, bitwise and shift operators
OPERATOR_TOKENS = ("<<", ">>", "+", "-", "*", "/", "%", "|", "&", "^", "~")

RESERVED_PREFIX_PATTERN = re.compile(r"^_[A-Z]")


def classify_value(value: str) -> MacroKind:
    """Classify the right-hand side of an object-like macro."""
    cast_match = TYPE_CAST_PATTERN.match(value)
    if cast_match:
        return TypeCast(target_type=cast_match.group(1), address_expr=cast_match.group(2))

    # Operators inside string or character literals do not count
    code = STRING_LITERAL_PATTERN.sub('""', value)
    if any(token in code for token in OPERATOR_TOKENS):
        return Expression(text=value)

    return SimpleValue(value=value)


def parse_macro_line(line: str) -> MacroDecl | None:
    """Parse a single macro definition line.

    Args:
        line: One line of macro-dump output

    Returns:
        MacroDecl, or None if the line is not a parsable #define
    """
    if not line.startswith(DEFINE_DIRECTIVE):
        return None

    rest = line[len(DEFINE_DIRECTIVE):].strip()

    func_match = FUNCTION_LIKE_PATTERN.match(rest)
    if func_match:
        args = [arg.strip() for arg in func_match.group(2).split(",") if arg.strip()]
        body = (func_match.group(3) or "").strip()
        return MacroDecl(
            name=func_match.group(1),
            macro_kind=FunctionLike(args=args, body=body),
            raw_value=body,
        )

    obj_match = OBJECT_LIKE_PATTERN.match(rest)
    if obj_match:
        value = obj_match.group(2).strip()
        return MacroDecl(
            name=obj_match.group(1),
            macro_kind=classify_value(value),
            raw_value=value,
        )

    bare_match = BARE_NAME_PATTERN.match(rest)
    if bare_match:
        return MacroDecl(
            name=bare_match.group(1),
            macro_kind=SimpleValue(value=""),
            raw_value="",
        )

    return None


def is_reserved_name(name: str) -> bool:
    """Check for compiler built-in / reserved identifier spellings.

    ``__NAME__`` is a compiler built-in and ``_Upper...`` is reserved for
    the implementation.
    """
    if name.startswith("__") and name.endswith("__"):
        return True
    return bool(RESERVED_PREFIX_PATTERN.match(name))


def is_user_macro(name: str, prefixes: list[str]) -> bool:
    """Decide whether a macro passes the reserved-name and prefix filters."""
    if is_reserved_name(name):
        return False
    if not prefixes:
        return True
    return any(name.startswith(prefix) for prefix in prefixes)


def classify_macros(text: str, prefixes: list[str] | None = None) -> list[MacroDecl]:
    """Classify every user macro in a macro dump.

    Args:
        text: Output of the macro-dump pass
        prefixes: Optional name-prefix allowlist (empty or None keeps all)

    Returns:
        Macros in dump order
    """
    prefixes = prefixes or []
    macros = []
    dropped = 0

    for line in text.splitlines():
        if not line.strip():
            continue

        macro = parse_macro_line(line)
        if macro is None:
            dropped += 1
            continue

        if is_user_macro(macro.name, prefixes):
            macros.append(macro)

    if dropped:
        logger.debug(f"Skipped {dropped} unparsable macro lines")

    return macros
