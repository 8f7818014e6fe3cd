#!/usr/bin/env python3

"""Header parsing entry points."""

from .header_parser import (
    ParseResult,
    parse,
    parse_cmsis,
    parse_header,
    parse_header_full,
    parse_with_defines,
    run_ast_pass,
    run_macro_pass,
)

__all__ = [
    "ParseResult",
    "parse",
    "parse_cmsis",
    "parse_header",
    "parse_header_full",
    "parse_with_defines",
    "run_ast_pass",
    "run_macro_pass",
]
