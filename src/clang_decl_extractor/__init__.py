"""Clang Declaration Extractor - normalized declarations from C/C++ headers."""

from .application.parsers import (
    ParseResult,
    parse,
    parse_cmsis,
    parse_header,
    parse_header_full,
    parse_with_defines,
)
from .domain.models import HeaderParserOptions, default_options
from .infrastructure.config import Config
from .main import main

__all__ = [
    "Config",
    "HeaderParserOptions",
    "ParseResult",
    "default_options",
    "main",
    "parse",
    "parse_cmsis",
    "parse_header",
    "parse_header_full",
    "parse_with_defines",
]
