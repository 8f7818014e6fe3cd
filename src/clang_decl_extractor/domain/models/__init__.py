#!/usr/bin/env python3

"""Domain models for the declaration extractor."""

from . import declarations
from .parser_options import HeaderParserOptions, default_options

__all__ = [
    "HeaderParserOptions",
    "declarations",
    "default_options",
]
