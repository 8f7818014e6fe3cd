#!/usr/bin/env python3

"""Application layer: parse orchestration and export."""

from . import exporters, parsers

__all__ = [
    "exporters",
    "parsers",
]
