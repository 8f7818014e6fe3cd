#!/usr/bin/env python3

"""Infrastructure layer for technical concerns."""

from . import config, logging
from .clang_invoker import ClangMode, build_command, run_clang

__all__ = [
    "ClangMode",
    "build_command",
    "config",
    "logging",
    "run_clang",
]
