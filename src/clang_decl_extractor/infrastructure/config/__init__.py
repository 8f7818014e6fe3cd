#!/usr/bin/env python3

"""Infrastructure configuration module."""

from .application_config import Config
from .clang_config import get_config, get_extra_args

__all__ = ["Config", "get_config", "get_extra_args"]
