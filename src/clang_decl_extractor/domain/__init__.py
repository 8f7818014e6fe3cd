#!/usr/bin/env python3

"""Domain layer containing declaration models and parsing services."""

from . import models, services

__all__ = [
    "models",
    "services",
]
