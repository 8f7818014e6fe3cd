#!/usr/bin/env python3

"""Typedef information model."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class TypedefInfo:
    """Information about a typedef."""

    kind: ClassVar[str] = "typedef"

    name: str
    underlying_type: str
    documentation: str | None = None
