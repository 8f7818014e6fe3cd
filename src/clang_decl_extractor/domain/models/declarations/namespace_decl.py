#!/usr/bin/env python3

"""C++ namespace information model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from . import Declaration


@dataclass
class NamespaceDecl:
    """A namespace with the declarations found inside it."""

    kind: ClassVar[str] = "namespace"

    name: str
    declarations: list[Declaration] = field(default_factory=list)
