#!/usr/bin/env python3

"""JSON export of extracted declarations.

Each declaration becomes an object tagged with its ``kind``; macros also
carry the ``shape`` of their classified right-hand side.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from ...domain.models.declarations import Declaration, MacroDecl, MacroKind, NamespaceDecl
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


def macro_kind_to_dict(macro_kind: MacroKind) -> dict[str, Any]:
    """Serialize a macro classification with its shape name."""
    return {"shape": type(macro_kind).__name__, **asdict(macro_kind)}


def declaration_to_dict(declaration: Declaration) -> dict[str, Any]:
    """Serialize one declaration to JSON-compatible data."""
    if isinstance(declaration, NamespaceDecl):
        return {
            "kind": declaration.kind,
            "name": declaration.name,
            "declarations": [declaration_to_dict(inner) for inner in declaration.declarations],
        }

    if isinstance(declaration, MacroDecl):
        return {
            "kind": declaration.kind,
            "name": declaration.name,
            "raw_value": declaration.raw_value,
            "macro_kind": macro_kind_to_dict(declaration.macro_kind),
        }

    return {"kind": declaration.kind, **asdict(declaration)}


def export_declarations(header_file: str, declarations: list[Declaration]) -> str:
    """Render declarations as a JSON document.

    Args:
        header_file: Header the declarations were extracted from
        declarations: Declarations in traversal order

    Returns:
        Indented JSON text
    """
    document = {
        "header": header_file,
        "declarations": [declaration_to_dict(declaration) for declaration in declarations],
    }
    return json.dumps(document, indent=2) + "\n"


def write_declarations(
    output_file: Path, header_file: str, declarations: list[Declaration]
) -> int:
    """Write the JSON document to a file and return its size in bytes."""
    content = export_declarations(header_file, declarations)
    output_file.write_text(content, encoding="utf-8")
    logger.debug(f"Wrote {len(declarations)} declarations to {output_file}")
    return len(content.encode("utf-8"))
