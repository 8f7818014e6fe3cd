"""Exporters for extracted declarations."""

from .json_exporter import (
    declaration_to_dict,
    export_declarations,
    macro_kind_to_dict,
    write_declarations,
)

__all__ = [
    "declaration_to_dict",
    "export_declarations",
    "macro_kind_to_dict",
    "write_declarations",
]
