#!/usr/bin/env python3

"""Parsing services for clang AST and macro dumps."""

from .declaration_extractor import DeclarationExtractor, extract_declarations
from .macro_classifier import classify_macros, is_user_macro, parse_macro_line
from .provenance_tracker import Provenance, ProvenanceTracker
from .tree_decoder import AstNode, decode_ast

__all__ = [
    "AstNode",
    "DeclarationExtractor",
    "Provenance",
    "ProvenanceTracker",
    "classify_macros",
    "decode_ast",
    "extract_declarations",
    "is_user_macro",
    "parse_macro_line",
]
