#!/usr/bin/env python3

"""Two-pass header parsing.

Pass 1 runs the AST dump and extracts structs, unions, enums, typedefs,
functions and classes; any failure there aborts the parse. Pass 2 runs the
macro dump and classifies the #defines; a failure there is downgraded to an
empty macro set.
"""

from dataclasses import dataclass, field
from pathlib import Path

from ...domain.models import HeaderParserOptions
from ...domain.models.declarations import Declaration, MacroDecl
from ...domain.services.parsing import classify_macros, decode_ast, extract_declarations
from ...exceptions import (
    EmptyResultError,
    HeaderNotFoundError,
    ToolInvocationError,
    TreeDecodeError,
)
from ...infrastructure.clang_invoker import ClangMode, run_clang
from ...infrastructure.config import get_config
from ...infrastructure.logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)


@dataclass
class ParseResult:
    """Declarations from the AST pass and macros from the macro pass."""

    declarations: list[Declaration] = field(default_factory=list)
    macros: list[MacroDecl] = field(default_factory=list)

    def all_declarations(self) -> list[Declaration]:
        """AST declarations followed by macros, in their original orders."""
        return [*self.declarations, *self.macros]


def run_ast_pass(
    options: HeaderParserOptions, tracker: ProgressTracker | None = None
) -> list[Declaration]:
    """Run the AST-dump pass and extract the header's declarations.

    Raises:
        ToolInvocationError: If clang cannot be run or fails
        TreeDecodeError: If the AST dump is malformed
    """
    text = run_clang(options, ClangMode.AST_DUMP)
    root = decode_ast(text)
    declarations = extract_declarations(
        root,
        options.header_file,
        verbose=options.verbose,
        group_namespaces=options.group_namespaces,
    )

    if tracker is not None:
        tracker.count_nodes(sum(1 for _ in root.iter_preorder()))
        tracker.count_declarations(len(declarations))

    if options.verbose:
        logger.debug(f"Extracted {len(declarations)} AST declarations")
    return declarations


def run_macro_pass(
    options: HeaderParserOptions, tracker: ProgressTracker | None = None
) -> list[MacroDecl]:
    """Run the macro-dump pass and classify the user macros.

    Raises:
        ToolInvocationError: If clang cannot be run or fails
    """
    text = run_clang(options, ClangMode.MACRO_DUMP)
    macros = classify_macros(text, options.macro_prefixes)

    if tracker is not None:
        tracker.count_declarations(len(macros))

    if options.verbose:
        logger.debug(f"Extracted {len(macros)} macros")
    return macros


def _run_macro_pass_or_empty(
    options: HeaderParserOptions, tracker: ProgressTracker
) -> list[MacroDecl]:
    try:
        return run_macro_pass(options, tracker)
    except (ToolInvocationError, TreeDecodeError) as e:
        if options.verbose:
            logger.warning(f"Failed to extract macros: {e}")
        else:
            logger.debug(f"Macro pass failed, continuing without macros: {e}")
        return []


@log_timing
def parse_header_full(options: HeaderParserOptions) -> ParseResult:
    """Parse a header and return its declarations and macros separately.

    Args:
        options: Parser options

    Returns:
        ParseResult; may be empty

    Raises:
        HeaderNotFoundError: If the header does not exist
        ToolInvocationError: If the AST pass cannot run or fails
        TreeDecodeError: If the AST dump is malformed
    """
    header = Path(options.header_file)
    if not header.is_file():
        raise HeaderNotFoundError(f"Header file not found: {options.header_file}")

    tracker = ProgressTracker(logger, slow_pass_ms=get_config()["LOG_SLOW_PASS_MS"])
    logger.debug(f"Parsing header: {options.header_file}")

    with tracker.track_operation("AST pass"):
        declarations = run_ast_pass(options, tracker)

    macros: list[MacroDecl] = []
    if options.include_macros:
        with tracker.track_operation("macro pass"):
            macros = _run_macro_pass_or_empty(options, tracker)

    if options.verbose:
        tracker.report_summary()

    return ParseResult(declarations=declarations, macros=macros)


def parse_header(options: HeaderParserOptions) -> list[Declaration]:
    """Parse a header into one ordered declaration list.

    Returns:
        AST declarations followed by macros

    Raises:
        EmptyResultError: If the header yields no declarations at all
    """
    result = parse_header_full(options)
    declarations = result.all_declarations()

    if not declarations:
        raise EmptyResultError(
            f"Parse succeeded but no declarations found in {Path(options.header_file).name}."
        )
    return declarations


def parse(header_file: str, include_paths: list[str], verbose: bool = False) -> list[Declaration]:
    """Parse a header with include paths and all macros."""
    options = HeaderParserOptions(
        header_file=header_file,
        include_paths=list(include_paths),
        verbose=verbose,
    )
    return parse_header(options)


def parse_with_defines(
    header_file: str,
    include_paths: list[str],
    defines: list[str],
    verbose: bool = False,
) -> list[Declaration]:
    """Parse a header with preprocessor defines (platform-specific headers)."""
    options = HeaderParserOptions(
        header_file=header_file,
        include_paths=list(include_paths),
        defines=list(defines),
        verbose=verbose,
    )
    return parse_header(options)


def parse_cmsis(
    header_file: str,
    include_paths: list[str],
    defines: list[str],
    verbose: bool = False,
) -> ParseResult:
    """Parse a CMSIS device header, keeping every macro (peripheral bases)."""
    options = HeaderParserOptions(
        header_file=header_file,
        include_paths=list(include_paths),
        defines=list(defines),
        verbose=verbose,
        include_macros=True,
        macro_prefixes=[],
    )
    return parse_header_full(options)
