#!/usr/bin/env python3

"""Options controlling a single header parse."""

from dataclasses import dataclass, field


@dataclass
class HeaderParserOptions:
    """Options for parsing a C/C++ header file."""

    header_file: str
    """Path to the header file to parse"""

    include_paths: list[str] = field(default_factory=list)
    """Additional include paths for resolving #include directives"""

    defines: list[str] = field(default_factory=list)
    """Preprocessor definitions (e.g. ["DEBUG", "STM32L552xx"])"""

    verbose: bool = False

    include_macros: bool = True
    """Run the preprocessor macro pass (can be slow for large headers)"""

    macro_prefixes: list[str] = field(default_factory=list)
    """Only keep macros starting with one of these prefixes (empty = all)"""

    clang_binary: str | None = None
    """Frontend executable; None uses the CLANG_BINARY setting"""

    extra_args: list[str] = field(default_factory=list)
    """Flags passed to the frontend before the mode-specific flags"""

    group_namespaces: bool = False
    """Nest declarations found inside C++ namespaces into NamespaceDecl entries"""


def default_options(header_file: str) -> HeaderParserOptions:
    """Create default parser options for a header file."""
    return HeaderParserOptions(header_file=header_file)
