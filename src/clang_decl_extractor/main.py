"""Main entry point for the clang declaration extractor."""

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import NoReturn

from .application.exporters import write_declarations
from .application.parsers import parse_header
from .exceptions import HeaderParseError
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing
from .utils.path_utils import create_output_filename


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract struct, enum, typedef, function, class and macro "
        "declarations from a C/C++ header using clang",
        epilog="""
Examples:
  # Summary of the declarations in a header
  python main.py include/device.h

  # Vendor header with include paths and defines, JSON written to out/
  python main.py stm32l552xx.h -I CMSIS/Include -D STM32L552xx -o out/

  # Only keep macros for two peripherals
  python main.py stm32l552xx.h --macro-prefix GPIO --macro-prefix RCC

  # C++ header with namespaces kept as groups
  python main.py api.hpp --group-namespaces --no-macros

  # Using .env file for configuration
  echo 'HEADER_FILE=include/device.h' > .env
  python main.py
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "header_file",
        type=Path,
        nargs="?",
        help="Path to the header to parse (optional if using .env)",
    )
    parser.add_argument(
        "-I",
        "--include",
        dest="include_paths",
        action="append",
        default=[],
        metavar="DIR",
        help="Add an include search path (repeatable)",
    )
    parser.add_argument(
        "-D",
        "--define",
        dest="defines",
        action="append",
        default=[],
        metavar="NAME[=VALUE]",
        help="Add a preprocessor definition (repeatable)",
    )
    parser.add_argument(
        "--macro-prefix",
        dest="macro_prefixes",
        action="append",
        default=[],
        metavar="PREFIX",
        help="Only keep macros starting with PREFIX (repeatable)",
    )
    parser.add_argument(
        "--no-macros",
        action="store_true",
        help="Skip the preprocessor macro pass",
    )
    parser.add_argument(
        "--group-namespaces",
        action="store_true",
        help="Nest declarations inside their C++ namespaces",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Directory for the <header>.decls.json output (default: summary only)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for header declaration extraction."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            header_file=args.header_file,
            output_dir=args.output,
            include_paths=args.include_paths,
            defines=args.defines,
            macro_prefixes=args.macro_prefixes,
            include_macros=False if args.no_macros else None,
            group_namespaces=True if args.group_namespaces else None,
            verbose=True if args.verbose else None,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    logger.debug(f"Header file: {config.header_file}")
    logger.debug(f"Include paths: {config.include_paths}")
    logger.debug(f"Defines: {config.defines}")

    options = config.to_parser_options()

    try:
        declarations = parse_header(options)
    except HeaderParseError as e:
        logger.error(f"[FAILED] {config.header_file}: {e}")
        sys.exit(1)

    counts = Counter(declaration.kind for declaration in declarations)
    logger.info("=" * 70)
    logger.info(f"DECLARATIONS IN {options.header_file}")
    logger.info("=" * 70)
    for kind, count in sorted(counts.items()):
        logger.info(f"  {kind}: {count}")
    logger.info(f"Total: {len(declarations)}")

    if config.output_dir is not None:
        config.ensure_output_dir()
        output_file = config.output_dir / create_output_filename(options.header_file)
        size = write_declarations(output_file, options.header_file, declarations)
        logger.info(f"[SUCCESS] Generated: {output_file} ({size} bytes)")

    sys.exit(0)


if __name__ == "__main__":
    main()
