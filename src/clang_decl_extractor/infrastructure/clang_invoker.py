#!/usr/bin/env python3

"""Clang frontend invocation.

Runs clang in one of two modes over a header:

- AST mode: ``clang <flags> -Xclang -ast-dump=json -fsyntax-only <header>``
- macro mode: ``clang <flags> -E -dM <header>``

Both modes share the include/define flags. Output streams are drained by
``subprocess.run`` (``communicate``), which reads stdout and stderr
concurrently, so a frontend writing tens of megabytes of JSON cannot block
on a full stderr pipe.
"""

import shlex
import subprocess
from enum import Enum

from ..domain.models import HeaderParserOptions
from ..exceptions import ToolInvocationError, ToolNotFoundError
from .config import get_config
from .logging import get_logger

logger = get_logger(__name__)


class ClangMode(Enum):
    """Supported frontend invocation modes."""

    AST_DUMP = "ast"
    MACRO_DUMP = "macros"

    def __str__(self) -> str:
        return self.value


MODE_FLAGS: dict[ClangMode, list[str]] = {
    ClangMode.AST_DUMP: ["-Xclang", "-ast-dump=json", "-fsyntax-only"],
    ClangMode.MACRO_DUMP: ["-E", "-dM"],
}


def build_clang_args(include_paths: list[str], defines: list[str]) -> list[str]:
    """Build the include/define flags shared by both passes."""
    args = [f"-I{include_path}" for include_path in include_paths]
    args.extend(f"-D{define}" for define in defines)
    return args


def build_command(options: HeaderParserOptions, mode: ClangMode) -> list[str]:
    """Build the full argument vector for one frontend pass.

    Args:
        options: Parser options (binary, include paths, defines, extra flags)
        mode: Which dump to request

    Returns:
        Argument vector, executable first
    """
    binary = options.clang_binary or get_config()["CLANG_BINARY"]
    command = [binary]
    command.extend(build_clang_args(options.include_paths, options.defines))
    command.extend(options.extra_args)
    command.extend(MODE_FLAGS[mode])
    command.append(options.header_file)
    return command


def run_clang(options: HeaderParserOptions, mode: ClangMode) -> str:
    """Run one frontend pass and return its standard output.

    Args:
        options: Parser options
        mode: AST dump or macro dump

    Returns:
        Captured standard output text

    Raises:
        ToolNotFoundError: If the frontend binary cannot be launched
        ToolInvocationError: If the frontend exits with a nonzero status
    """
    command = build_command(options, mode)
    printable = " ".join(shlex.quote(item) for item in command)

    if options.verbose:
        logger.debug(f"Running: {printable}")

    try:
        proc = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        raise ToolNotFoundError(
            f"Failed to run {command[0]}: {e}",
            command=command,
        ) from e

    if proc.returncode != 0:
        stderr = proc.stderr or ""
        if stderr.strip():
            message = stderr.strip()
        else:
            message = f"{command[0]} exited with code {proc.returncode}"
        raise ToolInvocationError(
            f"clang failed ({mode} pass): {message}",
            command=command,
            returncode=proc.returncode,
            stderr=stderr,
        )

    if options.verbose:
        logger.debug(f"clang {mode} pass completed, output: {len(proc.stdout)} bytes")

    return proc.stdout
