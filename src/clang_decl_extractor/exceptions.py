#!/usr/bin/env python3

"""Exceptions raised by the header parsing pipeline."""


class HeaderParseError(Exception):
    """Base class for every failure of the extraction pipeline."""


class HeaderNotFoundError(HeaderParseError):
    """The header passed to the pipeline does not exist."""


class ToolInvocationError(HeaderParseError):
    """The compiler frontend exited with a nonzero status.

    Attributes:
        command: Full argument vector that was executed
        returncode: Exit status of the frontend (None if it never started)
        stderr: Captured diagnostic text
    """

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr


class ToolNotFoundError(ToolInvocationError):
    """The compiler frontend binary could not be launched at all."""


class TreeDecodeError(HeaderParseError):
    """The AST dump could not be decoded into a node tree."""


class EmptyResultError(HeaderParseError):
    """A well-formed run produced no usable declarations."""
