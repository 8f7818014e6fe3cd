"""Application configuration for the declaration extractor CLI."""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ...domain.models import HeaderParserOptions
from .clang_config import get_extra_args


def _split_list(value: str) -> list[str]:
    """Split an environment list on os.pathsep or commas."""
    separators = re.escape(os.pathsep) + ","
    return [item.strip() for item in re.split(f"[{separators}]", value) if item.strip()]


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Configuration for the declaration extractor."""

    header_file: Path | None
    output_dir: Path | None = None
    include_paths: list[str] = field(default_factory=list)
    defines: list[str] = field(default_factory=list)
    macro_prefixes: list[str] = field(default_factory=list)
    include_macros: bool = True
    group_namespaces: bool = False
    verbose: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        header_file_str = os.getenv("HEADER_FILE")
        output_dir_str = os.getenv("OUTPUT_DIR")

        return cls(
            header_file=Path(header_file_str) if header_file_str else None,
            output_dir=Path(output_dir_str) if output_dir_str else None,
            include_paths=_split_list(os.getenv("INCLUDE_PATHS", "")),
            defines=_split_list(os.getenv("DEFINES", "")),
            macro_prefixes=_split_list(os.getenv("MACRO_PREFIXES", "")),
            include_macros=_env_flag("INCLUDE_MACROS", True),
            group_namespaces=_env_flag("GROUP_NAMESPACES", False),
            verbose=_env_flag("VERBOSE", False),
            log_dir=Path(os.getenv("LOG_DIR", "logs")),
        )

    @classmethod
    def from_args(
        cls,
        header_file: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        include_paths: Optional[list[str]] = None,
        defines: Optional[list[str]] = None,
        macro_prefixes: Optional[list[str]] = None,
        include_macros: Optional[bool] = None,
        group_namespaces: Optional[bool] = None,
        verbose: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        List arguments extend the environment lists; scalar arguments override.

        Returns:
            Config object
        """
        config = cls.from_env()

        if header_file is not None:
            config.header_file = header_file
        if output_dir is not None:
            config.output_dir = output_dir
        if include_paths:
            config.include_paths = config.include_paths + list(include_paths)
        if defines:
            config.defines = config.defines + list(defines)
        if macro_prefixes:
            config.macro_prefixes = config.macro_prefixes + list(macro_prefixes)
        if include_macros is not None:
            config.include_macros = include_macros
        if group_namespaces is not None:
            config.group_namespaces = group_namespaces
        if verbose is not None:
            config.verbose = verbose

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.header_file is None:
            raise ValueError("No header file given (argument or HEADER_FILE)")

        if not self.header_file.exists():
            raise ValueError(f"Header file not found: {self.header_file}")

        if not self.header_file.is_file():
            raise ValueError(f"Not a file: {self.header_file}")

    def ensure_output_dir(self) -> None:
        """Create the output directory if one is configured."""
        if self.output_dir is not None:
            self.output_dir.mkdir(parents=True, exist_ok=True)

    def to_parser_options(self) -> HeaderParserOptions:
        """Build the pipeline options for the configured header."""
        if self.header_file is None:
            raise ValueError("No header file configured")

        return HeaderParserOptions(
            header_file=str(self.header_file),
            include_paths=list(self.include_paths),
            defines=list(self.defines),
            verbose=self.verbose,
            include_macros=self.include_macros,
            macro_prefixes=list(self.macro_prefixes),
            extra_args=get_extra_args(),
            group_namespaces=self.group_namespaces,
        )
