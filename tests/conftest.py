"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from clang_decl_extractor.domain.services.parsing.tree_decoder import AstNode, build_tree
from clang_decl_extractor.infrastructure.logging import LoggerSetup


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return the directory holding captured clang output."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def device_ast_text(fixtures_dir: Path) -> str:
    """AST dump of device.h, which includes include/common.h."""
    return (fixtures_dir / "device_header.ast.json").read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def device_macro_text(fixtures_dir: Path) -> str:
    """Macro dump of device.h."""
    return (fixtures_dir / "device_header.macros.txt").read_text(encoding="utf-8")


@pytest.fixture
def make_tree() -> Callable[[dict[str, Any]], AstNode]:
    """Build an AstNode tree from a clang-shaped dict."""

    def _make(obj: dict[str, Any]) -> AstNode:
        return build_tree(obj)

    return _make


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear configuration variables and run from an empty directory."""
    for name in (
        "HEADER_FILE",
        "OUTPUT_DIR",
        "INCLUDE_PATHS",
        "DEFINES",
        "MACRO_PREFIXES",
        "INCLUDE_MACROS",
        "GROUP_NAMESPACES",
        "VERBOSE",
        "LOG_DIR",
        "CLANG_BINARY",
        "CLANG_EXTRA_ARGS",
        "CLANG_LOG_SLOW_PASS_MS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def reset_logging() -> Any:
    """Undo LoggerSetup.initialize() after a test."""
    yield
    LoggerSetup.reset()
