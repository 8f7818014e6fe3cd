"""Tests for the command line entry point."""

import importlib
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from clang_decl_extractor.domain.models.declarations import (
    FunctionDecl,
    MacroDecl,
    SimpleValue,
    StructDecl,
)
from clang_decl_extractor.exceptions import ToolInvocationError
from clang_decl_extractor.main import main, parse_args

# The package re-exports main(), shadowing the submodule attribute
main_module = importlib.import_module("clang_decl_extractor.main")

DECLARATIONS = [
    StructDecl(name="Foo"),
    FunctionDecl(name="device_init", return_type="void"),
    MacroDecl(name="DEVICE_REVISION", macro_kind=SimpleValue("3"), raw_value="3"),
]


@pytest.fixture
def header(clean_env: Path) -> Path:
    path = clean_env / "device.h"
    path.write_text("void device_init(void);\n")
    return path


@pytest.mark.unit
def test_parse_args_repeatable_flags() -> None:
    args = parse_args(
        ["dev.h", "-I", "a", "-I", "b", "-D", "X=1", "--macro-prefix", "GPIO", "--no-macros", "-v"]
    )

    assert args.header_file == Path("dev.h")
    assert args.include_paths == ["a", "b"]
    assert args.defines == ["X=1"]
    assert args.macro_prefixes == ["GPIO"]
    assert args.no_macros is True
    assert args.group_namespaces is False
    assert args.verbose is True
    assert args.output is None


@pytest.mark.unit
def test_main_success_writes_json(header: Path, reset_logging) -> None:
    with patch.object(main_module, "parse_header", return_value=DECLARATIONS) as parse_header:
        with pytest.raises(SystemExit) as exc_info:
            main([str(header), "-I", "include", "--no-macros", "-o", "out"])

    assert exc_info.value.code == 0

    options = parse_header.call_args.args[0]
    assert options.header_file == str(header)
    assert options.include_paths == ["include"]
    assert options.include_macros is False

    document = json.loads((header.parent / "out" / "device.decls.json").read_text(encoding="utf-8"))
    assert [d["kind"] for d in document["declarations"]] == ["struct", "function", "macro"]


@pytest.mark.unit
def test_main_summary_only(header: Path, reset_logging, capsys) -> None:
    with patch.object(main_module, "parse_header", return_value=DECLARATIONS):
        with pytest.raises(SystemExit) as exc_info:
            main([str(header)])

    assert exc_info.value.code == 0
    assert not (header.parent / "out").exists()
    assert "Total: 3" in capsys.readouterr().out


@pytest.mark.unit
def test_main_parse_failure(header: Path, reset_logging) -> None:
    error = ToolInvocationError("clang failed (ast pass): fatal error", returncode=1)

    with patch.object(main_module, "parse_header", side_effect=error):
        with pytest.raises(SystemExit) as exc_info:
            main([str(header)])

    assert exc_info.value.code == 1


@pytest.mark.unit
def test_main_missing_header(clean_env: Path, capsys) -> None:
    with patch.object(main_module, "parse_header") as parse_header:
        with pytest.raises(SystemExit) as exc_info:
            main([str(clean_env / "missing.h")])

    assert exc_info.value.code == 1
    assert "Configuration error" in capsys.readouterr().err
    parse_header.assert_not_called()


@pytest.mark.unit
def test_main_header_from_env(header: Path, reset_logging, monkeypatch) -> None:
    monkeypatch.setenv("HEADER_FILE", str(header))
    monkeypatch.setenv("MACRO_PREFIXES", "DEVICE_")

    with patch.object(main_module, "parse_header", return_value=DECLARATIONS) as parse_header:
        with pytest.raises(SystemExit):
            main([])

    options = parse_header.call_args.args[0]
    assert options.header_file == str(header)
    assert options.macro_prefixes == ["DEVICE_"]
