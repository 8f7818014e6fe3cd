"""Tests for declaration extraction over whole ASTs."""

import pytest

from clang_decl_extractor.domain.models.declarations import (
    ClassDecl,
    EnumDecl,
    FunctionDecl,
    NamespaceDecl,
    StructDecl,
    TypedefInfo,
)
from clang_decl_extractor.domain.services.parsing.declaration_extractor import (
    DeclarationExtractor,
    extract_declarations,
)
from clang_decl_extractor.domain.services.parsing.tree_decoder import decode_ast


def loc(offset: int, file: str | None = None, included_from: str | None = None) -> dict:
    location: dict = {"offset": offset, "line": 1, "col": 1, "tokLen": 1}
    if file is not None:
        location["file"] = file
    if included_from is not None:
        location["includedFrom"] = {"file": included_from}
    return location


def field(name: str, offset: int, qual_type: str = "int") -> dict:
    return {"kind": "FieldDecl", "loc": loc(offset), "name": name, "type": {"qualType": qual_type}}


@pytest.fixture
def cpp_tree(make_tree):
    """AST of lib.hpp: namespace hw { class Timer {...}; namespace { int helper(); } }."""
    return make_tree(
        {
            "kind": "TranslationUnitDecl",
            "loc": {},
            "range": {"begin": {}, "end": {}},
            "inner": [
                {
                    "kind": "NamespaceDecl",
                    "loc": loc(10, "other.hpp", included_from="lib.hpp"),
                    "name": "hw",
                    "inner": [
                        {
                            "kind": "FunctionDecl",
                            "loc": loc(20),
                            "name": "foreign",
                            "type": {"qualType": "void (void)"},
                        }
                    ],
                },
                {
                    "kind": "NamespaceDecl",
                    "loc": loc(30, "lib.hpp"),
                    "name": "hw",
                    "inner": [
                        {
                            "kind": "CXXRecordDecl",
                            "loc": loc(40),
                            "name": "Timer",
                            "tagUsed": "class",
                            "inner": [
                                {"kind": "CXXRecordDecl", "loc": loc(45), "name": "Timer", "isImplicit": True},
                                field("ticks_", 50),
                                {
                                    "kind": "CXXMethodDecl",
                                    "loc": loc(60),
                                    "name": "start",
                                    "type": {"qualType": "void ()"},
                                    "virtual": True,
                                },
                            ],
                        },
                        {
                            "kind": "NamespaceDecl",
                            "loc": loc(80),
                            "inner": [
                                {
                                    "kind": "FunctionDecl",
                                    "loc": loc(90),
                                    "name": "helper",
                                    "type": {"qualType": "int (void)"},
                                }
                            ],
                        },
                    ],
                },
            ],
        }
    )


class TestExtractorOnCapturedDump:
    """Tests against the captured AST of device.h."""

    @pytest.mark.unit
    def test_declarations_in_source_order(self, device_ast_text: str) -> None:
        declarations = extract_declarations(decode_ast(device_ast_text), "device.h")

        assert [(type(d).__name__, d.name) for d in declarations] == [
            ("StructDecl", "Foo"),
            ("StructDecl", ""),
            ("TypedefInfo", "Point"),
            ("EnumDecl", "IRQn"),
            ("StructDecl", ""),
            ("TypedefInfo", "USART_TypeDef"),
            ("FunctionDecl", "usart_send"),
            ("FunctionDecl", "device_init"),
        ]

    @pytest.mark.unit
    def test_included_declarations_are_excluded(self, device_ast_text: str) -> None:
        names = {d.name for d in extract_declarations(decode_ast(device_ast_text), "device.h")}

        assert "CommonBase" not in names
        assert "common_t" not in names
        assert "__int128_t" not in names

    @pytest.mark.unit
    def test_declaration_contents(self, device_ast_text: str) -> None:
        declarations = extract_declarations(decode_ast(device_ast_text), "device.h")

        foo = declarations[0]
        assert isinstance(foo, StructDecl)
        assert [(f.name, f.type_name) for f in foo.fields] == [("a", "int"), ("b", "int")]

        point = declarations[2]
        assert isinstance(point, TypedefInfo)
        assert point.underlying_type == "struct Point"

        irqn = declarations[3]
        assert isinstance(irqn, EnumDecl)
        assert [(v.name, v.value) for v in irqn.values] == [
            ("SysTick_IRQn", -1),
            ("USART1_IRQn", 37),
            ("USART2_IRQn", 38),
        ]

        registers = {f.name: f for f in declarations[4].fields}
        assert registers["CR1"].is_volatile and not registers["CR1"].is_const
        assert registers["SR"].is_volatile and registers["SR"].is_const
        assert registers["SR"].type_name == "uint32_t"
        assert registers["RESERVED"].is_array
        assert registers["RESERVED"].array_size == 4

        send = declarations[6]
        assert isinstance(send, FunctionDecl)
        assert send.return_type == "int"
        assert send.parameters == [
            ("port", "USART_TypeDef *"),
            ("s", "const char *"),
            ("param", "unsigned int"),
        ]
        assert send.is_static and send.is_inline

    @pytest.mark.unit
    def test_extraction_is_deterministic(self, device_ast_text: str) -> None:
        root = decode_ast(device_ast_text)
        extractor = DeclarationExtractor("device.h")

        assert extractor.extract(root) == extractor.extract(root)


class TestNamespaces:
    """Tests for namespace flattening and grouping."""

    @pytest.mark.unit
    def test_namespaces_flattened_by_default(self, cpp_tree) -> None:
        declarations = extract_declarations(cpp_tree, "lib.hpp")

        assert [d.name for d in declarations] == ["Timer", "helper"]
        timer = declarations[0]
        assert isinstance(timer, ClassDecl)
        assert [m.name for m in timer.methods] == ["start"]
        assert [f.name for f in timer.fields] == ["ticks_"]

    @pytest.mark.unit
    def test_nested_class_nodes_not_duplicated(self, cpp_tree) -> None:
        """Test the implicit self-reference inside a class is not emitted."""
        names = [d.name for d in extract_declarations(cpp_tree, "lib.hpp")]
        assert names.count("Timer") == 1

    @pytest.mark.unit
    def test_namespaces_grouped(self, cpp_tree) -> None:
        declarations = extract_declarations(cpp_tree, "lib.hpp", group_namespaces=True)

        assert len(declarations) == 1
        namespace = declarations[0]
        assert isinstance(namespace, NamespaceDecl)
        assert namespace.name == "hw"
        # Anonymous namespace members are spliced into the enclosing namespace
        assert [d.name for d in namespace.declarations] == ["Timer", "helper"]

    @pytest.mark.unit
    def test_foreign_namespace_members_excluded(self, cpp_tree) -> None:
        names = [d.name for d in extract_declarations(cpp_tree, "lib.hpp")]
        assert "foreign" not in names


class TestProvenanceCarry:
    """Tests for file carry across node boundaries."""

    @pytest.mark.unit
    def test_skipped_subtree_stamps_still_advance(self, make_tree) -> None:
        """Test a file stamp inside a non-declaration node carries to later siblings."""
        root = make_tree(
            {
                "kind": "TranslationUnitDecl",
                "inner": [
                    {
                        "kind": "VarDecl",
                        "loc": loc(0, "main.h"),
                        "name": "table",
                        "inner": [
                            {
                                "kind": "InitListExpr",
                                "range": {
                                    "begin": loc(5),
                                    "end": loc(9, "other.h"),
                                },
                            }
                        ],
                    },
                    {
                        "kind": "FunctionDecl",
                        "loc": loc(12),
                        "name": "from_other",
                        "type": {"qualType": "void (void)"},
                    },
                ],
            }
        )

        assert extract_declarations(root, "main.h") == []

    @pytest.mark.unit
    def test_return_to_target_after_include(self, make_tree) -> None:
        root = make_tree(
            {
                "kind": "TranslationUnitDecl",
                "inner": [
                    {
                        "kind": "TypedefDecl",
                        "loc": loc(0, "inc.h", included_from="main.h"),
                        "name": "inc_t",
                        "type": {"qualType": "int"},
                    },
                    {
                        "kind": "TypedefDecl",
                        "loc": loc(3),
                        "name": "inc2_t",
                        "type": {"qualType": "int"},
                    },
                    {
                        "kind": "TypedefDecl",
                        "loc": loc(40, "main.h"),
                        "name": "main_t",
                        "type": {"qualType": "long"},
                    },
                ],
            }
        )

        assert [d.name for d in extract_declarations(root, "main.h")] == ["main_t"]

    @pytest.mark.unit
    def test_verbose_logs_processed_nodes(self, device_ast_text: str, caplog) -> None:
        with caplog.at_level("DEBUG"):
            extract_declarations(decode_ast(device_ast_text), "device.h", verbose=True)
        assert "Processing FunctionDecl: usart_send" in caplog.text
