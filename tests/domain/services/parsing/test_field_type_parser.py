"""Tests for field and signature type parsing."""

import pytest

from clang_decl_extractor.domain.services.parsing.field_type_parser import (
    extract_return_type,
    is_anonymous_type,
    parse_field_type,
)


class TestParseFieldType:
    """Tests for parse_field_type()."""

    @pytest.mark.unit
    def test_plain_type(self) -> None:
        field = parse_field_type("int", name="a")
        assert field.name == "a"
        assert field.type_name == "int"
        assert not field.is_volatile
        assert not field.is_const
        assert not field.is_array
        assert field.array_size is None

    @pytest.mark.unit
    def test_volatile_register(self) -> None:
        field = parse_field_type("volatile uint32_t")
        assert field.is_volatile
        assert not field.is_const
        assert field.type_name == "uint32_t"

    @pytest.mark.unit
    def test_read_only_register(self) -> None:
        field = parse_field_type("const volatile uint32_t")
        assert field.is_volatile
        assert field.is_const
        assert field.type_name == "uint32_t"

    @pytest.mark.unit
    def test_hardware_access_spellings(self) -> None:
        """Test CMSIS __I/__O/__IO spellings set the access flags."""
        read_only = parse_field_type("__I uint32_t")
        write_only = parse_field_type("__O uint32_t")
        read_write = parse_field_type("__IO uint32_t")

        assert read_only.is_const and read_only.is_volatile
        assert write_only.is_volatile and not write_only.is_const
        assert read_write.is_volatile and not read_write.is_const
        assert read_write.type_name == "uint32_t"

    @pytest.mark.unit
    def test_fixed_array(self) -> None:
        field = parse_field_type("uint32_t[4]", name="RESERVED")
        assert field.is_array
        assert field.array_size == 4
        assert field.type_name == "uint32_t"

    @pytest.mark.unit
    def test_volatile_array(self) -> None:
        field = parse_field_type("volatile uint8_t[16]")
        assert field.is_array
        assert field.array_size == 16
        assert field.is_volatile
        assert field.type_name == "uint8_t"

    @pytest.mark.unit
    def test_flexible_array_is_not_fixed(self) -> None:
        field = parse_field_type("char[]")
        assert not field.is_array
        assert field.type_name == "char[]"

    @pytest.mark.unit
    def test_qualifier_inside_identifier_is_ignored(self) -> None:
        """Test identifiers merely containing 'const' are not qualifiers."""
        field = parse_field_type("constant_t")
        assert not field.is_const
        assert field.type_name == "constant_t"

    @pytest.mark.unit
    def test_pointer_qualifiers_stripped(self) -> None:
        field = parse_field_type("const char *const")
        assert field.is_const
        assert field.type_name == "char *"


class TestSignatureHelpers:
    """Tests for return type and anonymous type detection."""

    @pytest.mark.unit
    def test_extract_return_type(self) -> None:
        assert extract_return_type("int (USART_TypeDef *, const char *)") == "int"
        assert extract_return_type("void (void)") == "void"
        assert extract_return_type("unsigned long") == "unsigned long"

    @pytest.mark.unit
    def test_is_anonymous_type(self) -> None:
        assert is_anonymous_type("struct (unnamed struct at regs.h:3:5)")
        assert is_anonymous_type("union (anonymous union at regs.h:9:5)")
        assert not is_anonymous_type("struct Point")
