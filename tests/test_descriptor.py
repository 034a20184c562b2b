"""Tests for the JVM descriptor grammar scanner and its consumers."""

from __future__ import annotations

import pytest

from yarn2tiny.core.errors import ConversionError, DescriptorError
from yarn2tiny.parsers.descriptor import (
    FieldType,
    Token,
    TokenKind,
    class_names,
    is_valid_method_type,
    parse_field_type,
    parse_method_type,
    scan_field_type,
    scan_method_type,
)


class TestScanner:
    """Token stream produced by the scanner."""

    def test_method_token_stream(self) -> None:
        tokens = list(scan_method_type("([Lfoo/Bar;I)V"))
        assert tokens == [
            Token(TokenKind.PARAMETERS, 0),
            Token(TokenKind.ARRAY, 1),
            Token(TokenKind.CLASS_TYPE, 2, "foo/Bar"),
            Token(TokenKind.BASE_TYPE, 11, "I"),
            Token(TokenKind.RETURN, 12),
            Token(TokenKind.BASE_TYPE, 13, "V"),
            Token(TokenKind.END, 14),
        ]

    def test_field_token_stream(self) -> None:
        kinds = [t.kind for t in scan_field_type("[[J")]
        assert kinds == [
            TokenKind.ARRAY,
            TokenKind.ARRAY,
            TokenKind.BASE_TYPE,
            TokenKind.END,
        ]


class TestParseMethodType:
    """Structured results of parse_method_type."""

    def test_parameters_and_return(self) -> None:
        method = parse_method_type("(Lfoo/Bar;I)Lfoo/Baz;")
        assert method.parameter_descriptors == ("Lfoo/Bar;", "I")
        assert method.return_descriptor == "Lfoo/Baz;"

    def test_no_parameters(self) -> None:
        method = parse_method_type("()V")
        assert method.parameters == ()
        assert method.return_type == FieldType(0, base="V")

    def test_array_dimensions_tracked_per_type(self) -> None:
        method = parse_method_type("([[I[Lfoo/Bar;J)[[[Lfoo/Baz;")
        assert [p.dimensions for p in method.parameters] == [2, 1, 0]
        assert method.parameter_descriptors == ("[[I", "[Lfoo/Bar;", "J")
        assert method.return_type.dimensions == 3
        assert method.return_type.class_name == "foo/Baz"

    @pytest.mark.parametrize(
        "signature",
        [
            "()V",
            "(ZCBSIFJD)V",
            "(Ljava/lang/String;[[I)[Ljava/lang/Object;",
            "([[[Lnet/minecraft/class_1;Lnet/minecraft/class_2$class_3;)Z",
            "(IJLfoo;)[D",
        ],
    )
    def test_reassembly_reproduces_input(self, signature: str) -> None:
        assert parse_method_type(signature).descriptor == signature

    def test_inner_class_names_are_kept_whole(self) -> None:
        method = parse_method_type("(Lfoo/Outer$Inner;)V")
        assert method.parameters[0].class_name == "foo/Outer$Inner"


class TestParseFieldType:
    def test_object_field(self) -> None:
        field = parse_field_type("Lfoo/Bar;")
        assert field.is_object
        assert field.class_name == "foo/Bar"
        assert field.dimensions == 0

    def test_primitive_array_field(self) -> None:
        field = parse_field_type("[[B")
        assert not field.is_object
        assert field.descriptor == "[[B"

    def test_with_class_name_keeps_dimensions(self) -> None:
        field = parse_field_type("[[Lfoo/Bar;").with_class_name("a/B")
        assert field.descriptor == "[[La/B;"

    def test_trailing_characters_rejected(self) -> None:
        with pytest.raises(DescriptorError):
            parse_field_type("II")


class TestMalformedSignatures:
    """Every grammar violation is a fatal DescriptorError."""

    def test_missing_semicolon_and_paren(self) -> None:
        with pytest.raises(DescriptorError) as info:
            parse_method_type("(Lfoo/Bar")
        assert info.value.reason == "unterminated class name"
        assert info.value.descriptor == "(Lfoo/Bar"

    @pytest.mark.parametrize(
        "signature",
        [
            "",
            "I)V",
            "(I",
            "(I)",
            "(Q)V",
            "(I)V;",
            "(I)VV",
            "(V)V",
            "()[V",
            "(L;)V",
            "([)V",
        ],
    )
    def test_rejected(self, signature: str) -> None:
        with pytest.raises(DescriptorError):
            parse_method_type(signature)

    def test_descriptor_error_is_conversion_error(self) -> None:
        with pytest.raises(ConversionError):
            parse_method_type("(Lfoo/Bar")

    def test_error_reports_position(self) -> None:
        with pytest.raises(DescriptorError) as info:
            parse_method_type("(IQ)V")
        assert info.value.position == 2


class TestConsumers:
    def test_is_valid_method_type(self) -> None:
        assert is_valid_method_type("(Lfoo/Bar;I)Lfoo/Baz;")
        assert not is_valid_method_type("(Lfoo/Bar")
        assert not is_valid_method_type("Lfoo/Bar;")

    def test_class_names_in_order(self) -> None:
        assert class_names("(Lfoo/Bar;I[Lfoo/Qux;)Lfoo/Baz;") == [
            "foo/Bar",
            "foo/Qux",
            "foo/Baz",
        ]

    def test_class_names_primitive_only(self) -> None:
        assert class_names("(IJ)V") == []
