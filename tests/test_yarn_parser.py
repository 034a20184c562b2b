"""Tests for the yarn v1 row reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from yarn2tiny.core.errors import UnsupportedVersionError
from yarn2tiny.core.models import MemberKind
from yarn2tiny.parsers.yarn_parser import YarnV1Parser

from tests.conftest import SAMPLE_YARN


def test_parses_all_row_kinds() -> None:
    mappings, warnings = YarnV1Parser().parse_string(SAMPLE_YARN)
    assert warnings == []
    assert mappings.namespaces == ["official", "intermediary", "named"]
    assert [c.obfuscated for c in mappings.classes] == ["a", "b"]
    assert len(mappings.fields) == 3
    assert len(mappings.methods) == 3

    method = mappings.methods[0]
    assert method.kind is MemberKind.METHOD
    assert method.owner == "a"
    assert method.type_descriptor == "(Lb;I)[La;"
    assert (method.obfuscated, method.intermediate, method.readable) == (
        "f",
        "method_1",
        "spawn",
    )
    assert method.line_number == 7


def test_short_field_row_warns_and_is_dropped() -> None:
    text = "v1\nCLASS\ta\tclass_1\tEntity\nFIELD\ta\tI\tb\nFIELD\ta\tI\tc\tfield_1\tage\n"
    mappings, warnings = YarnV1Parser().parse_string(text)
    assert len(warnings) == 1
    assert warnings[0].line_number == 3
    assert "got 4 while expected at least 6" in warnings[0].message
    assert [f.obfuscated for f in mappings.fields] == ["c"]
    assert mappings.row_count == 2


def test_short_class_row_warns() -> None:
    _, warnings = YarnV1Parser().parse_string("v1\nCLASS\ta\tclass_1\n")
    assert len(warnings) == 1
    assert "expected at least 4" in warnings[0].message


def test_unknown_tag_warns() -> None:
    mappings, warnings = YarnV1Parser().parse_string("v1\nPACKAGE\ta\tb\tc\n")
    assert len(warnings) == 1
    assert "Unknown mapping type 'PACKAGE'" in warnings[0].message
    assert warnings[0].line == "PACKAGE\ta\tb\tc"
    assert mappings.row_count == 0


def test_blank_lines_are_ignored() -> None:
    _, warnings = YarnV1Parser().parse_string("v1\n\n   \nCLASS\ta\tb\tc\n\n")
    assert warnings == []


def test_extra_columns_are_ignored() -> None:
    mappings, _ = YarnV1Parser().parse_string("v1\nCLASS\ta\tb\tc\textra\n")
    assert mappings.classes[0].readable == "c"


@pytest.mark.parametrize("header", ["v2\tofficial", "tiny\t2\t0", "CLASS\ta\tb\tc"])
def test_unsupported_header_is_fatal(header: str) -> None:
    with pytest.raises(UnsupportedVersionError):
        YarnV1Parser().parse_string(f"{header}\nCLASS\ta\tb\tc\n")


def test_empty_input_is_fatal() -> None:
    with pytest.raises(UnsupportedVersionError):
        YarnV1Parser().parse_string("")


def test_header_without_namespaces() -> None:
    mappings, _ = YarnV1Parser().parse_string("v1\n")
    assert mappings.namespaces == []


def test_parse_file_strips_crlf(tmp_path: Path) -> None:
    path = tmp_path / "yarn.v1"
    path.write_bytes(b"v1\tofficial\tintermediary\tnamed\r\nCLASS\ta\tb\tc\r\n")
    mappings, warnings = YarnV1Parser().parse_file(path)
    assert warnings == []
    assert mappings.classes[0].readable == "c"
    assert mappings.namespaces[-1] == "named"


@pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\u2028", "\x85"])
def test_parse_string_splits_like_parse_file(separator: str, tmp_path: Path) -> None:
    text = f"v1\nCLASS\ta\tclass_1\tA{separator}B\n"
    path = tmp_path / "mappings.v1"
    path.write_text(text, encoding="utf-8", newline="")

    from_string, _ = YarnV1Parser().parse_string(text)
    from_file, _ = YarnV1Parser().parse_file(path)

    assert from_string.classes[0].readable == f"A{separator}B"
    assert from_string == from_file


def test_parse_string_accepts_crlf_and_cr() -> None:
    mappings, warnings = YarnV1Parser().parse_string(
        "v1\r\nCLASS\ta\tclass_1\tA\rCLASS\tb\tclass_2\tB\r\n"
    )
    assert warnings == []
    assert [entry.obfuscated for entry in mappings.classes] == ["a", "b"]
