"""Tests for the tiny v1 writer."""

from __future__ import annotations

from pathlib import Path

import pytest

from yarn2tiny.core.errors import OutputPathError
from yarn2tiny.core.models import ClassEntry, MappingSet, MemberEntry, MemberKind
from yarn2tiny.output import tiny_writer
from yarn2tiny.output.tiny_writer import TinyV1Writer, format_header, iter_rows


def _mappings() -> MappingSet:
    return MappingSet(
        namespaces=["official", "intermediary", "named"],
        classes=[ClassEntry(obfuscated="a", intermediate="class_1", readable="Entity")],
        fields=[
            MemberEntry(
                kind=MemberKind.FIELD,
                owner="class_1",
                obfuscated="b",
                intermediate="field_1",
                readable="age",
                type_descriptor="I",
            )
        ],
        methods=[
            MemberEntry(
                kind=MemberKind.METHOD,
                owner="class_1",
                obfuscated="c",
                intermediate="method_1",
                readable="tick",
                type_descriptor="()V",
            )
        ],
    )


def test_rows_drop_obfuscated_column() -> None:
    assert list(iter_rows(_mappings())) == [
        "v1\tintermediary\tnamed",
        "CLASS\tclass_1\tEntity",
        "FIELD\tclass_1\tI\tfield_1\tage",
        "METHOD\tclass_1\t()V\tmethod_1\ttick",
    ]


def test_header_without_enough_namespaces() -> None:
    assert format_header(MappingSet()) == "v1"
    assert format_header(MappingSet(namespaces=["official", "named"])) == "v1"


@pytest.mark.parametrize("atomic", [True, False])
def test_write_file(tmp_path: Path, atomic: bool) -> None:
    out = tmp_path / "out.tiny"
    rows = TinyV1Writer(atomic=atomic).write(_mappings(), out)
    assert rows == 3
    text = out.read_text(encoding="utf-8")
    assert text.endswith("tick\n")
    assert text.count("\n") == 4


def test_overwrites_existing_file(tmp_path: Path) -> None:
    out = tmp_path / "out.tiny"
    out.write_text("stale\n" * 100, encoding="utf-8")
    TinyV1Writer().write(_mappings(), out)
    assert "stale" not in out.read_text(encoding="utf-8")


def test_directory_destination_rejected(tmp_path: Path) -> None:
    with pytest.raises(OutputPathError):
        TinyV1Writer().write(_mappings(), tmp_path)


def test_failed_atomic_write_keeps_destination(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    out = tmp_path / "out.tiny"
    out.write_text("previous\n", encoding="utf-8")

    def _boom(mappings: MappingSet):
        yield "v1"
        raise OSError("disk full")

    monkeypatch.setattr(tiny_writer, "iter_rows", _boom)

    with pytest.raises(OutputPathError):
        TinyV1Writer().write(_mappings(), out)

    assert out.read_text(encoding="utf-8") == "previous\n"
    assert [p.name for p in tmp_path.iterdir()] == ["out.tiny"]


def test_unopenable_temp_file_is_removed(tmp_path: Path) -> None:
    out = tmp_path / "out.tiny"

    with pytest.raises(LookupError):
        TinyV1Writer(encoding="no-such-codec").write(_mappings(), out)

    assert list(tmp_path.iterdir()) == []
