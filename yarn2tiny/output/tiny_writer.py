"""
Tiny v1 Mapping Writer
=======================

Serialises a remapped :class:`MappingSet` in the tiny v1 layout: the
obfuscated column is dropped, so class rows carry ``intermediate`` and
``readable`` names and member rows carry ``owner``, ``type``,
``intermediate`` and ``readable``.

Output is written atomically by default: rows go to a temporary file in
the destination directory, which replaces the destination only after the
last row has been written.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterator, TextIO

from yarn2tiny.core.errors import OutputPathError
from yarn2tiny.core.models import ClassEntry, MappingSet, MemberEntry, MemberKind


def format_header(mappings: MappingSet) -> str:
    """Version tag followed by the surviving namespaces, if any."""
    if len(mappings.namespaces) < 3:
        return mappings.version
    return "\t".join([mappings.version, *mappings.namespaces[1:]])


def format_class_row(entry: ClassEntry) -> str:
    return "\t".join([MemberKind.CLASS.value, entry.intermediate, entry.readable])


def format_member_row(entry: MemberEntry) -> str:
    return "\t".join(
        [
            entry.kind.value,
            entry.owner,
            entry.type_descriptor,
            entry.intermediate,
            entry.readable,
        ]
    )


def iter_rows(mappings: MappingSet) -> Iterator[str]:
    """Yield the header and every row: classes, then fields, then methods."""
    yield format_header(mappings)
    for entry in mappings.classes:
        yield format_class_row(entry)
    for member in mappings.fields:
        yield format_member_row(member)
    for member in mappings.methods:
        yield format_member_row(member)


class TinyV1Writer:
    """Writes tiny v1 mapping files.

    Usage::

        writer = TinyV1Writer()
        rows = writer.write(mappings, Path("out.tiny"))
    """

    def __init__(self, encoding: str = "utf-8", atomic: bool = True) -> None:
        self.encoding = encoding
        self.atomic = atomic

    def write(self, mappings: MappingSet, output_path: Path) -> int:
        """Write *mappings* to *output_path*.

        Returns:
            Number of mapping rows written, header excluded.

        Raises:
            OutputPathError: If the destination is a directory or cannot
                be written.
        """
        output_path = Path(output_path)
        if output_path.is_dir():
            raise OutputPathError(f"Output path is a directory: {output_path}")

        try:
            if self.atomic:
                self._write_atomic(mappings, output_path)
            else:
                with open(output_path, "w", encoding=self.encoding, newline="\n") as fh:
                    self._write_rows(mappings, fh)
        except OSError as exc:
            raise OutputPathError(f"Cannot write {output_path}: {exc}") from exc

        return mappings.row_count

    def _write_rows(self, mappings: MappingSet, fh: TextIO) -> None:
        for row in iter_rows(mappings):
            fh.write(row)
            fh.write("\n")

    def _write_atomic(self, mappings: MappingSet, output_path: Path) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
        os.close(fd)
        try:
            with open(tmp_name, "w", encoding=self.encoding, newline="\n") as fh:
                self._write_rows(mappings, fh)
            # mkstemp creates 0600 files
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, output_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
