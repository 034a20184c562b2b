"""
Yarn v1 Mapping Parser
=======================

Reads a tab-separated yarn v1 mappings file into a :class:`MappingSet`.

Supported rows::

    v1<TAB>official<TAB>intermediary<TAB>named         (line 0, header)
    CLASS<TAB>obf<TAB>intermediate<TAB>readable
    FIELD<TAB>owner<TAB>desc<TAB>obf<TAB>intermediate<TAB>readable
    METHOD<TAB>owner<TAB>desc<TAB>obf<TAB>intermediate<TAB>readable

A header that does not start with the supported version tag is fatal.
Short rows and unknown tags are dropped with a :class:`RowWarning`;
blank lines are skipped.  Owners and descriptors are kept exactly as read.

References:
    - FabricMC. Yarn mappings, v1 tiny-style format.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable

from yarn2tiny.core.errors import UnsupportedVersionError
from yarn2tiny.core.models import (
    ClassEntry,
    MappingSet,
    MemberEntry,
    MemberKind,
    RowWarning,
)


# Minimum column counts per row tag
_REQUIRED_COLUMNS: dict[MemberKind, int] = {
    MemberKind.CLASS: 4,
    MemberKind.FIELD: 6,
    MemberKind.METHOD: 6,
}


class YarnV1Parser:
    """Parses yarn v1 mapping text into rows.

    Usage::

        parser = YarnV1Parser()
        mappings, warnings = parser.parse_file(Path("mappings.tiny"))
    """

    def __init__(self, supported_version: str = "v1", encoding: str = "utf-8") -> None:
        self.supported_version = supported_version
        self.encoding = encoding

    def parse_file(self, filepath: Path) -> tuple[MappingSet, list[RowWarning]]:
        """Parse a mappings file.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnsupportedVersionError: If the header is missing or unsupported.
        """
        with open(filepath, "r", encoding=self.encoding, newline="") as f:
            return self.parse_lines(f)

    def parse_string(self, text: str) -> tuple[MappingSet, list[RowWarning]]:
        """Parse in-memory text, splitting lines exactly as :meth:`parse_file` does."""
        return self.parse_lines(io.StringIO(text, newline=""))

    def parse_lines(self, lines: Iterable[str]) -> tuple[MappingSet, list[RowWarning]]:
        """Parse mapping lines; line terminators are stripped here.

        Raises:
            UnsupportedVersionError: If the header is missing or unsupported.
        """
        mappings = MappingSet(version=self.supported_version)
        warnings: list[RowWarning] = []
        header_seen = False

        for index, raw in enumerate(lines):
            line = raw.rstrip("\r\n")

            if index == 0:
                self._parse_header(line, mappings)
                header_seen = True
                continue

            if not line.strip():
                continue

            warning = self._parse_row(line, index + 1, mappings)
            if warning is not None:
                warnings.append(warning)

        if not header_seen:
            raise UnsupportedVersionError("", self.supported_version)

        return mappings, warnings

    # ------------------------------------------------------------------ #
    #  Row handlers
    # ------------------------------------------------------------------ #

    def _parse_header(self, line: str, mappings: MappingSet) -> None:
        if not line.startswith(self.supported_version):
            raise UnsupportedVersionError(line, self.supported_version)
        columns = line.split("\t")
        mappings.namespaces = [name for name in columns[1:] if name]

    def _parse_row(
        self,
        line: str,
        line_number: int,
        mappings: MappingSet,
    ) -> RowWarning | None:
        """Add one row to *mappings*; return a warning if it was dropped."""
        columns = line.split("\t")

        try:
            kind = MemberKind(columns[0])
        except ValueError:
            return RowWarning(
                line_number=line_number,
                message=f"Unknown mapping type {columns[0]!r}",
                line=line,
            )

        required = _REQUIRED_COLUMNS[kind]
        if len(columns) < required:
            return RowWarning(
                line_number=line_number,
                message=(
                    f"Column count mismatch, got {len(columns)} "
                    f"while expected at least {required}"
                ),
                line=line,
            )

        if kind is MemberKind.CLASS:
            mappings.classes.append(
                ClassEntry(
                    obfuscated=columns[1],
                    intermediate=columns[2],
                    readable=columns[3],
                )
            )
            return None

        member = MemberEntry(
            kind=kind,
            owner=columns[1],
            type_descriptor=columns[2],
            obfuscated=columns[3],
            intermediate=columns[4],
            readable=columns[5],
            line_number=line_number,
        )
        if kind is MemberKind.FIELD:
            mappings.fields.append(member)
        else:
            mappings.methods.append(member)
        return None
