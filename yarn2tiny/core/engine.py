"""
Yarn2Tiny Conversion Engine
============================

Orchestrates the conversion of a yarn v1 mappings file into a tiny v1
mappings file.

The pipeline is strictly sequential and works on the whole file in
memory:

    1. Validate the input path and read every row.
    2. Build the class symbol table from the class rows.
    3. Rewrite member owners to their intermediate class names.
    4. Remap field descriptors and method descriptors that reference
       classes.
    5. Write the tiny v1 file.

Nothing is written until step 4 has completed, so a malformed descriptor
aborts the run before the destination is touched.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from shared.config import RemapConfig
from shared.logger import RemapLogger

from yarn2tiny.core.errors import InputPathError
from yarn2tiny.core.models import ConversionReport, MappingSet, RowWarning
from yarn2tiny.core.remapper import DescriptorRemapper
from yarn2tiny.core.symbol_table import SymbolTable
from yarn2tiny.output.tiny_writer import TinyV1Writer
from yarn2tiny.parsers.descriptor import OBJECT_MARKER
from yarn2tiny.parsers.yarn_parser import YarnV1Parser


class ConversionEngine:
    """Runs the yarn -> tiny conversion pipeline.

    Usage::

        engine = ConversionEngine()
        report = engine.convert("mappings.yarn", "mappings.tiny")
        print(report.rows_converted, report.warning_count)
    """

    def __init__(
        self,
        config: RemapConfig | None = None,
        logger: RemapLogger | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config: Toolkit configuration.  Defaults are used if not provided.
            logger: Logger instance.  A new one is created if not provided.
        """
        self._config: RemapConfig = config or RemapConfig()
        self._logger: RemapLogger = logger or RemapLogger("yarn2tiny.engine")
        converter = self._config.converter
        self._parser = YarnV1Parser(
            supported_version=converter.supported_version,
            encoding=converter.input_encoding,
        )
        self._writer = TinyV1Writer(
            encoding=converter.output_encoding,
            atomic=converter.atomic_write,
        )

    # ------------------------------------------------------------------ #
    #  Main entry point
    # ------------------------------------------------------------------ #

    def convert(
        self,
        input_path: str | Path,
        output_path: str | Path,
    ) -> ConversionReport:
        """Convert *input_path* into *output_path*.

        Returns:
            The conversion report.

        Raises:
            ConversionError: On any fatal condition; nothing is written to
                *output_path* in that case.
        """
        report = ConversionReport(
            input_path=str(input_path),
            output_path=str(output_path),
        )

        with self._logger.timed(f"conversion of {input_path}"):
            mappings, warnings = self.load(input_path)
            report.warnings = warnings

            table = self.build_symbol_table(mappings)
            report.duplicate_classes = table.duplicates

            remapper = self.remap(mappings, table)
            report.unresolved_classes = remapper.unresolved

            self.write(mappings, output_path)

        report.class_count = len(mappings.classes)
        report.field_count = len(mappings.fields)
        report.method_count = len(mappings.methods)
        report.finished_at = datetime.now(timezone.utc)

        self._logger.info(
            "Written %d rows of tiny mappings with %d warnings",
            report.rows_converted,
            report.warning_count,
        )
        return report

    # ------------------------------------------------------------------ #
    #  Pipeline stages
    # ------------------------------------------------------------------ #

    def load(self, input_path: str | Path) -> tuple[MappingSet, list[RowWarning]]:
        """Validate *input_path* and read all rows from it.

        Raises:
            InputPathError: If the path is missing or a directory.
            UnsupportedVersionError: If the header is not supported.
        """
        path = Path(input_path)
        if not path.exists():
            raise InputPathError(f"Yarn mappings file does not exist: {path}")
        if path.is_dir():
            raise InputPathError(f"Yarn mappings file is a directory: {path}")

        with self._logger.operation("ingest"):
            self._logger.info("Parsing yarn mappings from %s", path)
            mappings, warnings = self._parser.parse_file(path)
            for warning in warnings:
                self._logger.warning(
                    "Line %d skipped: %s [%s]",
                    warning.line_number,
                    warning.message,
                    warning.line,
                )
            self._logger.info(
                "Parsed %d lines of yarn mappings (%d classes, %d fields, %d methods)",
                mappings.row_count,
                len(mappings.classes),
                len(mappings.fields),
                len(mappings.methods),
            )
        return mappings, warnings

    def build_symbol_table(self, mappings: MappingSet) -> SymbolTable:
        table = SymbolTable.from_entries(mappings.classes)
        for name in table.duplicates:
            self._logger.debug("Duplicate class row for %s; first row wins", name)
        return table

    def remap(self, mappings: MappingSet, table: SymbolTable) -> DescriptorRemapper:
        """Rewrite owners and descriptors of every member in place.

        Raises:
            DescriptorError: If a descriptor cannot be parsed.
        """
        remapper = DescriptorRemapper(table)

        with self._logger.operation("remap"):
            for member in mappings.members:
                member.owner = table.resolve(member.owner)

            for field in mappings.fields:
                if OBJECT_MARKER in field.type_descriptor:
                    field.type_descriptor = remapper.field_type(field.type_descriptor)

            for method in mappings.methods:
                if OBJECT_MARKER in method.type_descriptor:
                    method.type_descriptor = remapper.method_type(method.type_descriptor)

            if remapper.unresolved:
                self._logger.debug(
                    "%d referenced classes have no class row",
                    len(remapper.unresolved),
                )
        return remapper

    def write(self, mappings: MappingSet, output_path: str | Path) -> int:
        """Write the tiny v1 file and return the number of rows written."""
        with self._logger.operation("write"):
            self._logger.info("Writing tiny mappings to %s", output_path)
            return self._writer.write(mappings, Path(output_path))
