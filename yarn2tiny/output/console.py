"""
Yarn2Tiny Console Output
=========================

Rich-based display of a :class:`ConversionReport`: row counts per kind,
the first warnings, unresolved class references, and a closing summary.
"""

from __future__ import annotations

from typing import Optional

from shared.console import RemapConsole
from yarn2tiny.core.models import ConversionReport


class ConversionConsoleOutput:
    """Console formatter for conversion reports.

    Usage::

        console = RemapConsole()
        ConversionConsoleOutput(console).display(report)
    """

    def __init__(
        self,
        console: Optional[RemapConsole] = None,
        max_warnings: int = 20,
    ) -> None:
        self.console = console or RemapConsole()
        self.max_warnings = max_warnings

    def display(self, report: ConversionReport) -> None:
        """Render the full report."""
        self.display_counts(report)
        if report.warnings:
            self.display_warnings(report)
        if report.unresolved_classes:
            self.console.info(
                f"{len(report.unresolved_classes)} referenced classes have no "
                f"class row and were kept unchanged"
            )
        if report.duplicate_classes:
            self.console.warning(
                f"{len(report.duplicate_classes)} obfuscated class names appear "
                f"more than once; the first row was used"
            )
        self.display_summary(report)

    def display_counts(self, report: ConversionReport) -> None:
        self.console.section("Tiny Mappings")
        self.console.table(
            "Rows written",
            ["Kind", "Rows"],
            [
                ("CLASS", f"{report.class_count:,}"),
                ("FIELD", f"{report.field_count:,}"),
                ("METHOD", f"{report.method_count:,}"),
                ("Total", f"{report.rows_converted:,}"),
            ],
            styles=["bold", "bright_white"],
        )

    def display_warnings(self, report: ConversionReport) -> None:
        shown = report.warnings[: self.max_warnings]
        caption = None
        if report.warning_count > len(shown):
            caption = f"{report.warning_count - len(shown)} more not shown"
        self.console.table(
            "Skipped rows",
            ["Line", "Reason"],
            [(w.line_number, w.message) for w in shown],
            caption=caption,
            styles=["dim", "yellow"],
        )

    def display_summary(self, report: ConversionReport) -> None:
        elapsed_ms = (report.duration_seconds or 0.0) * 1000
        message = (
            f"Converted {report.rows_converted:,} rows with "
            f"{report.warning_count} warnings in {elapsed_ms:.0f} ms"
        )
        if report.warning_count:
            self.console.warning(message)
        else:
            self.console.success(message)
