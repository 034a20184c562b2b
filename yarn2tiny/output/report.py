"""
Yarn2Tiny Report Generator
===========================

Generates a structured JSON report from a :class:`ConversionReport`,
suitable for build pipelines that want to track warnings and unresolved
class references across mapping releases.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from yarn2tiny import __version__
from yarn2tiny.core.models import ConversionReport


class ConversionReportGenerator:
    """Serialises conversion reports to JSON."""

    def build(self, report: ConversionReport) -> dict[str, Any]:
        """Return the JSON-ready report document."""
        return {
            "report_type": "yarn2tiny_conversion",
            "version": __version__,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "input_path": report.input_path,
            "output_path": report.output_path,
            "duration_seconds": report.duration_seconds,
            "rows": {
                "classes": report.class_count,
                "fields": report.field_count,
                "methods": report.method_count,
                "total": report.rows_converted,
            },
            "warning_count": report.warning_count,
            "warnings": [w.model_dump(mode="json") for w in report.warnings],
            "unresolved_classes": list(report.unresolved_classes),
            "duplicate_classes": list(report.duplicate_classes),
        }

    def to_json(self, report: ConversionReport) -> str:
        return json.dumps(self.build(report), indent=2, ensure_ascii=False, default=str)

    def generate_json(self, report: ConversionReport, output_path: str | Path) -> str:
        """Write the JSON report.

        Returns:
            The absolute path of the generated report.
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(report), encoding="utf-8")
        return str(path.resolve())
