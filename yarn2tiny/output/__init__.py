"""
Yarn2Tiny Output
=================

Tiny v1 writer, console display, and JSON report generation.
"""

from yarn2tiny.output.console import ConversionConsoleOutput
from yarn2tiny.output.report import ConversionReportGenerator
from yarn2tiny.output.tiny_writer import TinyV1Writer

__all__ = [
    "ConversionConsoleOutput",
    "ConversionReportGenerator",
    "TinyV1Writer",
]
