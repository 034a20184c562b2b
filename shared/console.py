"""
TinyRemap Console Interface
============================

Rich-powered console abstraction providing a unified presentation layer
for every TinyRemap tool.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages, tables, and
status spinners -- all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all TinyRemap output
# ---------------------------------------------------------------------------
_REMAP_THEME = Theme(
    {
        "remap.banner": "bold bright_cyan",
        "remap.section": "bold bright_magenta",
        "remap.success": "bold green",
        "remap.warning": "bold yellow",
        "remap.error": "bold red",
        "remap.info": "bold bright_blue",
        "remap.dim": "dim white",
        "remap.highlight": "bold bright_white",
    }
)

_TAGLINE = "Obfuscation mapping conversion toolkit"


class RemapConsole:
    """Unified console interface for all TinyRemap tools.

    Usage::

        con = RemapConsole()
        con.banner("yarn2tiny")
        con.section("Conversion")
        con.success("Conversion complete")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text export.
        """
        self._console = Console(
            theme=_REMAP_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    # ------------------------------------------------------------------ #
    #  Banner / section header
    # ------------------------------------------------------------------ #

    def banner(self, tool: str, version: str = "1.0.0") -> None:
        """Display a compact banner panel naming the tool."""
        body = (
            f"[remap.banner]{escape(tool)}[/remap.banner]\n"
            f"[remap.dim]{_TAGLINE}  |  Version: {escape(version)}[/remap.dim]"
        )
        self._console.print(
            Panel(body, border_style="bright_cyan", padding=(0, 2), expand=False)
        )

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {escape(title)}  ",
            style="remap.section",
            characters="─",
        )

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[remap.success][✔] SUCCESS:[/remap.success] {escape(message)}"
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[remap.warning][⚠] WARNING:[/remap.warning] {escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[remap.error][✘] ERROR:[/remap.error] {escape(message)}"
        )

    def info(self, message: str) -> None:
        """Print an informational message."""
        self._console.print(
            f"[remap.info][ℹ] INFO:[/remap.info] {escape(message)}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(escape(str(cell)) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(
        self, message: str = "Working..."
    ) -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message."""
        with self._console.status(
            f"[remap.info]{escape(message)}[/remap.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
