"""
Yarn2Tiny CLI -- Mapping Format Converter
==========================================

Click-based command-line interface for converting yarn v1 mappings into
tiny v1 mappings.

Usage::

    # Convert
    yarn2tiny mappings.yarn mappings.tiny

    # Also write a JSON conversion report
    yarn2tiny mappings.yarn mappings.tiny --report report.json

    # Print the report as JSON instead of the console summary
    yarn2tiny mappings.yarn mappings.tiny --json

Exit status is 0 on success (warnings included), 1 when the conversion
is aborted, and 130 when interrupted.

References:
    - Click documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from shared.config import RemapConfig
from shared.console import RemapConsole
from shared.logger import RemapLogger

from yarn2tiny import __version__
from yarn2tiny.core.engine import ConversionEngine
from yarn2tiny.core.errors import ConversionError
from yarn2tiny.output.console import ConversionConsoleOutput
from yarn2tiny.output.report import ConversionReportGenerator


EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


@click.command("yarn2tiny")
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument(
    "output_path",
    metavar="OUTPUT",
    type=click.Path(path_type=Path),
)
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a TinyRemap configuration file (TOML).",
)
@click.option(
    "--report", "-r",
    "report_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write a JSON conversion report to this path.",
)
@click.option(
    "--json", "json_output",
    is_flag=True,
    default=False,
    help="Print the conversion report as JSON to stdout.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose/debug output.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner and the console summary.",
)
@click.version_option(__version__, prog_name="yarn2tiny")
def yarn2tiny_cli(
    input_path: Path,
    output_path: Path,
    config_path: str | None,
    report_path: Path | None,
    json_output: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Convert a yarn v1 mappings file into a tiny v1 mappings file.

    INPUT is the yarn mappings file; OUTPUT is the tiny mappings file to
    create.  An existing OUTPUT is overwritten.

    Examples:

    \b
        yarn2tiny mappings/yarn.v1 mappings/tiny.v1
    \b
        python -m yarn2tiny yarn.v1 tiny.v1 --report report.json
    """
    console = RemapConsole(quiet=quiet or json_output)

    try:
        config = RemapConfig.load(config_path)
    except Exception as exc:
        console.error(f"Cannot load configuration: {exc}")
        sys.exit(EXIT_FAILURE)

    settings = config.global_settings
    if quiet or json_output:
        log_level = "ERROR"
    elif verbose or settings.debug:
        log_level = "DEBUG"
    else:
        log_level = settings.log_level
    logger = RemapLogger(
        "yarn2tiny",
        log_level=log_level,
        log_file=settings.log_file,
        json_logs=settings.log_json,
    )

    if not quiet:
        console.banner("yarn2tiny", version=__version__)

    if output_path.is_dir():
        console.error(f"Tiny mappings file is a directory: {output_path}")
        sys.exit(EXIT_FAILURE)
    if output_path.exists():
        console.warning(f"Tiny mappings file will be overwritten: {output_path}")

    engine = ConversionEngine(config=config, logger=logger)

    try:
        with console.status(f"Converting {input_path.name}..."):
            report = engine.convert(input_path, output_path)
    except KeyboardInterrupt:
        console.warning("Conversion interrupted by user.")
        sys.exit(EXIT_INTERRUPTED)
    except ConversionError as exc:
        logger.error("Conversion aborted: %s", exc)
        console.error(str(exc))
        sys.exit(EXIT_FAILURE)

    generator = ConversionReportGenerator()
    if report_path is not None:
        saved = generator.generate_json(report, report_path)
        console.success(f"JSON report saved: {saved}")

    if json_output:
        click.echo(generator.to_json(report))
        return

    ConversionConsoleOutput(
        console=console,
        max_warnings=config.converter.max_warnings_shown,
    ).display(report)


# ---------------------------------------------------------------------------
# Module entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Entry point for ``yarn2tiny`` and ``python -m yarn2tiny``."""
    yarn2tiny_cli()


if __name__ == "__main__":
    main()
