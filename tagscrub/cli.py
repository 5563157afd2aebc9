"""Command-line interface for tagscrub."""

import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

# Configure logging before importing tagscrub modules - WARNING for normal runs
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("tagscrub")

import typer
from rich.console import Console
from rich.markup import escape

from tagscrub import __version__
from tagscrub.cleaning import clean_field
from tagscrub.config import TagscrubConfig
from tagscrub.models import CleanedField

DEFAULT_CONFIG_PATH = "tagscrub.yaml"

app = typer.Typer(help="tagscrub - strip junk annotations from music metadata")
console = Console()
err_console = Console(stderr=True)


def debug_callback(value: bool):
    """Enable debug mode."""
    if value:
        logger.setLevel(logging.DEBUG)
        err_console.print("[dim]Debug mode enabled[/dim]")


@app.callback()
def common_options(
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging",
        callback=debug_callback,
        is_eager=True,
    ),
):
    """tagscrub - strip junk annotations from music metadata."""
    pass


def load_config(config_path: Optional[str]) -> TagscrubConfig:
    """Load the config file, falling back to defaults when the default path is absent."""
    if config_path is None:
        if not Path(DEFAULT_CONFIG_PATH).exists():
            config = TagscrubConfig()
        else:
            config = TagscrubConfig.from_file(DEFAULT_CONFIG_PATH)
    else:
        config = TagscrubConfig.from_file(config_path)

    # --debug wins over the configured level
    if not logger.isEnabledFor(logging.DEBUG):
        logger.setLevel(config.logging.level)
    return config


def format_record(record: CleanedField, as_json: bool) -> str:
    """Render one cleaned record as a single output line."""
    if as_json:
        return json.dumps(record.to_dict(), ensure_ascii=False)
    return str(record)


def emit(line: str) -> None:
    """Print a data line verbatim (no markup, emoji codes or wrapping)."""
    console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)


def clean_lines(
    lines: Iterable[str], field: str, skip_blank: bool = False
) -> List[CleanedField]:
    """Clean each line of text, dropping blank results when asked."""
    records = []
    for line in lines:
        record = clean_field(field, line.rstrip("\r\n"))
        if skip_blank and not any(record.cleaned):
            logger.debug(f"Skipping blank line: {record.original!r}")
            continue
        records.append(record)
    return records


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]tagscrub[/bold] v{__version__}")


@app.command()
def clean(
    values: List[str] = typer.Argument(..., help="Metadata values to clean"),
    field: Optional[str] = typer.Option(
        None,
        "--field",
        "-f",
        help="Metadata field: album, track, artists or common",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON records"),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Clean metadata values given on the command line."""
    try:
        config = load_config(config_path)
        records = [clean_field(field or config.output.field, value) for value in values]
    except (OSError, ValueError) as e:
        console.print(f"[red]✗[/red] Cleaning failed: {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    as_json = as_json or config.output.format == "json"
    for record in records:
        emit(format_record(record, as_json))


@app.command("clean-file")
def clean_file(
    input_path: str = typer.Argument(..., help="Text file with one value per line, or - for stdin"),
    field: Optional[str] = typer.Option(
        None,
        "--field",
        "-f",
        help="Metadata field: album, track, artists or common",
    ),
    as_json: bool = typer.Option(False, "--json", help="Write JSON records"),
    output_path: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write results to this file instead of stdout",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Clean a text file of metadata values line by line."""
    try:
        config = load_config(config_path)
        field = field or config.output.field
        if input_path == "-":
            records = clean_lines(sys.stdin, field, config.output.skip_blank)
        else:
            with open(input_path, "r", encoding="utf-8") as f:
                records = clean_lines(f, field, config.output.skip_blank)
    except (OSError, ValueError) as e:
        console.print(f"[red]✗[/red] Cleaning failed: {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    as_json = as_json or config.output.format == "json"
    lines = [format_record(record, as_json) for record in records]
    changed = sum(1 for record in records if record.changed)
    logger.info(f"Cleaned {len(records)} values ({changed} changed)")

    if output_path is None:
        for line in lines:
            emit(line)
        return

    try:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(f"{line}\n" for line in lines)
    except OSError as e:
        console.print(f"[red]✗[/red] Writing output failed: {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    err_console.print(
        f"[green]✓[/green] Wrote {len(lines)} values ({changed} changed) to {escape(str(path))}"
    )


@app.command("init-config")
def init_config(
    config_path: str = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Write a default configuration file."""
    try:
        TagscrubConfig().save(config_path)
    except OSError as e:
        console.print(f"[red]✗[/red] Could not write config: {escape(str(e))}", soft_wrap=True)
        sys.exit(1)
    console.print(f"[green]✓[/green] Configuration written to {escape(config_path)}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
