"""
audex.cli - Typer CLI entry point.

Single command: probe the input, then extract its only audio stream.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from audex import __version__
from audex.config import OutputFormat, build_config, prepare_output_dir
from audex.exceptions import AudexError, DependencyError
from audex.logging import configure_logging
from audex.pipeline import run_extraction
from audex.utils import format_size

app = typer.Typer(
    name="audex",
    help="Extract the sole audio stream of a media file.\n\n"
    "Probes the input with ffprobe, requires exactly one audio stream, and "
    "re-encodes it with ffmpeg to WAV, MP3 or Opus.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"audex {__version__}")
        raise typer.Exit()


@app.command()
def extract(
    input_file: Path = typer.Option(..., "--input", help="The path to the input file"),
    output_dir: Path = typer.Option(
        ..., "--output", help="Output directory (created if missing)"
    ),
    ffprobe_path: str | None = typer.Option(
        None,
        "--ffprobe-path",
        envvar="AUDEX_FFPROBE_PATH",
        help="The path to the ffprobe executable [default: ffprobe]",
    ),
    ffmpeg_path: str | None = typer.Option(
        None,
        "--ffmpeg-path",
        envvar="AUDEX_FFMPEG_PATH",
        help="The path to the ffmpeg executable [default: ffmpeg]",
    ),
    output_format: OutputFormat | None = typer.Option(
        None,
        "--format",
        case_sensitive=False,
        help="Output file format [default: wav]",
    ),
    output_sample_rate: int | None = typer.Option(
        None, "--output-sample-rate", help="Sample rate in Hz [default: 16000]"
    ),
    output_channels: int | None = typer.Option(
        None, "--output-channels", help="Number of channels [default: 1]"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="YAML file with default option values"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Extract the only audio stream of INPUT into the OUTPUT directory."""
    configure_logging(verbose)

    try:
        config = build_config(
            {
                "input": input_file,
                "output": output_dir,
                "ffprobe_path": ffprobe_path,
                "ffmpeg_path": ffmpeg_path,
                "format": output_format,
                "output_sample_rate": output_sample_rate,
                "output_channels": output_channels,
            },
            config_file=config_file,
        )
        prepare_output_dir(config.output)

        result = run_extraction(config, console=console)
    except AudexError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if isinstance(e, DependencyError) and e.install_hint:
            err_console.print(f"[dim]{escape(e.install_hint)}[/dim]")
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] Wrote {escape(str(result.output_file))} "
        f"({format_size(result.output_file)})"
    )
    console.print("Done!")
