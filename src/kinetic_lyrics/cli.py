"""Main entry point for the kinetic-lyrics CLI.

Provides a Typer-based CLI for generating, normalizing and restyling
lyric timelines, and for running the HTTP service.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import settings
from .core import normalize_lyrics, reconcile_styles
from .models import LyricSegment
from .services.media import MediaError, load_media_file
from .services.oracle import OracleError
from .services.pipeline import analyze_styles, generate_lyrics

console = Console()

app = typer.Typer(
    name="kinetic-lyrics",
    help="Time-aligned kinetic typography lyrics",
    rich_markup_mode="rich",
)

_segments_adapter = TypeAdapter(List[LyricSegment])


def version_callback(value: bool) -> None:
    """Callback for --version flag."""
    if value:
        console.print(f"kinetic-lyrics version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """kinetic-lyrics: lyric captions with auto-assigned animation, font and color.

    ## Commands

    * [bold cyan]generate[/bold cyan] - Transcribe or align lyrics for a media file
    * [bold cyan]normalize[/bold cyan] - Clean up a saved oracle response
    * [bold cyan]restyle[/bold cyan] - Merge saved style results into lyrics
    * [bold cyan]serve[/bold cyan] - Run the HTTP service
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Cannot read {path}: {e}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(1)


def _unwrap(data: Any, key: str) -> List[Any]:
    """Accept either ``{key: [...]}`` or a bare list."""
    if isinstance(data, dict):
        data = data.get(key, [])
    return data if isinstance(data, list) else []


def _load_segments(path: Path) -> List[LyricSegment]:
    try:
        return _segments_adapter.validate_python(_unwrap(_read_json(path), "lyrics"))
    except ValidationError as e:
        console.print(f"[red]Invalid lyrics in {path}: {e}[/red]")
        raise typer.Exit(1)


def _emit(segments: List[LyricSegment], output: Optional[Path]) -> None:
    """Write segments as JSON to ``output``, or print a table."""
    if output is not None:
        payload = {"lyrics": [s.model_dump(by_alias=True) for s in segments]}
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        console.print(f"[green]Wrote {len(segments)} segments to {output}[/green]")
        return

    table = Table(title=f"Lyrics ({len(segments)} segments)")
    table.add_column("Start", justify="right", style="cyan")
    table.add_column("End", justify="right", style="cyan")
    table.add_column("Text")
    table.add_column("Animation", style="magenta")
    table.add_column("Font")
    table.add_column("Color")
    for segment in segments:
        table.add_row(
            f"{segment.start_time:.2f}",
            f"{segment.end_time:.2f}",
            segment.text.replace("\n", " / "),
            segment.style.animation,
            segment.style.font_family,
            segment.style.color,
        )
    console.print(table)


@app.command("generate")
def generate(
    media_path: Path = typer.Argument(..., help="Audio or video file"),
    lyrics_path: Optional[Path] = typer.Option(
        None, "--lyrics", "-l", help="Reference lyrics text file to align"
    ),
    style: bool = typer.Option(
        False, "--style/--no-style", help="Run style analysis after generation"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here"),
) -> None:
    """Transcribe lyrics from media, or align reference lyrics to it."""
    reference = None
    if lyrics_path is not None:
        try:
            reference = lyrics_path.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Cannot read lyrics file: {e}[/red]")
            raise typer.Exit(1)

    try:
        media = load_media_file(media_path)
    except MediaError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    def _progress(status: str) -> None:
        console.print(f"[dim]{status}[/dim]")

    try:
        segments = generate_lyrics(media, reference_lyrics=reference, on_progress=_progress)
    except OracleError as e:
        console.print(f"[red]Lyric generation failed: {e}[/red]")
        raise typer.Exit(1)

    if style:
        segments = analyze_styles(segments, on_progress=_progress)

    _emit(segments, output)


@app.command("normalize")
def normalize(
    raw_path: Path = typer.Argument(..., help="Saved oracle response JSON"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Override KINETIC_STRICT_STYLES"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here"),
) -> None:
    """Normalize a saved oracle lyric response into a clean timeline."""
    raw_items = _unwrap(_read_json(raw_path), "lyrics")
    strict_styles = settings.STRICT_STYLES if strict is None else strict
    segments = normalize_lyrics(raw_items, strict=strict_styles)
    if len(segments) < len(raw_items):
        console.print(
            f"[yellow]Dropped {len(raw_items) - len(segments)} empty or overlapped lines[/yellow]"
        )
    _emit(segments, output)


@app.command("restyle")
def restyle(
    lyrics_path: Path = typer.Argument(..., help="Lyrics JSON ({lyrics: [...]})"),
    styles_path: Path = typer.Argument(..., help="Style results JSON ({styles: [...]})"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here"),
) -> None:
    """Merge saved style results into saved lyrics by id."""
    segments = _load_segments(lyrics_path)
    style_results = _unwrap(_read_json(styles_path), "styles")
    _emit(reconcile_styles(segments, style_results, strict=settings.STRICT_STYLES), output)


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Port"),
) -> None:
    """Run the HTTP service with uvicorn."""
    from .main import main as run_server

    run_server(host=host, port=port)


if __name__ == "__main__":
    app()
