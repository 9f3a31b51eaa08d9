"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
import shutil
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from tile_mosaic.config import MosaicConfig
from tile_mosaic.errors import MosaicError
from tile_mosaic.pipeline import build_mosaic

app = typer.Typer(
    name="tile-mosaic",
    help="Rebuild an image as a photo-mosaic of colour-matched tiles.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


# Defaults come from MosaicConfig - single source of truth
_DEFAULTS = MosaicConfig()


@app.command()
def build(
    source: Path = typer.Argument(..., help="Image to turn into a mosaic"),
    tiles: Path = typer.Argument(..., help="Folder with candidate tile images"),
    output: Path = typer.Option(
        _DEFAULTS.output_path, "--output", "-o", help="Where to write the mosaic",
    ),
    cell_width: int = typer.Option(
        _DEFAULTS.cell_width, "--cell-width", "-W", help="Grid cell width in pixels",
    ),
    cell_height: int = typer.Option(
        _DEFAULTS.cell_height, "--cell-height", "-H", help="Grid cell height in pixels",
    ),
    resample: str = typer.Option(
        _DEFAULTS.resample, "--resample",
        help="'nearest', 'bilinear', 'bicubic' or 'lanczos'",
    ),
    clean: bool = typer.Option(
        False, "--clean/--no-clean",
        help=f"Delete the {_DEFAULTS.output_dir}/ folder before building",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Build a mosaic of SOURCE from the images in TILES."""
    _setup_logging(verbose)

    try:
        cfg = MosaicConfig(
            cell_width=cell_width,
            cell_height=cell_height,
            resample=resample,
        )
    except ValueError as exc:
        err_console.print(f"[red]Invalid option: {escape(str(exc))}[/red]")
        raise typer.Exit(2) from exc

    if clean:
        shutil.rmtree(cfg.output_dir, ignore_errors=True)

    console.print(Panel.fit(
        f"[bold]TILE MOSAIC[/bold]\n"
        f"Source: {source}  |  Tiles: {tiles}/\n"
        f"Cell: {cfg.cell_width}x{cfg.cell_height}  |  Resample: {cfg.resample}",
        border_style="cyan",
    ))

    t_total = time.perf_counter()
    try:
        result = build_mosaic(source, tiles, output, cfg)
    except MosaicError as exc:
        err_console.print(f"[red]An error occurred: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    elapsed = time.perf_counter() - t_total

    console.print(
        f"[green]✓[/green] Saved to {result.output_path}  "
        f"[dim]{result.columns}x{result.rows} cells[/dim]"
    )
    console.print(f"Duration: {elapsed:.3f} sec")


if __name__ == "__main__":
    app()
