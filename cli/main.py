# cli/main.py
# ============================================================
# PDF to Image — Command Line Interface
# ============================================================
# Typer-based front end for the conversion pipeline. Validates
# the input and output paths, picks single-page or spread mode
# from a flag, runs the conversion as one awaited background
# unit of work, and reports a single "Done" when it finishes.
#
# Usage:
#   pdf-to-image book.pdf
#   pdf-to-image book.pdf --output ./book_images --pair
#   pdf-to-image book.pdf --verbose
#   python -m cli.main book.pdf -o ./out
# ============================================================

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config.settings import settings
from pdf_to_image.pipeline.runner import ConversionResult, ConversionRunner
from pdf_to_image.pipeline.strategies import ConversionMode
from pdf_to_image.utils.logger import set_level

# ============================================================
# CLI App Setup
# ============================================================

app = typer.Typer(
    name="pdf-to-image",
    help=(
        "Convert a PDF into numbered JPEG images.\n\n"
        "One image per page, or pages joined side by side in pairs (spreads)."
    ),
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


# ============================================================
# Commands
# ============================================================

@app.command()
def convert(
    input_path: str = typer.Argument(
        ...,
        help="Path to the PDF file to convert.",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output directory. Default: an 'output' folder next to the PDF.",
    ),
    pair: bool = typer.Option(
        False,
        "--pair/--single", "-p/-s",
        help="Join pages two at a time into spreads instead of one image per page.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Log every rendered page and saved image.",
    ),
):
    """
    Convert every page of a PDF to a JPEG image.

    Single mode writes 0000.jpg, 0001.jpg, ... Pair mode writes
    ToImage-0000.jpg, ToImage-0002.jpg, ... with an odd final page
    joined to a blank page.

    Examples:
        convert book.pdf
        convert book.pdf --output ./spreads --pair
    """
    if verbose:
        set_level("DEBUG")

    if output is None and input_path.strip():
        output = str(Path(input_path).parent / settings.default_output_dirname)

    error = _validate(input_path, output)
    if error:
        console.print(f"[red]Error:[/red] {error}")
        raise typer.Exit(code=1)

    mode = ConversionMode.from_flag(pair)

    console.print(Panel(
        f"Input:  {input_path}\n"
        f"Mode:   {mode.value}\n"
        f"Output: {output}",
        title="PDF to Image",
        border_style="blue",
    ))

    runner = ConversionRunner()
    with console.status("Converting..."):
        result = asyncio.run(runner.arun(input_path, output, mode))

    _print_results_table(result)

    if not result.success:
        console.print(f"[red]Failed:[/red] {result.error}")
        raise typer.Exit(code=1)

    console.print("[bold green]Done[/bold green]")


# ============================================================
# Helper Functions
# ============================================================

def _validate(input_path: str, output: Optional[str]) -> Optional[str]:
    """Return the first validation failure message, or None if the paths are usable."""
    checks = [
        (lambda: not input_path.strip(), "No PDF file specified."),
        (lambda: not Path(input_path).is_file(), f"PDF file not found: {input_path}"),
        (lambda: not (output or "").strip(), "No output directory specified."),
    ]
    for failed, message in checks:
        if failed():
            return message
    return None


def _print_results_table(result: ConversionResult) -> None:
    """Print a summary table of the conversion run."""
    table = Table(title="Conversion Summary", show_header=False)
    table.add_column("Property", style="bold")
    table.add_column("Value")

    status = "[green]success[/green]" if result.success else "[red]failed[/red]"
    table.add_row("Status", status)
    table.add_row("Mode", result.mode.value)
    table.add_row("Pages", str(result.page_count))
    table.add_row("Images written", str(len(result.output_files)))
    table.add_row("Output", result.output_dir)
    table.add_row("Total time", f"{result.latency_ms:.0f}ms")

    console.print(table)


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    app()
