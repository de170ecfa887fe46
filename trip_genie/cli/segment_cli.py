# trip_genie/cli/segment_cli.py

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from trip_genie.cli.output import (
    OutputFormat,
    console,
    print_sections_json,
    print_sections_markdown,
    print_sections_table,
)
from trip_genie.parsing.segmenter import segment_with_strategy


def _read_input(source: Optional[Path]) -> str:
    """
    Read the text to segment from a file, or from stdin for None / "-".
    """
    if source is None or str(source) == "-":
        return typer.get_text_stream("stdin").read()

    path = Path(source)
    if not path.exists():
        console.print(f"[red]Input file not found:[/red] {path}")
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


def segment(
    source: Optional[Path] = typer.Argument(
        None,
        help="Text file with a generated plan. Reads stdin when omitted or '-'.",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.table,
        "--format",
        "-f",
        help="Output format: table, json or markdown.",
    ),
    show_strategy: bool = typer.Option(
        False,
        "--show-strategy",
        help="Also report which segmentation tier produced the sections.",
    ),
) -> None:
    """
    Split generated text into titled sections.
    """
    text = _read_input(source)
    segmentation = segment_with_strategy(text)

    if output_format == OutputFormat.json:
        extra = {"strategy": segmentation.strategy.value} if show_strategy else {}
        print_sections_json(segmentation.sections, **extra)
        return

    if output_format == OutputFormat.markdown:
        print_sections_markdown(segmentation.sections)
        return

    if show_strategy:
        console.print(f"[dim]Strategy: {segmentation.strategy.value}[/dim]")
    print_sections_table(segmentation.sections)
