# trip_genie/cli/output.py

from __future__ import annotations

import json
from enum import Enum
from typing import Optional, Sequence

import typer
from rich.console import Console
from rich.table import Table

from trip_genie.models.section import Section
from trip_genie.presentation import paragraphs, render_sections_markdown, sections_to_dicts

console = Console()


class OutputFormat(str, Enum):
    table = "table"
    json = "json"
    markdown = "markdown"


def print_sections_table(sections: Sequence[Section], title: Optional[str] = None) -> None:
    if not sections:
        console.print("[yellow]No sections found.[/yellow]")
        return

    tbl = Table(show_header=True, header_style="bold", title=title, show_lines=True)
    tbl.add_column("#", justify="right")
    tbl.add_column("Title")
    tbl.add_column("Content")

    for idx, sec in enumerate(sections, start=1):
        tbl.add_row(str(idx), sec.title, "\n".join(paragraphs(sec.content)))

    console.print(tbl)


def print_sections_json(sections: Sequence[Section], **extra) -> None:
    payload = dict(extra)
    payload["sections"] = sections_to_dicts(sections)
    # Plain echo: rich would highlight/wrap the JSON.
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def print_sections_markdown(sections: Sequence[Section]) -> None:
    typer.echo(render_sections_markdown(sections), nl=False)
