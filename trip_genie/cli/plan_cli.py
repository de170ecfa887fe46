# trip_genie/cli/plan_cli.py

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from trip_genie.cli.output import (
    OutputFormat,
    console,
    print_sections_json,
    print_sections_table,
)
from trip_genie.gemini_client import GeminiClient
from trip_genie.models.travel import TravelRequest, TravelRequestError
from trip_genie.planner import generate_travel_plan
from trip_genie.presentation import duration_label, plan_title, render_markdown


def _build_client() -> GeminiClient:
    return GeminiClient()


def plan(
    source: str = typer.Option("", "--source", "-s", help="Departure location."),
    destination: str = typer.Option("", "--destination", "-d", help="Destination."),
    start_date: str = typer.Option("", "--start-date", help="Start date (YYYY-MM-DD)."),
    end_date: str = typer.Option("", "--end-date", help="End date (YYYY-MM-DD)."),
    budget: str = typer.Option("", "--budget", "-b", help="Budget, free text (e.g. '1500 EUR')."),
    travelers: str = typer.Option("1", "--travelers", "-t", help="Number of travelers."),
    interests: str = typer.Option("", "--interests", "-i", help="Interests, comma-separated."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.table,
        "--format",
        "-f",
        help="Output format: table, json or markdown.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the plan as Markdown to this file.",
    ),
) -> None:
    """
    Generate a travel plan and print it section by section.
    """
    request = TravelRequest(
        source=source,
        destination=destination,
        start_date=start_date,
        end_date=end_date,
        budget=budget,
        travelers=travelers,
        interests=interests,
    )

    try:
        result = generate_travel_plan(request, client=_build_client())
    except TravelRequestError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    if not result.ok:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(code=1)

    markdown = render_markdown(request, result.recommendations)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markdown, encoding="utf-8")

    if output_format == OutputFormat.json:
        print_sections_json(
            result.recommendations,
            title=plan_title(request),
            duration=duration_label(request),
        )
    elif output_format == OutputFormat.markdown:
        typer.echo(markdown, nl=False)
    else:
        heading = plan_title(request)
        duration = duration_label(request)
        if duration:
            heading = f"{heading} ({duration})"
        console.rule(f"[bold cyan]{heading}[/bold cyan]")
        print_sections_table(result.recommendations)

    if output is not None:
        console.print(f"[green]Saved plan to[/green] {output}")
