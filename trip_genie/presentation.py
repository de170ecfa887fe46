# trip_genie/presentation.py

"""
Display helpers for segmented travel plans.

These only reshape text for output; segmentation itself lives in
trip_genie.parsing.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from trip_genie.models.section import Section
from trip_genie.models.travel import TravelRequest

EMPHASIS_MARKER = "**"


def strip_emphasis(text: str) -> str:
    return text.replace(EMPHASIS_MARKER, "")


def paragraphs(content: str) -> List[str]:
    """
    Split section content into display paragraphs, one per non-blank line.
    """
    out: List[str] = []
    for line in strip_emphasis(content).split("\n"):
        line = line.strip()
        if line:
            out.append(line)
    return out


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def duration_label(request: TravelRequest) -> str:
    days = request.duration_days
    if days is None:
        return ""
    return _plural(days, "day")


def travelers_label(request: TravelRequest) -> str:
    try:
        count = int(str(request.travelers).strip())
    except ValueError:
        return f"{request.travelers} travelers"
    return _plural(count, "traveler")


def plan_title(request: TravelRequest) -> str:
    return f"{request.source} to {request.destination}"


def sections_to_dicts(sections: Iterable[Section]) -> List[Dict[str, str]]:
    return [sec.to_dict() for sec in sections]


def render_markdown(request: TravelRequest, sections: Sequence[Section]) -> str:
    """
    Render a plan as a shareable Markdown document.
    """
    details = [f"{request.start_date} to {request.end_date}", travelers_label(request)]
    if request.budget:
        details.append(f"Budget: {request.budget}")
    duration = duration_label(request)
    if duration:
        details.insert(0, f"{duration} trip")

    lines: List[str] = [f"# {plan_title(request)}", "", " | ".join(details), ""]
    for sec in sections:
        lines.append(f"## {strip_emphasis(sec.title)}")
        lines.append("")
        lines.extend(paragraphs(sec.content))
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def render_sections_markdown(sections: Sequence[Section]) -> str:
    """
    Markdown for bare sections, without trip details.
    """
    blocks = []
    for sec in sections:
        body = "\n".join(paragraphs(sec.content))
        blocks.append(f"## {strip_emphasis(sec.title)}\n\n{body}")
    return "\n\n".join(blocks) + ("\n" if blocks else "")
