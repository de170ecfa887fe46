# tests/test_presentation.py

from trip_genie.models.section import Section
from trip_genie.presentation import (
    duration_label,
    paragraphs,
    plan_title,
    render_markdown,
    render_sections_markdown,
    sections_to_dicts,
    strip_emphasis,
    travelers_label,
)


def test_strip_emphasis():
    assert strip_emphasis("**Tip:** bring cash") == "Tip: bring cash"
    assert strip_emphasis("*single* stays") == "*single* stays"


def test_paragraphs_skip_blank_lines():
    content = "**Morning:** museum\n\n  Afternoon: beach  \n"

    assert paragraphs(content) == ["Morning: museum", "Afternoon: beach"]


def test_labels(travel_request):
    assert plan_title(travel_request) == "Paris to Marseille"
    assert duration_label(travel_request) == "4 days"
    assert travelers_label(travel_request) == "2 travelers"

    travel_request.end_date = "2025-06-02"
    travel_request.travelers = "1"
    assert duration_label(travel_request) == "1 day"
    assert travelers_label(travel_request) == "1 traveler"

    travel_request.end_date = ""
    travel_request.travelers = "a few"
    assert duration_label(travel_request) == ""
    assert travelers_label(travel_request) == "a few travelers"


def test_render_markdown(travel_request):
    sections = [
        Section(title="Transportation", content="Take the **TGV**.\nBook early."),
        Section(title="Food", content="Try bouillabaisse."),
    ]

    md = render_markdown(travel_request, sections)

    assert md.startswith("# Paris to Marseille\n")
    assert "4 days trip | 2025-06-01 to 2025-06-05 | 2 travelers | Budget: 900 EUR" in md
    assert "## Transportation\n\nTake the TGV.\nBook early.\n" in md
    assert md.endswith("## Food\n\nTry bouillabaisse.\n")


def test_render_sections_markdown_and_dicts():
    sections = [Section(title="Tips", content="Carry water.")]

    assert render_sections_markdown(sections) == "## Tips\n\nCarry water.\n"
    assert render_sections_markdown([]) == ""
    assert sections_to_dicts(sections) == [{"title": "Tips", "content": "Carry water."}]
