# tests/test_planner.py

import pytest

from trip_genie.gemini_client import GeminiClientError
from trip_genie.models.travel import TravelRequestError
from trip_genie.parsing import SegmentationStrategy
from trip_genie.planner import generate_travel_plan


def test_plan_is_segmented(travel_request, make_fake_client):
    client = make_fake_client()

    result = generate_travel_plan(travel_request, client=client)

    assert result.ok
    assert result.strategy == SegmentationStrategy.STRUCTURED
    assert [s.title for s in result.recommendations] == [
        "Transportation",
        "Accommodation",
        "Safety Tips",
    ]
    assert result.raw_text == client.text
    assert len(client.prompts) == 1
    assert "Destination: Marseille" in client.prompts[0]


def test_generation_error_is_returned_not_raised(travel_request, make_fake_client):
    client = make_fake_client(error=GeminiClientError("API error: quota exceeded", status_code=429))

    result = generate_travel_plan(travel_request, client=client)

    assert not result.ok
    assert result.error == "API error: quota exceeded"
    assert result.recommendations == []


def test_blank_generation_is_an_error(travel_request, make_fake_client):
    result = generate_travel_plan(travel_request, client=make_fake_client(text="  \n"))

    assert result.error == "No response generated, please try again"
    assert result.recommendations == []


def test_unstructured_generation_still_produces_a_section(travel_request, make_fake_client):
    text = "Marseille is lovely in June. Eat bouillabaisse and swim at the calanques."

    result = generate_travel_plan(travel_request, client=make_fake_client(text=text))

    assert result.ok
    assert result.strategy == SegmentationStrategy.FALLBACK
    assert result.recommendations[0].title == "Travel Recommendations"
    assert result.recommendations[0].content == text


def test_invalid_request_raises_before_generation(travel_request, make_fake_client):
    client = make_fake_client()
    travel_request.budget = ""

    with pytest.raises(TravelRequestError, match="budget"):
        generate_travel_plan(travel_request, client=client)

    assert client.prompts == []
