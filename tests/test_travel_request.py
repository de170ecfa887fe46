# tests/test_travel_request.py

import pytest

from trip_genie.models.travel import TravelRequest, TravelRequestError


def test_valid_request_passes(travel_request):
    travel_request.validate()


@pytest.mark.parametrize(
    "field, message",
    [
        ("source", "Please enter your departure location"),
        ("destination", "Please enter your destination"),
        ("start_date", "Please enter your start date"),
        ("end_date", "Please enter your end date"),
        ("budget", "Please enter your budget"),
    ],
)
def test_missing_field_reports_message(travel_request, field, message):
    setattr(travel_request, field, "   ")

    with pytest.raises(TravelRequestError) as excinfo:
        travel_request.validate()

    assert str(excinfo.value) == message
    assert excinfo.value.field == field


def test_first_missing_field_wins():
    request = TravelRequest(source="", destination="", start_date="", end_date="", budget="")

    with pytest.raises(TravelRequestError, match="departure location"):
        request.validate()


def test_travelers_and_interests_are_optional(travel_request):
    travel_request.interests = ""
    travel_request.travelers = ""
    travel_request.validate()


def test_duration_days(travel_request):
    assert travel_request.duration_days == 4

    travel_request.start_date, travel_request.end_date = "2025-06-05", "2025-06-01"
    assert travel_request.duration_days == 4

    travel_request.end_date = "next week"
    assert travel_request.duration_days is None

    travel_request.end_date = ""
    assert travel_request.duration_days is None
