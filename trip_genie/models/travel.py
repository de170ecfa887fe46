# trip_genie/models/travel.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


class TravelRequestError(ValueError):
    """
    Raised when a travel request is missing a required field.

    The message is meant to be shown to the user as-is.
    """

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


# Checked in this order; the first missing field wins.
_REQUIRED_FIELDS = (
    ("source", "Please enter your departure location"),
    ("destination", "Please enter your destination"),
    ("start_date", "Please enter your start date"),
    ("end_date", "Please enter your end date"),
    ("budget", "Please enter your budget"),
)


def _parse_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


@dataclass
class TravelRequest:
    """
    The trip details a user submits before a plan is generated.

    All fields are kept as free text, the same way they are typed into the
    form; dates are expected as ISO strings (YYYY-MM-DD).
    """

    source: str
    destination: str
    start_date: str
    end_date: str
    budget: str
    travelers: str = "1"
    interests: str = ""

    def validate(self) -> None:
        for name, message in _REQUIRED_FIELDS:
            value = getattr(self, name)
            if not value or not str(value).strip():
                raise TravelRequestError(message, field=name)

    @property
    def duration_days(self) -> Optional[int]:
        if not self.start_date or not self.end_date:
            return None
        start = _parse_date(self.start_date)
        end = _parse_date(self.end_date)
        if start is None or end is None:
            return None
        return abs((end - start).days)
