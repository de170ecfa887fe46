# tests/conftest.py

from typing import List

import pytest

from trip_genie.models.travel import TravelRequest
from trip_genie.web.security import reset_rate_limits


GENERATED_PLAN = """## Transportation
Take the TGV from Paris Gare de Lyon to Marseille.

## Accommodation
Book a small hotel in Le Panier.

## Safety Tips
Watch your bag around the Vieux-Port.
"""


class FakeGeminiClient:
    """
    Stand-in for GeminiClient that records prompts and returns canned text
    (or raises a canned error).
    """

    def __init__(self, text: str = GENERATED_PLAN, error: Exception = None) -> None:
        self.text = text
        self.error = error
        self.prompts: List[str] = []

    def is_configured(self) -> bool:
        return True

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def travel_request() -> TravelRequest:
    return TravelRequest(
        source="Paris",
        destination="Marseille",
        start_date="2025-06-01",
        end_date="2025-06-05",
        budget="900 EUR",
        travelers="2",
        interests="food, beaches",
    )


@pytest.fixture(autouse=True)
def _clear_rate_limits():
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def make_fake_client():
    return FakeGeminiClient
