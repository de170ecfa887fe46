# trip_genie/api/models.py

from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from trip_genie.models.section import Section
from trip_genie.models.travel import TravelRequest


class SectionModel(BaseModel):
    """
    One titled chunk of a segmented plan.
    """
    title: str = Field(..., description="Section title as detected in the text.")
    content: str = Field(..., description="Section body; lines separated by newlines.")

    @classmethod
    def from_section(cls, section: Section) -> "SectionModel":
        return cls(title=section.title, content=section.content)


class SegmentRequest(BaseModel):
    text: str = Field(..., description="Raw generated text to segment.")


class SegmentResponse(BaseModel):
    strategy: str = Field(
        ...,
        description="Tier that produced the sections: structured, heuristic, fallback or empty.",
    )
    sections: List[SectionModel] = Field(default_factory=list)


class PlanRequest(BaseModel):
    """
    Trip details as submitted by the form. Missing required fields are
    reported by TravelRequest.validate() so the messages match the UI.
    """
    source: str = ""
    destination: str = ""
    start_date: str = ""
    end_date: str = ""
    budget: str = ""
    travelers: str = "1"
    interests: str = ""

    def to_travel_request(self) -> TravelRequest:
        return TravelRequest(
            source=self.source,
            destination=self.destination,
            start_date=self.start_date,
            end_date=self.end_date,
            budget=self.budget,
            travelers=self.travelers,
            interests=self.interests,
        )


class PlanResponse(BaseModel):
    title: str = Field(..., description="Plan heading, e.g. 'Paris to Rome'.")
    duration: Optional[str] = Field(
        None,
        description="Human-readable trip length, if the dates could be parsed.",
    )
    strategy: Optional[str] = None
    sections: List[SectionModel] = Field(default_factory=list)
