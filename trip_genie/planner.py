# trip_genie/planner.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from trip_genie.gemini_client import GeminiClient, GeminiClientError
from trip_genie.models.section import Section
from trip_genie.models.travel import TravelRequest
from trip_genie.parsing.segmenter import SegmentationStrategy, segment_with_strategy
from trip_genie.prompts import build_travel_prompt

logger = logging.getLogger(__name__)


@dataclass
class TravelPlanResult:
    """
    Outcome of one plan generation.

    - recommendations: segmented sections, in the order the model wrote them
    - error: user-facing message when generation failed (recommendations empty)
    - raw_text: the unmodified generated text, when there was one
    - strategy: which segmentation tier produced the sections
    """
    recommendations: List[Section] = field(default_factory=list)
    error: Optional[str] = None
    raw_text: Optional[str] = None
    strategy: Optional[SegmentationStrategy] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def generate_travel_plan(
    request: TravelRequest,
    client: Optional[GeminiClient] = None,
) -> TravelPlanResult:
    """
    Validate the request, ask the model for a plan and segment the answer.

    Raises TravelRequestError for missing form fields. Generation failures
    come back as `error` on the result instead of being raised.
    """
    request.validate()

    if client is None:
        client = GeminiClient()

    prompt = build_travel_prompt(request)
    logger.info(
        "Generating travel plan %s -> %s (%s to %s)",
        request.source,
        request.destination,
        request.start_date,
        request.end_date,
    )

    try:
        text = client.generate(prompt)
    except GeminiClientError as exc:
        logger.error("Travel plan generation failed: %s", exc)
        return TravelPlanResult(error=str(exc))

    segmentation = segment_with_strategy(text)
    if not segmentation.sections:
        return TravelPlanResult(
            error="No response generated, please try again",
            raw_text=text,
            strategy=segmentation.strategy,
        )

    logger.info(
        "Travel plan ready: %d section(s), %s strategy",
        len(segmentation.sections),
        segmentation.strategy.value,
    )
    return TravelPlanResult(
        recommendations=segmentation.sections,
        raw_text=text,
        strategy=segmentation.strategy,
    )
