# trip_genie/prompts.py

from __future__ import annotations

from trip_genie.models.travel import TravelRequest

PLAN_TOPICS = (
    "Transportation options and estimated costs",
    "Accommodation suggestions within budget",
    "Must-see attractions based on interests",
    "Daily itinerary outline",
    "Food and dining recommendations",
    "Local cultural experiences",
    "Shopping recommendations",
    "Safety tips for the destination",
)


def build_travel_prompt(request: TravelRequest) -> str:
    """
    Build the plan-generation prompt for a travel request.

    The numbered topic list nudges the model towards numbered section
    headers, which the structured segmentation tier picks up.
    """
    topics = "\n".join(f"{i}. {topic}" for i, topic in enumerate(PLAN_TOPICS, start=1))
    interests = request.interests.strip() or "general sightseeing"

    return (
        "Act as a travel planning assistant.\n"
        "Please create a detailed travel plan for a trip with the following details:\n"
        f"- Departing from: {request.source}\n"
        f"- Destination: {request.destination}\n"
        f"- Travel dates: {request.start_date} to {request.end_date}\n"
        f"- Budget: {request.budget}\n"
        f"- Number of travelers: {request.travelers}\n"
        f"- Interests: {interests}\n"
        "\n"
        "Provide specific recommendations for:\n"
        f"{topics}\n"
        "\n"
        "Format each section with a clear title and detailed content that is "
        "helpful for travelers."
    )
