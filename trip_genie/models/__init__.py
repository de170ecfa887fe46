from .section import Section
from .travel import TravelRequest, TravelRequestError

__all__ = ["Section", "TravelRequest", "TravelRequestError"]
