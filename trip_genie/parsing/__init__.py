# trip_genie/parsing/__init__.py

"""
Turning raw generated text into ordered, titled sections.
"""

from .segmenter import (
    DEFAULT_TITLE,
    Segmentation,
    SegmentationStrategy,
    match_header,
    segment,
    segment_with_strategy,
)

__all__ = [
    "DEFAULT_TITLE",
    "Segmentation",
    "SegmentationStrategy",
    "match_header",
    "segment",
    "segment_with_strategy",
]
