# trip_genie/__init__.py

"""
TripGenie: generate travel plans with a text model and split them into
titled sections for display.
"""

__version__ = "0.1.0"
