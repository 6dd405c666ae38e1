"""Normalize the layout and styling of the first slide of a PowerPoint file."""

__version__ = "1.0.0"
