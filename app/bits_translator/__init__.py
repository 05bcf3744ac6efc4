"""bits-translator - translation helper for component based front ends."""

__version__ = "1.0.0"
