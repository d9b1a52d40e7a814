"""Utility functions for autojournal."""

from autojournal.utils.date_parser import parse_datetime

__all__ = ["parse_datetime"]
