"""Utility modules."""

from .parser import extract_json_array, parse_keywords

__all__ = ["extract_json_array", "parse_keywords"]
