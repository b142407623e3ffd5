"""Shared utilities for annotation processing."""

from .timestamps import (
    format_duration_colon,
    format_duration_letters,
    parse_duration_colon,
    parse_duration_letters,
)

__all__ = [
    "format_duration_colon",
    "format_duration_letters",
    "parse_duration_colon",
    "parse_duration_letters",
]
