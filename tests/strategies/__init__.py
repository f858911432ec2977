"""Hypothesis strategies for jsonmessages property-based testing.

Usage:
    from tests.strategies import language_codes, message_tables
    from tests.strategies.messages import category_names, path_segments

Event-Emitting Strategies (HypoFuzz-Optimized):
    - language_codes, category_names, message_tables
"""

from .messages import (
    LANGUAGE_ALPHABET,
    category_names,
    invalid_language_codes,
    language_codes,
    message_tables,
    path_segments,
)

__all__ = [
    "LANGUAGE_ALPHABET",
    "category_names",
    "invalid_language_codes",
    "language_codes",
    "message_tables",
    "path_segments",
]
