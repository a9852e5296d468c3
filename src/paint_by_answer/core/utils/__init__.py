"""
Core utilities: serialization between stored payloads and models.
"""

from .serialization import (
    serialize_grid,
    deserialize_grid,
    parse_stored_color,
    question_from_payload,
    question_to_payload,
    activity_from_payload,
    activity_to_payload,
)

__all__ = [
    "serialize_grid",
    "deserialize_grid",
    "parse_stored_color",
    "question_from_payload",
    "question_to_payload",
    "activity_from_payload",
    "activity_to_payload",
]
