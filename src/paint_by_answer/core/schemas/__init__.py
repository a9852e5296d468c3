"""
Schema validation for stored activity payloads.

Key Functions:
    - validate_activity(): Check a payload against activity.schema.json
"""

from .validator import validate_activity, ValidationError

__all__ = [
    "validate_activity",
    "ValidationError",
]
