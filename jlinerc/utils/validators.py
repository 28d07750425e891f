"""
Validation utilities for jlinerc.
"""

from typing import Any


def validate_property_name(name: Any) -> str:
    """
    Check that a property name can be looked up.

    Args:
        name: Candidate property name

    Returns:
        The name, unchanged

    Raises:
        ValueError: If name is None, not a string, or empty
    """
    if name is None:
        raise ValueError("Property name must not be None")

    if not isinstance(name, str):
        raise ValueError(f"Property name must be a string, got {type(name).__name__}")

    if not name:
        raise ValueError("Property name must not be empty")

    return name
