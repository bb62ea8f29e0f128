# SPDX-License-Identifier: MIT
"""Conversion of matched numeric components to unsigned 64-bit integers."""

from __future__ import annotations

from .errors import NumericConversionError

# Largest value a major, minor or patch component may hold
MAX_COMPONENT = 2**64 - 1


def convert_numeric(text: str, field: str) -> int:
    """Convert a numeric version component to an integer.

    Leading zeros are not checked here; the grammar rejects them before
    conversion is attempted.

    Args:
        text: The matched digits
        field: Name of the component ("major", "minor" or "patch")

    Returns:
        The component value

    Raises:
        NumericConversionError: If the text is empty, contains anything but
            ASCII digits, or does not fit in 64 unsigned bits

    Examples:
        >>> convert_numeric("42", "minor")
        42
    """
    if not text:
        raise NumericConversionError(field, f"{field} version is empty")

    if not (text.isascii() and text.isdigit()):
        raise NumericConversionError(field, f"{field} version is not numeric: {text!r}")

    value = int(text)
    if value > MAX_COMPONENT:
        raise NumericConversionError(field, f"{field} version is out of range: {text}")

    return value
