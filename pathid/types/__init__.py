"""Shared typing constructs for pathid.

This package defines the offset convention, public type aliases, and the error
types raised by the codec. It contains no encoding logic.
"""

from pathid.types.base import (
    DEFAULT_WIDTH,
    OFFSET,
    Matrix,
    PathOverflowError,
    PathParseError,
    PathVector,
)

__all__ = [
    # Constants
    "OFFSET",
    "DEFAULT_WIDTH",
    # Type aliases
    "Matrix",
    "PathVector",
    # Errors
    "PathOverflowError",
    "PathParseError",
]
