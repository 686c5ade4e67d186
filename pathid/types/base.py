"""Base constants, aliases, and error types for path identifiers."""

from __future__ import annotations

from typing import Optional, Tuple

#: Added to every path element before it is folded into an identifier and
#: subtracted again when decoding. Keeps every continued-fraction term >= 2,
#: so a path such as ``[3, 5, 1]`` can never collide with ``[3, 6]``.
OFFSET = 2

#: Default unsigned integer width (in bits) for identifier entries.
DEFAULT_WIDTH = 64

#: Ordered sequence of non-negative integers describing a tree position.
PathVector = Tuple[int, ...]

#: 2x2 matrix stored row-major as ``(a, b, c, d)`` for ``[[a, b], [c, d]]``.
Matrix = Tuple[int, int, int, int]


class PathParseError(ValueError):
    """Raised when dot-separated path text cannot be parsed.

    Attributes:
        text: The full text that failed to parse.
        component: The offending dot-separated component, if known.
    """

    def __init__(self, text: str, component: Optional[str], reason: str) -> None:
        self.text = text
        self.component = component
        if component is None:
            message = f"Invalid path text {text!r}: {reason}"
        else:
            message = f"Invalid path component {component!r} in {text!r}: {reason}"
        super().__init__(message)


class PathOverflowError(OverflowError):
    """Raised when an identifier entry does not fit the configured integer width.

    Attributes:
        width: Configured width in bits.
        value: The value that exceeded the range.
    """

    def __init__(self, width: int, value: int) -> None:
        self.width = width
        self.value = value
        super().__init__(
            f"Value {value} does not fit in an unsigned {width}-bit integer"
        )
