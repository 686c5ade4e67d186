"""Dot-separated text form of path vectors.

``"3.12.5"`` is the path ``(3, 12, 5)`` and the empty string is the root.
Components are plain decimal digits; leading zeros are accepted on input and
dropped on output.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from pathid.config import CODEC_CONFIG, CodecConfig
from pathid.types.base import PathParseError, PathVector

SEPARATOR = "."

_COMPONENT_RE = re.compile(r"[0-9]+")


def parse_path_text(text: str, config: Optional[CodecConfig] = None) -> PathVector:
    """Parse dot-separated text into a path vector.

    Args:
        text: Text such as ``"3.12.5"``; ``""`` denotes the root.
        config: Width settings; defaults to the global ``CODEC_CONFIG``.

    Returns:
        Tuple of path elements.

    Raises:
        PathParseError: If a component is empty, is not a decimal number, or
            does not fit the configured width.
    """
    if not isinstance(text, str):
        raise TypeError(f"Path text must be a string, got {type(text).__name__}")
    if text == "":
        return ()

    cfg = config or CODEC_CONFIG
    elements = []
    for component in text.split(SEPARATOR):
        if component == "":
            raise PathParseError(text, component, "empty component")
        if not _COMPONENT_RE.fullmatch(component):
            raise PathParseError(text, component, "not a non-negative integer")
        value = int(component)
        if value > cfg.max_value:
            raise PathParseError(
                text, component, f"does not fit in {cfg.width} bits"
            )
        elements.append(value)
    return tuple(elements)


def format_path(vector: Iterable[int]) -> str:
    """Format a path vector as canonical dot-separated text."""
    return SEPARATOR.join(str(element) for element in vector)


def normalize_path_text(text: str, config: Optional[CodecConfig] = None) -> str:
    """Return the canonical spelling of ``text`` (e.g. ``"03.1"`` -> ``"3.1"``)."""
    return format_path(parse_path_text(text, config))
