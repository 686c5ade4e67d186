"""pathid: bijective path identifiers for tree positions.

A path vector such as ``[3, 12, 5]`` (a sequence of non-negative child
indexes) is encoded as a single identifier: a reduced rational number built
from a continued fraction, held as a 2x2 integer matrix so that paths can be
extended and concatenated cheaply. Decoding recovers the exact original
sequence.

Primary API:
    PathIdentifier - Immutable identifier value (parse, from_path, path())
    encode_rational()/decode_rational() - Rational-form codec
    encode_matrix()/decode_matrix() - Matrix-form codec
    parse_path_text()/format_path() - Dot-separated text form

Example:
    from pathid import PathIdentifier

    pid = PathIdentifier.parse("3.12.5")
    pid.rational          # (502, 99)
    list(pid.path())      # [3, 12, 5]
    pid.child(1)          # identifier of 3.12.5.1
"""

from __future__ import annotations

from pathid import cli, logging
from pathid._version import __version__
from pathid.codec import (
    decode_matrix,
    decode_rational,
    encode_matrix,
    encode_rational,
)
from pathid.config import CODEC_CONFIG, CodecConfig
from pathid.io import (
    identifier_from_dict,
    identifier_to_dict,
    identifiers_from_array,
    identifiers_to_array,
)
from pathid.model.identifier import PathIdentifier
from pathid.text import format_path, parse_path_text
from pathid.types.base import OFFSET, PathOverflowError, PathParseError

__all__ = [
    # Version
    "__version__",
    # Model
    "PathIdentifier",
    # Codec
    "encode_rational",
    "decode_rational",
    "encode_matrix",
    "decode_matrix",
    "OFFSET",
    # Text
    "parse_path_text",
    "format_path",
    # Storage
    "identifier_to_dict",
    "identifier_from_dict",
    "identifiers_to_array",
    "identifiers_from_array",
    # Configuration
    "CodecConfig",
    "CODEC_CONFIG",
    # Errors
    "PathParseError",
    "PathOverflowError",
    # Utilities
    "cli",
    "logging",
]
