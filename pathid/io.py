"""Storage adapters for path identifiers.

Identifiers round-trip exactly through plain dictionaries (for JSON) and
through ``numpy`` ``uint64`` arrays with one ``(a, b, c, d)`` row per
identifier (for columnar storage).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import numpy as np

from pathid.config import CodecConfig
from pathid.logging import get_logger
from pathid.model.identifier import PathIdentifier

logger = get_logger(__name__)

_UINT64_MAX = int(np.iinfo(np.uint64).max)


def identifier_to_dict(pid: PathIdentifier) -> Dict[str, Any]:
    """Return a JSON-serializable representation of ``pid``.

    Keys: ``path`` (canonical text), ``vector``, ``matrix`` and ``rational``.
    """
    return {
        "path": str(pid),
        "vector": pid.to_list(),
        "matrix": list(pid.as_tuple()),
        "rational": list(pid.rational),
    }


def identifier_from_dict(
    data: Dict[str, Any], config: Optional[CodecConfig] = None
) -> PathIdentifier:
    """Rebuild an identifier from :func:`identifier_to_dict` output.

    The identifier is re-encoded from ``path``, else ``vector``, else the
    rational column of ``matrix``. Any stored ``matrix`` (and a ``vector``
    stored next to a ``path``) must equal that encoding entry for entry.

    Raises:
        ValueError: If no usable key is present, the keys disagree, or the
            stored matrix is not one the encoder produces.
    """
    if "path" in data:
        pid = PathIdentifier.parse(data["path"], config)
    elif "vector" in data:
        pid = PathIdentifier.from_path(data["vector"], config)
    elif "matrix" in data:
        stored = PathIdentifier.from_matrix(data["matrix"])
        try:
            pid = PathIdentifier.from_rational(stored.a, stored.c, config)
        except ValueError as e:
            raise ValueError(
                f"Stored matrix {stored.as_tuple()} is not a path identifier: {e}"
            ) from e
    else:
        raise ValueError(
            "Identifier data must contain one of 'matrix', 'vector' or 'path'"
        )

    if "path" in data and "vector" in data:
        if PathIdentifier.from_path(data["vector"], config) != pid:
            raise ValueError(
                f"Stored vector {data['vector']!r} does not match path "
                f"{data['path']!r}"
            )
    if "matrix" in data:
        stored = PathIdentifier.from_matrix(data["matrix"])
        if stored != pid:
            raise ValueError(
                f"Stored matrix {stored.as_tuple()} does not match the "
                f"encoding {pid.as_tuple()} of path {str(pid)!r}"
            )
    return pid


def identifiers_to_array(ids: Iterable[PathIdentifier]) -> np.ndarray:
    """Pack identifiers into an ``(n, 4)`` ``uint64`` array.

    Raises:
        ValueError: If an entry does not fit in 64 bits.
    """
    rows: List[tuple] = []
    for pid in ids:
        entries = pid.as_tuple()
        if max(entries) > _UINT64_MAX:
            raise ValueError(
                f"Identifier {entries} does not fit in a uint64 array"
            )
        rows.append(entries)
    logger.debug(f"Packing {len(rows)} identifiers into uint64 array")
    return np.array(rows, dtype=np.uint64).reshape(len(rows), 4)


def identifiers_from_array(array: np.ndarray) -> List[PathIdentifier]:
    """Unpack an ``(n, 4)`` array produced by :func:`identifiers_to_array`.

    Raises:
        ValueError: If the array does not have shape ``(n, 4)``.
    """
    arr = np.asarray(array)
    if arr.ndim != 2 or arr.shape[1] != 4:
        raise ValueError(f"Expected an array of shape (n, 4), got {arr.shape}")
    return [PathIdentifier.from_matrix(row.tolist()) for row in arr]
