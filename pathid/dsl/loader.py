"""YAML loader + schema validation for batch files.

A batch file lists the paths to encode and optionally the integer width::

    width: 64
    paths:
      - "3.12.5"
      - [3, 12, 5, 1]
      - 7
      - ""

Paths with more than one component must be quoted (or written as lists),
since YAML reads ``3.12`` as a float.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict, List

import jsonschema
import yaml

from pathid.config import CodecConfig
from pathid.logging import get_logger
from pathid.model.identifier import PathIdentifier

logger = get_logger(__name__)

RECOGNIZED_KEYS = {"paths", "width"}


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("pathid.schemas")
        .joinpath("batch.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_batch_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a batch YAML string.

    Returns:
        The validated batch dictionary.

    Raises:
        ValueError: If the document is not a mapping, has unknown keys, or
            contains a path YAML read as a float.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(str(k) for k in data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in batch file: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    # Early check for a better message than the schema's oneOf failure
    paths = data.get("paths")
    if isinstance(paths, list):
        for entry in paths:
            if isinstance(entry, float):
                raise ValueError(
                    f"Path entry {entry!r} was read as a number; quote dotted "
                    "paths (e.g. \"3.12\") or write them as lists"
                )

    jsonschema.validate(data, _load_schema())
    logger.debug(f"Loaded batch file with {len(data['paths'])} paths")
    return data


def encode_batch(data: Dict[str, Any]) -> List[PathIdentifier]:
    """Encode every entry of a validated batch dictionary.

    Raises:
        PathParseError: If a text entry does not fit the configured width.
        PathOverflowError: If an encoding exceeds the configured width.
    """
    config = CodecConfig(width=data["width"]) if "width" in data else None
    ids: List[PathIdentifier] = []
    for entry in data["paths"]:
        if isinstance(entry, str):
            ids.append(PathIdentifier.parse(entry, config))
        elif isinstance(entry, int):
            ids.append(PathIdentifier.from_path((entry,), config))
        else:
            ids.append(PathIdentifier.from_path(entry, config))
    return ids
