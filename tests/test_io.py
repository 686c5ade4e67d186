"""Tests for storage adapters in `pathid.io`."""

import json

import numpy as np
import pytest

from pathid.config import CodecConfig
from pathid.io import (
    identifier_from_dict,
    identifier_to_dict,
    identifiers_from_array,
    identifiers_to_array,
)
from pathid.model.identifier import PathIdentifier
from tests.sample_paths import REFERENCE_TEXT


def test_identifier_to_dict() -> None:
    data = identifier_to_dict(PathIdentifier.parse("3.12.5"))
    assert data == {
        "path": "3.12.5",
        "vector": [3, 12, 5],
        "matrix": [502, 71, 99, 14],
        "rational": [502, 99],
    }
    root = identifier_to_dict(PathIdentifier.root())
    assert root["path"] == "" and root["vector"] == []
    assert root["rational"] == [1, 0]


def test_dict_round_trip_through_json() -> None:
    for text in REFERENCE_TEXT:
        pid = PathIdentifier.parse(text)
        restored = identifier_from_dict(json.loads(json.dumps(identifier_to_dict(pid))))
        assert restored == pid


def test_identifier_from_partial_dicts() -> None:
    expected = PathIdentifier.parse("3.12")
    assert identifier_from_dict({"matrix": [71, 5, 14, 1]}) == expected
    assert identifier_from_dict({"vector": [3, 12]}) == expected
    assert identifier_from_dict({"path": "3.12"}) == expected


def test_identifier_from_dict_mismatch() -> None:
    with pytest.raises(ValueError, match="does not match"):
        identifier_from_dict({"path": "3.12", "matrix": [5, 1, 1, 0]})
    with pytest.raises(ValueError, match="must contain"):
        identifier_from_dict({"rational": [5, 1]})


def test_array_round_trip() -> None:
    ids = [PathIdentifier.parse(text) for text in REFERENCE_TEXT]
    arr = identifiers_to_array(ids)
    assert arr.dtype == np.uint64
    assert arr.shape == (len(ids), 4)
    assert arr[3].tolist() == [502, 71, 99, 14]
    assert identifiers_from_array(arr) == ids


def test_array_holds_full_width_entries() -> None:
    big = PathIdentifier.from_path([2**64 - 3])
    arr = identifiers_to_array([big])
    assert int(arr[0, 0]) == 2**64 - 1
    assert identifiers_from_array(arr) == [big]


def test_empty_array() -> None:
    arr = identifiers_to_array([])
    assert arr.shape == (0, 4)
    assert identifiers_from_array(arr) == []


def test_array_rejects_entries_wider_than_64_bits() -> None:
    wide = PathIdentifier.from_path([2**64], CodecConfig(width=80))
    with pytest.raises(ValueError, match="uint64"):
        identifiers_to_array([wide])


def test_array_accepts_small_identifiers_from_a_wide_config() -> None:
    pid = PathIdentifier.from_path([3, 12, 5], CodecConfig(width=128))
    arr = identifiers_to_array([pid])
    assert identifiers_from_array(arr) == [pid]


def test_array_shape_validation() -> None:
    with pytest.raises(ValueError, match="shape"):
        identifiers_from_array(np.zeros((3, 2), dtype=np.uint64))
    with pytest.raises(ValueError, match="shape"):
        identifiers_from_array(np.zeros(4, dtype=np.uint64))


def test_matrix_with_wrong_second_column_rejected() -> None:
    # Decodes to "3" but is not the encoding of "3"
    with pytest.raises(ValueError, match="does not match"):
        identifier_from_dict({"path": "3", "matrix": [5, 7, 1, 0]})
    with pytest.raises(ValueError, match="does not match"):
        identifier_from_dict({"matrix": [5, 7, 1, 0]})


def test_corrupt_matrix_raises_value_error() -> None:
    with pytest.raises(ValueError, match="does not match"):
        identifier_from_dict({"path": "3.12", "matrix": [71, 5, 14, 2]})
    with pytest.raises(ValueError, match="not a path identifier"):
        identifier_from_dict({"matrix": [3, 1, 5, 0]})


def test_vector_must_match_path() -> None:
    with pytest.raises(ValueError, match="does not match"):
        identifier_from_dict({"path": "3.12", "vector": [12, 3]})


def test_loaded_identifier_equals_parsed_identifier() -> None:
    for text in REFERENCE_TEXT:
        pid = PathIdentifier.parse(text)
        data = identifier_to_dict(pid)
        loaded = identifier_from_dict(data)
        assert loaded == PathIdentifier.parse(data["path"])
        assert str(loaded) == text
