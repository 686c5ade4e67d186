"""Tests for the PathIdentifier value type."""

import dataclasses
from fractions import Fraction

import pytest

from pathid.config import CodecConfig
from pathid.model.identifier import PathIdentifier
from pathid.types.base import PathOverflowError, PathParseError
from tests.sample_paths import REFERENCE_PATHS, REFERENCE_TEXT


def parse_id(s: str) -> PathIdentifier:
    return PathIdentifier.parse(s)


@pytest.mark.parametrize(
    "text,expected",
    list(zip(REFERENCE_TEXT, [m for _, m in REFERENCE_PATHS])),
)
def test_can_parse_paths(text, expected) -> None:
    assert parse_id(text) == expected


@pytest.mark.parametrize("vector,expected", REFERENCE_PATHS)
def test_can_build_from_path_vectors(vector, expected) -> None:
    assert PathIdentifier.from_path(list(vector)) == expected
    assert PathIdentifier.from_path(iter(vector)) == expected


@pytest.mark.parametrize(
    "text,vector",
    list(zip(REFERENCE_TEXT, [v for v, _ in REFERENCE_PATHS])),
)
def test_can_generate_paths(text, vector) -> None:
    assert tuple(parse_id(text).path()) == vector
    assert parse_id(text).to_list() == list(vector)
    assert list(parse_id(text)) == list(vector)


def test_root() -> None:
    root = PathIdentifier.root()
    assert root == (1, 0, 0, 1)
    assert root.is_root
    assert root.depth == 0
    assert root.rational == (1, 0)
    assert root.last is None
    assert str(root) == ""
    assert root == parse_id("")
    assert root == PathIdentifier.from_path([])
    assert not parse_id("0").is_root


def test_root_is_unique_empty_decoding(small_vectors) -> None:
    roots = [v for v in small_vectors if PathIdentifier.from_path(v).to_list() == []]
    assert roots == [()]


def test_rational_and_fraction() -> None:
    pid = parse_id("3.12.5")
    assert pid.rational == (502, 99)
    assert pid.as_fraction() == Fraction(502, 99)
    with pytest.raises(ValueError):
        PathIdentifier.root().as_fraction()


def test_from_rational() -> None:
    assert PathIdentifier.from_rational(36773, 7252) == parse_id("3.12.5.1.21")
    assert PathIdentifier.from_rational(1, 0) == PathIdentifier.root()


def test_from_matrix_accepts_stored_entries() -> None:
    pid = PathIdentifier.from_matrix([71, 5, 14, 1])
    assert pid == parse_id("3.12")
    assert type(pid.a) is int


def test_path_restarts_on_every_call() -> None:
    pid = parse_id("3.12.5")
    first = pid.path()
    assert next(first) == 3
    second = pid.path()
    assert list(second) == [3, 12, 5]
    assert list(first) == [12, 5]
    assert pid == (502, 71, 99, 14)


def test_identifier_is_immutable() -> None:
    pid = parse_id("3")
    with pytest.raises(dataclasses.FrozenInstanceError):
        pid.a = 7  # type: ignore[misc]


def test_equality_and_hashing() -> None:
    a = parse_id("3.12")
    b = PathIdentifier.from_path([3, 12])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, parse_id("12.3")}) == 2
    assert a != parse_id("12.3")
    assert a != "3.12"
    assert a != (71, 14)


def test_child_and_parent() -> None:
    pid = parse_id("3.12.5")
    assert pid.child(1) == parse_id("3.12.5.1")
    assert pid.child(1).child(21) == (36773, 1577, 7252, 311)
    assert pid.parent() == parse_id("3.12")
    assert pid.parent().parent().parent() == PathIdentifier.root()
    assert pid.last == 5
    assert parse_id("3.12.5.0").last == 0
    with pytest.raises(ValueError):
        PathIdentifier.root().parent()


def test_parent_inverts_child(small_vectors) -> None:
    for vector in small_vectors:
        pid = PathIdentifier.from_path(vector)
        for element in (0, 1, 7):
            child = pid.child(element)
            assert child.parent() == pid
            assert child.last == element
            assert child.depth == len(vector) + 1


def test_child_rejects_bad_elements() -> None:
    pid = parse_id("3")
    with pytest.raises(ValueError):
        pid.child(-1)
    with pytest.raises(TypeError):
        pid.child("1")  # type: ignore[arg-type]
    with pytest.raises(PathOverflowError):
        pid.child(200, CodecConfig(width=8))


def test_concatenation() -> None:
    left = parse_id("3.12")
    right = parse_id("5.1.21")
    assert left * right == parse_id("3.12.5.1.21")
    assert left.concat(right) == parse_id("3.12.5.1.21")
    assert PathIdentifier.root() * right == right
    assert left * PathIdentifier.root() == left
    with pytest.raises(TypeError):
        left.concat((5, 1, 1, 0))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        left * 3  # type: ignore[operator]


def test_concatenation_is_associative() -> None:
    a, b, c = parse_id("1.2"), parse_id("0"), parse_id("4.4")
    assert (a * b) * c == a * (b * c) == parse_id("1.2.0.4.4")


def test_convergents() -> None:
    prefixes = list(parse_id("3.12.5").convergents())
    assert prefixes == [
        PathIdentifier.root(),
        parse_id("3"),
        parse_id("3.12"),
        parse_id("3.12.5"),
    ]
    assert list(PathIdentifier.root().convergents()) == [PathIdentifier.root()]


def test_is_ancestor_of() -> None:
    root = PathIdentifier.root()
    assert root.is_ancestor_of(parse_id("3"))
    assert parse_id("3").is_ancestor_of(parse_id("3.12"))
    assert parse_id("3").is_ancestor_of(parse_id("3.12.5"))
    assert not parse_id("3.12").is_ancestor_of(parse_id("3.12"))
    assert not parse_id("3.1").is_ancestor_of(parse_id("3.12"))
    assert not parse_id("3.12").is_ancestor_of(parse_id("3"))
    assert not root.is_ancestor_of(root)


def test_ordering_follows_document_order() -> None:
    ids = [parse_id(t) for t in ["3.12", "3", "2.9", "", "3.2", "10"]]
    assert [str(p) for p in sorted(ids)] == ["", "2.9", "3", "3.2", "3.12", "10"]
    assert parse_id("3") < parse_id("3.0")
    assert parse_id("3.12") >= parse_id("3.12")
    assert parse_id("4") > parse_id("3.99")


def test_parse_errors_propagate() -> None:
    with pytest.raises(PathParseError):
        parse_id("3..12")
    with pytest.raises(PathOverflowError):
        PathIdentifier.parse("3.12.5", CodecConfig(width=8))
