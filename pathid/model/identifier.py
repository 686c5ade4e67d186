"""Immutable path identifier value type.

``PathIdentifier`` stores the matrix form ``(a, b, c, d)`` of a path vector.
The first column ``(a, c)`` is the reduced rational form; the second column is
the convergent of the path without its last element, which makes appending a
child, dropping the last element, and concatenating two paths O(1).

Identifiers are created by the encoder (``from_path``, ``parse``,
``from_rational``, ``root``) or derived from other identifiers. Constructing one
directly from arbitrary integers is outside the contract: such a value is not
validated and decoding it is undefined.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from pathid import codec
from pathid.config import CODEC_CONFIG, CodecConfig
from pathid.text import format_path, parse_path_text
from pathid.types.base import OFFSET, Matrix


@total_ordering
@dataclass(frozen=True, eq=False)
class PathIdentifier:
    """Bijective encoding of a path vector as a 2x2 integer matrix.

    Attributes:
        a: Numerator of the identifier's rational value.
        b: Numerator of the parent's rational value.
        c: Denominator of the identifier's rational value.
        d: Denominator of the parent's rational value.
    """

    a: int
    b: int
    c: int
    d: int

    @classmethod
    def root(cls) -> PathIdentifier:
        """Return the identifier of the empty path (the identity matrix)."""
        return cls(*codec.IDENTITY)

    @classmethod
    def from_path(
        cls, vector: Iterable[int], config: Optional[CodecConfig] = None
    ) -> PathIdentifier:
        """Encode a sequence of non-negative integers.

        Raises:
            TypeError: If an element is not an integer.
            ValueError: If an element is negative.
            PathOverflowError: If the encoding exceeds the configured width.
        """
        return cls(*codec.encode_matrix(vector, config))

    @classmethod
    def parse(cls, text: str, config: Optional[CodecConfig] = None) -> PathIdentifier:
        """Encode dot-separated path text such as ``"3.12.5"``.

        Raises:
            PathParseError: If the text is malformed.
            PathOverflowError: If the encoding exceeds the configured width.
        """
        return cls.from_path(parse_path_text(text, config), config)

    @classmethod
    def from_rational(
        cls, numerator: int, denominator: int, config: Optional[CodecConfig] = None
    ) -> PathIdentifier:
        """Rebuild an identifier from its reduced rational form.

        ``(1, 0)`` is the root. The pair must have been produced by the encoder.
        """
        return cls(*codec.rational_to_matrix(numerator, denominator, config))

    @classmethod
    def from_matrix(cls, matrix: Iterable[int]) -> PathIdentifier:
        """Wrap a stored matrix ``(a, b, c, d)`` produced by the encoder."""
        a, b, c, d = (int(v) for v in matrix)
        return cls(a, b, c, d)

    @property
    def is_root(self) -> bool:
        """True for the identifier of the empty path."""
        return self.b == 0

    def as_tuple(self) -> Matrix:
        """Return the matrix entries ``(a, b, c, d)``."""
        return (self.a, self.b, self.c, self.d)

    @property
    def rational(self) -> Tuple[int, int]:
        """Reduced ``(numerator, denominator)``; ``(1, 0)`` for the root."""
        return codec.matrix_to_rational(self.as_tuple())

    def as_fraction(self) -> Fraction:
        """Return the rational value as a :class:`fractions.Fraction`.

        Raises:
            ValueError: For the root, whose denominator is zero.
        """
        if self.is_root:
            raise ValueError("The root identifier has no finite rational value")
        return Fraction(self.a, self.c)

    def path(self) -> Iterator[int]:
        """Lazily decode the path vector.

        Every call starts a fresh walk over a copy of the matrix entries.
        """
        return codec.decode_matrix(self.as_tuple())

    def __iter__(self) -> Iterator[int]:
        return self.path()

    def to_list(self) -> List[int]:
        """Return the decoded path vector as a list."""
        return list(self.path())

    @property
    def depth(self) -> int:
        """Number of elements in the path (0 for the root)."""
        return sum(1 for _ in self.path())

    @property
    def last(self) -> Optional[int]:
        """Last path element, or ``None`` for the root."""
        if self.is_root:
            return None
        # The transpose encodes the reversed path, so its first quotient is
        # the last term.
        return self.a // self.b - OFFSET

    def child(
        self, element: int, config: Optional[CodecConfig] = None
    ) -> PathIdentifier:
        """Return the identifier of this path with ``element`` appended."""
        cfg = config or CODEC_CONFIG
        term = codec.element_matrix(element, cfg)[0]
        return PathIdentifier(*codec.append_term(self.as_tuple(), term, cfg))

    def parent(self) -> PathIdentifier:
        """Return the identifier of this path without its last element.

        Raises:
            ValueError: If called on the root.
        """
        if self.is_root:
            raise ValueError("The root identifier has no parent")
        term = self.a // self.b
        return PathIdentifier(
            self.b, self.a - term * self.b, self.d, self.c - term * self.d
        )

    def concat(
        self, other: PathIdentifier, config: Optional[CodecConfig] = None
    ) -> PathIdentifier:
        """Return the identifier of this path followed by ``other``'s path."""
        if not isinstance(other, PathIdentifier):
            raise TypeError(
                f"Can only concatenate PathIdentifier, got {type(other).__name__}"
            )
        return PathIdentifier(
            *codec.multiply(self.as_tuple(), other.as_tuple(), config)
        )

    def __mul__(self, other: Any) -> PathIdentifier:
        if not isinstance(other, PathIdentifier):
            return NotImplemented
        return self.concat(other)

    def convergents(self) -> Iterator[PathIdentifier]:
        """Yield the identifier of every prefix of this path, root first."""
        current = PathIdentifier.root()
        yield current
        for element in self.path():
            current = current.child(element)
            yield current

    def is_ancestor_of(self, other: PathIdentifier) -> bool:
        """True if this path is a proper prefix of ``other``'s path."""
        mine = self.to_list()
        theirs = other.to_list()
        return len(mine) < len(theirs) and theirs[: len(mine)] == mine

    def __eq__(self, other: Any) -> bool:
        """Compare matrix entries with another identifier or a 4-tuple."""
        if isinstance(other, PathIdentifier):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple) and len(other) == 4:
            return self.as_tuple() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __lt__(self, other: Any) -> bool:
        """Order by decoded path (parents sort before their children)."""
        if not isinstance(other, PathIdentifier):
            return NotImplemented
        return self.to_list() < other.to_list()

    def __str__(self) -> str:
        return format_path(self.path())
