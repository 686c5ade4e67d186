"""Continued-fraction codec between path vectors and path identifiers.

A path vector ``[x0, x1, ..., xn]`` is mapped to the continued fraction
``[x0 + OFFSET; x1 + OFFSET, ..., xn + OFFSET]``. Two equivalent forms are
provided:

* Rational form: the value of the continued fraction as a reduced
  ``(numerator, denominator)`` pair. Encoding folds the elements from the
  innermost (last) term outward; decoding is Euclid's algorithm.
* Matrix form: the product ``E(x0) E(x1) ... E(xn)`` of elementary matrices
  ``E(x) = [[x + OFFSET, 1], [1, 0]]``. The first column of the product holds
  the rational form and the second column holds the previous convergent, so
  elements can be appended, removed, or whole paths concatenated in O(1).

The root (empty path) encodes to ``(1, 0)`` in rational form and to the
identity matrix in matrix form.

All arithmetic on the encode path is checked against the configured integer
width; exceeding it raises :class:`~pathid.types.base.PathOverflowError`
instead of wrapping.

Decoding assumes its input was produced by the encoder. Arbitrary rationals
or matrices are not validated and decoding them is undefined.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from pathid.config import CODEC_CONFIG, CodecConfig
from pathid.types.base import OFFSET, Matrix

#: Identity matrix; the matrix form of the root.
IDENTITY: Matrix = (1, 0, 0, 1)

#: Rational form of the root. The zero denominator marks "no terms".
ROOT_RATIONAL: Tuple[int, int] = (1, 0)


def validate_element(element: object) -> int:
    """Return ``element`` if it is a non-negative integer.

    Raises:
        TypeError: If ``element`` is not an ``int`` (``bool`` is rejected too).
        ValueError: If ``element`` is negative.
    """
    if isinstance(element, bool) or not isinstance(element, int):
        raise TypeError(
            f"Path elements must be integers, got {type(element).__name__}"
        )
    if element < 0:
        raise ValueError(f"Path elements must be non-negative, got {element}")
    return element


def _term(element: object, config: CodecConfig) -> int:
    """Continued-fraction term for a path element (element plus offset)."""
    return config.check(validate_element(element) + OFFSET)


def encode_rational(
    vector: Iterable[int], config: Optional[CodecConfig] = None
) -> Tuple[int, int]:
    """Encode a path vector as a reduced ``(numerator, denominator)`` pair.

    Starting from ``0/1``, each element (last to first) updates the ratio to
    ``1 / (ratio + element + OFFSET)``; the result is the reciprocal of the
    final ratio. Every step maps a coprime pair to a coprime pair, so no gcd
    reduction is needed.

    Args:
        vector: Path elements in root-to-leaf order.
        config: Width settings; defaults to the global ``CODEC_CONFIG``.

    Returns:
        ``(numerator, denominator)``; ``(1, 0)`` for the empty path.

    Raises:
        PathOverflowError: If any intermediate value exceeds the width.
    """
    cfg = config or CODEC_CONFIG
    terms = [_term(element, cfg) for element in vector]

    # ratio = p / q
    p, q = 0, 1
    for term in reversed(terms):
        p, q = q, cfg.check(p + cfg.check(term * q))
    return q, p


def decode_rational(numerator: int, denominator: int) -> Iterator[int]:
    """Yield the path vector encoded by a reduced rational.

    Runs Euclid's algorithm: each quotient minus ``OFFSET`` is one path
    element, and the walk ends when the remainder reaches zero. The root
    ``(1, 0)`` yields nothing.
    """
    n, d = numerator, denominator
    while d != 0:
        q, r = divmod(n, d)
        yield q - OFFSET
        n, d = d, r


def element_matrix(element: int, config: Optional[CodecConfig] = None) -> Matrix:
    """Return the elementary matrix ``[[element + OFFSET, 1], [1, 0]]``."""
    cfg = config or CODEC_CONFIG
    return (_term(element, cfg), 1, 1, 0)


def multiply(
    left: Matrix, right: Matrix, config: Optional[CodecConfig] = None
) -> Matrix:
    """Checked 2x2 matrix product ``left x right``.

    Raises:
        PathOverflowError: If any entry of the product exceeds the width.
    """
    cfg = config or CODEC_CONFIG
    s0, s1, s2, s3 = left
    o0, o1, o2, o3 = right
    # | s0 s1 |   | o0 o1 |   | s0o0 + s1o2  s0o1 + s1o3 |
    # | s2 s3 | x | o2 o3 | = | s2o0 + s3o2  s2o1 + s3o3 |
    return (
        cfg.check(s0 * o0 + s1 * o2),
        cfg.check(s0 * o1 + s1 * o3),
        cfg.check(s2 * o0 + s3 * o2),
        cfg.check(s2 * o1 + s3 * o3),
    )


def append_term(matrix: Matrix, term: int, config: CodecConfig) -> Matrix:
    """Right-multiply ``matrix`` by ``[[term, 1], [1, 0]]`` with overflow checks."""
    a, b, c, d = matrix
    return (
        config.check(config.check(term * a) + b),
        a,
        config.check(config.check(term * c) + d),
        c,
    )


def encode_matrix(
    vector: Iterable[int], config: Optional[CodecConfig] = None
) -> Matrix:
    """Encode a path vector as a product of elementary matrices.

    Elements are multiplied on the right in forward order; matrix products do
    not commute, which is what makes the encoding position-sensitive.

    Args:
        vector: Path elements in root-to-leaf order.
        config: Width settings; defaults to the global ``CODEC_CONFIG``.

    Returns:
        Matrix ``(a, b, c, d)``; the identity for the empty path.

    Raises:
        PathOverflowError: If any entry exceeds the width.
    """
    cfg = config or CODEC_CONFIG
    matrix = IDENTITY
    for element in vector:
        matrix = append_term(matrix, _term(element, cfg), cfg)
    return matrix


def decode_matrix(matrix: Matrix) -> Iterator[int]:
    """Yield the path vector encoded by a product of elementary matrices.

    Each step factors ``[[q, 1], [1, 0]]`` off the left with ``q = a // c``
    and emits ``q - OFFSET``; the walk ends once the remaining matrix is the
    identity (upper-right entry zero).
    """
    a, b, c, d = matrix
    while b != 0:
        q = a // c
        yield q - OFFSET
        a, b, c, d = c, d, a - c * q, b - d * q


def matrix_to_rational(matrix: Matrix) -> Tuple[int, int]:
    """Return the rational form ``(a, c)`` of a matrix-form identifier.

    Products of elementary matrices have determinant +1 or -1, so the first
    column is always coprime and already reduced.
    """
    return matrix[0], matrix[2]


def rational_to_matrix(
    numerator: int, denominator: int, config: Optional[CodecConfig] = None
) -> Matrix:
    """Rebuild the matrix form from the rational form."""
    return encode_matrix(decode_rational(numerator, denominator), config)
