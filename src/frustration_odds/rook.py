"""Rook polynomials for the Frustration "forbidden position" board.

Lay the deck out as a board: one row per card, one column per deal position.
A square is forbidden when the card's rank equals the rank called at that
position. For a deck of ``ranks`` x ``suits`` cards the forbidden squares
split into ``ranks`` disjoint ``suits x suits`` blocks (the ``suits`` cards of
one rank against the ``suits`` positions where that rank is called).

Key behaviour
-------------
- The rook polynomial of one block is built from :func:`fixed_point_count`.
- Disjoint blocks multiply, so the whole board is the block polynomial raised
  to the ``ranks``-th power (:func:`polynomial_power`, by squaring).
- Every coefficient is an exact Python ``int``; nothing here touches floats.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from itertools import accumulate

from .data import DeckConfig, Polynomial

logger = logging.getLogger(__name__)


def factorial(n: int) -> int:
    """Return ``n!`` as an exact integer (``0! == 1``)."""

    if n < 0:
        raise ValueError(f"factorial is undefined for negative n={n}")
    return math.factorial(n)


def fixed_point_count(i: int, x: int, y: int) -> int:
    """Count N(S): arrangements whose set of rank-fixed points includes a given ``i``-subset.

    ``x`` is the number of remaining rank columns and ``y`` the number of
    remaining suit rows. The recurrence is::

        N(0, x, y) = 1
        N(1, x, y) = x * y
        N(i, x, y) = sum_{r=1}^{x-i+1} y * N(i-1, x-r, y-1)    (i >= 2)

    An empty summation range gives 0.

    Notes
    -----
    Evaluated bottom-up one level at a time. Level ``k`` only ever needs the
    row ``y - (i - k)``, so each level is a single list indexed by the column
    count and the inner sum is a prefix-sum difference.
    """

    if i < 0 or x < 0 or y < 0:
        raise ValueError(f"fixed_point_count needs non-negative arguments, got i={i} x={x} y={y}")

    if i == 0:
        return 1
    if i == 1:
        return x * y
    if i > x:
        return 0

    suit_rows = y - i + 1
    counts = [columns * suit_rows for columns in range(x + 1)]

    for level in range(2, i + 1):
        suit_rows += 1
        # prefix[k] == sum(counts[:k])
        prefix = [0, *accumulate(counts)]
        counts = [
            suit_rows * (prefix[columns] - prefix[level - 1]) if columns >= level else 0
            for columns in range(x + 1)
        ]

    return counts[x]


@lru_cache(maxsize=None)
def board_polynomial(suits: int) -> Polynomial:
    """Rook polynomial of one ``suits x suits`` block: ``suits + 1`` coefficients."""

    if suits < 1:
        raise ValueError(f"board_polynomial needs suits >= 1, got {suits}")

    return tuple(fixed_point_count(i, suits, suits) for i in range(suits + 1))


def polynomial_product(a: Polynomial, b: Polynomial) -> Polynomial:
    """Multiply two coefficient sequences (discrete convolution).

    ``c[i] = sum(a[j] * b[k] for j + k == i)`` with ``len(c) == len(a) + len(b) - 1``.
    Only indices inside each operand contribute.
    """

    if not a or not b:
        raise ValueError("polynomial_product needs two non-empty coefficient sequences")

    product = [0] * (len(a) + len(b) - 1)
    for j, a_j in enumerate(a):
        if a_j == 0:
            continue
        for k, b_k in enumerate(b):
            product[j + k] += a_j * b_k

    return tuple(product)


def polynomial_power(base: Polynomial, n: int) -> Polynomial:
    """Raise ``base`` to the ``n``-th power by repeated squaring."""

    if n < 0:
        raise ValueError(f"polynomial_power needs n >= 0, got {n}")
    if n == 0:
        return (1,)
    if n == 1:
        return tuple(base)

    half = polynomial_power(base, n // 2)
    product = polynomial_product(half, half)
    if n % 2 == 1:
        product = polynomial_product(product, base)

    return product


def rook_polynomial(ranks: int, suits: int) -> Polynomial:
    """Rook polynomial of the full forbidden-position board.

    Returns ``ranks * suits + 1`` coefficients: coefficient ``k`` counts the
    ways to place ``k`` non-attacking rooks on forbidden squares.
    """

    config = DeckConfig(ranks=ranks, suits=suits)

    squares = board_polynomial(config.suits)
    rook = polynomial_power(squares, config.ranks)
    logger.debug(
        "Rook polynomial for %dx%d deck: degree=%d max_coefficient_bits=%d",
        config.ranks,
        config.suits,
        len(rook) - 1,
        max(c.bit_length() for c in rook),
    )
    return rook
