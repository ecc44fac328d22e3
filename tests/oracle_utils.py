"""Brute-force oracle for winning Frustration deals.

Enumerates every ordering of a small deck and checks it against the called
ranks directly. Completely independent of the rook-polynomial engine, so it
is only usable for tiny decks (n! orderings).
"""

from __future__ import annotations

from fractions import Fraction
from itertools import permutations
from math import factorial
from operator import ne


def deck_ranks(ranks: int, suits: int) -> list[int]:
    """Rank of every physical card; cards of the same rank differ only by suit."""

    return [card // suits for card in range(ranks * suits)]


def called_ranks(ranks: int, suits: int) -> list[int]:
    """Rank called at each deal position: ace, two, ..., then wrap around."""

    return [position % ranks for position in range(ranks * suits)]


def count_winning_deals(ranks: int, suits: int) -> int:
    """Number of orderings of the distinguishable cards with no rank match."""

    called = called_ranks(ranks, suits)
    # permutations() treats equal ranks at different indices as different cards.
    return sum(1 for deal in permutations(deck_ranks(ranks, suits)) if all(map(ne, deal, called)))


def brute_force_probability(ranks: int, suits: int) -> Fraction:
    return Fraction(count_winning_deals(ranks, suits), factorial(ranks * suits))
