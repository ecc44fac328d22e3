"""Domain data model for the Frustration win-chance engine.

This module is intentionally *pure*: it defines the configuration objects and
the error type used throughout the project, with no counting logic and no
file formats.

Counting lives in :mod:`frustration_odds.rook` and :mod:`frustration_odds.chance`;
config files are read by :mod:`frustration_odds.io`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from .constants import DEFAULT_DECIMAL_PLACES, DEFAULT_RANKS, DEFAULT_SUITS, MAX_TOTAL_CARDS


class InvalidConfiguration(ValueError):
    """Raised when a deck shape can't be counted (non-integer, non-positive or too large)."""


# Coefficients of x**0, x**1, ... as exact integers.
Polynomial = Tuple[int, ...]


def _is_strict_int(value: Any) -> bool:
    # bool is an int subclass but never a meaningful card count.
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class DeckConfig:
    """A deck made of ``ranks`` distinct ranks in ``suits`` distinct suits."""

    ranks: int
    suits: int

    def __post_init__(self) -> None:
        for field_name in ("ranks", "suits"):
            value = getattr(self, field_name)
            if not _is_strict_int(value):
                raise InvalidConfiguration(f"DeckConfig.{field_name} must be an integer, got {value!r}")
            if value < 1:
                raise InvalidConfiguration(f"DeckConfig.{field_name} must be >= 1, got {value}")

    @property
    def total_cards(self) -> int:
        return self.ranks * self.suits


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Defaults and limits used by the CLI and :func:`~frustration_odds.chance.calculate_win_chance`."""

    default_ranks: int = DEFAULT_RANKS
    default_suits: int = DEFAULT_SUITS
    decimal_places: int = DEFAULT_DECIMAL_PLACES
    max_total_cards: int = MAX_TOTAL_CARDS

    def __post_init__(self) -> None:
        for field_name in ("default_ranks", "default_suits", "decimal_places", "max_total_cards"):
            if not _is_strict_int(getattr(self, field_name)):
                raise ValueError(f"EngineConfig.{field_name} must be an integer")

        if self.default_ranks < 1:
            raise ValueError("EngineConfig.default_ranks must be >= 1")
        if self.default_suits < 1:
            raise ValueError("EngineConfig.default_suits must be >= 1")
        if self.decimal_places < 0:
            raise ValueError("EngineConfig.decimal_places must be >= 0")
        if self.max_total_cards < 1:
            raise ValueError("EngineConfig.max_total_cards must be >= 1")
        if self.default_ranks * self.default_suits > self.max_total_cards:
            raise ValueError("EngineConfig default deck exceeds max_total_cards")

    @property
    def default_deck(self) -> DeckConfig:
        return DeckConfig(ranks=self.default_ranks, suits=self.default_suits)
