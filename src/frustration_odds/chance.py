"""Win chance of Frustration solitaire by inclusion-exclusion.

With ``r_k`` the rook polynomial coefficients of the forbidden-position board
and ``n = ranks * suits`` cards, the number of winning deals is::

    sum_{k=0}^{n} (-1)**k * r_k * (n - k)!

Dividing by ``n!`` gives the probability. All arithmetic is exact
(``int`` and :class:`fractions.Fraction`); the only rounding happens when a
percentage is rendered for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import List, Sequence

from .constants import DEFAULT_DECIMAL_PLACES, MAX_TOTAL_CARDS
from .data import DeckConfig, InvalidConfiguration
from .rook import factorial, rook_polynomial

logger = logging.getLogger(__name__)


def alternating_sum(rook_coefficients: Sequence[int], total_cards: int) -> int:
    """Inclusion-exclusion count of arrangements that avoid every forbidden square.

    Coefficients past the end of ``rook_coefficients`` count as 0.
    """

    if total_cards < 0:
        raise ValueError(f"total_cards must be >= 0, got {total_cards}")

    allowed = 0
    for k, r_k in enumerate(rook_coefficients[: total_cards + 1]):
        term = r_k * factorial(total_cards - k)
        allowed += -term if k % 2 else term

    return allowed


def allowed_deals(config: DeckConfig) -> int:
    """Number of orderings of the deck that never match the called rank."""

    rook = rook_polynomial(config.ranks, config.suits)
    allowed = alternating_sum(rook, config.total_cards)
    if allowed < 0:
        raise ArithmeticError(f"Negative winning-deal count {allowed} for {config}")

    logger.debug("Allowed deals for %dx%d deck: %d", config.ranks, config.suits, allowed)
    return allowed


def _round_half_up(numerator: int, denominator: int) -> int:
    quotient, remainder = divmod(numerator, denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    return quotient


@dataclass(frozen=True, slots=True)
class WinChance:
    """Exact winning-deal count for one deck shape.

    ``allowed_deals / total_deals`` is the probability of winning. Nothing
    derived is stored; every view is computed from the two counts.
    """

    config: DeckConfig
    allowed_deals: int
    total_deals: int

    def __post_init__(self) -> None:
        if self.total_deals < 1:
            raise ValueError("WinChance.total_deals must be >= 1")
        if not 0 <= self.allowed_deals <= self.total_deals:
            raise ValueError("WinChance.allowed_deals must lie in [0, total_deals]")

    def as_probability(self) -> Fraction:
        return Fraction(self.allowed_deals, self.total_deals)

    def as_exact_percentage(self) -> Fraction:
        """Probability x 100 with no rounding."""

        return self.as_probability() * 100

    def as_percentage(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> Decimal:
        """Probability x 100, rounded half-up to ``decimal_places``.

        The rounding is done on exact integers, so ties are detected exactly
        and the result carries exactly ``decimal_places`` digits after the point.
        """

        if decimal_places < 0:
            raise ValueError(f"decimal_places must be >= 0, got {decimal_places}")

        scaled = _round_half_up(self.allowed_deals * 100 * 10**decimal_places, self.total_deals)
        return Decimal(f"{scaled}E-{decimal_places}")


def _check_card_bound(config: DeckConfig, max_total_cards: int) -> None:
    if config.total_cards > max_total_cards:
        raise InvalidConfiguration(
            f"{config.ranks}x{config.suits} deck has {config.total_cards} cards, "
            f"more than the supported maximum of {max_total_cards}"
        )


def calculate_win_chance(ranks: int, suits: int, *, max_total_cards: int = MAX_TOTAL_CARDS) -> WinChance:
    """Top-level entrypoint: validate the deck shape, count winning deals, build a :class:`WinChance`.

    Raises
    ------
    InvalidConfiguration
        If ``ranks``/``suits`` aren't positive integers or the deck holds more
        than ``max_total_cards`` cards. Nothing is computed in that case.
    """

    config = DeckConfig(ranks=ranks, suits=suits)
    _check_card_bound(config, max_total_cards)

    chance = WinChance(
        config=config,
        allowed_deals=allowed_deals(config),
        total_deals=factorial(config.total_cards),
    )
    logger.debug("Win chance for %dx%d deck: %s", ranks, suits, chance.as_probability())
    return chance


def win_probability(ranks: int, suits: int) -> Fraction:
    """Exact probability of winning with a ``ranks`` x ``suits`` deck."""

    return calculate_win_chance(ranks, suits).as_probability()


def compute_win_chance(ranks: int, suits: int, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """Win chance as percentage text, e.g. ``"1.623"`` for a standard deck."""

    return format(calculate_win_chance(ranks, suits).as_percentage(decimal_places), "f")


def build_chance_table(
    max_ranks: int,
    max_suits: int,
    *,
    max_total_cards: int = MAX_TOTAL_CARDS,
) -> List[WinChance]:
    """Win chances for every deck shape in ``1..max_ranks`` x ``1..max_suits``.

    Results are ordered ranks-major. The largest shape is checked against
    ``max_total_cards`` before anything is counted.
    """

    largest = DeckConfig(ranks=max_ranks, suits=max_suits)
    _check_card_bound(largest, max_total_cards)

    logger.info("Building chance table for up to %d ranks x %d suits", max_ranks, max_suits)
    table: List[WinChance] = []
    for ranks in range(1, max_ranks + 1):
        for suits in range(1, max_suits + 1):
            table.append(calculate_win_chance(ranks, suits, max_total_cards=max_total_cards))

    return table
