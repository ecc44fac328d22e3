"""Output-sink helpers.

Turns :class:`~frustration_odds.chance.WinChance` results into text or
JSON/CSV-ready records. Nothing here counts anything; see
:mod:`frustration_odds.chance` for that.
"""

from __future__ import annotations

from typing import Any, Iterable

from .chance import WinChance
from .constants import DEFAULT_DECIMAL_PLACES

CHANCE_TABLE_FIELDS: tuple[str, ...] = (
    "ranks",
    "suits",
    "total_cards",
    "allowed_deals",
    "total_deals",
    "probability",
    "percentage",
)


def format_plain(chance: WinChance, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """Just the percentage, e.g. ``1.623``."""

    return format(chance.as_percentage(decimal_places), "f")


def format_sentence(chance: WinChance, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """The percentage embedded in a sentence naming the deck shape."""

    config = chance.config
    rank_word = "rank" if config.ranks == 1 else "ranks"
    suit_word = "suit" if config.suits == 1 else "suits"
    cards_word = "card" if config.total_cards == 1 else "cards"
    return (
        f"With {config.ranks} {rank_word} and {config.suits} {suit_word} "
        f"({config.total_cards} {cards_word}), the chance of winning Frustration solitaire is "
        f"{format_plain(chance, decimal_places)}%."
    )


def chance_table_records(
    chances: Iterable[WinChance],
    *,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
) -> list[dict[str, Any]]:
    """Build one flat record per deck shape.

    Notes
    -----
    - ``allowed_deals`` and ``total_deals`` stay exact integers.
    - ``probability`` is a float for convenience; ``percentage`` is the
      rounded fixed-point text.
    """

    records: list[dict[str, Any]] = []
    for chance in chances:
        config = chance.config
        records.append(
            {
                "ranks": config.ranks,
                "suits": config.suits,
                "total_cards": config.total_cards,
                "allowed_deals": chance.allowed_deals,
                "total_deals": chance.total_deals,
                "probability": float(chance.as_probability()),
                "percentage": format_plain(chance, decimal_places),
            }
        )

    return records
