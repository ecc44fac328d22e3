"""Project-wide constants for :mod:`frustration_odds`.

Keeps default deck shape and engine limits in one place so the CLI, the
config loader and the engine agree on them.
"""

from __future__ import annotations

# A standard deck: ace..king in four suits.
DEFAULT_RANKS: int = 13
DEFAULT_SUITS: int = 4

DEFAULT_DECIMAL_PLACES: int = 3

# Ten standard decks. Factorials and rook coefficients grow combinatorially
# with the number of cards, so anything larger is refused up front.
MAX_TOTAL_CARDS: int = 520
