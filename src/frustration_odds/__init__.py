"""Exact win chance of Frustration solitaire.

The player deals a deck calling "ace, two, ..., king" cyclically and loses as
soon as a dealt card matches the called rank. This package counts winning
deals exactly with rook polynomials and inclusion-exclusion, for any deck
made of ``ranks`` distinct ranks and ``suits`` distinct suits.
"""

from .chance import (
    WinChance,
    allowed_deals,
    alternating_sum,
    build_chance_table,
    calculate_win_chance,
    compute_win_chance,
    win_probability,
)
from .data import DeckConfig, EngineConfig, InvalidConfiguration
from .rook import (
    board_polynomial,
    factorial,
    fixed_point_count,
    polynomial_power,
    polynomial_product,
    rook_polynomial,
)

__all__ = [
    "DeckConfig",
    "EngineConfig",
    "InvalidConfiguration",
    "WinChance",
    "allowed_deals",
    "alternating_sum",
    "board_polynomial",
    "build_chance_table",
    "calculate_win_chance",
    "compute_win_chance",
    "factorial",
    "fixed_point_count",
    "polynomial_power",
    "polynomial_product",
    "rook_polynomial",
    "win_probability",
]
