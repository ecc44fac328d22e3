from __future__ import annotations

import dataclasses

import pytest

from frustration_odds.data import DeckConfig, EngineConfig, InvalidConfiguration


def test_deck_config_total_cards() -> None:
    deck = DeckConfig(ranks=13, suits=4)
    assert deck.total_cards == 52


def test_deck_config_is_frozen() -> None:
    deck = DeckConfig(ranks=13, suits=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        deck.ranks = 12  # type: ignore[misc]


@pytest.mark.parametrize("ranks, suits", [(0, 4), (13, 0), (-3, 4), (13, -1)])
def test_deck_config_non_positive_raises(ranks: int, suits: int) -> None:
    with pytest.raises(InvalidConfiguration, match=">= 1"):
        DeckConfig(ranks=ranks, suits=suits)


@pytest.mark.parametrize("ranks, suits", [(2.5, 4), (13, 4.0), (False, 4), (None, 4)])
def test_deck_config_non_integer_raises(ranks: object, suits: object) -> None:
    with pytest.raises(InvalidConfiguration, match="must be an integer"):
        DeckConfig(ranks=ranks, suits=suits)  # type: ignore[arg-type]


def test_engine_config_defaults() -> None:
    cfg = EngineConfig()
    assert cfg.default_ranks == 13
    assert cfg.default_suits == 4
    assert cfg.decimal_places == 3
    assert cfg.max_total_cards == 520
    assert cfg.default_deck == DeckConfig(ranks=13, suits=4)


def test_engine_config_validation() -> None:
    with pytest.raises(ValueError):
        EngineConfig(default_ranks=0)
    with pytest.raises(ValueError):
        EngineConfig(decimal_places=-1)
    with pytest.raises(ValueError):
        EngineConfig(max_total_cards=0)
    with pytest.raises(ValueError):
        EngineConfig(default_ranks=13, default_suits=4, max_total_cards=51)
