from __future__ import annotations

from frustration_odds.chance import build_chance_table, calculate_win_chance
from frustration_odds.export import CHANCE_TABLE_FIELDS, chance_table_records, format_plain, format_sentence


def test_format_plain_standard_deck() -> None:
    assert format_plain(calculate_win_chance(13, 4)) == "1.623"
    assert format_plain(calculate_win_chance(13, 4), 1) == "1.6"


def test_format_sentence_embeds_deck_and_percentage() -> None:
    sentence = format_sentence(calculate_win_chance(13, 4))
    assert sentence == (
        "With 13 ranks and 4 suits (52 cards), the chance of winning Frustration solitaire is 1.623%."
    )


def test_format_sentence_singular_words() -> None:
    sentence = format_sentence(calculate_win_chance(1, 1), 0)
    assert sentence.startswith("With 1 rank and 1 suit (1 card)")
    assert sentence.endswith("is 0%.")


def test_chance_table_records_schema() -> None:
    records = chance_table_records(build_chance_table(2, 2), decimal_places=2)
    assert len(records) == 4
    for rec in records:
        assert tuple(rec.keys()) == CHANCE_TABLE_FIELDS

    two_by_two = records[-1]
    assert two_by_two["ranks"] == 2
    assert two_by_two["suits"] == 2
    assert two_by_two["total_cards"] == 4
    assert two_by_two["allowed_deals"] == 4
    assert two_by_two["total_deals"] == 24
    assert two_by_two["percentage"] == "16.67"
    assert abs(two_by_two["probability"] - 1 / 6) < 1e-12
