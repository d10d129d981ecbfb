from datetime import date

import pytest

from engine.errors import InvalidCount
from engine.tarot import (
    ALL_CARDS,
    Orientation,
    assign_orientations,
    date_seed,
    draw,
    draw_cards,
    normalize_seed,
    orientation_label,
)


def test_draw_returns_distinct_cards() -> None:
    cards = draw(ALL_CARDS, 24, seed=7)

    assert len(cards) == 24
    assert len({card.id for card in cards}) == 24


def test_draw_whole_deck_is_a_permutation() -> None:
    cards = draw(ALL_CARDS, len(ALL_CARDS), seed="full")

    assert sorted(card.id for card in cards) == sorted(card.id for card in ALL_CARDS)


def test_same_seed_gives_same_draw() -> None:
    first = draw_cards(ALL_CARDS, 5, seed="2024-03-01-tarot-timer")
    second = draw_cards(ALL_CARDS, 5, seed="2024-03-01-tarot-timer")

    assert first == second


def test_different_seeds_usually_differ() -> None:
    first = [card.id for card in draw(ALL_CARDS, 10, seed="a")]
    second = [card.id for card in draw(ALL_CARDS, 10, seed="b")]

    assert first != second


def test_duplicate_cards_in_deck_are_ignored() -> None:
    deck = list(ALL_CARDS[:3]) * 4

    cards = draw(deck, 3, seed=1)

    assert sorted(card.id for card in cards) == sorted(card.id for card in ALL_CARDS[:3])
    with pytest.raises(InvalidCount):
        draw(deck, 4, seed=1)


@pytest.mark.parametrize("count", [-1, 79, True, 2.0])
def test_invalid_count_is_rejected(count) -> None:
    with pytest.raises(InvalidCount):
        draw(ALL_CARDS, count)


def test_zero_count_draws_nothing() -> None:
    assert draw(ALL_CARDS, 0) == []


def test_orientation_does_not_change_selection() -> None:
    seed = "orientation-check"
    selected = draw(ALL_CARDS, 6, seed=seed)
    drawn = draw_cards(ALL_CARDS, 6, seed=seed)

    assert [item.card for item in drawn] == selected
    assert drawn == assign_orientations(selected, seed)


def test_orientations_cover_both_values() -> None:
    drawn = draw_cards(ALL_CARDS, 78, seed=99)
    orientations = {item.orientation for item in drawn}

    assert orientations == {Orientation.UPRIGHT, Orientation.REVERSED}


def test_string_seed_is_stable() -> None:
    assert normalize_seed("abc") == normalize_seed("abc")
    assert normalize_seed("abc") != normalize_seed("abd")
    assert normalize_seed(12) == 12
    assert normalize_seed(None) is None
    with pytest.raises(TypeError):
        normalize_seed(True)


def test_date_seed_uses_salt() -> None:
    assert date_seed(date(2024, 3, 1), salt="x") == "2024-03-01-x"


def test_orientation_labels() -> None:
    assert orientation_label(Orientation.UPRIGHT) == "upright"
    assert orientation_label("reversed", "ko") == "역방향"
