import pytest

from engine.errors import NotFound
from engine.tarot import (
    DEFAULT_SPREAD_ID,
    SpreadPosition,
    SpreadTemplate,
    get_spread,
    list_spreads,
)


@pytest.mark.parametrize(
    ("spread_id", "card_count"),
    [
        ("one-card", 1),
        ("three-card", 3),
        ("four-card", 4),
        ("five-card", 5),
        ("celtic-cross", 10),
        ("love", 11),
        ("career", 7),
    ],
)
def test_spread_card_counts(spread_id: str, card_count: int) -> None:
    spread = get_spread(spread_id)

    assert spread.card_count == card_count
    assert len(spread.position_names()) == card_count


def test_three_card_positions() -> None:
    spread = get_spread("three-card")

    assert spread.position_names() == ("Past", "Present", "Future")
    assert spread.position_names("ko") == ("과거", "현재", "미래")
    assert spread.is_premium is False


def test_default_spread_is_listed() -> None:
    ids = [spread.id for spread in list_spreads()]

    assert DEFAULT_SPREAD_ID in ids
    assert len(ids) == len(set(ids))


def test_premium_flags() -> None:
    premium = {spread.id for spread in list_spreads() if spread.is_premium}

    assert premium == {"celtic-cross", "love", "career"}


def test_unknown_spread_raises_not_found() -> None:
    with pytest.raises(NotFound):
        get_spread("seven-card")


def test_template_requires_positions() -> None:
    with pytest.raises(ValueError):
        SpreadTemplate(
            id="empty",
            display_name="Empty",
            display_name_ko="",
            description="",
            description_ko="",
            positions=[],
        )


def test_template_freezes_positions() -> None:
    template = SpreadTemplate(
        id="pair",
        display_name="Pair",
        display_name_ko="페어",
        description="Two cards",
        description_ko="두 장",
        positions=[SpreadPosition("a", "A", "가"), SpreadPosition("b", "B", "나")],
    )

    assert isinstance(template.positions, tuple)
    assert template.name_for("ko") == "페어"
