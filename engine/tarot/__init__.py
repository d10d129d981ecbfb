from .cards import (
    Arcana,
    Suit,
    TarotCard,
    ALL_CARDS,
    CARD_BY_ID,
    cards_by_suit,
    get_all_cards,
    get_card_by_id,
)
from .spreads import (
    SpreadTemplate,
    SpreadPosition,
    ONE_CARD,
    THREE_CARD,
    FOUR_CARD,
    FIVE_CARD,
    CELTIC_CROSS,
    CUP_OF_RELATIONSHIP,
    AB_CHOICE,
    ALL_SPREADS,
    DEFAULT_SPREAD_ID,
    get_spread,
    list_spreads,
)
from .draws import (
    DrawnCard,
    Orientation,
    Seed,
    assign_orientations,
    date_seed,
    draw,
    draw_cards,
    fresh_seed,
    normalize_seed,
    orientation_label,
)

__all__ = [
    "Arcana",
    "Suit",
    "TarotCard",
    "SpreadTemplate",
    "SpreadPosition",
    "DrawnCard",
    "Orientation",
    "Seed",
    "ALL_CARDS",
    "CARD_BY_ID",
    "ONE_CARD",
    "THREE_CARD",
    "FOUR_CARD",
    "FIVE_CARD",
    "CELTIC_CROSS",
    "CUP_OF_RELATIONSHIP",
    "AB_CHOICE",
    "ALL_SPREADS",
    "DEFAULT_SPREAD_ID",
    "assign_orientations",
    "cards_by_suit",
    "date_seed",
    "draw",
    "draw_cards",
    "fresh_seed",
    "get_all_cards",
    "get_card_by_id",
    "get_spread",
    "list_spreads",
    "normalize_seed",
    "orientation_label",
]
