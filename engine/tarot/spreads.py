from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from engine.errors import NotFound
from engine.i18n import pick


@dataclass(frozen=True)
class SpreadPosition:
    id: str
    name: str
    name_ko: str

    def name_for(self, locale: str | None = None) -> str:
        return pick(locale, self.name, self.name_ko)


@dataclass(frozen=True)
class SpreadTemplate:
    id: str
    display_name: str
    display_name_ko: str
    description: str
    description_ko: str
    positions: Sequence[SpreadPosition]
    is_premium: bool = False

    def __post_init__(self) -> None:
        if not self.positions:
            raise ValueError(f"Spread {self.id!r} needs at least one position")
        object.__setattr__(self, "positions", tuple(self.positions))

    @property
    def card_count(self) -> int:
        return len(self.positions)

    def name_for(self, locale: str | None = None) -> str:
        return pick(locale, self.display_name, self.display_name_ko)

    def description_for(self, locale: str | None = None) -> str:
        return pick(locale, self.description, self.description_ko)

    def position_names(self, locale: str | None = None) -> tuple[str, ...]:
        return tuple(position.name_for(locale) for position in self.positions)


ONE_CARD = SpreadTemplate(
    id="one-card",
    display_name="One Card Reading",
    display_name_ko="원 카드 리딩",
    description="A single card for a quick answer",
    description_ko="하나의 카드로 얻는 간단한 답",
    positions=[SpreadPosition("main", "Main Card", "메인 카드")],
)

THREE_CARD = SpreadTemplate(
    id="three-card",
    display_name="Three Card Spread",
    display_name_ko="3카드",
    description="Past, Present, Future",
    description_ko="과거, 현재, 미래",
    positions=[
        SpreadPosition("past", "Past", "과거"),
        SpreadPosition("present", "Present", "현재"),
        SpreadPosition("future", "Future", "미래"),
    ],
)

FOUR_CARD = SpreadTemplate(
    id="four-card",
    display_name="Four Card Spread",
    display_name_ko="4카드",
    description="Balance and harmony in four key areas",
    description_ko="네 가지 핵심 영역의 균형과 조화",
    positions=[
        SpreadPosition("mind", "Mind", "마음"),
        SpreadPosition("body", "Body", "몸"),
        SpreadPosition("spirit", "Spirit", "영혼"),
        SpreadPosition("action", "Action", "행동"),
    ],
)

FIVE_CARD = SpreadTemplate(
    id="five-card",
    display_name="Five Card V-Shape",
    display_name_ko="5카드",
    description="V-shaped spread for comprehensive guidance",
    description_ko="V자 형태로 보는 종합적인 안내",
    positions=[
        SpreadPosition("foundation", "Foundation", "기반"),
        SpreadPosition("challenge", "Challenge", "도전"),
        SpreadPosition("strength", "Strength", "힘"),
        SpreadPosition("advice", "Advice", "조언"),
        SpreadPosition("outcome", "Outcome", "결과"),
    ],
)

CELTIC_CROSS = SpreadTemplate(
    id="celtic-cross",
    display_name="Celtic Cross",
    display_name_ko="켈틱 크로스",
    description="Complete life reading with 10 cards",
    description_ko="10장으로 보는 완전한 인생 리딩",
    positions=[
        SpreadPosition("current_situation", "Current Situation", "현재 상황"),
        SpreadPosition("challenge", "Challenge", "도전"),
        SpreadPosition("distant_past", "Distant Past", "먼 과거"),
        SpreadPosition("recent_past", "Recent Past", "최근 과거"),
        SpreadPosition("possible_outcome", "Possible Outcome", "가능한 결과"),
        SpreadPosition("immediate_future", "Immediate Future", "가까운 미래"),
        SpreadPosition("your_approach", "Your Approach", "당신의 접근법"),
        SpreadPosition("external_influences", "External Influences", "외부 영향"),
        SpreadPosition("hopes_and_fears", "Hopes and Fears", "희망과 두려움"),
        SpreadPosition("final_outcome", "Final Outcome", "최종 결과"),
    ],
    is_premium=True,
)

CUP_OF_RELATIONSHIP = SpreadTemplate(
    id="love",
    display_name="Cup of Relationship",
    display_name_ko="컵 오브 릴레이션십",
    description="Deep insights into your relationship dynamics with 11 cards",
    description_ko="11장의 카드로 보는 깊은 관계 역학 통찰",
    positions=[
        SpreadPosition("your_state", "Your Current State", "나의 현재 상태"),
        SpreadPosition("partner_state", "Partner's Current State", "상대의 현재 상태"),
        SpreadPosition("our_state", "Our Current State", "우리의 현재 상태"),
        SpreadPosition("past", "Past", "과거"),
        SpreadPosition("present", "Present", "현재"),
        SpreadPosition("obstacles", "Obstacles", "방해물"),
        SpreadPosition("your_heart", "Your Heart", "나의 마음"),
        SpreadPosition("partner_heart", "Partner's Heart", "상대의 마음"),
        SpreadPosition("your_wish", "What You Want from Partner", "내가 상대에게 바라는 점"),
        SpreadPosition("partner_wish", "What Partner Wants from You", "상대가 나에게 바라는 점"),
        SpreadPosition("outcome", "Outcome", "결과"),
    ],
    is_premium=True,
)

AB_CHOICE = SpreadTemplate(
    id="career",
    display_name="AB Choice Tarot",
    display_name_ko="AB 선택 타로",
    description="Choose between two important options with 7 cards",
    description_ko="7장의 카드로 보는 두 가지 선택지 분석",
    positions=[
        SpreadPosition("choice_a_1", "Choice A Option 1", "A 선택지 1"),
        SpreadPosition("choice_a_2", "Choice A Option 2", "A 선택지 2"),
        SpreadPosition("choice_a_3", "Choice A Option 3", "A 선택지 3"),
        SpreadPosition("current_situation", "Current Situation", "현재 상황"),
        SpreadPosition("choice_b_1", "Choice B Option 1", "B 선택지 1"),
        SpreadPosition("choice_b_2", "Choice B Option 2", "B 선택지 2"),
        SpreadPosition("choice_b_3", "Choice B Option 3", "B 선택지 3"),
    ],
    is_premium=True,
)

ALL_SPREADS: dict[str, SpreadTemplate] = {
    ONE_CARD.id: ONE_CARD,
    THREE_CARD.id: THREE_CARD,
    FOUR_CARD.id: FOUR_CARD,
    FIVE_CARD.id: FIVE_CARD,
    CELTIC_CROSS.id: CELTIC_CROSS,
    CUP_OF_RELATIONSHIP.id: CUP_OF_RELATIONSHIP,
    AB_CHOICE.id: AB_CHOICE,
}

DEFAULT_SPREAD_ID = THREE_CARD.id


def list_spreads() -> tuple[SpreadTemplate, ...]:
    return tuple(ALL_SPREADS.values())


def get_spread(spread_id: str) -> SpreadTemplate:
    spread = ALL_SPREADS.get(spread_id)
    if spread is None:
        raise NotFound(f"Unknown spread id: {spread_id!r}")
    return spread


__all__ = [
    "SpreadPosition",
    "SpreadTemplate",
    "ONE_CARD",
    "THREE_CARD",
    "FOUR_CARD",
    "FIVE_CARD",
    "CELTIC_CROSS",
    "CUP_OF_RELATIONSHIP",
    "AB_CHOICE",
    "ALL_SPREADS",
    "DEFAULT_SPREAD_ID",
    "list_spreads",
    "get_spread",
]
