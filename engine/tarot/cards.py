from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from engine.errors import NotFound
from engine.i18n import normalize_locale


class Suit(str, Enum):
    MAJOR = "major"
    WANDS = "wands"
    CUPS = "cups"
    SWORDS = "swords"
    PENTACLES = "pentacles"


class Arcana(str, Enum):
    MAJOR = "major"
    MINOR = "minor"


@dataclass(frozen=True)
class TarotCard:
    id: str
    number: int
    name: str
    name_ko: str
    keywords: tuple[str, ...]
    keywords_ko: tuple[str, ...]
    meaning: str
    meaning_ko: str
    image_ref: str
    suit: Suit
    element: str

    @property
    def arcana(self) -> Arcana:
        return Arcana.MAJOR if self.suit is Suit.MAJOR else Arcana.MINOR

    def display_name(self, locale: str | None = None) -> str:
        return self.name_ko if normalize_locale(locale) == "ko" else self.name

    def keywords_for(self, locale: str | None = None) -> tuple[str, ...]:
        return self.keywords_ko if normalize_locale(locale) == "ko" else self.keywords

    def meaning_for(self, locale: str | None = None) -> str:
        return self.meaning_ko if normalize_locale(locale) == "ko" else self.meaning


def _card(
    number: int,
    card_id: str,
    name: str,
    name_ko: str,
    keywords: tuple[str, ...],
    keywords_ko: tuple[str, ...],
    meaning: str,
    meaning_ko: str,
    suit: Suit,
    element: str,
) -> TarotCard:
    return TarotCard(
        id=card_id,
        number=number,
        name=name,
        name_ko=name_ko,
        keywords=keywords,
        keywords_ko=keywords_ko,
        meaning=meaning,
        meaning_ko=meaning_ko,
        image_ref=f"classic-tarot/{card_id}.jpg",
        suit=suit,
        element=element,
    )


# Rider-Waite-Smith deck: 22 major arcana, then wands, cups, swords, pentacles.
ALL_CARDS: tuple[TarotCard, ...] = (
    _card(
        0,
        "major_00_fool",
        "The Fool",
        "바보",
        ("new beginnings", "innocence", "spontaneity", "free spirit"),
        ("새로운 시작", "순수함", "모험", "가능성"),
        "New beginnings, innocence, spontaneity",
        "새로운 시작과 순수한 마음",
        Suit.MAJOR,
        "air",
    ),
    _card(
        1,
        "major_01_magician",
        "The Magician",
        "마법사",
        ("manifestation", "resourcefulness", "power", "inspired action"),
        ("의지력", "창조력", "집중", "기술"),
        "Manifestation, resourcefulness, power",
        "의지력과 창조적 능력",
        Suit.MAJOR,
        "air",
    ),
    _card(
        2,
        "major_02_high_priestess",
        "The High Priestess",
        "여사제",
        ("intuition", "sacred knowledge", "divine feminine", "the subconscious mind"),
        ("직관", "지혜", "내면", "신비"),
        "Intuition, sacred knowledge, divine feminine",
        "직관과 내면의 지혜",
        Suit.MAJOR,
        "water",
    ),
    _card(
        3,
        "major_03_empress",
        "The Empress",
        "여황제",
        ("femininity", "beauty", "nature", "abundance"),
        ("풍요", "창조", "자연", "사랑"),
        "Femininity, beauty, nature, abundance",
        "풍요로움과 어머니의 사랑",
        Suit.MAJOR,
        "earth",
    ),
    _card(
        4,
        "major_04_emperor",
        "The Emperor",
        "황제",
        ("authority", "establishment", "structure", "father figure"),
        ("권위", "질서", "안정", "리더십"),
        "Authority, establishment, structure, father figure",
        "권위와 안정적인 구조",
        Suit.MAJOR,
        "fire",
    ),
    _card(
        5,
        "major_05_hierophant",
        "The Hierophant",
        "교황",
        ("spiritual wisdom", "religious beliefs", "conformity", "tradition"),
        ("전통", "영성", "지도", "학습"),
        "Spiritual wisdom, religious beliefs, conformity",
        "전통과 영적 지도",
        Suit.MAJOR,
        "earth",
    ),
    _card(
        6,
        "major_06_lovers",
        "The Lovers",
        "연인",
        ("love", "harmony", "relationships", "values alignment"),
        ("사랑", "선택", "조화", "결합"),
        "Love, harmony, relationships, values alignment",
        "사랑과 선택의 갈래",
        Suit.MAJOR,
        "air",
    ),
    _card(
        7,
        "major_07_chariot",
        "The Chariot",
        "전차",
        ("control", "willpower", "success", "determination"),
        ("승리", "의지", "전진", "통제"),
        "Control, willpower, success, determination",
        "의지력과 승리",
        Suit.MAJOR,
        "water",
    ),
    _card(
        8,
        "major_08_strength",
        "Strength",
        "힘",
        ("strength", "courage", "persuasion", "influence"),
        ("힘", "용기", "인내", "극복"),
        "Strength, courage, persuasion, influence",
        "내면의 힘과 용기",
        Suit.MAJOR,
        "fire",
    ),
    _card(
        9,
        "major_09_hermit",
        "The Hermit",
        "은자",
        ("soul searching", "introspection", "inner guidance", "solitude"),
        ("성찰", "고독", "내면", "깨달음"),
        "Soul searching, introspection, inner guidance",
        "내적 성찰과 고독",
        Suit.MAJOR,
        "earth",
    ),
    _card(
        10,
        "major_10_wheel_of_fortune",
        "Wheel of Fortune",
        "운명의 바퀴",
        ("good luck", "karma", "life cycles", "destiny"),
        ("변화", "운명", "기회", "순환"),
        "Good luck, karma, life cycles, destiny",
        "변화와 운명의 순환",
        Suit.MAJOR,
        "fire",
    ),
    _card(
        11,
        "major_11_justice",
        "Justice",
        "정의",
        ("justice", "fairness", "truth", "cause and effect"),
        ("정의", "균형", "공정", "진실"),
        "Justice, fairness, truth, cause and effect",
        "균형과 공정함",
        Suit.MAJOR,
        "air",
    ),
    _card(
        12,
        "major_12_hanged_man",
        "The Hanged Man",
        "매달린 사람",
        ("suspension", "restriction", "letting go", "sacrifice"),
        ("희생", "관점", "깨달음", "인내"),
        "Suspension, restriction, letting go",
        "희생과 새로운 관점",
        Suit.MAJOR,
        "water",
    ),
    _card(
        13,
        "major_13_death",
        "Death",
        "죽음",
        ("endings", "beginnings", "change", "transformation"),
        ("변화", "재생", "끝", "새로운 시작"),
        "Endings, beginnings, change, transformation",
        "변화와 재생",
        Suit.MAJOR,
        "water",
    ),
    _card(
        14,
        "major_14_temperance",
        "Temperance",
        "절제",
        ("balance", "moderation", "patience", "purpose"),
        ("절제", "조화", "균형", "평화"),
        "Balance, moderation, patience, purpose",
        "조화와 균형",
        Suit.MAJOR,
        "fire",
    ),
    _card(
        15,
        "major_15_devil",
        "The Devil",
        "악마",
        ("shadow self", "attachment", "addiction", "restriction"),
        ("유혹", "속박", "해방", "진실"),
        "Shadow self, attachment, addiction, restriction",
        "유혹과 속박",
        Suit.MAJOR,
        "earth",
    ),
    _card(
        16,
        "major_16_tower",
        "The Tower",
        "탑",
        ("sudden change", "upheaval", "chaos", "revelation"),
        ("충격", "깨달음", "파괴", "각성"),
        "Sudden change, upheaval, chaos, revelation",
        "충격과 깨달음",
        Suit.MAJOR,
        "fire",
    ),
    _card(
        17,
        "major_17_star",
        "The Star",
        "별",
        ("hope", "faith", "purpose", "renewal", "spirituality"),
        ("희망", "영감", "치유", "꿈"),
        "Hope, faith, purpose, renewal, spirituality",
        "희망과 영감",
        Suit.MAJOR,
        "air",
    ),
    _card(
        18,
        "major_18_moon",
        "The Moon",
        "달",
        ("illusion", "fear", "anxiety", "subconscious", "intuition"),
        ("환상", "무의식", "직감", "신비"),
        "Illusion, fear, anxiety, subconscious, intuition",
        "환상과 무의식",
        Suit.MAJOR,
        "water",
    ),
    _card(
        19,
        "major_19_sun",
        "The Sun",
        "태양",
        ("positivity", "fun", "warmth", "success", "vitality"),
        ("성공", "기쁨", "활력", "긍정"),
        "Positivity, fun, warmth, success, vitality",
        "성공과 기쁨",
        Suit.MAJOR,
        "fire",
    ),
    _card(
        20,
        "major_20_judgement",
        "Judgement",
        "심판",
        ("judgement", "rebirth", "inner calling", "absolution"),
        ("심판", "재생", "각성", "구원"),
        "Judgement, rebirth, inner calling, absolution",
        "재생과 각성",
        Suit.MAJOR,
        "fire",
    ),
    _card(
        21,
        "major_21_world",
        "The World",
        "세계",
        ("completion", "accomplishment", "travel", "fulfillment"),
        ("완성", "성취", "만족", "완결"),
        "Completion, accomplishment, travel, fulfillment",
        "완성과 성취",
        Suit.MAJOR,
        "earth",
    ),
    _card(
        22,
        "minor_wands_ace",
        "Ace of Wands",
        "완드 에이스",
        ("inspiration", "creative spark", "new opportunity", "growth potential"),
        ("영감", "창조", "기회", "성장"),
        "Inspiration, creative spark, new opportunity",
        "창조적 영감과 새로운 기회",
        Suit.WANDS,
        "fire",
    ),
    _card(
        23,
        "minor_wands_02",
        "Two of Wands",
        "완드 2",
        ("future planning", "making decisions", "leaving comfort zone", "personal power"),
        ("계획", "결정", "도전", "권력"),
        "Future planning, making decisions, leaving comfort zone",
        "미래 계획과 결정",
        Suit.WANDS,
        "fire",
    ),
    _card(
        24,
        "minor_wands_03",
        "Three of Wands",
        "완드 3",
        ("expansion", "foresight", "overseas opportunities", "looking ahead"),
        ("확장", "예견", "기회", "전망"),
        "Expansion, foresight, overseas opportunities",
        "확장과 해외 기회",
        Suit.WANDS,
        "fire",
    ),
    _card(
        25,
        "minor_wands_04",
        "Four of Wands",
        "완드 4",
        ("celebration", "harmony", "home", "community"),
        ("축하", "조화", "가정", "공동체"),
        "Celebration, harmony, home, community",
        "축하와 조화로운 가정",
        Suit.WANDS,
        "fire",
    ),
    _card(
        26,
        "minor_wands_05",
        "Five of Wands",
        "완드 5",
        ("conflict", "disagreements", "competition", "tension"),
        ("갈등", "경쟁", "긴장", "불일치"),
        "Conflict, disagreements, competition, tension",
        "갈등과 경쟁",
        Suit.WANDS,
        "fire",
    ),
    _card(
        27,
        "minor_wands_06",
        "Six of Wands",
        "완드 6",
        ("success", "public recognition", "progress", "self-confidence"),
        ("성공", "인정", "진전", "자신감"),
        "Success, public recognition, progress, self-confidence",
        "성공과 인정",
        Suit.WANDS,
        "fire",
    ),
    _card(
        28,
        "minor_wands_07",
        "Seven of Wands",
        "완드 7",
        ("challenge", "competition", "perseverance", "defending position"),
        ("도전", "경쟁", "인내", "방어"),
        "Challenge, competition, perseverance, defending position",
        "도전과 방어",
        Suit.WANDS,
        "fire",
    ),
    _card(
        29,
        "minor_wands_08",
        "Eight of Wands",
        "완드 8",
        ("swiftness", "speed", "progress", "quick decisions"),
        ("신속", "속도", "진전", "결정"),
        "Swiftness, speed, progress, quick decisions",
        "신속함과 빠른 진전",
        Suit.WANDS,
        "fire",
    ),
    _card(
        30,
        "minor_wands_09",
        "Nine of Wands",
        "완드 9",
        ("persistence", "test of faith", "resilience", "boundaries"),
        ("지속", "시험", "회복력", "경계"),
        "Persistence, test of faith, resilience, boundaries",
        "지속성과 시험",
        Suit.WANDS,
        "fire",
    ),
    _card(
        31,
        "minor_wands_10",
        "Ten of Wands",
        "완드 10",
        ("burden", "extra responsibility", "hard work", "completion"),
        ("부담", "책임", "노력", "완성"),
        "Burden, extra responsibility, hard work, completion",
        "부담과 책임의 완성",
        Suit.WANDS,
        "fire",
    ),
    _card(
        32,
        "minor_wands_page",
        "Page of Wands",
        "완드 페이지",
        ("inspiration", "ideas", "discovery", "limitless potential"),
        ("영감", "아이디어", "발견", "가능성"),
        "Inspiration, ideas, discovery, limitless potential",
        "영감과 무한한 가능성",
        Suit.WANDS,
        "fire",
    ),
    _card(
        33,
        "minor_wands_knight",
        "Knight of Wands",
        "완드 기사",
        ("energy", "passion", "inspired action", "adventure"),
        ("에너지", "열정", "행동", "모험"),
        "Energy, passion, inspired action, adventure",
        "에너지와 열정적 행동",
        Suit.WANDS,
        "fire",
    ),
    _card(
        34,
        "minor_wands_queen",
        "Queen of Wands",
        "완드 여왕",
        ("courage", "confidence", "independence", "social butterfly"),
        ("용기", "자신감", "독립", "사교성"),
        "Courage, confidence, independence, social butterfly",
        "용기와 독립성",
        Suit.WANDS,
        "fire",
    ),
    _card(
        35,
        "minor_wands_king",
        "King of Wands",
        "완드 왕",
        ("leadership", "vision", "honour", "big picture"),
        ("리더십", "비전", "명예", "큰 그림"),
        "Leadership, vision, honour, big picture",
        "리더십과 비전",
        Suit.WANDS,
        "fire",
    ),
    _card(
        36,
        "minor_cups_ace",
        "Ace of Cups",
        "컵 에이스",
        ("love", "compassion", "creativity", "new relationship"),
        ("사랑", "연민", "창조", "관계"),
        "Love, compassion, creativity, new relationship",
        "사랑과 새로운 관계",
        Suit.CUPS,
        "water",
    ),
    _card(
        37,
        "minor_cups_02",
        "Two of Cups",
        "컵 2",
        ("unified love", "partnership", "mutual attraction", "relationships"),
        ("사랑", "파트너십", "끌림", "관계"),
        "Unified love, partnership, mutual attraction",
        "통합된 사랑과 파트너십",
        Suit.CUPS,
        "water",
    ),
    _card(
        38,
        "minor_cups_03",
        "Three of Cups",
        "컵 3",
        ("celebration", "friendship", "creativity", "community"),
        ("축하", "우정", "창조", "공동체"),
        "Celebration, friendship, creativity, community",
        "축하와 우정",
        Suit.CUPS,
        "water",
    ),
    _card(
        39,
        "minor_cups_04",
        "Four of Cups",
        "컵 4",
        ("meditation", "contemplation", "apathy", "reevaluation"),
        ("명상", "사고", "무관심", "재평가"),
        "Meditation, contemplation, apathy, reevaluation",
        "명상과 재평가",
        Suit.CUPS,
        "water",
    ),
    _card(
        40,
        "minor_cups_05",
        "Five of Cups",
        "컵 5",
        ("regret", "failure", "disappointment", "pessimism"),
        ("후회", "실패", "실망", "비관"),
        "Regret, failure, disappointment, pessimism",
        "후회와 실망",
        Suit.CUPS,
        "water",
    ),
    _card(
        41,
        "minor_cups_06",
        "Six of Cups",
        "컵 6",
        ("revisiting the past", "childhood memories", "innocence", "nostalgia"),
        ("과거", "추억", "순수", "향수"),
        "Revisiting the past, childhood memories, innocence",
        "과거 회상과 순수함",
        Suit.CUPS,
        "water",
    ),
    _card(
        42,
        "minor_cups_07",
        "Seven of Cups",
        "컵 7",
        ("opportunities", "choices", "wishful thinking", "illusion"),
        ("기회", "선택", "희망", "환상"),
        "Opportunities, choices, wishful thinking, illusion",
        "기회와 선택의 환상",
        Suit.CUPS,
        "water",
    ),
    _card(
        43,
        "minor_cups_08",
        "Eight of Cups",
        "컵 8",
        ("disappointment", "abandonment", "withdrawal", "escapism"),
        ("실망", "포기", "철수", "도피"),
        "Disappointment, abandonment, withdrawal, escapism",
        "실망과 포기",
        Suit.CUPS,
        "water",
    ),
    _card(
        44,
        "minor_cups_09",
        "Nine of Cups",
        "컵 9",
        ("contentment", "satisfaction", "gratitude", "wish come true"),
        ("만족", "감사", "성취", "소망"),
        "Contentment, satisfaction, gratitude, wish come true",
        "만족과 소망 성취",
        Suit.CUPS,
        "water",
    ),
    _card(
        45,
        "minor_cups_10",
        "Ten of Cups",
        "컵 10",
        ("harmony", "marriage", "happiness", "alignment"),
        ("조화", "결혼", "행복", "일치"),
        "Harmony, marriage, happiness, alignment",
        "조화와 행복한 결혼",
        Suit.CUPS,
        "water",
    ),
    _card(
        46,
        "minor_cups_page",
        "Page of Cups",
        "컵 페이지",
        ("creative opportunities", "intuitive messages", "curiosity", "new ideas"),
        ("창조", "직감", "호기심", "아이디어"),
        "Creative opportunities, intuitive messages, curiosity",
        "창조적 기회와 직감",
        Suit.CUPS,
        "water",
    ),
    _card(
        47,
        "minor_cups_knight",
        "Knight of Cups",
        "컵 기사",
        ("romance", "charm", "knight in shining armor", "imagination"),
        ("로맨스", "매력", "기사", "상상력"),
        "Romance, charm, knight in shining armor, imagination",
        "로맨스와 매력",
        Suit.CUPS,
        "water",
    ),
    _card(
        48,
        "minor_cups_queen",
        "Queen of Cups",
        "컵 여왕",
        ("compassion", "care", "emotional stability", "intuitive"),
        ("연민", "보살핌", "안정", "직관적"),
        "Compassion, care, emotional stability, intuitive",
        "연민과 감정적 안정",
        Suit.CUPS,
        "water",
    ),
    _card(
        49,
        "minor_cups_king",
        "King of Cups",
        "컵 왕",
        ("emotional balance", "compassion", "generosity", "diplomatic"),
        ("균형", "연민", "관대함", "외교적"),
        "Emotional balance, compassion, generosity, diplomatic",
        "감정적 균형과 관용",
        Suit.CUPS,
        "water",
    ),
    _card(
        50,
        "minor_swords_ace",
        "Ace of Swords",
        "검 에이스",
        ("breakthrough", "clarity", "sharp mind", "new ideas"),
        ("돌파", "명확", "날카로운 사고", "아이디어"),
        "Breakthrough, clarity, sharp mind, new ideas",
        "돌파구와 명확한 사고",
        Suit.SWORDS,
        "air",
    ),
    _card(
        51,
        "minor_swords_02",
        "Two of Swords",
        "검 2",
        ("difficult decisions", "weighing options", "indecision", "blocked emotions"),
        ("어려운 결정", "선택", "우유부단", "감정 차단"),
        "Difficult decisions, weighing options, indecision",
        "어려운 결정과 우유부단",
        Suit.SWORDS,
        "air",
    ),
    _card(
        52,
        "minor_swords_03",
        "Three of Swords",
        "검 3",
        ("heartbreak", "betrayal", "sorrow", "pain"),
        ("상심", "배신", "슬픔", "고통"),
        "Heartbreak, betrayal, sorrow, pain",
        "상심과 배신",
        Suit.SWORDS,
        "air",
    ),
    _card(
        53,
        "minor_swords_04",
        "Four of Swords",
        "검 4",
        ("rest", "relaxation", "meditation", "contemplation"),
        ("휴식", "이완", "명상", "사고"),
        "Rest, relaxation, meditation, contemplation",
        "휴식과 명상",
        Suit.SWORDS,
        "air",
    ),
    _card(
        54,
        "minor_swords_05",
        "Five of Swords",
        "검 5",
        ("conflict", "disagreements", "competition", "defeat"),
        ("갈등", "불일치", "경쟁", "패배"),
        "Conflict, disagreements, competition, defeat",
        "갈등과 패배",
        Suit.SWORDS,
        "air",
    ),
    _card(
        55,
        "minor_swords_06",
        "Six of Swords",
        "검 6",
        ("transition", "change", "rite of passage", "releasing baggage"),
        ("전환", "변화", "통과의례", "짐 내려놓기"),
        "Transition, change, rite of passage, releasing baggage",
        "전환과 변화",
        Suit.SWORDS,
        "air",
    ),
    _card(
        56,
        "minor_swords_07",
        "Seven of Swords",
        "검 7",
        ("betrayal", "deception", "getting away with something", "stealth"),
        ("배신", "속임", "도망", "은밀함"),
        "Betrayal, deception, getting away with something",
        "배신과 속임수",
        Suit.SWORDS,
        "air",
    ),
    _card(
        57,
        "minor_swords_08",
        "Eight of Swords",
        "검 8",
        ("isolation", "restriction", "self-imposed prison", "victim mentality"),
        ("고립", "제한", "자가감금", "피해의식"),
        "Isolation, restriction, self-imposed prison",
        "고립과 자가 감금",
        Suit.SWORDS,
        "air",
    ),
    _card(
        58,
        "minor_swords_09",
        "Nine of Swords",
        "검 9",
        ("anxiety", "worry", "fear", "depression"),
        ("불안", "걱정", "두려움", "우울"),
        "Anxiety, worry, fear, depression",
        "불안과 걱정",
        Suit.SWORDS,
        "air",
    ),
    _card(
        59,
        "minor_swords_10",
        "Ten of Swords",
        "검 10",
        ("painful endings", "deep wounds", "betrayal", "rock bottom"),
        ("고통스러운 끝", "깊은 상처", "배신", "바닥"),
        "Painful endings, deep wounds, betrayal, rock bottom",
        "고통스러운 끝과 바닥",
        Suit.SWORDS,
        "air",
    ),
    _card(
        60,
        "minor_swords_page",
        "Page of Swords",
        "검 페이지",
        ("new ideas", "curiosity", "thirst for knowledge", "vigilance"),
        ("아이디어", "호기심", "지식욕", "경계심"),
        "New ideas, curiosity, thirst for knowledge",
        "새로운 아이디어와 호기심",
        Suit.SWORDS,
        "air",
    ),
    _card(
        61,
        "minor_swords_knight",
        "Knight of Swords",
        "검 기사",
        ("ambitious", "action-oriented", "driven to succeed", "fast thinking"),
        ("야망", "행동지향", "성공욕구", "빠른사고"),
        "Ambitious, action-oriented, driven to succeed",
        "야망과 행동 지향",
        Suit.SWORDS,
        "air",
    ),
    _card(
        62,
        "minor_swords_queen",
        "Queen of Swords",
        "검 여왕",
        ("independence", "unbiased judgement", "clear boundaries", "direct communication"),
        ("독립성", "공정한 판단", "명확한 경계", "직접적 소통"),
        "Independence, unbiased judgement, clear boundaries",
        "독립성과 명확한 판단",
        Suit.SWORDS,
        "air",
    ),
    _card(
        63,
        "minor_swords_king",
        "King of Swords",
        "검 왕",
        ("mental clarity", "intellectual power", "authority", "truth"),
        ("정신적 명료함", "지적 권력", "권위", "진실"),
        "Mental clarity, intellectual power, authority",
        "정신적 명료함과 권위",
        Suit.SWORDS,
        "air",
    ),
    _card(
        64,
        "minor_pentacles_ace",
        "Ace of Pentacles",
        "펜타클 에이스",
        ("new financial opportunity", "manifestation", "abundance", "new business"),
        ("재정적 기회", "현실화", "풍요", "새사업"),
        "A new financial or career opportunity, manifestation",
        "새로운 재정적 기회",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        65,
        "minor_pentacles_02",
        "Two of Pentacles",
        "펜타클 2",
        ("multiple priorities", "time management", "prioritisation", "adaptability"),
        ("다중 우선순위", "시간관리", "우선순위", "적응력"),
        "Multiple priorities, time management, prioritisation",
        "다중 우선순위와 시간 관리",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        66,
        "minor_pentacles_03",
        "Three of Pentacles",
        "펜타클 3",
        ("teamwork", "collaboration", "learning", "implementation"),
        ("팀워크", "협력", "학습", "실행"),
        "Teamwork, collaboration, learning, implementation",
        "팀워크와 협력",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        67,
        "minor_pentacles_04",
        "Four of Pentacles",
        "펜타클 4",
        ("saving money", "security", "conservatism", "scarcity"),
        ("돈 저축", "보안", "보수주의", "부족함"),
        "Saving money, security, conservatism, scarcity",
        "돈 저축과 보안",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        68,
        "minor_pentacles_05",
        "Five of Pentacles",
        "펜타클 5",
        ("financial loss", "poverty", "lack mindset", "isolation"),
        ("재정적 손실", "빈곤", "결핍사고", "고립"),
        "Financial loss, poverty, lack mindset, isolation",
        "재정적 손실과 고립",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        69,
        "minor_pentacles_06",
        "Six of Pentacles",
        "펜타클 6",
        ("sharing wealth", "generosity", "charity", "fairness"),
        ("부의 나눔", "관대함", "자선", "공정함"),
        "Sharing wealth, generosity, charity, fairness",
        "부의 나눔과 관대함",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        70,
        "minor_pentacles_07",
        "Seven of Pentacles",
        "펜타클 7",
        ("long-term view", "sustainable results", "perseverance", "investment"),
        ("장기적 관점", "지속가능한 결과", "인내", "투자"),
        "Long-term view, sustainable results, perseverance",
        "장기적 관점과 인내",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        71,
        "minor_pentacles_08",
        "Eight of Pentacles",
        "펜타클 8",
        ("apprenticeship", "repetitive tasks", "mastery", "skill development"),
        ("견습", "반복작업", "숙련", "기술개발"),
        "Apprenticeship, repetitive tasks, mastery, skill development",
        "견습과 기술 개발",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        72,
        "minor_pentacles_09",
        "Nine of Pentacles",
        "펜타클 9",
        ("abundance", "luxury", "self-reliance", "financial independence"),
        ("풍요", "사치", "자립", "재정적 독립"),
        "Abundance, luxury, self-reliance, financial independence",
        "풍요와 재정적 독립",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        73,
        "minor_pentacles_10",
        "Ten of Pentacles",
        "펜타클 10",
        ("wealth", "financial security", "family", "long-term success"),
        ("부", "재정적 안정", "가족", "장기적 성공"),
        "Wealth, financial security, family, long-term success",
        "부와 가족의 성공",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        74,
        "minor_pentacles_page",
        "Page of Pentacles",
        "펜타클 페이지",
        ("learning", "studying", "new opportunities", "hard work"),
        ("학습", "공부", "새기회", "근면"),
        "Learning, studying, new opportunities, hard work",
        "학습과 새로운 기회",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        75,
        "minor_pentacles_knight",
        "Knight of Pentacles",
        "펜타클 기사",
        ("hard work", "productivity", "routine", "conservatism"),
        ("근면", "생산성", "일상", "보수주의"),
        "Hard work, productivity, routine, conservatism",
        "근면과 생산성",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        76,
        "minor_pentacles_queen",
        "Queen of Pentacles",
        "펜타클 여왕",
        ("nurturing", "practical", "providing financially", "down-to-earth"),
        ("보살핌", "실용적", "재정적 지원", "현실적"),
        "Nurturing, practical, providing financially, down-to-earth",
        "보살핌과 실용성",
        Suit.PENTACLES,
        "earth",
    ),
    _card(
        77,
        "minor_pentacles_king",
        "King of Pentacles",
        "펜타클 왕",
        ("financial success", "security", "disciplined", "abundant"),
        ("재정적 성공", "안정", "절제된", "풍부한"),
        "Financial success, security, disciplined, abundant",
        "재정적 성공과 풍요",
        Suit.PENTACLES,
        "earth",
    ),
)

CARD_BY_ID: dict[str, TarotCard] = {card.id: card for card in ALL_CARDS}


def get_all_cards() -> tuple[TarotCard, ...]:
    return ALL_CARDS


def get_card_by_id(card_id: str) -> TarotCard:
    card = CARD_BY_ID.get(card_id)
    if card is None:
        raise NotFound(f"Unknown card id: {card_id!r}")
    return card


def cards_by_suit(suit: Suit | str) -> tuple[TarotCard, ...]:
    wanted = Suit(suit)
    return tuple(card for card in ALL_CARDS if card.suit is wanted)


__all__ = [
    "Arcana",
    "Suit",
    "TarotCard",
    "ALL_CARDS",
    "CARD_BY_ID",
    "get_all_cards",
    "get_card_by_id",
    "cards_by_suit",
]
