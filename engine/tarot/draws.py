from __future__ import annotations

import hashlib
import logging
import random
import time
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Sequence

from engine import config
from engine.errors import InvalidCount
from engine.i18n import normalize_locale

from .cards import TarotCard

Seed = int | str

logger = logging.getLogger(__name__)


class Orientation(str, Enum):
    UPRIGHT = "upright"
    REVERSED = "reversed"


@dataclass(frozen=True)
class DrawnCard:
    card: TarotCard
    orientation: Orientation

    @property
    def is_reversed(self) -> bool:
        return self.orientation is Orientation.REVERSED


_ORIENTATION_LABELS: dict[str, dict[Orientation, str]] = {
    "en": {Orientation.UPRIGHT: "upright", Orientation.REVERSED: "reversed"},
    "ko": {Orientation.UPRIGHT: "정방향", Orientation.REVERSED: "역방향"},
}


def orientation_label(orientation: Orientation | str, locale: str | None = None) -> str:
    return _ORIENTATION_LABELS[normalize_locale(locale)][Orientation(orientation)]


def normalize_seed(seed: Seed | None) -> int | None:
    """Turn a seed into an int that is stable across interpreter runs.

    String seeds go through SHA-256 because the built-in ``hash()`` is salted
    per process.
    """
    if seed is None:
        return None
    if isinstance(seed, bool):
        raise TypeError("seed must be int | str | None")
    if isinstance(seed, int):
        return seed
    if isinstance(seed, str):
        digest = hashlib.sha256(seed.encode("utf-8")).digest()
        return int.from_bytes(digest[:8], byteorder="big", signed=False)
    raise TypeError("seed must be int | str | None")


def _make_rng(seed: Seed | None) -> random.Random:
    normalized = normalize_seed(seed)
    if normalized is None:
        return random.Random()
    return random.Random(normalized)


def date_seed(day: date, *, salt: str | None = None) -> str:
    """Seed that keeps a daily reading stable for the whole calendar day."""
    return f"{day.isoformat()}-{salt if salt is not None else config.DAILY_SEED_SALT}"


def fresh_seed() -> str:
    return f"redraw-{time.time_ns()}"


def _unique_by_id(deck: Iterable[TarotCard]) -> list[TarotCard]:
    seen: set[str] = set()
    unique: list[TarotCard] = []
    for card in deck:
        if card.id in seen:
            continue
        seen.add(card.id)
        unique.append(card)
    return unique


def draw(deck: Sequence[TarotCard], count: int, seed: Seed | None = None) -> list[TarotCard]:
    """Pick ``count`` distinct cards from ``deck`` without replacement.

    The same ``seed`` and the same deck always give the same cards in the same
    order. Without a seed the selection is not reproducible.
    """
    pool = _unique_by_id(deck)
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCount(f"count must be an integer, got {count!r}")
    if count < 0 or count > len(pool):
        raise InvalidCount(f"cannot draw {count} cards from a deck of {len(pool)}")

    rng = _make_rng(seed)
    return rng.sample(pool, k=count)


def assign_orientations(
    cards: Sequence[TarotCard], seed: Seed | None = None
) -> list[DrawnCard]:
    """Flip a fair coin per card; uses its own RNG stream so selection is untouched."""
    rng = _make_rng(None if seed is None else f"{seed}:orientation")
    results: list[DrawnCard] = []
    for card in cards:
        is_reversed = bool(rng.getrandbits(1))
        orientation = Orientation.REVERSED if is_reversed else Orientation.UPRIGHT
        results.append(DrawnCard(card=card, orientation=orientation))
    return results


def draw_cards(
    deck: Sequence[TarotCard], count: int, seed: Seed | None = None
) -> list[DrawnCard]:
    cards = draw(deck, count, seed)
    drawn = assign_orientations(cards, seed)
    logger.debug(
        "Drew cards",
        extra={"count": count, "seeded": seed is not None},
    )
    return drawn


__all__ = [
    "Seed",
    "Orientation",
    "DrawnCard",
    "draw",
    "draw_cards",
    "assign_orientations",
    "normalize_seed",
    "date_seed",
    "fresh_seed",
    "orientation_label",
]
