from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_locale
from api.schemas import CardView, SpreadView
from engine.tarot import get_all_cards, get_card_by_id, get_spread, list_spreads

router = APIRouter(prefix="/api/v1")


@router.get("/cards", response_model=list[CardView])
async def list_cards(locale: str = Depends(get_locale)) -> list[CardView]:
    return [CardView.build(card, locale) for card in get_all_cards()]


@router.get("/cards/{card_id}", response_model=CardView)
async def get_card(card_id: str, locale: str = Depends(get_locale)) -> CardView:
    return CardView.build(get_card_by_id(card_id), locale)


@router.get("/spreads", response_model=list[SpreadView])
async def list_spread_templates(locale: str = Depends(get_locale)) -> list[SpreadView]:
    return [SpreadView.build(spread, locale) for spread in list_spreads()]


@router.get("/spreads/{spread_id}", response_model=SpreadView)
async def get_spread_template(spread_id: str, locale: str = Depends(get_locale)) -> SpreadView:
    return SpreadView.build(get_spread(spread_id), locale)
