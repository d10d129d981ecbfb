from __future__ import annotations

"""
Validate that the card and spread catalogs carry text in every locale.

Usage:
    python tools/check_catalog.py

English is the baseline; any card or spread missing its Korean name, keywords,
meaning or position labels is reported. Exits with a non-zero status code when
gaps are found.
"""

import sys

from engine.tarot import get_all_cards, list_spreads


def find_card_gaps() -> list[str]:
    gaps = []
    for card in get_all_cards():
        if not card.name_ko.strip():
            gaps.append(f"{card.id}: name_ko")
        if not card.keywords_ko:
            gaps.append(f"{card.id}: keywords_ko")
        if not card.meaning_ko.strip():
            gaps.append(f"{card.id}: meaning_ko")
    return gaps


def find_spread_gaps() -> list[str]:
    gaps = []
    for spread in list_spreads():
        if not spread.display_name_ko.strip():
            gaps.append(f"{spread.id}: display_name_ko")
        if not spread.description_ko.strip():
            gaps.append(f"{spread.id}: description_ko")
        for position in spread.positions:
            if not position.name_ko.strip():
                gaps.append(f"{spread.id}/{position.id}: name_ko")
    return gaps


def main() -> int:
    card_gaps = find_card_gaps()
    spread_gaps = find_spread_gaps()

    print(f"[cards] missing: {card_gaps or 'none'}")
    print(f"[spreads] missing: {spread_gaps or 'none'}")
    return 1 if card_gaps or spread_gaps else 0


if __name__ == "__main__":
    sys.exit(main())
