from __future__ import annotations

from typing import List, Optional, Sequence

from pokerhands.cards import Card, Deck, deal, parse_cards


def cards(*labels: str) -> List[Card]:
    """Build cards from compact labels such as ``"Ah"`` or ``"10c"``."""
    return parse_cards(labels)


def ranks(seq: Sequence[Optional[Card]]) -> str:
    """Rank codes of a card sequence; a missing card shows as ``-``."""
    return "".join("-" if card is None else card.rank for card in seq)


def seeded_hands(count: int, size: int = 7, seed: int = 2024) -> List[List[Card]]:
    """Deal ``count`` card sets of ``size`` cards from seeded decks."""
    hands: List[List[Card]] = []
    for offset in range(count):
        deck = Deck(seed=seed + offset)
        deck.shuffle()
        hands.append(deal(deck, size))
    return hands
