from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .cards import Card, strip_empty
from .families import DETECTORS, Detector
from .models import Hand, HandKind

LOGGER = logging.getLogger("pokerhands.evaluator")

# Strongest family first; the order follows HandKind strength.
FAMILIES: Tuple[Tuple[HandKind, Detector], ...] = tuple(
    (kind, DETECTORS[kind]) for kind in sorted(HandKind, reverse=True)
)


def best_hand(cards: Sequence[Optional[Card]]) -> Optional[Hand]:
    """Return the strongest hand the cards hold, or ``None`` for no cards at all."""
    real = strip_empty(cards)
    for kind, detect in FAMILIES:
        hand = detect(real)
        if hand is not None:
            LOGGER.debug("Best hand %s from %s", kind.display_name, [card.code for card in real])
            return hand
    return None


def evaluate_best(cards: Sequence[Optional[Card]]) -> Tuple[int, List[int]]:
    """Return a ``(strength, values)`` tuple for the cards. Higher is better.

    Showdown code compares ``Hand`` objects directly. This key is for callers
    that only need to sort or store results, e.g. ``sorted(hands, key=evaluate_best)``.
    """
    hand = best_hand(cards)
    if hand is None:
        raise ValueError("Cannot evaluate an empty card set")
    return (hand.strength, hand.values)


def describe_hand(hand: Hand) -> str:
    return hand.kind.name.lower()
