"""Hand family detectors.

Each detector takes any sequence of cards (``None`` entries are ignored) and
returns the best :class:`~pokerhands.models.Hand` of its family, or ``None``
when the cards do not contain one. Detectors never modify their input.
"""

from __future__ import annotations

import functools
from typing import Callable, Dict, List, Optional, Sequence

from .cards import Card, Suit, strip_empty
from .models import HAND_SIZE, Hand, HandKind

Detector = Callable[[Sequence[Optional[Card]]], Optional[Hand]]


def _detector(func: Callable[[List[Card]], Optional[Hand]]) -> Detector:
    @functools.wraps(func)
    def wrapper(cards: Sequence[Optional[Card]]) -> Optional[Hand]:
        return func(strip_empty(cards))

    return wrapper


def _by_value_desc(cards: Sequence[Card]) -> List[Card]:
    return sorted(cards, key=lambda card: card.value, reverse=True)


def _without_value(cards: Sequence[Card], value: int) -> List[Card]:
    return [card for card in cards if card.value != value]


def _padded(cards: Sequence[Optional[Card]], size: int = HAND_SIZE) -> List[Optional[Card]]:
    padded = list(cards[:size])
    padded.extend([None] * (size - len(padded)))
    return padded


# N of a kind ---------------------------------------------------------


def find_highest_group(cards: Sequence[Card], n: int) -> Optional[List[Card]]:
    """Highest valued group of exactly ``n`` cards sharing a value.

    Cards are collected per value in input order and a value stops growing
    once it holds ``n`` cards, so the group keeps the first ``n`` seen.
    """
    if n < 1 or len(cards) < n:
        return None

    groups: Dict[int, List[Card]] = {}
    best: Optional[List[Card]] = None
    for card in cards:
        group = groups.setdefault(card.value, [])
        if len(group) >= n:
            continue
        group.append(card)
        if len(group) == n and (best is None or best[0].value < card.value):
            best = group
    return list(best) if best is not None else None


def complete_with_kickers(cards: Sequence[Card], group: Sequence[Card]) -> List[Optional[Card]]:
    """Top cards outside ``group``'s value that fill the hand up to five."""
    needed = HAND_SIZE - len(group)
    if needed <= 0:
        return []
    rest = high_card(_without_value(cards, group[0].value))
    if rest is None:
        return [None] * needed
    return list(rest.full[:needed])


def _n_of_a_kind(kind: HandKind, n: int, cards: List[Card]) -> Optional[Hand]:
    group = find_highest_group(cards, n)
    if group is None:
        return None
    kickers = complete_with_kickers(cards, group)
    return Hand(kind, tuple(group), tuple(group + kickers))


# Families, weakest first --------------------------------------------


@_detector
def high_card(cards: List[Card]) -> Optional[Hand]:
    if not cards:
        return None
    top = _by_value_desc(cards)[:HAND_SIZE]
    return Hand(HandKind.HIGH_CARD, (top[0],), tuple(_padded(top)))


@_detector
def pair(cards: List[Card]) -> Optional[Hand]:
    return _n_of_a_kind(HandKind.PAIR, 2, cards)


@_detector
def two_pair(cards: List[Card]) -> Optional[Hand]:
    if len(cards) < 4:
        return None

    first = pair(cards)
    if first is None:
        return None
    rest = _without_value(cards, first.cards[0].value)

    second = pair(rest)
    if second is None:
        return None
    rest = _without_value(rest, second.cards[0].value)

    leftover = high_card(rest)
    kicker = leftover.cards[0] if leftover is not None else None

    pairs = sorted((first.cards, second.cards), key=lambda cards_: cards_[0].value, reverse=True)
    shown = pairs[0] + pairs[1]
    return Hand(HandKind.TWO_PAIR, shown, shown + (kicker,))


@_detector
def three_of_a_kind(cards: List[Card]) -> Optional[Hand]:
    return _n_of_a_kind(HandKind.THREE_OF_A_KIND, 3, cards)


@_detector
def straight(cards: List[Card]) -> Optional[Hand]:
    if len(cards) < HAND_SIZE:
        return None

    distinct: Dict[int, Card] = {}
    for card in cards:
        distinct.setdefault(card.value, card)
    ordered = _by_value_desc(list(distinct.values()))

    run: List[Card] = []
    for card in ordered:
        if run and run[-1].value - card.value != 1:
            run = []
        run.append(card)
        if len(run) == HAND_SIZE:
            return Hand(HandKind.STRAIGHT, tuple(run), tuple(run))

    # Wheel: 5-4-3-2 plus the ace playing low, ranked below a six-high straight.
    highest = ordered[0]
    if len(run) == HAND_SIZE - 1 and run[-1].value == 0 and run[-1].is_adjacent(highest):
        wheel = tuple(run + [highest])
        return Hand(HandKind.STRAIGHT, wheel, wheel)
    return None


@_detector
def flush(cards: List[Card]) -> Optional[Hand]:
    if len(cards) < HAND_SIZE:
        return None

    by_suit: Dict[Suit, Dict[int, Card]] = {suit: {} for suit in Suit}
    for card in cards:
        by_suit[card.suit].setdefault(card.value, card)

    qualified = [
        _by_value_desc(list(suited.values()))[:HAND_SIZE]
        for suited in by_suit.values()
        if len(suited) >= HAND_SIZE
    ]
    if not qualified:
        return None

    # Only reachable with ten or more cards: the highest top five wins.
    best = max(qualified, key=lambda top: [card.value for card in top])
    return Hand(HandKind.FLUSH, tuple(best), tuple(best))


@_detector
def full_house(cards: List[Card]) -> Optional[Hand]:
    trips = three_of_a_kind(cards)
    if trips is None:
        return None
    pair_hand = pair(_without_value(cards, trips.cards[0].value))
    if pair_hand is None:
        return None
    shown = trips.cards + pair_hand.cards
    return Hand(HandKind.FULL_HOUSE, shown, shown)


@_detector
def four_of_a_kind(cards: List[Card]) -> Optional[Hand]:
    return _n_of_a_kind(HandKind.FOUR_OF_A_KIND, 4, cards)


@_detector
def straight_flush(cards: List[Card]) -> Optional[Hand]:
    if len(cards) < HAND_SIZE:
        return None

    best: Optional[Hand] = None
    for suit in Suit:
        candidate = straight([card for card in cards if card.suit is suit])
        if candidate is not None and (best is None or candidate > best):
            best = candidate
    if best is None:
        return None
    return Hand(HandKind.STRAIGHT_FLUSH, best.cards, best.full)


DETECTORS: Dict[HandKind, Detector] = {
    HandKind.HIGH_CARD: high_card,
    HandKind.PAIR: pair,
    HandKind.TWO_PAIR: two_pair,
    HandKind.THREE_OF_A_KIND: three_of_a_kind,
    HandKind.STRAIGHT: straight,
    HandKind.FLUSH: flush,
    HandKind.FULL_HOUSE: full_house,
    HandKind.FOUR_OF_A_KIND: four_of_a_kind,
    HandKind.STRAIGHT_FLUSH: straight_flush,
}
