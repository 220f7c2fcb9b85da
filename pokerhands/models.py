from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

from .cards import MAX_ORDINAL, Card, card_value, cards_to_labels

HAND_SIZE = 5


class HandInvariantError(AssertionError):
    """Raised when two hands cannot be compared. Always a bug in the detectors."""


class HandKind(IntEnum):
    # The integer value is the family strength: higher beats lower.
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def full_length(self) -> int:
        return HAND_SIZE


_DISPLAY_NAMES = {
    HandKind.HIGH_CARD: "High Card",
    HandKind.PAIR: "A Pair",
    HandKind.TWO_PAIR: "Two Pair",
    HandKind.THREE_OF_A_KIND: "Three of a Kind",
    HandKind.STRAIGHT: "Straight",
    HandKind.FLUSH: "Flush",
    HandKind.FULL_HOUSE: "Full House",
    HandKind.FOUR_OF_A_KIND: "Four of a Kind",
    HandKind.STRAIGHT_FLUSH: "Straight Flush",
}


@dataclass(frozen=True, eq=False)
class Hand:
    """Result of a successful detection.

    ``cards`` holds the cards that make the hand (the pair, the straight...),
    ``full`` the complete tie-break sequence: those cards followed by the
    kickers, padded with ``None`` up to the kind's fixed length.
    """

    kind: HandKind
    cards: Tuple[Card, ...]
    full: Tuple[Optional[Card], ...]

    def __post_init__(self) -> None:
        if len(self.full) != self.kind.full_length:
            raise HandInvariantError(
                f"{self.kind.display_name} needs {self.kind.full_length} comparison cards, got {len(self.full)}"
            )

    @property
    def strength(self) -> int:
        return int(self.kind)

    @property
    def values(self) -> List[int]:
        return [card_value(card) for card in self.full]

    @property
    def labels(self) -> List[str]:
        return cards_to_labels(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return self.kind.display_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) != 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) >= 0

    def __hash__(self) -> int:
        # Hands that compare equal share kind and value sequence.
        return hash((self.kind, tuple(self.values)))


def compare_hands(a: Hand, b: Hand) -> int:
    """Return -1, 0 or 1 as ``a`` is weaker than, equal to or stronger than ``b``."""
    if a.kind != b.kind:
        return 1 if a.kind > b.kind else -1
    if len(a.full) != len(b.full):
        raise HandInvariantError(
            f"{a.kind.display_name} hands with different card counts: {len(a.full)} vs {len(b.full)}"
        )
    # Suits never break ties.
    for mine, theirs in zip(a.full, b.full):
        diff = card_value(mine) - card_value(theirs)
        if diff:
            return 1 if diff > 0 else -1
    return 0


@dataclass
class DealConfig:
    players: int = 2
    hole_cards: int = 2
    board_cards: int = 5
    shuffles: int = 1
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.players < 1:
            raise ValueError("At least one player is required")
        if self.hole_cards < 0 or self.board_cards < 0:
            raise ValueError("Card counts must not be negative")
        if self.shuffles < 0:
            raise ValueError("Shuffle count must not be negative")
        if self.cards_needed > MAX_ORDINAL:
            raise ValueError(f"Deal needs {self.cards_needed} cards but the deck holds {MAX_ORDINAL}")
        if self.hole_cards + self.board_cards == 0:
            raise ValueError("Nothing to evaluate: every player would hold no cards")

    @property
    def cards_needed(self) -> int:
        return self.players * self.hole_cards + self.board_cards
