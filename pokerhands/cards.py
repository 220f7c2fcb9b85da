from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence

LOGGER = logging.getLogger("pokerhands.cards")

CARDS_IN_SUIT = 13
NUMBER_OF_SUITS = 4
MAX_ORDINAL = CARDS_IN_SUIT * NUMBER_OF_SUITS

# Rank codes indexed by card value (0 is the deuce, 12 the ace).
RANKS = "23456789TJQKA"

# A missing card. Hands pad their comparison sequence with it.
EMPTY = None


class Suit(Enum):
    CLUBS = (0, "c", "♣")
    HEARTS = (1, "h", "♥")
    SPADES = (2, "s", "♠")
    DIAMONDS = (3, "d", "♦")

    def __init__(self, index: int, code: str, glyph: str) -> None:
        self.index = index
        self.code = code
        self.glyph = glyph


SUITS = "".join(suit.code for suit in Suit)
_SUIT_BY_TOKEN = {token: suit for suit in Suit for token in (suit.code, suit.code.upper(), suit.glyph)}


@dataclass(frozen=True)
class Card:
    value: int
    suit: Suit

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or not 0 <= self.value < CARDS_IN_SUIT:
            raise ValueError(f"Invalid value: {self.value} (expected 0-{CARDS_IN_SUIT - 1})")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Card:
        if not 0 <= ordinal < MAX_ORDINAL:
            raise ValueError(f"Invalid ordinal: {ordinal} (expected 0-{MAX_ORDINAL - 1})")
        suit_index, value = divmod(ordinal, CARDS_IN_SUIT)
        return cls(value, _suit_from_index(suit_index))

    @property
    def ordinal(self) -> int:
        return self.value + self.suit.index * CARDS_IN_SUIT

    @property
    def rank(self) -> str:
        return RANKS[self.value]

    @property
    def code(self) -> str:
        """Compact ASCII form such as ``Ah`` or ``Td``."""
        return f"{self.rank}{self.suit.code}"

    @property
    def label(self) -> str:
        name = "10" if self.value == 8 else self.rank
        return f"{name:>2}{self.suit.glyph}"

    def same_suit(self, other: Card) -> bool:
        return self.suit is other.suit

    def same_value(self, other: Card) -> bool:
        return self.value == other.value

    def is_adjacent(self, other: Card) -> bool:
        # The ace sits next to both the king and the deuce.
        diff = abs(self.value - other.value)
        return diff == 1 or diff == CARDS_IN_SUIT - 1

    # Ordering looks at the value only; suits carry no order.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value >= other.value

    def __str__(self) -> str:
        return self.label


def _suit_from_index(index: int) -> Suit:
    for suit in Suit:
        if suit.index == index:
            return suit
    raise ValueError(f"Invalid suit index: {index}")


def card_value(card: Optional[Card]) -> int:
    """Value used for comparisons; a missing card ranks below the deuce."""
    return -1 if card is None else card.value


def card_label(card: Optional[Card]) -> str:
    return "Empty" if card is None else card.label


def cards_to_labels(cards: Iterable[Optional[Card]]) -> List[str]:
    return [card_label(card) for card in cards]


def parse_label(label: str) -> Card:
    text = label.strip()
    if len(text) < 2:
        raise ValueError(f"Invalid card label: {label}")
    rank, suit_token = text[:-1].upper(), text[-1]
    if rank == "10":
        rank = "T"
    if len(rank) != 1 or rank not in RANKS:
        raise ValueError(f"Invalid rank: {text[:-1]}")
    suit = _SUIT_BY_TOKEN.get(suit_token)
    if suit is None:
        raise ValueError(f"Invalid suit: {suit_token}")
    return Card(RANKS.index(rank), suit)


def parse_cards(labels: Iterable[str]) -> List[Card]:
    return [parse_label(label) for label in labels]


class Deck:
    """The 52 distinct cards of a standard deck, dealt from the top.

    Every deck owns its random source. Pass ``rng`` to share a generator on
    purpose, or ``seed`` for a repeatable order. Shuffling uses ``random``
    and is not suitable where fairness must be guaranteed.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self._cards: List[Card] = [Card.from_ordinal(ordinal) for ordinal in range(MAX_ORDINAL)]
        self._top = 0

    def shuffle(self, times: int = 1) -> None:
        """Reorder the deck ``times`` times. Only legal before the first deal."""
        if times < 0:
            raise ValueError("Shuffle count must not be negative")
        if self._top != 0:
            raise RuntimeError("Cannot shuffle after dealing; restart dealing first")

        for _ in range(times):
            buffer = list(self._cards)
            for idx in range(len(self._cards)):
                self._cards[idx] = buffer.pop(self.rng.randrange(len(buffer)))
        LOGGER.debug("Deck shuffled %d time(s)", times)

    def deal(self) -> Card:
        if self._top >= len(self._cards):
            raise RuntimeError("All cards were dealt")
        card = self._cards[self._top]
        self._top += 1
        return card

    def restart_dealing(self) -> None:
        self._top = 0

    @property
    def has_cards(self) -> bool:
        return self._top < len(self._cards)

    @property
    def count(self) -> int:
        """Cards left to deal."""
        return len(self._cards) - self._top

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __getitem__(self, index: int) -> Card:
        if not 0 <= index < len(self._cards):
            raise IndexError(f"Deck index out of range: {index}")
        return self._cards[index]


def build_deck(seed: Optional[int] = None, times: int = 1) -> Deck:
    deck = Deck(seed=seed)
    deck.shuffle(times)
    return deck


def deal(deck: Deck, count: int) -> List[Card]:
    if count < 0:
        raise ValueError("Deal count must not be negative")
    if deck.count < count:
        raise RuntimeError("Not enough cards left in deck")
    return [deck.deal() for _ in range(count)]


def strip_empty(cards: Sequence[Optional[Card]]) -> List[Card]:
    return [card for card in cards if card is not None]
