"""Poker hand evaluation: cards, deck, hand families and showdown ranking."""

from .cards import EMPTY, RANKS, SUITS, Card, Deck, Suit, build_deck, card_label, deal, parse_cards, parse_label
from .evaluator import FAMILIES, best_hand, describe_hand, evaluate_best
from .families import (
    complete_with_kickers,
    find_highest_group,
    flush,
    four_of_a_kind,
    full_house,
    high_card,
    pair,
    straight,
    straight_flush,
    three_of_a_kind,
    two_pair,
)
from .models import DealConfig, Hand, HandInvariantError, HandKind, compare_hands
from .showdown import Showdown, deal_table, rank_hands, rank_players

__all__ = [
    "EMPTY",
    "RANKS",
    "SUITS",
    "Card",
    "Deck",
    "Suit",
    "build_deck",
    "card_label",
    "deal",
    "parse_cards",
    "parse_label",
    "FAMILIES",
    "best_hand",
    "describe_hand",
    "evaluate_best",
    "complete_with_kickers",
    "find_highest_group",
    "flush",
    "four_of_a_kind",
    "full_house",
    "high_card",
    "pair",
    "straight",
    "straight_flush",
    "three_of_a_kind",
    "two_pair",
    "DealConfig",
    "Hand",
    "HandInvariantError",
    "HandKind",
    "compare_hands",
    "Showdown",
    "rank_hands",
    "deal_table",
    "rank_players",
]
