from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Hashable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from .cards import Card, Deck, cards_to_labels, deal, strip_empty
from .evaluator import best_hand, describe_hand
from .models import DealConfig, Hand

LOGGER = logging.getLogger("pokerhands.showdown")

PlayerT = TypeVar("PlayerT", bound=Hashable)

# Showdown ranks the players still in the hand. Chips stay with the caller:
# the betting layer only asks who won and how many ways the pot splits.


@dataclass
class Showdown(Generic[PlayerT]):
    hands: Dict[PlayerT, Hand]
    # Equality groups, best hand first.
    ranking: List[List[PlayerT]] = field(default_factory=list)
    board: List[Card] = field(default_factory=list)

    @property
    def winners(self) -> List[PlayerT]:
        return list(self.ranking[0]) if self.ranking else []

    @property
    def split_ways(self) -> int:
        return len(self.winners)

    @property
    def order(self) -> List[PlayerT]:
        """Players from best to worst; tied players keep their group order."""
        return [player for group in self.ranking for player in group]

    def place_of(self, player: PlayerT) -> int:
        for place, group in enumerate(self.ranking):
            if player in group:
                return place
        raise KeyError(player)

    def events(self) -> List[Dict[str, object]]:
        board_labels = cards_to_labels(self.board)
        events: List[Dict[str, object]] = []
        for player in self.order:
            hand = self.hands[player]
            events.append(
                {
                    "ev": "SHOWDOWN",
                    "player": player,
                    "hand": hand.labels,
                    "board": board_labels,
                    "rank": describe_hand(hand),
                    "name": str(hand),
                }
            )
        events.append({"ev": "WINNERS", "players": self.winners, "split": self.split_ways})
        return events


def rank_hands(hands: Mapping[PlayerT, Hand]) -> List[List[PlayerT]]:
    """Group players by equal hands, strongest group first."""
    ranking: List[List[PlayerT]] = []
    for player in _sorted_players(hands):
        if ranking and hands[ranking[-1][0]] == hands[player]:
            ranking[-1].append(player)
        else:
            ranking.append([player])
    return ranking


def _sorted_players(players: Mapping[PlayerT, Hand]) -> List[PlayerT]:
    # sorted() is stable, so tied players keep the mapping order.
    return sorted(players, key=lambda player: players[player], reverse=True)


def rank_players(
    cards_by_player: Mapping[PlayerT, Sequence[Optional[Card]]],
    board: Sequence[Optional[Card]] = (),
) -> Showdown[PlayerT]:
    if not cards_by_player:
        raise ValueError("No players at showdown")

    shared = strip_empty(board)
    hands: Dict[PlayerT, Hand] = {}
    for player, cards in cards_by_player.items():
        hand = best_hand(list(cards) + shared)
        if hand is None:
            raise ValueError(f"Player {player!r} has no cards")
        hands[player] = hand

    showdown = Showdown(hands=hands, ranking=rank_hands(hands), board=shared)
    LOGGER.info(
        "Showdown: %s win with %s (%d way split)",
        showdown.winners,
        hands[showdown.winners[0]],
        showdown.split_ways,
    )
    return showdown


def deal_table(config: DealConfig, deck: Optional[Deck] = None) -> Tuple[Dict[int, List[Card]], List[Card]]:
    """Deal hole cards round by round, then the board."""
    deck = deck if deck is not None else Deck(seed=config.seed)
    deck.shuffle(config.shuffles)
    hole: Dict[int, List[Card]] = {player: [] for player in range(config.players)}
    for _ in range(config.hole_cards):
        for player in hole:
            hole[player].extend(deal(deck, 1))
    board = deal(deck, config.board_cards)
    return hole, board
