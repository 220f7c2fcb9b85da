from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional, Sequence

from .cards import Card, parse_cards
from .evaluator import best_hand
from .models import DealConfig
from .showdown import Showdown, deal_table, rank_players

LOGGER = logging.getLogger("pokerhands")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    # Either evaluate the given cards or deal a table from a seeded deck.
    parser = argparse.ArgumentParser(description="Evaluate poker hands")
    parser.add_argument("--cards", nargs="+", help="Cards to evaluate, e.g. Ah Kd 10c 2s")
    parser.add_argument("--players", type=int, default=2)
    parser.add_argument("--hole", type=int, default=2, help="Private cards per player")
    parser.add_argument("--board", type=int, default=5, help="Shared board cards")
    parser.add_argument("--shuffles", type=int, default=1, help="Times to shuffle before dealing")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a repeatable deal")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, etc.).")
    return parser.parse_args(argv)


def format_showdown(showdown: Showdown[int], hole: Dict[int, List[Card]]) -> List[str]:
    lines = ["Board: " + " ".join(card.label for card in showdown.board)]
    for player in showdown.order:
        hand = showdown.hands[player]
        lines.append(
            f"Player {player}: {' '.join(card.label for card in hole[player])} -> "
            f"{hand} [{' '.join(hand.labels)}]"
        )
    lines.append(f"Winners: {', '.join(str(player) for player in showdown.winners)} ({showdown.split_ways} way split)")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    if args.cards:
        hand = best_hand(parse_cards(args.cards))
        if hand is None:
            LOGGER.error("No cards to evaluate")
            return 1
        print(f"{hand}: {' '.join(hand.labels)}")
        return 0

    config = DealConfig(
        players=args.players,
        hole_cards=args.hole,
        board_cards=args.board,
        shuffles=args.shuffles,
        seed=args.seed,
    )
    hole, board = deal_table(config)
    LOGGER.info("Dealt %d players with seed %s", config.players, config.seed)
    showdown = rank_players(hole, board)
    for line in format_showdown(showdown, hole):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
