#!/usr/bin/env python3
"""Deal many seeded tables and tally the winning hand categories.

Handy for eyeballing the evaluator against known Hold'em frequencies and for
shaking out comparison errors across thousands of random showdowns.

Example:
    python scripts/showdown_sim.py --tables 2000 --players 6 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Counter as CounterT

from pokerhands.cards import Deck
from pokerhands.models import DealConfig, HandKind
from pokerhands.showdown import deal_table, rank_players

LOGGER = logging.getLogger("showdown_sim")


@dataclass
class SimStats:
    tables: int = 0
    split_pots: int = 0
    best_hands: CounterT[HandKind] = field(default_factory=Counter)
    winning_hands: CounterT[HandKind] = field(default_factory=Counter)


def run_simulation(args: argparse.Namespace) -> SimStats:
    rng = random.Random(args.seed)
    stats = SimStats()
    config = DealConfig(players=args.players, hole_cards=args.hole, board_cards=args.board, shuffles=args.shuffles)

    for _ in range(args.tables):
        # One generator feeds every deck so a single seed replays the whole run.
        hole, board = deal_table(config, Deck(rng=rng))
        showdown = rank_players(hole, board)
        stats.tables += 1
        if showdown.split_ways > 1:
            stats.split_pots += 1
        for hand in showdown.hands.values():
            stats.best_hands[hand.kind] += 1
        stats.winning_hands[showdown.hands[showdown.winners[0]].kind] += 1
    return stats


def report(stats: SimStats) -> None:
    total_hands = sum(stats.best_hands.values())
    LOGGER.info("Simulated %d tables (%d split pots). Summary:", stats.tables, stats.split_pots)
    for kind in sorted(HandKind, reverse=True):
        seen = stats.best_hands[kind]
        share = 100.0 * seen / total_hands if total_hands else 0.0
        LOGGER.info(
            "  %-16s -> %6d hands (%5.2f%%), %5d wins",
            kind.display_name,
            seen,
            share,
            stats.winning_hands[kind],
        )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Deal random tables and tally showdown results.")
    parser.add_argument("--tables", type=int, default=1_000, help="Number of tables to deal.")
    parser.add_argument("--players", type=int, default=6, help="Players per table.")
    parser.add_argument("--hole", type=int, default=2, help="Private cards per player.")
    parser.add_argument("--board", type=int, default=5, help="Shared board cards.")
    parser.add_argument("--shuffles", type=int, default=1, help="Shuffle passes per deck.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a repeatable run.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, etc.).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    report(run_simulation(args))


if __name__ == "__main__":
    main()
