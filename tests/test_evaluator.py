import itertools

import pytest

from pokerhands.evaluator import FAMILIES, best_hand, describe_hand, evaluate_best
from pokerhands.families import DETECTORS
from pokerhands.models import Hand, HandInvariantError, HandKind, compare_hands

from .helpers import cards, ranks, seeded_hands


def test_best_hand_identifies_all_hand_categories():
    cases = [
        (HandKind.STRAIGHT_FLUSH, ["Ah", "Kh", "Qh", "Jh", "Th"]),
        (HandKind.FOUR_OF_A_KIND, ["As", "Ah", "Ad", "Ac", "Kd"]),
        (HandKind.FULL_HOUSE, ["Qc", "Qd", "Qs", "9h", "9s"]),
        (HandKind.FLUSH, ["Ah", "Jh", "9h", "6h", "2h"]),
        (HandKind.STRAIGHT, ["9h", "8d", "7c", "6s", "5h"]),
        (HandKind.THREE_OF_A_KIND, ["8h", "8d", "8s", "Qd", "Js"]),
        (HandKind.TWO_PAIR, ["7h", "7d", "4s", "4c", "As"]),
        (HandKind.PAIR, ["6h", "6s", "Qh", "8d", "4c"]),
        (HandKind.HIGH_CARD, ["As", "Kd", "Jh", "9c", "4d"]),
    ]

    for expected, labels in cases:
        hand = best_hand(cards(*labels))
        assert hand is not None
        assert hand.kind is expected, f"labels={labels}"


def test_display_names():
    names = {kind: kind.display_name for kind in HandKind}
    assert names == {
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
    hand = best_hand(cards("Qc", "Qd", "Qs", "9h", "9s"))
    assert str(hand) == "Full House"
    assert describe_hand(hand) == "full_house"


def test_families_run_strongest_first():
    kinds = [kind for kind, _ in FAMILIES]
    assert kinds == sorted(HandKind, reverse=True)
    assert kinds[0] is HandKind.STRAIGHT_FLUSH
    assert kinds[-1] is HandKind.HIGH_CARD


def test_triplet_without_pair_is_not_a_full_house():
    hand = best_hand(cards("2s", "2c", "2d", "5h", "9c", "Kd", "As"))
    assert hand is not None
    assert hand.kind is HandKind.THREE_OF_A_KIND
    assert ranks(hand.full) == "222AK"


def test_full_house_scenario():
    hand = best_hand(cards("2s", "2c", "2d", "9h", "9d", "Kd", "4s"))
    assert hand is not None
    assert hand.kind is HandKind.FULL_HOUSE
    assert ranks(hand) == "22299"


def test_best_hand_strips_empty_cards():
    assert best_hand([]) is None
    assert best_hand([None, None]) is None
    hand = best_hand([None] + cards("Kd", "Kc") + [None])
    assert hand is not None
    assert hand.kind is HandKind.PAIR
    assert ranks(hand.full) == "KK---"


def test_evaluate_best_returns_orderable_strength():
    strong = evaluate_best(cards("Ah", "Ad", "Kc", "Qs", "9h", "2d", "3c"))
    weak = evaluate_best(cards("Ah", "Ad", "Qc", "Js", "8h", "2d", "3c"))
    assert strong[0] == weak[0] == int(HandKind.PAIR)
    assert strong > weak
    with pytest.raises(ValueError, match="empty card set"):
        evaluate_best([None])


def test_evaluate_best_sorts_like_hand_comparison():
    holdings = [
        ("Ah", "2d", "3c", "4s", "5h", "9d", "Jc"),
        ("6h", "2d", "3c", "4s", "5h", "9d", "Jc"),
        ("Ah", "Ad", "Kc", "Qs", "9h", "2d", "3c"),
        ("Kh", "Qd", "9c", "7s", "4h"),
        ("Ah", "Ad", "Ac", "Ks", "Kh"),
    ]
    by_key = sorted(holdings, key=lambda labels: evaluate_best(cards(*labels)))
    by_hand = sorted(holdings, key=lambda labels: best_hand(cards(*labels)))
    assert by_key == by_hand
    assert by_key[0] == holdings[3]
    assert by_key[-1] == holdings[4]


def test_kickers_decide_equal_pairs():
    hand_a = best_hand(cards("Ah", "Ad", "Kc", "Qs", "9h", "2d", "3c"))
    hand_b = best_hand(cards("As", "Ac", "Kd", "Qh", "8h", "2c", "3d"))
    assert hand_a > hand_b
    assert compare_hands(hand_a, hand_b) == 1
    assert compare_hands(hand_b, hand_a) == -1


def test_suits_never_change_the_outcome():
    spades_first = best_hand(cards("As", "Ah", "Kc", "Qd", "9s"))
    clubs_first = best_hand(cards("Ac", "Ad", "Kh", "Qs", "9d"))
    lower = best_hand(cards("Ac", "Ad", "Kh", "Qs", "8d"))

    assert spades_first == clubs_first
    assert hash(spades_first) == hash(clubs_first)
    assert compare_hands(spades_first, lower) == compare_hands(clubs_first, lower) == 1


def test_stronger_family_always_wins():
    for hand in seeded_hands(150):
        found = [detect(hand) for detect in DETECTORS.values()]
        found = [result for result in found if result is not None]
        for weaker, stronger in itertools.combinations(sorted(found, key=lambda h: h.kind), 2):
            if weaker.kind < stronger.kind:
                assert stronger > weaker
                assert compare_hands(weaker, stronger) == -1


def test_best_hand_matches_best_five_card_subset():
    for hand in seeded_hands(120, seed=77):
        best = best_hand(hand)
        subset_best = max(best_hand(list(combo)) for combo in itertools.combinations(hand, 5))
        assert best == subset_best, [card.code for card in hand]


def test_hand_rejects_wrong_comparison_length():
    with pytest.raises(HandInvariantError):
        Hand(HandKind.PAIR, tuple(cards("9s", "9h")), tuple(cards("9s", "9h", "2c")))


def test_comparing_mismatched_lengths_is_an_invariant_violation():
    first = best_hand(cards("9s", "9h", "2c", "3d", "4h"))
    second = best_hand(cards("9c", "9d", "2h", "3s", "5h"))
    # Simulate a broken detector; real hands never reach this state.
    object.__setattr__(second, "full", second.full[:4])
    with pytest.raises(HandInvariantError, match="different card counts"):
        compare_hands(first, second)
