"""
Decision procedures for computer seats.

``HeuristicAgent`` is the greedy, no-lookahead player used by the computer
seats: it bids by counting high cards and plays to win tricks while under its
bid and to shed them once the bid is met. ``RandomAgent`` picks uniformly among
legal choices and serves as a baseline for simulations.

Both follow the small ``Policy`` protocol the game state drives:
``choose_bid(hand, tricks_in_round, total_bids, is_last)`` and
``choose_card(hand, trick, bid, tricks_won)``.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, Sequence

from .bidding import bid_rejection
from .deck import Card, RANK_QUEEN, compare
from .play import Trick

# A card counts toward the bid if it is a trump of this rank or better...
TRUMP_BID_RANK = 8
# ...or a plain-suit Queen, King or Ace.
PLAIN_BID_RANK = RANK_QUEEN


class Policy(Protocol):
    """Bid and card choices for one seat. Must only return legal choices."""

    def choose_bid(self, hand: Sequence[Card], tricks_in_round: int, total_bids: int, is_last: bool) -> int:
        ...

    def choose_card(self, hand: Sequence[Card], trick: Trick, bid: int, tricks_won: int) -> Card:
        ...


def estimate_bid(hand: Sequence[Card]) -> int:
    """Number of cards likely to take a trick on their own."""
    bid = 0
    for card in hand:
        if card.is_trump() and card.rank >= TRUMP_BID_RANK:
            bid += 1
        elif not card.is_trump() and card.rank >= PLAIN_BID_RANK:
            bid += 1
    return bid


def choose_bid(hand: Sequence[Card], tricks_in_round: int, total_bids: int, is_last: bool) -> int:
    """
    Heuristic bid. As closing bidder, steps down by one when the estimate would
    make the bids add up to the trick count (up by one if already at zero).
    """
    bid = min(estimate_bid(hand), tricks_in_round)
    if is_last and total_bids + bid == tricks_in_round:
        bid = bid - 1 if bid > 0 else bid + 1
    return bid


def strongest(cards: Sequence[Card], lead) -> Card:
    best = cards[0]
    for card in cards[1:]:
        if compare(card, best, lead) == 1:
            best = card
    return best


def weakest(cards: Sequence[Card], lead) -> Card:
    worst = cards[0]
    for card in cards[1:]:
        if compare(card, worst, lead) == -1:
            worst = card
    return worst


def choose_card(hand: Sequence[Card], trick: Trick, bid: int, tricks_won: int) -> Card:
    """
    Greedy card choice against the current trick.

    Still short of the bid: play the strongest legal card if it takes the lead,
    otherwise throw the weakest. Bid already met: play the strongest legal card
    only if it still loses, otherwise the weakest.
    """
    legal = trick.legal_plays(hand)
    if not legal:
        raise RuntimeError("No legal plays available")
    max_card = strongest(legal, trick.lead)
    min_card = weakest(legal, trick.lead)
    wins = compare(max_card, trick.winning_card, trick.lead) == 1

    if tricks_won < bid:
        return max_card if wins else min_card
    return min_card if wins else max_card


@dataclass
class HeuristicAgent:
    """The computer opponent: count-high-cards bidding, greedy play."""

    def choose_bid(self, hand: Sequence[Card], tricks_in_round: int, total_bids: int, is_last: bool) -> int:
        return choose_bid(hand, tricks_in_round, total_bids, is_last)

    def choose_card(self, hand: Sequence[Card], trick: Trick, bid: int, tricks_won: int) -> Card:
        return choose_card(hand, trick, bid, tricks_won)


@dataclass
class RandomAgent:
    """
    Baseline policy that picks uniformly among legal bids and cards.

    Usage:
        agent = RandomAgent(seed=42)
        card = agent.choose_card(hand, trick, bid, tricks_won)
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def choose_bid(self, hand: Sequence[Card], tricks_in_round: int, total_bids: int, is_last: bool) -> int:
        options = [b for b in range(tricks_in_round + 1) if bid_rejection(b, tricks_in_round, total_bids, is_last) is None]
        return self._rng.choice(options)

    def choose_card(self, hand: Sequence[Card], trick: Trick, bid: int, tricks_won: int) -> Card:
        legal = trick.legal_plays(hand)
        if not legal:
            raise RuntimeError("No legal plays available for RandomAgent")
        return self._rng.choice(legal)


__all__ = [
    "Policy",
    "estimate_bid",
    "choose_bid",
    "choose_card",
    "strongest",
    "weakest",
    "HeuristicAgent",
    "RandomAgent",
]
