"""
Round scoring: making the bid exactly earns a 10-point bonus on top of one
point per trick; missing it (over or under) earns the tricks alone.
"""
from __future__ import annotations

from dataclasses import dataclass

MADE_BID_BONUS = 10


def round_score(bid: int, tricks: int) -> int:
    """Points for one player's round. bid=3/tricks=3 → 13; bid=3/tricks=2 → 2; bid=0/tricks=0 → 10."""
    if tricks == bid:
        return MADE_BID_BONUS + tricks
    return tricks


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one scored round, indexed by seat."""

    round: int  # tricks played in this round
    bids: tuple[int, ...]
    tricks: tuple[int, ...]
    points: tuple[int, ...]  # gained this round
    totals: tuple[int, ...]  # cumulative after this round

    def made_bid(self, seat: int) -> bool:
        return self.bids[seat] == self.tricks[seat]


__all__ = ["MADE_BID_BONUS", "round_score", "RoundResult"]
