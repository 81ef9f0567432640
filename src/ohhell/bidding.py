"""
Bid legality, shared by human and computer seats.

A bid must lie in 0..tricks_in_round, and the closing bidder may not bring the
sum of all bids to exactly the number of tricks (so someone always misses).
"""
from __future__ import annotations

from .errors import InvalidBidError, Rejection


def bid_rejection(bid: int, tricks_in_round: int, total_bids: int, is_last: bool) -> Rejection | None:
    """Reason ``bid`` is refused, or None if it is legal."""
    if bid < 0:
        return Rejection.BID_NEGATIVE
    if bid > tricks_in_round:
        return Rejection.BID_EXCEEDS_TRICKS
    if is_last and total_bids + bid == tricks_in_round:
        return Rejection.BID_MAKES_TOTAL_EXACT
    return None


def check_bid(bid: int, tricks_in_round: int, total_bids: int, is_last: bool) -> None:
    """Raise ``InvalidBidError`` if ``bid`` is not allowed."""
    reason = bid_rejection(bid, tricks_in_round, total_bids, is_last)
    if reason is None:
        return
    if reason == Rejection.BID_NEGATIVE:
        message = "Bid cannot be negative"
    elif reason == Rejection.BID_EXCEEDS_TRICKS:
        message = f"Not enough cards for that bid! Only {tricks_in_round} tricks this round"
    else:
        message = f"Can't go {bid}: total bids would equal {tricks_in_round}"
    raise InvalidBidError(reason, message)


def forbidden_closing_bid(tricks_in_round: int, total_bids: int) -> int | None:
    """The single bid the closing bidder may not make, if it is in range."""
    bid = tricks_in_round - total_bids
    if 0 <= bid <= tricks_in_round:
        return bid
    return None


__all__ = ["bid_rejection", "check_bid", "forbidden_closing_bid"]
