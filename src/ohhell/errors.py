"""
Rule violations raised by the engine.

Every user-facing rejection carries a ``Rejection`` reason so a front end can
show specific feedback. A rejected submission never changes game state.
Broken programming invariants (card not in hand, overdrawn deck) are plain
``ValueError`` and are not meant to be recovered from.
"""
from __future__ import annotations

from enum import Enum


class Rejection(str, Enum):
    """Why a bid or play was refused."""

    MUST_FOLLOW_SUIT = "must_follow_suit"
    TRUMP_NOT_BROKEN = "trump_not_broken"
    BID_NEGATIVE = "bid_negative"
    BID_EXCEEDS_TRICKS = "bid_exceeds_tricks"
    BID_MAKES_TOTAL_EXACT = "bid_makes_total_exact"
    NOT_BIDDING = "not_bidding"
    NOT_PLAYING = "not_playing"
    NOT_YOUR_TURN = "not_your_turn"
    MATCH_OVER = "match_over"


class GameError(Exception):
    """Base class for recoverable rule violations."""

    def __init__(self, reason: Rejection, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class InvalidMoveError(GameError):
    """A card that breaks suit-following or trump-lead rules."""


class InvalidBidError(GameError):
    """A bid that is out of range or, as closing bid, makes the totals match."""


class InvalidPhaseError(GameError):
    """A submission made in the wrong phase or out of turn."""


__all__ = ["Rejection", "GameError", "InvalidMoveError", "InvalidBidError", "InvalidPhaseError"]
