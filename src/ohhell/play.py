"""
Trick-taking: the cards on the board, legal moves, running winner.
Must follow the lead suit if able; Clubs may not be led until trump is broken
unless the hand holds nothing but Clubs.
"""
from __future__ import annotations

import logging
from typing import Sequence

from .deck import Card, Suit, TRUMP, beats
from .errors import Rejection

logger = logging.getLogger(__name__)

PLAYERS = 4


class Trick:
    """Cards played to the current trick, plus the round-scoped trump-broken flag."""

    def __init__(self) -> None:
        self.cards: list[tuple[Card, int]] = []  # (card, seat) in play order
        self.lead: Suit | None = None
        self.winner: int | None = None  # seat index
        self.winning_card: Card | None = None
        self.trump_broken: bool = False

    def __len__(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def is_complete(self) -> bool:
        return len(self.cards) == PLAYERS

    def play(self, card: Card, seat: int) -> None:
        """
        Put ``card`` on the board for ``seat``. Sets the lead on the first card,
        breaks trump on any Club, and updates the running winner.

        Assumes the card is legal; check with ``valid`` first.
        """
        self.cards.append((card, seat))
        if len(self.cards) == 1:
            self.lead = card.suit
        if card.suit == TRUMP and not self.trump_broken:
            self.trump_broken = True
            logger.debug(f"Trump broken by seat {seat} with {card}")
        if beats(card, self.winning_card, self.lead):
            self.winning_card = card
            self.winner = seat

    def rejection(self, card: Card, hand: Sequence[Card]) -> Rejection | None:
        """Reason ``card`` may not be played from ``hand`` now, or None if it may."""
        if not self.cards:
            if card.suit != TRUMP or self.trump_broken:
                return None
            if all(c.suit == TRUMP for c in hand):
                return None
            return Rejection.TRUMP_NOT_BROKEN
        if card.suit == self.lead:
            return None
        if any(c.suit == self.lead for c in hand):
            return Rejection.MUST_FOLLOW_SUIT
        return None

    def valid(self, card: Card, hand: Sequence[Card]) -> bool:
        return self.rejection(card, hand) is None

    def legal_plays(self, hand: Sequence[Card]) -> list[Card]:
        return [c for c in hand if self.valid(c, hand)]

    def clear(self) -> None:
        """Empty the board for the next trick. Trump stays broken."""
        self.cards = []
        self.lead = None
        self.winner = None
        self.winning_card = None

    def reset_round(self) -> None:
        self.clear()
        self.trump_broken = False


def legal_plays(hand: Sequence[Card], trick: Trick) -> list[Card]:
    """Cards from ``hand`` that may legally be played to ``trick``."""
    return trick.legal_plays(hand)


__all__ = ["PLAYERS", "Trick", "legal_plays"]
