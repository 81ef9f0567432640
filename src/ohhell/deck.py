"""
Standard 52-card deck for Oh-Hell: 4 suits × 13 ranks, Clubs always trump.
Ranks run 2..14 (11=Jack, 12=Queen, 13=King, 14=Ace).
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class Suit(IntEnum):
    """Suit codes. CLUBS is the fixed trump suit."""
    CLUBS = 0
    SPADES = 1
    DIAMONDS = 2
    HEARTS = 3


TRUMP = Suit.CLUBS

RANK_JACK = 11
RANK_QUEEN = 12
RANK_KING = 13
RANK_ACE = 14

DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    """A single playing card. ``id`` is unique among the 52 cards (rank * 4 + suit)."""

    suit: Suit
    rank: int
    id: int

    def __post_init__(self) -> None:
        if not 2 <= self.rank <= RANK_ACE:
            raise ValueError(f"Rank out of range: {self.rank}")

    def is_trump(self) -> bool:
        return self.suit == TRUMP

    def __str__(self) -> str:
        rank_str = {RANK_ACE: "A", RANK_KING: "K", RANK_QUEEN: "Q", RANK_JACK: "J"}.get(self.rank) or str(self.rank)
        suit_char = "♣♠♦♥"[self.suit]
        return f"{rank_str}{suit_char}"

    def __repr__(self) -> str:
        return str(self)


def make_card(suit: Suit, rank: int) -> Card:
    return Card(suit=Suit(suit), rank=rank, id=rank * 4 + int(suit))


def make_deck_52() -> list[Card]:
    """Full deck in rank-major order (2♣ 2♠ 2♦ 2♥ 3♣ ...)."""
    return [make_card(s, rank) for rank in range(2, RANK_ACE + 1) for s in Suit]


def compare(a: Optional[Card], b: Optional[Card], lead: Suit | None) -> int:
    """
    Return 1 if ``a`` beats ``b`` under ``lead``, -1 otherwise. Never 0 for distinct cards.

    Trump beats everything else; then lead suit beats off-suit; within a class the
    higher rank wins. Two off-suit cards fall back to rank, then suit code, so that
    heuristics get a strict total order even though such a pair never decides a
    trick. A missing card (None) always loses.
    """
    if b is None:
        return 1
    if a is None:
        return -1

    if a.is_trump() or b.is_trump():
        if a.is_trump() and b.is_trump():
            return 1 if a.rank > b.rank else -1
        return 1 if a.is_trump() else -1

    if a.suit == lead or b.suit == lead:
        if a.suit == lead and b.suit == lead:
            return 1 if a.rank > b.rank else -1
        return 1 if a.suit == lead else -1

    return 1 if (a.rank, a.suit) > (b.rank, b.suit) else -1


def beats(a: Optional[Card], b: Optional[Card], lead: Suit | None) -> bool:
    return compare(a, b, lead) == 1


class Deck:
    """Ordered cards for one round: shuffled once, then drawn down to zero."""

    def __init__(self, rng: random.Random | None = None):
        self.cards: list[Card] = make_deck_52()
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self) -> None:
        self._rng.shuffle(self.cards)

    def draw(self, num: int) -> list[Card]:
        """Remove and return the first ``num`` cards."""
        if num < 0 or num > len(self.cards):
            raise ValueError(f"Cannot draw {num} cards; {len(self.cards)} remain")
        drawn = self.cards[:num]
        del self.cards[:num]
        return drawn
