"""Seat state: hand, bid, tricks won this round, cumulative points."""
from __future__ import annotations

from dataclasses import dataclass, field

from .deck import Card


@dataclass
class Player:
    """
    One seat at the table. The hand is owned exclusively by this player and
    shrinks by exactly one card per play.
    """

    id: int
    is_human: bool = False
    name: str = "cpu"
    hand: list[Card] = field(default_factory=list)
    bid: int = 0
    tricks: int = 0
    points: int = 0

    def set_hand(self, cards: list[Card]) -> None:
        ids = {c.id for c in cards}
        if len(ids) != len(cards):
            raise ValueError("Duplicate cards in hand")
        self.hand = list(cards)

    def get_card(self, card_id: int) -> Card:
        for c in self.hand:
            if c.id == card_id:
                return c
        raise ValueError(f"Card {card_id} not in hand of {self.name} (seat {self.id})")

    def has_card(self, card_id: int) -> bool:
        return any(c.id == card_id for c in self.hand)

    def remove_card(self, card: Card) -> None:
        if card not in self.hand:
            raise ValueError(f"Card {card} not in hand")
        self.hand.remove(card)

    def reset_round(self) -> None:
        self.bid = 0
        self.tricks = 0
