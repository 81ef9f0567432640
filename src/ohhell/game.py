"""
Match orchestration: deal → bid → play tricks → score, for 13 rounds of
shrinking hands (13 cards each, then 12, ... down to 1).

``GameState`` owns the deck, the trick and the four seats and is the only
thing that mutates them. A front end drives it with ``submit_bid`` /
``submit_play`` for the human seat and ``advance_computers`` (or
``computer_bid`` / ``computer_play``) for the others, and re-renders from
``snapshot()`` whenever a subscribed callback fires.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence

from .agents import HeuristicAgent, Policy
from .bidding import check_bid
from .deck import Card, DECK_SIZE, Deck
from .errors import InvalidMoveError, InvalidPhaseError, Rejection
from .play import PLAYERS, Trick
from .players import Player
from .scoring import RoundResult, round_score

logger = logging.getLogger(__name__)

MAX_ROUND = DECK_SIZE // PLAYERS  # 13

Listener = Callable[[dict], None]


class Phase(Enum):
    BIDDING = "bidding"
    PLAYING = "playing"
    FINISHED = "finished"


@dataclass
class MatchConfig:
    """Configuration for one match."""

    seed: int | None = None
    human_seat: int | None = PLAYERS - 1  # None: all four seats are computers
    human_name: str = "human"
    cpu_name: str = "cpu"
    start_round: int = MAX_ROUND  # cards per hand in the first round

    def __post_init__(self) -> None:
        if not 1 <= self.start_round <= MAX_ROUND:
            raise ValueError(f"start_round must be in 1..{MAX_ROUND}, got {self.start_round}")
        if self.human_seat is not None and not 0 <= self.human_seat < PLAYERS:
            raise ValueError(f"human_seat must be in 0..{PLAYERS - 1} or None, got {self.human_seat}")


class GameState:
    """Mutable state for a whole match. Seats are indexed 0..3; seat 0 bids and leads first."""

    def __init__(
        self,
        config: MatchConfig | None = None,
        rng: random.Random | None = None,
        agents: Sequence[Policy] | None = None,
    ):
        self.config = config or MatchConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.players: list[Player] = []
        for i in range(PLAYERS):
            if i == self.config.human_seat:
                self.players.append(Player(id=i, is_human=True, name=self.config.human_name))
            else:
                self.players.append(Player(id=i, is_human=False, name=f"{self.config.cpu_name}{i + 1}"))
        if agents is None:
            agents = [HeuristicAgent() for _ in range(PLAYERS)]
        if len(agents) != PLAYERS:
            raise ValueError(f"Expected {PLAYERS} agents, got {len(agents)}")
        self.agents: list[Policy] = list(agents)

        self.deck: Deck | None = None  # replaced every round by _deal
        self.trick = Trick()
        self.turn: int = 0
        self.plays: int = 0  # submissions in the current phase
        self.tricks_completed: int = 0
        self.round: int = self.config.start_round  # tricks this round; also rounds left
        self.total_bids: int = 0
        self.phase: Phase = Phase.BIDDING
        self.history: list[RoundResult] = []
        self._listeners: list[Listener] = []

        self._deal(self.config.start_round)

    # ---- notifications ----

    def subscribe(self, callback: Listener) -> None:
        """Call ``callback(snapshot)`` after every state change."""
        self._listeners.append(callback)

    def unsubscribe(self, callback: Listener) -> None:
        self._listeners.remove(callback)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for callback in list(self._listeners):
            callback(snap)

    # ---- accessors ----

    @property
    def rounds_remaining(self) -> int:
        """Rounds left including the current one (hand sizes count down to 1)."""
        return self.round

    def current_player(self) -> Player:
        return self.players[self.turn]

    def is_over(self) -> bool:
        return self.phase == Phase.FINISHED

    def is_last_bidder(self) -> bool:
        return self.phase == Phase.BIDDING and self.plays == PLAYERS - 1

    def scores(self) -> tuple[int, ...]:
        return tuple(p.points for p in self.players)

    def legal_cards(self, player_id: int) -> list[Card]:
        return self.trick.legal_plays(self._seat(player_id).hand)

    def snapshot(self) -> dict[str, Any]:
        """Full JSON-ready view of the current state."""
        return {
            "phase": self.phase.value,
            "turn": self.turn,
            "round": self.round,
            "rounds_remaining": self.rounds_remaining,
            "tricks_completed": self.tricks_completed,
            "total_bids": self.total_bids,
            "trick": {
                "cards": [{"seat": seat, "card": card.id, "label": str(card)} for card, seat in self.trick.cards],
                "lead": None if self.trick.lead is None else self.trick.lead.name,
                "winner": self.trick.winner,
                "winning_card": None if self.trick.winning_card is None else self.trick.winning_card.id,
                "trump_broken": self.trick.trump_broken,
            },
            "players": [
                {
                    "id": p.id,
                    "name": p.name,
                    "is_human": p.is_human,
                    "hand": [c.id for c in p.hand],
                    "bid": p.bid,
                    "tricks": p.tricks,
                    "points": p.points,
                }
                for p in self.players
            ],
        }

    # ---- dealing ----

    def deal_round(self, cards_per_hand: int) -> None:
        """Start a round: fresh shuffled deck, ``cards_per_hand`` cards to each seat, bidding from seat 0."""
        if self.phase == Phase.FINISHED:
            raise InvalidPhaseError(Rejection.MATCH_OVER, "The match is over")
        self._deal(cards_per_hand)
        self._notify()

    def _deal(self, cards_per_hand: int) -> None:
        if not 1 <= cards_per_hand <= MAX_ROUND:
            raise ValueError(f"cards_per_hand must be in 1..{MAX_ROUND}, got {cards_per_hand}")
        self.round = cards_per_hand
        self.deck = Deck(self.rng)
        self.deck.shuffle()
        for p in self.players:
            p.set_hand(self.deck.draw(cards_per_hand))
            p.reset_round()
        self.trick.reset_round()
        self.turn = 0
        self.plays = 0
        self.tricks_completed = 0
        self.total_bids = 0
        self.phase = Phase.BIDDING
        logger.debug(f"Dealt round of {cards_per_hand} cards per hand")

    # ---- bidding ----

    def submit_bid(self, player_id: int, bid: int) -> None:
        """
        Record ``bid`` for ``player_id``. Raises ``InvalidPhaseError`` out of turn
        or outside bidding and ``InvalidBidError`` for an illegal amount; in both
        cases nothing changes and the same seat must bid again.
        """
        self._check_turn(player_id, Phase.BIDDING)
        check_bid(bid, self.round, self.total_bids, self.is_last_bidder())
        self._apply_bid(player_id, bid)
        self._notify()

    def computer_bid(self, player_id: int) -> int:
        """Let the seat's agent bid, apply it and return it."""
        self._check_turn(player_id, Phase.BIDDING)
        player = self.players[player_id]
        bid = self.agents[player_id].choose_bid(player.hand, self.round, self.total_bids, self.is_last_bidder())
        check_bid(bid, self.round, self.total_bids, self.is_last_bidder())
        self._apply_bid(player_id, bid)
        self._notify()
        return bid

    def _apply_bid(self, player_id: int, bid: int) -> None:
        player = self.players[player_id]
        player.bid = bid
        self.total_bids += bid
        logger.debug(f"{player.name} bids {bid} (total {self.total_bids}/{self.round})")
        self._next_turn()
        if self.plays == PLAYERS:
            self._start_play()

    def _start_play(self) -> None:
        self.plays = 0
        self.turn = 0
        self.phase = Phase.PLAYING

    # ---- playing ----

    def submit_play(self, player_id: int, card_id: int) -> Card:
        """
        Play card ``card_id`` from ``player_id``'s hand. Raises ``InvalidPhaseError``
        out of turn or outside play, ``InvalidMoveError`` when the card breaks
        suit-following or trump-lead rules, and ``ValueError`` if the card is not
        in the hand.
        """
        self._check_turn(player_id, Phase.PLAYING)
        player = self.players[player_id]
        card = player.get_card(card_id)
        self._check_card(player, card)
        self._apply_play(player, card)
        self._notify()
        return card

    def computer_play(self, player_id: int) -> Card:
        """Let the seat's agent pick a card, play it and return it."""
        self._check_turn(player_id, Phase.PLAYING)
        player = self.players[player_id]
        card = self.agents[player_id].choose_card(player.hand, self.trick, player.bid, player.tricks)
        self._check_card(player, card)
        self._apply_play(player, card)
        self._notify()
        return card

    def _check_card(self, player: Player, card: Card) -> None:
        reason = self.trick.rejection(card, player.hand)
        if reason == Rejection.MUST_FOLLOW_SUIT:
            raise InvalidMoveError(reason, f"Must follow suit: {self.trick.lead.name.title()} was led")
        if reason == Rejection.TRUMP_NOT_BROKEN:
            raise InvalidMoveError(reason, "Clubs cannot be led until trump is broken")

    def _apply_play(self, player: Player, card: Card) -> None:
        player.remove_card(card)
        self.trick.play(card, player.id)
        self.plays += 1
        logger.debug(f"{player.name} plays {card}")
        if self.trick.is_complete():
            self._finish_trick()
        else:
            self.turn = (self.turn + 1) % PLAYERS

    def _finish_trick(self) -> None:
        winner = self.trick.winner
        if winner is None:
            raise RuntimeError("Completed trick has no winner")
        self.players[winner].tricks += 1
        self.tricks_completed += 1
        logger.debug(f"{self.players[winner].name} wins trick {self.tricks_completed} with {self.trick.winning_card}")
        # Winner leads the next trick.
        self.turn = winner
        self.trick.clear()
        if self.tricks_completed == self.round:
            self._finish_round()

    def _finish_round(self) -> None:
        gained = [round_score(p.bid, p.tricks) for p in self.players]
        for p, pts in zip(self.players, gained):
            p.points += pts
        result = RoundResult(
            round=self.round,
            bids=tuple(p.bid for p in self.players),
            tricks=tuple(p.tricks for p in self.players),
            points=tuple(gained),
            totals=self.scores(),
        )
        self.history.append(result)
        logger.info(
            f"Round of {self.round} scored: bids={list(result.bids)} tricks={list(result.tricks)} "
            f"points={list(result.points)} totals={list(result.totals)}"
        )

        for p in self.players:
            p.reset_round()
        next_round = self.round - 1
        if next_round == 0:
            self.round = 0
            self.turn = 0
            self.plays = 0
            self.tricks_completed = 0
            self.total_bids = 0
            self.trick.reset_round()
            self.phase = Phase.FINISHED
            logger.info(f"Match over: final scores {list(self.scores())}")
        else:
            self._deal(next_round)

    # ---- driving computer seats ----

    def advance_computers(self) -> list[tuple[int, int | Card]]:
        """
        Let computer seats act until a human seat is up or the match ends.
        Returns the moves made as (seat, bid) or (seat, card).
        """
        moves: list[tuple[int, int | Card]] = []
        while not self.is_over() and not self.current_player().is_human:
            seat = self.turn
            if self.phase == Phase.BIDDING:
                moves.append((seat, self.computer_bid(seat)))
            else:
                moves.append((seat, self.computer_play(seat)))
        return moves

    # ---- helpers ----

    def _seat(self, player_id: int) -> Player:
        if not 0 <= player_id < PLAYERS:
            raise ValueError(f"No seat {player_id}")
        return self.players[player_id]

    def _next_turn(self) -> None:
        self.turn = (self.turn + 1) % PLAYERS
        self.plays += 1

    def _check_turn(self, player_id: int, phase: Phase) -> None:
        self._seat(player_id)
        if self.phase == Phase.FINISHED:
            raise InvalidPhaseError(Rejection.MATCH_OVER, "The match is over")
        if self.phase != phase:
            if phase == Phase.PLAYING:
                raise InvalidPhaseError(Rejection.NOT_PLAYING, "Make bid first")
            raise InvalidPhaseError(Rejection.NOT_BIDDING, "Bidding is closed for this round")
        if player_id != self.turn:
            raise InvalidPhaseError(
                Rejection.NOT_YOUR_TURN,
                f"It is {self.players[self.turn].name}'s turn, not {self.players[player_id].name}'s",
            )


__all__ = ["MAX_ROUND", "Phase", "MatchConfig", "GameState"]
