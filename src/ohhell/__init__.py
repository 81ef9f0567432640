"""Oh-Hell rules engine (four seats, Clubs trump, 13 shrinking rounds)."""

__version__ = "0.1.0"

from .deck import Card, Deck, Suit, TRUMP, beats, compare, make_card, make_deck_52
from .play import Trick, legal_plays
from .players import Player
from .bidding import check_bid
from .scoring import RoundResult, round_score
from .agents import HeuristicAgent, RandomAgent, choose_bid, choose_card, estimate_bid
from .errors import GameError, InvalidBidError, InvalidMoveError, InvalidPhaseError, Rejection
from .game import GameState, MatchConfig, Phase
