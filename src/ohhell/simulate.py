"""
Computer-only matches and score statistics.

Every seat is driven by its agent (heuristic by default), so a seed fully
determines the match. Useful for checking that the engine never stalls and for
comparing agents over many matches.
"""
from __future__ import annotations

import random
from typing import Callable, Dict, List, Sequence

import numpy as np

from .agents import Policy
from .game import GameState, MatchConfig, MAX_ROUND
from .play import PLAYERS

AgentFactory = Callable[[int], Sequence[Policy]]


def run_computer_match(
    seed: int,
    start_round: int = MAX_ROUND,
    make_agents: AgentFactory | None = None,
) -> GameState:
    """Play a full match with no human seat; returns the finished state."""
    config = MatchConfig(seed=seed, human_seat=None, start_round=start_round)
    agents = make_agents(seed) if make_agents is not None else None
    state = GameState(config, agents=agents)
    state.advance_computers()
    if not state.is_over():
        raise RuntimeError("Computer match stopped before the end")
    return state


def run_matches(
    num_matches: int,
    seed: int = 0,
    start_round: int = MAX_ROUND,
    make_agents: AgentFactory | None = None,
) -> np.ndarray:
    """
    Final scores of ``num_matches`` computer matches, shape (num_matches, 4).
    Per-match seeds are drawn from ``seed`` so the whole batch is reproducible.
    """
    rng = random.Random(seed)
    scores = np.zeros((num_matches, PLAYERS), dtype=np.int64)
    for i in range(num_matches):
        state = run_computer_match(rng.randrange(2**32), start_round=start_round, make_agents=make_agents)
        scores[i] = state.scores()
    return scores


def summarize(scores: np.ndarray) -> Dict[str, List[float]]:
    """Per-seat mean / std / min / max and outright wins (ties credit every leader)."""
    if scores.ndim != 2 or scores.shape[1] != PLAYERS:
        raise ValueError(f"Expected scores of shape (n, {PLAYERS}), got {scores.shape}")
    if scores.shape[0] == 0:
        raise ValueError("No matches to summarize")
    best = scores.max(axis=1, keepdims=True)
    wins = (scores == best).sum(axis=0)
    return {
        "mean": scores.mean(axis=0).round(3).tolist(),
        "std": scores.std(axis=0).round(3).tolist(),
        "min": scores.min(axis=0).astype(float).tolist(),
        "max": scores.max(axis=0).astype(float).tolist(),
        "wins": wins.astype(float).tolist(),
    }


__all__ = ["run_computer_match", "run_matches", "summarize"]
