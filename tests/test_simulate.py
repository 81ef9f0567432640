"""Tests for computer-only simulations and score summaries."""
import numpy as np
import pytest

from ohhell.agents import HeuristicAgent, RandomAgent
from ohhell.simulate import run_computer_match, run_matches, summarize


def test_run_computer_match_finishes():
    state = run_computer_match(seed=11, start_round=4)
    assert state.is_over()
    assert [r.round for r in state.history] == [4, 3, 2, 1]


def test_run_matches_shape_and_reproducible():
    a = run_matches(3, seed=1, start_round=3)
    b = run_matches(3, seed=1, start_round=3)
    assert a.shape == (3, 4)
    assert np.array_equal(a, b)
    # at most 10 + tricks per round: 13 + 12 + 11
    assert (a >= 0).all() and (a <= 36).all()


def test_run_matches_with_mixed_agents():
    def make_agents(seed):
        return [RandomAgent(seed=seed), HeuristicAgent(), HeuristicAgent(), HeuristicAgent()]

    scores = run_matches(4, seed=2, start_round=2, make_agents=make_agents)
    assert scores.shape == (4, 4)


def test_summarize():
    scores = np.array([[10, 20, 20, 5], [30, 0, 10, 10]])
    summary = summarize(scores)
    assert summary["mean"] == [20.0, 10.0, 15.0, 7.5]
    assert summary["min"] == [10.0, 0.0, 10.0, 5.0]
    assert summary["max"] == [30.0, 20.0, 20.0, 10.0]
    assert summary["wins"] == [1.0, 1.0, 1.0, 0.0]


def test_summarize_rejects_bad_shape():
    with pytest.raises(ValueError):
        summarize(np.zeros((3, 3)))
    with pytest.raises(ValueError):
        summarize(np.zeros((0, 4)))
