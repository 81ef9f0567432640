"""Tests for bid legality and round scoring."""
import pytest

from ohhell.bidding import bid_rejection, check_bid, forbidden_closing_bid
from ohhell.errors import InvalidBidError, Rejection
from ohhell.scoring import MADE_BID_BONUS, RoundResult, round_score


def test_closing_bid_that_matches_trick_count_is_rejected():
    # 5 tricks, three earlier bids summing to 3
    with pytest.raises(InvalidBidError) as exc:
        check_bid(2, tricks_in_round=5, total_bids=3, is_last=True)
    assert exc.value.reason == Rejection.BID_MAKES_TOTAL_EXACT
    check_bid(3, tricks_in_round=5, total_bids=3, is_last=True)


def test_matching_total_is_fine_before_the_last_bid():
    check_bid(2, tricks_in_round=5, total_bids=3, is_last=False)


def test_bid_range():
    assert bid_rejection(6, 5, 0, False) == Rejection.BID_EXCEEDS_TRICKS
    assert bid_rejection(-1, 5, 0, False) == Rejection.BID_NEGATIVE
    assert bid_rejection(5, 5, 0, False) is None
    assert bid_rejection(0, 5, 0, False) is None


def test_rejection_messages_are_specific():
    with pytest.raises(InvalidBidError) as exc:
        check_bid(7, tricks_in_round=5, total_bids=0, is_last=False)
    assert "Not enough cards" in exc.value.message
    with pytest.raises(InvalidBidError) as exc:
        check_bid(1, tricks_in_round=1, total_bids=0, is_last=True)
    assert "Can't go 1" in exc.value.message


def test_forbidden_closing_bid():
    assert forbidden_closing_bid(5, 3) == 2
    assert forbidden_closing_bid(5, 0) == 5
    assert forbidden_closing_bid(5, 6) is None


def test_round_score():
    assert round_score(bid=3, tricks=3) == 13
    assert round_score(bid=3, tricks=2) == 2
    assert round_score(bid=3, tricks=4) == 4
    assert round_score(bid=0, tricks=0) == MADE_BID_BONUS


def test_round_result_made_bid():
    result = RoundResult(round=2, bids=(0, 1, 0, 0), tricks=(1, 1, 0, 0), points=(1, 11, 10, 10), totals=(1, 11, 10, 10))
    assert not result.made_bid(0)
    assert result.made_bid(1)
