"""Tests for cards, comparison, deck and trick rules."""
import random
from functools import cmp_to_key

import pytest

from ohhell.agents import RandomAgent
from ohhell.deck import Deck, Suit, beats, compare, make_card, make_deck_52
from ohhell.errors import Rejection
from ohhell.play import Trick, legal_plays

C, S, D, H = Suit.CLUBS, Suit.SPADES, Suit.DIAMONDS, Suit.HEARTS


def test_deck_52_unique_ids():
    deck = make_deck_52()
    assert len(deck) == 52
    assert len({c.id for c in deck}) == 52
    assert len({(c.suit, c.rank) for c in deck}) == 52
    assert make_card(H, 14).id == 14 * 4 + 3


def test_card_str():
    assert str(make_card(H, 12)) == "Q♥"
    assert str(make_card(C, 10)) == "10♣"
    assert str(make_card(S, 14)) == "A♠"


def test_card_rank_out_of_range():
    with pytest.raises(ValueError):
        make_card(H, 15)


def test_draw_removes_from_front():
    deck = Deck(random.Random(1))
    first = list(deck.cards[:5])
    drawn = deck.draw(5)
    assert drawn == first
    assert len(deck) == 47
    assert not set(c.id for c in drawn) & set(c.id for c in deck.cards)


def test_draw_more_than_remaining_fails():
    deck = Deck()
    deck.draw(50)
    with pytest.raises(ValueError):
        deck.draw(3)


def test_shuffle_is_permutation_and_seeded():
    a = Deck(random.Random(7))
    b = Deck(random.Random(7))
    a.shuffle()
    b.shuffle()
    assert a.cards == b.cards
    assert sorted(c.id for c in a.cards) == sorted(c.id for c in make_deck_52())


def test_shuffle_spreads_every_card_over_first_position():
    rng = random.Random(2024)
    counts = {c.id: 0 for c in make_deck_52()}
    n = 5200
    for _ in range(n):
        deck = Deck(rng)
        deck.shuffle()
        counts[deck.cards[0].id] += 1
    # Expected 100 per card; allow a wide band.
    assert all(50 <= v <= 160 for v in counts.values())


def test_trump_beats_higher_plain_card():
    two_clubs = make_card(C, 2)
    ace_hearts = make_card(H, 14)
    assert compare(two_clubs, ace_hearts, H) == 1
    assert compare(ace_hearts, two_clubs, H) == -1


def test_compare_rules():
    # both trump: higher rank
    assert beats(make_card(C, 9), make_card(C, 8), H)
    # lead beats off-suit regardless of rank
    assert beats(make_card(H, 2), make_card(S, 14), H)
    # both lead: higher rank
    assert beats(make_card(H, 11), make_card(H, 10), H)
    # off-suit pair falls back to rank
    assert beats(make_card(S, 13), make_card(D, 12), H)


def test_missing_card_always_loses():
    card = make_card(D, 2)
    assert compare(card, None, H) == 1
    assert compare(None, card, H) == -1


@pytest.mark.parametrize("lead", [None, C, S, D, H])
def test_compare_is_strict_total_order(lead):
    deck = make_deck_52()
    for a in deck:
        for b in deck:
            if a.id == b.id:
                continue
            assert compare(a, b, lead) == -compare(b, a, lead)

    ordered = sorted(deck, key=cmp_to_key(lambda x, y: compare(x, y, lead)))
    for i, low in enumerate(ordered):
        for high in ordered[i + 1:]:
            assert compare(high, low, lead) == 1
    assert ordered[-1] == make_card(C, 14)


def test_trick_play_sets_lead_winner_and_trump():
    trick = Trick()
    trick.play(make_card(H, 10), 2)
    assert trick.lead == H
    assert trick.winner == 2
    trick.play(make_card(H, 12), 3)
    assert trick.winner == 3
    trick.play(make_card(S, 14), 0)
    assert trick.winner == 3
    assert not trick.trump_broken
    trick.play(make_card(C, 2), 1)
    assert trick.winner == 1
    assert trick.winning_card == make_card(C, 2)
    assert trick.trump_broken
    assert trick.is_complete()


def test_clear_keeps_trump_broken_until_round_reset():
    trick = Trick()
    trick.play(make_card(C, 5), 0)
    trick.clear()
    assert trick.is_empty()
    assert trick.lead is None
    assert trick.winner is None
    assert trick.winning_card is None
    assert trick.trump_broken
    trick.reset_round()
    assert not trick.trump_broken


def test_cannot_lead_trump_before_broken():
    trick = Trick()
    hand = [make_card(C, 9), make_card(H, 3)]
    assert not trick.valid(hand[0], hand)
    assert trick.rejection(hand[0], hand) == Rejection.TRUMP_NOT_BROKEN
    assert trick.valid(hand[1], hand)
    assert legal_plays(hand, trick) == [hand[1]]


def test_can_lead_trump_once_broken_or_all_trump():
    trick = Trick()
    all_clubs = [make_card(C, 9), make_card(C, 3)]
    assert trick.legal_plays(all_clubs) == all_clubs

    trick.trump_broken = True
    hand = [make_card(C, 9), make_card(H, 3)]
    assert trick.valid(hand[0], hand)


def test_must_follow_lead_if_able():
    trick = Trick()
    trick.play(make_card(D, 8), 0)
    hand = [make_card(D, 2), make_card(C, 14), make_card(H, 14)]
    assert trick.legal_plays(hand) == [make_card(D, 2)]
    assert trick.rejection(make_card(C, 14), hand) == Rejection.MUST_FOLLOW_SUIT

    void = [make_card(C, 14), make_card(H, 14)]
    assert trick.legal_plays(void) == void


def test_off_suit_card_never_wins_a_trick():
    for seed in range(30):
        rng = random.Random(seed)
        deck = Deck(rng)
        deck.shuffle()
        hands = [deck.draw(13) for _ in range(4)]
        agents = [RandomAgent(seed=seed * 10 + i) for i in range(4)]
        trick = Trick()
        leader = 0
        for _ in range(13):
            for k in range(4):
                seat = (leader + k) % 4
                card = agents[seat].choose_card(hands[seat], trick, 0, 0)
                hands[seat].remove(card)
                trick.play(card, seat)
            assert trick.winning_card.suit in (trick.lead, Suit.CLUBS)
            played = dict((s, c) for c, s in trick.cards)
            assert played[trick.winner] == trick.winning_card
            leader = trick.winner
            trick.clear()
