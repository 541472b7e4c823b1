import random

import pytest

from toybox.cards import SUITS, VALUES, Deck, main


def test_new_deck_has_every_combination_in_order():
    deck = Deck()
    assert len(deck.cards) == len(SUITS) * len(VALUES)
    assert deck.cards[0] == "Ace of Hearts"
    assert deck.cards[-1] == "Three of Diamonds"
    assert len(set(deck.cards)) == len(deck.cards)


def test_shuffle_keeps_the_same_cards():
    deck = Deck()
    before = sorted(deck.cards)
    deck.shuffle(random.Random(42))
    assert sorted(deck.cards) == before


def test_shuffle_with_same_seed_is_reproducible():
    first = Deck()
    second = Deck()
    first.shuffle(random.Random(7))
    second.shuffle(random.Random(7))
    assert first.cards == second.cards


def test_deal_takes_from_the_end():
    deck = Deck()
    original = list(deck.cards)
    hand = deck.deal(3)
    assert hand == original[-3:]
    assert deck.cards == original[:-3]


def test_deal_zero_returns_nothing():
    deck = Deck()
    size = len(deck.cards)
    assert deck.deal(0) == []
    assert len(deck.cards) == size


def test_deal_whole_deck_empties_it():
    deck = Deck()
    original = list(deck.cards)
    assert deck.deal(len(original)) == original
    assert deck.cards == []


def test_deal_too_many_raises():
    deck = Deck(["Ace of Hearts"])
    with pytest.raises(ValueError):
        deck.deal(2)
    assert deck.cards == ["Ace of Hearts"]


def test_deal_negative_raises():
    deck = Deck()
    with pytest.raises(ValueError):
        deck.deal(-1)


def test_main_prints_deck_and_hand(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Heres your deck: Deck {" in out
    assert "Heres your hand: [" in out
    hand_part = out.split("Heres your hand:")[1]
    assert sum(" of " in line for line in hand_part.splitlines()) == 3