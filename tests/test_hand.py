import pytest

from blackjack.cards import Card, Rank, Suit
from blackjack.hand import Hand


def hand_of(*ranks):
    hand = Hand()
    suits = list(Suit)
    for i, rank in enumerate(ranks):
        hand.add_card(Card(rank, suits[i % 4]))
    return hand


def test_empty_hand():
    hand = Hand()
    assert hand.value() == 0
    assert len(hand) == 0
    assert not hand.is_soft
    assert not hand.is_bust()
    assert not hand.is_blackjack()


def test_ace_king_is_blackjack():
    hand = hand_of(Rank.ACE, Rank.KING)
    assert hand.value() == 21
    assert hand.is_blackjack()
    assert hand.is_soft


def test_two_aces_and_nine_demote_one_ace():
    hand = hand_of(Rank.ACE, Rank.ACE, Rank.NINE)
    assert hand.value() == 21
    assert not hand.is_bust()
    assert not hand.is_blackjack()
    assert hand.is_soft


def test_king_queen_two_busts():
    hand = hand_of(Rank.KING, Rank.QUEEN, Rank.TWO)
    assert hand.value() == 22
    assert hand.is_bust()


@pytest.mark.parametrize(
    "ranks, expected, soft",
    [
        ((Rank.ACE, Rank.SIX), 17, True),
        ((Rank.ACE, Rank.SIX, Rank.TEN), 17, False),
        ((Rank.ACE, Rank.ACE), 12, True),
        ((Rank.ACE, Rank.ACE, Rank.ACE, Rank.ACE, Rank.SEVEN), 21, True),
        ((Rank.ACE, Rank.ACE, Rank.ACE, Rank.ACE, Rank.EIGHT, Rank.NINE), 21, False),
        ((Rank.ACE, Rank.ACE, Rank.TEN, Rank.TEN), 22, False),
        ((Rank.TEN, Rank.SEVEN), 17, False),
    ],
)
def test_soft_and_hard_totals(ranks, expected, soft):
    hand = hand_of(*ranks)
    assert hand.value() == expected
    assert hand.is_soft is soft


def test_three_card_twenty_one_is_not_blackjack():
    hand = hand_of(Rank.SEVEN, Rank.SEVEN, Rank.SEVEN)
    assert hand.value() == 21
    assert not hand.is_blackjack()


def test_cards_view_is_read_only_and_ordered():
    hand = hand_of(Rank.TWO, Rank.THREE)
    assert isinstance(hand.cards, tuple)
    assert [card.rank for card in hand] == [Rank.TWO, Rank.THREE]
    assert hand.describe() == "Two of Clubs, Three of Diamonds"
