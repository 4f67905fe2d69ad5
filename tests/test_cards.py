import dataclasses

import pytest

from blackjack.cards import Card, Rank, Suit, decode_rank, decode_suit, rank_name, suit_name


@pytest.mark.parametrize(
    "rank, expected",
    [
        (Rank.TWO, 2),
        (Rank.FIVE, 5),
        (Rank.NINE, 9),
        (Rank.TEN, 10),
        (Rank.JACK, 10),
        (Rank.QUEEN, 10),
        (Rank.KING, 10),
        (Rank.ACE, 11),
    ],
)
def test_card_value(rank, expected):
    assert Card(rank, Suit.HEARTS).value() == expected


def test_ace_low_value():
    ace = Card(Rank.ACE, Suit.CLUBS)
    assert ace.value(ace_high=False) == 1
    # ace_high only matters for aces
    assert Card(Rank.KING, Suit.CLUBS).value(ace_high=False) == 10


def test_encode_layout():
    assert Card(Rank.TWO, Suit.CLUBS).encode() == 0x0000
    assert Card(Rank.ACE, Suit.SPADES).encode() == 0x0C03
    assert Card(Rank.TEN, Suit.DIAMONDS).encode() == 0x0801
    assert Card(Rank.ACE, Suit.SPADES).bits_str() == "0c03"


def test_encode_decode_round_trip_for_every_card():
    for suit in Suit:
        for rank in Rank:
            bits = Card(rank, suit).encode()
            assert 0 <= bits <= 0xFFFF
            assert decode_rank(bits) == rank
            assert decode_suit(bits) == suit
            assert Card.decode(bits) == Card(rank, suit)


def test_describe_and_names():
    assert Card(Rank.ACE, Suit.SPADES).describe() == "Ace of Spades"
    assert str(Card(Rank.SEVEN, Suit.HEARTS)) == "Seven of Hearts"
    assert rank_name(Rank.QUEEN) == "Queen"
    assert suit_name(Suit.DIAMONDS) == "Diamonds"


def test_card_is_immutable_and_hashable():
    ace = Card(Rank.ACE, Suit.SPADES)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ace.rank = Rank.TWO
    assert len({ace, Card(Rank.ACE, Suit.SPADES)}) == 1


def test_card_coerces_ints_and_rejects_out_of_range():
    assert Card(12, 3) == Card(Rank.ACE, Suit.SPADES)
    assert isinstance(Card(0, 0).rank, Rank)
    with pytest.raises(ValueError):
        Card(13, 0)
    with pytest.raises(ValueError):
        Card(0, 4)


def test_cards_order_by_rank_then_suit():
    assert Card(Rank.TWO, Suit.SPADES) < Card(Rank.THREE, Suit.CLUBS)
    assert Card(Rank.KING, Suit.CLUBS) < Card(Rank.KING, Suit.HEARTS)
