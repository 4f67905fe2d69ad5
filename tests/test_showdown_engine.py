import pytest

from blackjack.cards import Card, Rank, Suit
from blackjack.game_engine import GameEngine, GameState
from blackjack.player import Player
from blackjack.showdown_engine import ShowdownEngine, result_message


def setup_hands(player_ranks, dealer_ranks):
    engine = GameEngine(Player("alice"), Player("Dealer", is_ai=True))
    for rank in player_ranks:
        engine.player.hand.add_card(Card(rank, Suit.HEARTS))
    for rank in dealer_ranks:
        engine.dealer.hand.add_card(Card(rank, Suit.CLUBS))
    return engine


@pytest.mark.parametrize(
    "player_ranks, dealer_ranks, expected",
    [
        ((Rank.TEN, Rank.NINE), (Rank.TEN, Rank.SEVEN), GameState.PLAYER_WIN),
        ((Rank.TEN, Rank.SEVEN), (Rank.NINE, Rank.EIGHT), GameState.PUSH),
        ((Rank.TEN, Rank.SIX), (Rank.TEN, Rank.EIGHT), GameState.DEALER_WIN),
        ((Rank.ACE, Rank.KING), (Rank.SEVEN, Rank.SEVEN, Rank.SEVEN), GameState.PUSH),
    ],
)
def test_resolve_compares_totals(player_ranks, dealer_ranks, expected):
    engine = setup_hands(player_ranks, dealer_ranks)
    assert ShowdownEngine(engine).resolve() == expected


def test_result_messages():
    engine = setup_hands((Rank.TEN, Rank.NINE), (Rank.TEN, Rank.EIGHT))
    showdown = ShowdownEngine(engine)
    assert showdown.result_message(GameState.PLAYER_BUST) == "You busted! Dealer wins."
    assert showdown.result_message(GameState.DEALER_BUST) == "Dealer busted! You win."
    assert showdown.result_message(GameState.PLAYER_WIN) == "You won with: 19"
    assert showdown.result_message(GameState.PUSH) == "It's a tie!"
    assert showdown.result_message(GameState.DEALER_WIN) == "Dealer wins with: 18"


@pytest.mark.parametrize("state", [GameState.START, GameState.ACTIVE, GameState.QUIT])
def test_result_message_rejects_unfinished_states(state):
    engine = setup_hands((), ())
    with pytest.raises(ValueError):
        result_message(state, engine)
