import pytest

from coupgame.game import Game
from coupgame.player import GameError, Player


def make_game(*names):
    game = Game()
    return game, [Player(game, name) for name in names]


def _eliminate_first_then_turn(game, players):
    game.eliminate_player(players[0])
    return game.turn()


def test_players_in_seating_order():
    names = ["Moshe", "Yossi", "Meirav", "Reut", "Gilad"]
    game, _ = make_game(*names)
    assert game.players() == names
    assert game.turn() == "Moshe"
    assert game.active_count == 5


def test_no_joining_after_start():
    game, (a, _) = make_game("a", "b")
    assert not game.has_started
    a.gather()
    assert game.has_started
    with pytest.raises(GameError, match="after game has started"):
        Player(game, "late")


def test_turn_wraps_around():
    game, (a, b) = make_game("a", "b")
    a.gather()
    b.gather()
    assert game.turn() == "a"


def test_turn_skips_eliminated():
    game, (a, b, c) = make_game("a", "b", "c")
    game.eliminate_player(b)
    a.gather()
    assert game.turn() == "c"
    c.gather()
    assert game.turn() == "a"


def test_turn_stays_once_game_is_over():
    game, (a, _, c) = make_game("a", "b", "c")
    a.gather()
    game.eliminate_player(a)
    game.eliminate_player(c)
    game.next_turn()
    assert game.turn() == "b"
    assert game.winner() == "b"


def test_next_turn_sets_must_coup_for_upcoming():
    game, (_, b) = make_game("a", "b")
    b.coins = 10
    game.next_turn()
    assert b.must_coup
    assert game.turn() == "b"


def test_last_arrested_starts_empty():
    game, (a, b) = make_game("a", "b")
    assert game.last_arrested is None
    b.coins = 1
    a.arrest(b)
    assert game.last_arrested is b