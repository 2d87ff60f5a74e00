import pytest

from kongworld.barrels import BlueBarrel
from kongworld.character import PlayerCharacter
from kongworld.core import Screen
from kongworld.enemies import Kong
from kongworld.game import ACTOR_LOCATION, ITEM_LOCATION, GameMode, main


@pytest.fixture
def game():
    mode = GameMode(Screen())
    mode.begin_play()
    return mode


def test_default_pawn_is_player_character():
    assert GameMode(Screen()).pawn_class is PlayerCharacter


def test_first_and_last_messages(game):
    texts = game.screen.texts()
    assert texts[0] == "Donkey Kong esta atacando"
    assert texts[-1] == "obtuviste una vida extra"


def test_messages_follow_spawn_order(game):
    texts = game.screen.texts()
    assert texts.index("Donkey Kong esta atacando") < texts.index(
        "El puerco spin te esta atacando"
    )
    assert texts.index("El Zorrillo acaba de infectar a Mario") < texts.index(
        "Bolita de fuego se esta moviendo"
    )
    assert "Donkey Kong tiene su estado en MUY ENOJADO" in texts
    assert "El puerco spin te lanzara 8 espinas" in texts


def test_every_actor_has_begun_play(game):
    assert game.actors
    assert all(actor.has_begun_play for actor in game.actors)


def test_actor_types_and_locations(game):
    assert isinstance(game.kong, Kong)
    assert isinstance(game.blue_barrel, BlueBarrel)
    assert game.score.location == ITEM_LOCATION
    assert game.static_barrel.location == ACTOR_LOCATION


def test_enemies_moved_towards_patrol_end(game):
    assert game.kong.location.y < ACTOR_LOCATION.y
    assert game.kong.location.x == ACTOR_LOCATION.x


def test_values_applied(game):
    assert game.score.points == 54.0
    assert game.kong.throw_speed == 700.0
    assert game.ladder.height == game.moving_ladder.height == 0.5
    assert game.double_score.bonus == 2.0
    assert game.time_limit.level_time == 100.0


def test_begin_play_twice_raises(game):
    with pytest.raises(RuntimeError):
        game.begin_play()


def test_tick_advances_all_actors(game):
    game.tick(0.5)
    game.tick(0.25)
    assert game.age == 0.75
    assert all(actor.age == 0.75 for actor in game.actors)


def test_main_prints_messages(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Donkey Kong esta atacando"
    assert lines[-1] == "obtuviste una vida extra"


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])