"""
Tests for player state.
"""

from banco_imobiliario.player import PlayerState


def test_new_player_defaults():
    player = PlayerState("Alice", 4000)

    assert player.balance == 4000
    assert player.position == 0
    assert not player.in_jail
    assert player.turns_in_jail == 0
    assert player.get_out_of_jail_cards == 0
    assert player.properties == set()


def test_debit_clamps_at_zero():
    player = PlayerState("Alice", 100)

    player.debit(30)
    assert player.balance == 70

    player.debit(500)
    assert player.balance == 0


def test_credit_is_unconditional():
    player = PlayerState("Alice", 0)
    player.credit(250)
    assert player.balance == 250


def test_send_to_jail_and_release():
    player = PlayerState("Alice", 100)
    player.position = 30
    player.turns_in_jail = 2

    player.send_to_jail(10)
    assert player.in_jail
    assert player.position == 10
    assert player.turns_in_jail == 0

    player.turns_in_jail = 2
    player.release_from_jail()
    assert not player.in_jail
    assert player.turns_in_jail == 0
    assert player.position == 10


def test_active_means_money_left():
    player = PlayerState("Alice", 1)
    assert player.is_active()

    player.debit(1)
    assert not player.is_active()


def test_jail_cards():
    player = PlayerState("Alice", 100)
    assert not player.consume_jail_card()

    player.add_jail_card()
    assert player.consume_jail_card()
    assert player.get_out_of_jail_cards == 0
