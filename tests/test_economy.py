"""
Tests for buying, building, rent and selling through the engine.
"""

import pytest

from banco_imobiliario.events import EventType
from conftest import alice, bob

LEBLON = 1


def buy_leblon_for_alice(game):
    alice(game).position = LEBLON
    assert game.attempt_purchase()
    return game.board.property_at(LEBLON)


def play_as_bob(game):
    game.advance_turn()
    assert game.current_player_snapshot().name == "Bob"


# === PURCHASE ===


def test_purchase_unowned_property(game):
    deed = buy_leblon_for_alice(game)

    assert deed.owner is alice(game)
    assert alice(game).balance == 3900
    assert LEBLON in alice(game).properties
    assert game.current_player_snapshot().property_count == 1

    purchases = game.event_log.of_type(EventType.PURCHASE)
    assert purchases[0].details["price"] == 100


def test_cannot_buy_owned_property(game):
    buy_leblon_for_alice(game)

    assert not game.attempt_purchase()

    play_as_bob(game)
    bob(game).position = LEBLON
    assert not game.attempt_purchase()
    assert bob(game).balance == 4000


def test_cannot_buy_non_property(game):
    assert alice(game).position == 0
    assert not game.attempt_purchase()

    alice(game).position = 2
    assert not game.attempt_purchase()


def test_cannot_buy_without_funds(game):
    alice(game).position = LEBLON
    alice(game).balance = 99

    assert not game.attempt_purchase()
    assert game.board.property_at(LEBLON).owner is None
    assert alice(game).balance == 99


def test_buy_with_exact_balance(game):
    alice(game).position = LEBLON
    alice(game).balance = 100

    assert game.attempt_purchase()
    assert alice(game).balance == 0


# === BUILD ===


def test_build_on_own_property(game):
    deed = buy_leblon_for_alice(game)

    assert game.attempt_build()

    assert deed.houses == 1
    assert alice(game).balance == 3850


def test_cannot_build_on_unowned_or_foreign_property(game):
    alice(game).position = LEBLON
    assert not game.attempt_build()

    buy_leblon_for_alice(game)
    play_as_bob(game)
    bob(game).position = LEBLON
    assert not game.attempt_build()
    assert bob(game).balance == 4000


def test_cannot_build_on_non_property(game):
    assert not game.attempt_build()


def test_cannot_build_without_funds(game):
    deed = buy_leblon_for_alice(game)
    alice(game).balance = 49

    assert not game.attempt_build()
    assert deed.houses == 0


def test_hotel_after_four_houses_then_no_more_building(game):
    """Four houses then a fifth build: a hotel with houses still at 4."""
    deed = buy_leblon_for_alice(game)

    for _ in range(4):
        assert game.attempt_build()
    assert deed.houses == 4
    assert not deed.has_hotel

    assert game.attempt_build()
    assert deed.has_hotel
    assert deed.houses == 4
    assert deed.calculate_rent() == 550
    assert alice(game).balance == 4000 - 100 - 5 * 50

    assert not game.attempt_build()
    assert alice(game).balance == 4000 - 100 - 5 * 50
    assert len(game.event_log.of_type(EventType.BUILD_HOUSE)) == 4
    assert len(game.event_log.of_type(EventType.BUILD_HOTEL)) == 1


# === RENT ===


def test_no_rent_on_undeveloped_property(game):
    buy_leblon_for_alice(game)
    play_as_bob(game)
    bob(game).position = LEBLON

    landing = game.resolve_current_space()

    assert landing.rent_paid == 0
    assert bob(game).balance == 4000
    assert alice(game).balance == 3900


@pytest.mark.parametrize("builds,rent", [(1, 30), (2, 90), (3, 270), (4, 400), (5, 550)])
def test_rent_on_developed_property(game, builds, rent):
    buy_leblon_for_alice(game)
    for _ in range(builds):
        game.attempt_build()
    alice_before = alice(game).balance

    play_as_bob(game)
    bob(game).position = LEBLON
    landing = game.resolve_current_space()

    assert landing.rent_paid == rent
    assert landing.rent_owner == "Alice"
    assert bob(game).balance == 4000 - rent
    assert alice(game).balance == alice_before + rent


def test_no_rent_on_own_property(game):
    buy_leblon_for_alice(game)
    game.attempt_build()

    landing = game.resolve_current_space()

    assert landing.rent_paid == 0
    assert alice(game).balance == 3850


def test_rent_clamps_payer_but_owner_collects_in_full(game):
    deed = buy_leblon_for_alice(game)
    for _ in range(5):
        game.attempt_build()
    alice_before = alice(game).balance

    play_as_bob(game)
    bob(game).position = LEBLON
    bob(game).balance = 10
    game.resolve_current_space()

    assert deed.has_hotel
    assert bob(game).balance == 0
    assert alice(game).balance == alice_before + 550


@pytest.mark.parametrize("position", [0, 2, 7, 10, 20, 38])
def test_other_spaces_have_no_automatic_effect(game, position):
    alice(game).position = position

    landing = game.resolve_current_space()

    assert not landing.sent_to_jail
    assert landing.rent_paid == 0
    assert alice(game).balance == 4000
    assert not alice(game).in_jail


# === SELL ===


def test_sale_round_trip(game):
    """Buy, build two houses, sell: 90% of everything invested comes back."""
    deed = buy_leblon_for_alice(game)
    game.attempt_build()
    game.attempt_build()
    assert alice(game).balance == 3800

    assert game.sell_by_name("leblon")

    assert alice(game).balance == 3800 + 180
    assert deed.owner is None
    assert deed.houses == 0
    assert not deed.has_hotel
    assert LEBLON not in alice(game).properties
    assert game.list_owned_properties() == []

    # Back on the market.
    play_as_bob(game)
    bob(game).position = LEBLON
    assert game.attempt_purchase()
    assert deed.owner is bob(game)


def test_sell_matches_name_case_insensitively(game):
    buy_leblon_for_alice(game)

    assert game.sell_by_name("  LEBLON ")


def test_sell_unknown_or_foreign_property(game):
    buy_leblon_for_alice(game)

    assert not game.sell_by_name("Ibirapuera")

    play_as_bob(game)
    assert not game.sell_by_name("Leblon")
    assert game.board.property_at(LEBLON).owner is alice(game)
    assert bob(game).balance == 4000


def test_list_owned_properties_in_board_order(game):
    for position in (9, 1, 3):
        alice(game).position = position
        assert game.attempt_purchase()

    listing = game.list_owned_properties()

    assert [p.name for p in listing] == ["Leblon", "Av. Presidente Vargas", "Av. 9 de Julho"]
    assert listing[0].price == 100
    assert listing[0].build_cost == 50
    assert listing[0].owner == "Alice"
