"""Shared test fixtures for the game engine tests."""

import random
from typing import Iterable, List, Optional

import pytest

from banco_imobiliario import GameRules, GameState, create_game
from banco_imobiliario.turn import JailAction


class ScriptedRandom:
    """Random source that replays fixed die values, in order."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)

    def randint(self, a: int, b: int) -> int:
        value = self.values.pop(0)
        assert a <= value <= b
        return value

    def queue(self, *values: int) -> None:
        self.values.extend(values)


class ScriptedDecider:
    """TurnDecider that answers from fixed settings and records what it was asked."""

    def __init__(
        self,
        jail_action: JailAction = JailAction.PASS,
        buy: bool = False,
        build: bool = False,
        sell: Optional[str] = None,
    ):
        self.jail_action = jail_action
        self.buy = buy
        self.build = build
        self.sell = sell
        self.asked: List[str] = []

    def choose_jail_action(self, player):
        self.asked.append("jail")
        return self.jail_action

    def confirm_purchase(self, player, movement):
        self.asked.append("buy")
        return self.buy

    def confirm_build(self, player, movement):
        self.asked.append("build")
        return self.build

    def choose_sale(self, player, properties):
        self.asked.append("sell")
        return self.sell


@pytest.fixture
def rules():
    """Default rules."""
    return GameRules()


@pytest.fixture
def dice():
    """Scripted dice; tests queue the values they need."""
    return ScriptedRandom([])


@pytest.fixture
def game(rules, dice):
    """Two-player game, Alice to play, with scripted dice."""
    return create_game(["Alice", "Bob"], rules, dice)


@pytest.fixture
def seeded_game(rules):
    """Four-player game with seeded dice for reproducibility."""
    return create_game(["Alice", "Bob", "Charlie", "Diana"], rules, random.Random(42))


@pytest.fixture
def empty_game(rules):
    """Game with nobody seated yet."""
    return GameState(rules, random.Random(0))


def alice(game):
    return game.players[0]


def bob(game):
    return game.players[1]
