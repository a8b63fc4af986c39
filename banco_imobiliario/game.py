"""
Main game engine and state management.

`GameState` is the facade the orchestration layer talks to. It owns the
board, the seated players and the turn cursor, and it is the only code
that writes player balances, positions, jail status and property
ownership or construction. Every "attempt" operation reports an invalid
action by returning False rather than raising.
"""

import logging
import random
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from banco_imobiliario.board import Board
from banco_imobiliario.config import GameRules
from banco_imobiliario.dice import is_doubles, roll_two
from banco_imobiliario.events import EventLog, EventType
from banco_imobiliario.exceptions import GameSetupError
from banco_imobiliario.player import PlayerState
from banco_imobiliario.property import Property
from banco_imobiliario.snapshot import LandingResult, MovementResult, PlayerView, PropertyView
from banco_imobiliario.spaces import SpaceType

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Lifecycle of one game."""

    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class GameState:
    """
    Represents the complete state of one game.
    This is the main interface for the game engine.
    """

    def __init__(self, rules: Optional[GameRules] = None, rng: Optional[random.Random] = None):
        self.rules = (rules if rules is not None else GameRules()).validate()
        self.rng = rng if rng is not None else random.Random()
        self.event_log = EventLog()

        self.board = Board()
        self.players: List[PlayerState] = []
        self.current_player_index = 0
        self.turn_number = 0

        self.last_dice_roll: Optional[Tuple[int, int]] = None
        self._started = False
        self._end_logged = False

        self.event_log.log(
            EventType.GAME_START,
            starting_balance=self.rules.starting_balance,
            board_size=self.board.size(),
        )

    # === SETUP ===

    def add_player(self, name: str) -> PlayerView:
        """
        Seat a new player with the starting balance at the start space.

        Raises:
            GameSetupError: if the name is blank or taken, the table is
                full, or turns have already been played
        """
        name = name.strip() if name else ""
        if not name:
            raise GameSetupError("player name cannot be blank")
        if self._started:
            raise GameSetupError("players cannot join a game in progress")
        if len(self.players) >= self.rules.max_players:
            raise GameSetupError(f"the table is full ({self.rules.max_players} players)")
        if any(p.name.casefold() == name.casefold() for p in self.players):
            raise GameSetupError(f"a player named '{name}' already joined")

        player = PlayerState(name, self.rules.starting_balance)
        self.players.append(player)
        self.event_log.log(EventType.PLAYER_JOINED, player=name, seat=len(self.players) - 1)
        logger.debug("Seated %s with %d", name, player.balance)
        return PlayerView.of(player)

    def reset(self) -> None:
        """Drop every player and return all properties to the bank."""
        self.board = Board()
        self.players.clear()
        self.current_player_index = 0
        self.turn_number = 0
        self.last_dice_roll = None
        self._started = False
        self._end_logged = False
        self.event_log.clear()
        self.event_log.log(
            EventType.GAME_START,
            starting_balance=self.rules.starting_balance,
            board_size=self.board.size(),
        )

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def phase(self) -> GamePhase:
        if not self._started:
            return GamePhase.SETUP
        if self.is_game_over():
            return GamePhase.FINISHED
        return GamePhase.IN_PROGRESS

    def _current(self) -> PlayerState:
        if not self.players:
            raise GameSetupError("no players have joined the game")
        self._started = True
        return self.players[self.current_player_index]

    def _find_player(self, name: str) -> Optional[PlayerState]:
        folded = name.casefold()
        return next((p for p in self.players if p.name.casefold() == folded), None)

    # === SNAPSHOTS ===

    def current_player_snapshot(self) -> PlayerView:
        """Read-only copy of the player whose turn it is."""
        if not self.players:
            raise GameSetupError("no players have joined the game")
        return PlayerView.of(self.players[self.current_player_index])

    def players_snapshot(self) -> List[PlayerView]:
        """Read-only copies of every player in seat order."""
        return [PlayerView.of(p) for p in self.players]

    def property_view(self, index: int) -> Optional[PropertyView]:
        """Read-only copy of the property at a board index, None for other spaces."""
        deed = self.board.property_at(index)
        return PropertyView.of(deed) if deed is not None else None

    def _views(self, positions: Iterable[int]) -> List[PropertyView]:
        return [PropertyView.of(self.board.property_at(pos)) for pos in sorted(positions)]

    def list_owned_properties(self) -> List[PropertyView]:
        """The current player's holdings in board order, for sale menus."""
        return self._views(self._current().properties)

    def list_properties_of(self, name: str) -> List[PropertyView]:
        player = self._find_player(name)
        return self._views(player.properties) if player else []

    # === DICE AND MOVEMENT ===

    def roll_dice(self) -> Tuple[int, int]:
        """Roll two dice for the current player."""
        player = self._current()
        die1, die2 = roll_two(self.rng)
        self.last_dice_roll = (die1, die2)

        self.event_log.log(
            EventType.DICE_ROLL,
            player=player.name,
            die1=die1,
            die2=die2,
            total=die1 + die2,
            doubles=is_doubles(die1, die2),
        )
        return die1, die2

    def move_current_player(self, steps: int) -> MovementResult:
        """
        Move the current player forward by `steps` spaces.

        A move that reaches or crosses the wrap point credits the
        passing-start bonus before the player is repositioned.
        """
        player = self._current()
        size = self.board.size()
        old_position = player.position
        new_position = (old_position + steps) % size
        passed_start = old_position + steps >= size

        if passed_start:
            player.credit(self.rules.passing_start_bonus)
            self.event_log.log(
                EventType.PASS_START,
                player=player.name,
                amount=self.rules.passing_start_bonus,
                new_balance=player.balance,
            )

        player.position = new_position
        space = self.board.space_at(new_position)

        self.event_log.log(
            EventType.MOVE,
            player=player.name,
            steps=steps,
            from_position=old_position,
            to_position=new_position,
        )
        return MovementResult(new_position, space.name, space.space_type, passed_start)

    # === JAIL ===

    def send_current_to_jail(self) -> None:
        player = self._current()
        player.send_to_jail(self.board.jail_index)
        self.event_log.log(EventType.GO_TO_JAIL, player=player.name)
        logger.debug("%s sent to jail", player.name)

    def grant_jail_card(self) -> int:
        """Give the current player a get-out-of-jail card. Returns the new card count."""
        player = self._current()
        player.add_jail_card()
        return player.get_out_of_jail_cards

    def use_jail_card(self) -> bool:
        """
        Spend a get-out-of-jail card to leave jail.
        Returns True if the player had a card, False otherwise.
        """
        player = self._current()
        if not player.consume_jail_card():
            return False

        player.release_from_jail()
        self.event_log.log(EventType.JAIL_RELEASE, player=player.name, method="card")
        return True

    def attempt_jail_release(self, die1: int, die2: int) -> bool:
        """
        Try to leave jail with a roll.

        Doubles release immediately. Otherwise the attempt counts; once the
        attempts reach the jail turn limit a player who can afford the fine
        pays it and is released.

        Returns:
            True if the player is free after this call, False if still jailed
        """
        player = self._current()
        if not player.in_jail:
            return True

        doubles = is_doubles(die1, die2)
        if not doubles:
            player.turns_in_jail += 1

        self.event_log.log(
            EventType.JAIL_ATTEMPT,
            player=player.name,
            attempt=player.turns_in_jail,
            doubles=doubles,
        )

        if doubles:
            player.release_from_jail()
            self.event_log.log(EventType.JAIL_RELEASE, player=player.name, method="doubles")
            return True

        if player.turns_in_jail >= self.rules.max_jail_turns and player.balance >= self.rules.jail_fine:
            player.debit(self.rules.jail_fine)
            player.release_from_jail()
            self.event_log.log(
                EventType.JAIL_RELEASE,
                player=player.name,
                method="fine",
                amount=self.rules.jail_fine,
            )
            return True

        return False

    # === LANDING ===

    def resolve_current_space(self) -> LandingResult:
        """
        Apply the automatic effect of the space the current player stands on.

        Go-to-jail spaces jail the player. Developed properties owned by
        someone else charge rent. Everything else has no automatic effect.
        """
        player = self._current()
        space = self.board.space_at(player.position)
        self.event_log.log(EventType.LAND, player=player.name, space=space.name, type=space.space_type.value)

        if space.space_type is SpaceType.GO_TO_JAIL:
            self.send_current_to_jail()
            return LandingResult(space.space_type, sent_to_jail=True)

        if space.space_type is SpaceType.PROPERTY:
            return self._charge_rent(player, space.deed)

        return LandingResult(space.space_type)

    def _charge_rent(self, payer: PlayerState, deed: Property) -> LandingResult:
        owner = deed.owner
        if owner is None or owner is payer:
            return LandingResult(SpaceType.PROPERTY)
        if deed.houses == 0 and not deed.has_hotel:
            return LandingResult(SpaceType.PROPERTY)

        rent = deed.calculate_rent()
        # The payer's balance is clamped at zero, but the owner collects in full.
        payer.debit(rent)
        owner.credit(rent)

        self.event_log.log(
            EventType.RENT_PAYMENT,
            player=payer.name,
            owner=owner.name,
            property=deed.name,
            amount=rent,
            payer_balance=payer.balance,
            owner_balance=owner.balance,
        )
        return LandingResult(SpaceType.PROPERTY, rent_paid=rent, rent_owner=owner.name)

    # === BUY / BUILD / SELL ===

    def attempt_purchase(self) -> bool:
        """
        Current player buys the property they stand on.
        Returns True if successful, False otherwise.
        """
        player = self._current()
        deed = self.board.property_at(player.position)
        if deed is None or deed.is_owned():
            return False
        if player.balance < deed.price:
            return False

        player.debit(deed.price)
        deed.owner = player
        player.properties.add(deed.position)

        self.event_log.log(
            EventType.PURCHASE,
            player=player.name,
            property=deed.name,
            position=deed.position,
            price=deed.price,
            new_balance=player.balance,
        )
        return True

    def attempt_build(self) -> bool:
        """
        Current player builds a house, or a hotel over four houses, on the
        property they stand on.
        Returns True if successful, False otherwise.
        """
        player = self._current()
        deed = self.board.property_at(player.position)
        if deed is None or deed.owner is not player:
            return False
        if deed.has_hotel:
            return False
        if player.balance < deed.build_cost:
            return False

        player.debit(deed.build_cost)
        deed.build()

        event = EventType.BUILD_HOTEL if deed.has_hotel else EventType.BUILD_HOUSE
        self.event_log.log(
            event,
            player=player.name,
            property=deed.name,
            cost=deed.build_cost,
            houses=deed.houses,
            new_balance=player.balance,
        )
        return True

    def sell_by_name(self, property_name: str) -> bool:
        """
        Sell one of the current player's properties back to the bank.

        The name is matched case-insensitively against the player's own
        holdings only.
        Returns True if sold, False if the player owns no such property.
        """
        player = self._current()
        wanted = property_name.strip().casefold()
        for pos in sorted(player.properties):
            deed = self.board.property_at(pos)
            if deed.name.casefold() != wanted:
                continue

            before = player.balance
            if not deed.sell_to_bank(player, self.rules.sale_refund_rate):
                return False
            player.properties.discard(pos)

            self.event_log.log(
                EventType.SALE,
                player=player.name,
                property=deed.name,
                refund=player.balance - before,
                new_balance=player.balance,
            )
            return True
        return False

    # === TURNS AND TERMINATION ===

    def advance_turn(self) -> None:
        """Pass the turn to the next seat. Inactive players are not skipped."""
        if not self.players:
            return
        self.current_player_index = (self.current_player_index + 1) % len(self.players)
        self.turn_number += 1
        self.last_dice_roll = None

        self.event_log.log(
            EventType.TURN_START,
            player=self.players[self.current_player_index].name,
            turn=self.turn_number,
        )
        self.record_game_end()

    def active_players(self) -> List[PlayerView]:
        return [PlayerView.of(p) for p in self.players if p.is_active()]

    def is_game_over(self) -> bool:
        """True once at most one player still has money. Never changes state."""
        return sum(1 for p in self.players if p.is_active()) <= 1

    def record_game_end(self) -> bool:
        """
        Log GAME_END the first time this is called on a finished, started game.

        Returns:
            True if the event was logged by this call
        """
        if self._end_logged or not self._started or not self.is_game_over():
            return False
        self._end_logged = True
        winner = self.winner()
        self.event_log.log(
            EventType.GAME_END,
            player=winner.name if winner else None,
            turns=self.turn_number,
        )
        logger.debug("Game over after %d turns", self.turn_number)
        return True

    def winner(self) -> Optional[PlayerView]:
        """The last active player once the game is over, else None."""
        if not self.is_game_over():
            return None
        active = self.active_players()
        return active[0] if active else None


def create_game(
    names: Iterable[str],
    rules: Optional[GameRules] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Create a new game and seat the named players.

    Args:
        names: Player names in seat order
        rules: Rule constants (defaults to the standard rules)
        rng: Random source for the dice (defaults to an unseeded Random)

    Returns:
        Initialized GameState

    Raises:
        GameSetupError: if the number of players is outside the seat limits
    """
    names = list(names)
    game = GameState(rules, rng)
    if not game.rules.min_players <= len(names) <= game.rules.max_players:
        raise GameSetupError(
            f"game requires {game.rules.min_players}-{game.rules.max_players} players, got {len(names)}"
        )
    for name in names:
        game.add_player(name)
    return game
