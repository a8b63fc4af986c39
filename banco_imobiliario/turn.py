"""
Per-turn orchestration.

Sequences the engine calls for one turn in the fixed order the rules
require and asks a `TurnDecider` for every player choice. No rule logic
lives here: each decision is passed to the engine, which accepts or
rejects it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Protocol, Tuple

from banco_imobiliario.game import GameState
from banco_imobiliario.snapshot import LandingResult, MovementResult, PlayerView, PropertyView

logger = logging.getLogger(__name__)


class JailAction(Enum):
    """Choices offered to a jailed player."""

    USE_CARD = "use_card"
    ROLL = "roll"
    PASS = "pass"


class TurnDecider(Protocol):
    """Source of player decisions (a console, a script, a test double)."""

    def choose_jail_action(self, player: PlayerView) -> JailAction:
        ...

    def confirm_purchase(self, player: PlayerView, movement: MovementResult) -> bool:
        ...

    def confirm_build(self, player: PlayerView, movement: MovementResult) -> bool:
        ...

    def choose_sale(self, player: PlayerView, properties: List[PropertyView]) -> Optional[str]:
        ...


@dataclass(frozen=True)
class TurnReport:
    """What happened during one turn."""

    player: str
    jail_action: Optional[JailAction] = None
    released: bool = False
    dice: Optional[Tuple[int, int]] = None
    movement: Optional[MovementResult] = None
    landing: Optional[LandingResult] = None
    purchased: bool = False
    built: bool = False
    sold: Optional[str] = None

    @property
    def moved(self) -> bool:
        return self.movement is not None


def _resolve_jail(game: GameState, decider: TurnDecider, view: PlayerView) -> TurnReport:
    action = decider.choose_jail_action(view)
    dice = None
    if action is JailAction.USE_CARD:
        released = game.use_jail_card()
    elif action is JailAction.ROLL:
        dice = game.roll_dice()
        released = game.attempt_jail_release(*dice)
    else:
        released = False

    logger.info("%s in jail chose %s (released=%s)", view.name, action.value, released)
    return TurnReport(view.name, jail_action=action, released=released, dice=dice)


def play_turn(game: GameState, decider: TurnDecider) -> TurnReport:
    """
    Play the current player's turn and pass the turn on.

    A jailed player only resolves jail this turn; release takes effect on
    their next turn. A free player rolls, moves, lands, and may then buy,
    build (only when nothing was bought this turn) and sell.
    """
    view = game.current_player_snapshot()

    if view.in_jail:
        report = _resolve_jail(game, decider, view)
        game.advance_turn()
        return report

    dice = game.roll_dice()
    movement = game.move_current_player(sum(dice))
    landing = game.resolve_current_space()
    logger.info("%s rolled %s and landed on %s", view.name, dice, movement.space_name)

    if game.current_player_snapshot().in_jail:
        game.advance_turn()
        return TurnReport(view.name, dice=dice, movement=movement, landing=landing)

    purchased = False
    if decider.confirm_purchase(game.current_player_snapshot(), movement):
        purchased = game.attempt_purchase()

    built = False
    if not purchased and decider.confirm_build(game.current_player_snapshot(), movement):
        built = game.attempt_build()

    sold = None
    holdings = game.list_owned_properties()
    if holdings:
        choice = decider.choose_sale(game.current_player_snapshot(), holdings)
        if choice and game.sell_by_name(choice):
            sold = choice

    game.advance_turn()
    return TurnReport(
        view.name,
        dice=dice,
        movement=movement,
        landing=landing,
        purchased=purchased,
        built=built,
        sold=sold,
    )


def play_game(
    game: GameState,
    decider: TurnDecider,
    max_turns: Optional[int] = None,
    before_turn: Optional[Callable[[PlayerView], None]] = None,
    on_turn: Optional[Callable[[TurnReport], None]] = None,
) -> Optional[PlayerView]:
    """
    Play turns until at most one player has money, or until `max_turns`.

    Args:
        before_turn: Called with the player about to play
        on_turn: Called with the report of each finished turn

    Returns:
        The winner, or None when nobody is left or the turn cap was hit
    """
    while not game.is_game_over():
        if max_turns is not None and game.turn_number >= max_turns:
            logger.info("Turn limit %d reached without a winner", max_turns)
            return None
        if before_turn is not None:
            before_turn(game.current_player_snapshot())
        report = play_turn(game, decider)
        if on_turn is not None:
            on_turn(report)

    game.record_game_end()
    winner = game.winner()
    logger.info("Game over: %s", winner.name if winner else "no winner")
    return winner
