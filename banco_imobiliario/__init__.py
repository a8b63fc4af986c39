"""
Property Trading Game Rules Engine

Turn sequencing, movement, jail, property economics and end-of-game
detection for a 2-6 player game on a fixed 40-space board.
"""

from .board import Board
from .config import GameRules
from .exceptions import BancoError, GameSetupError, OutOfRangeError
from .game import GamePhase, GameState, create_game
from .snapshot import LandingResult, MovementResult, PlayerView, PropertyView, serialize_snapshot
from .spaces import Space, SpaceType
from .turn import JailAction, TurnReport, play_game, play_turn

__all__ = [
    "Board",
    "GameRules",
    "BancoError",
    "GameSetupError",
    "OutOfRangeError",
    "GamePhase",
    "GameState",
    "create_game",
    "LandingResult",
    "MovementResult",
    "PlayerView",
    "PropertyView",
    "serialize_snapshot",
    "Space",
    "SpaceType",
    "JailAction",
    "TurnReport",
    "play_game",
    "play_turn",
]
