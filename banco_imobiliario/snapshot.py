"""
Read-only views of engine state.

Every view is a frozen copy built at call time. Holding a view never
gives access to the engine's PlayerState or Property objects, so the
display and orchestration layers cannot corrupt game state.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from banco_imobiliario.player import PlayerState
from banco_imobiliario.property import Property
from banco_imobiliario.spaces import SpaceType

if TYPE_CHECKING:
    from banco_imobiliario.game import GameState


@dataclass(frozen=True)
class PlayerView:
    name: str
    balance: int
    position: int
    in_jail: bool
    property_count: int

    @classmethod
    def of(cls, player: PlayerState) -> "PlayerView":
        return cls(
            name=player.name,
            balance=player.balance,
            position=player.position,
            in_jail=player.in_jail,
            property_count=len(player.properties),
        )


@dataclass(frozen=True)
class PropertyView:
    name: str
    position: int
    houses: int
    has_hotel: bool
    price: int
    build_cost: int
    rent: int
    owner: Optional[str] = None

    @classmethod
    def of(cls, prop: Property) -> "PropertyView":
        return cls(
            name=prop.name,
            position=prop.position,
            houses=prop.houses,
            has_hotel=prop.has_hotel,
            price=prop.price,
            build_cost=prop.build_cost,
            rent=prop.calculate_rent(),
            owner=prop.owner.name if prop.owner is not None else None,
        )


@dataclass(frozen=True)
class MovementResult:
    """Where a move ended and whether it wrapped past the start space."""

    position: int
    space_name: str
    space_type: SpaceType
    passed_start: bool = False


@dataclass(frozen=True)
class LandingResult:
    """The automatic effect applied to the space a player landed on."""

    space_type: SpaceType
    sent_to_jail: bool = False
    rent_paid: int = 0
    rent_owner: Optional[str] = None


def serialize_snapshot(game: GameState) -> Dict[str, Any]:
    """Serialize a GameState into a public, JSON-friendly dict.

    The snapshot includes:
    - phase, turn_number and the current player's name
    - every player's public state with the properties they hold
    - the board's properties with owner and construction level
    """
    players: List[Dict[str, Any]] = []
    for view in game.players_snapshot():
        entry = asdict(view)
        entry["properties"] = [asdict(p) for p in game.list_properties_of(view.name)]
        players.append(entry)

    board: List[Dict[str, Any]] = []
    for space in game.board:
        row: Dict[str, Any] = {
            "position": space.position,
            "name": space.name,
            "type": space.space_type.value,
        }
        if space.deed is not None:
            deed = PropertyView.of(space.deed)
            row.update(
                owner=deed.owner,
                houses=deed.houses,
                has_hotel=deed.has_hotel,
                rent=deed.rent,
            )
        board.append(row)

    current = game.current_player_snapshot() if game.player_count else None

    return {
        "phase": game.phase.value,
        "turn_number": game.turn_number,
        "current_player": current.name if current else None,
        "players": players,
        "board": board,
    }
