"""
Game rule constants.
"""

from dataclasses import dataclass

from banco_imobiliario.exceptions import GameSetupError
from banco_imobiliario.property import MAX_HOUSES


@dataclass(frozen=True)
class GameRules:
    """Monetary and turn thresholds for one game. Never mutated after creation."""

    starting_balance: int = 4000
    passing_start_bonus: int = 200

    max_jail_turns: int = 3
    jail_fine: int = 50

    # Fixed by the five-tier rent schedule.
    max_houses: int = MAX_HOUSES
    sale_refund_rate: float = 0.9

    # Carried for completeness; the core does not enforce it.
    max_consecutive_doubles: int = 3

    min_players: int = 2
    max_players: int = 6

    board_size: int = 40

    def validate(self) -> "GameRules":
        """
        Check that the rules describe a playable game.

        Returns:
            self, so construction and validation can be chained

        Raises:
            GameSetupError: if any value is out of range
        """
        money_fields = {
            "starting_balance": self.starting_balance,
            "passing_start_bonus": self.passing_start_bonus,
            "jail_fine": self.jail_fine,
        }
        for name, value in money_fields.items():
            if value < 0:
                raise GameSetupError(f"{name} cannot be negative (got {value})")

        if self.max_jail_turns < 1:
            raise GameSetupError("max_jail_turns must be at least 1")
        if self.max_houses != MAX_HOUSES:
            raise GameSetupError(f"a property always holds {MAX_HOUSES} houses before its hotel")
        if not 0 < self.sale_refund_rate <= 1:
            raise GameSetupError(
                f"sale_refund_rate must be in (0, 1] (got {self.sale_refund_rate})"
            )
        if self.min_players < 1 or self.min_players > self.max_players:
            raise GameSetupError(
                f"invalid seat limits: min={self.min_players}, max={self.max_players}"
            )
        if self.board_size != 40:
            raise GameSetupError("the board always has 40 spaces")
        return self


DEFAULT_RULES = GameRules()
