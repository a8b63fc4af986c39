"""
Environment-based rule configuration using pydantic-settings.

Rule constants are read once at process start and frozen into a
`GameRules` instance that the engine owns. The engine itself never
touches the environment.

Environment variables (prefix: BANCO_):
    BANCO_STARTING_BALANCE     - balance for each new player (default: 4000)
    BANCO_PASSING_START_BONUS  - credit for passing start (default: 200)
    BANCO_MAX_JAIL_TURNS       - failed attempts before forced release (default: 3)
    BANCO_JAIL_FINE            - fine charged on forced release (default: 50)
    BANCO_SALE_REFUND_RATE     - fraction refunded on sale to bank (default: 0.9)
    BANCO_MIN_PLAYERS          - minimum seats (default: 2)
    BANCO_MAX_PLAYERS          - maximum seats (default: 6)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from banco_imobiliario.config import GameRules


class RulesSettings(BaseSettings):
    """Rule constants overridable through the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="BANCO_",
    )

    starting_balance: int = Field(
        default=4000,
        ge=0,
        description="Balance assigned to every player when seated.",
    )
    passing_start_bonus: int = Field(
        default=200,
        ge=0,
        description="Credit awarded when a move wraps past the start space.",
    )
    max_jail_turns: int = Field(
        default=3,
        ge=1,
        description="Failed doubles attempts before a forced, fined release.",
    )
    jail_fine: int = Field(
        default=50,
        ge=0,
        description="Fine debited on forced release from jail.",
    )
    sale_refund_rate: float = Field(
        default=0.9,
        gt=0,
        le=1,
        description="Fraction of the invested value refunded when selling to the bank.",
    )
    max_consecutive_doubles: int = Field(
        default=3,
        ge=1,
        description="Consecutive-doubles limit.",
    )
    min_players: int = Field(default=2, ge=1, description="Minimum number of seats.")
    max_players: int = Field(default=6, ge=1, description="Maximum number of seats.")

    @model_validator(mode="after")
    def check_seat_limits(self) -> "RulesSettings":
        """Reject a minimum seat count above the maximum."""
        if self.min_players > self.max_players:
            raise ValueError(
                f"min_players ({self.min_players}) exceeds max_players ({self.max_players})"
            )
        return self

    def to_rules(self) -> GameRules:
        """Freeze these settings into the rules object the engine consumes."""
        return GameRules(
            starting_balance=self.starting_balance,
            passing_start_bonus=self.passing_start_bonus,
            max_jail_turns=self.max_jail_turns,
            jail_fine=self.jail_fine,
            sale_refund_rate=self.sale_refund_rate,
            max_consecutive_doubles=self.max_consecutive_doubles,
            min_players=self.min_players,
            max_players=self.max_players,
        ).validate()


@lru_cache
def get_rules_settings() -> RulesSettings:
    """Return cached rule settings instance."""
    return RulesSettings()
