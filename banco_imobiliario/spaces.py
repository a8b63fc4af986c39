"""
Board space definitions and types.

A space is a single tagged record: its `space_type` says which variant it
is, and only the PROPERTY variant carries a `deed` with price, rents and
construction state. Engine code branches on `space_type`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from banco_imobiliario.property import Property


class SpaceType(Enum):
    """Types of spaces on the board."""

    START = "start"
    PROPERTY = "property"
    FORTUNE = "fortune"
    MISFORTUNE = "misfortune"
    JAIL = "jail"
    GO_TO_JAIL = "go_to_jail"
    NEUTRAL = "neutral"
    TAX = "tax"


@dataclass(frozen=True)
class Space:
    """One of the fixed board positions."""

    name: str
    position: int
    space_type: SpaceType
    deed: Optional[Property] = None

    def __post_init__(self) -> None:
        has_deed = self.deed is not None
        if has_deed != (self.space_type is SpaceType.PROPERTY):
            raise ValueError(f"{self.name}: only property spaces carry a deed")

    @classmethod
    def of_property(cls, deed: Property) -> "Space":
        """Wrap a property as its board space."""
        return cls(deed.name, deed.position, SpaceType.PROPERTY, deed)

    @property
    def is_property(self) -> bool:
        return self.space_type is SpaceType.PROPERTY

    def __repr__(self) -> str:
        return f"Space(name='{self.name}', position={self.position}, type={self.space_type.value})"
