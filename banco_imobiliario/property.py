"""
Purchasable, developable properties.
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from banco_imobiliario.player import PlayerState

MAX_HOUSES = 4


@dataclass(eq=False)
class Property:
    """
    A property that can be owned, built upon and sold back to the bank.

    Price, rents and build cost never change. Ownership and construction
    are mutated only through the engine. `has_hotel` implies a full set of
    houses; a hotel is the last construction step.
    """

    name: str
    position: int
    price: int
    rent_base: int
    rent_with_1: int
    rent_with_2: int
    rent_with_3: int
    rent_with_4: int
    rent_hotel: int
    build_cost: int

    owner: Optional["PlayerState"] = field(default=None, repr=False)
    houses: int = 0
    has_hotel: bool = False

    def is_owned(self) -> bool:
        """Check if property is owned by any player."""
        return self.owner is not None

    def calculate_rent(self) -> int:
        """
        Rent for the current construction level.

        Returns:
            The hotel tier when a hotel stands, otherwise the tier matching
            the number of houses (0 houses is the base rent)
        """
        if self.has_hotel:
            return self.rent_hotel
        tiers = (
            self.rent_base,
            self.rent_with_1,
            self.rent_with_2,
            self.rent_with_3,
            self.rent_with_4,
        )
        return tiers[min(self.houses, len(tiers) - 1)]

    def build(self) -> None:
        """
        Add one construction step: a house, or a hotel once the houses are full.

        Does not check funds or ownership; the engine does that first.
        """
        if self.has_hotel:
            return
        if self.houses < MAX_HOUSES:
            self.houses += 1
        else:
            self.has_hotel = True

    def invested_value(self) -> int:
        """Price plus everything spent on construction."""
        total = self.price + self.houses * self.build_cost
        if self.has_hotel:
            total += self.build_cost
        return total

    def sell_to_bank(self, seller: "PlayerState", refund_rate: float = 0.9) -> bool:
        """
        Sell this property back to the bank.

        The seller is credited the floor of `refund_rate` times the invested
        value and the property returns to the bank undeveloped.

        Returns:
            True if sold, False if the seller does not own it
        """
        if self.owner is None or self.owner is not seller:
            return False

        seller.credit(math.floor(self.invested_value() * refund_rate))
        self.return_to_bank()
        return True

    def return_to_bank(self) -> None:
        """Clear the owner and all construction."""
        self.owner = None
        self.houses = 0
        self.has_hotel = False
