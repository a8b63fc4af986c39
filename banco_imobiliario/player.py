"""
Player state and management.
"""


class PlayerState:
    """
    Represents the complete state of a player in the game.

    Only the engine mutates a PlayerState; outside callers receive
    `PlayerView` copies instead.
    """

    def __init__(self, name: str, starting_balance: int):
        self.name = name
        self.balance = starting_balance
        self.position = 0
        self.in_jail = False
        self.turns_in_jail = 0
        self.get_out_of_jail_cards = 0
        self.properties: set[int] = set()

    def debit(self, amount: int) -> None:
        """Take money from the player. The balance is clamped at zero, never negative."""
        self.balance = max(self.balance - amount, 0)

    def credit(self, amount: int) -> None:
        self.balance += amount

    def send_to_jail(self, jail_index: int) -> None:
        self.in_jail = True
        self.position = jail_index
        self.turns_in_jail = 0

    def release_from_jail(self) -> None:
        self.in_jail = False
        self.turns_in_jail = 0

    def add_jail_card(self) -> None:
        self.get_out_of_jail_cards += 1

    def consume_jail_card(self) -> bool:
        """Spend one get-out-of-jail card. Returns False if the player holds none."""
        if self.get_out_of_jail_cards == 0:
            return False
        self.get_out_of_jail_cards -= 1
        return True

    def is_active(self) -> bool:
        """A player with money left. Inactive players keep their turns and properties."""
        return self.balance > 0

    def __repr__(self) -> str:
        return (
            f"PlayerState(name='{self.name}', balance={self.balance}, "
            f"position={self.position}, in_jail={self.in_jail})"
        )
