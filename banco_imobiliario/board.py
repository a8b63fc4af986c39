"""
The fixed 40-space board.
"""

from typing import Iterator, List, Optional

from banco_imobiliario.exceptions import OutOfRangeError
from banco_imobiliario.property import Property
from banco_imobiliario.spaces import Space, SpaceType

BOARD_SIZE = 40


def _lot(
    name: str,
    position: int,
    price: int,
    rent_base: int,
    rent_with_1: int,
    rent_with_2: int,
    rent_with_3: int,
    rent_with_4: int,
    rent_hotel: int,
    build_cost: int,
) -> Space:
    return Space.of_property(
        Property(
            name,
            position,
            price,
            rent_base,
            rent_with_1,
            rent_with_2,
            rent_with_3,
            rent_with_4,
            rent_hotel,
            build_cost,
        )
    )


class Board:
    """
    The game board with 40 spaces.

    Each board owns its own Property objects, so two games never share
    ownership or construction state.
    """

    def __init__(self):
        self.spaces: List[Space] = self._create_standard_board()
        self._jail_index = self._locate_jail()

    def _create_standard_board(self) -> List[Space]:
        """Create the standard board, in table order."""
        return [
            # Bottom row (0-10)
            Space("Partida", 0, SpaceType.START),
            _lot("Leblon", 1, 100, 6, 30, 90, 270, 400, 550, 50),
            Space("Sorte", 2, SpaceType.FORTUNE),
            _lot("Av. Presidente Vargas", 3, 60, 2, 10, 30, 90, 160, 250, 50),
            _lot("Av. Nossa Senhora de Copacabana", 4, 60, 4, 20, 60, 180, 320, 450, 50),
            _lot("Companhia Ferroviária", 5, 200, 25, 50, 100, 200, 300, 400, 0),
            _lot("Av. Brigadeiro Faria Lima", 6, 100, 6, 30, 90, 270, 400, 550, 50),
            Space("Revés", 7, SpaceType.MISFORTUNE),
            _lot("Av. Rebouças", 8, 100, 6, 30, 90, 270, 400, 550, 50),
            _lot("Av. 9 de Julho", 9, 120, 8, 40, 100, 300, 450, 600, 50),
            Space("Prisão", 10, SpaceType.JAIL),
            # Left side (11-20)
            _lot("Av. Europa", 11, 140, 10, 50, 150, 450, 625, 750, 100),
            _lot("Companhia de Água e Esgoto", 12, 150, 15, 30, 90, 180, 250, 400, 0),
            _lot("Rua Augusta", 13, 140, 10, 50, 150, 450, 625, 750, 100),
            _lot("Av. Pacaembu", 14, 160, 12, 60, 180, 500, 700, 900, 100),
            _lot("Companhia Ferroviária Central", 15, 200, 25, 50, 100, 200, 300, 400, 0),
            _lot("Parada Inglesa", 16, 180, 14, 70, 200, 550, 750, 950, 100),
            Space("Sorte", 17, SpaceType.FORTUNE),
            _lot("Brooklin", 18, 180, 14, 70, 200, 550, 750, 950, 100),
            _lot("Morumbi", 19, 200, 16, 80, 220, 600, 800, 1000, 100),
            Space("Estacionamento Livre", 20, SpaceType.NEUTRAL),
            # Top row (21-30)
            _lot("Jardim Europa", 21, 220, 18, 90, 250, 700, 875, 1050, 150),
            Space("Revés", 22, SpaceType.MISFORTUNE),
            _lot("Jardim Paulista", 23, 220, 18, 90, 250, 700, 875, 1050, 150),
            _lot("Rua Oscar Freire", 24, 240, 20, 100, 300, 750, 925, 1100, 150),
            _lot("Companhia Ferroviária Sul", 25, 200, 25, 50, 100, 200, 300, 400, 0),
            _lot("Pacaembu", 26, 260, 22, 110, 330, 800, 975, 1150, 150),
            _lot("Paulista", 27, 260, 22, 110, 330, 800, 975, 1150, 150),
            _lot("Companhia de Luz", 28, 150, 15, 30, 90, 180, 250, 400, 0),
            _lot("Higienópolis", 29, 280, 24, 120, 360, 850, 1025, 1200, 150),
            Space("Vá para a Prisão", 30, SpaceType.GO_TO_JAIL),
            # Right side (31-39)
            _lot("Vila Mariana", 31, 300, 26, 130, 390, 900, 1100, 1275, 200),
            _lot("Consolação", 32, 300, 26, 130, 390, 900, 1100, 1275, 200),
            Space("Sorte", 33, SpaceType.FORTUNE),
            _lot("Pinheiros", 34, 320, 28, 150, 450, 1000, 1200, 1400, 200),
            _lot("Companhia Ferroviária Norte", 35, 200, 25, 50, 100, 200, 300, 400, 0),
            Space("Revés", 36, SpaceType.MISFORTUNE),
            _lot("Moema", 37, 350, 35, 175, 500, 1100, 1300, 1500, 200),
            Space("Imposto de Renda", 38, SpaceType.TAX),
            _lot("Ibirapuera", 39, 400, 50, 200, 600, 1400, 1700, 2000, 200),
        ]

    def _locate_jail(self) -> int:
        jails = [s.position for s in self.spaces if s.space_type is SpaceType.JAIL]
        if len(self.spaces) != BOARD_SIZE or len(jails) != 1:
            raise AssertionError("board table must have 40 spaces and exactly one jail")
        return jails[0]

    def size(self) -> int:
        """Number of spaces, always 40."""
        return len(self.spaces)

    def __len__(self) -> int:
        return len(self.spaces)

    def __iter__(self) -> Iterator[Space]:
        return iter(self.spaces)

    @property
    def jail_index(self) -> int:
        return self._jail_index

    def space_at(self, index: int) -> Space:
        """
        Get the space at the given index.

        Raises:
            OutOfRangeError: if index is outside [0, 40)
        """
        if not 0 <= index < len(self.spaces):
            raise OutOfRangeError(index, len(self.spaces))
        return self.spaces[index]

    def property_at(self, index: int) -> Optional[Property]:
        """Get the property at an index, or None if the space is not a property."""
        return self.space_at(index).deed

    def properties(self) -> List[Property]:
        """All properties in board order."""
        return [s.deed for s in self.spaces if s.deed is not None]
