from __future__ import annotations

from typing import Iterable

BOARD_SIZE = 8

# (row_delta, col_delta): N, NE, E, SE, S, SW, W, NW
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)


class Position:
    """
    Position is a (row, col) pair. It is not bounds checked on construction,
    so out-of-bounds positions coming from clients can reach the validator,
    which rejects them.
    """

    __slots__ = ("__row", "__col")

    def __init__(self, row: int, col: int) -> None:
        self.__row = row
        self.__col = col

    @property
    def row(self) -> int:
        return self.__row

    @property
    def col(self) -> int:
        return self.__col

    @classmethod
    def from_field(cls, field: str) -> Position:
        if len(field) != 2:
            raise ValueError(f'Invalid field length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return Position(row, col)

    def to_field(self) -> str:
        if not self.is_valid():
            raise ValueError(f"Position {self} is out of bounds")
        return "abcdefgh"[self.col] + "12345678"[self.row]

    @classmethod
    def fields_to_positions(cls, fields: Iterable[str]) -> list[Position]:
        return [cls.from_field(field) for field in fields]

    @classmethod
    def positions_to_fields(cls, positions: Iterable[Position]) -> str:
        return " ".join(position.to_field() for position in positions)

    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def step(self, direction: tuple[int, int]) -> Position:
        row_delta, col_delta = direction
        return Position(self.row + row_delta, self.col + col_delta)

    def __repr__(self) -> str:
        return f"Position({self.row}, {self.col})"

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented

        return self.as_tuple() == other.as_tuple()


def is_valid_position(position: Position) -> bool:
    return position.is_valid()


def all_positions() -> list[Position]:
    # Row-major: row ascending, then column ascending.
    return [
        Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
    ]
