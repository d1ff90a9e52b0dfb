from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from flipline.othello.position import BOARD_SIZE, Position, all_positions


class CellState(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2


EMPTY = CellState.EMPTY
BLACK = CellState.BLACK
WHITE = CellState.WHITE

# Subset of CellState that can move. Functions taking a player assert membership.
Player = CellState

PLAYERS = (BLACK, WHITE)


def opponent(player: Player) -> Player:
    assert player in PLAYERS
    return WHITE if player == BLACK else BLACK


class Board:
    """
    Immutable 8x8 grid of cell states. Every "mutation" returns a new Board,
    the receiving Board is never changed.
    """

    def __init__(self, squares: Iterable[Iterable[int]]) -> None:
        rows = tuple(tuple(CellState(square) for square in row) for row in squares)

        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")

        self.__squares = rows

    @classmethod
    def start(cls) -> Board:
        board = cls.empty()
        board = board.set_cell_state(Position(3, 3), WHITE)
        board = board.set_cell_state(Position(3, 4), BLACK)
        board = board.set_cell_state(Position(4, 3), BLACK)
        return board.set_cell_state(Position(4, 4), WHITE)

    @classmethod
    def empty(cls) -> Board:
        return Board([[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def full(cls, state: CellState) -> Board:
        return Board([[state] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        """
        Build a board from 8 strings of 8 characters: "X" for black, "O" for
        white and "-" for empty squares. Used mostly for setting up tests.
        """
        chars = {"-": EMPTY, "X": BLACK, "O": WHITE}

        try:
            return Board([[chars[char] for char in row.upper()] for row in rows])
        except KeyError as e:
            raise ValueError(f"Invalid square character {e}") from e

    def to_rows(self) -> list[str]:
        chars = {EMPTY: "-", BLACK: "X", WHITE: "O"}
        return ["".join(chars[square] for square in row) for row in self.__squares]

    def __repr__(self) -> str:
        return f"Board({'/'.join(self.to_rows())})"

    def get_cell_state(self, position: Position) -> CellState:
        # No bounds check, callers validate positions first.
        return self.__squares[position.row][position.col]

    def set_cell_state(self, position: Position, state: CellState) -> Board:
        return self.set_cell_states([position], state)

    def set_cell_states(self, positions: Iterable[Position], state: CellState) -> Board:
        squares = [list(row) for row in self.__squares]

        for position in positions:
            squares[position.row][position.col] = state

        return Board(squares)

    def get_empty_positions(self) -> list[Position]:
        return [
            position
            for position in all_positions()
            if self.get_cell_state(position) == EMPTY
        ]

    def count(self, state: CellState) -> int:
        return sum(row.count(state) for row in self.__squares)

    def is_full(self) -> bool:
        return self.count(EMPTY) == 0

    def to_lists(self) -> list[list[int]]:
        return [[int(square) for square in row] for row in self.__squares]

    def as_tuple(self) -> tuple[tuple[CellState, ...], ...]:
        return self.__squares

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented

        return self.as_tuple() == other.as_tuple()


def create_initial_board() -> Board:
    return Board.start()
