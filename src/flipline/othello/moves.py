from __future__ import annotations

from typing import Iterable, Optional

from flipline.othello.board import PLAYERS, Board, Player
from flipline.othello.position import Position
from flipline.othello.validation import find_flipped_positions


class Move:
    """
    Record of one applied move: where it was played, by whom and which discs
    it captured. Passes are never recorded as moves.
    """

    __slots__ = ("__position", "__player", "__flipped_positions")

    def __init__(
        self, position: Position, player: Player, flipped_positions: Iterable[Position]
    ) -> None:
        assert player in PLAYERS

        self.__position = position
        self.__player = player

        # Copied, so the caller's list can change without affecting the record.
        self.__flipped_positions = tuple(flipped_positions)

    @property
    def position(self) -> Position:
        return self.__position

    @property
    def player(self) -> Player:
        return self.__player

    @property
    def flipped_positions(self) -> tuple[Position, ...]:
        return self.__flipped_positions

    def __repr__(self) -> str:
        return (
            f"Move({self.position}, {self.player.name}, {list(self.flipped_positions)})"
        )

    def as_tuple(self) -> tuple[Position, Player, tuple[Position, ...]]:
        return (self.position, self.player, self.flipped_positions)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented

        return self.as_tuple() == other.as_tuple()


def flip_discs(board: Board, positions: Iterable[Position], player: Player) -> Board:
    return board.set_cell_states(positions, player)


def execute_move(
    board: Board,
    position: Position,
    player: Player,
    flipped_positions: Optional[Iterable[Position]] = None,
) -> Board:
    """
    Places a disc and flips captured discs. Legality is not checked here: pass
    flips obtained from `validate_move`, or leave them out to have them computed.
    """
    if flipped_positions is None:
        flipped_positions = find_flipped_positions(board, position, player)

    child = board.set_cell_state(position, player)
    return flip_discs(child, flipped_positions, player)


def create_move(
    position: Position, player: Player, flipped_positions: Iterable[Position]
) -> Move:
    return Move(position, player, flipped_positions)
