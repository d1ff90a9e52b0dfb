from __future__ import annotations

from typing import Iterable, Optional

from flipline.othello.board import EMPTY, PLAYERS, Board, Player, opponent
from flipline.othello.position import DIRECTIONS, Position, all_positions

OUT_OF_BOUNDS = "Position is out of bounds"
CELL_OCCUPIED = "Cell is already occupied"
NO_FLIPS = "Move would not flip any discs"


class ValidationResult:
    """
    Outcome of validating a move. A rejection carries a reason and no flips,
    an acceptance carries a non-empty flip list and no reason.
    """

    __slots__ = ("__valid", "__reason", "__flipped_positions")

    def __init__(
        self,
        valid: bool,
        *,
        reason: Optional[str] = None,
        flipped_positions: Optional[Iterable[Position]] = None,
    ) -> None:
        self.__valid = valid
        self.__reason = reason
        self.__flipped_positions = (
            None if flipped_positions is None else tuple(flipped_positions)
        )

        if valid:
            assert reason is None
            assert self.__flipped_positions
        else:
            assert reason is not None
            assert self.__flipped_positions is None

    @property
    def valid(self) -> bool:
        return self.__valid

    @property
    def reason(self) -> Optional[str]:
        return self.__reason

    @property
    def flipped_positions(self) -> Optional[tuple[Position, ...]]:
        return self.__flipped_positions

    @classmethod
    def accept(cls, flipped_positions: Iterable[Position]) -> ValidationResult:
        return cls(True, flipped_positions=flipped_positions)

    @classmethod
    def reject(cls, reason: str) -> ValidationResult:
        return cls(False, reason=reason)

    def __repr__(self) -> str:
        if self.valid:
            return f"ValidationResult(valid, {list(self.flipped_positions or [])})"
        return f"ValidationResult(invalid, {self.reason!r})"

    def as_tuple(self) -> tuple[bool, Optional[str], Optional[tuple[Position, ...]]]:
        return (self.valid, self.reason, self.flipped_positions)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented

        return self.as_tuple() == other.as_tuple()


def check_direction(
    board: Board, position: Position, direction: tuple[int, int], player: Player
) -> list[Position]:
    """
    Returns the opponent discs captured in one direction when `player` plays at
    `position`. A run of opponent discs only counts when it is closed off by a
    disc of `player` on the board, otherwise nothing is captured.
    """
    opp = opponent(player)
    flipped: list[Position] = []

    current = position.step(direction)
    while current.is_valid() and board.get_cell_state(current) == opp:
        flipped.append(current)
        current = current.step(direction)

    if not flipped:
        return []

    if not current.is_valid() or board.get_cell_state(current) != player:
        return []

    return flipped


def find_flipped_positions(
    board: Board, position: Position, player: Player
) -> list[Position]:
    flipped: list[Position] = []

    for direction in DIRECTIONS:
        flipped += check_direction(board, position, direction, player)

    return flipped


def validate_move(board: Board, position: Position, player: Player) -> ValidationResult:
    assert player in PLAYERS

    if not position.is_valid():
        return ValidationResult.reject(OUT_OF_BOUNDS)

    if board.get_cell_state(position) != EMPTY:
        return ValidationResult.reject(CELL_OCCUPIED)

    flipped = find_flipped_positions(board, position, player)

    if not flipped:
        return ValidationResult.reject(NO_FLIPS)

    return ValidationResult.accept(flipped)


def is_legal_move(board: Board, position: Position, player: Player) -> bool:
    return validate_move(board, position, player).valid


def get_legal_moves(board: Board, player: Player) -> list[Position]:
    return [
        position
        for position in all_positions()
        if is_legal_move(board, position, player)
    ]


def has_legal_moves(board: Board, player: Player) -> bool:
    return any(is_legal_move(board, position, player) for position in all_positions())
