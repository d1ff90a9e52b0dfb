from __future__ import annotations

from typing import Iterable, Optional

from flipline.othello.game import GameState, make_move
from flipline.othello.position import Position
from flipline.othello.validation import validate_move

GAME_FINISHED = "Game is finished"


class InvalidMove(Exception):
    def __init__(self, position: Position, reason: str) -> None:
        super().__init__(f"Invalid move {position}: {reason}")
        self.position = position
        self.reason = reason


def apply_move(state: GameState, position: Position) -> GameState:
    """
    Like `make_move`, but raises InvalidMove instead of silently returning the
    unchanged state when the move is rejected.
    """
    if state.is_finished():
        raise InvalidMove(position, GAME_FINISHED)

    child = make_move(state, position)

    if len(child.history) == len(state.history):
        result = validate_move(state.board, position, state.current_player)
        assert result.reason
        raise InvalidMove(position, result.reason)

    return child


def replay(
    positions: Iterable[Position], state: Optional[GameState] = None
) -> GameState:
    if state is None:
        state = GameState.start()

    for position in positions:
        state = apply_move(state, position)

    return state


def replay_fields(fields: Iterable[str]) -> GameState:
    return replay(Position.fields_to_positions(fields))
