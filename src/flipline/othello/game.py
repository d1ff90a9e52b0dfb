from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Optional

from flipline.othello.board import BLACK, PLAYERS, WHITE, Board, Player, opponent
from flipline.othello.moves import Move, create_move, execute_move
from flipline.othello.position import Position
from flipline.othello.validation import has_legal_moves, validate_move

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class GameState:
    """
    Snapshot of a game. Never changed after construction: every transition
    builds a new GameState. Scores always equal the disc counts on the board.
    """

    __slots__ = (
        "__board",
        "__current_player",
        "__status",
        "__history",
        "__black_score",
        "__white_score",
    )

    def __init__(
        self,
        *,
        board: Board,
        current_player: Player,
        status: GameStatus = GameStatus.IN_PROGRESS,
        history: Iterable[Move] = (),
    ) -> None:
        assert current_player in PLAYERS

        self.__board = board
        self.__current_player = current_player
        self.__status = status
        self.__history = tuple(history)
        self.__black_score = board.count(BLACK)
        self.__white_score = board.count(WHITE)

    @property
    def board(self) -> Board:
        return self.__board

    @property
    def current_player(self) -> Player:
        return self.__current_player

    @property
    def status(self) -> GameStatus:
        return self.__status

    @property
    def history(self) -> tuple[Move, ...]:
        return self.__history

    @property
    def black_score(self) -> int:
        return self.__black_score

    @property
    def white_score(self) -> int:
        return self.__white_score

    @classmethod
    def start(cls) -> GameState:
        return GameState(board=Board.start(), current_player=BLACK)

    def is_finished(self) -> bool:
        return self.status == GameStatus.FINISHED

    def with_current_player(self, player: Player) -> GameState:
        return GameState(
            board=self.board,
            current_player=player,
            status=self.status,
            history=self.history,
        )

    def with_status(self, status: GameStatus) -> GameState:
        return GameState(
            board=self.board,
            current_player=self.current_player,
            status=status,
            history=self.history,
        )

    def __repr__(self) -> str:
        return (
            f"GameState({self.status.value}, {self.current_player.name} to move, "
            f"{self.black_score}-{self.white_score}, {len(self.history)} moves)"
        )

    def as_tuple(self) -> tuple[Board, Player, GameStatus, tuple[Move, ...], int, int]:
        return (
            self.board,
            self.current_player,
            self.status,
            self.history,
            self.black_score,
            self.white_score,
        )

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented

        return self.as_tuple() == other.as_tuple()


class GameResult:
    __slots__ = ("__winner", "__black_score", "__white_score")

    def __init__(
        self, winner: Optional[Player], black_score: int, white_score: int
    ) -> None:
        # None means draw
        self.__winner = winner
        self.__black_score = black_score
        self.__white_score = white_score

    @property
    def winner(self) -> Optional[Player]:
        return self.__winner

    @property
    def black_score(self) -> int:
        return self.__black_score

    @property
    def white_score(self) -> int:
        return self.__white_score

    def __repr__(self) -> str:
        winner = "draw" if self.winner is None else self.winner.name
        return f"GameResult({winner}, {self.black_score}-{self.white_score})"

    def as_tuple(self) -> tuple[Optional[Player], int, int]:
        return (self.winner, self.black_score, self.white_score)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameResult):
            return NotImplemented

        return self.as_tuple() == other.as_tuple()


def create_initial_game_state() -> GameState:
    return GameState.start()


def switch_player(player: Player) -> Player:
    return opponent(player)


def should_end_game(board: Board, current_player: Player) -> bool:
    if board.is_full():
        return True

    if board.count(BLACK) == 0 or board.count(WHITE) == 0:
        return True

    # Checks both colors, no matter whose turn it is.
    return not (
        has_legal_moves(board, current_player)
        or has_legal_moves(board, switch_player(current_player))
    )


def update_game_status(state: GameState) -> GameState:
    if not should_end_game(state.board, state.current_player):
        return state

    if not state.is_finished():
        logger.debug(
            "Game finished with score %d-%d", state.black_score, state.white_score
        )

    return state.with_status(GameStatus.FINISHED)


def process_turn(state: GameState) -> GameState:
    """
    Applies the automatic pass rule for the player to move. If neither player
    can move the game is finished instead.
    """
    if has_legal_moves(state.board, state.current_player):
        return state

    next_player = switch_player(state.current_player)

    if not has_legal_moves(state.board, next_player):
        logger.debug("Neither player can move, finishing game")
        return state.with_status(GameStatus.FINISHED)

    logger.debug("%s has no legal moves and passes", state.current_player.name)
    return state.with_current_player(next_player)


def make_move(state: GameState, position: Position) -> GameState:
    """
    Plays `position` for the player to move. Moves on a finished game and
    illegal moves are ignored: the input state is returned as is.
    """
    if state.is_finished():
        logger.debug("Ignoring move %s on finished game", position)
        return state

    result = validate_move(state.board, position, state.current_player)

    if not result.valid:
        logger.debug("Rejected move %s: %s", position, result.reason)
        return state

    assert result.flipped_positions

    player = state.current_player
    board = execute_move(state.board, position, player, result.flipped_positions)
    move = create_move(position, player, result.flipped_positions)

    child = GameState(
        board=board,
        current_player=switch_player(player),
        status=state.status,
        history=state.history + (move,),
    )

    child = process_turn(child)
    return update_game_status(child)


def get_game_result(state: GameState) -> GameResult:
    if state.black_score > state.white_score:
        winner: Optional[Player] = BLACK
    elif state.white_score > state.black_score:
        winner = WHITE
    else:
        winner = None

    return GameResult(winner, state.black_score, state.white_score)
