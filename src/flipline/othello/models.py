from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    field_validator,
    model_validator,
)

from flipline.othello.board import BLACK, PLAYERS, WHITE, Board, CellState
from flipline.othello.game import GameState, GameStatus
from flipline.othello.moves import Move
from flipline.othello.position import BOARD_SIZE, Position

PLAYER_VALUES = [int(player) for player in PLAYERS]
CELL_VALUES = [int(state) for state in CellState]


def validate_player(value: int) -> int:
    if value not in PLAYER_VALUES:
        raise ValueError(f"Player must be one of {PLAYER_VALUES}, got {value}")
    return value


class SerializedPosition(BaseModel):
    row: StrictInt = Field(ge=0, lt=BOARD_SIZE)
    col: StrictInt = Field(ge=0, lt=BOARD_SIZE)

    def to_position(self) -> Position:
        return Position(self.row, self.col)

    @classmethod
    def from_position(cls, position: Position) -> SerializedPosition:
        return cls(row=position.row, col=position.col)


class SerializedMove(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    position: SerializedPosition
    player: StrictInt
    flipped_positions: list[SerializedPosition] = Field(alias="flippedPositions")

    @field_validator("player")
    @classmethod
    def check_player(cls, v: int) -> int:
        return validate_player(v)

    def to_move(self) -> Move:
        return Move(
            self.position.to_position(),
            CellState(self.player),
            [position.to_position() for position in self.flipped_positions],
        )

    @classmethod
    def from_move(cls, move: Move) -> SerializedMove:
        return cls(
            position=SerializedPosition.from_position(move.position),
            player=int(move.player),
            flipped_positions=[
                SerializedPosition.from_position(position)
                for position in move.flipped_positions
            ],
        )


class SerializedGameState(BaseModel):
    """
    Transport shape of a GameState. Cells and players use the integer encoding
    0=empty, 1=black, 2=white and JSON keys are camelCase.
    """

    model_config = ConfigDict(populate_by_name=True)

    board: list[list[StrictInt]]
    current_player: StrictInt = Field(alias="currentPlayer")
    status: GameStatus
    history: list[SerializedMove]
    black_score: StrictInt = Field(alias="blackScore")
    white_score: StrictInt = Field(alias="whiteScore")

    @field_validator("current_player")
    @classmethod
    def validate_current_player(cls, v: int) -> int:
        return validate_player(v)

    @field_validator("board")
    @classmethod
    def validate_board(cls, v: list[list[int]]) -> list[list[int]]:
        if len(v) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in v):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")

        for row in v:
            for square in row:
                if square not in CELL_VALUES:
                    raise ValueError(f"Invalid cell state {square}")
        return v

    @model_validator(mode="after")
    def validate_scores(self) -> SerializedGameState:
        board = Board(self.board)

        for name, score, color in [
            ("Black", self.black_score, BLACK),
            ("White", self.white_score, WHITE),
        ]:
            if score != board.count(color):
                raise ValueError(
                    f"{name} score {score} does not match {board.count(color)} discs"
                )
        return self

    def to_game_state(self) -> GameState:
        return GameState(
            board=Board(self.board),
            current_player=CellState(self.current_player),
            status=self.status,
            history=[move.to_move() for move in self.history],
        )

    @classmethod
    def from_game_state(cls, state: GameState) -> SerializedGameState:
        return cls(
            board=state.board.to_lists(),
            current_player=int(state.current_player),
            status=state.status,
            history=[SerializedMove.from_move(move) for move in state.history],
            black_score=state.black_score,
            white_score=state.white_score,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str) -> SerializedGameState:
        return cls.model_validate_json(data)
