import pytest

from flipline.othello.board import (
    BLACK,
    EMPTY,
    WHITE,
    Board,
    CellState,
    create_initial_board,
    opponent,
)
from flipline.othello.position import Position, all_positions

BOARD_START = Board.start()

BOARD_MIXED = Board.from_rows(
    [
        "X-------",
        "-O------",
        "--X-----",
        "---OX---",
        "---XO---",
        "--------",
        "--------",
        "-------O",
    ]
)


def test_start_board() -> None:
    board = create_initial_board()
    assert board == BOARD_START

    assert board.get_cell_state(Position(3, 3)) == WHITE
    assert board.get_cell_state(Position(3, 4)) == BLACK
    assert board.get_cell_state(Position(4, 3)) == BLACK
    assert board.get_cell_state(Position(4, 4)) == WHITE

    assert board.count(BLACK) == 2
    assert board.count(WHITE) == 2
    assert board.count(EMPTY) == 60


def test_empty_board() -> None:
    board = Board.empty()
    assert board.count(EMPTY) == 64
    assert not board.is_full()


@pytest.mark.parametrize(
    ["squares"],
    [
        pytest.param([[0] * 8] * 7, id="too-few-rows"),
        pytest.param([[0] * 8] * 9, id="too-many-rows"),
        pytest.param([[0] * 8] * 7 + [[0] * 9], id="row-too-long"),
        pytest.param([[0] * 8] * 7 + [[0] * 8 + [3]], id="row-too-long-and-bad"),
        pytest.param([[0] * 8] * 7 + [[0] * 7 + [3]], id="invalid-state"),
    ],
)
def test_init_error(squares: list[list[int]]) -> None:
    with pytest.raises(ValueError):
        Board(squares)


def test_init_converts_ints() -> None:
    board = Board([[1] * 8] * 8)
    assert board.get_cell_state(Position(0, 0)) is CellState.BLACK


def test_set_cell_state() -> None:
    child = BOARD_START.set_cell_state(Position(0, 0), BLACK)

    assert child.get_cell_state(Position(0, 0)) == BLACK
    assert child.count(BLACK) == 3

    for position in all_positions():
        if position != Position(0, 0):
            assert child.get_cell_state(position) == BOARD_START.get_cell_state(
                position
            )


def test_set_cell_state_immutable() -> None:
    before = BOARD_MIXED.to_rows()

    for position in all_positions():
        for state in CellState:
            BOARD_MIXED.set_cell_state(position, state)
            assert BOARD_MIXED.to_rows() == before


def test_get_empty_positions() -> None:
    empties = BOARD_START.get_empty_positions()
    assert len(empties) == 60
    assert empties == sorted(empties, key=lambda p: p.as_tuple())
    assert Position(3, 3) not in empties
    assert empties[0] == Position(0, 0)
    assert empties[-1] == Position(7, 7)


def test_get_empty_positions_full_board() -> None:
    assert Board.full(WHITE).get_empty_positions() == []


@pytest.mark.parametrize(
    ["board", "expected_counts"],
    [
        pytest.param(Board.empty(), {BLACK: 0, WHITE: 0}, id="empty"),
        pytest.param(Board.full(BLACK), {BLACK: 64, WHITE: 0}, id="all-black"),
        pytest.param(Board.full(WHITE), {BLACK: 0, WHITE: 64}, id="all-white"),
        pytest.param(BOARD_MIXED, {BLACK: 4, WHITE: 4}, id="mixed"),
    ],
)
def test_count(board: Board, expected_counts: dict[CellState, int]) -> None:
    for color, count in expected_counts.items():
        assert board.count(color) == count


@pytest.mark.parametrize(
    ["board", "expected"],
    [
        pytest.param(Board.empty(), False, id="empty"),
        pytest.param(BOARD_START, False, id="start"),
        pytest.param(Board.full(BLACK), True, id="all-black"),
        pytest.param(Board.from_rows(["XXXXOOOO"] * 8), True, id="mixed-full"),
        pytest.param(
            Board.from_rows(["XXXXOOOO"] * 7 + ["XXXXOOO-"]), False, id="one-empty"
        ),
    ],
)
def test_is_full(board: Board, expected: bool) -> None:
    assert board.is_full() == expected


def test_from_rows() -> None:
    rows = [
        "--------",
        "--------",
        "--------",
        "---OX---",
        "---XO---",
        "--------",
        "--------",
        "--------",
    ]
    assert Board.from_rows(rows) == BOARD_START
    assert BOARD_START.to_rows() == rows


def test_from_rows_lowercase() -> None:
    assert Board.from_rows(["x" * 8] * 8) == Board.full(BLACK)


def test_from_rows_error() -> None:
    with pytest.raises(ValueError):
        Board.from_rows(["?" * 8] * 8)


def test_to_lists() -> None:
    lists = BOARD_START.to_lists()
    assert lists[3] == [0, 0, 0, 2, 1, 0, 0, 0]
    assert lists[4] == [0, 0, 0, 1, 2, 0, 0, 0]
    assert Board(lists) == BOARD_START


def test_opponent() -> None:
    assert opponent(BLACK) == WHITE
    assert opponent(WHITE) == BLACK

    with pytest.raises(AssertionError):
        opponent(EMPTY)


def test_board_equality() -> None:
    assert Board.start() == Board.start()
    assert Board.start() != Board.empty()
    assert Board.start() != "not a board"
    assert hash(Board.start()) == hash(Board.start())
