import typer

from flipline.config import setup_logging
from flipline.othello.game import GameState, get_game_result
from flipline.othello.models import SerializedGameState
from flipline.othello.position import Position
from flipline.othello.replay import InvalidMove, replay_fields
from flipline.othello.validation import get_legal_moves

app = typer.Typer(pretty_exceptions_enable=False)


@app.callback()
def main() -> None:
    setup_logging()


def load_game(fields: list[str]) -> GameState:
    try:
        return replay_fields(fields)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    except InvalidMove as e:
        typer.echo(f"Invalid move {e.position.to_field()}: {e.reason}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def replay(moves: list[str] = typer.Argument(None)) -> None:
    state = load_game(moves or [])
    typer.echo(SerializedGameState.from_game_state(state).to_json())


@app.command()
def legal_moves(moves: list[str] = typer.Argument(None)) -> None:
    state = load_game(moves or [])

    if state.is_finished():
        typer.echo("")
        return

    legal = get_legal_moves(state.board, state.current_player)
    typer.echo(Position.positions_to_fields(legal))


@app.command()
def result(moves: list[str] = typer.Argument(None)) -> None:
    state = load_game(moves or [])
    game_result = get_game_result(state)

    if game_result.winner is None:
        winner = "draw"
    else:
        winner = game_result.winner.name.lower()

    typer.echo(f"{game_result.black_score}-{game_result.white_score} {winner}")
    typer.echo(state.status.value)


if __name__ == "__main__":
    app()
