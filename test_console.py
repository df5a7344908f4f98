"""
Tests for the console modules and the game loop in main.py.
"""

import io

import numpy as np
import pytest

import main
from console.config import ConsoleConfig, UnsupportedPlatformError
from console.screen import Screen
from console.input_reader import MoveReader
from logic.ai_player import AIPlayer, search
from logic.game_state import GameState, Mark, empty_cells
from logic.win_checker import evaluate


def scripted(*answers):
    """An input() stand-in that replays answers and records prompts."""
    replies = iter(answers)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        try:
            return next(replies)
        except StopIteration:
            raise EOFError
    fake_input.prompts = prompts
    return fake_input


class RecordingRunner:
    """A subprocess.run stand-in."""

    def __init__(self):
        self.calls = []

    def __call__(self, command, check=False):
        self.calls.append((command, check))


class PerfectReader:
    """A human that plays the minimax move every time."""

    def __init__(self, human_first: bool = True):
        self.human_first = human_first

    def ask_first_mover(self) -> bool:
        return self.human_first

    def read_move(self, game_state: GameState) -> int:
        return search(
            game_state.board, Mark.HUMAN, game_state.empty_count, pruning=True
        ).move


class StuckAI:
    """An AI that never finds a move."""

    def get_best_move(self, game_state: GameState):
        return None


class LowestCellReader:
    """A human that always plays the lowest free cell."""

    def __init__(self, human_first: bool = True):
        self.human_first = human_first

    def ask_first_mover(self) -> bool:
        return self.human_first

    def read_move(self, game_state: GameState) -> int:
        return game_state.get_empty_cells()[0]


@pytest.fixture
def linux_config():
    return ConsoleConfig.for_platform("linux")


# ==================== CONFIG ====================

@pytest.mark.parametrize("name, command", [
    ("Linux", ["clear"]),
    ("Darwin", ["clear"]),
    ("Windows", ["cmd", "/c", "cls"]),
])
def test_clear_command_per_platform(name, command):
    config = ConsoleConfig.for_platform(name)
    assert config.platform_name == name.lower()
    assert config.clear_command == command


def test_unknown_platform_is_rejected():
    with pytest.raises(UnsupportedPlatformError):
        ConsoleConfig.for_platform("Plan9")


def test_default_platform_comes_from_host(monkeypatch):
    monkeypatch.setattr("console.config.platform.system", lambda: "Windows")
    assert ConsoleConfig.for_platform().clear_command == ["cmd", "/c", "cls"]


def test_symbols(linux_config):
    assert linux_config.symbol(Mark.HUMAN) == "X"
    assert linux_config.symbol(Mark.AI) == "O"
    assert linux_config.symbol(0) == " "
    assert linux_config.symbol(7) == "?"


# ==================== SCREEN ====================

def test_render_board(linux_config):
    board = np.array([1, -1, 0, 0, 1, 0, -1, 0, 0], dtype=np.int8)
    text = Screen(linux_config, out=io.StringIO()).render_board(board)
    assert text == (
        "\n"
        " O | X |   \n"
        "-----------\n"
        "   | O |   \n"
        "-----------\n"
        " X |   |   \n"
    )


def test_show_board_clears_first(linux_config):
    out = io.StringIO()
    runner = RecordingRunner()
    screen = Screen(linux_config, out=out, runner=runner)

    screen.show_board(np.zeros(9, dtype=np.int8))

    assert runner.calls == [(["clear"], False)]
    assert "-----------" in out.getvalue()


@pytest.mark.parametrize("outcome, message", [
    (1, "AI win."),
    (-1, "HUMAN win."),
    (0, "Draw."),
])
def test_show_result(linux_config, outcome, message):
    out = io.StringIO()
    Screen(linux_config, out=out).show_result(outcome)
    assert out.getvalue() == message + "\n"


def test_show_result_names_the_line(linux_config):
    out = io.StringIO()
    Screen(linux_config, out=out).show_result(1, (0, 4, 8))
    assert "Winning line: 1, 5, 9" in out.getvalue()


def test_banner(linux_config):
    out = io.StringIO()
    Screen(linux_config, out=out).show_banner()
    assert out.getvalue().splitlines()[:4] == [
        "Tic-tac-toe",
        "\twith the minimax algorithm",
        "Human: X",
        "Machine: O",
    ]


# ==================== INPUT ====================

def test_ask_first_mover_reprompts():
    fake = scripted("x", "3", "", "2")
    assert MoveReader(input_fn=fake, out=io.StringIO()).ask_first_mover() is False
    assert len(fake.prompts) == 4

    assert MoveReader(input_fn=scripted(" 1 "), out=io.StringIO()).ask_first_mover()


def test_read_move_reprompts_until_valid():
    game = GameState()
    game.make_move(4)
    game.make_move(0)
    fake = scripted("abc", "0", "10", "5", "1", "9")

    index = MoveReader(input_fn=fake, out=io.StringIO()).read_move(game)

    assert index == 8
    assert len(fake.prompts) == 6
    assert fake.prompts[0] == ConsoleConfig.MOVE_PROMPT
    assert all(p.startswith("Invalid. ") for p in fake.prompts[1:])
    assert "Cell 5 is already occupied." in fake.prompts[4]


def test_read_move_passes_on_end_of_input():
    with pytest.raises(EOFError):
        MoveReader(input_fn=scripted("abc"), out=io.StringIO()).read_move(GameState())


# ==================== GAME LOOP ====================

def make_game(config, reader, ai=None):
    out = io.StringIO()
    runner = RecordingRunner()
    game = main.TicTacToeGame(
        config,
        screen=Screen(config, out=out, runner=runner),
        reader=reader,
        ai=ai
    )
    return game, out, runner


def test_ai_never_loses_when_human_starts(linux_config):
    game, out, runner = make_game(linux_config, LowestCellReader(human_first=True))

    outcome = game.start()

    assert outcome in (0, 1)
    assert outcome == evaluate(game.game_state.board)
    assert game.game_state.is_game_over
    # Banner clear, initial board, then one redraw per half-move
    assert len(runner.calls) == 2 + len(game.game_state.moves)
    assert "AI win." in out.getvalue() or "Draw." in out.getvalue()


def test_ai_wins_against_lowest_cell_player(linux_config):
    # Human 0, AI 4, human 1, AI 2, human 3, then AI completes 2-4-6
    game, out, _ = make_game(linux_config, LowestCellReader(human_first=True))
    assert game.start() == 1
    assert game.game_state.winner == Mark.AI
    assert "AI win." in out.getvalue()


def test_ai_moving_first_with_pruning(linux_config):
    game, out, _ = make_game(
        linux_config,
        LowestCellReader(human_first=False),
        ai=AIPlayer(Mark.AI, use_pruning=True)
    )
    outcome = game.start()
    assert outcome in (0, 1)
    assert game.game_state.moves[0].player == Mark.AI


def test_scripted_human_cannot_win(linux_config):
    # Human opens in the centre, then cycles through the cells
    fake = scripted("1", "5", *[str(n) for n in range(1, 10)] * 6)
    reader = MoveReader(input_fn=fake, out=io.StringIO())
    game, out, _ = make_game(linux_config, reader)

    outcome = game.start()

    assert outcome in (0, 1)
    assert game.game_state.winner != Mark.HUMAN


@pytest.mark.parametrize("human_first", [True, False])
def test_perfect_play_ends_in_a_draw(linux_config, human_first):
    game, out, _ = make_game(linux_config, PerfectReader(human_first=human_first))

    assert game.start() == 0
    assert game.game_state.is_draw
    assert game.game_state.winner is None
    assert empty_cells(game.game_state.board) == []
    assert out.getvalue().rstrip().endswith("Draw.")


def test_game_ends_when_ai_has_no_move(linux_config):
    game, out, runner = make_game(
        linux_config, LowestCellReader(human_first=False), ai=StuckAI()
    )

    assert game.start() == 0
    assert game.game_state.is_game_over
    assert game.game_state.moves == []
    assert len(runner.calls) == 3


def test_main_aborts_on_unknown_platform(monkeypatch):
    monkeypatch.setattr("console.config.platform.system", lambda: "Plan9")
    with pytest.raises(SystemExit) as excinfo:
        main.main()
    assert excinfo.value.code == 1


def test_main_says_goodbye_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("console.config.platform.system", lambda: "Linux")
    monkeypatch.setattr("console.screen.subprocess.run", RecordingRunner())
    monkeypatch.setattr("builtins.input", scripted())

    main.main()

    captured = capsys.readouterr().out
    assert "Game interrupted by user." in captured
    assert captured.rstrip().endswith("Goodbye!")
