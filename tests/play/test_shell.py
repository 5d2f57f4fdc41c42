import pytest

from minimax_game.core.config import GameConfig
from minimax_game.core.errors import ConfigError
from minimax_game.play.shell import (
    CommandType,
    MinimaxShell,
    parse_assignment,
    parse_command,
)


class Console:
    """Scripted stdin/stdout for the shell."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def output(self, *args, end="\n", flush=False):
        self.lines.append(" ".join(str(a) for a in args) + (end if end != "\n" else ""))

    @property
    def text(self):
        return "\n".join(self.lines)


def _shell(console, **config):
    return MinimaxShell(GameConfig(**config), input_fn=console.input, output=console.output, sleep=lambda s: None)


@pytest.mark.parametrize(
    "line,kind,argument",
    [
        ("help", CommandType.HELP, ""),
        ("  example ", CommandType.EXAMPLE, ""),
        ("begin", CommandType.BEGIN, ""),
        ("quit", CommandType.QUIT, ""),
        ("set depth = 3", CommandType.SET, "depth = 3"),
        ("set", CommandType.INVALID, "set"),
        ("dance", CommandType.INVALID, "dance"),
    ],
)
def test_parse_command(line, kind, argument):
    command = parse_command(line)
    assert command.kind is kind
    assert command.argument == argument


def test_parse_assignment():
    assert parse_assignment(" depth =  5 ") == ("depth", "5")
    assert parse_assignment("seed = a=b") == ("seed", "a=b")
    for bad in ("depth", "= 5", "depth =", "  =  "):
        with pytest.raises(ConfigError):
            parse_assignment(bad)


def test_set_updates_config_and_reports():
    console = Console()
    shell = _shell(console)
    assert shell.handle("set depth = 6")
    assert shell.handle("set singleplayer = false")
    assert shell.config.depth == 6
    assert shell.config.singleplayer is False
    assert "depth is now 6" in console.text
    assert "singleplayer is now false" in console.text


def test_set_rejections_keep_previous_values():
    console = Console()
    shell = _shell(console)
    shell.handle("set depth = 0")
    shell.handle("set singleplayer = maybe")
    shell.handle("set colour = blue")
    shell.handle("set depth")
    assert shell.config == GameConfig()
    assert "Zero is pretty great" in console.text
    assert "expecting a boolean" in console.text
    assert '"colour" is not a key I recognize' in console.text
    assert "not sure what you are trying to set" in console.text


def test_big_depth_warns():
    console = Console()
    _shell(console).handle("set depth = 9")
    assert "[warn]" in console.text


def test_unknown_command_keeps_running():
    console = Console()
    shell = _shell(console)
    assert shell.handle("fly") is True
    assert 'Cannot compute "fly"' in console.text
    assert shell.handle("quit") is False


def test_help_lists_commands():
    console = Console()
    _shell(console).handle("help")
    for word in ("example", "help", "begin", "set", "quit", "singleplayer", "depth"):
        assert word in console.text


def test_example_walkthrough_reaches_four():
    console = Console()
    _shell(console).handle("example")
    assert "min(4, 7) = 4" in console.text
    assert "min(1, 3) = 1" in console.text
    assert "Player One goes left." in console.text
    assert "Player Two goes left." in console.text
    assert "The result is 4." in console.text


def test_begin_singleplayer_against_oracle():
    console = Console("left", "left", "left")
    shell = _shell(console, depth=5, seed=11)
    session = shell.cmd_begin()
    assert session.is_finished
    # The human moves at layers 0 and 2, the computer at 1 and 3
    assert len(console.prompts) == 2
    assert console.text.count("I choose") == 2
    assert f"The result is {session.outcome}." in console.text
    assert shell.last_session is session


def test_begin_two_player_prompts_every_move():
    console = Console("r", "nope", "l", "right")
    shell = _shell(console, depth=4, singleplayer=False, seed=2)
    session = shell.cmd_begin()
    assert [str(d) for _, d in session.history] == ["right", "left", "right"]
    assert len(console.prompts) == 4
    assert "I choose" not in console.text
    assert '"nope" is not a direction' in console.text


def test_begin_depth_one():
    console = Console()
    shell = _shell(console, depth=1, seed=0)
    session = shell.cmd_begin()
    assert session.history == []
    assert "single layer" in console.text
    assert console.prompts == []


def test_typing_delay_types_characters():
    console = Console("left")
    delays = []
    shell = MinimaxShell(
        GameConfig(depth=3, seed=1, typing_delay=0.01),
        input_fn=console.input,
        output=console.output,
        sleep=delays.append,
    )
    shell.cmd_begin()
    assert len(delays) == len("I choose left!") or len(delays) == len("I choose right!")
    assert all(0.0 <= d <= 0.01 for d in delays)


def test_run_loop_until_quit():
    console = Console("help", "set depth = 2", "quit", "help")
    shell = _shell(console)
    shell.run()
    assert shell.config.depth == 2
    assert console.answers == ["help"]


def test_run_loop_stops_on_eof():
    console = Console("help")
    _shell(console).run()
    assert console.prompts == ["Please enter a command: "] * 2


def test_bad_seed_and_depth_never_reach_begin():
    console = Console()
    shell = _shell(console, depth=3, seed=5)
    shell.handle("set seed = -1")
    shell.handle("set depth = 70")
    assert shell.config == GameConfig(depth=3, seed=5)
    assert "Seeds cannot be negative" in console.text
    assert "deepest I can manage" in console.text
    assert "[warn]" not in console.text
