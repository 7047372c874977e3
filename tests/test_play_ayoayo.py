import argparse

from ayoayo import AyoayoGame, Board, Cup, GameState, Player, initialize_game
from ayoayo.core import MustFeedError, NoSeedsToSow, NoSuchCup, RelayLoopError

from scripts.play_ayoayo import build_config, error_message, load_yaml_config, parse_command, play_console


def scripted(lines):
    remaining = list(lines)
    prompts = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line, prompts


def test_parse_command():
    assert parse_command(" 4 ").kind == "play"
    assert parse_command("4").cup == 4
    assert parse_command("QUIT").kind == "quit"
    assert parse_command("q").kind == "quit"
    assert parse_command("sow").kind == "unknown"
    assert parse_command("-1").kind == "unknown"
    assert parse_command("²").kind == "unknown"
    assert parse_command("3.0").kind == "unknown"


def test_error_messages():
    assert error_message(MustFeedError()) == "You must feed your opponent seeds"
    assert error_message(NoSeedsToSow()) == "The cup you chose has no seeds"
    assert error_message(NoSuchCup()) == "The cup you chose doesn't exist"
    assert error_message(RelayLoopError()) == "The seeds from that cup would never come to rest"


def test_console_uses_one_based_cups_and_alternates_turns():
    game = initialize_game()
    read_line, prompts = scripted(["4", "quit"])
    output = []

    state = play_console(game, read_line, output.append)

    assert state == GameState.in_progress(Player.B)
    assert prompts == ["Player A's Turn: ", "Player B's Turn: "]
    assert output[1] == "0 - ①|⑥|⑥|②|⑦|①\n⑥|①|⑥|⑥|⑥|⓪ - 0"


def test_console_reports_errors_and_reprompts():
    cups = [Cup(Player.A, i, n) for i, n in enumerate([1, 0, 1])]
    cups += [Cup(Player.B, i, 0) for i in range(3)]
    game = AyoayoGame(Board.from_cups(cups), GameState.in_progress(Player.A))
    read_line, prompts = scripted(["0", "9", "2", "1", "hello"])
    output = []

    play_console(game, read_line, output.append)

    assert output[1:5] == [
        "The cup you chose doesn't exist",
        "The cup you chose doesn't exist",
        "The cup you chose has no seeds",
        "You must feed your opponent seeds",
    ]
    assert output[5] == "Command not found: hello"
    assert len(prompts) == 6
    assert game.state == GameState.in_progress(Player.A)


def test_console_survives_relay_that_never_rests():
    opening = [str(cup + 1) for cup in [1, 4, 3, 0, 0, 5, 4, 3, 0, 5, 3, 1, 2, 4, 2, 5, 1, 3, 3, 5, 3]]
    game = initialize_game()
    read_line, prompts = scripted(opening + ["2", "²"])
    output = []

    state = play_console(game, read_line, output.append)

    assert output[len(opening)] == "12 - ⓪|④|③|⓪|①|⓪\n①|③|①|⓪|②|① - 20"
    assert output[len(opening) + 1] == "The seeds from that cup would never come to rest"
    assert output[len(opening) + 2] == "Command not found: ²"
    assert prompts[-2:] == ["Player B's Turn: ", "Player B's Turn: "]
    assert state == GameState.in_progress(Player.B)


def test_console_announces_winner():
    cups = [Cup(Player.A, 0, 1), Cup(Player.A, 1, 0), Cup(Player.B, 0, 0), Cup(Player.B, 1, 3)]
    game = AyoayoGame(Board.from_cups(cups), GameState.in_progress(Player.A))
    read_line, _ = scripted(["1"])
    output = []

    state = play_console(game, read_line, output.append)

    assert state == GameState.won(Player.A)
    assert output[-1] == "Player A Won!"


def test_console_announces_draw():
    game = initialize_game()
    game.state = GameState.draw()
    output = []

    play_console(game, lambda _: "quit", output.append)

    assert output[-1] == "Nobody Won?"


def test_config_file_and_overrides(tmp_path):
    path = tmp_path / "ayoayo.yaml"
    path.write_text("cups_per_player: 3\nstarting_seeds: 2\n", encoding="utf-8")

    assert load_yaml_config(str(path)) == {"cups_per_player": 3, "starting_seeds": 2}
    assert load_yaml_config(str(tmp_path / "missing.yaml")) == {}

    args = argparse.Namespace(config=str(path), cups_per_player=None, starting_seeds=5)
    config = build_config(args)
    assert config.cups_per_player == 3
    assert config.starting_seeds == 5
