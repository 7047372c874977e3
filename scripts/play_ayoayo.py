#!/usr/bin/env python3
"""Play Ayoayo at the console, two players taking turns at one keyboard."""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

import yaml

from ayoayo import AyoayoConfig, AyoayoGame, GameError, GameState, Outcome, initialize_game
from ayoayo.core import MustFeedError, NoSeedsToSow, NoSuchCup, RelayLoopError

QUIT_WORDS = {"q", "quit", "exit"}

ERROR_MESSAGES = {
    MustFeedError: "You must feed your opponent seeds",
    NoSeedsToSow: "The cup you chose has no seeds",
    NoSuchCup: "The cup you chose doesn't exist",
    RelayLoopError: "The seeds from that cup would never come to rest",
}


@dataclass(frozen=True)
class Command:
    kind: str  # "play", "quit" or "unknown"
    cup: Optional[int] = None  # 1-based, as typed
    text: str = ""


def load_yaml_config(path_str: str) -> Dict:
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def parse_command(raw: str) -> Command:
    text = raw.strip()
    if text.lower() in QUIT_WORDS:
        return Command("quit", text=text)
    if text.isdecimal():
        return Command("play", cup=int(text), text=text)
    return Command("unknown", text=text)


def error_message(exc: GameError) -> str:
    for kind, message in ERROR_MESSAGES.items():
        if isinstance(exc, kind):
            return message
    return str(exc)


def result_message(state: GameState) -> str:
    if state.outcome == Outcome.WON:
        return f"{state.player.label} Won!"
    return "Nobody Won?"


def play_console(
    game: AyoayoGame,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> GameState:
    write(game.render())
    while not game.is_terminal:
        try:
            raw = read_line(f"{game.current_player.label}'s Turn: ")
        except (EOFError, KeyboardInterrupt):
            write("")
            break

        command = parse_command(raw)
        if command.kind == "quit":
            break
        if command.kind == "unknown":
            write(f"Command not found: {command.text}")
            continue
        if command.cup < 1:
            write(ERROR_MESSAGES[NoSuchCup])
            continue

        try:
            game.play(command.cup - 1)
        except GameError as exc:
            write(error_message(exc))
            continue
        write(game.render())

    if game.is_terminal:
        write(result_message(game.state))
    return game.state


def build_config(args: argparse.Namespace) -> AyoayoConfig:
    cfg = load_yaml_config(args.config) if args.config else {}
    if args.cups_per_player is not None:
        cfg["cups_per_player"] = args.cups_per_player
    if args.starting_seeds is not None:
        cfg["starting_seeds"] = args.starting_seeds
    return AyoayoConfig.from_dict(cfg)


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Ayoayo in the console.")
    parser.add_argument("--config", type=str, default="configs/ayoayo.yaml")
    parser.add_argument("--cups-per-player", type=int)
    parser.add_argument("--starting-seeds", type=int)
    parser.add_argument("--verbose", action="store_true", help="Log every move")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    play_console(initialize_game(build_config(args)))


if __name__ == "__main__":
    main()
