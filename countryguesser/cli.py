"""Command-line loop: play rounds until the player stops."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from typing import Callable, Optional, TextIO

from .colors import BLK, BRED, RED, RESET, WHTB
from .countries import load_countries
from .dictionary import Dictionary
from .game import Game, _RandomSource, start_game
from .text import to_lowercase

_GUESS_PROMPT = "Nom du pays: "
_NEW_GAME_PROMPT = "Voulez-vous démarrer une nouvelle partie ?\n Oui (O) ou Non (N): "


class _TokenReader:
    """Hand out whitespace-separated words, reading new lines only when needed."""

    def __init__(self, input_fn: Callable[[str], str]) -> None:
        self._input = input_fn
        self._pending: deque[str] = deque()

    def __call__(self, prompt: str) -> str:
        while not self._pending:
            self._pending.extend(self._input(prompt).split())
        return self._pending.popleft()


def play_round(
    countries: Dictionary,
    game_id: int,
    input_fn: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
    rng: Optional[_RandomSource] = None,
) -> Game:
    """Play one game until the hidden country is found and return it."""
    stream = sys.stdout if out is None else out
    read = input_fn if isinstance(input_fn, _TokenReader) else _TokenReader(input_fn)
    game = start_game(countries, game_id, rng)
    stream.write(f"Game started! (ID:{game.id})\n")
    stream.write("Première tentative...\n")
    while not game.guess(read(_GUESS_PROMPT), stream):
        stream.write("Nouvelle tentative...\n")
    return game


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="countryguesser", description="Guess the hidden country from clues."
    )
    parser.parse_args(argv)

    out = sys.stdout
    out.write("Loading countries...\n")
    countries = load_countries()
    out.write("Countries loaded!\n")
    out.write("\n >>> " + BLK + WHTB + " Country Guesser 1.0 " + RESET + " <<<\n")
    out.write(
        BRED + "/!\\ " + RESET + RED
        + "Les espaces dans les noms de pays doivent être remplacés par des tirets bas "
        + BRED + "/!\\\n\n" + RESET
    )

    read = _TokenReader(input)
    rng = random.Random()
    game_id = 0
    try:
        while True:
            play_round(countries, game_id, read, out, rng)
            game_id += 1
            if not to_lowercase(read(_NEW_GAME_PROMPT)).startswith("o"):
                break
    except (EOFError, KeyboardInterrupt):
        out.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())