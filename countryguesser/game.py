"""One round of the guessing game: the hidden country and the clues given."""

from __future__ import annotations

import random
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol, TextIO

from .colors import BCYN, BRED, CYN, GRN, RED, RESET, UWHT
from .countries import COUNTRIES_COUNT
from .dictionary import Dictionary, Entry
from .text import split_by, to_lowercase

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Verdict(Enum):
    """How the hidden country's number compares with the guessed one."""

    LESS = "less"
    MORE = "more"
    EQUAL = "equal"


@dataclass(frozen=True)
class Comparison:
    """Clues obtained by comparing a guessed country with the hidden one."""

    continent: bool
    language: bool
    population: Verdict
    currency: bool
    borders: Verdict
    colors: bool


@dataclass
class Game:
    """The hidden country, its attributes and the number of guesses so far."""

    id: int
    country: str
    continent: str
    language: str
    population: str
    currency: str
    borders: str
    colors: str
    countries: Dictionary = field(repr=False, compare=False)
    guesses: int = 0

    def guess(self, name: str, out: Optional[TextIO] = None) -> bool:
        """Try ``name`` as the answer, report the outcome and return whether it was right."""
        stream = sys.stdout if out is None else out
        self.guesses += 1
        entry = self.countries.get(name)
        if entry is None:
            stream.write(
                RED + "Faux! Ce pays n'est pas dans la liste\n"
                + BRED + "/!\\" + RED
                + " Ne pas oublier les majuscules et de remplacer les accents\n"
                + RESET
            )
            return False
        if to_lowercase(name) == to_lowercase(self.country):
            stream.write(GRN + "Correct!\n" + RESET)
            stream.write(
                f"{GRN}Vous avez trouvé en {UWHT}{self.guesses}{RESET}{GRN} essai(s)\n{RESET}"
            )
            stream.write(format_result(self))
            return True
        stream.write(RED + "Faux!\n" + RESET)
        stream.write(format_comparison(entry, compare_countries(self, entry)))
        return False


def start_game(
    countries: Dictionary, game_id: int, rng: Optional[_RandomSource] = None
) -> Game:
    """Pick a hidden country at random and return a fresh game for it."""
    keys = countries.keys()
    if not keys:
        raise ValueError("no countries to choose from")
    source = random.Random() if rng is None else rng
    key = keys[source.randrange(min(COUNTRIES_COUNT, len(keys)))]
    entry = countries.get(key)
    if entry is None:
        raise LookupError(f"country {key!r} vanished from the dictionary")
    attributes = list(entry.values[:6])
    attributes.extend([""] * (6 - len(attributes)))
    return Game(game_id, entry.key, *attributes, countries=countries)


def _same(left: str, right: str) -> bool:
    return to_lowercase(left) == to_lowercase(right)


def _share_item(left: str, right: str) -> bool:
    return any(
        _same(mine, theirs)
        for mine in split_by(left, ",")
        for theirs in split_by(right, ",")
    )


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _order(hidden: str, guessed: str) -> Verdict:
    target, other = _atoi(hidden), _atoi(guessed)
    if target < other:
        return Verdict.LESS
    if target > other:
        return Verdict.MORE
    return Verdict.EQUAL


def compare_countries(game: Game, entry: Entry) -> Comparison:
    """Compare the guessed ``entry`` with the country hidden in ``game``."""
    values = entry.values
    return Comparison(
        continent=_same(game.continent, values[0]),
        language=_share_item(game.language, values[1]),
        population=_order(game.population, values[2]),
        currency=_same(game.currency, values[3]),
        borders=_order(game.borders, values[4]),
        colors=_share_item(game.colors, values[5]),
    )


def _flag(correct: bool) -> str:
    return GRN + "(Correct)" if correct else RED + "(Faux)"


_ORDER_MARKS = {
    Verdict.EQUAL: GRN + "(Correct)",
    Verdict.LESS: RED + "↓ (Moins)",
    Verdict.MORE: RED + "↑ (Plus)",
}


def _line(label: str, value: str) -> str:
    return f"| {CYN}{label}: {BCYN}{value}\n{RESET}"


def format_comparison(entry: Entry, comparison: Comparison) -> str:
    """Render the clues for a wrong guess, one attribute per line."""
    values = entry.values
    rows = (
        ("Continent", values[0], _flag(comparison.continent)),
        ("Langue", values[1], _flag(comparison.language)),
        ("Population", values[2], _ORDER_MARKS[comparison.population]),
        ("Devise", values[3], _flag(comparison.currency)),
        ("Frontières", values[4], _ORDER_MARKS[comparison.borders]),
        ("Couleurs", values[5], _flag(comparison.colors)),
    )
    body = "".join(_line(label, f"{value} {mark}") for label, value, mark in rows)
    return BCYN + "RESULTATS\n" + RESET + body + "\n"


def format_result(game: Game) -> str:
    """Render every attribute of the hidden country."""
    rows = (
        ("Pays", game.country),
        ("Continent", game.continent),
        ("Langue", game.language),
        ("Population", game.population),
        ("Devise", game.currency),
        ("Frontières", game.borders),
        ("Couleurs", game.colors),
    )
    return BCYN + "RESULTATS\n" + RESET + "".join(_line(label, value) for label, value in rows)