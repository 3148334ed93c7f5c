import io

import pytest

from countryguesser.cli import main, play_round
from countryguesser.countries import load_countries


class _FixedRng:
    def __init__(self, index):
        self.index = index

    def randrange(self, stop):
        return self.index


@pytest.fixture(scope="module")
def countries():
    return load_countries()


def _scripted(lines):
    remaining = iter(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read, prompts


def _rng_for(countries, name):
    return _FixedRng(countries.keys().index(name))


def test_play_round_until_found(countries):
    read, prompts = _scripted(["Allemagne", "Narnia", "France"])
    out = io.StringIO()
    game = play_round(countries, 7, read, out, _rng_for(countries, "France"))
    text = out.getvalue()
    assert game.guesses == 3
    assert game.id == 7
    assert "Game started! (ID:7)\n" in text
    assert "Première tentative...\n" in text
    assert text.count("Nouvelle tentative...\n") == 2
    assert prompts == ["Nom du pays: "] * 3


def test_play_round_reads_several_words_from_one_line(countries):
    read, prompts = _scripted(["Allemagne   France"])
    out = io.StringIO()
    game = play_round(countries, 0, read, out, _rng_for(countries, "France"))
    assert game.guesses == 2
    assert len(prompts) == 1


def test_play_round_skips_blank_lines(countries):
    read, prompts = _scripted(["", "   ", "France"])
    out = io.StringIO()
    game = play_round(countries, 0, read, out, _rng_for(countries, "France"))
    assert game.guesses == 1
    assert len(prompts) == 3


def test_play_round_end_of_input_raises(countries):
    read, _ = _scripted([])
    with pytest.raises(EOFError):
        play_round(countries, 0, read, io.StringIO(), _rng_for(countries, "France"))


def test_main_plays_and_stops(monkeypatch, capsys, countries):
    names = iter(countries.keys())
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        if prompt.startswith("Voulez"):
            return "N"
        try:
            return next(names)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "Loading countries...\n" in text
    assert "Countries loaded!\n" in text
    assert " Country Guesser 1.0 " in text
    assert "Game started! (ID:0)\n" in text
    assert "Game started! (ID:1)" not in text
    assert prompts.count("Voulez-vous démarrer une nouvelle partie ?\n Oui (O) ou Non (N): ") <= 1


def test_main_stops_on_immediate_end_of_input(monkeypatch, capsys):
    def fake_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "Game started! (ID:0)\n" in text
    assert "Correct!" not in text