import io

import pytest

from countryguesser.colors import RESET, YEL
from countryguesser.text import (
    ascii_table,
    print_table,
    remove_spaces,
    split_by,
    to_lowercase,
)


def test_to_lowercase_ascii():
    assert to_lowercase("Republique_du_Congo") == "republique_du_congo"


def test_to_lowercase_leaves_non_ascii():
    assert to_lowercase("ÉTATS") == "Étas".replace("tas", "tats")
    assert to_lowercase("Israël") == "israël"


def test_remove_spaces():
    assert remove_spaces("Burkina Faso") == "BurkinaFaso"
    assert remove_spaces("   ") == ""


def test_split_by_keeps_leading_spaces():
    assert split_by("Noir, Rouge, Vert", ",") == ["Noir", " Rouge", " Vert"]


def test_split_by_without_delimiter_is_empty():
    assert split_by("Arabe", ",") == []


def test_split_by_drops_empty_pieces():
    assert split_by(",,a,,b,", ",") == ["a", "b"]


def test_split_by_delimiter_is_character_set():
    assert split_by("a;b,c", ",;") == []
    assert split_by("a,;b,c;d", ",;") == ["a", "b", "c", "d"]


@pytest.mark.parametrize("text", ["Dari, Pashto", "x,y,z", "Anglais, Tok Pisin, Hiri Motu"])
def test_split_by_round_trip(text):
    assert ",".join(split_by(text, ",")) == text


def test_ascii_table_pinned():
    table = ascii_table([["a", "bb"], ["ccc", None]], header=True)
    sep = YEL + "+-----+----+\n"
    assert table == sep + "| a   | bb |\n" + sep + "| ccc |    |\n" + sep


def test_ascii_table_without_header():
    rows = [["Pays", "Devise"], ["France", "Euro"], ["Japon", "Yen"]]
    lines = ascii_table(rows, header=False).splitlines()
    assert len(lines) == 5
    assert lines[0] == lines[-1]
    assert lines[1].startswith("| Pays")


def test_ascii_table_lines_align():
    rows = [["Pays", "Population"], ["Vatican", "800"], ["Chine", "1398000000"]]
    lines = ascii_table(rows, header=True).splitlines()
    plain = [line.replace(YEL, "") for line in lines]
    assert len({len(line) for line in plain}) == 1
    assert len(lines) == 6
    assert lines[0] == lines[2] == lines[-1]


def test_ascii_table_short_rows_padded():
    lines = ascii_table([["a", "b"], ["c"]], header=False).splitlines()
    assert lines[2] == "| c |   |"


def test_print_table_writes_and_resets():
    out = io.StringIO()
    rows = [["h1", "h2"], ["v1", "v2"]]
    print_table(rows, out)
    text = out.getvalue()
    assert text == ascii_table(rows, header=True) + RESET