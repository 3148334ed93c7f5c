import pytest

from countryguesser.countries import COUNTRIES_COUNT, add_country, load_countries
from countryguesser.dictionary import Dictionary


@pytest.fixture
def countries():
    return load_countries()


def test_add_country_stores_values_in_order():
    dictionary = Dictionary()
    add_country(dictionary, "Atlantis", "Ocean", "Atlante", "1000", "Perle", "0", "Bleu")
    entry = dictionary.get("Atlantis")
    assert entry.values == ["Ocean", "Atlante", "1000", "Perle", "0", "Bleu"]
    assert len(dictionary) == 1


def test_add_country_twice_appends_to_same_entry():
    dictionary = Dictionary()
    add_country(dictionary, "Atlantis", "a", "b", "c", "d", "e", "f")
    add_country(dictionary, "Atlantis", "g", "h", "i", "j", "k", "l")
    assert len(dictionary) == 1
    assert dictionary.get("Atlantis").values == list("abcdefghijkl")


def test_france_entry(countries):
    entry = countries.get("France")
    assert entry.key == "France"
    assert entry.values == ["Europe", "Français", "67000000", "Euro", "8", "Bleu, Blanc, Rouge"]


def test_quirky_population_kept_verbatim(countries):
    assert countries.get("Dominique").values[2] == "72,000"
    assert countries.get("Suriname").values[2] == "586,000"


def test_non_ascii_key_found(countries):
    entry = countries.get("Israël")
    assert entry.values[0] == "Asie"
    assert entry.values[4] == "5"


def test_every_country_has_six_attributes(countries):
    assert all(len(countries.get(key).values) == 6 for key in countries.keys())


def test_keys_unique_and_match_size(countries):
    keys = countries.keys()
    assert len(keys) == len(set(keys)) == len(countries)


def test_enough_countries_for_random_draw(countries):
    assert len(countries) >= COUNTRIES_COUNT


def test_borders_are_integers(countries):
    assert all(countries.get(key).values[4].isdigit() for key in countries.keys())


def test_each_load_is_independent():
    first = load_countries()
    second = load_countries()
    first.delete("France")
    assert "France" not in first
    assert "France" in second
    assert len(second) == len(first) + 1


def test_names_with_underscores_present(countries):
    assert countries.get("Costa_Rica").values[3] == "Colón costaricain"
    assert countries.get("Republique_centrafricaine").values[5] == "Bleu, Blanc, Rouge, Vert, Jaune"