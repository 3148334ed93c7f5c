# countryguesser

A small terminal game in French. The computer picks a country at random
from its built-in table, and you try to name it. After each wrong guess
you get a report comparing your guess with the mystery country:

- **Continent**: correct or wrong
- **Langue** (languages): correct if at least one language is shared
- **Population**: correct, or an arrow telling you whether the mystery
  country has fewer (`↓ Moins`) or more (`↑ Plus`) inhabitants
- **Devise** (currency): correct or wrong
- **Frontières** (number of land borders): correct, fewer or more
- **Couleurs** (flag colours): correct if at least one colour is shared

Country names are written in French, mostly without accents (for example
`Allemagne`, `Bresil`). Spaces inside a country name are usually written
as underscores: `Costa_Rica`, `Arabie_Saoudite`, `Coree_du_Sud`.

Type names with the capitals shown in the table (`France`, not `france`).
The lookup picks a hash bucket from the name exactly as typed and only
ignores case when comparing names inside that bucket, so a name with
different capitals is usually reported as not in the list. A name that is
not found still counts as a guess.

## Installation

```
pip install .
```

## Playing

```
countryguesser
```

The command takes no options. Type a country name at the `Nom du pays:`
prompt. Input is read word by word, so a name cannot contain a space.
When you find the country, the game shows how many guesses you needed and
all the details of the country, then asks whether you want to play again:
an answer starting with `O` or `o` starts a new game, anything else ends
the program. End of input or Ctrl-C also ends it.

## Using it from Python

The pieces of the game can be used on their own:

```python
from countryguesser.countries import load_countries
from countryguesser.game import start_game, compare_countries, format_comparison

countries = load_countries()
game = start_game(countries, 0, None)

entry = countries.get("France")
comparison = compare_countries(game, entry)
print(format_comparison(entry, comparison))
```

- `countryguesser.countries.load_countries()` returns a fresh `Dictionary`
  mapping each country name to six values in order: continent, languages,
  population, currency, borders, colours. `add_country` adds one country
  to a dictionary.
- `countryguesser.dictionary.Dictionary` is a chained hash table whose keys
  collect lists of values: `add`, `get` (returns an `Entry` or `None`),
  `delete`, `keys`, `len()` and `in`. `hash_key` gives a key's bucket.
- `countryguesser.game.start_game(countries, game_id, rng)` returns a
  `Game`; `rng` is any object with a `randrange` method, or `None` for a
  fresh `random.Random`. It raises `ValueError` if the dictionary is empty.
  `Game.guess(name, out)` writes the outcome to `out` (standard output by
  default) and returns `True` when the name is right.
- `compare_countries(game, entry)` returns a `Comparison` whose population
  and borders fields are `Verdict.LESS`, `Verdict.MORE` or `Verdict.EQUAL`;
  `format_comparison` and `format_result` render the reports as strings
  with ANSI colours.
- `countryguesser.cli.play_round(countries, game_id, input_fn, out, rng)`
  plays one game with a given input function and output stream and
  returns the finished `Game`.
- `countryguesser.text` holds small string helpers (`to_lowercase`,
  `remove_spaces`, `split_by`) and a boxed table renderer (`ascii_table`,
  `print_table`); `countryguesser.colors` holds the ANSI escape codes.

## What it does not do

The game keeps no scores or history between runs, and the country table
is built into the package; there is no way to load other countries from a
file.

## Running the tests

```
pip install ".[test]"
pytest
```