"""Guess the mystery country from hints about its continent, languages, population, currency, borders and flag colours."""

__version__ = "1.0.0"