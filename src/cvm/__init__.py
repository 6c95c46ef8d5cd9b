"""Capybara vs Monsters: character builder and turn-based monster battles."""

__version__ = "0.1.0"
