"""Rules engine for the Coup card game: a game, its players and their roles."""

__version__ = "0.1.0"