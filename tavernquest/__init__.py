"""A tavern role-playing game: characters, turn-based combat and an item inventory."""

__version__ = "0.1.0"