"""A small platform game: level files, a player character, its movement rules and a pygame menu and game loop."""

__version__ = "0.1.0"