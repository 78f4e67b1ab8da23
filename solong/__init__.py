"""A tile-based puzzle game: collect everything, dodge the enemies, reach the exit."""

__version__ = "0.1.0"