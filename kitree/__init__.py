"""File-tree explorer widget that draws into character-cell terminal buffers."""

__version__ = "0.1.0"