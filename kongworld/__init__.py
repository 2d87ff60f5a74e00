"""A small barrel-and-ladder arcade world whose actors report their actions on a shared screen."""

__version__ = "0.1.0"
__all__ = ["core", "enemies", "barrels", "obstacles", "character", "items", "game"]