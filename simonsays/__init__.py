"""A two-button Simon memory game: the game rules and a Tk window."""

__version__ = "1.0.0"
__all__ = ["__version__"]