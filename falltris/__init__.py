"""A falling-block puzzle game: block shapes, game rules, assets and a pygame front end."""

__version__ = "1.0.0"
__all__ = ["__version__"]