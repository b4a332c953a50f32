"""Observer-driven menu and widget toolkit for a pygame tower-defence game."""

__version__ = "0.1.0"
__all__ = ["observer", "game", "widgets", "button"]