"""Chess building blocks: squares, candidate moves and piece movement rules."""

__version__ = "0.1.0"
__all__ = ["board", "cli", "domain", "pieces"]