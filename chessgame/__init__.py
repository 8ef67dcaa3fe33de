"""Chess board model: the starting position and per-piece move generation."""

__version__ = "0.1.0"
__all__ = ["board", "pieces"]