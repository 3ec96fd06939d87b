"""Chess primitives: piece types, squares, packed moves and Zobrist hash keys."""

__version__ = "0.1.0"
__all__ = ["piece", "square", "moves", "zobrist", "zobrist_low", "zobrist_high"]