"""Moves: a from-square, a to-square, a promotion type and special flags."""

from __future__ import annotations

from dataclasses import dataclass

from tomato.piece import PROMOTING, Piece
from tomato.square import Square

# A move is packed into 16 bits. From the most significant bit down:
# 2 bits of flags, 2 bits of promote type, 6 bits of to-square and
# 6 bits of from-square.
_FLAG_MASK = 0xC000
_PROMOTE_FLAG = 0x4000
_CASTLE_FLAG = 0x8000
_EN_PASSANT_FLAG = 0xC000
_MAX_VALUE = 0xFFFF


@dataclass(frozen=True)
class Move:
    """One move, packed into a single 16-bit integer."""

    bits: int

    @classmethod
    def normal(cls, from_square: Square, to_square: Square) -> Move:
        """Create a move with no promotion and no special flags."""
        return cls((int(to_square) << 6) | int(from_square))

    @classmethod
    def promoting(
        cls, from_square: Square, to_square: Square, promote_type: Piece
    ) -> Move:
        """Create a promotion to a knight, bishop, rook or queen."""
        if promote_type not in PROMOTING:
            raise ValueError(f"cannot promote to {promote_type!r}")
        base = cls.normal(from_square, to_square).bits
        return cls(base | (int(promote_type) << 12) | _PROMOTE_FLAG)

    @classmethod
    def castling(cls, from_square: Square, to_square: Square) -> Move:
        """Create a move tagged as a castle."""
        return cls(cls.normal(from_square, to_square).bits | _CASTLE_FLAG)

    @classmethod
    def en_passant(cls, from_square: Square, to_square: Square) -> Move:
        """Create a move tagged as an en passant capture."""
        return cls(cls.normal(from_square, to_square).bits | _EN_PASSANT_FLAG)

    def to_square(self) -> Square:
        """Return the square the piece lands on."""
        return Square((self.bits >> 6) & 63)

    def from_square(self) -> Square:
        """Return the square the piece moves from."""
        return Square(self.bits & 63)

    def is_promotion(self) -> bool:
        """Return whether this move is marked as a promotion."""
        return self.bits & _FLAG_MASK == _PROMOTE_FLAG

    def is_castle(self) -> bool:
        """Return whether this move is marked as a castle."""
        return self.bits & _FLAG_MASK == _CASTLE_FLAG

    def is_en_passant(self) -> bool:
        """Return whether this move is marked as an en passant capture."""
        return self.bits & _FLAG_MASK == _EN_PASSANT_FLAG

    def promote_type(self) -> Piece | None:
        """Return the promotion type, or None if this is not a promotion."""
        if self.is_promotion():
            return Piece((self.bits >> 12) & 3)
        return None

    def to_uci(self) -> str:
        """Return the UCI text of this move, such as ``e2e4`` or ``b7b8q``."""
        text = f"{self.from_square()}{self.to_square()}"
        promote = self.promote_type()
        if promote is not None:
            text += promote.code().lower()
        return text

    def value(self) -> int:
        """Return a number that identifies this move uniquely."""
        return self.bits

    @classmethod
    def from_val(cls, val: int) -> Move:
        """Rebuild a move from a number returned by ``value()``."""
        if not 0 <= val <= _MAX_VALUE:
            raise ValueError(f"move value {val} is out of range")
        return cls(val)

    def _flag_suffix(self) -> str:
        if self.is_en_passant():
            return " [e.p.]"
        if self.is_castle():
            return " [castle]"
        return ""

    def __str__(self) -> str:
        text = f"{self.from_square()} -> {self.to_square()}"
        promote = self.promote_type()
        if promote is not None:
            text += f" ={promote}"
        return text + self._flag_suffix()

    def __repr__(self) -> str:
        text = f"{self.from_square()}{self.to_square()}"
        promote = self.promote_type()
        if promote is not None:
            text += promote.code()
        return text + self._flag_suffix()


BAD_MOVE = Move(_MAX_VALUE)
"""A sentinel for a move that is illegal or cannot be expressed."""