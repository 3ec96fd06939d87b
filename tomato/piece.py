"""Piece types, which carry no colour or location."""

from __future__ import annotations

from enum import IntEnum

_CODES = "NBRQPK"


class Piece(IntEnum):
    """The type of a piece.

    The four well-behaved types come first, so that they are exactly the
    valid promotion types and fit in two bits.
    """

    KNIGHT = 0
    BISHOP = 1
    ROOK = 2
    QUEEN = 3
    PAWN = 4
    KING = 5

    def code(self) -> str:
        """Return the uppercase FEN code of this piece."""
        return _CODES[self.value]

    @classmethod
    def from_code(cls, c: str) -> Piece:
        """Return the piece for an uppercase FEN character."""
        if len(c) != 1 or c not in _CODES:
            raise ValueError(f"invalid piece code: {c!r}")
        return cls(_CODES.index(c))

    def __str__(self) -> str:
        return self.code()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


NUM_PIECES = len(Piece)

ALL_PIECES: tuple[Piece, ...] = tuple(Piece)

NON_PAWNS: tuple[Piece, ...] = tuple(p for p in Piece if p is not Piece.PAWN)

NON_KING: tuple[Piece, ...] = tuple(p for p in Piece if p is not Piece.KING)

PROMOTING: tuple[Piece, ...] = (Piece.KNIGHT, Piece.BISHOP, Piece.ROOK, Piece.QUEEN)