"""Squares, the 64 positions on a board."""

from __future__ import annotations

from enum import IntEnum

_FILES = "abcdefgh"
_DIGITS = "0123456789"


class Square(IntEnum):
    """One of the 64 squares; the value is ``rank * 8 + file``."""

    A1 = 0
    B1 = 1
    C1 = 2
    D1 = 3
    E1 = 4
    F1 = 5
    G1 = 6
    H1 = 7
    A2 = 8
    B2 = 9
    C2 = 10
    D2 = 11
    E2 = 12
    F2 = 13
    G2 = 14
    H2 = 15
    A3 = 16
    B3 = 17
    C3 = 18
    D3 = 19
    E3 = 20
    F3 = 21
    G3 = 22
    H3 = 23
    A4 = 24
    B4 = 25
    C4 = 26
    D4 = 27
    E4 = 28
    F4 = 29
    G4 = 30
    H4 = 31
    A5 = 32
    B5 = 33
    C5 = 34
    D5 = 35
    E5 = 36
    F5 = 37
    G5 = 38
    H5 = 39
    A6 = 40
    B6 = 41
    C6 = 42
    D6 = 43
    E6 = 44
    F6 = 45
    G6 = 46
    H6 = 47
    A7 = 48
    B7 = 49
    C7 = 50
    D7 = 51
    E7 = 52
    F7 = 53
    G7 = 54
    H7 = 55
    A8 = 56
    B8 = 57
    C8 = 58
    D8 = 59
    E8 = 60
    F8 = 61
    G8 = 62
    H8 = 63

    @classmethod
    def new(cls, rank: int, file: int) -> Square:
        """Create a square from a rank (0-7) and a file (0-7, A to H)."""
        if not (0 <= rank < 8 and 0 <= file < 8):
            raise ValueError(f"rank {rank} and file {file} are not on the board")
        return cls((rank << 3) | file)

    def rank(self) -> int:
        """Return the rank index (0 for rank 1)."""
        return self.value >> 3

    def file(self) -> int:
        """Return the file index (0 for file A)."""
        return self.value & 7

    def chebyshev_to(self, rhs: Square) -> int:
        """Return the Chebyshev (king-move) distance to another square."""
        return max(self.rank_distance(rhs), self.file_distance(rhs))

    def file_distance(self, rhs: Square) -> int:
        """Return the number of files between the two squares."""
        return abs(rhs.file() - self.file())

    def rank_distance(self, rhs: Square) -> int:
        """Return the number of ranks between the two squares."""
        return abs(rhs.rank() - self.rank())

    def opposite(self) -> Square:
        """Return this square as seen from the opposing player's side."""
        return Square(self.value ^ 56)

    @classmethod
    def from_algebraic(cls, s: str) -> Square:
        """Parse a lowercase algebraic square name such as ``e7``."""
        if len(s) != 2:
            raise ValueError("square name must be 2 characters")
        file_char, rank_char = s
        if file_char not in _FILES:
            raise ValueError("illegal file for square")
        if rank_char not in _DIGITS:
            raise ValueError("expected number for square rank")
        rank = int(rank_char)
        if not 1 <= rank <= 8:
            raise ValueError("bad rank name")
        return cls.new(rank - 1, _FILES.index(file_char))

    @classmethod
    def from_lowest_bit(cls, bits: int) -> Square:
        """Return the square of the lowest set bit of a 64-bit board mask."""
        bits &= (1 << 64) - 1
        if bits == 0:
            raise ValueError("cannot take a square from an empty bitboard")
        return cls((bits & -bits).bit_length() - 1)

    def file_name(self) -> str:
        """Return the letter of this square's file."""
        return _FILES[self.file()]

    def __add__(self, offset: int) -> Square:
        """Step by a direction offset, wrapping within the board."""
        if isinstance(offset, Square) or not isinstance(offset, int):
            return NotImplemented
        return Square((self.value + offset) & 63)

    __radd__ = __add__

    def __sub__(self, other):
        """Square minus square gives an offset; square minus offset gives a square."""
        if isinstance(other, Square):
            return self.value - other.value
        if isinstance(other, int):
            return Square((self.value - other) & 63)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.file_name()}{self.rank() + 1}"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)