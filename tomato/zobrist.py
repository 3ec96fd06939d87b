"""Zobrist hash keys for the features of a board."""

from __future__ import annotations

from tomato.piece import Piece
from tomato.square import Square
from tomato.zobrist_high import high_square_keys
from tomato.zobrist_low import low_square_keys

BLACK_TO_MOVE_KEY = 0x3440_F9F4_6981_0C7B
"""The key toggled when black is the player to move."""

# 0: white kingside, 1: white queenside, 2: black kingside, 3: black queenside.
_CASTLE_KEYS: tuple[int, ...] = (
    0xC794_9C1F_4870_8594,
    0xDA98_0E92_2B5F_67F8,
    0xC67A_4EF3_3E3B_4C59,
    0xA2CB_0D86_5391_3E79,
)

# Indexed by the file of the en passant square.
_EP_KEYS: tuple[int, ...] = (
    0xE3EA_BFC9_F768_DFE4,
    0x310E_F8AD_E9F0_8FCB,
    0x54CF_E575_EF62_4331,
    0xA1C4_63F4_5C9E_614D,
    0xAED7_4C12_D7DC_5549,
    0xA85B_107D_2B3B_4D36,
    0xEA99_6334_C5A4_4D00,
    0x93A6_73DF_A52C_8F98,
)

_SQUARE_KEYS = low_square_keys() + high_square_keys()


def square_key(sq: Square, pt: Piece | None, color: int) -> int:
    """Return the key for a piece of a colour (0 white, 1 black) on a square.

    An empty square (``pt`` of None) has the key 0.
    """
    if pt is None:
        return 0
    color_index = int(color)
    if color_index not in (0, 1):
        raise ValueError(f"invalid colour: {color!r}")
    return _SQUARE_KEYS[int(Square(sq))][int(Piece(pt))][color_index]


def castle_key(right: int) -> int:
    """Return the key for a castling right.

    0 is white kingside, 1 white queenside, 2 black kingside, 3 black queenside.
    """
    if not 0 <= right < len(_CASTLE_KEYS):
        raise ValueError(f"invalid castling right: {right}")
    return _CASTLE_KEYS[right]


def ep_key(sq: Square) -> int:
    """Return the key for an en passant square, which depends only on its file."""
    return _EP_KEYS[Square(sq).file()]


def all_keys() -> list[int]:
    """Return every key: piece-square keys, then castling, en passant and side to move."""
    keys = [v for square in _SQUARE_KEYS for pair in square for v in pair]
    keys.extend(_CASTLE_KEYS)
    keys.extend(_EP_KEYS)
    keys.append(BLACK_TO_MOVE_KEY)
    return keys