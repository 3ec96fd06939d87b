from itertools import combinations

import pytest

from tomato.piece import NUM_PIECES, Piece
from tomato.square import Square
from tomato.zobrist_low import low_square_keys


def _flat():
    return [key for square in low_square_keys() for pair in square for key in pair]


def test_covers_first_four_ranks():
    keys = low_square_keys()
    assert len(keys) == int(Square.H4) + 1


def test_each_square_has_a_pair_per_piece():
    for square in low_square_keys():
        assert len(square) == NUM_PIECES
        assert all(len(pair) == 2 for pair in square)


def test_keys_fit_in_64_bits_and_are_nonzero():
    assert all(0 < key < (1 << 64) for key in _flat())


def test_keys_are_pairwise_distinct():
    flat = _flat()
    assert len(set(flat)) == len(flat)


def test_no_three_keys_xor_to_zero():
    flat = _flat()
    key_set = set(flat)
    for a, b in combinations(flat, 2):
        assert a ^ b not in key_set


@pytest.mark.parametrize(
    "square, piece, color, expected",
    [
        (Square.A1, Piece.KNIGHT, 0, 0x7A8F_6F07_A994_160F),
        (Square.A1, Piece.KNIGHT, 1, 0x9697_1D2F_B6C9_117D),
        (Square.H4, Piece.KING, 1, 0x2B5C_94CD_2F46_1E31),
        (Square.B1, Piece.PAWN, 0, 0x1CAA_0ADE_A80E_8826),
    ],
)
def test_pinned_values(square, piece, color, expected):
    assert low_square_keys()[square][piece][color] == expected


def test_repeated_calls_agree():
    first = low_square_keys()
    second = low_square_keys()
    assert [list(map(list, sq)) for sq in first] == [list(map(list, sq)) for sq in second]
    assert second[0][0][0] == 0x7A8F_6F07_A994_160F