from itertools import combinations

import pytest

from tomato.piece import Piece
from tomato.square import Square
from tomato.zobrist import (
    BLACK_TO_MOVE_KEY,
    all_keys,
    castle_key,
    ep_key,
    square_key,
)


def test_square_key_values_from_table():
    assert square_key(Square.A1, Piece.KNIGHT, 0) == 0x7A8F_6F07_A994_160F
    assert square_key(Square.A1, Piece.KNIGHT, 1) == 0x9697_1D2F_B6C9_117D
    assert square_key(Square.A5, Piece.KNIGHT, 0) == 0xEF47_0310_0AE9_2078
    assert square_key(Square.H8, Piece.KING, 1) == 0xAAC5_EFF0_C18C_C487


def test_empty_square_has_zero_key():
    assert square_key(Square.E4, None, 0) == 0
    assert square_key(Square.E4, None, 1) == 0


def test_square_key_rejects_bad_colour():
    with pytest.raises(ValueError):
        square_key(Square.E4, Piece.PAWN, 2)


def test_castle_keys():
    assert castle_key(0) == 0xC794_9C1F_4870_8594
    assert castle_key(3) == 0xA2CB_0D86_5391_3E79
    with pytest.raises(ValueError):
        castle_key(4)


def test_ep_key_depends_only_on_file():
    assert ep_key(Square.A3) == 0xE3EA_BFC9_F768_DFE4
    assert ep_key(Square.E3) == 0xAED7_4C12_D7DC_5549
    assert ep_key(Square.E6) == ep_key(Square.E3)
    assert ep_key(Square.H6) == 0x93A6_73DF_A52C_8F98


def test_all_keys_layout():
    keys = all_keys()
    assert len(keys) == 64 * 6 * 2 + 4 + 8 + 1
    assert keys[-1] == BLACK_TO_MOVE_KEY
    assert keys[0] == square_key(Square.A1, Piece.KNIGHT, 0)
    assert keys[-13] == castle_key(0)


@pytest.fixture(scope="module")
def keys():
    return all_keys()


def test_independence_order_1(keys):
    assert min(keys) > 0
    assert max(keys) < 2**64


def test_independence_order_2(keys):
    assert len(set(keys)) == len(keys)


def test_independence_order_3(keys):
    key_set = set(keys)
    assert not any(a ^ b in key_set for a, b in combinations(keys, 2))