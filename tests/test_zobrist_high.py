from tomato.piece import NUM_PIECES
from tomato.zobrist_high import high_square_keys


def test_covers_upper_half_of_board():
    keys = high_square_keys()
    assert len(keys) == 32
    assert all(len(square) == NUM_PIECES for square in keys)
    assert all(len(pair) == 2 for square in keys for pair in square)


def test_first_and_last_keys():
    keys = high_square_keys()
    assert keys[0][0][0] == 0xEF47_0310_0AE9_2078
    assert keys[-1][-1][-1] == 0xAAC5_EFF0_C18C_C487


def test_keys_are_nonzero_64_bit_values():
    values = [v for square in high_square_keys() for pair in square for v in pair]
    assert all(0 < v < 1 << 64 for v in values)


def test_keys_are_distinct():
    values = [v for square in high_square_keys() for pair in square for v in pair]
    assert len(set(values)) == len(values)


def test_repeated_calls_agree():
    first = high_square_keys()
    second = high_square_keys()
    assert [list(map(list, sq)) for sq in first] == [list(map(list, sq)) for sq in second]
    assert second[-1][-1][-1] == 0xAAC5_EFF0_C18C_C487