import pytest

from tomato.square import Square

EAST = 1
NORTHEAST = 9


def test_add_square_and_direction():
    a1 = Square.from_algebraic("a1")
    assert (a1 + EAST) is Square.from_algebraic("b1")
    assert (a1 + NORTHEAST) is Square.from_algebraic("b2")


def test_add_direction_and_square():
    assert (EAST + Square.from_algebraic("a1")) is Square.from_algebraic("b1")


def test_square_from_algebraic():
    assert Square.from_algebraic("e4") is Square.E4
    assert Square.from_algebraic("f7") is Square.F7


def test_file_distance_example():
    assert Square.A8.file_distance(Square.C1) == 2


def test_rank_distance_example():
    assert Square.A8.rank_distance(Square.C1) == 7


def test_opposite_example():
    assert Square.A1.opposite() is Square.A8


def test_file_name_example():
    assert Square.A1.file_name() == "a"
    assert Square.E4.file_name() == "e"


@pytest.mark.parametrize("sq", list(Square))
def test_algebraic_round_trip(sq):
    assert Square.from_algebraic(str(sq)) is sq


@pytest.mark.parametrize("sq", list(Square))
def test_new_round_trip(sq):
    assert Square.new(sq.rank(), sq.file()) is sq


@pytest.mark.parametrize(
    "name, mirrored",
    [("a1", "a8"), ("e4", "e5"), ("h8", "h1"), ("c6", "c3"), ("b2", "b7")],
)
def test_opposite_is_involution(name, mirrored):
    sq = Square.from_algebraic(name)
    assert sq.opposite() is Square.from_algebraic(mirrored)
    assert sq.opposite().opposite() is sq
    assert sq.opposite().file() == sq.file()


@pytest.mark.parametrize("bad", ["", "e", "e44", "i4", "E4", "e0", "e9", "ex"])
def test_from_algebraic_rejects(bad):
    with pytest.raises(ValueError):
        Square.from_algebraic(bad)


@pytest.mark.parametrize("rank, file", [(8, 0), (0, 8), (-1, 0), (0, -1)])
def test_new_rejects_out_of_range(rank, file):
    with pytest.raises(ValueError):
        Square.new(rank, file)


def test_chebyshev_is_max_of_distances():
    for a in Square:
        for b in (Square.A1, Square.E4, Square.H8, Square.C6):
            assert a.chebyshev_to(b) == max(a.rank_distance(b), a.file_distance(b))
            assert a.chebyshev_to(b) == b.chebyshev_to(a)


def test_sub_square_gives_offset_and_back():
    e2 = Square.from_algebraic("e2")
    e4 = Square.from_algebraic("e4")
    offset = e4 - e2
    assert offset == 16
    assert (e2 + offset) is e4
    assert (e4 - offset) is e2


def test_sub_direction():
    assert (Square.from_algebraic("b2") - NORTHEAST) is Square.from_algebraic("a1")


def test_from_lowest_bit():
    assert Square.from_lowest_bit(1 << Square.E4) is Square.E4
    assert Square.from_lowest_bit((1 << Square.H8) | (1 << Square.C3)) is Square.C3


def test_from_lowest_bit_empty():
    with pytest.raises(ValueError):
        Square.from_lowest_bit(0)


def test_format_uses_name():
    sq = Square.from_algebraic("e4")
    assert f"{sq}" == "e4"
    assert str(sq) == "e4"