import pytest

from tomato.moves import BAD_MOVE, Move
from tomato.piece import PROMOTING, Piece
from tomato.square import Square


def test_normal_move_squares():
    m = Move.normal(Square.E2, Square.E4)
    assert m.from_square() is Square.E2
    assert m.to_square() is Square.E4
    assert not m.is_promotion()
    assert not m.is_castle()
    assert not m.is_en_passant()
    assert m.promote_type() is None


def test_normal_equality():
    assert Move.normal(Square.E2, Square.E4) == Move.normal(Square.E2, Square.E4)
    assert Move.normal(Square.E2, Square.E4) != Move.normal(Square.E4, Square.E2)


def test_normal_to_uci():
    assert Move.normal(Square.E2, Square.E4).to_uci() == "e2e4"
    assert Move.normal(Square.C8, Square.C1).to_uci() == "c8c1"


def test_promotion():
    m = Move.promoting(Square.B7, Square.B8, Piece.QUEEN)
    assert m.is_promotion()
    assert not m.is_castle()
    assert not m.is_en_passant()
    assert m.promote_type() is Piece.QUEEN
    assert m.from_square() is Square.B7
    assert m.to_square() is Square.B8
    assert m.to_uci() == "b7b8q"


@pytest.mark.parametrize("piece", PROMOTING)
def test_every_promotion_type_round_trips(piece):
    m = Move.promoting(Square.F7, Square.F8, piece)
    assert m.promote_type() is piece
    assert m.to_uci() == "f7f8" + piece.code().lower()


@pytest.mark.parametrize("piece", [Piece.PAWN, Piece.KING])
def test_bad_promotion_type(piece):
    with pytest.raises(ValueError):
        Move.promoting(Square.E7, Square.E8, piece)


def test_castling_flags():
    m = Move.castling(Square.E8, Square.C8)
    assert m.is_castle()
    assert not m.is_promotion()
    assert not m.is_en_passant()
    assert m.promote_type() is None
    assert m.to_uci() == "e8c8"
    assert m != Move.normal(Square.E8, Square.C8)


def test_en_passant_flags():
    m = Move.en_passant(Square.E5, Square.F6)
    assert m.is_en_passant()
    assert not m.is_castle()
    assert not m.is_promotion()
    assert m.promote_type() is None
    assert m.to_uci() == "e5f6"
    assert m != Move.normal(Square.E5, Square.F6)


def test_value_round_trip_all_squares():
    for from_sq in Square:
        for to_sq in Square:
            for m in (
                Move.normal(from_sq, to_sq),
                Move.castling(from_sq, to_sq),
                Move.en_passant(from_sq, to_sq),
                Move.promoting(from_sq, to_sq, Piece.ROOK),
            ):
                back = Move.from_val(m.value())
                assert back == m
                assert back.from_square() is from_sq
                assert back.to_square() is to_sq


def test_values_are_unique():
    values = {
        Move.normal(a, b).value() for a in Square for b in Square
    }
    assert len(values) == 64 * 64


def test_from_val_out_of_range():
    with pytest.raises(ValueError):
        Move.from_val(-1)
    with pytest.raises(ValueError):
        Move.from_val(0x10000)


def test_bad_move_sentinel():
    assert BAD_MOVE.value() == 0xFFFF
    assert BAD_MOVE.is_en_passant()
    assert BAD_MOVE != Move.normal(Square.H8, Square.H8)


def test_str_formats():
    assert str(Move.normal(Square.E2, Square.E4)) == "e2 -> e4"
    assert str(Move.promoting(Square.F7, Square.F8, Piece.QUEEN)) == "f7 -> f8 =Q"
    assert str(Move.en_passant(Square.E5, Square.F6)) == "e5 -> f6 [e.p.]"
    assert str(Move.castling(Square.E1, Square.G1)) == "e1 -> g1 [castle]"


def test_repr_formats():
    assert repr(Move.normal(Square.E2, Square.E4)) == "e2e4"
    assert repr(Move.promoting(Square.B7, Square.B8, Piece.KNIGHT)) == "b7b8N"
    assert repr(Move.en_passant(Square.B5, Square.C6)) == "b5c6 [e.p.]"
    assert repr(Move.castling(Square.E8, Square.C8)) == "e8c8 [castle]"


def test_moves_are_hashable():
    moves = {
        Move.normal(Square.E2, Square.E4),
        Move.normal(Square.E2, Square.E4),
        Move.castling(Square.E1, Square.G1),
    }
    assert len(moves) == 2


def test_moves_are_immutable():
    m = Move.normal(Square.E2, Square.E4)
    before = m.value()
    with pytest.raises(AttributeError):
        m.bits = 0
    assert m.value() == before
    assert m.to_uci() == "e2e4"