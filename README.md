# tomato

Building blocks for a chess engine, in pure Python with no third-party
dependencies.

## Modules

- `tomato.piece`
  - `Piece`: an `IntEnum` of the six piece types. Knight, bishop, rook and
    queen come first (values 0 to 3), then pawn (4) and king (5).
  - `Piece.code()` gives the uppercase FEN letter. `Piece.from_code(c)`
    parses one and raises `ValueError` for anything else. `str(piece)` is
    the code.
  - The constants `NUM_PIECES`, `ALL_PIECES`, `NON_PAWNS`, `NON_KING` and
    `PROMOTING` are also defined here.
- `tomato.square`
  - `Square`: an `IntEnum` of the 64 squares `A1` to `H8`. The value of a
    square is `rank * 8 + file`.
  - `Square.new(rank, file)` builds a square from 0-based indices.
  - `rank()`, `file()` and `file_name()` describe a square.
  - `rank_distance()`, `file_distance()` and `chebyshev_to()` measure
    distances between squares.
  - `opposite()` mirrors a square across the board's middle.
  - `Square.from_algebraic("e4")` parses a lowercase name, and `str(sq)`
    turns a square back into one.
  - `Square.from_lowest_bit(bits)` gives the square of the lowest set bit of
    a 64-bit mask.
  - A square plus or minus an integer offset gives a square, wrapped to the
    board. One square minus another gives the integer offset between them.
- `tomato.moves`
  - `Move`: a frozen dataclass that holds one move packed into 16 bits.
  - The constructors are `Move.normal`, `Move.promoting` (knight, bishop,
    rook or queen only), `Move.castling` and `Move.en_passant`.
  - Queries: `from_square()`, `to_square()`, `is_promotion()`,
    `is_castle()`, `is_en_passant()` and `promote_type()`.
  - `to_uci()` gives the UCI text, such as `e2e4` or `b7b8q`.
  - `value()` and `Move.from_val()` convert a move to and from its integer
    form.
  - `BAD_MOVE` is the sentinel value `0xFFFF`.
- `tomato.zobrist`
  - Fixed 64-bit hashing keys: `square_key(sq, pt, color)` (colour 0 for
    white, 1 for black; a `pt` of `None` gives 0), `castle_key(right)` for
    rights 0 to 3, `ep_key(sq)` (which depends on the file only) and
    `BLACK_TO_MOVE_KEY`.
  - `all_keys()` lists every key.
  - The piece-square tables are stored in `tomato.zobrist_low` (ranks 1 to 4)
    and `tomato.zobrist_high` (ranks 5 to 8).

## Installation

```
pip install .
```

To also install what the test suite needs:

```
pip install .[test]
```

## Usage

```python
from tomato.piece import Piece
from tomato.square import Square
from tomato.moves import Move
from tomato import zobrist

sq = Square.from_algebraic("e4")
print(sq.rank(), sq.file(), sq.file_name())  # 3 4 e
print(Square.A1.opposite())                  # a8

m = Move.promoting(Square.B7, Square.B8, Piece.QUEEN)
print(m.to_uci())                            # b7b8q
print(m.is_promotion(), m.promote_type())    # True Q
assert Move.from_val(m.value()) == m

key = zobrist.square_key(Square.E4, Piece.PAWN, 0)
key ^= zobrist.castle_key(0) ^ zobrist.ep_key(Square.E3)
```

## What this package does not do

The package has no board or position type and no FEN parsing. It does not
generate moves or check whether a move is legal. It has no search or
evaluation, and no UCI command loop or command-line program. As a result,
moves cannot be read from or written in standard algebraic notation such as
`Nf3`, and a UCI string cannot be parsed back into a `Move`. A `Move` is only
written out with `to_uci()`.

## Running the tests

```
pytest
```