from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkers.errors import (  # noqa: E402
    BoardFormatError,
    InvalidLengthError,
    InvalidSymbolError,
    OutOfBoundsError,
)
from checkers.game import BOARD_STRING_LENGTH, Game, parse  # noqa: E402
from checkers.geometry import USABLE, Pos  # noqa: E402
from checkers.pieces import (  # noqa: E402
    NO_PLAYER,
    OPPONENTS,
    PIECE_STRINGS,
    PLAYERS,
    STRING_PIECES,
    Piece,
    Player,
    parse_piece,
    piece_string,
)

EMPTY_BOARD = "|".join(["********"] * 8)


def _board(*rows: str) -> str:
    return "|".join(rows)


class SymbolMappingTests(unittest.TestCase):
    def test_bijection_over_five_symbols(self) -> None:
        self.assertEqual(set(STRING_PIECES), {"r", "b", "R", "B", "*"})
        for symbol, piece in STRING_PIECES.items():
            self.assertEqual(piece_string(piece), symbol)
        decoded = list(STRING_PIECES.values())
        self.assertEqual(len(set(decoded)), len(decoded))

    def test_player_symbols_round_trip(self) -> None:
        for player, symbol in PIECE_STRINGS.items():
            piece = STRING_PIECES[symbol]
            if player is NO_PLAYER:
                self.assertIsNone(piece)
            else:
                self.assertEqual(piece, Piece(player, False))

    def test_king_symbols_are_uppercase(self) -> None:
        self.assertEqual(piece_string(Piece(Player.RED, True)), "R")
        self.assertEqual(piece_string(Piece(Player.BLACK, True)), "B")
        self.assertEqual(piece_string(None), "*")

    def test_rejects_unknown_symbol(self) -> None:
        with self.assertRaises(InvalidSymbolError):
            parse_piece("q")
        with self.assertRaises(InvalidSymbolError):
            parse_piece("|")

    def test_opponents(self) -> None:
        self.assertIs(OPPONENTS[Player.BLACK], Player.RED)
        self.assertIs(OPPONENTS[Player.RED], Player.BLACK)
        self.assertNotIn(NO_PLAYER, OPPONENTS)
        self.assertIs(Player.RED.opponent, Player.BLACK)

    def test_players_by_name(self) -> None:
        self.assertIs(PLAYERS["black"], Player.BLACK)
        self.assertIs(PLAYERS["red"], Player.RED)


class SerializeTests(unittest.TestCase):
    def test_empty_board(self) -> None:
        game = Game.empty()
        self.assertEqual(str(game), EMPTY_BOARD)
        self.assertEqual(len(str(game)), BOARD_STRING_LENGTH)
        self.assertEqual(BOARD_STRING_LENGTH, 71)

    def test_pieces_rendered_by_owner_and_rank(self) -> None:
        game = Game({Pos(1, 0): Piece(Player.BLACK), Pos(6, 7): Piece(Player.RED, True)})
        text = str(game)
        self.assertEqual(text[:8], "*b******")
        self.assertEqual(text[-8:], "******R*")

    def test_standard_opening(self) -> None:
        game = Game.standard()
        self.assertEqual(
            str(game),
            _board(
                "*b*b*b*b",
                "b*b*b*b*",
                "*b*b*b*b",
                "********",
                "********",
                "r*r*r*r*",
                "*r*r*r*r",
                "r*r*r*r*",
            ),
        )
        self.assertTrue(all(pos in USABLE for pos in game.pieces))
        self.assertEqual(sum(1 for p in game.pieces.values() if p.player is Player.BLACK), 12)
        self.assertEqual(sum(1 for p in game.pieces.values() if p.player is Player.RED), 12)
        self.assertIs(game.turn, Player.BLACK)


class ParseTests(unittest.TestCase):
    def test_empty_board_parses_to_empty_map(self) -> None:
        game = parse(EMPTY_BOARD)
        self.assertEqual(game.pieces, {})
        self.assertIs(game.turn, Player.BLACK)
        self.assertEqual(str(game), EMPTY_BOARD)

    def test_red_king(self) -> None:
        rows = ["********"] * 8
        rows[3] = "**R*****"
        text = _board(*rows)
        game = parse(text)
        self.assertEqual(game.pieces, {Pos(2, 3): Piece(Player.RED, True)})
        self.assertTrue(game.piece_at(Pos(2, 3)))
        self.assertFalse(game.piece_at(Pos(3, 2)))
        self.assertEqual(str(game), text)

    def test_round_trip_mixed_board(self) -> None:
        text = _board(
            "*b*B****",
            "********",
            "***r****",
            "R*******",
            "*****b**",
            "******r*",
            "*B******",
            "********",
        )
        self.assertEqual(str(Game.parse(text)), text)

    def test_light_squares_are_accepted(self) -> None:
        text = _board("b*******", *(["********"] * 7))
        game = parse(text)
        self.assertEqual(game.get(Pos(0, 0)), Piece(Player.BLACK))
        self.assertEqual(str(game), text)

    def test_turn_is_always_black(self) -> None:
        self.assertIs(parse(str(Game.standard())).turn, Player.BLACK)

    def test_wrong_length(self) -> None:
        with self.assertRaises(InvalidLengthError) as ctx:
            parse(EMPTY_BOARD[:-1])
        self.assertEqual(ctx.exception.expected, 71)
        with self.assertRaises(InvalidLengthError):
            parse(EMPTY_BOARD + "*")
        with self.assertRaises(InvalidLengthError):
            parse("")

    def test_invalid_symbol(self) -> None:
        text = "q" + EMPTY_BOARD[1:]
        with self.assertRaises(InvalidSymbolError) as ctx:
            parse(text)
        self.assertEqual((ctx.exception.symbol, ctx.exception.x, ctx.exception.y), ("q", 0, 0))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_invalid_symbol_location(self) -> None:
        rows = ["********"] * 8
        rows[5] = "****x***"
        with self.assertRaises(InvalidSymbolError) as ctx:
            parse(_board(*rows))
        self.assertEqual((ctx.exception.x, ctx.exception.y), (4, 5))

    def test_misplaced_separator_is_out_of_bounds(self) -> None:
        text = "*********" + EMPTY_BOARD[9:]
        self.assertEqual(len(text), 71)
        with self.assertRaises(OutOfBoundsError):
            parse(text)

    def test_extra_separator_is_rejected(self) -> None:
        text = "*******|" + EMPTY_BOARD[8:]
        self.assertEqual(len(text), 71)
        with self.assertRaises(BoardFormatError):
            parse(text)


class GameTests(unittest.TestCase):
    def test_copy_is_independent(self) -> None:
        game = Game.standard()
        clone = game.copy()
        self.assertEqual(clone, game)
        clone.pieces.pop(Pos(1, 0))
        clone.turn = Player.RED
        self.assertIn(Pos(1, 0), game.pieces)
        self.assertIs(game.turn, Player.BLACK)
        self.assertNotEqual(clone, game)

    def test_get_missing_is_none(self) -> None:
        self.assertIsNone(Game.empty().get(Pos(1, 0)))


if __name__ == "__main__":
    unittest.main()
