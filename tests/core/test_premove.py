"""Tests for geometric premove destinations."""

import pytest

from touchboard.core.enums import Color
from touchboard.core.piece import Piece
from touchboard.core.placement import placement_from_fen
from touchboard.core.premove import premove_dests, rook_files_of
from touchboard.core.types import ALL_SQUARES, Square, parse_square


def _sqs(*names: str) -> frozenset[Square]:
    return frozenset(parse_square(n) for n in names)


def _alone(char: str, name: str) -> dict[Square, Piece]:
    return {parse_square(name): Piece.from_char(char)}


# ── General ──────────────────────────────────────────────────────────────────


class TestGeneral:
    def test_empty_square_gives_nothing(self) -> None:
        assert premove_dests({}, parse_square("e4"), True) == frozenset()

    @pytest.mark.parametrize("char", list("PNBRQKpnbrqk"))
    def test_origin_never_included(self, char: str) -> None:
        for sq in ALL_SQUARES:
            assert sq not in premove_dests({sq: Piece.from_char(char)}, sq, True)

    def test_occupancy_ignored(self) -> None:
        # a rook boxed in by its own pawns still "reaches" the whole file/rank
        pieces = placement_from_fen("8/8/8/8/8/8/PP6/RN6")
        dests = premove_dests(pieces, parse_square("a1"), False)
        assert len(dests) == 14
        assert parse_square("a2") in dests
        assert parse_square("b1") in dests


# ── Pieces ───────────────────────────────────────────────────────────────────


class TestPawn:
    def test_white_double_step_from_second_rank(self) -> None:
        assert premove_dests(_alone("P", "d2"), parse_square("d2"), False) == _sqs(
            "c3", "d3", "e3", "d4"
        )

    def test_white_pawn_on_edge_file(self) -> None:
        assert premove_dests(_alone("P", "a2"), parse_square("a2"), True) == _sqs(
            "a3", "b3", "a4"
        )

    def test_white_double_step_from_first_rank(self) -> None:
        # Horde pawns start on the first rank
        dests = premove_dests(_alone("P", "e1"), parse_square("e1"), False)
        assert parse_square("e3") in dests

    def test_white_no_double_step_later(self) -> None:
        dests = premove_dests(_alone("P", "e3"), parse_square("e3"), False)
        assert dests == _sqs("d4", "e4", "f4")

    def test_black_mirrored(self) -> None:
        assert premove_dests(_alone("p", "e7"), parse_square("e7"), False) == _sqs(
            "d6", "e6", "f6", "e5"
        )
        assert parse_square("e6") in premove_dests(
            _alone("p", "e8"), parse_square("e8"), False
        )
        assert premove_dests(_alone("p", "e6"), parse_square("e6"), False) == _sqs(
            "d5", "e5", "f5"
        )

    def test_no_backward_moves(self) -> None:
        dests = premove_dests(_alone("P", "e4"), parse_square("e4"), False)
        assert all(sq.rank == 5 for sq in dests)


class TestKnight:
    def test_corner(self) -> None:
        assert premove_dests(_alone("N", "a1"), parse_square("a1"), False) == _sqs(
            "b3", "c2"
        )

    def test_centre(self) -> None:
        assert len(premove_dests(_alone("n", "d4"), parse_square("d4"), False)) == 8

    def test_symmetry(self) -> None:
        for a in ALL_SQUARES:
            for b in premove_dests(_alone("N", a.name), a, False):
                assert a in premove_dests(_alone("N", b.name), b, False)


class TestSliders:
    def test_corner_rook(self) -> None:
        assert len(premove_dests(_alone("R", "a1"), parse_square("a1"), False)) == 14

    def test_corner_bishop(self) -> None:
        dests = premove_dests(_alone("B", "h1"), parse_square("h1"), False)
        assert len(dests) == 7
        assert parse_square("a8") in dests

    def test_central_queen(self) -> None:
        assert len(premove_dests(_alone("Q", "d4"), parse_square("d4"), False)) == 27

    def test_edge_queen(self) -> None:
        assert len(premove_dests(_alone("Q", "a1"), parse_square("a1"), False)) == 21

    @pytest.mark.parametrize("name", ["a1", "d4", "e5", "h8", "c7"])
    def test_rook_always_fourteen(self, name: str) -> None:
        assert len(premove_dests(_alone("r", name), parse_square(name), False)) == 14

    def test_queen_is_rook_plus_bishop(self) -> None:
        sq = parse_square("c6")
        queen = premove_dests(_alone("Q", "c6"), sq, False)
        rook = premove_dests(_alone("R", "c6"), sq, False)
        bishop = premove_dests(_alone("B", "c6"), sq, False)
        assert queen == rook | bishop


class TestKing:
    def test_standard_castling_targets(self) -> None:
        pieces = placement_from_fen("8/8/8/8/8/8/8/R3K2R")
        dests = premove_dests(pieces, parse_square("e1"), True)
        assert _sqs("d1", "d2", "e2", "f2", "f1") <= dests
        assert _sqs("c1", "g1") <= dests
        # stepping onto its own rooks signals castling too
        assert _sqs("a1", "h1") <= dests
        assert parse_square("b1") not in dests

    def test_no_castling_when_disallowed(self) -> None:
        pieces = placement_from_fen("8/8/8/8/8/8/8/R3K2R")
        assert premove_dests(pieces, parse_square("e1"), False) == _sqs(
            "d1", "d2", "e2", "f2", "f1"
        )

    def test_black_castles_on_eighth_rank(self) -> None:
        pieces = placement_from_fen("r3k2r/8/8/8/8/8/8/8")
        dests = premove_dests(pieces, parse_square("e8"), True)
        assert _sqs("c8", "g8", "a8", "h8") <= dests
        assert parse_square("c1") not in dests

    def test_chess960_rook_files(self) -> None:
        pieces = placement_from_fen("8/8/8/8/8/8/8/1R2K1R1")
        dests = premove_dests(pieces, parse_square("e1"), True)
        assert _sqs("b1", "g1", "c1") <= dests

    def test_off_back_rank_only_adjacent(self) -> None:
        pieces = {
            parse_square("e2"): Piece.from_char("K"),
            parse_square("a2"): Piece.from_char("R"),
        }
        assert len(premove_dests(pieces, parse_square("e2"), True)) == 8

    def test_other_colours_rooks_ignored(self) -> None:
        pieces = placement_from_fen("8/8/8/8/8/8/8/r3K3")
        assert parse_square("a1") not in premove_dests(
            pieces, parse_square("e1"), True
        )


def test_rook_files_of() -> None:
    pieces = placement_from_fen("r6r/8/8/8/8/8/R7/1R2K1R1")
    assert rook_files_of(pieces, Color.WHITE) == frozenset({1, 2, 7})
    assert rook_files_of(pieces, Color.BLACK) == frozenset({1, 8})
    assert rook_files_of({}, Color.WHITE) == frozenset()
