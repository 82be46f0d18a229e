import pytest

from gridrun.board import Board
from gridrun.models import EventKind, Move, PieceKind, Side
from gridrun.rulesets import ChessModule
from tests.helpers import P, clear, ids_on, put


def test_initial_array(chess_board: Board):
    everything = chess_board.find_occupants(lambda o, p: True)
    assert len(everything) == 32
    whites = chess_board.find_occupants(lambda o, p: o.side == Side.WHITE)
    blacks = chess_board.find_occupants(lambda o, p: o.side == Side.BLACK)
    assert len(whites) == len(blacks) == 16
    assert all(pos.row >= 6 for _, pos in whites)
    assert all(pos.row <= 1 for _, pos in blacks)
    assert len(ids_on(chess_board)) == 32
    assert all(not o.has_moved for o, _ in everything)


def test_kings_on_centre_file(chess_board: Board):
    wk = chess_board.get_occupant(P(7, 4))
    bk = chess_board.get_occupant(P(0, 4))
    assert (wk.piece_kind, wk.side) == (PieceKind.KING, Side.WHITE)
    assert (bk.piece_kind, bk.side) == (PieceKind.KING, Side.BLACK)
    back = [chess_board.get_occupant(P(7, c)).piece_kind for c in range(8)]
    assert back == [
        PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
        PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
    ]


def test_too_small_board_is_rejected():
    with pytest.raises(ValueError):
        ChessModule().on_register(Board(8, 6))


def test_taller_board_keeps_sides_on_their_edges():
    board = Board(10, 8)
    ChessModule().on_register(board)
    assert board.get_occupant(P(9, 4)).piece_kind == PieceKind.KING
    assert board.get_occupant(P(8, 0)).piece_kind == PieceKind.PAWN
    assert ChessModule().get_valid_moves(board, P(8, 0)) == [P(7, 0), P(6, 0)]


# ----- pawns -----


def test_pawn_one_or_two_from_start(chess_board: Board, chess: ChessModule):
    moves = chess.get_valid_moves(chess_board, P(6, 4))
    assert moves == [P(5, 4), P(4, 4)]
    black = chess.get_valid_moves(chess_board, P(1, 4))
    assert black == [P(2, 4), P(3, 4)]


def test_pawn_loses_double_step_after_moving(chess_board: Board, chess: ChessModule):
    chess.on_move(chess_board, Move(src=P(6, 4), dst=P(4, 4)))
    assert chess.get_valid_moves(chess_board, P(4, 4)) == [P(3, 4)]


def test_pawn_single_step_also_drops_double(chess_board: Board, chess: ChessModule):
    chess.on_move(chess_board, Move(src=P(6, 0), dst=P(5, 0)))
    assert chess.get_valid_moves(chess_board, P(5, 0)) == [P(4, 0)]


def test_pawn_diagonal_only_onto_opponent(chess_board: Board, chess: ChessModule):
    chess.on_move(chess_board, Move(src=P(6, 4), dst=P(4, 4)))
    assert P(3, 3) not in chess.get_valid_moves(chess_board, P(4, 4))
    chess.on_move(chess_board, Move(src=P(1, 3), dst=P(3, 3)))
    moves = chess.get_valid_moves(chess_board, P(4, 4))
    assert P(3, 3) in moves
    assert P(3, 5) not in moves
    assert len(moves) == 2


def test_pawn_never_captures_own_side(board: Board, chess: ChessModule):
    put(board, 6, 4, PieceKind.PAWN, Side.WHITE)
    put(board, 5, 3, PieceKind.KNIGHT, Side.WHITE)
    assert P(5, 3) not in chess.get_valid_moves(board, P(6, 4))


def test_blocked_pawn(chess_board: Board, chess: ChessModule):
    put(chess_board, 5, 4, PieceKind.KNIGHT, Side.BLACK)
    assert chess.get_valid_moves(chess_board, P(6, 4)) == []
    chess_board.remove_occupant(P(5, 4))
    put(chess_board, 4, 4, PieceKind.KNIGHT, Side.BLACK)
    assert chess.get_valid_moves(chess_board, P(6, 4)) == [P(5, 4)]


# ----- sliders -----


def test_boxed_in_sliders_have_no_moves(chess_board: Board, chess: ChessModule):
    for col in (0, 2, 3, 5, 7):
        assert chess.get_valid_moves(chess_board, P(7, col)) == []


def test_removing_blocker_opens_rook(chess_board: Board, chess: ChessModule):
    chess_board.remove_occupant(P(6, 0))
    moves = chess.get_valid_moves(chess_board, P(7, 0))
    assert moves == [P(6, 0), P(5, 0), P(4, 0), P(3, 0), P(2, 0), P(1, 0)]


def test_removing_blocker_opens_bishop(chess_board: Board, chess: ChessModule):
    chess_board.remove_occupant(P(6, 3))
    moves = chess.get_valid_moves(chess_board, P(7, 2))
    assert moves == [P(6, 3), P(5, 4), P(4, 5), P(3, 6), P(2, 7)]


def test_removing_blocker_opens_queen(chess_board: Board, chess: ChessModule):
    chess_board.remove_occupant(P(6, 3))
    moves = chess.get_valid_moves(chess_board, P(7, 3))
    assert len(moves) == 6
    assert P(6, 3) in moves and P(1, 3) in moves
    assert P(0, 3) not in moves


def test_ray_stops_at_first_occupant(board: Board, chess: ChessModule):
    put(board, 4, 4, PieceKind.QUEEN, Side.WHITE)
    put(board, 4, 6, PieceKind.PAWN, Side.BLACK)
    put(board, 4, 7, PieceKind.PAWN, Side.BLACK)
    put(board, 2, 4, PieceKind.PAWN, Side.WHITE)
    moves = chess.get_valid_moves(board, P(4, 4))
    assert P(4, 5) in moves and P(4, 6) in moves
    assert P(4, 7) not in moves
    assert P(3, 4) in moves
    assert P(2, 4) not in moves and P(1, 4) not in moves
    assert len(moves) == 23


# ----- knights / kings -----


def test_knight_offsets(board: Board, chess: ChessModule):
    put(board, 4, 4, PieceKind.KNIGHT, Side.WHITE)
    assert len(chess.get_valid_moves(board, P(4, 4))) == 8
    put(board, 2, 3, PieceKind.PAWN, Side.WHITE)
    put(board, 2, 5, PieceKind.PAWN, Side.BLACK)
    moves = chess.get_valid_moves(board, P(4, 4))
    assert P(2, 3) not in moves and P(2, 5) in moves
    assert len(moves) == 7


def test_knight_in_corner(board: Board, chess: ChessModule):
    put(board, 0, 0, PieceKind.KNIGHT, Side.BLACK)
    assert sorted(chess.get_valid_moves(board, P(0, 0)), key=lambda p: (p.row, p.col)) == [P(1, 2), P(2, 1)]


def test_king_steps_without_check_concept(board: Board, chess: ChessModule):
    put(board, 4, 4, PieceKind.KING, Side.WHITE)
    put(board, 3, 3, PieceKind.PAWN, Side.WHITE)
    put(board, 0, 5, PieceKind.ROOK, Side.BLACK)  # attacks column 5
    moves = chess.get_valid_moves(board, P(4, 4))
    assert P(3, 3) not in moves
    assert P(3, 5) in moves and P(4, 5) in moves and P(5, 5) in moves
    assert len(moves) == 7


def test_initial_position_has_twenty_moves_per_side(chess_board: Board, chess: ChessModule):
    for side in (Side.WHITE, Side.BLACK):
        moves = chess.get_all_moves_for_side(chess_board, side)
        assert len(moves) == 20
        kinds = [chess_board.get_occupant(m.src).piece_kind for m in moves]
        assert kinds.count(PieceKind.PAWN) == 16
        assert kinds.count(PieceKind.KNIGHT) == 4


def test_all_moves_enumerated_row_major(chess_board: Board, chess: ChessModule):
    moves = chess.get_all_moves_for_side(chess_board, Side.WHITE)
    origins = [(m.src.row, m.src.col) for m in moves]
    assert origins == sorted(origins)
    assert moves[0] == Move(src=P(6, 0), dst=P(5, 0))
    assert moves[1] == Move(src=P(6, 0), dst=P(4, 0))


# ----- execution -----


def test_capture_emits_capture_then_move(chess_board: Board, chess: ChessModule):
    chess.on_move(chess_board, Move(src=P(6, 4), dst=P(4, 4)))
    chess.on_move(chess_board, Move(src=P(1, 3), dst=P(3, 3)))
    victim = chess_board.get_occupant(P(3, 3))
    attacker = chess_board.get_occupant(P(4, 4))
    events = chess.on_move(chess_board, Move(src=P(4, 4), dst=P(3, 3)))
    assert [e.kind for e in events] == [EventKind.PIECE_CAPTURED, EventKind.PIECE_MOVED]
    cap, mv = events
    assert cap.payload["captured"].id == victim.id
    assert cap.payload["captured_by"].id == attacker.id
    assert cap.payload["at"] == P(3, 3)
    assert mv.payload["piece"].id == attacker.id
    assert (mv.payload["src"], mv.payload["dst"]) == (P(4, 4), P(3, 3))
    assert set(mv.payload) == {"piece", "src", "dst"}
    assert set(cap.payload) == {"captured", "captured_by", "at"}
    assert victim.id not in ids_on(chess_board)
    assert chess_board.get_occupant(P(3, 3)) is attacker
    assert attacker.has_moved


def test_event_payload_is_a_snapshot(chess_board: Board, chess: ChessModule):
    events = chess.on_move(chess_board, Move(src=P(7, 1), dst=P(5, 2)))
    live = chess_board.get_occupant(P(5, 2))
    snap = events[0].payload["piece"]
    assert snap is not live and snap.id == live.id
    assert snap.has_moved is True
    live.piece_kind = PieceKind.QUEEN
    assert snap.piece_kind == PieceKind.KNIGHT


def test_on_move_ignores_unowned_and_illegal(chess_board: Board, chess: ChessModule):
    assert chess.on_move(chess_board, Move(src=P(4, 4), dst=P(3, 4))) == []
    assert chess.on_move(chess_board, Move(src=P(6, 4), dst=P(3, 4))) == []
    assert chess.on_move(chess_board, Move(src=P(7, 0), dst=P(6, 0))) == []
    assert chess_board.get_occupant(P(6, 4)).piece_kind == PieceKind.PAWN
    assert not chess_board.get_occupant(P(6, 4)).has_moved
    assert len(chess_board.find_occupants(lambda o, p: True)) == 32


def test_chess_leaves_foreign_occupants_alone(board: Board, chess: ChessModule):
    class Crate:
        category = "crate"
        side = "neutral"
        id = "crate_1"

    board.set_occupant(P(4, 4), Crate())
    assert chess.get_valid_moves(board, P(4, 4)) == []
    assert chess.on_move(board, Move(src=P(4, 4), dst=P(4, 5))) == []
    assert board.get_occupant(P(4, 4)).id == "crate_1"


# ----- win condition -----


def test_no_winner_with_both_kings(chess_board: Board, chess: ChessModule):
    assert chess.check_win_condition(chess_board) is None


def test_removed_king_decides(chess_board: Board, chess: ChessModule):
    chess_board.remove_occupant(P(7, 4))
    assert chess.check_win_condition(chess_board) == Side.BLACK


def test_captured_black_king_gives_white(board: Board, chess: ChessModule):
    put(board, 7, 4, PieceKind.KING, Side.WHITE)
    bk = put(board, 0, 4, PieceKind.KING, Side.BLACK)
    put(board, 3, 4, PieceKind.ROOK, Side.WHITE)
    assert chess.check_win_condition(board) is None
    events = chess.on_move(board, Move(src=P(3, 4), dst=P(0, 4)))
    assert events[0].payload["captured"].id == bk.id
    assert chess.check_win_condition(board) == Side.WHITE


def test_ids_unique_per_module_instance():
    board = Board(8, 8)
    chess = ChessModule()
    chess.on_register(board)
    first = ids_on(board)
    clear(board)
    chess.on_register(board)
    assert first.isdisjoint(ids_on(board))
