from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from .engine.auto_opponent import opponent_autoplay
from .engine.session import GameSession, new_chess_session
from .engine.store import MemoryStore
from .logging_listeners import configure_logging
from .models.api import (
    CreateSessionRequest,
    EventLogResponse,
    MoveRequest,
    MoveResponse,
    SessionView,
    TileView,
    ValidMovesResponse,
)
from .models.primitives import Move, Position
from .progression import RunState

configure_logging()
app = FastAPI(title="gridrun")
sessions: MemoryStore[GameSession] = MemoryStore()
runs: MemoryStore[RunState] = MemoryStore()


def _occupant_view(occ: Any) -> dict[str, Any] | None:
    if occ is None:
        return None
    if isinstance(occ, BaseModel):
        return occ.model_dump(mode="json")
    return {
        "category": getattr(occ.category, "value", occ.category),
        "side": getattr(occ.side, "value", occ.side),
        "id": occ.id,
    }


def _view(sess: GameSession) -> SessionView:
    orch = sess.orchestrator
    board = orch.board
    grid = [
        [
            TileView(
                category=getattr(t.category, "value", t.category),
                revealed=t.revealed,
                occupant=_occupant_view(t.occupant),
            )
            for t in (board.get_tile(Position(row=r, col=c)) for c in range(board.cols))
        ]
        for r in range(board.rows)
    ]
    return SessionView(
        id=sess.id,
        rows=board.rows,
        cols=board.cols,
        current_side=orch.current_side,
        turn=orch.turn,
        winner=orch.check_win_condition(),
        player_side=sess.player_side,
        opponent=sess.opponent,
        run_id=sess.run_id,
        node_id=sess.node_id,
        board=grid,
    )


def _session(sid: str) -> GameSession:
    sess = sessions.get(sid)
    if not sess:
        raise HTTPException(404, "session not found")
    return sess


def _run(rid: str) -> RunState:
    run = runs.get(rid)
    if not run:
        raise HTTPException(404, "run not found")
    return run


def _advance(sess: GameSession) -> Move | None:
    """Begin the next turn; the computer plays its side through first."""
    orch = sess.orchestrator
    reply = None
    if sess.opponent and orch.current_side != sess.player_side:
        reply = opponent_autoplay(orch, orch.current_side, sess.rng)
    if orch.check_win_condition() is None:
        orch.start_turn()
    return reply


def _resolve_run(sess: GameSession) -> None:
    if not sess.run_id:
        return
    run = runs.get(sess.run_id)
    if not run:
        return
    with run.lock:
        if run.current_node_id == sess.node_id:
            run.resolve_encounter(sess.orchestrator.check_win_condition(), sess.player_side)


@app.get("/health")
def health() -> dict[str, Any]:
    return {"ok": True, "sessions": len(sessions), "runs": len(runs)}


# ----- sessions -----


@app.post("/sessions", response_model=SessionView)
def create_session(req: CreateSessionRequest):
    sess = new_chess_session(
        req.rows,
        req.cols,
        player_side=req.player_side,
        opponent=req.opponent,
        seed=req.seed,
    )
    _advance(sess)
    sessions.set(sess.id, sess)
    return _view(sess)


@app.get("/sessions/{sid}", response_model=SessionView)
def get_session(sid: str):
    return _view(_session(sid))


@app.get("/sessions/{sid}/moves", response_model=ValidMovesResponse)
def valid_moves(sid: str, row: int = Query(...), col: int = Query(...)):
    sess = _session(sid)
    src = Position(row=row, col=col)
    return ValidMovesResponse(src=src, destinations=sess.orchestrator.get_valid_moves(src))


@app.post("/sessions/{sid}/move", response_model=MoveResponse)
def apply_move(sid: str, req: MoveRequest):
    sess = _session(sid)
    move = req.move
    with sess.lock:
        orch = sess.orchestrator
        if orch.check_win_condition() is not None:
            raise HTTPException(409, "game is already decided")
        occ = orch.board.get_occupant(move.src)
        if occ is None or occ.side != orch.current_side:
            raise HTTPException(409, f"no {orch.current_side.value} piece at source")
        if sess.opponent and orch.current_side != sess.player_side:
            raise HTTPException(409, "not the player's turn")
        if move.dst not in orch.get_valid_moves(move.src):
            raise HTTPException(400, "illegal destination")

        events = orch.execute_move(move)
        orch.end_turn()
        reply = _advance(sess)
        _resolve_run(sess)
        return MoveResponse(events=events, opponent_move=reply, session=_view(sess))


@app.get("/sessions/{sid}/log", response_model=EventLogResponse)
def get_event_log(sid: str, limit: int | None = Query(None, ge=1, le=10000)):
    log = list(_session(sid).orchestrator.get_event_log())
    return EventLogResponse(events=log[-limit:] if limit else log)


# ----- runs -----


@app.post("/runs", response_model=RunState)
def create_run():
    run = RunState.new_run()
    runs.set(run.id, run)
    return run


@app.get("/runs/{rid}", response_model=RunState)
def get_run(rid: str):
    return _run(rid)


@app.post("/runs/{rid}/nodes/{nid}/enter", response_model=SessionView)
def enter_node(rid: str, nid: str, req: CreateSessionRequest | None = None):
    run = _run(rid)
    if run.node_map.get_node(nid) is None:
        raise HTTPException(404, "node not found")
    with run.lock:
        if run.current_node_id is not None:
            raise HTTPException(409, "another node is active")
        if not run.enter_node(nid):
            raise HTTPException(409, "node is not available")
    req = req or CreateSessionRequest(opponent=True)
    sess = new_chess_session(
        req.rows,
        req.cols,
        player_side=req.player_side,
        opponent=req.opponent,
        run_id=run.id,
        node_id=nid,
        seed=req.seed,
    )
    _advance(sess)
    sessions.set(sess.id, sess)
    return _view(sess)


@app.post("/runs/{rid}/abandon", response_model=RunState)
def abandon_node(rid: str):
    run = _run(rid)
    with run.lock:
        if not run.abandon_current_node():
            raise HTTPException(409, "no active node")
    return run
