from __future__ import annotations

from fastapi.testclient import TestClient


def pos(row: int, col: int) -> dict:
    return {"row": row, "col": col}


def create_session(client: TestClient, **body) -> dict:
    r = client.post("/sessions", json=body)
    assert r.status_code == 200, r.text
    return r.json()


def move(client: TestClient, sid: str, src: tuple[int, int], dst: tuple[int, int]):
    return client.post(
        f"/sessions/{sid}/move",
        json={"move": {"src": pos(*src), "dst": pos(*dst)}},
    )


def occupant(sess: dict, row: int, col: int) -> dict | None:
    return sess["board"][row][col]["occupant"]
