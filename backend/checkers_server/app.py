from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .schemas import BoardRequest, PlayerLabel, TurnRequest
from .session import GameSession


def create_app(session: GameSession | None = None) -> FastAPI:
    app = FastAPI(title="Checkers Rules Backend", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    session = session if session is not None else GameSession()

    def get_session() -> GameSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.put("/board")
    def load_board(payload: BoardRequest, session: GameSession = Depends(get_session)):
        try:
            return session.load(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/reset")
    def reset_board(session: GameSession = Depends(get_session)):
        return session.reset()

    @app.post("/turn")
    def change_turn(payload: TurnRequest, session: GameSession = Depends(get_session)):
        return session.set_turn(payload)

    @app.get("/moves")
    def read_moves(
        x: int = Query(..., ge=0, le=7),
        y: int = Query(..., ge=0, le=7),
        session: GameSession = Depends(get_session),
    ):
        try:
            return session.moves_at(x, y)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.get("/tables/usable")
    def read_usable():
        return GameSession.usable()

    @app.get("/tables/moves")
    def read_table_entry(
        x: int = Query(..., ge=0, le=7),
        y: int = Query(..., ge=0, le=7),
        player: PlayerLabel = Query("black"),
        king: bool = Query(False),
    ):
        try:
            return GameSession.table_entry(x, y, player, king)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    return app


app = create_app()
