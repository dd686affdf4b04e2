from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .config import ServerSettings
from .schemas import NewGameRequest, SquareRequest
from .session import GameSession


def create_app(settings: Optional[ServerSettings] = None, session: Optional[GameSession] = None) -> FastAPI:
    app = FastAPI(title="Checkers Backend", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    if session is None:
        session = GameSession(settings or ServerSettings.from_env())

    def get_session() -> GameSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.get("/valid-moves")
    def read_valid_moves(
        row: int = Query(..., ge=0, le=7),
        col: int = Query(..., ge=0, le=7),
        session: GameSession = Depends(get_session),
    ):
        try:
            return session.get_valid_moves(row, col)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/select")
    def select_piece(payload: SquareRequest, session: GameSession = Depends(get_session)):
        try:
            return session.select(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/deselect")
    def deselect_piece(session: GameSession = Depends(get_session)):
        return session.deselect()

    @app.post("/move")
    def play_move(payload: SquareRequest, session: GameSession = Depends(get_session)):
        try:
            return session.move(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/ai-move")
    def ai_move(session: GameSession = Depends(get_session)):
        try:
            return session.run_ai_move()
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    @app.post("/new-game")
    def new_game(payload: Optional[NewGameRequest] = None, session: GameSession = Depends(get_session)):
        return session.new_game(payload)

    return app


app = create_app()
