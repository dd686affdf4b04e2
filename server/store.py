from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from core.game import GameSnapshot

from .schemas import SavedGame
from .serializers import saved_to_snapshot, snapshot_to_saved

logger = logging.getLogger(__name__)


class GameStore:
    """Keeps the last saved game as JSON text in memory."""

    def __init__(self) -> None:
        self._payload: Optional[str] = None

    def save(self, snapshot: GameSnapshot) -> None:
        self._write(snapshot_to_saved(snapshot).model_dump_json())

    def load(self) -> Optional[GameSnapshot]:
        payload = self._read()
        if payload is None:
            return None
        try:
            saved = SavedGame.model_validate_json(payload)
        except ValidationError as exc:
            logger.warning("Ignoring saved game that does not match the schema: %s", exc)
            return None
        return saved_to_snapshot(saved)

    def clear(self) -> None:
        self._payload = None

    def _write(self, payload: str) -> None:
        self._payload = payload

    def _read(self) -> Optional[str]:
        return self._payload


class JsonFileGameStore(GameStore):
    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = Path(path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    def _write(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        tmp_path.replace(self.path)

    def _read(self) -> Optional[str]:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Could not read saved game from %s: %s", self.path, exc)
            return None
