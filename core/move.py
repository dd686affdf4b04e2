from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

Position = tuple[int, int]
CaptureSequence = tuple[Position, ...]


@dataclass(frozen=True, slots=True)
class Move:
    start: Position
    end: Position
    captures: CaptureSequence = ()

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)

    def as_path(self) -> tuple[Position, Position]:
        return (self.start, self.end)

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return connector.join(f"{row},{col}" for row, col in self.as_path())
