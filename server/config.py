from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ENV_STATE_FILE = "CHECKERS_STATE_FILE"
ENV_COMPUTER_DELAY = "CHECKERS_COMPUTER_DELAY"
ENV_AI_SEED = "CHECKERS_AI_SEED"


@dataclass(frozen=True, slots=True)
class ServerSettings:
    """Runtime settings for the HTTP session.

    ``state_file`` of ``None`` keeps the saved game in memory only.
    """

    state_file: Optional[Path] = None
    computer_delay: float = 0.0
    ai_seed: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        env = os.environ if environ is None else environ
        state_file = env.get(ENV_STATE_FILE) or None
        seed = env.get(ENV_AI_SEED) or None
        try:
            delay = float(env.get(ENV_COMPUTER_DELAY, "0") or 0)
            ai_seed = int(seed) if seed is not None else None
        except ValueError as exc:
            raise ValueError(f"Invalid checkers server setting: {exc}") from exc
        return cls(
            state_file=Path(state_file) if state_file else None,
            computer_delay=max(0.0, delay),
            ai_seed=ai_seed,
        )
