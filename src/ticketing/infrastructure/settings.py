"""Runtime settings, read from the environment (or a ``.env`` file)."""

from __future__ import annotations

from pathlib import Path

from decouple import config

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

DATA_DIR: Path = config(
    "TICKETING_DATA_DIR", default=str(_PROJECT_ROOT / "data"), cast=Path
)
LOG_LEVEL: str = config("TICKETING_LOG_LEVEL", default="INFO").upper()
LOG_JSON: bool = config("TICKETING_LOG_JSON", default=False, cast=bool)
