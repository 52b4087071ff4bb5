"""Append-only JSON list file used by the ledger gateways.

The file is created on the first append, so a rejected purchase leaves
nothing behind.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path


class JsonLedger:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def append(self, record: dict) -> dict:
        """Stamp *record* with the current UTC time and append it."""
        entry = {**record, "recorded_at": datetime.now(timezone.utc).isoformat()}
        records = self.entries()
        records.append(entry)
        self._persist_raw(records)
        return entry

    def entries(self) -> list[dict]:
        if not self._file_path.exists():
            return []
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    # --- File helpers ---------------------------------------------------------

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )
