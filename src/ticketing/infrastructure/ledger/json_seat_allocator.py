"""SeatAllocator that records each reservation in a JSON ledger file."""

from __future__ import annotations

from pathlib import Path

import structlog

from ticketing.domain.gateway.seat_allocator import SeatAllocator
from ticketing.infrastructure.ledger.json_ledger import JsonLedger

logger = structlog.get_logger(__name__)


class JsonLedgerSeatAllocator(SeatAllocator):

    def __init__(self, file_path: Path) -> None:
        self._ledger = JsonLedger(file_path)

    def reserve(self, account_id: int, seat_count: int) -> None:
        self._ledger.append({"account_id": account_id, "seat_count": seat_count})
        logger.info("seats_recorded", account_id=account_id, seat_count=seat_count)

    def entries(self) -> list[dict]:
        return self._ledger.entries()
