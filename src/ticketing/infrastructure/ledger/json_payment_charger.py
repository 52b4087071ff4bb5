"""PaymentCharger that records each charge in a JSON ledger file."""

from __future__ import annotations

from pathlib import Path

import structlog

from ticketing.domain.gateway.payment_charger import PaymentCharger
from ticketing.infrastructure.ledger.json_ledger import JsonLedger

logger = structlog.get_logger(__name__)


class JsonLedgerPaymentCharger(PaymentCharger):

    def __init__(self, file_path: Path) -> None:
        self._ledger = JsonLedger(file_path)

    def charge(self, account_id: int, amount: int) -> None:
        self._ledger.append({"account_id": account_id, "amount": amount})
        logger.info("payment_recorded", account_id=account_id, amount=amount)

    def entries(self) -> list[dict]:
        return self._ledger.entries()
