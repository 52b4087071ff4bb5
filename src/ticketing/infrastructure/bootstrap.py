"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ticketing.application.purchase_tickets import PurchaseTicketsHandler
from ticketing.infrastructure import settings
from ticketing.infrastructure.ledger.json_payment_charger import (
    JsonLedgerPaymentCharger,
)
from ticketing.infrastructure.ledger.json_seat_allocator import (
    JsonLedgerSeatAllocator,
)


def payment_charger() -> JsonLedgerPaymentCharger:
    return JsonLedgerPaymentCharger(settings.DATA_DIR / "payments.json")


def seat_allocator() -> JsonLedgerSeatAllocator:
    return JsonLedgerSeatAllocator(settings.DATA_DIR / "reservations.json")


def purchase_tickets_handler() -> PurchaseTicketsHandler:
    return PurchaseTicketsHandler(
        payment_charger=payment_charger(),
        seat_allocator=seat_allocator(),
    )
