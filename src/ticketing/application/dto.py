"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TicketLineDTO:
    """Output: tickets of one type within a purchase."""

    ticket_type: str
    quantity: int
    unit_price: int
    line_total: int


@dataclass(frozen=True)
class PurchaseReceiptDTO:
    """Output: what was charged and reserved for a purchase."""

    account_id: int
    lines: list[TicketLineDTO]
    total_tickets: int
    total_amount: int
    total_seats: int


@dataclass(frozen=True)
class PriceDTO:
    ticket_type: str
    unit_price: int
    occupies_seat: bool
