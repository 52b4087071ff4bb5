"""Ticket categories and their fixed prices."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from ticketing.domain.exceptions import ValidationError


class TicketType(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def unit_price(self) -> int:
        return TICKET_PRICES[self]

    @property
    def occupies_seat(self) -> bool:
        # Infants sit on an adult's lap.
        return self is not TicketType.INFANT

    @staticmethod
    def parse(name: str) -> TicketType:
        """Resolve a case-insensitive name such as ``"adult"``."""
        try:
            return TicketType(name.strip().upper())
        except (AttributeError, ValueError) as exc:
            raise ValidationError(f"Unknown ticket type: {name!r}") from exc


TICKET_PRICES = MappingProxyType(
    {
        TicketType.ADULT: 25,
        TicketType.CHILD: 15,
        TicketType.INFANT: 0,
    }
)

MAX_TICKETS_PER_PURCHASE = 25
