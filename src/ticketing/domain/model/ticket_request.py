"""Value objects for a purchase submission.

``TicketTypeRequest`` is one line item as handed over by the caller.
``TicketCountSummary`` is the per-category total derived from all line items.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ticketing.domain.exceptions import ValidationError
from ticketing.domain.model.ticket_type import TicketType


@dataclass(frozen=True)
class TicketTypeRequest:
    """A requested number of tickets of one type.

    The count is only checked for being an integer here; whether it is
    acceptable for a purchase is decided by the purchase handler.
    """

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise ValidationError(
                f"Ticket type must be a TicketType, got {self.ticket_type!r}"
            )
        if isinstance(self.no_of_tickets, bool) or not isinstance(
            self.no_of_tickets, int
        ):
            raise ValidationError(
                f"Number of tickets must be an integer, "
                f"got {type(self.no_of_tickets).__name__}"
            )


@dataclass(frozen=True)
class TicketCountSummary:
    """Total tickets per type. Every type is present, defaulting to zero."""

    counts: Mapping[TicketType, int]

    def __post_init__(self) -> None:
        for key in self.counts:
            if not isinstance(key, TicketType):
                raise ValidationError(
                    f"Summary keys must be TicketType values, got {key!r}"
                )
        full = {ticket_type: 0 for ticket_type in TicketType}
        full.update(self.counts)
        object.__setattr__(self, "counts", MappingProxyType(full))

    def __getitem__(self, ticket_type: TicketType) -> int:
        return self.counts[ticket_type]

    @property
    def total_tickets(self) -> int:
        return sum(self.counts.values())

    @property
    def total_amount(self) -> int:
        return sum(
            ticket_type.unit_price * count
            for ticket_type, count in self.counts.items()
        )

    @property
    def total_seats(self) -> int:
        return sum(
            count
            for ticket_type, count in self.counts.items()
            if ticket_type.occupies_seat
        )
