"""Application service: Show Prices use case (query)."""

from __future__ import annotations

from ticketing.application.dto import PriceDTO
from ticketing.domain.model.ticket_type import TicketType


class ShowPricesHandler:

    def handle(self) -> list[PriceDTO]:
        return [
            PriceDTO(
                ticket_type=ticket_type.value,
                unit_price=ticket_type.unit_price,
                occupies_seat=ticket_type.occupies_seat,
            )
            for ticket_type in TicketType
        ]
