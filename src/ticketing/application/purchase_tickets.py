"""Application service: Purchase Tickets use case.

Validates a purchase submission, derives the amount to charge and the
number of seats to reserve, then hands both to the external gateways.
Nothing is dispatched unless every rule passes.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import structlog

from ticketing.application.dto import PurchaseReceiptDTO, TicketLineDTO
from ticketing.domain.exceptions import (
    InvalidAccountIdError,
    InvalidPurchaseError,
    MissingAdultError,
    NegativeTicketCountError,
    NoTicketsRequestedError,
    TooManyInfantsError,
    TooManyTicketsError,
)
from ticketing.domain.gateway.payment_charger import PaymentCharger
from ticketing.domain.gateway.seat_allocator import SeatAllocator
from ticketing.domain.model.ticket_request import TicketCountSummary, TicketTypeRequest
from ticketing.domain.model.ticket_type import MAX_TICKETS_PER_PURCHASE, TicketType

logger = structlog.get_logger(__name__)


class PurchaseTicketsHandler:

    def __init__(
        self,
        payment_charger: PaymentCharger,
        seat_allocator: SeatAllocator,
    ) -> None:
        self._payment_charger = payment_charger
        self._seat_allocator = seat_allocator

    def handle(
        self,
        account_id: int,
        ticket_requests: Iterable[TicketTypeRequest] | None,
    ) -> PurchaseReceiptDTO:
        """Purchase tickets for an account.

        Rules are checked in a fixed order and the first violation wins:
        1. At least one request is given.
        2. The account ID is a positive integer.
        3. The total across all requests is between 1 and the purchase limit.
        4. No request has a negative count.
        5. At least one adult ticket is present.
        6. There are no more infants than adults.

        Payment is taken before seats are reserved. If the seat reservation
        fails after payment there is no refund here; the gateways own that.
        """
        try:
            summary = self._validate(account_id, ticket_requests)
        except InvalidPurchaseError as exc:
            logger.info(
                "purchase_rejected",
                account_id=account_id,
                kind=exc.kind.value,
                reason=exc.message,
            )
            raise

        self._payment_charger.charge(account_id, summary.total_amount)
        self._seat_allocator.reserve(account_id, summary.total_seats)

        logger.info(
            "purchase_dispatched",
            account_id=account_id,
            amount=summary.total_amount,
            seats=summary.total_seats,
        )
        return self._to_dto(account_id, summary)

    # --- Validation -----------------------------------------------------------

    def _validate(
        self,
        account_id: int,
        ticket_requests: Iterable[TicketTypeRequest] | None,
    ) -> TicketCountSummary:
        ticket_requests = list(ticket_requests or ())
        if not ticket_requests:
            raise NoTicketsRequestedError()

        self._validate_account_id(account_id)

        requested = sum(request.no_of_tickets for request in ticket_requests)
        if requested == 0:
            raise NoTicketsRequestedError()
        if requested > MAX_TICKETS_PER_PURCHASE:
            raise TooManyTicketsError(requested, MAX_TICKETS_PER_PURCHASE)

        summary = self._count_by_type(ticket_requests)

        adults = summary[TicketType.ADULT]
        if adults == 0:
            raise MissingAdultError()
        if summary[TicketType.INFANT] > adults:
            raise TooManyInfantsError(summary[TicketType.INFANT], adults)

        return summary

    @staticmethod
    def _validate_account_id(account_id: int) -> None:
        if (
            isinstance(account_id, bool)
            or not isinstance(account_id, int)
            or account_id <= 0
        ):
            raise InvalidAccountIdError(account_id)

    @staticmethod
    def _count_by_type(
        ticket_requests: Sequence[TicketTypeRequest],
    ) -> TicketCountSummary:
        counts = {ticket_type: 0 for ticket_type in TicketType}
        for request in ticket_requests:
            if request.no_of_tickets < 0:
                raise NegativeTicketCountError(
                    request.ticket_type.value, request.no_of_tickets
                )
            counts[request.ticket_type] += request.no_of_tickets
        return TicketCountSummary(counts)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(account_id: int, summary: TicketCountSummary) -> PurchaseReceiptDTO:
        return PurchaseReceiptDTO(
            account_id=account_id,
            lines=[
                TicketLineDTO(
                    ticket_type=ticket_type.value,
                    quantity=count,
                    unit_price=ticket_type.unit_price,
                    line_total=ticket_type.unit_price * count,
                )
                for ticket_type, count in summary.counts.items()
                if count > 0
            ],
            total_tickets=summary.total_tickets,
            total_amount=summary.total_amount,
            total_seats=summary.total_seats,
        )
