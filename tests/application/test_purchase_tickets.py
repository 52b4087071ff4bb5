"""Integration tests for the PurchaseTickets use case.

Uses in-memory fake gateways — no file I/O.
"""

import pytest
from structlog.testing import capture_logs

from ticketing.application.purchase_tickets import PurchaseTicketsHandler
from ticketing.domain.exceptions import (
    InvalidAccountIdError,
    MissingAdultError,
    NegativeTicketCountError,
    NoTicketsRequestedError,
    TooManyInfantsError,
    TooManyTicketsError,
)
from ticketing.domain.model.ticket_request import TicketTypeRequest
from ticketing.domain.model.ticket_type import TicketType
from tests.fakes import FailingSeatAllocator, FakePaymentCharger, FakeSeatAllocator

ADULT, CHILD, INFANT = TicketType.ADULT, TicketType.CHILD, TicketType.INFANT


def _setup() -> tuple[PurchaseTicketsHandler, FakePaymentCharger, FakeSeatAllocator, list]:
    """Build handler with fake gateways sharing one call log."""
    calls: list[tuple] = []
    payments = FakePaymentCharger(calls)
    seats = FakeSeatAllocator(calls)
    handler = PurchaseTicketsHandler(payments, seats)
    return handler, payments, seats, calls


def _req(ticket_type: TicketType, count: int) -> TicketTypeRequest:
    return TicketTypeRequest(ticket_type, count)


class TestPurchaseHappyPath:

    def test_charges_and_reserves_for_mixed_purchase(self):
        handler, payments, seats, _ = _setup()
        handler.handle(1, [_req(ADULT, 2), _req(CHILD, 1), _req(INFANT, 1)])
        assert payments.charges == [(1, 65)]
        assert seats.reservations == [(1, 3)]

    def test_infants_get_no_seat(self):
        handler, payments, seats, _ = _setup()
        handler.handle(1, [_req(ADULT, 2), _req(INFANT, 2)])
        assert payments.charges == [(1, 50)]
        assert seats.reservations == [(1, 2)]

    def test_payment_before_reservation(self):
        handler, _, _, calls = _setup()
        handler.handle(7, [_req(ADULT, 1)])
        assert calls == [("charge", 7, 25), ("reserve", 7, 1)]

    def test_requests_of_same_type_are_added_together(self):
        handler, payments, seats, _ = _setup()
        handler.handle(3, [_req(ADULT, 1), _req(CHILD, 2), _req(ADULT, 1)])
        assert payments.charges == [(3, 80)]
        assert seats.reservations == [(3, 4)]

    def test_zero_count_line_is_ignored(self):
        handler, payments, seats, _ = _setup()
        handler.handle(1, [_req(ADULT, 1), _req(CHILD, 0)])
        assert payments.charges == [(1, 25)]
        assert seats.reservations == [(1, 1)]

    def test_exactly_max_tickets_allowed(self):
        handler, payments, seats, _ = _setup()
        handler.handle(1, [_req(ADULT, 20), _req(CHILD, 5)])
        assert payments.charges == [(1, 575)]
        assert seats.reservations == [(1, 25)]

    def test_infants_equal_to_adults_allowed(self):
        handler, payments, seats, _ = _setup()
        handler.handle(1, [_req(ADULT, 3), _req(INFANT, 3)])
        assert payments.charges == [(1, 75)]
        assert seats.reservations == [(1, 3)]

    def test_accepts_any_iterable_of_requests(self):
        handler, payments, _, _ = _setup()
        handler.handle(1, (r for r in [_req(ADULT, 1), _req(CHILD, 1)]))
        assert payments.charges == [(1, 40)]

    def test_returns_receipt(self):
        handler, _, _, _ = _setup()
        dto = handler.handle(1, [_req(ADULT, 2), _req(CHILD, 1), _req(INFANT, 1)])
        assert dto.account_id == 1
        assert dto.total_tickets == 4
        assert dto.total_amount == 65
        assert dto.total_seats == 3
        assert [(line.ticket_type, line.quantity, line.line_total) for line in dto.lines] == [
            ("ADULT", 2, 50),
            ("CHILD", 1, 15),
            ("INFANT", 1, 0),
        ]

    def test_receipt_omits_types_not_bought(self):
        handler, _, _, _ = _setup()
        dto = handler.handle(1, [_req(ADULT, 1)])
        assert [line.ticket_type for line in dto.lines] == ["ADULT"]

    def test_handler_keeps_no_state_between_purchases(self):
        handler, payments, seats, _ = _setup()
        handler.handle(1, [_req(ADULT, 1)])
        handler.handle(2, [_req(ADULT, 2)])
        assert payments.charges == [(1, 25), (2, 50)]
        assert seats.reservations == [(1, 1), (2, 2)]


class TestPurchaseValidation:

    @pytest.mark.parametrize("requests", [[], None])
    def test_no_requests_rejected(self, requests):
        handler, _, _, calls = _setup()
        with pytest.raises(NoTicketsRequestedError):
            handler.handle(1, requests)
        assert calls == []

    def test_all_zero_counts_rejected(self):
        handler, _, _, calls = _setup()
        with pytest.raises(NoTicketsRequestedError):
            handler.handle(1, [_req(ADULT, 0), _req(CHILD, 0)])
        assert calls == []

    @pytest.mark.parametrize("account_id", [0, -1, 1.5, 1.0, "1", None, True])
    def test_invalid_account_id_rejected(self, account_id):
        handler, _, _, calls = _setup()
        with pytest.raises(InvalidAccountIdError):
            handler.handle(account_id, [_req(ADULT, 1)])
        assert calls == []

    def test_invalid_account_id_wins_over_bad_requests(self):
        handler, _, _, _ = _setup()
        with pytest.raises(InvalidAccountIdError):
            handler.handle(0, [_req(CHILD, 30)])

    def test_empty_requests_checked_before_account(self):
        handler, _, _, _ = _setup()
        with pytest.raises(NoTicketsRequestedError):
            handler.handle(0, [])

    def test_too_many_tickets_rejected(self):
        handler, _, _, calls = _setup()
        with pytest.raises(TooManyTicketsError, match="26"):
            handler.handle(1, [_req(ADULT, 26)])
        assert calls == []

    def test_too_many_tickets_across_types(self):
        handler, _, _, _ = _setup()
        with pytest.raises(TooManyTicketsError):
            handler.handle(1, [_req(ADULT, 13), _req(CHILD, 10), _req(INFANT, 3)])

    def test_total_limit_checked_before_infant_rule(self):
        handler, _, _, _ = _setup()
        with pytest.raises(TooManyTicketsError):
            handler.handle(1, [_req(ADULT, 1), _req(INFANT, 25)])

    def test_negative_count_rejected(self):
        handler, _, _, calls = _setup()
        with pytest.raises(NegativeTicketCountError):
            handler.handle(1, [_req(ADULT, 3), _req(CHILD, -1)])
        assert calls == []

    def test_negative_count_cancelling_to_zero_is_no_tickets(self):
        handler, _, _, _ = _setup()
        with pytest.raises(NoTicketsRequestedError):
            handler.handle(1, [_req(ADULT, 1), _req(CHILD, -1)])

    def test_negative_count_hiding_an_oversized_line(self):
        handler, _, _, _ = _setup()
        with pytest.raises(NegativeTicketCountError):
            handler.handle(1, [_req(ADULT, 30), _req(CHILD, -10)])

    @pytest.mark.parametrize(
        "requests",
        [
            [_req(CHILD, 1)],
            [_req(INFANT, 1)],
            [_req(CHILD, 2), _req(INFANT, 1)],
            [_req(ADULT, 0), _req(CHILD, 1)],
        ],
    )
    def test_missing_adult_rejected(self, requests):
        handler, _, _, calls = _setup()
        with pytest.raises(MissingAdultError):
            handler.handle(1, requests)
        assert calls == []

    def test_more_infants_than_adults_rejected(self):
        handler, _, _, calls = _setup()
        with pytest.raises(TooManyInfantsError):
            handler.handle(1, [_req(ADULT, 1), _req(INFANT, 2)])
        assert calls == []

    def test_validation_outcome_is_repeatable(self):
        handler, _, _, _ = _setup()
        requests = [_req(ADULT, 1), _req(INFANT, 2)]
        for _ in range(2):
            with pytest.raises(TooManyInfantsError):
                handler.handle(1, requests)


class TestPurchaseGatewayFailure:

    def test_seat_failure_after_payment_propagates(self):
        payments = FakePaymentCharger()
        handler = PurchaseTicketsHandler(payments, FailingSeatAllocator())
        with pytest.raises(RuntimeError, match="seat booking unavailable"):
            handler.handle(1, [_req(ADULT, 1)])
        # No compensation: the charge has already happened.
        assert payments.charges == [(1, 25)]


class TestPurchaseLogging:

    def test_logs_dispatch(self):
        handler, _, _, _ = _setup()
        with capture_logs() as logs:
            handler.handle(1, [_req(ADULT, 2), _req(CHILD, 1)])
        assert logs == [
            {
                "event": "purchase_dispatched",
                "log_level": "info",
                "account_id": 1,
                "amount": 65,
                "seats": 3,
            }
        ]

    def test_logs_rejection_kind(self):
        handler, _, _, _ = _setup()
        with capture_logs() as logs, pytest.raises(MissingAdultError):
            handler.handle(1, [_req(CHILD, 1)])
        assert logs[0]["event"] == "purchase_rejected"
        assert logs[0]["kind"] == "MISSING_ADULT"
