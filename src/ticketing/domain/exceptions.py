"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
A rejected purchase raises one InvalidPurchaseError subclass per rule, each
tagged with a PurchaseErrorKind.
"""

from __future__ import annotations

from enum import Enum


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value could not be constructed from the given input."""


class PurchaseErrorKind(Enum):
    NO_TICKETS_REQUESTED = "NO_TICKETS_REQUESTED"
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    NEGATIVE_TICKET_COUNT = "NEGATIVE_TICKET_COUNT"
    MISSING_ADULT = "MISSING_ADULT"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"


class InvalidPurchaseError(DomainException):
    """A purchase submission broke one of the purchase rules."""

    kind: PurchaseErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoTicketsRequestedError(InvalidPurchaseError):
    kind = PurchaseErrorKind.NO_TICKETS_REQUESTED

    def __init__(self) -> None:
        super().__init__("No tickets requested")


class InvalidAccountIdError(InvalidPurchaseError):
    kind = PurchaseErrorKind.INVALID_ACCOUNT_ID

    def __init__(self, account_id: object) -> None:
        super().__init__(f"Invalid account ID: {account_id!r}")
        self.account_id = account_id


class TooManyTicketsError(InvalidPurchaseError):
    kind = PurchaseErrorKind.TOO_MANY_TICKETS

    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(
            f"Cannot purchase {requested} tickets, the maximum is {limit} per purchase"
        )
        self.requested = requested
        self.limit = limit


class NegativeTicketCountError(InvalidPurchaseError):
    kind = PurchaseErrorKind.NEGATIVE_TICKET_COUNT

    def __init__(self, ticket_type_name: str, count: int) -> None:
        super().__init__(
            f"Ticket count cannot be negative ({ticket_type_name}: {count})"
        )
        self.count = count


class MissingAdultError(InvalidPurchaseError):
    kind = PurchaseErrorKind.MISSING_ADULT

    def __init__(self) -> None:
        super().__init__(
            "Child and infant tickets cannot be purchased without an adult ticket"
        )


class TooManyInfantsError(InvalidPurchaseError):
    kind = PurchaseErrorKind.TOO_MANY_INFANTS

    def __init__(self, infants: int, adults: int) -> None:
        super().__init__(
            f"Each infant must sit on an adult's lap "
            f"({infants} infants for {adults} adults)"
        )
        self.infants = infants
        self.adults = adults
