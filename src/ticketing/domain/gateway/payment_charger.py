"""Abstract gateway for taking payment."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PaymentCharger(ABC):

    @abstractmethod
    def charge(self, account_id: int, amount: int) -> None:
        """Charge *amount* to the given account."""
