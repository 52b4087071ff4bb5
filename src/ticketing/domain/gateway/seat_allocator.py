"""Abstract gateway for reserving seats."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SeatAllocator(ABC):

    @abstractmethod
    def reserve(self, account_id: int, seat_count: int) -> None:
        """Reserve *seat_count* seats for the given account."""
