"""Aggregate reports over the ledger."""

from datetime import date, datetime
from typing import Optional, Union

from brokerage.database.base import Database
from brokerage.domain.entities import ClientSpend, ProfessionEarnings
from brokerage.domain.errors import ValidationError, window_required
from brokerage.utils.date_parser import window_end, window_start

DEFAULT_CLIENT_LIMIT = 2

WindowBound = Union[date, datetime, None]


class ReportService:
    """Read-only reports: best-earning profession and best-paying clients."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def _resolve_window(start: WindowBound, end: WindowBound) -> tuple[datetime, datetime]:
        """Turn inclusive window bounds into the first and last instants covered.

        A plain date as ``end`` covers that whole day.

        Raises:
            ValidationError: If either bound is missing
        """
        if start is None or end is None:
            raise ValidationError(window_required())
        return window_start(start), window_end(end)

    def best_profession(self, start: WindowBound, end: WindowBound) -> Optional[ProfessionEarnings]:
        """Return the profession that earned the most for jobs paid in the window.

        Args:
            start: Window start (inclusive)
            end: Window end (inclusive)

        Returns:
            Top profession with its earnings, or None if nothing was paid in
            the window

        Raises:
            ValidationError: If start or end is missing
        """
        window = self._resolve_window(start, end)
        rows = self.db.earnings_by_profession(*window, limit=1)
        return rows[0] if rows else None

    def best_clients(
        self, start: WindowBound, end: WindowBound, limit: Optional[int] = None
    ) -> list[ClientSpend]:
        """Return the clients who paid the most under contracts created in the window.

        Args:
            start: Window start (inclusive), applied to contract creation time
            end: Window end (inclusive)
            limit: Maximum number of clients (default 2)

        Returns:
            Clients ordered by amount paid, highest first

        Raises:
            ValidationError: If start or end is missing, or limit is not positive
        """
        window = self._resolve_window(start, end)
        if limit is None:
            limit = DEFAULT_CLIENT_LIMIT
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError(f"Limit must be a positive integer, got {limit!r}")
        return self.db.spend_by_client(*window, limit=limit)
