"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through the services
from brokerage.domain.entities import (
    ClientSpend,
    Contract,
    ContractStatus,
    Job,
    Profile,
    ProfessionEarnings,
    ProfileType,
)


class UnitOfWork(ABC):
    """Atomic, isolated view of the ledger.

    Obtained from ``Database.unit_of_work()``. Everything done through one
    instance commits together or not at all, and reads observe the writes
    made earlier through the same instance.
    """

    @abstractmethod
    def get_profile(self, profile_id: int, for_update: bool = False) -> Optional[Profile]:
        """Get profile by ID, optionally locking the row."""
        pass

    @abstractmethod
    def get_contract(self, contract_id: int) -> Optional[Contract]:
        """Get contract by ID."""
        pass

    @abstractmethod
    def get_job(self, job_id: int, for_update: bool = False) -> Optional[Job]:
        """Get job by ID, optionally locking the row."""
        pass

    @abstractmethod
    def outstanding_for_client(self, client_id: int) -> Decimal:
        """Sum of prices of unpaid jobs under the client's contracts (0 if none)."""
        pass

    @abstractmethod
    def mark_job_paid(self, job_id: int, paid_at: datetime) -> bool:
        """Mark an unpaid job as paid.

        Returns:
            False if the job is missing or was already paid
        """
        pass

    @abstractmethod
    def debit_balance(self, profile_id: int, amount: Decimal) -> bool:
        """Subtract amount from a balance that covers it.

        Returns:
            False if the profile is missing or its balance is below amount
        """
        pass

    @abstractmethod
    def credit_balance(self, profile_id: int, amount: Decimal) -> bool:
        """Add amount to a balance.

        Returns:
            False if the profile is missing
        """
        pass


class Database(ABC):
    """Abstract database interface for the brokerage ledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def unit_of_work(self) -> AbstractContextManager[UnitOfWork]:
        """Open a unit of work: commit on normal exit, roll back on any exception."""
        pass

    # Profile operations
    @abstractmethod
    def create_profile(
        self,
        first_name: str,
        last_name: str,
        profession: str,
        profile_type: ProfileType,
        balance: Decimal = Decimal("0.00"),
    ) -> int:
        """Create a profile. Returns profile ID."""
        pass

    @abstractmethod
    def get_profile(self, profile_id: int) -> Optional[Profile]:
        """Get profile by ID."""
        pass

    @abstractmethod
    def list_profiles(self, profile_type: Optional[ProfileType] = None) -> list[Profile]:
        """List profiles, optionally filtered by type."""
        pass

    # Contract operations
    @abstractmethod
    def create_contract(
        self,
        client_id: int,
        contractor_id: int,
        terms: str,
        status: ContractStatus = ContractStatus.NEW,
        created_at: Optional[datetime] = None,
    ) -> int:
        """Create a contract. Returns contract ID."""
        pass

    @abstractmethod
    def get_contract(self, contract_id: int) -> Optional[Contract]:
        """Get contract by ID."""
        pass

    @abstractmethod
    def list_contracts_for(self, profile_id: int, include_terminated: bool = False) -> list[Contract]:
        """List contracts where the profile is client or contractor."""
        pass

    # Job operations
    @abstractmethod
    def create_job(
        self,
        contract_id: int,
        description: str,
        price: Decimal,
        paid: bool = False,
        payment_date: Optional[datetime] = None,
    ) -> int:
        """Create a job. Returns job ID.

        ``paid``/``payment_date`` exist for loading historical data; new work
        is created unpaid and paid through a unit of work.
        """
        pass

    @abstractmethod
    def get_job(self, job_id: int) -> Optional[Job]:
        """Get job by ID."""
        pass

    @abstractmethod
    def list_unpaid_jobs_for(self, profile_id: int) -> list[Job]:
        """List unpaid jobs of in-progress contracts the profile is party to."""
        pass

    # Aggregate reports
    @abstractmethod
    def earnings_by_profession(
        self, start: datetime, end: datetime, limit: Optional[int] = None
    ) -> list[ProfessionEarnings]:
        """Sum job prices by contractor profession for jobs paid in [start, end].

        Ordered by earnings descending, then profession name.
        """
        pass

    @abstractmethod
    def spend_by_client(self, start: datetime, end: datetime, limit: int) -> list[ClientSpend]:
        """Sum job prices by client for contracts created in [start, end].

        Ordered by amount descending, then client ID.
        """
        pass
