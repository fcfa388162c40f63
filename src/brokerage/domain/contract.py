"""Contract and job domain service."""

from datetime import datetime
from typing import Optional, Union

from brokerage.database.base import Database
from brokerage.domain.entities import Contract, ContractStatus, Job, Profile, ProfileType
from brokerage.domain.errors import (
    NotFoundError,
    ValidationError,
    contract_not_found,
    profile_not_found,
)
from brokerage.utils.money import Number, as_decimal, is_whole_cents


def parse_contract_status(value: Union[str, ContractStatus]) -> ContractStatus:
    """Convert a string to ContractStatus.

    Raises:
        ValidationError: If the value is not a known status
    """
    try:
        return ContractStatus(value)
    except ValueError:
        choices = ", ".join(s.value for s in ContractStatus)
        raise ValidationError(f"Unknown contract status '{value}' (expected one of: {choices})")


class ContractService:
    """Service for managing contracts and their jobs."""

    def __init__(self, db: Database):
        """Initialize contract service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_profile(self, profile_id: int, expected: ProfileType) -> Profile:
        profile = self.db.get_profile(profile_id)
        if profile is None:
            raise NotFoundError(profile_not_found(profile_id))
        if profile.type != expected:
            raise ValidationError(f"Profile {profile_id} is not a {expected.value}")
        return profile

    def create_contract(
        self,
        client_id: int,
        contractor_id: int,
        terms: str,
        status: Union[str, ContractStatus] = ContractStatus.NEW,
        created_at: Optional[datetime] = None,
    ) -> int:
        """Create a contract between a client and a contractor.

        Args:
            client_id: Client profile ID
            contractor_id: Contractor profile ID
            terms: Contract terms
            status: Initial status (default "new")
            created_at: Creation time, for loading historical contracts

        Returns:
            Contract ID

        Raises:
            NotFoundError: If either profile doesn't exist
            ValidationError: If the profiles have the wrong types or are the same
        """
        if client_id == contractor_id:
            raise ValidationError("Client and contractor must be different profiles")
        self._require_profile(client_id, ProfileType.CLIENT)
        self._require_profile(contractor_id, ProfileType.CONTRACTOR)
        if not terms or not terms.strip():
            raise ValidationError("Contract terms cannot be empty")

        return self.db.create_contract(
            client_id=client_id,
            contractor_id=contractor_id,
            terms=terms.strip(),
            status=parse_contract_status(status),
            created_at=created_at,
        )

    def create_job(self, contract_id: int, description: str, price: Number) -> int:
        """Add an unpaid job to a contract.

        Args:
            contract_id: Contract ID
            description: Job description
            price: Positive price in whole cents

        Returns:
            Job ID

        Raises:
            NotFoundError: If the contract doesn't exist
            ValidationError: If the price is not positive or has fractions of a cent
        """
        if self.db.get_contract(contract_id) is None:
            raise NotFoundError(contract_not_found(contract_id))

        try:
            value = as_decimal(price)
        except ValueError as e:
            raise ValidationError(str(e))
        if value <= 0:
            raise ValidationError("Job price must be positive")
        if not is_whole_cents(value):
            raise ValidationError("Job price cannot have fractions of a cent")

        return self.db.create_job(contract_id=contract_id, description=description, price=value)

    def get_contract_for(self, caller: Profile, contract_id: int) -> Contract:
        """Get a contract the caller is a party to.

        Contracts belonging to other profiles are reported as not found.

        Raises:
            NotFoundError: If the contract doesn't exist or the caller is not a party
        """
        contract = self.db.get_contract(contract_id)
        if contract is None or not contract.involves(caller.id):
            raise NotFoundError(contract_not_found(contract_id))
        return contract

    def list_active_contracts(self, caller: Profile) -> list[Contract]:
        """List the caller's contracts that are not terminated."""
        return self.db.list_contracts_for(caller.id, include_terminated=False)

    def list_unpaid_jobs(self, caller: Profile) -> list[Job]:
        """List unpaid jobs of the caller's in-progress contracts."""
        return self.db.list_unpaid_jobs_for(caller.id)
