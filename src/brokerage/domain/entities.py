"""Domain model entities for brokerage.

These are pure data classes representing business concepts, independent of
database schema. Monetary values are ``Decimal`` amounts quantized to cents.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class ProfileType(str, Enum):
    """Role of a party in the system."""

    CLIENT = "client"
    CONTRACTOR = "contractor"


class ContractStatus(str, Enum):
    """Lifecycle status of a contract."""

    NEW = "new"
    IN_PROGRESS = "in_progress"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Profile:
    """Client or contractor account holding a balance."""

    id: int
    first_name: str
    last_name: str
    profession: str
    balance: Decimal
    type: ProfileType
    created_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_client(self) -> bool:
        return self.type == ProfileType.CLIENT


@dataclass(frozen=True)
class Contract:
    """Agreement between one client and one contractor."""

    id: int
    terms: str
    status: ContractStatus
    client_id: int
    contractor_id: int
    created_at: datetime

    def involves(self, profile_id: int) -> bool:
        """Return True if the profile is either party of the contract."""
        return profile_id in (self.client_id, self.contractor_id)


@dataclass(frozen=True)
class Job:
    """Priced unit of work under a contract, payable once."""

    id: int
    contract_id: int
    description: str
    price: Decimal
    paid: bool
    payment_date: Optional[datetime]
    created_at: datetime


@dataclass(frozen=True)
class Payment:
    """Outcome of a successful job payment."""

    job_id: int
    client_id: int
    contractor_id: int
    amount: Decimal
    paid_at: datetime


@dataclass(frozen=True)
class Deposit:
    """Outcome of a successful deposit.

    ``ceiling`` is the exact limit the amount was checked against. It is not
    rounded to cents, so it can carry more than two decimal places.
    """

    client_id: int
    amount: Decimal
    ceiling: Decimal
    balance: Decimal


@dataclass(frozen=True)
class ProfessionEarnings:
    """Total earned by one profession in a report window."""

    profession: str
    earnings: Decimal


@dataclass(frozen=True)
class ClientSpend:
    """Total spent by one client in a report window."""

    id: int
    full_name: str
    paid: Decimal
