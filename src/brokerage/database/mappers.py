"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so services never handle ORM
instances, which are bound to a session that closes at the end of each
unit of work.
"""

from brokerage.domain import entities as domain
from brokerage.database.models import (
    Profile as ORMProfile,
    Contract as ORMContract,
    Job as ORMJob,
)


def profile_to_domain(orm_profile: ORMProfile) -> domain.Profile:
    """Convert SQLAlchemy Profile model to domain Profile entity."""
    return domain.Profile(
        id=orm_profile.id,
        first_name=orm_profile.first_name,
        last_name=orm_profile.last_name,
        profession=orm_profile.profession,
        balance=orm_profile.balance,
        type=domain.ProfileType(orm_profile.type),
        created_at=orm_profile.created_at,
    )


def contract_to_domain(orm_contract: ORMContract) -> domain.Contract:
    """Convert SQLAlchemy Contract model to domain Contract entity."""
    return domain.Contract(
        id=orm_contract.id,
        terms=orm_contract.terms,
        status=domain.ContractStatus(orm_contract.status),
        client_id=orm_contract.client_id,
        contractor_id=orm_contract.contractor_id,
        created_at=orm_contract.created_at,
    )


def job_to_domain(orm_job: ORMJob) -> domain.Job:
    """Convert SQLAlchemy Job model to domain Job entity."""
    return domain.Job(
        id=orm_job.id,
        contract_id=orm_job.contract_id,
        description=orm_job.description,
        price=orm_job.price,
        paid=bool(orm_job.paid),
        payment_date=orm_job.payment_date,
        created_at=orm_job.created_at,
    )
