"""Shared pytest fixtures for brokerage tests."""

import os
import tempfile
from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from brokerage.database.factories import create_sqlite_database
from brokerage.domain.contract import ContractService
from brokerage.domain.deposit import DepositService
from brokerage.domain.entities import ContractStatus, ProfileType
from brokerage.domain.payment import PaymentService
from brokerage.domain.profile import ProfileService
from brokerage.domain.report import ReportService
from brokerage.logging_config import reset_logging

PAID_AT = datetime(2020, 8, 15, 19, 11, 26)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Leave logging unconfigured so caplog sees records."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def fixed_clock():
    """Clock that always returns PAID_AT."""
    return lambda: PAID_AT


@pytest.fixture
def profile_service(temp_db):
    return ProfileService(temp_db)


@pytest.fixture
def contract_service(temp_db):
    return ContractService(temp_db)


@pytest.fixture
def payment_service(temp_db, fixed_clock):
    return PaymentService(temp_db, clock=fixed_clock)


@pytest.fixture
def deposit_service(temp_db):
    return DepositService(temp_db)


@pytest.fixture
def report_service(temp_db):
    return ReportService(temp_db)


@pytest.fixture
def ledger(temp_db):
    """A client and a contractor under an in-progress contract with one unpaid job.

    client: balance 1150.00, contractor: balance 64.00, job price 200.00.
    """
    client_id = temp_db.create_profile(
        first_name="Harry",
        last_name="Potter",
        profession="Wizard",
        profile_type=ProfileType.CLIENT,
        balance=Decimal("1150.00"),
    )
    contractor_id = temp_db.create_profile(
        first_name="John",
        last_name="Lennon",
        profession="Musician",
        profile_type=ProfileType.CONTRACTOR,
        balance=Decimal("64.00"),
    )
    other_client_id = temp_db.create_profile(
        first_name="Mr",
        last_name="Robot",
        profession="Hacker",
        profile_type=ProfileType.CLIENT,
        balance=Decimal("231.11"),
    )
    contract_id = temp_db.create_contract(
        client_id=client_id,
        contractor_id=contractor_id,
        terms="bla bla bla",
        status=ContractStatus.IN_PROGRESS,
    )
    job_id = temp_db.create_job(
        contract_id=contract_id, description="work", price=Decimal("200.00")
    )
    return SimpleNamespace(
        db=temp_db,
        client_id=client_id,
        contractor_id=contractor_id,
        other_client_id=other_client_id,
        contract_id=contract_id,
        job_id=job_id,
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
