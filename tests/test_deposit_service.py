"""Tests for DepositService."""

import threading
from decimal import Decimal

import pytest

from brokerage.domain.deposit import DepositService, MAX_DEPOSIT_RATIO
from brokerage.domain.entities import ContractStatus, ProfileType
from brokerage.domain.errors import LimitExceededError, NotFoundError, ValidationError


@pytest.fixture
def indebted_client(ledger):
    """Client whose unpaid jobs total exactly 1000.00 (200 + 800)."""
    ledger.db.create_job(contract_id=ledger.contract_id, description="more work", price=Decimal("800.00"))
    return ledger


class TestDeposit:
    """Tests for depositing into a client balance."""

    def test_deposit_at_ceiling_succeeds(self, indebted_client, deposit_service):
        result = deposit_service.deposit(indebted_client.client_id, Decimal("250.00"))

        assert result.ceiling == Decimal("250.00")
        assert result.balance == Decimal("1400.00")
        assert indebted_client.db.get_profile(indebted_client.client_id).balance == Decimal("1400.00")

    def test_deposit_one_cent_above_ceiling_fails(self, indebted_client, deposit_service):
        with pytest.raises(LimitExceededError, match="Deposit amount exceeds the maximum allowed"):
            deposit_service.deposit(indebted_client.client_id, Decimal("250.01"))

        assert indebted_client.db.get_profile(indebted_client.client_id).balance == Decimal("1150.00")

    def test_deposit_accepts_string_amount(self, indebted_client, deposit_service):
        result = deposit_service.deposit(indebted_client.client_id, "100")
        assert result.amount == Decimal("100")
        assert result.balance == Decimal("1250.00")

    def test_no_outstanding_jobs_rejects_any_deposit(self, ledger, deposit_service):
        with pytest.raises(LimitExceededError):
            deposit_service.deposit(ledger.other_client_id, Decimal("0.01"))

        assert ledger.db.get_profile(ledger.other_client_id).balance == Decimal("231.11")

    def test_paid_jobs_do_not_count_as_outstanding(self, ledger, payment_service, deposit_service):
        payment_service.pay_job(caller_id=ledger.client_id, job_id=ledger.job_id)

        with pytest.raises(LimitExceededError):
            deposit_service.deposit(ledger.client_id, Decimal("1.00"))

    def test_outstanding_ignores_other_clients_jobs(self, ledger, deposit_service):
        # 200.00 outstanding for ledger.client_id only
        with pytest.raises(LimitExceededError):
            deposit_service.deposit(ledger.other_client_id, Decimal("50.00"))

        result = deposit_service.deposit(ledger.client_id, Decimal("50.00"))
        assert result.ceiling == Decimal("50.00")

    def test_outstanding_counts_all_contract_statuses(self, ledger, deposit_service):
        contract_id = ledger.db.create_contract(
            client_id=ledger.client_id,
            contractor_id=ledger.contractor_id,
            terms="old",
            status=ContractStatus.TERMINATED,
        )
        ledger.db.create_job(contract_id=contract_id, description="unpaid", price=Decimal("200.00"))

        result = deposit_service.deposit(ledger.client_id, Decimal("100.00"))
        assert result.ceiling == Decimal("100.00")

    def test_deposit_to_missing_client(self, ledger, deposit_service):
        with pytest.raises(NotFoundError, match="Client not found"):
            deposit_service.deposit(999, Decimal("10.00"))

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5.00"), "0.001", "abc"])
    def test_invalid_amounts(self, ledger, deposit_service, amount):
        with pytest.raises(ValidationError):
            deposit_service.deposit(ledger.client_id, amount)

    def test_ceiling_is_not_rounded(self, temp_db, deposit_service):
        client_id = temp_db.create_profile("A", "B", "", ProfileType.CLIENT)
        contractor_id = temp_db.create_profile("C", "D", "", ProfileType.CONTRACTOR)
        contract_id = temp_db.create_contract(client_id, contractor_id, "t")
        temp_db.create_job(contract_id=contract_id, description="x", price=Decimal("0.10"))

        assert DepositService.ceiling_for(Decimal("0.10")) == Decimal("0.025")
        with pytest.raises(LimitExceededError):
            deposit_service.deposit(client_id, Decimal("0.03"))
        result = deposit_service.deposit(client_id, Decimal("0.02"))
        assert result.balance == Decimal("0.02")
        assert result.ceiling.as_tuple() == Decimal("0.025").as_tuple()

    def test_ratio(self):
        assert MAX_DEPOSIT_RATIO == Decimal("0.25")


class TestDepositIsolation:
    """The outstanding read and the credit are not interleaved with other writers."""

    def test_payment_waits_for_deposit_unit_of_work(self, ledger, fixed_clock, monkeypatch):
        from brokerage.database.sqlalchemy_db import SQLAlchemyUnitOfWork
        from brokerage.domain.payment import PaymentService

        original = SQLAlchemyUnitOfWork.outstanding_for_client
        payer = PaymentService(ledger.db, clock=fixed_clock)
        seen = {}

        def pay():
            try:
                seen["payment"] = payer.pay_job(caller_id=ledger.client_id, job_id=ledger.job_id)
            except Exception as e:
                seen["payment"] = e

        def outstanding_then_race(self, client_id):
            total = original(self, client_id)
            seen["thread"] = threading.Thread(target=pay)
            seen["thread"].start()
            seen["thread"].join(timeout=1)
            seen["paid_during_deposit"] = not seen["thread"].is_alive()
            return total

        monkeypatch.setattr(SQLAlchemyUnitOfWork, "outstanding_for_client", outstanding_then_race)

        result = DepositService(ledger.db).deposit(ledger.client_id, Decimal("50.00"))
        seen["thread"].join(timeout=30)

        assert seen["paid_during_deposit"] is False
        assert result.balance == Decimal("1200.00")
        assert seen["payment"].amount == Decimal("200.00")
        assert ledger.db.get_profile(ledger.client_id).balance == Decimal("1000.00")
