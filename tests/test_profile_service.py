"""Tests for ProfileService."""

from decimal import Decimal

import pytest

from brokerage.domain.entities import ProfileType
from brokerage.domain.errors import UnauthorizedError, ValidationError


class TestCreateProfile:
    """Tests for creating profiles."""

    def test_create_client(self, profile_service):
        profile_id = profile_service.create_profile(
            "  Harry ", "Potter", "Wizard", "client", balance="1150.00"
        )

        profile = profile_service.get_profile(profile_id)
        assert profile.first_name == "Harry"
        assert profile.full_name == "Harry Potter"
        assert profile.type == ProfileType.CLIENT
        assert profile.is_client
        assert profile.balance == Decimal("1150.00")

    def test_default_balance_is_zero(self, profile_service):
        profile_id = profile_service.create_profile("John", "Lennon", "Musician", ProfileType.CONTRACTOR)

        assert profile_service.get_profile(profile_id).balance == Decimal("0.00")

    def test_unknown_type(self, profile_service):
        with pytest.raises(ValidationError, match="Unknown profile type 'admin'"):
            profile_service.create_profile("A", "B", "", "admin")

    @pytest.mark.parametrize("first,last", [("", "Potter"), ("Harry", "   ")])
    def test_empty_names(self, profile_service, first, last):
        with pytest.raises(ValidationError, match="cannot be empty"):
            profile_service.create_profile(first, last, "Wizard", "client")

    @pytest.mark.parametrize("balance", ["-1.00", "1.005", "lots"])
    def test_invalid_balance(self, profile_service, balance):
        with pytest.raises(ValidationError):
            profile_service.create_profile("Harry", "Potter", "Wizard", "client", balance=balance)


class TestQueries:
    """Tests for listing, authentication and totals."""

    def test_get_missing_profile(self, profile_service):
        assert profile_service.get_profile(42) is None

    def test_list_by_type(self, ledger, profile_service):
        clients = profile_service.list_profiles("client")
        contractors = profile_service.list_profiles(ProfileType.CONTRACTOR)

        assert [p.id for p in clients] == [ledger.client_id, ledger.other_client_id]
        assert [p.id for p in contractors] == [ledger.contractor_id]
        assert len(profile_service.list_profiles()) == 3

    def test_authenticate_known_profile(self, ledger, profile_service):
        assert profile_service.authenticate(ledger.client_id).id == ledger.client_id

    def test_authenticate_requires_id(self, profile_service):
        with pytest.raises(UnauthorizedError):
            profile_service.authenticate(None)

    def test_authenticate_unknown_profile(self, ledger, profile_service):
        with pytest.raises(UnauthorizedError, match="Profile 999 not found"):
            profile_service.authenticate(999)

    def test_total_balance_is_conserved_by_payment(self, ledger, profile_service, payment_service):
        before = profile_service.total_balance()

        payment_service.pay_job(caller_id=ledger.client_id, job_id=ledger.job_id)

        assert before == Decimal("1445.11")
        assert profile_service.total_balance() == before
