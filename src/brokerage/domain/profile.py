"""Profile domain service."""

from decimal import Decimal
from typing import Optional, Union

from brokerage.database.base import Database
from brokerage.domain.entities import Profile, ProfileType
from brokerage.domain.errors import (
    UnauthorizedError,
    ValidationError,
    profile_not_found,
)
from brokerage.utils.money import Number, ZERO, as_decimal, is_whole_cents


def parse_profile_type(value: Union[str, ProfileType]) -> ProfileType:
    """Convert a string to ProfileType.

    Raises:
        ValidationError: If the value is not a known profile type
    """
    try:
        return ProfileType(value)
    except ValueError:
        choices = ", ".join(t.value for t in ProfileType)
        raise ValidationError(f"Unknown profile type '{value}' (expected one of: {choices})")


class ProfileService:
    """Service for managing client and contractor profiles."""

    def __init__(self, db: Database):
        """Initialize profile service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_profile(
        self,
        first_name: str,
        last_name: str,
        profession: str,
        profile_type: Union[str, ProfileType],
        balance: Number = ZERO,
    ) -> int:
        """Create a profile.

        Args:
            first_name: First name
            last_name: Last name
            profession: Profession (free text)
            profile_type: "client" or "contractor"
            balance: Opening balance (non-negative, whole cents)

        Returns:
            Profile ID

        Raises:
            ValidationError: If a field is empty, the type is unknown or the
                balance is invalid
        """
        for field, value in (("first name", first_name), ("last name", last_name)):
            if not value or not value.strip():
                raise ValidationError(f"Profile {field} cannot be empty")
        profile_type = parse_profile_type(profile_type)

        try:
            opening = as_decimal(balance)
        except ValueError as e:
            raise ValidationError(str(e))
        if opening < 0:
            raise ValidationError("Opening balance cannot be negative")
        if not is_whole_cents(opening):
            raise ValidationError("Opening balance cannot have fractions of a cent")

        return self.db.create_profile(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            profession=profession.strip(),
            profile_type=profile_type,
            balance=opening,
        )

    def get_profile(self, profile_id: int) -> Optional[Profile]:
        """Get profile by ID.

        Args:
            profile_id: Profile ID

        Returns:
            Profile entity or None if not found
        """
        return self.db.get_profile(profile_id)

    def list_profiles(self, profile_type: Optional[Union[str, ProfileType]] = None) -> list[Profile]:
        """List profiles, optionally only clients or only contractors."""
        if profile_type is not None:
            profile_type = parse_profile_type(profile_type)
        return self.db.list_profiles(profile_type=profile_type)

    def authenticate(self, profile_id: Optional[int]) -> Profile:
        """Resolve the caller's profile.

        Identity itself is established upstream; this only checks that the
        claimed profile exists.

        Raises:
            UnauthorizedError: If no profile ID is given or it doesn't exist
        """
        if profile_id is None:
            raise UnauthorizedError("A caller profile ID is required")
        profile = self.db.get_profile(profile_id)
        if profile is None:
            raise UnauthorizedError(profile_not_found(profile_id))
        return profile

    def total_balance(self) -> Decimal:
        """Sum of all balances; unchanged by payments."""
        return sum((p.balance for p in self.db.list_profiles()), ZERO)
