"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for business-rule violations.

    These are deterministic for a given input and are reported to the caller
    with their message. Subclasses provide semantic categories while
    preserving ValueError compatibility.
    """


class ValidationError(DomainError):
    """Invalid or missing input."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class InvalidStateError(DomainError):
    """Operation does not apply to the entity's current state."""


class UnauthorizedError(DomainError):
    """Caller is not entitled to act on the entity."""


class InsufficientFundsError(DomainError):
    """Balance too low for the requested debit."""


class LimitExceededError(DomainError):
    """Requested amount is above the allowed ceiling."""


class InternalError(Exception):
    """Unexpected store or infrastructure failure.

    The message is safe to show to callers; the underlying exception is kept
    as ``__cause__`` and logged where it is raised.
    """

    def __init__(self, message: str = "Internal error"):
        super().__init__(message)


def job_not_found() -> str:
    """Return message for a missing job."""
    return "Job not found"


def job_already_paid() -> str:
    """Return message for paying a job twice."""
    return "Already paid"


def wrong_job() -> str:
    """Return message when the caller is not the job's client."""
    return "Wrong job id"


def insufficient_balance() -> str:
    """Return message when the client cannot cover the job price."""
    return "Client's balance is insufficient for payment"


def client_not_found() -> str:
    """Return message for a missing deposit target."""
    return "Client not found"


def deposit_limit_exceeded() -> str:
    """Return message when a deposit is above the ceiling."""
    return "Deposit amount exceeds the maximum allowed"


def window_required() -> str:
    """Return message when a report window bound is missing."""
    return "Both start and end parameters are required"


def profile_not_found(profile_id: int) -> str:
    """Return message for a missing profile."""
    return f"Profile {profile_id} not found"


def contract_not_found(contract_id: int) -> str:
    """Return message for a missing or inaccessible contract."""
    return f"Contract {contract_id} not found"
