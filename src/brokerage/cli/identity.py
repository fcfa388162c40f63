"""CLI helpers for resolving the calling profile."""

from __future__ import annotations

import click

from brokerage.domain.entities import Profile
from brokerage.domain.errors import DomainError, InternalError
from brokerage.domain.profile import ProfileService
from brokerage.cli.error_handling import handle_domain_error, handle_internal_error


def require_caller(ctx: click.Context) -> Profile:
    """Resolve the --profile-id option to a profile, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands
    that act on behalf of a caller.
    """
    root = ctx.find_root()
    service = ProfileService(root.obj["db"])
    try:
        return service.authenticate(root.obj.get("profile_id"))
    except DomainError as e:
        handle_domain_error(ctx, e)
    except InternalError as e:
        handle_internal_error(ctx, e)
