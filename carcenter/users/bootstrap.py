"""Create the configured administrator account at startup."""

from __future__ import annotations

import structlog
from pydantic import ValidationError

from carcenter.config import Settings
from carcenter.db.engine import Database
from carcenter.errors import DuplicateUser
from carcenter.users.repository import UserRepository
from carcenter.users.schemas import UserCreateRequest
from carcenter.users.service import UserService

logger = structlog.get_logger()

ADMIN_ROLE = "ADMIN"


async def ensure_admin(db: Database, settings: Settings) -> bool:
    """Create the ``CARCENTER_ADMIN_*`` account if it does not exist yet.

    Returns True if a user was created. An existing account of that
    username is left untouched, including its password. A configuration
    that breaks the account rules (password length, e-mail format) is
    logged as ``admin_bootstrap_invalid`` and skipped.
    """
    if not settings.admin_bootstrap_enabled:
        logger.info("admin_bootstrap_skipped")
        return False

    try:
        request = UserCreateRequest(
            username=settings.admin_username,
            email=settings.admin_email,
            password=settings.admin_password,
            name="Administrator",
        )
    except ValidationError as exc:
        # Field names and messages only; the input would echo the password.
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        logger.error("admin_bootstrap_invalid", username=settings.admin_username, errors=errors)
        return False

    async with db.session() as session:
        users = UserRepository(session)
        if await users.find_by_username(settings.admin_username) is not None:
            logger.info("admin_bootstrap_exists", username=settings.admin_username)
            return False

        try:
            await UserService(users).create_user(request, role=ADMIN_ROLE)
        except DuplicateUser:
            # Another worker won the race, or the e-mail belongs to someone else.
            logger.warning("admin_bootstrap_conflict", username=settings.admin_username)
            return False

    logger.info("admin_bootstrap_created", username=settings.admin_username)
    return True
