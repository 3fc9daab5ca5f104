"""
Business logic for operator accounts.

Operators are stored in the ``users`` table with PBKDF2 password
hashes.  The default operator is created from settings when the
application starts; ``authenticate`` is what ``POST /api/login`` uses
to check credentials.
"""

import logging
from typing import Optional

from event_registry_api.app.core.db import Database
from event_registry_api.app.core.security import hash_password, verify_password
from event_registry_api.app.schemas.user import UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Service for operator accounts."""

    @classmethod
    async def ensure_operator(cls, db: Database, username: str, password: str) -> bool:
        """Create the operator ``username`` unless it already exists.

        Returns ``True`` if a new row was inserted.  An existing
        operator keeps its current password.
        """
        with db.transaction() as cursor:
            row = cursor.execute("SELECT id FROM users WHERE username = ?", (username,)).fetchone()
            if row:
                return False
            cursor.execute(
                "INSERT INTO users (username, password) VALUES (?, ?)",
                (username, hash_password(password)),
            )
        logger.info("Created operator account '%s'", username)
        return True

    @classmethod
    async def authenticate(cls, db: Database, username: str, password: str) -> Optional[UserRead]:
        """Return the operator if ``password`` matches, otherwise ``None``."""
        with db.transaction() as cursor:
            row = cursor.execute(
                "SELECT id, username, password FROM users WHERE username = ?",
                (username,),
            ).fetchone()
        if not row or not verify_password(password, row["password"]):
            return None
        return UserRead(id=row["id"], username=row["username"])

    @classmethod
    async def set_password(cls, db: Database, username: str, password: str) -> bool:
        """Replace an operator's password.  Returns ``False`` if no such operator exists."""
        with db.transaction() as cursor:
            cursor.execute(
                "UPDATE users SET password = ? WHERE username = ?",
                (hash_password(password), username),
            )
            updated = cursor.rowcount > 0
        if updated:
            logger.info("Password changed for operator '%s'", username)
        return updated
