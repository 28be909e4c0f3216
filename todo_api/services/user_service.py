"""
UserService — POST /users, GET /users/{user_id}, PATCH /users/{user_id}/pro

Users are never deleted; the only state transition after creation is the
one-way free → pro upgrade.
"""

from __future__ import annotations

import logging

from todo_api.dao.base import Database
from todo_api.dao.user_dao import UserDAO
from todo_api.models.user import User, UserCreateRequest

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Database) -> None:
        self._dao = UserDAO(db)

    def create(self, body: UserCreateRequest) -> User:
        """Register a new free-plan user. Raises UsernameTaken on duplicates."""
        user = self._dao.create(body.name, body.username)
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def upgrade_to_pro(self, user: User) -> User:
        """Raises AlreadyPro if the user is already on the pro plan."""
        user = self._dao.set_pro(user)
        logger.info("User %s upgraded to pro", user.id)
        return user
