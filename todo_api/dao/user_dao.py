"""
UserDAO

Layout:
  Database.users — ordered list of User, insertion order
  Lookups are linear scans; usernames match exactly (case-sensitive).
"""

from __future__ import annotations

from todo_api.core.errors import AlreadyPro, UsernameTaken
from todo_api.dao.base import BaseDAO
from todo_api.models.user import User


class UserDAO(BaseDAO):

    # ── Write ─────────────────────────────────────────────────────────────────

    def create(self, name: str, username: str) -> User:
        """
        Append a new free-plan user with an empty todo list.
        Raises UsernameTaken if the username is already registered.
        """
        with self.lock:
            if self.get_by_username(username) is not None:
                raise UsernameTaken()
            user = User(name=name, username=username)
            self._db.users.append(user)
            return user

    def set_pro(self, user: User) -> User:
        """Promote to the pro plan. Raises AlreadyPro on a second call."""
        with self.lock:
            if user.pro:
                raise AlreadyPro()
            user.pro = True
            return user

    # ── Read ──────────────────────────────────────────────────────────────────

    def get(self, user_id: str) -> User | None:
        with self.lock:
            return next((u for u in self._db.users if u.id == user_id), None)

    def get_by_username(self, username: str | None) -> User | None:
        if username is None:
            return None
        with self.lock:
            return next(
                (u for u in self._db.users if u.username == username), None
            )

    def list_all(self) -> list[User]:
        with self.lock:
            return list(self._db.users)
