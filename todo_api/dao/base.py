"""
In-memory backing store shared by all DAOs.

One ``Database`` is created per application (see ``main.lifespan``) and kept
on ``app.state``.  Nothing is persisted; the data dies with the process.
"""

import threading

from todo_api.models.user import User


class Database:
    def __init__(self) -> None:
        self.users: list[User] = []
        # Sync routes run in a thread pool; every check-then-act goes through this
        self.lock = threading.RLock()

    def clear(self) -> None:
        with self.lock:
            self.users.clear()


class BaseDAO:
    def __init__(self, db: Database) -> None:
        self._db = db

    @property
    def lock(self) -> threading.RLock:
        return self._db.lock
