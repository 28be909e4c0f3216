"""
TodoService — business logic for a user's todo list.

Responsibilities:
  - Quota enforcement on create (re-checked under the store lock, so two
    concurrent requests that both passed the gate cannot overshoot it)
  - Field replacement / done transition
  - Removal from the owner's list

Ownership is already settled by the request pipeline: every method here
receives a user and, where relevant, a todo resolved from that user's list.
"""

from __future__ import annotations

import logging

from todo_api.core.errors import QuotaExceeded, TodoNotFound
from todo_api.dao.base import Database
from todo_api.dao.todo_dao import TodoDAO
from todo_api.models.todo import Todo, TodoCreateRequest, TodoUpdateRequest
from todo_api.models.user import User
from todo_api.services.policy import FREE_PLAN_TODO_LIMIT, can_create_todo

logger = logging.getLogger(__name__)


class TodoService:

    def __init__(self, db: Database, todo_limit: int = FREE_PLAN_TODO_LIMIT) -> None:
        self._dao = TodoDAO(db)
        self._todo_limit = todo_limit

    # ── Queries ───────────────────────────────────────────────────────────────

    def list_for(self, user: User) -> list[Todo]:
        return self._dao.list_by_user(user)

    # ── CRUD ──────────────────────────────────────────────────────────────────

    def create(self, user: User, body: TodoCreateRequest) -> Todo:
        with self._dao.lock:
            if not can_create_todo(user, self._todo_limit):
                raise QuotaExceeded.for_limit(self._todo_limit)
            todo = self._dao.create(user, body.title, body.deadline)
        logger.info("User %s created todo %s", user.id, todo.id)
        return todo

    def update(self, todo: Todo, body: TodoUpdateRequest) -> Todo:
        return self._dao.update(todo, body.title, body.deadline)

    def mark_done(self, todo: Todo) -> Todo:
        """Idempotent: marking an already-done todo is not an error."""
        return self._dao.mark_done(todo)

    def delete(self, user: User, todo: Todo) -> None:
        if not self._dao.delete(user, todo):
            # Unreachable when the todo was resolved from this user's list
            raise TodoNotFound("Todo not found")
        logger.info("User %s deleted todo %s", user.id, todo.id)
