"""
TodoDAO

Layout:
  User.todos — ordered list of Todo owned by that user, insertion order

Every operation is scoped to the owning user; a Todo is never reachable
through anything but its owner's list.
"""

from __future__ import annotations

from datetime import datetime

from todo_api.dao.base import BaseDAO
from todo_api.models.todo import Todo
from todo_api.models.user import User


class TodoDAO(BaseDAO):

    # ── Write ─────────────────────────────────────────────────────────────────

    def create(self, user: User, title: str, deadline: datetime) -> Todo:
        """Append a new open todo. Quota must already have been checked."""
        todo = Todo(title=title, deadline=deadline)
        with self.lock:
            user.todos.append(todo)
        return todo

    def update(self, todo: Todo, title: str, deadline: datetime) -> Todo:
        """Overwrite title and deadline; done and created_at are untouched."""
        with self.lock:
            todo.title = title
            todo.deadline = deadline
        return todo

    def mark_done(self, todo: Todo) -> Todo:
        with self.lock:
            todo.done = True
        return todo

    def delete(self, user: User, todo: Todo) -> bool:
        """Remove ``todo`` (by identity) from the user's list."""
        with self.lock:
            for i, item in enumerate(user.todos):
                if item is todo:
                    del user.todos[i]
                    return True
        return False

    # ── Read ──────────────────────────────────────────────────────────────────

    def list_by_user(self, user: User) -> list[Todo]:
        with self.lock:
            return list(user.todos)

    def get(self, user: User, todo_id: str) -> Todo | None:
        with self.lock:
            return next((t for t in user.todos if t.id == todo_id), None)
