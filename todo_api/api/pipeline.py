"""
Request pipeline — the ordered validation gate in front of each route.

A step is a plain function ``RequestContext -> RequestContext | TodoApiError``.
It either returns a copy of the context augmented with whatever it resolved,
or returns (never raises) the error that should end the request.
``run_pipeline`` applies steps in order and stops at the first error.

Routes compose their gate explicitly:

    ctx: Annotated[RequestContext, Depends(gate(resolve_user_by_header,
                                                check_todo_quota))]

``gate`` is the only place an error becomes an exception; the app-level
handler turns it into ``{"error": ...}`` with the error's status code.
Steps are read-only with respect to the store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Union

from fastapi import Request

from todo_api.api.deps import DatabaseDep, SettingsDep, UsernameHeader
from todo_api.core.errors import (
    InvalidIdentifier,
    QuotaExceeded,
    TodoApiError,
    TodoNotFound,
    UserNotFound,
)
from todo_api.core.identifiers import is_valid_identifier
from todo_api.dao.todo_dao import TodoDAO
from todo_api.dao.user_dao import UserDAO
from todo_api.models.todo import Todo
from todo_api.models.user import User
from todo_api.services.policy import FREE_PLAN_TODO_LIMIT, can_create_todo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    users: UserDAO
    todos: TodoDAO
    username: str | None = None
    path_params: dict[str, str] = field(default_factory=dict)
    todo_limit: int = FREE_PLAN_TODO_LIMIT
    # Filled in by the steps
    user: User | None = None
    todo: Todo | None = None


StepResult = Union[RequestContext, TodoApiError]
Step = Callable[[RequestContext], StepResult]


# ── Steps ─────────────────────────────────────────────────────────────────────

def resolve_user_by_header(ctx: RequestContext) -> StepResult:
    user = ctx.users.get_by_username(ctx.username)
    if user is None:
        return UserNotFound("username not found.")
    return replace(ctx, user=user)


def resolve_user_by_path_id(ctx: RequestContext) -> StepResult:
    user = ctx.users.get(ctx.path_params.get("user_id", ""))
    if user is None:
        return UserNotFound("user not found.")
    return replace(ctx, user=user)


def check_todo_quota(ctx: RequestContext) -> StepResult:
    if ctx.user is None:
        raise RuntimeError("check_todo_quota needs a user-resolving step before it")
    if not can_create_todo(ctx.user, ctx.todo_limit):
        return QuotaExceeded.for_limit(ctx.todo_limit)
    return ctx


def resolve_todo(ctx: RequestContext) -> StepResult:
    """Resolve the path todo within the current user's list.

    Falls back to the username header when no earlier step resolved a user.
    """
    if ctx.user is None:
        resolved = resolve_user_by_header(ctx)
        if isinstance(resolved, TodoApiError):
            return resolved
        ctx = resolved

    todo_id = ctx.path_params.get("todo_id")
    if not is_valid_identifier(todo_id):
        return InvalidIdentifier()

    todo = ctx.todos.get(ctx.user, todo_id)  # type: ignore[arg-type]
    if todo is None:
        return TodoNotFound()
    return replace(ctx, todo=todo)


# ── Composition ───────────────────────────────────────────────────────────────

def run_pipeline(ctx: RequestContext, steps: Iterable[Step]) -> StepResult:
    for step in steps:
        result = step(ctx)
        if isinstance(result, TodoApiError):
            return result
        ctx = result
    return ctx


def gate(*steps: Step) -> Callable[..., RequestContext]:
    """Build a FastAPI dependency that runs ``steps`` and yields the context."""

    def dependency(
        request: Request,
        db: DatabaseDep,
        settings: SettingsDep,
        username: UsernameHeader = None,
    ) -> RequestContext:
        ctx = RequestContext(
            users=UserDAO(db),
            todos=TodoDAO(db),
            username=username,
            path_params=dict(request.path_params),
            todo_limit=settings.free_plan_todo_limit,
        )
        result = run_pipeline(ctx, steps)
        if isinstance(result, TodoApiError):
            logger.debug(
                "%s %s rejected: %s (%d)",
                request.method,
                request.url.path,
                result.message,
                result.status_code,
            )
            raise result
        return result

    return dependency
