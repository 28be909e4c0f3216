"""
Todos router — mounted at /todos

Every route identifies the caller through the ``username`` header.  The
gate in front of each route resolves the user (and the todo, for the
``/{todo_id}`` routes) before the handler runs; see ``api.pipeline``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from todo_api.api.deps import TodoServiceDep
from todo_api.api.pipeline import (
    RequestContext,
    check_todo_quota,
    gate,
    resolve_todo,
    resolve_user_by_header,
)
from todo_api.models.todo import TodoCreateRequest, TodoResponse, TodoUpdateRequest

router = APIRouter()

CurrentUser = Annotated[RequestContext, Depends(gate(resolve_user_by_header))]
CurrentUserWithQuota = Annotated[
    RequestContext, Depends(gate(resolve_user_by_header, check_todo_quota))
]
CurrentTodo = Annotated[RequestContext, Depends(gate(resolve_todo))]
OwnedTodo = Annotated[
    RequestContext, Depends(gate(resolve_user_by_header, resolve_todo))
]


# ── GET /todos  ───────────────────────────────────────────────────────────────

@router.get(
    "",
    response_model=list[TodoResponse],
    summary="List my todos",
)
def list_todos(ctx: CurrentUser, svc: TodoServiceDep) -> list[TodoResponse]:
    """Return the caller's todos in creation order."""
    todos = svc.list_for(ctx.user)  # type: ignore[arg-type]
    return [TodoResponse.model_validate(t) for t in todos]


# ── POST /todos  ──────────────────────────────────────────────────────────────

@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create todo",
)
def create_todo(
    body: TodoCreateRequest,
    ctx: CurrentUserWithQuota,
    svc: TodoServiceDep,
) -> TodoResponse:
    """Free users are capped at 10 todos; pro users are not."""
    todo = svc.create(ctx.user, body)  # type: ignore[arg-type]
    return TodoResponse.model_validate(todo)


# ── PUT /todos/{todo_id}  ─────────────────────────────────────────────────────

@router.put(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Replace todo title and deadline",
)
def update_todo(
    body: TodoUpdateRequest,
    ctx: CurrentTodo,
    svc: TodoServiceDep,
) -> TodoResponse:
    todo = svc.update(ctx.todo, body)  # type: ignore[arg-type]
    return TodoResponse.model_validate(todo)


# ── PATCH /todos/{todo_id}/done  ──────────────────────────────────────────────

@router.patch(
    "/{todo_id}/done",
    response_model=TodoResponse,
    summary="Mark todo as done",
)
def mark_todo_done(ctx: CurrentTodo, svc: TodoServiceDep) -> TodoResponse:
    """Idempotent — marking a done todo again returns it unchanged."""
    todo = svc.mark_done(ctx.todo)  # type: ignore[arg-type]
    return TodoResponse.model_validate(todo)


# ── DELETE /todos/{todo_id}  ──────────────────────────────────────────────────

@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete todo",
)
def delete_todo(ctx: OwnedTodo, svc: TodoServiceDep) -> None:
    svc.delete(ctx.user, ctx.todo)  # type: ignore[arg-type]
