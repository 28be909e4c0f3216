"""
Users router — mounted at /users
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from todo_api.api.deps import UserServiceDep
from todo_api.api.pipeline import RequestContext, gate, resolve_user_by_path_id
from todo_api.models.user import UserCreateRequest, UserResponse

router = APIRouter()

UserByPathId = Annotated[RequestContext, Depends(gate(resolve_user_by_path_id))]


# ── POST /users  ──────────────────────────────────────────────────────────────

@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(
    body: UserCreateRequest,
    svc: UserServiceDep,
) -> UserResponse:
    """Register a free-plan user. Usernames must be unique."""
    user = svc.create(body)
    return UserResponse.model_validate(user)


# ── GET /users/{user_id}  ─────────────────────────────────────────────────────

@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
def get_user(ctx: UserByPathId) -> UserResponse:
    return UserResponse.model_validate(ctx.user)


# ── PATCH /users/{user_id}/pro  ───────────────────────────────────────────────

@router.patch(
    "/{user_id}/pro",
    response_model=UserResponse,
    summary="Upgrade user to the pro plan",
)
def upgrade_to_pro(ctx: UserByPathId, svc: UserServiceDep) -> UserResponse:
    """
    One-way transition free → pro; lifts the todo cap.
    Calling it on a pro user is rejected with 400.
    """
    user = svc.upgrade_to_pro(ctx.user)  # type: ignore[arg-type]
    return UserResponse.model_validate(user)
