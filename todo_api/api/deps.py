"""
FastAPI dependency functions shared across all route modules.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, Request

from todo_api.core.config import Settings
from todo_api.dao.base import Database
from todo_api.services.todo_service import TodoService
from todo_api.services.user_service import UserService


def get_db(request: Request) -> Database:
    """The per-application store created in ``main.lifespan``."""
    return request.app.state.db


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


DatabaseDep = Annotated[Database, Depends(get_db)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]

# Stand-in for authentication: callers name themselves in a plain header.
UsernameHeader = Annotated[str | None, Header()]


def get_user_service(db: DatabaseDep) -> UserService:
    return UserService(db)


def get_todo_service(db: DatabaseDep, settings: SettingsDep) -> TodoService:
    return TodoService(db, todo_limit=settings.free_plan_todo_limit)


# ── Convenient type aliases for route signatures ───────────────────────────────

UserServiceDep = Annotated[UserService, Depends(get_user_service)]
TodoServiceDep = Annotated[TodoService, Depends(get_todo_service)]
