"""Plan rules: who may register another todo."""

from todo_api.models.user import User

FREE_PLAN_TODO_LIMIT = 10


def can_create_todo(user: User, limit: int = FREE_PLAN_TODO_LIMIT) -> bool:
    """Pro users are uncapped; free users may hold up to ``limit`` todos."""
    return user.pro or len(user.todos) < limit
