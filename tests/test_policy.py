"""Unit tests for the plan quota rule"""

from datetime import datetime

from todo_api.models.todo import Todo
from todo_api.models.user import User
from todo_api.services.policy import FREE_PLAN_TODO_LIMIT, can_create_todo


def _user_with(n, pro=False):
    user = User(name="A", username="a", pro=pro)
    user.todos.extend(Todo(title=f"t{i}", deadline=datetime(2025, 1, 1)) for i in range(n))
    return user


def test_default_limit_is_ten():
    assert FREE_PLAN_TODO_LIMIT == 10


def test_free_user_under_limit():
    assert can_create_todo(_user_with(0))
    assert can_create_todo(_user_with(9))


def test_free_user_at_limit():
    assert not can_create_todo(_user_with(10))
    assert not can_create_todo(_user_with(11))


def test_pro_user_is_uncapped():
    assert can_create_todo(_user_with(10, pro=True))
    assert can_create_todo(_user_with(50, pro=True))


def test_custom_limit():
    assert can_create_todo(_user_with(2), limit=3)
    assert not can_create_todo(_user_with(3), limit=3)
