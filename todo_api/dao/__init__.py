from todo_api.dao.base import Database
from todo_api.dao.todo_dao import TodoDAO
from todo_api.dao.user_dao import UserDAO

__all__ = [
    "Database",
    "TodoDAO",
    "UserDAO",
]
