"""
User entity and its Pydantic schemas.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from todo_api.core.identifiers import new_identifier
from todo_api.models.todo import Todo, TodoResponse


@dataclass(eq=False)
class User:
    name: str
    username: str
    id: str = field(default_factory=new_identifier)
    pro: bool = False
    todos: list[Todo] = field(default_factory=list)


class UserCreateRequest(BaseModel):
    name: str
    username: str


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    username: str
    pro: bool
    todos: list[TodoResponse] = Field(default_factory=list)
