"""
Todo entity and its Pydantic schemas.

Todos live inside their owning User's ``todos`` list; nothing else holds
a reference to them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from todo_api.core.identifiers import new_identifier


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Entity ────────────────────────────────────────────────────────────────────

@dataclass(eq=False)
class Todo:
    title: str
    deadline: datetime
    id: str = field(default_factory=new_identifier)
    done: bool = False
    created_at: datetime = field(default_factory=_utcnow)


# ── Request bodies ────────────────────────────────────────────────────────────

class TodoCreateRequest(BaseModel):
    title: str
    deadline: datetime


class TodoUpdateRequest(BaseModel):
    """Full replacement of the mutable fields."""
    title: str
    deadline: datetime


# ── Responses ─────────────────────────────────────────────────────────────────

class TodoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    deadline: datetime
    done: bool
    created_at: datetime
