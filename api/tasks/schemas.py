"""
Task API schemas (request/response models).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class TaskCreateRequest(BaseModel):
    # Title presence and the description type are checked in the service,
    # title first, so a body without a title always gets "Title is required"
    # whatever else it carries.
    title: str | None = None
    description: Any = None


class TaskUpdateRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    completed: bool | None = None

    def supplied_fields(self) -> dict:
        """
        Only the keys the client actually sent (an explicit null counts).
        """
        return {name: getattr(self, name) for name in self.model_fields_set}


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str | None = None
    completed: bool = False
