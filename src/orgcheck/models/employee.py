"""Canonical employee record shared by ingestion, resolution and analysis."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Employee(BaseModel):
    """Immutable employee record; identity and equality are by ``id``."""

    id: int = Field(..., gt=0)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    salary: int = Field(..., ge=0)
    manager_id: Optional[int] = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_root(self) -> bool:
        return self.manager_id is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.full_name} (id={self.id})"
