"""Domain models for organization snapshots."""

from .employee import Employee
from .organization import Organization

__all__ = ["Employee", "Organization"]
