"""Inheritance requests: schemas, workflow service and storage."""

from landregistry.inheritance.models import InheritanceRequest
from landregistry.inheritance.service import InheritanceService, InheritanceStateError

__all__ = ["InheritanceRequest", "InheritanceService", "InheritanceStateError"]
