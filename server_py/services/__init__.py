"""Services module."""
from services.requirements_service import RequirementsService

__all__ = [
    "RequirementsService",
]
