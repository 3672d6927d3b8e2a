"""
Domain models.
"""

from .models import (
    Project,
    Update,
    NavigationRequest,
    UpdateParams,
    ProjectAndUpdate,
)

__all__ = [
    "Project",
    "Update",
    "NavigationRequest",
    "UpdateParams",
    "ProjectAndUpdate",
]
