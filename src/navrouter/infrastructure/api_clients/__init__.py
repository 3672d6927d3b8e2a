"""
External API clients.
"""

from .base import APIClient
from .project_updates_client import ProjectUpdatesClient

__all__ = ["APIClient", "ProjectUpdatesClient"]
