"""
Services package for the REAPER project workspace.

This package contains service classes that provide business logic
for different aspects of the workspace:
- QueryService: queries, searches, and item extraction
- ProjectService: project loading and reloading
"""

from .query_service import QueryService
from .project_service import ProjectService

__all__ = [
    "QueryService",
    "ProjectService",
]
