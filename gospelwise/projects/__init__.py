"""
Project input models for the GospelWise planner.

Projects arrive from the persistence layer already validated; these
models only give the export pipeline typed, read-only access.
"""

from gospelwise.projects.models import (
    ProjectType,
    ReaderPersona,
    StoryStructure,
    NonfictionStructure,
    Project,
    Author,
)

__all__ = [
    "ProjectType",
    "ReaderPersona",
    "StoryStructure",
    "NonfictionStructure",
    "Project",
    "Author",
]
