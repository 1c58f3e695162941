"""
Pydantic models for planner projects.

Provides data structures for:
- Project type enumeration (fiction, nonfiction)
- Nested planner groups (reader persona, 9-movement structures)
- The project record and its author

Keys are stored camelCase by the planner (``faithElement``,
``readerPersona``); models accept either camelCase or snake_case and
ignore bookkeeping columns (``id``, ``userId``, ``createdAt``, ...).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ProjectType(str, Enum):
    """Book categories supported by the planner."""
    FICTION = "fiction"
    NONFICTION = "nonfiction"


class _PlannerModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class ReaderPersona(_PlannerModel):
    """Non-fiction "character": who the book is written for."""
    life_stage: Optional[str] = None
    struggle: Optional[str] = None
    desire: Optional[str] = None
    objections: Optional[str] = None


class StoryStructure(_PlannerModel):
    """StoryWise fiction structure, one field per movement."""
    opening_scene: Optional[str] = None
    hooking_moment: Optional[str] = None
    first_plot_point: Optional[str] = None
    first_pinch_point: Optional[str] = None
    midpoint_shift: Optional[str] = None
    second_pinch_point: Optional[str] = None
    second_plot_point: Optional[str] = None
    final_resolution: Optional[str] = None
    world_back_to_normal: Optional[str] = None


class NonfictionStructure(_PlannerModel):
    """StoryWise non-fiction structure, one field per movement."""
    starting_where_they_are: Optional[str] = None
    hooking_with_hope: Optional[str] = None
    first_shift: Optional[str] = None
    first_wake_up_call: Optional[str] = None
    gospel_centered_reframe: Optional[str] = None
    cost_of_change: Optional[str] = None
    final_breakthrough: Optional[str] = None
    living_the_change: Optional[str] = None
    final_encouragement: Optional[str] = None


class Project(_PlannerModel):
    """
    A planner project as handed to the export pipeline.

    Every content field is optional; the export decides how missing
    values are shown.
    """

    title: Optional[str] = Field(default=None, description="Working title")
    project_type: ProjectType = Field(alias="type", description="fiction or nonfiction")
    genre: Optional[str] = None
    target_audience: Optional[str] = None
    word_count_goal: Optional[int] = Field(
        default=None,
        ge=0,
        description="Target manuscript length in words"
    )

    # Fiction: story concept
    premise: Optional[str] = None
    description: Optional[str] = None
    theme: Optional[str] = None
    faith_element: Optional[str] = None
    story_beginning: Optional[str] = None
    story_middle: Optional[str] = None
    story_end: Optional[str] = None
    reader_transformation: Optional[str] = None
    story_structure: Optional[StoryStructure] = None

    # Fiction: characters
    protagonist: Optional[str] = None
    protagonist_goals: Optional[str] = None
    protagonist_flaw: Optional[str] = None
    antagonist: Optional[str] = None
    antagonist_motivations: Optional[str] = None
    supporting_characters: Optional[str] = None

    # Fiction: story world
    setting: Optional[str] = None
    time_period: Optional[str] = None
    world_rules: Optional[str] = None
    conflict: Optional[str] = None
    stakes: Optional[str] = None
    spiritual_elements: Optional[str] = None

    # Non-fiction: message mapping
    kingdom_concept: Optional[str] = None
    reader_persona: Optional[ReaderPersona] = None
    core_themes: Optional[str] = None
    source_material: Optional[str] = None
    holy_spirit: Optional[str] = None
    nonfiction_structure: Optional[NonfictionStructure] = None

    @field_validator('word_count_goal', mode='before')
    @classmethod
    def blank_word_count_goal(cls, v):
        """The planner stores a cleared goal as an empty string."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Author(_PlannerModel):
    """The signed-in user, used for the cover attribution line."""
    name: Optional[str] = None
