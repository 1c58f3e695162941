"""
Content plan: what an export contains, in what order.

The plan is format-agnostic. Both the PDF and the Word exporter walk the
same list of sections, so section order, placeholders and page-break
hints are decided once, here.

Rules:
- Text sections are always emitted ("Not provided" when empty) so two
  exports of the same project type line up section by section.
- Labeled groups are emitted only if at least one sub-field is filled.
- Section order is fixed per project type and never depends on which
  fields are present.
- Within a 9-movement structure, movements 4 and 7 start a new page.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field

from gospelwise.export.branding import (
    format_label,
    format_word_count,
    is_present,
    text_or_placeholder,
)
from gospelwise.projects.models import Project, ProjectType


class SectionKind(str, Enum):
    """How a section's content is shaped."""
    TEXT = "text"
    LABELED_GROUP = "labeled_group"


class Section(BaseModel):
    """One titled unit of exported content."""

    title: str = Field(description="Heading shown above the content")
    kind: SectionKind
    content: Union[str, Dict[str, Optional[str]]] = Field(
        description="Paragraph text, or field key -> value for labeled groups"
    )
    force_page_break_before: bool = Field(
        default=False,
        description="Start this section on a fresh page"
    )
    part: Optional[str] = Field(
        default=None,
        description="Part heading opened by this section, if any"
    )

    def present_fields(self) -> List[Tuple[str, str]]:
        """
        Labeled values to render for a group section.

        Returns:
            (label, value) pairs for filled sub-fields, in plan order.
            Empty for text sections.
        """
        if self.kind is not SectionKind.LABELED_GROUP or not isinstance(self.content, dict):
            return []
        return [
            (format_label(key), value)
            for key, value in self.content.items()
            if is_present(value)
        ]


class ContentPlan(BaseModel):
    """Ordered sections for one project."""
    project_type: ProjectType
    sections: List[Section] = Field(default_factory=list)

    def titles(self) -> List[str]:
        return [section.title for section in self.sections]


# Movement keys and headings, in story order
FICTION_MOVEMENTS: Tuple[Tuple[str, str], ...] = (
    ("openingScene", "Movement 1: Opening Scene"),
    ("hookingMoment", "Movement 2: Hooking Moment"),
    ("firstPlotPoint", "Movement 3: First Plot Point"),
    ("firstPinchPoint", "Movement 4: First Pinch Point"),
    ("midpointShift", "Movement 5: Midpoint Shift"),
    ("secondPinchPoint", "Movement 6: Second Pinch Point"),
    ("secondPlotPoint", "Movement 7: Second Plot Point"),
    ("finalResolution", "Movement 8: Final Resolution"),
    ("worldBackToNormal", "Movement 9: World Back to Normal"),
)

NONFICTION_MOVEMENTS: Tuple[Tuple[str, str], ...] = (
    ("startingWhereTheyAre", "Movement 1: Starting Where They Are"),
    ("hookingWithHope", "Movement 2: Hooking with Hope"),
    ("firstShift", "Movement 3: The First Shift"),
    ("firstWakeUpCall", "Movement 4: The First Wake-Up Call"),
    ("gospelCenteredReframe", "Movement 5: Gospel-Centered Reframe"),
    ("costOfChange", "Movement 6: The Cost of Change"),
    ("finalBreakthrough", "Movement 7: The Final Breakthrough"),
    ("livingTheChange", "Movement 8: Living the Change"),
    ("finalEncouragement", "Movement 9: Final Encouragement"),
)

MOVEMENTS_PER_PAGE = 3

FICTION_PARTS = ("Story Concept", "StoryWise Structure", "Characters", "Story World")
NONFICTION_PARTS = (
    "Part 1: Message Mapping - Pre-Writing Work",
    "Part 2: StoryWise Nonfiction Structure",
)


def _text(title: str, value: Any, page_break: bool = False) -> Section:
    return Section(
        title=title,
        kind=SectionKind.TEXT,
        content=text_or_placeholder(value if isinstance(value, str) else None),
        force_page_break_before=page_break,
    )


def _group(
    title: str,
    fields: Mapping[str, Any],
    page_break: bool = False,
) -> Optional[Section]:
    # All-empty groups are dropped rather than rendered as placeholder rows
    if not any(is_present(value) for value in fields.values()):
        return None
    return Section(
        title=title,
        kind=SectionKind.LABELED_GROUP,
        content={
            key: value if isinstance(value, str) else None
            for key, value in fields.items()
        },
        force_page_break_before=page_break,
    )


def _pick(data: Mapping[str, Any], *keys: str) -> Dict[str, Any]:
    return {key: data.get(key) for key in keys}


def movement_breaks_before(index: int) -> bool:
    """True when the movement at 0-based ``index`` opens a new page (4 and 7)."""
    return index > 0 and index % MOVEMENTS_PER_PAGE == 0


def _movements(
    structure: Optional[Mapping[str, Any]],
    movements: Sequence[Tuple[str, str]],
) -> List[Section]:
    structure = structure or {}
    return [
        _text(title, structure.get(key), page_break=movement_breaks_before(index))
        for index, (key, title) in enumerate(movements)
    ]


def _part(
    title: str,
    sections: Sequence[Optional[Section]],
    page_break: bool = False,
) -> List[Section]:
    """
    Attach a part heading to the first emitted section of a part.

    Omitted groups are filtered first, so the heading (and the part's
    page break) lands on whichever section actually opens the part.
    """
    emitted = [section for section in sections if section is not None]
    if not emitted:
        return []

    update: Dict[str, Any] = {"part": title}
    if page_break:
        update["force_page_break_before"] = True
    emitted[0] = emitted[0].model_copy(update=update)
    return emitted


def _fiction_sections(data: Mapping[str, Any]) -> List[Section]:
    overview = _pick(data, "title", "genre", "targetAudience")
    overview["wordCountGoal"] = format_word_count(data.get("wordCountGoal"))

    concept = [
        _group("Project Overview", overview),
        _text("One-Line Premise", data.get("premise")),
        _text("Story Description", data.get("description")),
        _text("Central Theme", data.get("theme")),
        _text("Faith Element", data.get("faithElement")),
        _group("Key Story Arc", _pick(data, "storyBeginning", "storyMiddle", "storyEnd")),
        _text("Reader Transformation", data.get("readerTransformation")),
    ]

    characters = [
        _group("Protagonist", _pick(data, "protagonist", "protagonistGoals", "protagonistFlaw")),
        _group("Antagonist", _pick(data, "antagonist", "antagonistMotivations")),
        _text("Supporting Characters", data.get("supportingCharacters"), page_break=True),
    ]

    world = [
        _group("Setting & Time Period", _pick(data, "setting", "timePeriod")),
        _text("World Rules", data.get("worldRules")),
        _group("Conflict & Stakes", _pick(data, "conflict", "stakes")),
        _text("Spiritual Elements", data.get("spiritualElements"), page_break=True),
    ]

    concept_part, structure_part, characters_part, world_part = FICTION_PARTS
    return (
        _part(concept_part, concept)
        + _part(structure_part, _movements(data.get("storyStructure"), FICTION_MOVEMENTS), page_break=True)
        + _part(characters_part, characters, page_break=True)
        + _part(world_part, world, page_break=True)
    )


def _nonfiction_sections(data: Mapping[str, Any]) -> List[Section]:
    persona = data.get("readerPersona") or {}

    mapping = [
        _text("Kingdom Concept", data.get("kingdomConcept")),
        _group(
            "Reader Persona",
            _pick(persona, "lifeStage", "struggle", "desire", "objections"),
            page_break=True,
        ),
        _text("Core Themes", data.get("coreThemes"), page_break=True),
        _text("Source Material", data.get("sourceMaterial"), page_break=True),
        _text("Holy Spirit Insights", data.get("holySpirit"), page_break=True),
    ]

    mapping_part, structure_part = NONFICTION_PARTS
    return (
        _part(mapping_part, mapping)
        + _part(
            structure_part,
            _movements(data.get("nonfictionStructure"), NONFICTION_MOVEMENTS),
            page_break=True,
        )
    )


def build_content_plan(project: Project) -> ContentPlan:
    """
    Build the ordered section list for a project.

    Args:
        project: Project to export; only its type and content are read

    Returns:
        ContentPlan whose section order depends only on the project type
    """
    data = project.model_dump(by_alias=True)

    if project.project_type is ProjectType.NONFICTION:
        sections = _nonfiction_sections(data)
    else:
        sections = _fiction_sections(data)

    return ContentPlan(project_type=project.project_type, sections=sections)
