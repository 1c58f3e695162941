# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds the project root to sys.path so `import gospelwise` and `import api` work
without an editable install.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from gospelwise.projects import Author, Project  # noqa: E402


FICTION_DATA = {
    "id": "b6a1c0de-0000-4000-8000-000000000001",
    "userId": "user-1",
    "title": "The Lantern Keeper",
    "type": "fiction",
    "genre": "Historical Fiction",
    "targetAudience": "Adult readers of faith-based fiction",
    "wordCountGoal": 80000,
    "premise": "A lighthouse keeper must choose between safety and a stranger's rescue.",
    "description": "On a storm-battered coast in 1887, Ada keeps the light her father left her.",
    "theme": "Love casts out fear.",
    "faithElement": "Ada learns to trust God's provision through loss.",
    "storyBeginning": "Ada's father dies and the light passes to her.",
    "storyMiddle": "A shipwreck brings a stranger with a secret.",
    "storyEnd": "Ada risks the light to save the village.",
    "readerTransformation": "Readers see courage as obedience, not the absence of fear.",
    "protagonist": "Ada Whitcombe, 24, stubborn and capable.",
    "protagonistGoals": "Keep the light burning and the inspector satisfied.",
    "protagonistFlaw": "Refuses help; learns to receive it.",
    "antagonist": "Silas Crane, the harbour master.",
    "antagonistMotivations": "Wants the lighthouse land for the railway.",
    "supportingCharacters": "Tom the fisherman; Mrs. Penrose the widow.",
    "setting": "A Cornish fishing village.",
    "timePeriod": "Winter of 1887.",
    "worldRules": "The light must be lit at dusk, every night, no exceptions.",
    "conflict": "Ada against Crane for the future of the light.",
    "stakes": "The village's ships and Ada's home.",
    "spiritualElements": "Psalm 107 threads through the storm scenes.",
    "storyStructure": {
        "openingScene": "Ada trims the wick the night of the funeral.",
        "hookingMoment": "A distress flare over the reef.",
        "firstPlotPoint": "Ada hides the stranger from Crane.",
        "firstPinchPoint": "Crane threatens an inspection.",
        "midpointShift": "The stranger's identity is revealed.",
        "secondPinchPoint": "The village turns on Ada.",
        "secondPlotPoint": "The great storm arrives.",
        "finalResolution": "Ada keeps the light and the ships come home.",
        "worldBackToNormal": "Spring, and a new keeper's cottage.",
    },
}

NONFICTION_DATA = {
    "title": "Rooted",
    "type": "nonfiction",
    "genre": "Christian Living",
    "kingdomConcept": "Growth in the kingdom starts underground.",
    "readerPersona": {
        "lifeStage": "Young mothers",
        "struggle": "Spiritual dryness",
        "desire": "A daily walk with God",
        "objections": "No time to read the Bible",
    },
    "coreThemes": "Abiding, rest, fruitfulness.",
    "sourceMaterial": "John 15; personal journals.",
    "holySpirit": "Notes from a season of prayer.",
    "nonfictionStructure": {
        "startingWhereTheyAre": "Exhausted and guilty.",
        "hookingWithHope": "Roots grow in winter.",
        "firstShift": "From striving to abiding.",
        "firstWakeUpCall": "Busyness is not fruitfulness.",
        "gospelCenteredReframe": "Christ is the vine.",
        "costOfChange": "Letting go of control.",
        "finalBreakthrough": "Rest as worship.",
        "livingTheChange": "Five-minute rhythms.",
        "finalEncouragement": "You are already held.",
    },
}


@pytest.fixture
def fiction_data() -> dict:
    return {**FICTION_DATA, "storyStructure": dict(FICTION_DATA["storyStructure"])}


@pytest.fixture
def nonfiction_data() -> dict:
    return {
        **NONFICTION_DATA,
        "readerPersona": dict(NONFICTION_DATA["readerPersona"]),
        "nonfictionStructure": dict(NONFICTION_DATA["nonfictionStructure"]),
    }


@pytest.fixture
def fiction_project(fiction_data) -> Project:
    return Project.model_validate(fiction_data)


@pytest.fixture
def nonfiction_project(nonfiction_data) -> Project:
    return Project.model_validate(nonfiction_data)


@pytest.fixture
def author() -> Author:
    return Author(name="Jane Doe")
