# tests/test_plan.py
from gospelwise.export import NOT_PROVIDED, SectionKind, build_content_plan
from gospelwise.export.plan import movement_breaks_before
from gospelwise.projects import Project

FICTION_ORDER = [
    "Project Overview",
    "One-Line Premise",
    "Story Description",
    "Central Theme",
    "Faith Element",
    "Key Story Arc",
    "Reader Transformation",
    "Movement 1: Opening Scene",
    "Movement 2: Hooking Moment",
    "Movement 3: First Plot Point",
    "Movement 4: First Pinch Point",
    "Movement 5: Midpoint Shift",
    "Movement 6: Second Pinch Point",
    "Movement 7: Second Plot Point",
    "Movement 8: Final Resolution",
    "Movement 9: World Back to Normal",
    "Protagonist",
    "Antagonist",
    "Supporting Characters",
    "Setting & Time Period",
    "World Rules",
    "Conflict & Stakes",
    "Spiritual Elements",
]

FICTION_BREAKS = {
    "Movement 1: Opening Scene",
    "Movement 4: First Pinch Point",
    "Movement 7: Second Plot Point",
    "Protagonist",
    "Supporting Characters",
    "Setting & Time Period",
    "Spiritual Elements",
}

NONFICTION_ORDER = [
    "Kingdom Concept",
    "Reader Persona",
    "Core Themes",
    "Source Material",
    "Holy Spirit Insights",
    "Movement 1: Starting Where They Are",
    "Movement 2: Hooking with Hope",
    "Movement 3: The First Shift",
    "Movement 4: The First Wake-Up Call",
    "Movement 5: Gospel-Centered Reframe",
    "Movement 6: The Cost of Change",
    "Movement 7: The Final Breakthrough",
    "Movement 8: Living the Change",
    "Movement 9: Final Encouragement",
]


def _section(plan, title):
    return next(section for section in plan.sections if section.title == title)


def test_fiction_section_order(fiction_project):
    assert build_content_plan(fiction_project).titles() == FICTION_ORDER


def test_nonfiction_section_order(nonfiction_project):
    assert build_content_plan(nonfiction_project).titles() == NONFICTION_ORDER


def test_fiction_page_breaks(fiction_project):
    plan = build_content_plan(fiction_project)
    flagged = {section.title for section in plan.sections if section.force_page_break_before}
    assert flagged == FICTION_BREAKS


def test_movement_breaks_before_fourth_and_seventh(fiction_project):
    plan = build_content_plan(fiction_project)
    movements = [s for s in plan.sections if s.title.startswith("Movement ")]

    # Movement 1 carries the break that opens the structure part
    assert [s.force_page_break_before for s in movements[1:]] == [
        False, False, True, False, False, True, False, False,
    ]
    assert [i for i in range(9) if movement_breaks_before(i)] == [3, 6]


def test_nonfiction_page_breaks(nonfiction_project):
    plan = build_content_plan(nonfiction_project)
    flagged = [section.title for section in plan.sections if section.force_page_break_before]
    assert flagged == [
        "Reader Persona",
        "Core Themes",
        "Source Material",
        "Holy Spirit Insights",
        "Movement 1: Starting Where They Are",
        "Movement 4: The First Wake-Up Call",
        "Movement 7: The Final Breakthrough",
    ]


def test_part_headings(fiction_project, nonfiction_project):
    fiction = build_content_plan(fiction_project)
    assert [(s.title, s.part) for s in fiction.sections if s.part] == [
        ("Project Overview", "Story Concept"),
        ("Movement 1: Opening Scene", "StoryWise Structure"),
        ("Protagonist", "Characters"),
        ("Setting & Time Period", "Story World"),
    ]

    nonfiction = build_content_plan(nonfiction_project)
    assert [s.part for s in nonfiction.sections if s.part] == [
        "Part 1: Message Mapping - Pre-Writing Work",
        "Part 2: StoryWise Nonfiction Structure",
    ]


def test_reader_persona_omitted_when_all_blank(nonfiction_data):
    nonfiction_data["readerPersona"] = {"lifeStage": "", "struggle": "  ", "desire": None}
    plan = build_content_plan(Project.model_validate(nonfiction_data))

    assert "Reader Persona" not in plan.titles()
    assert _section(plan, "Core Themes").force_page_break_before


def test_reader_persona_kept_with_one_field(nonfiction_data):
    nonfiction_data["readerPersona"] = {"objections": "Too busy"}
    plan = build_content_plan(Project.model_validate(nonfiction_data))

    persona = _section(plan, "Reader Persona")
    assert persona.kind is SectionKind.LABELED_GROUP
    assert persona.present_fields() == [("Objections", "Too busy")]


def test_missing_persona_object_is_omitted(nonfiction_data):
    del nonfiction_data["readerPersona"]
    plan = build_content_plan(Project.model_validate(nonfiction_data))
    assert "Reader Persona" not in plan.titles()


def test_empty_text_field_uses_placeholder(fiction_data):
    fiction_data["premise"] = ""
    plan = build_content_plan(Project.model_validate(fiction_data))

    premise = _section(plan, "One-Line Premise")
    assert premise.kind is SectionKind.TEXT
    assert premise.content == NOT_PROVIDED


def test_bare_project_keeps_every_text_section():
    plan = build_content_plan(Project.model_validate({"type": "fiction"}))

    # Only the labeled groups with nothing in them disappear
    omitted = {"Key Story Arc", "Protagonist", "Antagonist", "Setting & Time Period", "Conflict & Stakes"}
    assert plan.titles() == [title for title in FICTION_ORDER if title not in omitted]

    movements = [s for s in plan.sections if s.title.startswith("Movement ")]
    assert all(s.content == NOT_PROVIDED for s in movements)


def test_part_heading_moves_past_omitted_group():
    plan = build_content_plan(Project.model_validate({"type": "fiction", "worldRules": "No magic."}))

    world_rules = _section(plan, "World Rules")
    assert world_rules.part == "Story World"
    assert world_rules.force_page_break_before

    supporting = _section(plan, "Supporting Characters")
    assert supporting.part == "Characters"


def test_project_overview_always_has_word_count(fiction_data):
    overview = _section(build_content_plan(Project.model_validate(fiction_data)), "Project Overview")
    assert ("Word Count Goal", "80,000 words") in overview.present_fields()
    assert overview.present_fields()[0] == ("Title", "The Lantern Keeper")

    bare = _section(build_content_plan(Project.model_validate({"type": "fiction"})), "Project Overview")
    assert bare.present_fields() == [("Word Count Goal", "Not specified")]


def test_cleared_word_count_goal_is_not_specified(fiction_data):
    fiction_data["wordCountGoal"] = ""
    overview = _section(build_content_plan(Project.model_validate(fiction_data)), "Project Overview")
    assert ("Word Count Goal", "Not specified") in overview.present_fields()


def test_group_labels_come_from_field_keys(fiction_project):
    protagonist = _section(build_content_plan(fiction_project), "Protagonist")
    assert [label for label, _ in protagonist.present_fields()] == [
        "Protagonist", "Protagonist Goals", "Protagonist Flaw",
    ]


def test_group_skips_blank_sub_fields(fiction_data):
    fiction_data["storyMiddle"] = "   "
    arc = _section(build_content_plan(Project.model_validate(fiction_data)), "Key Story Arc")
    assert [label for label, _ in arc.present_fields()] == ["Story Beginning", "Story End"]


def test_plan_is_deterministic(fiction_project):
    first = build_content_plan(fiction_project)
    second = build_content_plan(fiction_project)
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_plan_ignores_author_and_other_type_fields(fiction_data):
    # Non-fiction content on a fiction project is not exported
    fiction_data["kingdomConcept"] = "Not part of fiction"
    plan = build_content_plan(Project.model_validate(fiction_data))
    assert "Kingdom Concept" not in plan.titles()
