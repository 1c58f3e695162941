"""
Branding and labeling helpers shared by the PDF and Word exporters.

Both placeholder literals are kept as-is: body sections say
"Not provided", the word-count goal says "Not specified".
"""

import re
from typing import Any, Optional

from gospelwise.export.models import ExportFormat


BRANDING_TEXT = "Created using the GospelWise Author App | gospelwiseauthor.app"
BRANDING_AUTHOR = "GospelWise Author"
BRANDING_CREATOR = "GospelWise Author App"

NOT_PROVIDED = "Not provided"
NOT_SPECIFIED = "Not specified"

UNTITLED_PROJECT = "Untitled Project"
DEFAULT_FILENAME_STEM = "Project"

_CAPITAL = re.compile(r"([A-Z])")


def is_present(value: Any) -> bool:
    """True for a non-empty, non-whitespace string or any non-string value other than None."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def format_label(key: str) -> str:
    """
    Turn a camelCase field key into a display label.

    Inserts a space before every capital letter, then uppercases the
    first character of the result:
        protagonistGoals -> "Protagonist Goals"
        premise -> "Premise"
    """
    spaced = _CAPITAL.sub(r" \1", key)
    if not spaced:
        return spaced
    return spaced[0].upper() + spaced[1:]


def format_word_count(goal: Optional[int]) -> str:
    """Render a word-count goal with thousands separators, e.g. "80,000 words"."""
    if not goal:
        return NOT_SPECIFIED
    return f"{goal:,} words"


def text_or_placeholder(value: Optional[str]) -> str:
    return value if is_present(value) else NOT_PROVIDED


def cover_title(title: Optional[str]) -> str:
    return title if title else UNTITLED_PROJECT


def cover_subtitle(project_type: str) -> str:
    return f"{project_type} Project"


def author_line(name: Optional[str]) -> Optional[str]:
    """Cover attribution ("By Jane Doe"), or None when no name is known."""
    if not is_present(name):
        return None
    return f"By {name}"


def export_filename(title: Optional[str], export_format: ExportFormat) -> str:
    """
    Build the download filename for an export.

    Args:
        title: Project title; empty or missing falls back to "Project"
        export_format: Target format, used as the extension

    Returns:
        Filename such as "My Book_Export.pdf"
    """
    stem = title if title else DEFAULT_FILENAME_STEM
    return f"{stem}_Export.{export_format.value}"
