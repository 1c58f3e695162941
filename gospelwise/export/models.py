"""
Export models for planner document export.

Provides data structures for:
- Export format enumeration (PDF, DOCX)
- Export result with bytes, filename, and metadata
- Export outcome reported back to the caller (success / error)
- Flow blocks making up a Word document before serialization
"""

import base64
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ExportFormat(str, Enum):
    """Supported document export formats."""
    PDF = "pdf"
    DOCX = "docx"

    @classmethod
    def parse(cls, value: str) -> "ExportFormat":
        """
        Resolve a user-facing format name.

        Accepts "pdf", "docx" and the planner's "word" alias
        (case-insensitive).

        Raises:
            ValueError: If the name is not a supported format
        """
        normalized = value.strip().lower()
        if normalized == "word":
            return cls.DOCX
        return cls(normalized)


class ExportResult(BaseModel):
    """Result of a document export operation."""

    format: ExportFormat = Field(
        description="Export format used"
    )
    content_bytes: bytes = Field(
        description="Raw bytes of the exported document"
    )
    filename: str = Field(
        description="Suggested filename for the exported document"
    )
    page_count: Optional[int] = Field(
        default=None,
        description="Number of pages in the document (PDF only)"
    )

    def to_base64(self) -> str:
        """Convert content bytes to base64 string for API response."""
        return base64.b64encode(self.content_bytes).decode("utf-8")


class ExportStatus(str, Enum):
    """Two-valued outcome of an export call; there is no partial success."""
    SUCCESS = "success"
    ERROR = "error"


class ExportOutcome(BaseModel):
    """What the orchestrator reports back to the UI layer."""

    status: ExportStatus
    format: ExportFormat
    filename: Optional[str] = Field(
        default=None,
        description="Filename handed to the save collaborator (success only)"
    )
    page_count: Optional[int] = None
    error: Optional[str] = Field(
        default=None,
        description="Failure message (error only)"
    )

    @property
    def succeeded(self) -> bool:
        return self.status is ExportStatus.SUCCESS


class BlockKind(str, Enum):
    """Kinds of blocks in a flow document."""
    TITLE = "title"
    SUBTITLE = "subtitle"
    AUTHOR = "author"
    PART_HEADING = "part_heading"
    HEADING = "heading"
    SUBHEADING = "subheading"
    PARAGRAPH = "paragraph"
    PAGE_BREAK = "page_break"


class FlowBlock(BaseModel):
    """One block of a reflowable document."""
    kind: BlockKind
    text: str = ""


class FlowDocument(BaseModel):
    """
    Ordered blocks plus document-level metadata.

    Pagination is left to the word processor; the only breaks are the
    explicit PAGE_BREAK blocks. The footer is repeated on every page by
    the consumer.
    """
    title: str
    author: str
    description: str
    blocks: List[FlowBlock] = Field(default_factory=list)
    footer: str

    def page_break_count(self) -> int:
        return sum(1 for block in self.blocks if block.kind is BlockKind.PAGE_BREAK)
