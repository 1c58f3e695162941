"""
Export module for planner document export functionality.

Provides PDF and DOCX export of fiction / non-fiction planner projects
with shared branding, section order and page-break rules.

Classes:
    ExportService: Entry point (format dispatch, saving, outcome)
    PDFExporter: Export to PDF with cover, pagination, branded footers
    DocxExporter: Export to DOCX for Word editing
    ContentPlan: Ordered, format-agnostic sections for a project
    ExportFormat: Enum of supported formats (PDF, DOCX)
    ExportResult: Result model with bytes and metadata
    ExportOutcome: Success / error report for the caller
"""

from gospelwise.export.branding import (
    BRANDING_TEXT,
    NOT_PROVIDED,
    NOT_SPECIFIED,
    export_filename,
    format_label,
    format_word_count,
    is_present,
)
from gospelwise.export.docx import DocxExporter
from gospelwise.export.exceptions import (
    ExportError,
    RenderFailure,
    SaveFailure,
    SerializationFailure,
)
from gospelwise.export.models import (
    BlockKind,
    ExportFormat,
    ExportOutcome,
    ExportResult,
    ExportStatus,
    FlowBlock,
    FlowDocument,
)
from gospelwise.export.pdf import PDFExporter, RenderCursor
from gospelwise.export.plan import (
    ContentPlan,
    Section,
    SectionKind,
    build_content_plan,
)
from gospelwise.export.service import DirectorySaver, ExportService, MemorySaver

__all__ = [
    # Branding & labels
    "BRANDING_TEXT",
    "NOT_PROVIDED",
    "NOT_SPECIFIED",
    "export_filename",
    "format_label",
    "format_word_count",
    "is_present",
    # Content plan
    "ContentPlan",
    "Section",
    "SectionKind",
    "build_content_plan",
    # Exporters
    "PDFExporter",
    "RenderCursor",
    "DocxExporter",
    "BlockKind",
    "FlowBlock",
    "FlowDocument",
    # Orchestration
    "ExportService",
    "DirectorySaver",
    "MemorySaver",
    "ExportFormat",
    "ExportResult",
    "ExportStatus",
    "ExportOutcome",
    # Errors
    "ExportError",
    "RenderFailure",
    "SaveFailure",
    "SerializationFailure",
]
