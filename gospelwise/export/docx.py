"""
DOCX exporter for planner projects.

Builds a flow document (ordered heading / paragraph blocks plus explicit
page breaks) from the content plan, then uses python-docx to write it.
Word paginates on its own; the exporter only places the forced breaks
and the branded footer.
"""

import asyncio
import io
import logging
from typing import Optional

from docx import Document
from docx.enum.text import WD_PARAGRAPH_ALIGNMENT
from docx.shared import Cm, Pt, RGBColor

from gospelwise.config import ExportSettings
from gospelwise.export.branding import (
    BRANDING_AUTHOR,
    BRANDING_TEXT,
    author_line,
    cover_subtitle,
    cover_title,
    export_filename,
)
from gospelwise.export.models import (
    BlockKind,
    ExportFormat,
    ExportResult,
    FlowBlock,
    FlowDocument,
)
from gospelwise.export.plan import ContentPlan, SectionKind
from gospelwise.projects.models import Author, Project


logger = logging.getLogger(__name__)

# Heading level per block kind (0 is Word's "Title" style)
HEADING_LEVELS = {
    BlockKind.TITLE: 0,
    BlockKind.SUBTITLE: 1,
    BlockKind.AUTHOR: 2,
    BlockKind.PART_HEADING: 1,
    BlockKind.HEADING: 2,
    BlockKind.SUBHEADING: 3,
}

CENTERED = {BlockKind.TITLE, BlockKind.SUBTITLE, BlockKind.AUTHOR}

# Space after, in points
SPACE_AFTER = {
    BlockKind.TITLE: 20,
    BlockKind.SUBTITLE: 20,
    BlockKind.AUTHOR: 40,
    BlockKind.PART_HEADING: 20,
    BlockKind.HEADING: 10,
    BlockKind.SUBHEADING: 5,
    BlockKind.PARAGRAPH: 15,
}

FOOTER_GREY = RGBColor(0x88, 0x88, 0x88)


def _document_to_bytes(document) -> bytes:
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class DocxExporter:
    """
    Exports a project's content plan to DOCX.

    Block construction is synchronous; writing the document to bytes
    runs on a worker thread and is awaited.

    Example:
        exporter = DocxExporter()
        flow = exporter.build(project, author, build_content_plan(project))
        result = await exporter.export(project, flow)
        docx_bytes = result.content_bytes
    """

    def __init__(self, settings: Optional[ExportSettings] = None):
        self.settings = settings or ExportSettings()

    def build(
        self,
        project: Project,
        author: Optional[Author],
        plan: ContentPlan,
    ) -> FlowDocument:
        """
        Lay out the project as flow blocks.

        Args:
            project: Project being exported
            author: Author for the cover line and document creator; may be None
            plan: Ordered sections to emit

        Returns:
            FlowDocument ready for serialization
        """
        name = author.name if author else None
        project_type = project.project_type.value

        flow = FlowDocument(
            title=cover_title(project.title),
            author=name or BRANDING_AUTHOR,
            description=f"{project_type} project export from GospelWise Author App",
            footer=BRANDING_TEXT,
        )
        blocks = flow.blocks

        def add(kind: BlockKind, text: str = "") -> None:
            blocks.append(FlowBlock(kind=kind, text=text))

        def page_break() -> None:
            # Collapse adjacent breaks so no blank page is produced
            if blocks and blocks[-1].kind is BlockKind.PAGE_BREAK:
                return
            add(BlockKind.PAGE_BREAK)

        # Cover
        add(BlockKind.TITLE, flow.title)
        add(BlockKind.SUBTITLE, cover_subtitle(project_type))
        byline = author_line(name)
        if byline:
            add(BlockKind.AUTHOR, byline)
        page_break()

        for section in plan.sections:
            if section.force_page_break_before:
                page_break()
            if section.part:
                add(BlockKind.PART_HEADING, section.part)
            add(BlockKind.HEADING, section.title)

            if section.kind is SectionKind.TEXT:
                add(BlockKind.PARAGRAPH, section.content)
                continue

            for label, value in section.present_fields():
                add(BlockKind.SUBHEADING, f"{label}:")
                add(BlockKind.PARAGRAPH, value)

        return flow

    def to_document(self, flow: FlowDocument):
        """
        Convert flow blocks into a python-docx Document.

        Args:
            flow: Flow document produced by build()

        Returns:
            python-docx Document instance
        """
        s = self.settings
        doc = Document()

        # Configure page setup (A4)
        section = doc.sections[0]
        section.page_width = Cm(21)
        section.page_height = Cm(29.7)

        # Body text style
        normal = doc.styles["Normal"]
        normal.font.name = s.docx_font
        normal.font.size = Pt(s.docx_font_size)

        # Document properties
        props = doc.core_properties
        props.title = flow.title
        props.author = flow.author
        props.comments = flow.description

        for block in flow.blocks:
            if block.kind is BlockKind.PAGE_BREAK:
                doc.add_page_break()
                continue

            if block.kind is BlockKind.PARAGRAPH:
                para = doc.add_paragraph(block.text)
            else:
                para = doc.add_heading(block.text, level=HEADING_LEVELS[block.kind])

            if block.kind in CENTERED:
                para.alignment = WD_PARAGRAPH_ALIGNMENT.CENTER
            para.paragraph_format.space_after = Pt(SPACE_AFTER[block.kind])

        # Footer repeats on every page Word lays out
        footer_para = section.footer.paragraphs[0]
        footer_para.alignment = WD_PARAGRAPH_ALIGNMENT.CENTER
        run = footer_para.add_run(flow.footer)
        run.font.size = Pt(8)
        run.font.color.rgb = FOOTER_GREY

        return doc

    async def serialize(self, flow: FlowDocument) -> bytes:
        """
        Write the flow document to DOCX bytes.

        The python-docx save runs on a worker thread; this is the only
        suspension point of a Word export.
        """
        document = self.to_document(flow)
        return await asyncio.to_thread(_document_to_bytes, document)

    async def export(self, project: Project, flow: FlowDocument) -> ExportResult:
        """
        Serialize a built flow document into a Word export.

        Returns:
            ExportResult with DOCX bytes; page_count is None because Word
            decides pagination when the file is opened
        """
        docx_bytes = await self.serialize(flow)

        logger.debug(f"Serialized DOCX for '{project.title}': {len(flow.blocks)} blocks, {len(docx_bytes)} bytes")

        return ExportResult(
            format=ExportFormat.DOCX,
            content_bytes=docx_bytes,
            filename=export_filename(project.title, ExportFormat.DOCX),
            page_count=None,  # DOCX doesn't have page count until rendered
        )
