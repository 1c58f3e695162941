"""
PDF exporter for planner projects.

Uses fpdf2 with absolute positioning: a render cursor tracks the current
baseline and page, text is wrapped to the printable width, and pages are
allocated when the cursor runs past the bottom threshold.

Layout: cover page -> content pages -> footers (branding + "Page i of N"
on every page, resolved when the document is closed).
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from fpdf import FPDF
from fpdf.enums import MethodReturnValue

from gospelwise.config import ExportSettings
from gospelwise.export.branding import (
    BRANDING_CREATOR,
    BRANDING_TEXT,
    author_line,
    cover_subtitle,
    cover_title,
    export_filename,
)
from gospelwise.export.models import ExportFormat, ExportResult
from gospelwise.export.plan import ContentPlan, Section, SectionKind
from gospelwise.projects.models import Author, Project


logger = logging.getLogger(__name__)

# Core fonts only cover Latin-1; map the usual word-processor punctuation
_TYPOGRAPHIC = str.maketrans({
    "‘": "'",
    "’": "'",
    "‚": "'",
    "“": '"',
    "”": '"',
    "„": '"',
    "–": "-",
    "—": "-",
    "•": "-",
    "…": "...",
    "™": "(TM)",
    "\t": "    ",
})

GREY = (100, 100, 100)
BLACK = (0, 0, 0)


def pdf_text(text: str) -> str:
    """Normalize typographic characters the core fonts cannot encode."""
    return text.translate(_TYPOGRAPHIC)


@dataclass(frozen=True)
class RenderCursor:
    """Current baseline (mm from top) and 1-based page number."""
    y: float
    page_index: int

    def advance(self, dy: float) -> "RenderCursor":
        return replace(self, y=self.y + dy)

    def at_top(self, top_margin: float) -> bool:
        return self.y <= top_margin


class PlannerPDF(FPDF):
    """
    FPDF document with the branded footer.

    Adds the branding line and "Page X of Y" to each page, cover
    included.
    """

    def __init__(self, settings: ExportSettings):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.settings = settings

    def centered_text(self, y: float, text: str) -> None:
        """Draw ``text`` horizontally centered on the page at baseline ``y``."""
        self.text((self.w - self.get_string_width(text)) / 2, y, text)

    def footer(self):
        """Add branding and page number footer."""
        s = self.settings
        top = s.footer_y - s.line_height / 2  # cells center text vertically
        self.set_font(s.pdf_font, "", s.footer_size)
        self.set_text_color(*GREY)

        self.set_xy(0, top)
        self.cell(self.w, s.line_height, BRANDING_TEXT, align="C")

        # The {nb} alias is only substituted inside cells
        self.set_xy(s.margin, top)
        self.cell(s.footer_right_x - s.margin, s.line_height, f"Page {self.page_no()} of {{nb}}", align="R")
        self.set_text_color(*BLACK)


class PDFExporter:
    """
    Exports a project's content plan to a paginated PDF.

    Example:
        exporter = PDFExporter()
        result = exporter.export(project, author, build_content_plan(project))
        pdf_bytes = result.content_bytes
    """

    def __init__(self, settings: Optional[ExportSettings] = None):
        self.settings = settings or ExportSettings()

    def export(
        self,
        project: Project,
        author: Optional[Author],
        plan: ContentPlan,
    ) -> ExportResult:
        """
        Render the project to PDF.

        Args:
            project: Project being exported (cover fields, filename)
            author: Author for the cover line; may be None
            plan: Ordered sections to render

        Returns:
            ExportResult with PDF bytes and page count

        Raises:
            Whatever fpdf2 raises for input it cannot draw (for example a
            character outside the core font's encoding).
        """
        s = self.settings

        pdf = PlannerPDF(s)
        pdf.alias_nb_pages()  # Enable total page count in footer
        pdf.set_auto_page_break(auto=False)  # Page breaks follow the render cursor
        pdf.set_margins(s.margin, s.margin, s.margin)

        pdf.set_title(pdf_text(cover_title(project.title)))
        pdf.set_creator(BRANDING_CREATOR)
        if author is not None and author.name:
            pdf.set_author(pdf_text(author.name))

        self._write_cover(pdf, project, author)

        # Content always starts on its own page
        cursor = RenderCursor(y=s.margin, page_index=1)
        cursor = self._new_page(pdf, cursor)

        for section in plan.sections:
            cursor = self._write_section(pdf, cursor, section)

        page_count = pdf.page_no()
        pdf_bytes = bytes(pdf.output())

        logger.debug(f"Rendered PDF for '{project.title}': {page_count} pages, {len(plan.sections)} sections")

        return ExportResult(
            format=ExportFormat.PDF,
            content_bytes=pdf_bytes,
            filename=export_filename(project.title, ExportFormat.PDF),
            page_count=page_count,
        )

    def _write_cover(self, pdf: PlannerPDF, project: Project, author: Optional[Author]) -> None:
        """Fixed-position cover: title, type, author, branding."""
        s = self.settings
        pdf.add_page()

        pdf.set_font(s.pdf_font, "", s.cover_title_size)
        pdf.centered_text(s.cover_title_y, pdf_text(cover_title(project.title)))

        pdf.set_font(s.pdf_font, "", s.cover_subtitle_size)
        pdf.centered_text(s.cover_subtitle_y, cover_subtitle(project.project_type.value))

        byline = author_line(author.name if author else None)
        if byline:
            pdf.set_font(s.pdf_font, "", s.cover_author_size)
            pdf.centered_text(s.cover_author_y, pdf_text(byline))

        pdf.set_font(s.pdf_font, "", s.cover_branding_size)
        pdf.set_text_color(*GREY)
        pdf.centered_text(s.cover_branding_y, BRANDING_TEXT)
        pdf.set_text_color(*BLACK)

    def _new_page(self, pdf: PlannerPDF, cursor: RenderCursor) -> RenderCursor:
        pdf.add_page()
        return RenderCursor(y=self.settings.margin, page_index=cursor.page_index + 1)

    def _ensure_room(self, pdf: PlannerPDF, cursor: RenderCursor, extent: float) -> RenderCursor:
        """
        Break the page if a baseline ``extent`` mm below the cursor would
        pass the bottom threshold. Never breaks a page that is still empty.
        """
        s = self.settings
        if cursor.at_top(s.margin):
            return cursor
        if cursor.y + extent > s.bottom_threshold:
            return self._new_page(pdf, cursor)
        return cursor

    def _wrap(self, pdf: PlannerPDF, text: str) -> List[str]:
        """Split ``text`` into lines that fit the printable width in the current font."""
        s = self.settings
        return pdf.multi_cell(
            s.content_width,
            s.line_height,
            pdf_text(text),
            dry_run=True,
            output=MethodReturnValue.LINES,
        )

    def _write_paragraph(self, pdf: PlannerPDF, cursor: RenderCursor, text: str) -> RenderCursor:
        """
        Write wrapped text at the cursor.

        Breaks first when the paragraph would fit on a fresh page but not
        on this one; paragraphs taller than a page flow line by line.
        """
        s = self.settings
        lines = self._wrap(pdf, text)
        extent = max(len(lines) - 1, 0) * s.line_height

        if extent <= s.bottom_threshold - s.margin:
            cursor = self._ensure_room(pdf, cursor, extent)

        for line in lines:
            if cursor.y > s.bottom_threshold:
                cursor = self._new_page(pdf, cursor)
            pdf.text(s.margin, cursor.y, line)
            cursor = cursor.advance(s.line_height)
        return cursor

    def _write_section(self, pdf: PlannerPDF, cursor: RenderCursor, section: Section) -> RenderCursor:
        s = self.settings

        # Overflow left behind by the previous section
        if cursor.y > s.bottom_threshold:
            cursor = self._new_page(pdf, cursor)

        if section.force_page_break_before and not cursor.at_top(s.margin):
            cursor = self._new_page(pdf, cursor)

        if section.part:
            cursor = self._ensure_room(pdf, cursor, s.part_heading_height + s.title_line_height)
            pdf.set_font(s.pdf_font, "B", s.part_heading_size)
            pdf.text(s.margin, cursor.y, pdf_text(section.part))
            cursor = cursor.advance(s.part_heading_height)

        # Keep the title on the same page as the first line of its body
        cursor = self._ensure_room(pdf, cursor, s.title_line_height)
        pdf.set_font(s.pdf_font, "B", s.section_title_size)
        pdf.text(s.margin, cursor.y, pdf_text(section.title))
        cursor = cursor.advance(s.title_line_height)

        if section.kind is SectionKind.TEXT:
            pdf.set_font(s.pdf_font, "", s.body_size)
            cursor = self._write_paragraph(pdf, cursor, section.content)
            return cursor.advance(s.paragraph_gap)

        for label, value in section.present_fields():
            cursor = self._ensure_room(pdf, cursor, s.line_height)
            pdf.set_font(s.pdf_font, "B", s.body_size)
            pdf.text(s.margin, cursor.y, pdf_text(f"{label}:"))
            cursor = cursor.advance(s.line_height)

            pdf.set_font(s.pdf_font, "", s.body_size)
            cursor = self._write_paragraph(pdf, cursor, value)
            cursor = cursor.advance(s.field_gap)

        return cursor
