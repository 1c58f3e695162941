"""
Export orchestration.

Single entry point for the planner's "Export" action:
- picks the content plan for the project type
- dispatches to the PDF (synchronous) or Word (asynchronous) exporter
- hands the finished file to a save collaborator
- reports a two-valued outcome (success / error) to the caller

There is no retry: a failed export is simply run again by the caller.
"""

import re
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from gospelwise.config import ExportSettings
from gospelwise.export.branding import DEFAULT_FILENAME_STEM
from gospelwise.export.docx import DocxExporter
from gospelwise.export.exceptions import (
    ExportError,
    RenderFailure,
    SaveFailure,
    SerializationFailure,
)
from gospelwise.export.models import (
    ExportFormat,
    ExportOutcome,
    ExportResult,
    ExportStatus,
)
from gospelwise.export.pdf import PDFExporter
from gospelwise.export.plan import build_content_plan
from gospelwise.logging_config import get_logger
from gospelwise.projects.models import Author, Project


logger = get_logger("export_service")

# save(content_bytes, filename)
SaveFn = Callable[[bytes, str], None]


def safe_filename(filename: str) -> str:
    """
    Reduce a suggested filename to a single path component.

    Titles are free text, so separators are replaced rather than followed.
    """
    name = Path(re.sub(r"[\\/\x00]", "_", filename)).name
    if name in ("", ".", ".."):
        return f"{DEFAULT_FILENAME_STEM}_Export"
    return name


class DirectorySaver:
    """Saves exports as files in a directory (created on first use)."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def __call__(self, content: bytes, filename: str) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        (self.output_dir / safe_filename(filename)).write_bytes(content)


class MemorySaver:
    """Keeps exports in memory, in the order they were saved."""

    def __init__(self):
        self.artifacts: List[Tuple[str, bytes]] = []

    def __call__(self, content: bytes, filename: str) -> None:
        self.artifacts.append((filename, content))

    @property
    def last(self) -> Optional[Tuple[str, bytes]]:
        return self.artifacts[-1] if self.artifacts else None


class ExportService:
    """
    Runs planner exports end to end.

    Every call builds a fresh plan, cursor and document, so one service
    instance can be shared between requests.

    Example:
        service = ExportService(saver=DirectorySaver("exports"))
        outcome = await service.export(project, author, ExportFormat.PDF)
        if outcome.succeeded:
            ...
    """

    def __init__(
        self,
        saver: Optional[SaveFn] = None,
        settings: Optional[ExportSettings] = None,
    ):
        self.settings = settings or ExportSettings()
        self.saver = saver or DirectorySaver(self.settings.output_dir)
        self.pdf_exporter = PDFExporter(self.settings)
        self.docx_exporter = DocxExporter(self.settings)

    def _save(self, result: ExportResult) -> None:
        try:
            self.saver(result.content_bytes, result.filename)
        except OSError as exc:
            raise SaveFailure(f"Saving {result.filename} failed: {exc}", result.format.value) from exc

    def export_to_pdf(self, project: Project, author: Optional[Author] = None) -> ExportResult:
        """
        Export to PDF and save it.

        Raises:
            RenderFailure: If the document could not be drawn; nothing is saved
            SaveFailure: If the saver could not write the file
        """
        try:
            plan = build_content_plan(project)
            result = self.pdf_exporter.export(project, author, plan)
        except Exception as exc:
            raise RenderFailure(f"PDF rendering failed: {exc}", ExportFormat.PDF.value) from exc

        self._save(result)
        return result

    async def export_to_word(self, project: Project, author: Optional[Author] = None) -> ExportResult:
        """
        Export to Word and save it.

        Raises:
            RenderFailure: If the flow document could not be built
            SerializationFailure: If the document could not be written to bytes
            SaveFailure: If the saver could not write the file
        """
        try:
            plan = build_content_plan(project)
            flow = self.docx_exporter.build(project, author, plan)
        except Exception as exc:
            raise RenderFailure(f"Word layout failed: {exc}", ExportFormat.DOCX.value) from exc

        try:
            result = await self.docx_exporter.export(project, flow)
        except Exception as exc:
            raise SerializationFailure(f"Word serialization failed: {exc}", ExportFormat.DOCX.value) from exc

        self._save(result)
        return result

    async def export(
        self,
        project: Project,
        author: Optional[Author],
        export_format: ExportFormat,
    ) -> ExportOutcome:
        """
        Export a project and report the outcome.

        Args:
            project: Project to export (trusted as already validated)
            author: Signed-in user, for the cover line; may be None
            export_format: PDF or DOCX

        Returns:
            ExportOutcome with status SUCCESS (file saved) or ERROR
        """
        logger.info(
            "export_started",
            format=export_format.value,
            project_type=project.project_type.value,
        )

        try:
            if export_format is ExportFormat.PDF:
                result = self.export_to_pdf(project, author)
            else:
                result = await self.export_to_word(project, author)
        except ExportError as exc:
            logger.error(
                "export_failed",
                format=export_format.value,
                error_type=type(exc).__name__,
                error=exc.message,
                exc_info=True,
            )
            return ExportOutcome(
                status=ExportStatus.ERROR,
                format=export_format,
                error=exc.message,
            )

        logger.info(
            "export_succeeded",
            format=export_format.value,
            filename=result.filename,
            page_count=result.page_count,
            size_bytes=len(result.content_bytes),
        )
        return ExportOutcome(
            status=ExportStatus.SUCCESS,
            format=export_format,
            filename=result.filename,
            page_count=result.page_count,
        )
