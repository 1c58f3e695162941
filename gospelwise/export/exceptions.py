"""
Export failure taxonomy.

There is no validation category: project and author records are trusted,
so any exception raised while drawing or building a document is folded
into RenderFailure.
"""


class ExportError(Exception):
    """Base class for export failures surfaced to the caller."""

    def __init__(self, message: str, export_format: str):
        super().__init__(message)
        self.message = message
        self.export_format = export_format


class RenderFailure(ExportError):
    """Drawing, layout or document building rejected the input."""


class SerializationFailure(ExportError):
    """The Word document could not be written to bytes."""


class SaveFailure(ExportError):
    """The finished document could not be written to its destination."""
