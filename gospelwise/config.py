"""
Runtime configuration for the export pipeline.

Layout defaults mirror the planner's printed export:
- A4 portrait, millimetre units
- 20mm margin, 170mm printable width
- Times for PDF, Calibri 12pt for Word

Values that differ per deployment (output directory, access code,
log level) come from the environment or a local .env file.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class ExportSettings(BaseModel):
    """Layout constants and deployment settings for exports."""

    # Page geometry (mm)
    page_width: float = Field(default=210.0, description="A4 width")
    page_height: float = Field(default=297.0, description="A4 height")
    margin: float = Field(default=20.0, description="Left/right/top margin")
    bottom_threshold: float = Field(
        default=270.0,
        description="Lowest cursor position before a new page is allocated"
    )

    # Vertical rhythm (mm)
    part_heading_height: float = Field(default=12.0)
    title_line_height: float = Field(default=10.0)
    line_height: float = Field(default=6.0)
    paragraph_gap: float = Field(
        default=10.0,
        description="Space after a plain text section"
    )
    field_gap: float = Field(
        default=8.0,
        description="Space after each labeled value inside a group"
    )

    # Fixed cover / footer positions (mm, baseline)
    cover_title_y: float = Field(default=80.0)
    cover_subtitle_y: float = Field(default=100.0)
    cover_author_y: float = Field(default=120.0)
    cover_branding_y: float = Field(default=280.0)
    footer_y: float = Field(default=287.0)
    footer_right_x: float = Field(default=195.0)

    # PDF typography (pt)
    pdf_font: str = Field(default="Times")
    cover_title_size: int = Field(default=24)
    cover_subtitle_size: int = Field(default=16)
    cover_author_size: int = Field(default=14)
    cover_branding_size: int = Field(default=10)
    part_heading_size: int = Field(default=18)
    section_title_size: int = Field(default=16)
    body_size: int = Field(default=11)
    footer_size: int = Field(default=8)

    # Word typography
    docx_font: str = Field(default="Calibri")
    docx_font_size: int = Field(default=12, ge=8, le=24)

    # Deployment
    output_dir: str = Field(
        default="exports",
        description="Directory used by DirectorySaver"
    )
    access_code: Optional[str] = Field(
        default=None,
        description="Shared secret expected in the x-access-token header"
    )
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)

    @property
    def content_width(self) -> float:
        """Printable width between the left and right margins."""
        return self.page_width - 2 * self.margin


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> ExportSettings:
    """
    Build settings from the environment.

    Loads .env first (local development), then reads:
    - GOSPELWISE_EXPORT_DIR
    - GOSPELWISE_LOG_LEVEL
    - GOSPELWISE_LOG_JSON
    - ACCESS_CODE
    """
    load_dotenv()

    return ExportSettings(
        output_dir=os.getenv("GOSPELWISE_EXPORT_DIR", "exports"),
        access_code=os.getenv("ACCESS_CODE") or None,
        log_level=os.getenv("GOSPELWISE_LOG_LEVEL", "INFO").upper(),
        log_json=_env_flag("GOSPELWISE_LOG_JSON", True),
    )
