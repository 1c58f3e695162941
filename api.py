# api.py
# GOSPELWISE AUTHOR: EXPORT SERVICE
# Features: PDF / Word export of planner projects + Access Control
# NO HARDCODED SECRETS.

import base64
import time
import uuid
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from gospelwise import __version__
from gospelwise.config import ExportSettings, load_settings
from gospelwise.export import ExportFormat, ExportService, MemorySaver
from gospelwise.logging_config import configure_logging, get_logger
from gospelwise.projects import Author, Project


logger = get_logger("gospelwise_api")


class ExportRequest(BaseModel):
    """Request model for a project export."""
    project: dict = Field(
        description="Project record as stored by the planner (camelCase keys)"
    )
    author: Optional[dict] = Field(
        default=None,
        description="Signed-in user; only 'name' is used, for the cover page"
    )
    format: str = Field(
        description="Export format: 'pdf', 'docx' (or 'word')"
    )


class ExportResponse(BaseModel):
    """Response model for a successful export."""
    status: str = Field(description="Always 'success'; failures return HTTP errors")
    filename: str = Field(description="Suggested download filename")
    format: str = Field(description="Format of exported document")
    page_count: Optional[int] = Field(
        default=None,
        description="Number of pages (PDF only)"
    )
    export_data: str = Field(description="Base64-encoded PDF/DOCX")


def create_app(settings: Optional[ExportSettings] = None) -> FastAPI:
    """
    Build the export API.

    Args:
        settings: Explicit settings (tests); read from the environment when None

    Returns:
        Configured FastAPI application
    """
    # 1. SETUP & SECRET LOADING
    settings = settings or load_settings()
    configure_logging(settings.log_level, settings.log_json)

    if not settings.access_code:
        logger.warning("access_code_missing", detail="Every protected request will be rejected")

    app = FastAPI(title="GospelWise Export API", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 2. THE BOUNCER (Security Middleware)
    @app.middleware("http")
    async def verify_access(request: Request, call_next):
        # Allow Health Checks & Pre-flight
        if request.url.path == "/" or request.method == "OPTIONS":
            return await call_next(request)

        token = request.headers.get("x-access-token")
        if not settings.access_code:
            # Failsafe if env var is missing on server
            return JSONResponse(status_code=500, content={"detail": "Server Misconfiguration: No ACCESS_CODE set."})

        if token != settings.access_code:
            return JSONResponse(status_code=401, content={"detail": "ACCESS DENIED: Invalid Security Code"})

        return await call_next(request)

    # 3. ROUTES
    @app.get("/")
    def health():
        return {"status": "ok", "service": "gospelwise-export", "version": __version__}

    @app.post("/export", response_model=ExportResponse)
    async def export_project(req: ExportRequest):
        """
        Export a planner project to PDF or Word.

        Returns:
            ExportResponse with the base64 document and its filename

        Raises:
            400: Invalid format, project or author
            500: Export failed
        """
        request_id = uuid.uuid4().hex[:12]
        started = time.perf_counter()

        try:
            export_format = ExportFormat.parse(req.format)
        except ValueError:
            valid_formats = ["pdf", "docx", "word"]
            logger.warning("invalid_export_format", request_id=request_id, export_format=req.format)
            raise HTTPException(
                400,
                {"error": "validation_error", "message": f"Invalid format '{req.format}'", "field": "format", "valid_options": valid_formats}
            )

        try:
            project = Project.model_validate(req.project)
            author = Author.model_validate(req.author) if req.author else None
        except ValidationError as e:
            logger.warning("invalid_project", request_id=request_id, error=str(e))
            raise HTTPException(
                400,
                {"error": "validation_error", "message": f"Invalid project: {e.error_count()} error(s)", "field": "project"}
            )

        # Fresh saver per request: the artifact is handed off exactly once
        saver = MemorySaver()
        service = ExportService(saver=saver, settings=settings)
        outcome = await service.export(project, author, export_format)

        if not outcome.succeeded or saver.last is None:
            raise HTTPException(
                500,
                {"error": "export_error", "message": f"Export to {export_format.value.upper()} failed"}
            )

        filename, content = saver.last
        logger.info(
            "export_request_completed",
            request_id=request_id,
            format=export_format.value,
            duration_ms=int((time.perf_counter() - started) * 1000),
        )

        return ExportResponse(
            status=outcome.status.value,
            filename=filename,
            format=export_format.value,
            page_count=outcome.page_count,
            export_data=base64.b64encode(content).decode("utf-8"),
        )

    return app


app = create_app()
