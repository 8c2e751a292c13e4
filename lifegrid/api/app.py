"""
FastAPI Application - REST API for renderers.

Endpoints:
    GET    /api/v1/health                 Health check
    POST   /api/v1/universes              Create a simulation session
    GET    /api/v1/universes              List sessions
    GET    /api/v1/universes/{id}         Get the current generation
    POST   /api/v1/universes/{id}/step    Advance one or more generations
    PUT    /api/v1/universes/{id}         Reseed from text
    DELETE /api/v1/universes/{id}         End session
    POST   /api/v1/parse                  Parse text without a session

All responses are JSON with explicit Pydantic schemas.
Every universe is returned both as text and as row arrays of 0/1.
"""

from typing import Union
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from .service import APIService, DEFAULT_MAX_CELLS
from .schemas import (
    # Request models
    CreateUniverseRequest,
    StepRequest,
    ReseedRequest,
    ParseRequest,
    # Response models
    SessionResponse,
    SessionListResponse,
    EndSessionResponse,
    ParseResponse,
    ErrorResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)

# Environment configuration
LIFEGRID_ENV = os.getenv("LIFEGRID_ENV", "development")
LIFEGRID_MAX_CELLS = int(os.getenv("LIFEGRID_MAX_CELLS", str(DEFAULT_MAX_CELLS)))
LIFEGRID_SESSION_TTL = float(os.getenv("LIFEGRID_SESSION_TTL", "3600"))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    ErrorCode.INVALID_CELL: 400,
    ErrorCode.MISMATCHED_ROW_LENGTHS: 400,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.UNIVERSE_TOO_LARGE: 413,
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Universe text could not be parsed"},
    404: {"model": ErrorResponse, "description": "Session not found"},
    413: {"model": ErrorResponse, "description": "Universe too large"},
}


def create_app(service: APIService | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="lifegrid API",
        description="""
Conway's Game of Life on a finite grid.

## Boundary policies

| Policy | Behaviour |
|--------|-----------|
| `bounded` | Cells past the edge are dead |
| `toroidal` | Edges wrap around |

## Error Codes

| Code | Description |
|------|-------------|
| `INVALID_CELL` | Text contains a character other than `.` or `#` |
| `MISMATCHED_ROW_LENGTHS` | Rows have different lengths |
| `UNIVERSE_TOO_LARGE` | Universe exceeds the configured cell limit |
| `SESSION_NOT_FOUND` | Session does not exist |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService(max_cells=LIFEGRID_MAX_CELLS)

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Wrap an ErrorResponse with the matching HTTP status."""
        return JSONResponse(
            status_code=ERROR_STATUS_CODES.get(error.error_code, 400),
            content=error.model_dump(mode="json"),
        )

    def respond(response):
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    # =========================================================================
    # Health
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    def health() -> HealthResponse:
        """Report service health and drop sessions idle past the TTL."""
        api_service.session_manager.cleanup_stale_sessions(LIFEGRID_SESSION_TTL)
        return HealthResponse(
            version=__version__,
            environment=LIFEGRID_ENV,
            active_sessions=len(api_service.list_sessions()),
        )

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/universes",
        response_model=SessionResponse,
        status_code=201,
        responses=ERROR_RESPONSES,
        tags=["Universes"],
        summary="Create a simulation session",
    )
    def create_universe(request: CreateUniverseRequest) -> Union[SessionResponse, JSONResponse]:
        """
        Create a new simulation session.

        Use `mode=empty` or `mode=random` with `columns`/`rows`,
        or `mode=text` with a `.`/`#` universe in `text`.
        """
        return respond(api_service.create_session(request))

    @app.get(
        "/api/v1/universes",
        response_model=SessionListResponse,
        tags=["Universes"],
        summary="List sessions",
    )
    def list_universes() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/universes/{session_id}",
        response_model=SessionResponse,
        responses=ERROR_RESPONSES,
        tags=["Universes"],
        summary="Get the current generation",
    )
    def get_universe(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.get_session(session_id))

    @app.post(
        "/api/v1/universes/{session_id}/step",
        response_model=SessionResponse,
        responses=ERROR_RESPONSES,
        tags=["Universes"],
        summary="Advance the simulation",
    )
    def step_universe(
        session_id: str,
        request: StepRequest | None = None,
    ) -> Union[SessionResponse, JSONResponse]:
        """Advance the session by `generations` (default 1)."""
        return respond(api_service.step_session(session_id, request or StepRequest()))

    @app.put(
        "/api/v1/universes/{session_id}",
        response_model=SessionResponse,
        responses=ERROR_RESPONSES,
        tags=["Universes"],
        summary="Reseed from text",
    )
    def reseed_universe(
        session_id: str,
        request: ReseedRequest,
    ) -> Union[SessionResponse, JSONResponse]:
        """Replace the session's universe. The generation counter resets to 0."""
        return respond(api_service.reseed_session(session_id, request))

    @app.delete(
        "/api/v1/universes/{session_id}",
        response_model=EndSessionResponse,
        tags=["Universes"],
        summary="End a session",
    )
    def end_universe(session_id: str) -> EndSessionResponse:
        success = api_service.end_session(session_id)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Parse Endpoint
    # =========================================================================

    @app.post(
        "/api/v1/parse",
        response_model=ParseResponse,
        responses={400: ERROR_RESPONSES[400], 413: ERROR_RESPONSES[413]},
        tags=["Text"],
        summary="Parse a universe without creating a session",
    )
    def parse_universe(request: ParseRequest) -> Union[ParseResponse, JSONResponse]:
        return respond(api_service.parse(request))

    logger.info("Created lifegrid API (env=%s, max_cells=%d)", LIFEGRID_ENV, LIFEGRID_MAX_CELLS)
    return app
