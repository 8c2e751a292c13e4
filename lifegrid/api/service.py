"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages sessions
3. Maps parse failures to structured errors
4. Formats universes for renderers

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
Errors are returned as ErrorResponse values, never raised.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random

from .schemas import (
    # Requests
    CreateUniverseRequest,
    StepRequest,
    ReseedRequest,
    ParseRequest,
    # Responses
    SessionResponse,
    ParseResponse,
    ErrorResponse,
    # Shared
    UniverseInfo,
    # Enums
    CreationMode,
    BoundaryPolicy,
    ErrorCode,
)
from ..engine_core import (
    Universe,
    ToroidalUniverse,
    ParseUniverseError,
    InvalidCellError,
    MismatchedRowLengthsError,
)
from ..session import SessionManager, Session

logger = logging.getLogger(__name__)

DEFAULT_MAX_CELLS = 1_000_000

UNIVERSE_TYPES: dict[BoundaryPolicy, type[Universe]] = {
    BoundaryPolicy.BOUNDED: Universe,
    BoundaryPolicy.TOROIDAL: ToroidalUniverse,
}


def universe_to_info(universe: Universe) -> UniverseInfo:
    """Convert a universe into its API representation."""
    boundary = (
        BoundaryPolicy.TOROIDAL
        if isinstance(universe, ToroidalUniverse)
        else BoundaryPolicy.BOUNDED
    )
    return UniverseInfo(
        columns=universe.columns,
        rows=universe.rows,
        boundary=boundary,
        live_cells=universe.live_cell_count(),
        text=universe.to_text(),
        cells=[[int(cell) for cell in row] for row in universe.iter_rows()],
    )


def parse_error_response(error: ParseUniverseError) -> ErrorResponse:
    """Convert a parse failure into an ErrorResponse."""
    if isinstance(error, InvalidCellError):
        return ErrorResponse(
            error=str(error),
            error_code=ErrorCode.INVALID_CELL,
            details={"cell": error.cell},
        )
    if isinstance(error, MismatchedRowLengthsError):
        return ErrorResponse(
            error=str(error),
            error_code=ErrorCode.MISMATCHED_ROW_LENGTHS,
            details={"expected": error.expected, "actual": error.actual},
        )
    return ErrorResponse(error=str(error), error_code=ErrorCode.VALIDATION_ERROR)


@dataclass
class APIService:
    """
    Main API service for renderers.

    Usage:
        service = APIService()

        # Start a simulation
        response = service.create_session(CreateUniverseRequest(mode="random", columns=64, rows=64))

        # Advance it
        response = service.step_session(response.session_id, StepRequest(generations=10))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    max_cells: int = DEFAULT_MAX_CELLS

    def create_session(self, request: CreateUniverseRequest) -> SessionResponse | ErrorResponse:
        """Create a new simulation session."""
        universe_type = UNIVERSE_TYPES[request.boundary]

        if request.mode == CreationMode.TEXT:
            result = self._parse(universe_type, request.text or "")
            if isinstance(result, ErrorResponse):
                return result
            universe = result
        else:
            too_large = self._check_size(request.columns, request.rows)
            if too_large:
                return too_large

            if request.mode == CreationMode.RANDOM:
                rng = random.Random(request.seed)
                universe = universe_type.new_random(
                    request.columns, request.rows, lambda: rng.random() > 0.5
                )
            else:
                universe = universe_type.new_empty(request.columns, request.rows)

        session = self.session_manager.create_session(universe)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Get a session's current generation."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)
        return self._session_to_response(session)

    def step_session(self, session_id: str, request: StepRequest) -> SessionResponse | ErrorResponse:
        """Advance a session by request.generations."""
        session = self.session_manager.advance(session_id, request.generations)
        if not session:
            return self._session_not_found(session_id)
        return self._session_to_response(session)

    def reseed_session(self, session_id: str, request: ReseedRequest) -> SessionResponse | ErrorResponse:
        """Replace a session's universe, keeping its boundary policy."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)

        result = self._parse(type(session.universe), request.text)
        if isinstance(result, ErrorResponse):
            return result

        session = self.session_manager.replace_universe(session_id, result)
        if not session:
            return self._session_not_found(session_id)
        return self._session_to_response(session)

    def end_session(self, session_id: str) -> bool:
        """End a session."""
        return self.session_manager.end_session(session_id)

    def list_sessions(self) -> list[str]:
        """List session IDs."""
        return self.session_manager.list_sessions()

    def parse(self, request: ParseRequest) -> ParseResponse | ErrorResponse:
        """Parse text without creating a session; includes the next generation."""
        result = self._parse(UNIVERSE_TYPES[request.boundary], request.text)
        if isinstance(result, ErrorResponse):
            return result
        return ParseResponse(
            valid=True,
            universe=universe_to_info(result),
            next_generation=universe_to_info(result.step()),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _parse(self, universe_type: type[Universe], text: str) -> Universe | ErrorResponse:
        try:
            universe = universe_type.parse(text)
        except ParseUniverseError as e:
            logger.info("Rejected universe text: %s", e)
            return parse_error_response(e)

        too_large = self._check_size(universe.columns, universe.rows)
        if too_large:
            return too_large
        return universe

    def _check_size(self, columns: int, rows: int) -> ErrorResponse | None:
        if columns * rows > self.max_cells:
            return ErrorResponse(
                error=f"Universe of {columns}x{rows} exceeds the limit of {self.max_cells} cells",
                error_code=ErrorCode.UNIVERSE_TOO_LARGE,
                details={"columns": columns, "rows": rows, "max_cells": self.max_cells},
            )
        return None

    def _session_not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error="Session not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
            details={"session_id": session_id},
        )

    def _session_to_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            generation=session.generation,
            universe=universe_to_info(session.universe),
            created_at=session.created_at,
            updated_at=session.updated_at,
        )
