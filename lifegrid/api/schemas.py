"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between renderers and the engine.
A universe is always returned twice: as the '.'/'#' text format and as
row-major arrays of 0/1 so canvas-style renderers can paint it directly.

Error Codes:
- INVALID_CELL: Text contains a character other than '.' or '#'
- MISMATCHED_ROW_LENGTHS: Rows in the text have different lengths
- UNIVERSE_TOO_LARGE: Requested universe exceeds the configured cell limit
- SESSION_NOT_FOUND: Session does not exist or has expired
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Enums
# =============================================================================

class CreationMode(str, Enum):
    """How a new universe is seeded."""
    EMPTY = "empty"
    RANDOM = "random"
    TEXT = "text"


class BoundaryPolicy(str, Enum):
    """How neighbours past the edge are treated."""
    BOUNDED = "bounded"
    TOROIDAL = "toroidal"


class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_CELL = "INVALID_CELL"
    MISMATCHED_ROW_LENGTHS = "MISMATCHED_ROW_LENGTHS"
    UNIVERSE_TOO_LARGE = "UNIVERSE_TOO_LARGE"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class UniverseInfo(BaseModel):
    """One generation, ready to render."""
    columns: int = Field(..., ge=0)
    rows: int = Field(..., ge=0)
    boundary: BoundaryPolicy
    live_cells: int = Field(0, ge=0)
    text: str = Field("", description="'.'/'#' rows, each newline-terminated")
    cells: list[list[int]] = Field(
        default_factory=list,
        description="Row-major cell values, 0 = dead, 1 = alive",
    )


# =============================================================================
# Request Models
# =============================================================================

class CreateUniverseRequest(BaseModel):
    """Request to start a new simulation session."""
    mode: CreationMode = Field(CreationMode.EMPTY, description="How to seed the universe")
    boundary: BoundaryPolicy = Field(BoundaryPolicy.BOUNDED)
    columns: Optional[int] = Field(None, ge=0, description="Width (empty/random)")
    rows: Optional[int] = Field(None, ge=0, description="Height (empty/random)")
    text: Optional[str] = Field(None, description="Universe text (text mode)")
    seed: Optional[int] = Field(None, description="Seed for reproducible random universes")

    @model_validator(mode="after")
    def check_mode_fields(self) -> "CreateUniverseRequest":
        if self.mode == CreationMode.TEXT:
            if self.text is None:
                raise ValueError("text is required when mode is 'text'")
        elif self.columns is None or self.rows is None:
            raise ValueError(f"columns and rows are required when mode is '{self.mode.value}'")
        elif (self.columns == 0) != (self.rows == 0):
            raise ValueError("columns and rows must both be zero or both be positive")
        return self


class StepRequest(BaseModel):
    """Request to advance a session."""
    generations: int = Field(1, ge=1, le=1000, description="Generations to step")


class ReseedRequest(BaseModel):
    """Request to replace a session's universe with parsed text."""
    text: str = Field(..., description="Universe text")


class ParseRequest(BaseModel):
    """Request to parse text without creating a session."""
    text: str = Field(..., description="Universe text")
    boundary: BoundaryPolicy = Field(BoundaryPolicy.BOUNDED)


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SessionResponse(BaseModel):
    """A session and its current generation."""
    session_id: str
    generation: int = Field(0, ge=0)
    universe: UniverseInfo
    created_at: float
    updated_at: float
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """List of session IDs."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response when ending a session."""
    success: bool
    session_id: str


class ParseResponse(BaseModel):
    """Result of a stateless parse."""
    valid: bool
    universe: Optional[UniverseInfo] = None
    next_generation: Optional[UniverseInfo] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    environment: str
    active_sessions: int = 0
