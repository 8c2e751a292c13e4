"""
API Module - HTTP interface for renderers.

Exposes the engine via REST API. A client:
1. Creates a session from an empty, random, or parsed universe
2. Steps it forward and reads back each generation
3. Reseeds it from text when needed
4. Ends the session

All state is session-scoped and in-memory.
"""

from .schemas import (
    # Requests
    CreateUniverseRequest,
    StepRequest,
    ReseedRequest,
    ParseRequest,
    # Responses
    SessionResponse,
    SessionListResponse,
    EndSessionResponse,
    ParseResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    UniverseInfo,
    CreationMode,
    BoundaryPolicy,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateUniverseRequest",
    "StepRequest",
    "ReseedRequest",
    "ParseRequest",
    # Responses
    "SessionResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "ParseResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "UniverseInfo",
    "CreationMode",
    "BoundaryPolicy",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
