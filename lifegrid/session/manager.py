"""
Session Manager - Holds running universes for API clients.

LIFECYCLE:
1. Client creates a session from an empty, random, or parsed universe
2. Client steps the session forward one or more generations
3. Client may reseed the session with a new universe (generation resets)
4. Client ends the session, or it expires after sitting idle

PERSISTENCE RULES:
- Sessions are in-memory only
- A session holds the CURRENT generation, never a history
- Each step replaces the universe with a fresh one; old generations
  are never mutated
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
import logging
import threading
import time
import uuid

from ..engine_core import Universe, ToroidalUniverse

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    One running simulation.

    The universe is replaced, never mutated, as the session advances.
    SessionManager hands out copies; revision counts stored changes.
    """
    session_id: str
    universe: Universe
    generation: int = 0
    revision: int = 0
    created_at: float = field(default_factory=time.time)
    updated_at: float = field(default_factory=time.time)

    @property
    def boundary(self) -> str:
        """Name of the boundary policy of the current universe."""
        return "toroidal" if isinstance(self.universe, ToroidalUniverse) else "bounded"

    def idle_seconds(self, now: float | None = None) -> float:
        return (now if now is not None else time.time()) - self.updated_at


class SessionManager:
    """
    Manages simulation sessions.

    Responsibilities:
    - Create sessions from universes
    - Advance and reseed sessions
    - Clean up ended and stale sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def create_session(self, universe: Universe) -> Session:
        """Create a new session at generation 0."""
        session = Session(session_id=str(uuid.uuid4()), universe=universe)
        with self._lock:
            self._sessions[session.session_id] = session
            snapshot = replace(session)
        logger.info(
            "Created session %s (%dx%d, %s)",
            session.session_id, universe.columns, universe.rows, session.boundary,
        )
        return snapshot

    def get_session(self, session_id: str) -> Session | None:
        """Get a snapshot of a session by ID."""
        with self._lock:
            session = self._sessions.get(session_id)
            return replace(session) if session else None

    def advance(self, session_id: str, generations: int = 1) -> Session | None:
        """
        Step a session forward.

        Stepping runs outside the manager lock, so other sessions stay
        responsive. The result is only stored if the session was not
        changed meanwhile; otherwise stepping restarts from the newer
        universe.

        Args:
            session_id: Session to advance
            generations: Number of generations to step (>= 0)

        Returns:
            A snapshot of the updated session, or None if it does not exist
        """
        if generations < 0:
            raise ValueError(f"generations must be >= 0, got {generations}")

        while True:
            with self._lock:
                session = self._sessions.get(session_id)
                if not session:
                    return None
                universe = session.universe
                revision = session.revision

            for _ in range(generations):
                universe = universe.step()

            with self._lock:
                session = self._sessions.get(session_id)
                if not session:
                    return None
                if session.revision != revision:
                    logger.debug("Session %s changed while stepping, retrying", session_id)
                    continue
                session.universe = universe
                session.generation += generations
                session.revision += 1
                session.updated_at = time.time()
                snapshot = replace(session)
            break

        logger.debug(
            "Advanced session %s by %d to generation %d",
            session_id, generations, snapshot.generation,
        )
        return snapshot

    def replace_universe(self, session_id: str, universe: Universe) -> Session | None:
        """Reseed a session with a new universe. Generation resets to 0."""
        with self._lock:
            session = self._sessions.get(session_id)
            if not session:
                return None
            session.universe = universe
            session.generation = 0
            session.revision += 1
            session.updated_at = time.time()
            snapshot = replace(session)
        logger.info("Reseeded session %s", session_id)
        return snapshot

    def end_session(self, session_id: str) -> bool:
        """End a session and drop it from memory."""
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session:
            logger.info(
                "Ended session %s at generation %d", session_id, session.generation
            )
        return session is not None

    def list_sessions(self) -> list[str]:
        """List IDs of all sessions."""
        with self._lock:
            return list(self._sessions)

    def cleanup_stale_sessions(self, max_age_seconds: float = 3600) -> int:
        """
        Drop sessions idle for longer than max_age_seconds.

        Returns the number of sessions removed.
        """
        now = time.time()
        with self._lock:
            stale = [
                session_id for session_id, session in self._sessions.items()
                if session.idle_seconds(now) > max_age_seconds
            ]
            for session_id in stale:
                del self._sessions[session_id]

        if stale:
            logger.info("Cleaned up %d stale session(s)", len(stale))
        return len(stale)
