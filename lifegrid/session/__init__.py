"""
Session Module - In-memory handles on running simulations.

A session holds one current generation:
- Created from an empty, random, or parsed universe
- Advanced by stepping, reseeded by replacing the universe
- Destroyed when ended or left idle too long

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, Session

__all__ = [
    "SessionManager",
    "Session",
]
