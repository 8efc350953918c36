"""
Session lifecycle for the permission store.

Provides the session status enum, the transition function that maps
status changes to store effects, and the session provider interface.
"""

from .provider import SessionProvider, StaticSessionProvider
from .transitions import on_session_change
from .types import SessionEffect, SessionStatus

__all__ = [
    # Types
    "SessionEffect",
    "SessionStatus",
    # Transitions
    "on_session_change",
    # Providers
    "SessionProvider",
    "StaticSessionProvider",
]
