"""
Session lifecycle types.

The permission store only cares about whether the user is signed in.
These enums describe that status and what the store should do when it
changes.
"""

from enum import Enum


class SessionStatus(Enum):
    """Authentication status reported by the session provider."""

    LOADING = "loading"  # Session not resolved yet
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class SessionEffect(Enum):
    """Action the permission store takes on a session transition."""

    FETCH = "fetch"  # Load the matrix from the permissions endpoint
    CLEAR = "clear"  # Drop the matrix and any in-flight fetch
    NONE = "none"
