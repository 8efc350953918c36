"""Session transition function for the permission store."""

from .types import SessionEffect, SessionStatus


def on_session_change(old_status: SessionStatus, new_status: SessionStatus) -> SessionEffect:
    """Decide what the store does when the session status changes.

    Entering AUTHENTICATED triggers exactly one fetch. Entering
    UNAUTHENTICATED clears the matrix, including from the initial LOADING
    status so the store stops reporting itself as loading. Staying in the
    same status, or moving back to LOADING, has no effect.

    Args:
        old_status: Status before the transition
        new_status: Status after the transition

    Returns:
        The effect the store should apply
    """
    if old_status == new_status:
        return SessionEffect.NONE

    if new_status == SessionStatus.AUTHENTICATED:
        return SessionEffect.FETCH

    if new_status == SessionStatus.UNAUTHENTICATED:
        return SessionEffect.CLEAR

    return SessionEffect.NONE
