"""
Session-scoped permission store.

Owns the single source of truth for the signed-in user's permission matrix
and its loading/error state. Create one store per user session and pass it
to whatever needs to check permissions.
"""

from __future__ import annotations

from dataclasses import dataclass

from .checks import PermissionChecker
from .client import PermissionsFetcher
from .exceptions import PermissionsError
from .logging_utils import PermissionsLoggerAdapter, get_permissions_logger
from .matrix import PermissionMatrix
from .session import SessionEffect, SessionStatus, on_session_change


@dataclass(frozen=True)
class PermissionState:
    """Immutable snapshot of the store."""

    permissions: PermissionMatrix | None
    loading: bool
    error: str | None = None


class PermissionStore:
    """Permission matrix cache bound to one user session.

    The matrix is fetched once when the session becomes authenticated,
    re-fetched on :meth:`refresh`, and cleared on sign-out. A failed fetch
    never leaves the store empty: it installs the read-only fallback
    matrix and records the error message.

    Overlapping fetches resolve as "latest request wins": every fetch takes
    a sequence number, and responses for anything but the latest one are
    dropped. Sign-out also advances the sequence, so a response arriving
    after sign-out cannot repopulate the store.

    Example:
        >>> store = PermissionStore(PermissionsClient(config, session))
        >>> await store.handle_session_change(SessionStatus.AUTHENTICATED)
        >>> store.checker().can_edit(ObjectType.ACCOUNTS)
        True
    """

    def __init__(self, fetcher: PermissionsFetcher, name: str = "default") -> None:
        """Initialize the store.

        Args:
            fetcher: Resolves the matrix; usually a PermissionsClient
            name: Label attached to log records for this store
        """
        self.fetcher = fetcher
        self.name = name

        self._session_status = SessionStatus.LOADING
        self._permissions: PermissionMatrix | None = None
        self._loading = True
        self._error: str | None = None
        self._sequence = 0

        self._log = PermissionsLoggerAdapter(get_permissions_logger("store"), {"store": name})

    @property
    def session_status(self) -> SessionStatus:
        return self._session_status

    @property
    def permissions(self) -> PermissionMatrix | None:
        return self._permissions

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def state(self) -> PermissionState:
        return PermissionState(
            permissions=self._permissions,
            loading=self._loading,
            error=self._error,
        )

    def checker(self) -> PermissionChecker:
        """Query API bound to the current matrix."""
        return PermissionChecker(self._permissions)

    async def handle_session_change(self, new_status: SessionStatus) -> SessionEffect:
        """Apply a session status transition.

        Args:
            new_status: The session's new status

        Returns:
            The effect that was applied
        """
        effect = on_session_change(self._session_status, new_status)
        self._log.debug(
            f"Session {self._session_status.value} -> {new_status.value}: {effect.value}",
            extra={"session_status": new_status.value},
        )
        self._session_status = new_status

        if effect == SessionEffect.FETCH:
            await self._fetch()
        elif effect == SessionEffect.CLEAR:
            self.clear()

        return effect

    async def refresh(self) -> None:
        """Re-fetch the matrix, ignoring what is cached.

        Does nothing unless the session is authenticated.
        """
        if self._session_status != SessionStatus.AUTHENTICATED:
            self._log.debug(
                "Ignoring permission refresh while not authenticated",
                extra={"session_status": self._session_status.value},
            )
            return
        await self._fetch()

    def install(self, matrix: PermissionMatrix) -> None:
        """Install a known matrix as if it had just been fetched."""
        self._sequence += 1
        self._permissions = matrix
        self._loading = False
        self._error = None

    def clear(self) -> None:
        """Drop the matrix and invalidate any in-flight fetch."""
        self._sequence += 1
        self._permissions = None
        self._loading = False
        self._error = None

    async def _fetch(self) -> None:
        self._sequence += 1
        sequence = self._sequence
        self._loading = True
        self._error = None

        try:
            try:
                matrix = await self.fetcher.fetch_matrix()
            except PermissionsError as e:
                if sequence != self._sequence:
                    self._log.debug(f"Discarding stale permission failure (request #{sequence})")
                    return
                self._log.warning(
                    f"Permission fetch failed, using read-only fallback: {e.message}",
                    extra={"session_status": self._session_status.value, "details": e.details},
                )
                self._permissions = PermissionMatrix.fallback()
                self._error = e.message
                return

            if sequence != self._sequence:
                self._log.debug(f"Discarding stale permission response (request #{sequence})")
                return

            self._permissions = matrix
            self._log.info(
                "Permissions loaded",
                extra={"session_status": self._session_status.value},
            )
        finally:
            # Cancellation and unexpected errors must not leave gates suppressed.
            if sequence == self._sequence:
                self._loading = False
