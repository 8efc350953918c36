"""
Session provider interface.

The session provider is owned by the application's auth flow (OAuth login,
token refresh). The permission layer reads its status and, when present,
the access token to forward to the permissions endpoint.
"""

from abc import ABC, abstractmethod

from .types import SessionStatus


class SessionProvider(ABC):
    """Abstract session provider.

    Implementations report the current authentication status and the
    bearer token for the signed-in user.
    """

    @property
    @abstractmethod
    def status(self) -> SessionStatus:
        """Get the current session status."""
        ...

    @abstractmethod
    async def get_access_token(self) -> str | None:
        """Get the access token for API calls, or None when there is none."""
        ...


class StaticSessionProvider(SessionProvider):
    """In-memory session provider whose status is set explicitly.

    Usage:
        session = StaticSessionProvider()
        session.sign_in("token-abc")
        client = PermissionsClient(config, session)
    """

    def __init__(
        self,
        status: SessionStatus = SessionStatus.LOADING,
        access_token: str | None = None,
    ) -> None:
        self._status = status
        self._access_token = access_token

    @property
    def status(self) -> SessionStatus:
        return self._status

    async def get_access_token(self) -> str | None:
        if self._status != SessionStatus.AUTHENTICATED:
            return None
        return self._access_token

    def sign_in(self, access_token: str | None = None) -> None:
        """Mark the session authenticated."""
        self._access_token = access_token
        self._status = SessionStatus.AUTHENTICATED

    def sign_out(self) -> None:
        """Mark the session unauthenticated and drop the token."""
        self._access_token = None
        self._status = SessionStatus.UNAUTHENTICATED
