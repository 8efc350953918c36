"""
HTTP client for the permissions endpoint.

Issues a single ``GET /api/salesforce/permissions`` per call and parses the
body into a :class:`PermissionMatrix`. There is no retry and no caching
here; the store decides when to call.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

import aiohttp

from .config import PermissionsConfig
from .exceptions import MalformedPermissionsError, PermissionFetchError
from .matrix import PermissionMatrix
from .session import SessionProvider

logger = logging.getLogger(__name__)


class PermissionsFetcher(Protocol):
    """Anything that can resolve the current user's permission matrix."""

    async def fetch_matrix(self) -> PermissionMatrix: ...


class PermissionsClient:
    """aiohttp client for the permissions endpoint.

    Example:
        >>> client = PermissionsClient(PermissionsConfig.from_environment(), session)
        >>> matrix = await client.fetch_matrix()
        >>> matrix.allows(ObjectType.ACCOUNTS, PermissionAction.EDIT)
        True
    """

    def __init__(
        self,
        config: PermissionsConfig,
        session_provider: SessionProvider | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Endpoint location and request settings
            session_provider: Source of the bearer token, if the endpoint needs one
        """
        self.config = config
        self.session_provider = session_provider

    async def _build_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.session_provider is not None:
            token = await self.session_provider.get_access_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    async def fetch_matrix(self) -> PermissionMatrix:
        """Fetch and parse the permission matrix.

        Returns:
            The matrix exactly as the endpoint reported it

        Raises:
            PermissionFetchError: On network failure, timeout, or non-2xx status
            MalformedPermissionsError: If the body is not a valid matrix
        """
        payload = await self._get_json(self.config.permissions_url)
        return PermissionMatrix.from_dict(payload)

    async def _get_json(self, url: str) -> Any:
        headers = await self._build_headers()
        timeout = aiohttp.ClientTimeout(total=self.config.request_timeout)
        request_kwargs: dict[str, Any] = {"headers": headers}
        if not self.config.verify_ssl:
            request_kwargs["ssl"] = False

        logger.debug(f"Fetching permissions from {url}")
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, **request_kwargs) as response:
                    if response.status < 200 or response.status >= 300:
                        raise PermissionFetchError(url, status=response.status)
                    try:
                        return await response.json(content_type=None)
                    except ValueError as e:
                        raise MalformedPermissionsError(
                            f"Permissions response is not valid JSON: {e}"
                        ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise PermissionFetchError(url, cause=e) from e
