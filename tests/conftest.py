"""
Shared test configuration and fixtures.

Provides a scriptable fake fetcher so store tests can control exactly
when and how each permission fetch resolves, without a network.
"""

import asyncio
import logging

import pytest

from crm_permissions import (
    ObjectPermission,
    PermissionMatrix,
    PermissionsError,
)

logger = logging.getLogger(__name__)


class FakeFetcher:
    """
    Fake permissions fetcher for testing.

    Each call pops the next scripted outcome: a matrix is returned, an
    exception is raised. Calls registered with ``hold`` wait on their
    event first so tests can keep a fetch in flight.
    """

    def __init__(self, *outcomes: PermissionMatrix | PermissionsError):
        self.outcomes = list(outcomes)
        self.calls = 0
        self.holds: dict[int, asyncio.Event] = {}

    def hold(self, call_index: int) -> asyncio.Event:
        """Make call number ``call_index`` block until the returned event is set."""
        event = asyncio.Event()
        self.holds[call_index] = event
        return event

    async def fetch_matrix(self) -> PermissionMatrix:
        index = self.calls
        self.calls += 1
        outcome = self.outcomes[index]

        if index in self.holds:
            await self.holds[index].wait()

        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def full_matrix() -> PermissionMatrix:
    """All 16 flags granted."""
    return PermissionMatrix.full_access()


@pytest.fixture
def fallback_matrix() -> PermissionMatrix:
    """Read-only access on every object."""
    return PermissionMatrix.fallback()


@pytest.fixture
def manager_matrix() -> PermissionMatrix:
    """accounts.create and contacts.edit only."""
    return PermissionMatrix(
        accounts=ObjectPermission(create=True),
        contacts=ObjectPermission(edit=True),
        opportunities=ObjectPermission.none(),
        activities=ObjectPermission.none(),
    )


@pytest.fixture
def mixed_matrix() -> PermissionMatrix:
    """A different shape per object."""
    return PermissionMatrix(
        accounts=ObjectPermission.full(),
        contacts=ObjectPermission(create=False, read=True, edit=True, delete=False),
        opportunities=ObjectPermission(create=True, read=False, edit=True, delete=True),
        activities=ObjectPermission.read_only(),
    )


@pytest.fixture
def make_fetcher() -> type[FakeFetcher]:
    """Factory for scripted fetchers: ``make_fetcher(matrix, error, ...)``."""
    return FakeFetcher
