"""Tests for session lifecycle types and providers."""

from __future__ import annotations

import pytest

from crm_permissions import (
    SessionEffect,
    SessionStatus,
    StaticSessionProvider,
    on_session_change,
)


class TestOnSessionChange:
    """Tests for the transition function."""

    @pytest.mark.parametrize(
        "old_status", [SessionStatus.LOADING, SessionStatus.UNAUTHENTICATED]
    )
    def test_sign_in_fetches(self, old_status: SessionStatus) -> None:
        assert on_session_change(old_status, SessionStatus.AUTHENTICATED) == SessionEffect.FETCH

    @pytest.mark.parametrize("old_status", [SessionStatus.LOADING, SessionStatus.AUTHENTICATED])
    def test_sign_out_clears(self, old_status: SessionStatus) -> None:
        assert on_session_change(old_status, SessionStatus.UNAUTHENTICATED) == SessionEffect.CLEAR

    @pytest.mark.parametrize("status", list(SessionStatus))
    def test_same_status_is_noop(self, status: SessionStatus) -> None:
        assert on_session_change(status, status) == SessionEffect.NONE

    def test_back_to_loading_is_noop(self) -> None:
        assert (
            on_session_change(SessionStatus.AUTHENTICATED, SessionStatus.LOADING)
            == SessionEffect.NONE
        )


class TestStaticSessionProvider:
    """Tests for StaticSessionProvider."""

    @pytest.mark.asyncio
    async def test_starts_loading_without_token(self) -> None:
        session = StaticSessionProvider()

        assert session.status == SessionStatus.LOADING
        assert await session.get_access_token() is None

    @pytest.mark.asyncio
    async def test_sign_in_exposes_token(self) -> None:
        session = StaticSessionProvider()

        session.sign_in("token-abc")

        assert session.status == SessionStatus.AUTHENTICATED
        assert await session.get_access_token() == "token-abc"

    @pytest.mark.asyncio
    async def test_sign_out_drops_token(self) -> None:
        session = StaticSessionProvider(SessionStatus.AUTHENTICATED, "token-abc")

        session.sign_out()

        assert session.status == SessionStatus.UNAUTHENTICATED
        assert await session.get_access_token() is None
