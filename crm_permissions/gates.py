"""
Declarative permission gates.

A gate decides whether a region of the UI is shown. While the store is
loading the decision is LOADING and nothing is rendered, neither the
content nor its fallback. Fetch errors never reach a gate: the store has
already replaced the matrix with the read-only fallback.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any

from .checks import is_allowed
from .matrix import ObjectType, PermissionAction
from .store import PermissionState


class GateDecision(Enum):
    """Outcome of a gate check."""

    LOADING = "loading"
    GRANTED = "granted"
    DENIED = "denied"


def evaluate_gate(
    state: PermissionState,
    object_type: ObjectType,
    action: PermissionAction,
) -> GateDecision:
    """Decide a single (object, action) gate."""
    if state.loading:
        return GateDecision.LOADING
    if is_allowed(state.permissions, object_type, action):
        return GateDecision.GRANTED
    return GateDecision.DENIED


def evaluate_multi_gate(
    state: PermissionState,
    permissions: Iterable[tuple[ObjectType, PermissionAction]],
    require_all: bool = False,
) -> GateDecision:
    """Decide a gate over several (object, action) pairs.

    Pairs are combined with AND when ``require_all`` is set, otherwise OR.
    """
    if state.loading:
        return GateDecision.LOADING

    results = [
        is_allowed(state.permissions, object_type, action)
        for object_type, action in permissions
    ]
    granted = all(results) if require_all else any(results)
    return GateDecision.GRANTED if granted else GateDecision.DENIED


def _render(decision: GateDecision, children: Any, fallback: Any) -> Any:
    if decision == GateDecision.LOADING:
        return None
    if decision == GateDecision.GRANTED:
        return children
    return fallback


@dataclass(frozen=True)
class PermissionGate:
    """Gate on a single (object, action) permission."""

    object_type: ObjectType
    action: PermissionAction

    def decide(self, state: PermissionState) -> GateDecision:
        return evaluate_gate(state, self.object_type, self.action)

    def render(self, state: PermissionState, children: Any, fallback: Any = None) -> Any:
        """Return ``children`` if granted, ``fallback`` if denied, None while loading."""
        return _render(self.decide(state), children, fallback)


@dataclass(frozen=True)
class MultiPermissionGate:
    """Gate on any (or all) of several permissions."""

    permissions: Sequence[tuple[ObjectType, PermissionAction]]
    require_all: bool = False

    def decide(self, state: PermissionState) -> GateDecision:
        return evaluate_multi_gate(state, self.permissions, self.require_all)

    def render(self, state: PermissionState, children: Any, fallback: Any = None) -> Any:
        """Return ``children`` if granted, ``fallback`` if denied, None while loading."""
        return _render(self.decide(state), children, fallback)


CreatePermissionGate = partial(PermissionGate, action=PermissionAction.CREATE)
EditPermissionGate = partial(PermissionGate, action=PermissionAction.EDIT)
DeletePermissionGate = partial(PermissionGate, action=PermissionAction.DELETE)
ReadPermissionGate = partial(PermissionGate, action=PermissionAction.READ)
