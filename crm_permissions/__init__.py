"""
CRM Permissions

Per-object permission matrix for a Salesforce-backed CRM, scoped to the
signed-in user's session.

Provides:
- Permission matrix model for Accounts, Contacts, Opportunities and Activities
- Session-scoped store with read-only fallback on fetch failure
- Pure query API (has_permission, can_manage, permission level, ...)
- Declarative gates with an explicit Loading / Granted / Denied decision

Usage:

    >>> from crm_permissions import PermissionsClient, PermissionsConfig, PermissionStore
    >>> client = PermissionsClient(PermissionsConfig.from_environment(), session)
    >>> store = PermissionStore(client)
    >>> await store.handle_session_change(SessionStatus.AUTHENTICATED)
    >>>
    >>> checker = store.checker()
    >>> checker.can_edit(ObjectType.ACCOUNTS)
    >>> checker.get_permission_level()
    >>>
    >>> EditPermissionGate(ObjectType.ACCOUNTS).render(store.state, edit_button)
"""

from .checks import ObjectPermissionSummary, PermissionChecker, is_allowed
from .client import PermissionsClient, PermissionsFetcher
from .config import PermissionsConfig
from .display import (
    LevelBadge,
    PermissionDenied,
    PermissionGridRow,
    create_denied,
    delete_denied,
    describe_level,
    edit_denied,
    indicator_title,
    permission_grid,
    view_denied,
)
from .exceptions import (
    ConfigurationError,
    MalformedPermissionsError,
    PermissionFetchError,
    PermissionsError,
)
from .gates import (
    CreatePermissionGate,
    DeletePermissionGate,
    EditPermissionGate,
    GateDecision,
    MultiPermissionGate,
    PermissionGate,
    ReadPermissionGate,
    evaluate_gate,
    evaluate_multi_gate,
)
from .matrix import (
    ObjectPermission,
    ObjectType,
    PermissionAction,
    PermissionLevel,
    PermissionMatrix,
)
from .session import (
    SessionEffect,
    SessionProvider,
    SessionStatus,
    StaticSessionProvider,
    on_session_change,
)
from .store import PermissionState, PermissionStore

__all__ = [
    # Matrix model
    "ObjectPermission",
    "ObjectType",
    "PermissionAction",
    "PermissionLevel",
    "PermissionMatrix",
    # Session
    "SessionEffect",
    "SessionProvider",
    "SessionStatus",
    "StaticSessionProvider",
    "on_session_change",
    # Client and config
    "PermissionsClient",
    "PermissionsConfig",
    "PermissionsFetcher",
    # Store
    "PermissionState",
    "PermissionStore",
    # Query API
    "ObjectPermissionSummary",
    "PermissionChecker",
    "is_allowed",
    # Gates
    "GateDecision",
    "PermissionGate",
    "MultiPermissionGate",
    "CreatePermissionGate",
    "EditPermissionGate",
    "DeletePermissionGate",
    "ReadPermissionGate",
    "evaluate_gate",
    "evaluate_multi_gate",
    # Display
    "LevelBadge",
    "PermissionDenied",
    "PermissionGridRow",
    "create_denied",
    "edit_denied",
    "delete_denied",
    "view_denied",
    "describe_level",
    "indicator_title",
    "permission_grid",
    # Exceptions
    "PermissionsError",
    "PermissionFetchError",
    "MalformedPermissionsError",
    "ConfigurationError",
]

__version__ = "0.1.0"
