"""
Presentational helpers for permission state.

Copy and descriptors for "access denied" notices, permission-level badges
and the per-object detail grid. Nothing here decides access.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from .config import DEFAULT_SUPPORT_EMAIL, PermissionsConfig
from .matrix import ObjectType, PermissionAction, PermissionLevel, PermissionMatrix

OBJECT_LABELS: dict[ObjectType, str] = {
    ObjectType.ACCOUNTS: "Accounts",
    ObjectType.CONTACTS: "Contacts",
    ObjectType.OPPORTUNITIES: "Opportunities",
    ObjectType.ACTIVITIES: "Activities",
}

ACTION_LABELS: dict[PermissionAction, str] = {
    PermissionAction.CREATE: "create",
    PermissionAction.READ: "view",
    PermissionAction.EDIT: "edit",
    PermissionAction.DELETE: "delete",
}

DENIED_TITLE = "Access restricted"


@dataclass(frozen=True)
class PermissionDenied:
    """Notice shown in place of content the user may not see.

    Used by pages that check a permission themselves instead of wrapping
    their content in a gate.
    """

    object_type: ObjectType | None = None
    action: PermissionAction | None = None
    custom_message: str | None = None
    contact_support: bool = True
    support_email: str = DEFAULT_SUPPORT_EMAIL

    title = DENIED_TITLE

    @classmethod
    def from_config(
        cls,
        config: PermissionsConfig,
        object_type: ObjectType | None = None,
        action: PermissionAction | None = None,
        custom_message: str | None = None,
    ) -> PermissionDenied:
        """Build a notice addressed to the configured support mailbox."""
        return cls(
            object_type=object_type,
            action=action,
            custom_message=custom_message,
            support_email=config.support_email,
        )

    @property
    def message(self) -> str:
        if self.custom_message:
            return self.custom_message
        if self.object_type is not None and self.action is not None:
            return (
                f"You do not have permission to {ACTION_LABELS[self.action]} "
                f"{OBJECT_LABELS[self.object_type].lower()}."
            )
        if self.object_type is not None:
            return f"You do not have access to {OBJECT_LABELS[self.object_type].lower()}."
        return "You do not have permission to perform this action."

    def support_link(self) -> str | None:
        """``mailto:`` link requesting the missing permission."""
        if not self.contact_support:
            return None

        object_label = OBJECT_LABELS[self.object_type] if self.object_type else "unknown"
        action_label = ACTION_LABELS[self.action] if self.action else "unknown"
        body = (
            "I need the following permission:\n\n"
            f"Object: {object_label}\n"
            f"Action: {action_label}\n\n"
            "Reason: "
        )
        return (
            f"mailto:{self.support_email}"
            f"?subject={quote('Permission request')}&body={quote(body)}"
        )


def create_denied(
    object_type: ObjectType,
    support_email: str = DEFAULT_SUPPORT_EMAIL,
    contact_support: bool = True,
) -> PermissionDenied:
    return PermissionDenied(
        object_type=object_type,
        action=PermissionAction.CREATE,
        custom_message=(
            f"You do not have permission to create new "
            f"{OBJECT_LABELS[object_type].lower()}."
        ),
        contact_support=contact_support,
        support_email=support_email,
    )


def edit_denied(
    object_type: ObjectType,
    support_email: str = DEFAULT_SUPPORT_EMAIL,
    contact_support: bool = True,
) -> PermissionDenied:
    return PermissionDenied(
        object_type=object_type,
        action=PermissionAction.EDIT,
        custom_message=(
            f"You do not have permission to edit {OBJECT_LABELS[object_type].lower()}. "
            "Showing in read-only mode."
        ),
        contact_support=contact_support,
        support_email=support_email,
    )


def delete_denied(
    object_type: ObjectType,
    support_email: str = DEFAULT_SUPPORT_EMAIL,
    contact_support: bool = True,
) -> PermissionDenied:
    return PermissionDenied(
        object_type=object_type,
        action=PermissionAction.DELETE,
        custom_message=(
            f"You do not have permission to delete {OBJECT_LABELS[object_type].lower()}."
        ),
        contact_support=contact_support,
        support_email=support_email,
    )


def view_denied(
    object_type: ObjectType,
    support_email: str = DEFAULT_SUPPORT_EMAIL,
    contact_support: bool = True,
) -> PermissionDenied:
    return PermissionDenied(
        object_type=object_type,
        action=PermissionAction.READ,
        custom_message=(
            f"You do not have permission to view {OBJECT_LABELS[object_type].lower()}."
        ),
        contact_support=contact_support,
        support_email=support_email,
    )


@dataclass(frozen=True)
class LevelBadge:
    """Badge copy for a permission level."""

    level: PermissionLevel
    label: str
    icon: str
    description: str


LEVEL_BADGES: dict[PermissionLevel, LevelBadge] = {
    PermissionLevel.ADMIN: LevelBadge(
        PermissionLevel.ADMIN, "Administrator", "👑", "Full access to all objects"
    ),
    PermissionLevel.MANAGER: LevelBadge(
        PermissionLevel.MANAGER, "Manager", "👨‍💼", "Full access to sales objects"
    ),
    PermissionLevel.USER: LevelBadge(
        PermissionLevel.USER, "User", "👤", "Access with edit rights"
    ),
    PermissionLevel.READONLY: LevelBadge(
        PermissionLevel.READONLY, "Read only", "👁️", "Read-only access"
    ),
    PermissionLevel.NONE: LevelBadge(
        PermissionLevel.NONE, "No access", "🚫", "No access rights"
    ),
}


def describe_level(level: PermissionLevel) -> LevelBadge:
    return LEVEL_BADGES[level]


@dataclass(frozen=True)
class PermissionGridRow:
    """One object's flags in the permission detail grid."""

    object_type: ObjectType
    label: str
    actions: dict[PermissionAction, bool]


def permission_grid(matrix: PermissionMatrix) -> list[PermissionGridRow]:
    """Rows for a per-object, per-action detail view, in object order."""
    return [
        PermissionGridRow(
            object_type=object_type,
            label=OBJECT_LABELS[object_type],
            actions={action: matrix.allows(object_type, action) for action in PermissionAction},
        )
        for object_type in ObjectType
    ]


def indicator_title(action: PermissionAction, allowed: bool) -> str:
    """Tooltip for a single permission indicator dot."""
    return f"{action.value} permission: {'allowed' if allowed else 'denied'}"
