"""
Permission query API.

Every predicate here is a pure function of a matrix snapshot. A ``None``
matrix means permissions are not loaded yet (or the user signed out), and
every predicate answers False.
"""

from __future__ import annotations

from dataclasses import dataclass

from .matrix import ObjectType, PermissionAction, PermissionLevel, PermissionMatrix


def is_allowed(
    matrix: PermissionMatrix | None,
    object_type: ObjectType,
    action: PermissionAction,
) -> bool:
    """Check one (object, action) pair against a possibly missing matrix."""
    if matrix is None:
        return False
    return matrix.allows(object_type, action)


@dataclass(frozen=True)
class ObjectPermissionSummary:
    """Derived flags for one object type."""

    object_type: ObjectType
    can_create: bool
    can_read: bool
    can_edit: bool
    can_delete: bool
    is_read_only: bool
    can_manage: bool
    has_access: bool


class PermissionChecker:
    """Predicates and classifications over a fixed matrix.

    The checker never fetches; build a new one (or call
    ``PermissionStore.checker()``) after the matrix changes.
    """

    def __init__(self, matrix: PermissionMatrix | None) -> None:
        self.matrix = matrix

    def has_permission(self, object_type: ObjectType, action: PermissionAction) -> bool:
        return is_allowed(self.matrix, object_type, action)

    def can_create(self, object_type: ObjectType) -> bool:
        return self.has_permission(object_type, PermissionAction.CREATE)

    def can_read(self, object_type: ObjectType) -> bool:
        return self.has_permission(object_type, PermissionAction.READ)

    def can_edit(self, object_type: ObjectType) -> bool:
        return self.has_permission(object_type, PermissionAction.EDIT)

    def can_delete(self, object_type: ObjectType) -> bool:
        return self.has_permission(object_type, PermissionAction.DELETE)

    def can_access_object(self, object_type: ObjectType) -> bool:
        """Access is defined by read capability alone.

        An object with create/edit/delete but no read is inaccessible.
        """
        return self.can_read(object_type)

    def can_manage(self, object_type: ObjectType) -> bool:
        """Create, edit and delete are all granted. Read is not checked."""
        return (
            self.can_create(object_type)
            and self.can_edit(object_type)
            and self.can_delete(object_type)
        )

    def is_read_only(self, object_type: ObjectType) -> bool:
        return (
            self.can_read(object_type)
            and not self.can_create(object_type)
            and not self.can_edit(object_type)
            and not self.can_delete(object_type)
        )

    def has_any_permission(self, object_type: ObjectType) -> bool:
        return any(self.has_permission(object_type, action) for action in PermissionAction)

    def has_full_access(self) -> bool:
        """Every action on every object type is granted."""
        if self.matrix is None:
            return False
        return all(
            self.has_permission(object_type, action)
            for object_type in ObjectType
            for action in PermissionAction
        )

    def get_permission_level(self) -> PermissionLevel:
        """Classify the matrix for display.

        Ordered decision list, first match wins:
        none (no matrix), admin (full access), manager (some create and
        some edit), user (some edit), readonly.
        """
        if self.matrix is None:
            return PermissionLevel.NONE

        if self.has_full_access():
            return PermissionLevel.ADMIN

        has_create = any(self.can_create(object_type) for object_type in ObjectType)
        has_edit = any(self.can_edit(object_type) for object_type in ObjectType)

        if has_create and has_edit:
            return PermissionLevel.MANAGER
        if has_edit:
            return PermissionLevel.USER

        return PermissionLevel.READONLY

    def get_object_summary(self, object_type: ObjectType) -> ObjectPermissionSummary | None:
        """Summarize one object type, or None when no matrix is loaded."""
        if self.matrix is None:
            return None

        return ObjectPermissionSummary(
            object_type=object_type,
            can_create=self.can_create(object_type),
            can_read=self.can_read(object_type),
            can_edit=self.can_edit(object_type),
            can_delete=self.can_delete(object_type),
            is_read_only=self.is_read_only(object_type),
            can_manage=self.can_manage(object_type),
            has_access=self.has_any_permission(object_type),
        )

    # Per-object shortcuts -------------------------------------------------

    def accounts(self) -> ObjectPermissionSummary | None:
        return self.get_object_summary(ObjectType.ACCOUNTS)

    def contacts(self) -> ObjectPermissionSummary | None:
        return self.get_object_summary(ObjectType.CONTACTS)

    def opportunities(self) -> ObjectPermissionSummary | None:
        return self.get_object_summary(ObjectType.OPPORTUNITIES)

    def activities(self) -> ObjectPermissionSummary | None:
        return self.get_object_summary(ObjectType.ACTIVITIES)
