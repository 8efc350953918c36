"""
Permission matrix types.

A matrix records, per CRM object type, which of the four CRUD actions the
signed-in user may perform. Every (object, action) pair is an independent
fact; there is no inheritance between actions or objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..exceptions import MalformedPermissionsError


class ObjectType(Enum):
    """CRM entity categories that carry permissions."""

    ACCOUNTS = "accounts"
    CONTACTS = "contacts"
    OPPORTUNITIES = "opportunities"
    ACTIVITIES = "activities"


class PermissionAction(Enum):
    """Actions that can be granted on an object type."""

    CREATE = "create"
    READ = "read"
    EDIT = "edit"
    DELETE = "delete"


class PermissionLevel(Enum):
    """Display-only classification of a whole matrix."""

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"
    READONLY = "readonly"
    NONE = "none"


@dataclass(frozen=True)
class ObjectPermission:
    """CRUD flags for a single object type."""

    create: bool = False
    read: bool = False
    edit: bool = False
    delete: bool = False

    def allows(self, action: PermissionAction) -> bool:
        """Return the stored flag for ``action``."""
        return getattr(self, action.value)

    @classmethod
    def read_only(cls) -> ObjectPermission:
        return cls(create=False, read=True, edit=False, delete=False)

    @classmethod
    def full(cls) -> ObjectPermission:
        return cls(create=True, read=True, edit=True, delete=True)

    @classmethod
    def none(cls) -> ObjectPermission:
        return cls()

    def to_dict(self) -> dict[str, bool]:
        """Serialize to the endpoint's JSON shape."""
        return {action.value: self.allows(action) for action in PermissionAction}

    @classmethod
    def from_dict(cls, data: Any, object_name: str = "object") -> ObjectPermission:
        """Deserialize, requiring all four boolean flags.

        Raises:
            MalformedPermissionsError: If ``data`` is not a mapping, a flag is
                missing, or a flag is not a boolean
        """
        if not isinstance(data, dict):
            raise MalformedPermissionsError(
                f"Permissions for '{object_name}' must be an object", field=object_name
            )

        flags: dict[str, bool] = {}
        for action in PermissionAction:
            field_name = f"{object_name}.{action.value}"
            if action.value not in data:
                raise MalformedPermissionsError(
                    f"Missing permission flag: {field_name}", field=field_name
                )
            value = data[action.value]
            # bool only; 0/1 and "true" are schema violations
            if not isinstance(value, bool):
                raise MalformedPermissionsError(
                    f"Permission flag {field_name} must be a boolean, got {type(value).__name__}",
                    field=field_name,
                )
            flags[action.value] = value

        return cls(**flags)


@dataclass(frozen=True)
class PermissionMatrix:
    """Per-object permissions for the current user.

    All four object types are always present. Use :meth:`fallback` when the
    real matrix cannot be determined.
    """

    accounts: ObjectPermission
    contacts: ObjectPermission
    opportunities: ObjectPermission
    activities: ObjectPermission

    def get(self, object_type: ObjectType) -> ObjectPermission:
        """Get the permissions for one object type."""
        return getattr(self, object_type.value)

    def allows(self, object_type: ObjectType, action: PermissionAction) -> bool:
        """Check a single (object, action) pair."""
        return self.get(object_type).allows(action)

    @classmethod
    def fallback(cls) -> PermissionMatrix:
        """Read-only access to every object type."""
        return cls.uniform(ObjectPermission.read_only())

    @classmethod
    def full_access(cls) -> PermissionMatrix:
        """Every action on every object type."""
        return cls.uniform(ObjectPermission.full())

    @classmethod
    def uniform(cls, permission: ObjectPermission) -> PermissionMatrix:
        """Build a matrix that grants the same flags on every object type."""
        return cls(**{object_type.value: permission for object_type in ObjectType})

    def to_dict(self) -> dict[str, dict[str, bool]]:
        """Serialize to the endpoint's JSON shape."""
        return {object_type.value: self.get(object_type).to_dict() for object_type in ObjectType}

    @classmethod
    def from_dict(cls, data: Any) -> PermissionMatrix:
        """Deserialize an endpoint payload.

        Unknown top-level keys are ignored; each of the four object types
        must be present with all four boolean flags.

        Raises:
            MalformedPermissionsError: If the payload violates the schema
        """
        if not isinstance(data, dict):
            raise MalformedPermissionsError(
                f"Permissions payload must be an object, got {type(data).__name__}"
            )

        permissions: dict[str, ObjectPermission] = {}
        for object_type in ObjectType:
            if object_type.value not in data:
                raise MalformedPermissionsError(
                    f"Missing permissions for object: {object_type.value}",
                    field=object_type.value,
                )
            permissions[object_type.value] = ObjectPermission.from_dict(
                data[object_type.value], object_type.value
            )

        return cls(**permissions)
