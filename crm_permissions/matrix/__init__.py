"""Permission matrix model."""

from .types import (
    ObjectPermission,
    ObjectType,
    PermissionAction,
    PermissionLevel,
    PermissionMatrix,
)

__all__ = [
    "ObjectPermission",
    "ObjectType",
    "PermissionAction",
    "PermissionLevel",
    "PermissionMatrix",
]
