"""Tests for the permission matrix model."""

from __future__ import annotations

import pytest

from crm_permissions import (
    MalformedPermissionsError,
    ObjectPermission,
    ObjectType,
    PermissionAction,
    PermissionMatrix,
)


def _payload() -> dict:
    return {
        "accounts": {"create": True, "read": True, "edit": True, "delete": False},
        "contacts": {"create": False, "read": True, "edit": False, "delete": False},
        "opportunities": {"create": True, "read": True, "edit": True, "delete": True},
        "activities": {"create": False, "read": False, "edit": False, "delete": False},
    }


class TestObjectPermission:
    """Tests for ObjectPermission."""

    def test_defaults_to_nothing(self) -> None:
        permission = ObjectPermission()

        assert permission == ObjectPermission.none()
        assert not any(permission.allows(action) for action in PermissionAction)

    def test_read_only(self) -> None:
        permission = ObjectPermission.read_only()

        assert permission.to_dict() == {
            "create": False,
            "read": True,
            "edit": False,
            "delete": False,
        }

    def test_from_dict_rejects_non_boolean(self) -> None:
        """Integers are not accepted in place of booleans."""
        with pytest.raises(MalformedPermissionsError) as exc_info:
            ObjectPermission.from_dict(
                {"create": 1, "read": True, "edit": False, "delete": False}, "accounts"
            )

        assert exc_info.value.field == "accounts.create"

    def test_from_dict_rejects_missing_flag(self) -> None:
        with pytest.raises(MalformedPermissionsError) as exc_info:
            ObjectPermission.from_dict({"create": True, "read": True, "edit": True}, "contacts")

        assert exc_info.value.field == "contacts.delete"

    def test_from_dict_rejects_non_mapping(self) -> None:
        with pytest.raises(MalformedPermissionsError):
            ObjectPermission.from_dict(["read"], "contacts")


class TestPermissionMatrix:
    """Tests for PermissionMatrix."""

    def test_from_dict_preserves_every_flag(self) -> None:
        """Every (object, action) pair reads back as given."""
        payload = _payload()
        matrix = PermissionMatrix.from_dict(payload)

        for object_type in ObjectType:
            for action in PermissionAction:
                expected = payload[object_type.value][action.value]
                assert matrix.allows(object_type, action) is expected

    def test_to_dict_matches_endpoint_shape(self) -> None:
        payload = _payload()

        assert PermissionMatrix.from_dict(payload).to_dict() == payload

    def test_unknown_objects_ignored(self) -> None:
        payload = _payload()
        payload["cases"] = {"create": True, "read": True, "edit": True, "delete": True}

        matrix = PermissionMatrix.from_dict(payload)

        assert set(matrix.to_dict()) == {"accounts", "contacts", "opportunities", "activities"}

    def test_missing_object_rejected(self) -> None:
        payload = _payload()
        del payload["activities"]

        with pytest.raises(MalformedPermissionsError) as exc_info:
            PermissionMatrix.from_dict(payload)

        assert exc_info.value.field == "activities"

    @pytest.mark.parametrize("payload", [None, [], "accounts", 42])
    def test_non_object_payload_rejected(self, payload: object) -> None:
        with pytest.raises(MalformedPermissionsError):
            PermissionMatrix.from_dict(payload)

    def test_fallback_is_read_only_everywhere(self, fallback_matrix: PermissionMatrix) -> None:
        for object_type in ObjectType:
            assert fallback_matrix.get(object_type) == ObjectPermission.read_only()

    def test_full_access(self, full_matrix: PermissionMatrix) -> None:
        assert all(
            full_matrix.allows(object_type, action)
            for object_type in ObjectType
            for action in PermissionAction
        )

    def test_matrix_is_immutable(self, full_matrix: PermissionMatrix) -> None:
        with pytest.raises(AttributeError):
            full_matrix.accounts = ObjectPermission.none()  # type: ignore[misc]
