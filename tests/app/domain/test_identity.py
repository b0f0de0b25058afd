"""Testes de Identity e Role."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from app.domain.identity import (
    EDITABLE_PROFILE_FIELDS,
    Identity,
    Role,
    parse_role,
)
from utils.errors import CorruptPersistedStateError

RECORD = {
    "id": 2,
    "name": "Dra. Sara Ahmed",
    "email": "doctor1@clinic.com",
    "password": "doctor123",
    "role": "doctor",
    "phone": "01234567891",
    "department": "Fisioterapia geral",
    "specialization": "Ortopedia e articulações",
    "createdAt": "2024-01-01T00:00:00Z",
}


class TestRole:
    def test_wire_values(self) -> None:
        assert Role.ADMINISTRATOR.value == "admin"
        assert Role.CLINICIAN.value == "doctor"
        assert Role.FRONT_DESK.value == "receptionist"

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("admin", Role.ADMINISTRATOR),
            (" Doctor ", Role.CLINICIAN),
            (Role.FRONT_DESK, Role.FRONT_DESK),
            ("superuser", None),
            (None, None),
        ],
    )
    def test_parse_role(self, label: object, expected: Role | None) -> None:
        assert parse_role(label) is expected


class TestIdentity:
    def test_directory_record_drops_secret(self) -> None:
        identity = Identity.from_directory_record(RECORD)
        assert identity.role is Role.CLINICIAN
        assert identity.created_at is not None
        assert "password" not in identity.model_dump()
        assert "password" not in json.loads(identity.to_storage_json())

    def test_storage_json_roundtrip_uses_camel_case_alias(self) -> None:
        identity = Identity.from_directory_record(RECORD)
        raw = identity.to_storage_json()
        assert "createdAt" in json.loads(raw)
        assert Identity.from_storage_json(raw) == identity

    @pytest.mark.parametrize(
        "raw",
        [
            "{nao json",
            json.dumps({"id": 1, "name": "X", "email": "x@clinic.com", "role": "root"}),
            json.dumps({"name": "Sem id", "email": "a@b.com", "role": "admin"}),
            "null",
        ],
    )
    def test_corrupt_storage_json_raises(self, raw: str) -> None:
        with pytest.raises(CorruptPersistedStateError):
            Identity.from_storage_json(raw)

    def test_identity_is_immutable(self) -> None:
        identity = Identity.from_directory_record(RECORD)
        with pytest.raises(ValidationError):
            identity.name = "Outro"  # type: ignore[misc]

    def test_with_profile_updates_editable_fields_only(self) -> None:
        identity = Identity.from_directory_record(RECORD)
        updated = identity.with_profile(name="Sara A.", phone="0999")
        assert updated.name == "Sara A."
        assert updated.phone == "0999"
        assert updated.email == identity.email
        assert identity.name == "Dra. Sara Ahmed"
        assert "role" not in EDITABLE_PROFILE_FIELDS

        with pytest.raises(ValueError, match="não editáveis"):
            identity.with_profile(role="admin")

        with pytest.raises(ValidationError):
            identity.with_profile(name="")

    def test_log_dict_has_no_contact_data(self) -> None:
        log = Identity.from_directory_record(RECORD).to_log_dict()
        assert log == {"identity_id": 2, "role": "doctor"}
