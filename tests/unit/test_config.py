"""Unit tests for settings validation and token lookup."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from inkwell.api.deps import identity_for_token
from inkwell.core.config import Settings
from inkwell.schemas.user_schema import UserRole


class TestApiTokens:

    def test_unknown_role_rejected_at_load(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            Settings(ADMIN_TOKEN="admin", API_TOKENS={"t1": "u1:owner"})

        assert "unknown role 'owner'" in str(exc_info.value)

    def test_missing_user_id_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(ADMIN_TOKEN="admin", API_TOKENS={"t1": ":artist"})

    def test_role_defaults_to_receptionist(self):
        config = Settings(ADMIN_TOKEN="admin", API_TOKENS={"t1": "u1"})

        identity = identity_for_token("t1", config)

        assert identity.user_id == "u1"
        assert identity.role == UserRole.RECEPTIONIST

    def test_unknown_token(self):
        config = Settings(ADMIN_TOKEN="admin", API_TOKENS={"t1": "u1:artist"})
        assert identity_for_token("t2", config) is None


class TestSettingsFields:

    def test_only_read_settings_are_declared(self):
        assert "HOST" not in Settings.model_fields
        assert "PORT" not in Settings.model_fields
