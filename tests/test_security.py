"""Tests for bearer token handling."""

from datetime import timedelta

import pytest
from fastapi import HTTPException

from asset_registry.core.security import create_access_token, decode_access_token


class TestTokens:
    """Test token creation and decoding."""

    def test_round_trip(self, settings_env):
        token = create_access_token("alice")
        assert decode_access_token(token) == "alice"

    def test_expired_token(self, settings_env):
        token = create_access_token("alice", expires_delta=timedelta(seconds=-5))
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)
        assert exc_info.value.status_code == 401

    def test_token_signed_with_other_key(self, settings_env, monkeypatch):
        token = create_access_token("alice")

        from asset_registry.core.config import get_settings

        monkeypatch.setenv("SECURITY__SECRET_KEY", "a-different-secret")
        get_settings.cache_clear()

        with pytest.raises(HTTPException):
            decode_access_token(token)
