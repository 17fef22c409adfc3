"""
Unit tests for backend/auth.py
"""

import asyncio

import pytest
from fastapi import HTTPException

from backend import auth
from backend.settings import Settings


@pytest.fixture
def settings(monkeypatch):
    settings = Settings(environment="test", api_keys="sk_test_1,sk_test_2", clerk_domain="", _env_file=None)
    monkeypatch.setattr(auth, "get_settings", lambda: settings)
    return settings


@pytest.mark.unit
class TestApiKey:

    def test_simple_key_is_admin(self, settings):
        assert auth.validate_api_key("sk_test_1") == "admin"

    def test_key_with_user(self, settings):
        assert auth.validate_api_key("sk_test_2:user_42") == "user_42"

    def test_invalid_key(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            auth.validate_api_key("sk_wrong")
        assert exc_info.value.status_code == 401

    def test_no_keys_configured(self, monkeypatch):
        monkeypatch.setattr(auth, "get_settings", lambda: Settings(api_keys="", _env_file=None))
        with pytest.raises(HTTPException) as exc_info:
            auth.validate_api_key("sk_test_1")
        assert exc_info.value.detail == "API key authentication not configured"


@pytest.mark.unit
class TestJwt:

    def test_requires_bearer_prefix(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            auth.validate_jwt("Token abc")
        assert exc_info.value.status_code == 401

    def test_missing_clerk_domain(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            auth.validate_jwt("Bearer abc")
        assert exc_info.value.status_code == 500


@pytest.mark.unit
class TestUserDependencies:

    def test_current_user_prefers_api_key(self, settings):
        user = asyncio.run(auth.get_current_user(authorization="Bearer x", x_api_key="sk_test_1:u1"))
        assert user == "u1"

    def test_current_user_requires_credentials(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(auth.get_current_user(authorization=None, x_api_key=None))
        assert exc_info.value.status_code == 401

    def test_optional_user_is_none_without_credentials(self, settings):
        assert asyncio.run(auth.get_optional_user(authorization=None, x_api_key=None)) is None

    def test_optional_user_is_none_with_bad_credentials(self, settings):
        assert asyncio.run(auth.get_optional_user(authorization=None, x_api_key="bad")) is None

    def test_optional_user_with_valid_key(self, settings):
        assert asyncio.run(auth.get_optional_user(authorization=None, x_api_key="sk_test_1:u7")) == "u7"
