"""Tests for credential decoding into an actor identity."""

from datetime import timedelta

import pytest
from jose import jwt

from hintline.common.config import HintlineSettings
from hintline.common.exceptions import UnauthenticatedError
from hintline.common.security import (
    ActorIdentity,
    Role,
    bearer_token,
    create_access_token,
    decode_identity,
)


JWT_SECRET = "test-jwt-secret-for-unit-tests"


def make_settings(**overrides) -> HintlineSettings:
    defaults = {"jwt_secret": JWT_SECRET, "db_url": "sqlite+aiosqlite://"}
    defaults.update(overrides)
    return HintlineSettings(**defaults)


class TestDecodeIdentity:
    def test_roundtrip(self):
        settings = make_settings()
        token = create_access_token("s1", Role.SUPPORT_SPECIALIST, settings)
        identity = decode_identity(token, settings)
        assert identity == ActorIdentity(id="s1", role=Role.SUPPORT_SPECIALIST)
        assert identity.is_staff

    def test_role_accepts_wire_value(self):
        settings = make_settings()
        token = create_access_token("u1", "user", settings)
        identity = decode_identity(token, settings)
        assert identity.role is Role.USER
        assert not identity.is_staff

    def test_missing_token(self):
        with pytest.raises(UnauthenticatedError):
            decode_identity(None, make_settings())
        with pytest.raises(UnauthenticatedError):
            decode_identity("", make_settings())

    def test_wrong_secret(self):
        token = create_access_token("u1", Role.USER, make_settings(jwt_secret="other"))
        with pytest.raises(UnauthenticatedError, match="Invalid or expired"):
            decode_identity(token, make_settings())

    def test_expired(self):
        settings = make_settings()
        token = create_access_token(
            "u1", Role.USER, settings, expires_delta=timedelta(seconds=-5),
        )
        with pytest.raises(UnauthenticatedError):
            decode_identity(token, settings)

    def test_garbage(self):
        with pytest.raises(UnauthenticatedError):
            decode_identity("not-a-jwt", make_settings())

    def test_unknown_role(self):
        token = jwt.encode({"sub": "u1", "role": "superuser"}, JWT_SECRET, algorithm="HS256")
        with pytest.raises(UnauthenticatedError):
            decode_identity(token, make_settings())

    def test_missing_subject(self):
        token = jwt.encode({"role": "admin"}, JWT_SECRET, algorithm="HS256")
        with pytest.raises(UnauthenticatedError):
            decode_identity(token, make_settings())


class TestBearerToken:
    def test_extracts_token(self):
        assert bearer_token("Bearer abc.def") == "abc.def"

    def test_rejects_other_schemes(self):
        assert bearer_token("Basic abc") is None
        assert bearer_token(None) is None
        assert bearer_token("Bearer ") is None


class TestSettings:
    def test_production_rejects_default_secret(self):
        settings = HintlineSettings(
            environment="production", jwt_secret="insecure-jwt-secret-change-me",
        )
        with pytest.raises(RuntimeError, match="HINTLINE_JWT_SECRET"):
            settings.validate_for_production()

    def test_development_warns_on_default_secret(self):
        settings = HintlineSettings(
            environment="development", jwt_secret="insecure-jwt-secret-change-me",
        )
        with pytest.warns(UserWarning):
            settings.validate_for_production()
