"""Tests for bearer token issue/validation."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from gosmooth.auth.jwt import InvalidTokenError, issue_token, validate_token
from gosmooth.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _encode(payload: dict, secret: str | None = None, algorithm: str = "HS256") -> str:
    return jwt.encode(payload, secret or get_settings().jwt_secret, algorithm=algorithm)


class TestIssueToken:
    def test_round_trip(self):
        token = issue_token("abc123")
        payload = validate_token(token)
        assert payload["sub"] == "abc123"
        assert "iat" in payload
        assert "exp" in payload

    def test_default_lifetime_is_24_hours(self):
        payload = validate_token(issue_token("u1"))
        assert payload["exp"] - payload["iat"] == 24 * 3600

    def test_remember_me_lifetime_is_7_days(self):
        payload = validate_token(issue_token("u1", remember_me=True))
        assert payload["exp"] - payload["iat"] == 7 * 24 * 3600


class TestValidateToken:
    def test_expired_token_rejected(self):
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = _encode({"sub": "u1", "iat": past - timedelta(hours=1), "exp": past})
        with pytest.raises(InvalidTokenError):
            validate_token(token)

    def test_wrong_secret_rejected(self):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = _encode({"sub": "u1", "exp": exp}, secret="some-other-secret-that-is-long-enough")
        with pytest.raises(InvalidTokenError):
            validate_token(token)

    def test_other_hmac_algorithm_rejected(self):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = _encode({"sub": "u1", "exp": exp}, algorithm="HS512")
        with pytest.raises(InvalidTokenError):
            validate_token(token)

    def test_unsigned_token_rejected(self):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = jwt.encode({"sub": "u1", "exp": exp}, None, algorithm="none")
        with pytest.raises(InvalidTokenError):
            validate_token(token)

    def test_missing_exp_rejected(self):
        token = _encode({"sub": "u1"})
        with pytest.raises(InvalidTokenError):
            validate_token(token)

    def test_missing_sub_rejected(self):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = _encode({"exp": exp})
        with pytest.raises(InvalidTokenError):
            validate_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTokenError):
            validate_token("not-a-token")
