"""Tests for password hashing and JWT helpers."""

from datetime import timedelta

import jwt
import pytest

from chirp.shared.utils.security import SecurityUtils

SECRET = "unit-test-secret-key-with-enough-length"


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = SecurityUtils.hash_password("secret123")
        assert hashed != "secret123"
        assert SecurityUtils.verify_password("secret123", hashed)
        assert not SecurityUtils.verify_password("wrong-pass", hashed)

    def test_same_password_hashes_differently(self):
        assert SecurityUtils.hash_password("secret123") != SecurityUtils.hash_password("secret123")

    def test_garbage_hash_does_not_verify(self):
        assert not SecurityUtils.verify_password("secret123", "not-a-bcrypt-hash")


class TestTokens:
    def test_round_trip_keeps_user_id(self):
        token = SecurityUtils.create_access_token({"user_id": "abc"}, SECRET)
        payload = SecurityUtils.decode_access_token(token, SECRET)
        assert payload["user_id"] == "abc"
        assert payload["exp"] - payload["iat"] == int(timedelta(days=90).total_seconds())

    def test_expired_token(self):
        token = SecurityUtils.create_access_token(
            {"user_id": "abc"}, SECRET, expires_delta=timedelta(seconds=-1)
        )
        with pytest.raises(ValueError, match="expired"):
            SecurityUtils.decode_access_token(token, SECRET)

    def test_wrong_secret(self):
        token = SecurityUtils.create_access_token({"user_id": "abc"}, SECRET)
        with pytest.raises(ValueError, match="Invalid token"):
            SecurityUtils.decode_access_token(token, "another-secret-key-entirely-different")

    def test_garbage_token(self):
        with pytest.raises(ValueError, match="Invalid token"):
            SecurityUtils.decode_access_token("not.a.jwt", SECRET)

    def test_algorithm_is_enforced(self):
        token = jwt.encode({"user_id": "abc"}, SECRET, algorithm="HS512")
        with pytest.raises(ValueError):
            SecurityUtils.decode_access_token(token, SECRET, algorithm="HS256")
