"""Unit tests for auth backend (session tokens and password handling)."""

from datetime import timedelta

import pytest
from jose import jwt

from leadbooth.config import settings
from leadbooth.core.auth.backend import (
    create_session_token,
    decode_session_token,
    hash_password,
    verify_password,
)


pytestmark = pytest.mark.unit


def _token(**overrides) -> str:
    params = {
        "user_id": 42,
        "tenant_id": 7,
        "role": "rep",
        "email": "riley@acme.example.com",
        "name": "Riley Rep",
        "rep_code": "ACME-RILEY",
        "tenant_subdomain": "acme",
    }
    params.update(overrides)
    return create_session_token(**params)


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password_returns_hash(self):
        """hash_password should return a bcrypt hash."""
        hashed = hash_password("mysecretpassword")

        assert hashed != "mysecretpassword"
        assert hashed.startswith("$2b$")

    def test_verify_password_correct(self):
        """verify_password should return True for correct password."""
        hashed = hash_password("mysecretpassword")

        assert verify_password("mysecretpassword", hashed) is True

    def test_verify_password_incorrect(self):
        """verify_password should return False for incorrect password."""
        hashed = hash_password("mysecretpassword")

        assert verify_password("wrongpassword", hashed) is False

    def test_verify_password_without_hash(self):
        """Users without a stored hash can never log in."""
        assert verify_password("anything", None) is False

    def test_verify_password_malformed_hash(self):
        """A corrupt stored hash is treated as a mismatch."""
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestSessionTokens:
    """Tests for session token creation and decoding."""

    def test_round_trip_carries_identity(self):
        """decode_session_token should return the identity that was encoded."""
        session = decode_session_token(_token())

        assert session is not None
        assert session.id == 42
        assert session.tenant_id == 7
        assert session.role == "rep"
        assert session.email == "riley@acme.example.com"
        assert session.rep_code == "ACME-RILEY"
        assert session.tenant_subdomain == "acme"
        assert session.exp is not None
        assert session.is_admin is False

    def test_admin_flag(self):
        session = decode_session_token(_token(role="admin"))

        assert session is not None
        assert session.is_admin is True

    def test_expired_token_is_rejected(self):
        """Expired tokens decode to None."""
        token = _token(expires_delta=timedelta(seconds=-1))

        assert decode_session_token(token) is None

    def test_tampered_token_is_rejected(self):
        token = _token()
        tampered = token[:-2] + ("AA" if not token.endswith("AA") else "BB")

        assert decode_session_token(tampered) is None

    def test_token_of_other_type_is_rejected(self):
        """Only tokens issued as sessions are accepted."""
        token = jwt.encode(
            {"sub": "1", "tenant_id": 1, "role": "admin", "type": "refresh", "exp": 9999999999},
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
        )

        assert decode_session_token(token) is None

    def test_token_missing_claims_is_rejected(self):
        token = jwt.encode(
            {"sub": "1", "type": "session", "exp": 9999999999},
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
        )

        assert decode_session_token(token) is None

    def test_garbage_is_rejected(self):
        assert decode_session_token("not.a.token") is None
