"""Tests des utilitaires d'authentification / Authentication utility tests."""

from datetime import datetime, timedelta, timezone

from jose import jwt

from fuel_tracker.config import settings
from fuel_tracker.utils.auth import create_access_token, decode_token, hash_password, verify_password


def test_password_hashing():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_access_token_roundtrip():
    payload = decode_token(create_access_token(42, "alice"))
    assert payload["sub"] == "42"
    assert payload["username"] == "alice"
    assert payload["type"] == "access"


def test_decode_rejects_foreign_signature():
    forged = jwt.encode({"sub": "1", "type": "access"}, "another-secret", algorithm=settings.JWT_ALGORITHM)
    assert decode_token(forged) is None
    assert decode_token("garbage") is None


def test_decode_rejects_expired_token():
    expired = jwt.encode(
        {"sub": "1", "type": "access", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )
    assert decode_token(expired) is None
