"""Tests for password hashing and session tokens."""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt

from ems.config import Settings, get_settings
from ems.security import hash_password, issue_token, verify_password, verify_token

ACCOUNT = SimpleNamespace(id="a" * 32, username="ann", email="ann@x.com")


def test_password_hash_is_not_reversible_and_verifies() -> None:
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_issued_token_carries_identity_and_24h_expiry() -> None:
    settings = get_settings()
    token = issue_token(ACCOUNT, settings)

    claims = jwt.decode(token, settings.secret_key, algorithms=["HS256"])
    assert claims["id"] == ACCOUNT.id
    assert claims["username"] == "ann"
    assert claims["email"] == "ann@x.com"
    lifetime = claims["exp"] - claims["iat"]
    assert abs(lifetime - 24 * 60 * 60) <= 2


def test_verify_accepts_bearer_prefix_or_bare_token() -> None:
    settings = get_settings()
    token = issue_token(ACCOUNT, settings)

    for raw in (token, f"Bearer {token}"):
        data = verify_token(raw, settings)
        assert data is not None
        assert data.username == "ann"
        assert data.id == ACCOUNT.id


def test_verify_degrades_to_none() -> None:
    settings = get_settings()
    other = Settings(secret_key="another-secret-key-that-is-long-enough")
    token = issue_token(ACCOUNT, other)

    assert verify_token(None, settings) is None
    assert verify_token("", settings) is None
    assert verify_token("Bearer not.a.jwt", settings) is None
    assert verify_token(token, settings) is None


def test_expired_token_is_rejected() -> None:
    settings = get_settings()
    past = datetime.now(timezone.utc) - timedelta(hours=25)
    token = jwt.encode(
        {
            "id": ACCOUNT.id,
            "username": ACCOUNT.username,
            "email": ACCOUNT.email,
            "iat": int(past.timestamp()),
            "exp": int((past + timedelta(hours=24)).timestamp()),
        },
        settings.secret_key,
        algorithm="HS256",
    )
    assert verify_token(token, settings) is None


def test_token_missing_claims_is_rejected() -> None:
    settings = get_settings()
    token = jwt.encode({"username": "ann"}, settings.secret_key, algorithm="HS256")
    assert verify_token(token, settings) is None
