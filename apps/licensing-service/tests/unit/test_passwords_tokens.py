from datetime import datetime, timedelta, UTC

import jwt
import pytest

from licensing.utils.passwords import hash_password, needs_rehash, verify_password
from licensing.utils.tokens import ALGORITHM, JwtSettings, decode_token, issue_token, reissue_token

SETTINGS = JwtSettings(
    secret_key="unit-test-secret-key-with-32-plus-bytes",
    issuer="issuer-x",
    audience="aud-x",
    expiration_minutes=15,
)


def test_hash_and_verify_password():
    h = hash_password("correct horse")
    assert h.startswith("$argon2id$")
    assert h != "correct horse"
    assert verify_password(h, "correct horse")
    assert not verify_password(h, "wrong")
    assert not needs_rehash(h)


def test_verify_password_tolerates_bad_hashes():
    assert not verify_password(None, "x")
    assert not verify_password("", "x")
    assert not verify_password("plaintext-not-a-hash", "x")


def test_issue_and_decode_roundtrip_claims():
    token = issue_token(SETTINGS, user_id=5, username="alice", role="Admin", tenant_id=3)
    claims = decode_token(SETTINGS, token)
    assert claims["sub"] == "5"
    assert claims["name"] == "alice"
    assert claims["role"] == "Admin"
    assert claims["tenant_id"] == 3
    assert claims["iss"] == "issuer-x"
    assert claims["aud"] == "aud-x"
    assert claims["exp"] - claims["iat"] == 15 * 60
    assert jwt.get_unverified_header(token)["alg"] == ALGORITHM


def test_decode_rejects_wrong_secret_and_audience():
    token = issue_token(SETTINGS, user_id=1, username="bob")
    other = JwtSettings(secret_key="another-secret-key-with-32-plus-bytes!", issuer="issuer-x", audience="aud-x")
    with pytest.raises(jwt.InvalidSignatureError):
        decode_token(other, token)
    wrong_aud = JwtSettings(secret_key=SETTINGS.secret_key, issuer="issuer-x", audience="someone-else")
    with pytest.raises(jwt.InvalidAudienceError):
        decode_token(wrong_aud, token)


def test_expired_token_rejected_but_refreshable():
    past = datetime.now(UTC) - timedelta(hours=2)
    token = issue_token(SETTINGS, user_id=9, username="carol", role="User", now=past)
    with pytest.raises(jwt.ExpiredSignatureError):
        decode_token(SETTINGS, token)

    fresh = reissue_token(SETTINGS, token)
    claims = decode_token(SETTINGS, fresh)
    assert claims["sub"] == "9"
    assert claims["name"] == "carol"
    assert "tenant_id" not in claims


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "env-secret-key-with-more-than-32-bytes")
    monkeypatch.setenv("JWT_ISSUER", "iss-env")
    monkeypatch.setenv("JWT_AUDIENCE", "aud-env")
    monkeypatch.setenv("JWT_EXPIRATION_MINUTES", "not-a-number")
    s = JwtSettings.from_env()
    assert s.secret_key == "env-secret-key-with-more-than-32-bytes"
    assert s.issuer == "iss-env"
    assert s.audience == "aud-env"
    assert s.expiration_minutes == 60
    assert s.expires_in_seconds == 3600
