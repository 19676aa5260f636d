"""
Token and password tests - issue/verify contract and hashing.
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from marketplace.core.exceptions import InvalidClaim, TokenIssueError, Unauthenticated
from marketplace.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

SECRET = "mysecret"


def _signed(claims: dict, secret: str = SECRET, algorithm: str = "HS256") -> str:
    return jwt.encode(claims, secret, algorithm=algorithm)


def _in(hours: float) -> int:
    return int((datetime.now(timezone.utc) + timedelta(hours=hours)).timestamp())


def test_token_round_trip_returns_subject():
    token = create_access_token(42, SECRET)
    assert decode_access_token(token, SECRET) == 42


def test_token_expires_after_24_hours():
    token = create_access_token(42, SECRET)
    claims = jwt.get_unverified_claims(token)
    expected = datetime.now(timezone.utc) + timedelta(hours=24)
    assert claims["sub"] == 42
    assert abs(claims["exp"] - expected.timestamp()) < 60


def test_signing_failure_is_token_issue_error():
    with pytest.raises(TokenIssueError):
        create_access_token(1, SECRET, algorithm="NOPE")


def test_expired_token_is_rejected():
    token = create_access_token(42, SECRET, expires_delta=timedelta(seconds=-1))
    with pytest.raises(Unauthenticated):
        decode_access_token(token, SECRET)


def test_wrong_secret_is_rejected():
    token = create_access_token(42, "wrongsecret")
    with pytest.raises(Unauthenticated):
        decode_access_token(token, SECRET)


def test_wrong_algorithm_is_rejected():
    token = _signed({"sub": 42, "exp": _in(1)}, algorithm="HS512")
    with pytest.raises(Unauthenticated):
        decode_access_token(token, SECRET)


@pytest.mark.parametrize("token", [None, "", "invalid-token-here", "a.b.c"])
def test_missing_or_malformed_token_is_rejected(token):
    with pytest.raises(Unauthenticated):
        decode_access_token(token, SECRET)


def test_token_without_expiry_is_rejected():
    with pytest.raises(Unauthenticated):
        decode_access_token(_signed({"sub": 42}), SECRET)


@pytest.mark.parametrize("subject", ["not-an-integer", "42", 42.0, 4.5, -1, True, None])
def test_bad_subject_is_invalid_claim(subject):
    token = _signed({"sub": subject, "exp": _in(1)})
    with pytest.raises(InvalidClaim):
        decode_access_token(token, SECRET)


def test_missing_subject_is_invalid_claim():
    with pytest.raises(InvalidClaim):
        decode_access_token(_signed({"exp": _in(1)}), SECRET)


def test_subject_zero_is_accepted():
    assert decode_access_token(_signed({"sub": 0, "exp": _in(1)}), SECRET) == 0


def test_password_hash_is_salted_and_verifiable():
    first = hash_password("correctpassword")
    second = hash_password("correctpassword")
    assert first != second
    assert "correctpassword" not in first
    assert verify_password("correctpassword", first)
    assert not verify_password("wrongpassword", first)
