from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.attendance_tracker.attendance_tracker.auth.tokens import TokenIssuer, bearer_token
from src.attendance_tracker.attendance_tracker.core.enums import Role
from src.attendance_tracker.attendance_tracker.core.exceptions import InvalidToken
from src.attendance_tracker.attendance_tracker.users.model import User


def _user(role: Role = Role.EMPLOYEE) -> User:
    return User(
        id="u-1",
        email="alice@company.com",
        password_hash="x",
        name="Alice",
        role=role,
        employee_id="EMP002",
        department="Sales",
        created_at=datetime(2026, 1, 1, 8, 0, 0),
    )


def test_issued_token_verifies_to_identity(token_clock):
    issuer = TokenIssuer(secret="s3cret", clock=token_clock)

    current = issuer.verify(issuer.issue(_user(Role.ADMIN)))

    assert current.id == "u-1"
    assert current.email == "alice@company.com"
    assert current.role == Role.ADMIN


def test_token_claims_expire_after_24_hours(token_clock):
    issuer = TokenIssuer(secret="s3cret", clock=token_clock)
    token = issuer.issue(_user())

    claims = issuer.decode(token)

    assert claims["exp"] - claims["iat"] == 24 * 3600


def test_token_accepted_until_expiry_and_rejected_after(token_clock):
    issuer = TokenIssuer(secret="s3cret", clock=token_clock)
    token = issuer.issue(_user())

    token_clock.advance(hours=23, minutes=59)
    assert issuer.verify(token).id == "u-1"

    token_clock.advance(minutes=1)
    with pytest.raises(InvalidToken):
        issuer.verify(token)


def test_token_signed_with_other_secret_is_rejected(token_clock):
    token = TokenIssuer(secret="other", clock=token_clock).issue(_user())

    with pytest.raises(InvalidToken):
        TokenIssuer(secret="s3cret", clock=token_clock).verify(token)


def test_tampered_token_is_rejected(token_clock):
    issuer = TokenIssuer(secret="s3cret", clock=token_clock)
    header, payload, signature = issuer.issue(_user()).split(".")
    forged = ".".join([header, payload, signature[::-1]])

    with pytest.raises(InvalidToken):
        issuer.verify(forged)


def test_garbage_token_is_rejected():
    issuer = TokenIssuer(secret="s3cret", clock=lambda: datetime(2026, 1, 1, tzinfo=timezone.utc))

    with pytest.raises(InvalidToken):
        issuer.verify("not-a-jwt")


@pytest.mark.parametrize(
    "header, expected",
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc", "abc"),
        ("Bearer", None),
        ("Basic abc", None),
        ("", None),
        (None, None),
    ],
)
def test_bearer_token_extraction(header, expected):
    assert bearer_token(header) == expected
