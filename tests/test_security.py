"""Unit tests for app.core.security: bcrypt hashing and JWT issue/verify."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.security import (
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from tests.support import TEST_SECRET

ISSUED_AT = datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)


def _token(**kwargs: object) -> str:
    params: dict[str, object] = {
        "secret": TEST_SECRET,
        "algorithm": "HS256",
        "expire_minutes": 120,
        "now": ISSUED_AT,
    }
    params.update(kwargs)
    return create_access_token(7, "alice", **params)


class TestPasswordHashing(unittest.TestCase):
    """hash_password / verify_password."""

    def test_hash_verifies_and_is_not_plaintext(self) -> None:
        hashed = hash_password("s3cret-pass", rounds=4)
        self.assertNotEqual(hashed, "s3cret-pass")
        self.assertTrue(verify_password("s3cret-pass", hashed))

    def test_wrong_password_does_not_verify(self) -> None:
        hashed = hash_password("s3cret-pass", rounds=4)
        self.assertFalse(verify_password("other-pass", hashed))

    def test_same_password_gets_different_salts(self) -> None:
        self.assertNotEqual(hash_password("pw", rounds=4), hash_password("pw", rounds=4))

    def test_cost_factor_is_recorded_in_hash(self) -> None:
        self.assertTrue(hash_password("pw", rounds=5).startswith("$2b$05$"))

    def test_default_cost_factor_is_10(self) -> None:
        self.assertTrue(hash_password("pw").startswith("$2b$10$"))

    def test_malformed_digest_returns_false(self) -> None:
        self.assertFalse(verify_password("pw", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("pw", ""))


class TestTokenExpiry(unittest.TestCase):
    """Tokens are valid for the configured window from issuance."""

    def test_accepted_one_second_after_issue(self) -> None:
        claims = decode_access_token(
            _token(), secret=TEST_SECRET, algorithm="HS256", now=ISSUED_AT + timedelta(seconds=1)
        )
        self.assertEqual(claims.subject_id, 7)
        self.assertEqual(claims.username, "alice")
        self.assertEqual(claims.expires_at, ISSUED_AT + timedelta(hours=2))

    def test_rejected_one_second_after_two_hours(self) -> None:
        with self.assertRaises(TokenExpiredError):
            decode_access_token(
                _token(),
                secret=TEST_SECRET,
                algorithm="HS256",
                now=ISSUED_AT + timedelta(hours=2, seconds=1),
            )

    def test_rejected_exactly_at_expiry(self) -> None:
        with self.assertRaises(TokenExpiredError):
            decode_access_token(
                _token(), secret=TEST_SECRET, algorithm="HS256", now=ISSUED_AT + timedelta(hours=2)
            )

    def test_defaults_to_current_time(self) -> None:
        token = create_access_token(1, "bob", secret=TEST_SECRET, algorithm="HS256", expire_minutes=5)
        claims = decode_access_token(token, secret=TEST_SECRET, algorithm="HS256")
        self.assertEqual(claims.subject_id, 1)


class TestTokenVerificationFailures(unittest.TestCase):
    """Signature and structure failures map to distinct TokenError kinds."""

    def test_wrong_secret_is_invalid_signature(self) -> None:
        with self.assertRaises(TokenSignatureError) as ctx:
            decode_access_token(
                _token(secret="another-secret-key-of-at-least-32-bytes"),
                secret=TEST_SECRET,
                algorithm="HS256",
                now=ISSUED_AT,
            )
        self.assertEqual(ctx.exception.kind, "invalid_signature")

    def test_garbage_is_malformed(self) -> None:
        with self.assertRaises(TokenMalformedError) as ctx:
            decode_access_token("not.a.jwt", secret=TEST_SECRET, algorithm="HS256", now=ISSUED_AT)
        self.assertEqual(ctx.exception.kind, "malformed")

    def test_missing_subject_is_malformed(self) -> None:
        token = jwt.encode(
            {"username": "alice", "exp": ISSUED_AT + timedelta(hours=1)},
            TEST_SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(TokenMalformedError):
            decode_access_token(token, secret=TEST_SECRET, algorithm="HS256", now=ISSUED_AT)

    def test_non_numeric_subject_is_malformed(self) -> None:
        token = jwt.encode(
            {"sub": "alice", "username": "alice", "exp": ISSUED_AT + timedelta(hours=1)},
            TEST_SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(TokenMalformedError):
            decode_access_token(token, secret=TEST_SECRET, algorithm="HS256", now=ISSUED_AT)

    def test_missing_username_is_malformed(self) -> None:
        token = jwt.encode(
            {"sub": "7", "exp": ISSUED_AT + timedelta(hours=1)},
            TEST_SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(TokenMalformedError):
            decode_access_token(token, secret=TEST_SECRET, algorithm="HS256", now=ISSUED_AT)
