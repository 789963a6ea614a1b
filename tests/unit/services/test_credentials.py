"""
Unit tests for the credential store

Hashing, verification and password policy.
"""

import pytest

from src.app.services.credentials import (
    dummy_verify,
    hash_password,
    validate_password,
    verify_password,
)


def test_hash_then_verify_matches():
    password = "SecurePass123!"

    password_hash = hash_password(password)

    assert password_hash != password
    assert verify_password(password, password_hash) is True


def test_verify_rejects_other_password():
    password_hash = hash_password("SecurePass123!")

    assert verify_password("SecurePass124!", password_hash) is False


def test_hash_is_salted():
    """Same input hashed twice gives two different stored values"""
    first = hash_password("SecurePass123!")
    second = hash_password("SecurePass123!")

    assert first != second
    assert verify_password("SecurePass123!", first)
    assert verify_password("SecurePass123!", second)


def test_verify_overlong_password_is_mismatch_not_error():
    password_hash = hash_password("SecurePass123!")

    assert verify_password("A1!a" * 30, password_hash) is False


def test_verify_malformed_hash_raises():
    with pytest.raises(ValueError):
        verify_password("SecurePass123!", "not-a-bcrypt-hash")


def test_dummy_verify_is_always_false():
    assert dummy_verify("SecurePass123!") is False


@pytest.mark.parametrize(
    "password",
    ["SecurePass123!", "Aa1#aaaa", "Lumi3re-Night"],
)
def test_valid_passwords(password):
    assert validate_password(password).is_ok()


@pytest.mark.parametrize(
    "password, problem",
    [
        ("Aa1!", "must be at least 8 characters long"),
        ("securepass123!", "must contain an uppercase letter"),
        ("SECUREPASS123!", "must contain a lowercase letter"),
        ("SecurePass!!!", "must contain a number"),
        ("SecurePass123", "must contain a special character"),
        ("Aa1!" + "a" * 80, "must be at most 72 bytes long"),
    ],
)
def test_invalid_passwords(password, problem):
    result = validate_password(password)

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"
    assert problem in result.error.details


def test_whitespace_is_not_a_symbol():
    result = validate_password("Secure Pass 123")

    assert result.is_err()
    assert "must contain a special character" in result.error.details
