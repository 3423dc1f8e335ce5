"""
Password hashing and strength policies.

Hashing uses argon2 with the library's default parameters. Two strength
policies exist; ``Settings.password_policy`` picks which one registration and
password changes enforce:

- ``basic``: at least 7 characters and at least one ASCII letter.
- ``strict``: at least 8 characters, ASCII letters and digits only, with an
  uppercase letter, a lowercase letter and a digit.
"""

from __future__ import annotations

import re
from typing import Literal

import argon2

PasswordPolicy = Literal["basic", "strict"]

_hasher = argon2.PasswordHasher()

_STRICT_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[a-zA-Z\d]{8,}$")

POLICY_MESSAGES: dict[str, str] = {
    "basic": "Password must be at least 7 characters and contain at least one letter",
    "strict": (
        "Password must be at least 8 characters long and contain at least one uppercase letter, "
        "one lowercase letter, and one number"
    ),
}


class PasswordPolicyError(ValueError):
    """Raised when a password does not satisfy the configured policy."""


def hash_password(password: str) -> str:
    """Hash a password with argon2. Returns the full encoded hash string."""
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against its argon2 hash.

    Returns True if the password matches. Never raises on mismatch.
    """
    try:
        return _hasher.verify(password_hash, password)
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


def is_acceptable_password(password: str) -> bool:
    """Basic policy: length >= 7 and at least one ASCII letter."""
    if len(password) < 7:
        return False
    return any(("a" <= c <= "z") or ("A" <= c <= "Z") for c in password)


def is_strong_password(password: str) -> bool:
    """Strict policy: 8+ ASCII letters/digits with upper, lower and digit."""
    return _STRICT_PATTERN.fullmatch(password) is not None


_CHECKS = {
    "basic": is_acceptable_password,
    "strict": is_strong_password,
}


def check_password_policy(password: str, policy: PasswordPolicy) -> None:
    """Raise PasswordPolicyError if ``password`` fails ``policy``."""
    try:
        check = _CHECKS[policy]
    except KeyError:
        msg = f"Unknown password policy: {policy!r}"
        raise ValueError(msg) from None
    if not check(password):
        raise PasswordPolicyError(POLICY_MESSAGES[policy])
