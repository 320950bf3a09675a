"""Tests for the Email value object."""

import pytest

from paymenthub.domain.email import Email
from paymenthub.domain.errors import InvalidEmailError


def test_normalizes_case_and_whitespace():
    email = Email.parse("  John.Doe@Example.COM ")

    assert email.value == "john.doe@example.com"
    assert str(email) == "john.doe@example.com"
    assert email.local == "john.doe"
    assert email.domain == "example.com"


@pytest.mark.parametrize("raw", [
    "",
    "plainaddress",
    "@example.com",
    "user@",
    "user@localhost",
    "user@@example.com",
    "user@exa mple.com",
    "user@-example.com",
    "user..name@example.com",
    ".user@example.com",
])
def test_invalid_addresses_are_rejected(raw):
    with pytest.raises(InvalidEmailError):
        Email.parse(raw)


def test_non_string_is_rejected():
    with pytest.raises(InvalidEmailError):
        Email.parse(None)


def test_masked():
    assert Email.parse("john@example.com").masked() == "j***@example.com"
    assert Email.parse("a@example.com").masked() == "a@example.com"


def test_domain_checks():
    email = Email.parse("buyer@mailinator.com")

    assert email.is_domain("MAILINATOR.com")
    assert not email.is_domain("example.com")
    assert email.is_disposable()
    assert not Email.parse("buyer@example.com").is_disposable()


def test_equality_after_normalization():
    assert Email.parse("A@Example.com") == Email.parse("a@example.com")
