"""Shared fixtures for the PaymentHub test suite."""

import random

import pytest

from paymenthub.config import get_settings
from paymenthub.domain.checksums import cnpj_check_digits, cpf_check_digits, luhn_check_digit

VALID_CPFS = ["12345678909", "98765432100", "52998224725"]
VALID_CNPJS = ["11222333000181", "11444777000161"]


def make_card(prefix: str, length: int = 16, seed: int = 0) -> str:
    """Build a Luhn-valid card number with the given prefix."""
    rng = random.Random(seed)
    body = prefix + "".join(str(rng.randint(0, 9)) for _ in range(length - len(prefix) - 1))
    return body + luhn_check_digit(body)


def random_cpf(rng: random.Random) -> str:
    while True:
        base = "".join(str(rng.randint(0, 9)) for _ in range(9))
        if len(set(base)) > 1:
            return base + cpf_check_digits(base)


def random_cnpj(rng: random.Random) -> str:
    while True:
        base = "".join(str(rng.randint(0, 9)) for _ in range(12))
        if len(set(base)) > 1:
            return base + cnpj_check_digits(base)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240611)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from the host environment and the settings cache."""
    for name in ("DEFAULT_CURRENCY", "TAX_ID_SERIALIZATION", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(f"PAYMENTHUB_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
