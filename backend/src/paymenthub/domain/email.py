"""
Syntactically validated email address.

Only the shape is checked (one @, a local part, a dotted domain of valid
labels); deliverability is the gateway's problem.
"""

import re
from dataclasses import dataclass

from .errors import InvalidEmailError

_LOCAL_PART = re.compile(r"^[a-z0-9!#$%&'*+/=?^_`{|}~-]+(\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*$")
_DOMAIN_LABEL = re.compile(r"^[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?$")

DISPOSABLE_DOMAINS = frozenset({
    "tempmail.com",
    "guerrillamail.com",
    "mailinator.com",
    "10minutemail.com",
    "throwaway.email",
    "maildrop.cc",
    "temp-mail.org",
})


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidEmailError(
                f"Email must be a string, got {type(self.value).__name__}"
            )
        normalized = self.value.strip().lower()
        if not _is_valid(normalized):
            raise InvalidEmailError(f"Invalid email: {self.value!r}")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def parse(cls, raw: str) -> "Email":
        return cls(raw)

    @property
    def local(self) -> str:
        return self.value.rsplit("@", 1)[0]

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    def masked(self) -> str:
        """First character of the local part kept: j***@example.com."""
        local = self.local
        return f"{local[:1]}{'*' * (len(local) - 1)}@{self.domain}"

    def is_domain(self, domain: str) -> bool:
        return self.domain == domain.strip().lower()

    def is_disposable(self) -> bool:
        return self.domain in DISPOSABLE_DOMAINS

    def __str__(self) -> str:
        return self.value


def _is_valid(address: str) -> bool:
    if len(address) > 254 or address.count("@") != 1:
        return False
    local, domain = address.split("@")
    if not local or len(local) > 64 or not _LOCAL_PART.match(local):
        return False
    labels = domain.split(".")
    if len(labels) < 2:
        return False
    return all(_DOMAIN_LABEL.match(label) for label in labels)
