"""Normalized email addresses."""

import re
from dataclasses import dataclass

from gatehouse_identity.exceptions import InvalidEmailError

_ADDRESS = re.compile(r"[a-z0-9._%+-]+@[a-z0-9-]+(\.[a-z0-9-]+)*\.[a-z]{2,}")


def normalize_email(raw: str) -> str:
    """Trim and lower-case an address, rejecting anything malformed."""
    address = raw.strip().lower() if isinstance(raw, str) else ""
    if _ADDRESS.fullmatch(address) is None:
        raise InvalidEmailError(f"Invalid email address: {raw!r}")
    return address


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", normalize_email(self.value))

    def __str__(self) -> str:
        return self.value
