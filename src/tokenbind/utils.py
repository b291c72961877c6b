from __future__ import annotations

import re

from eth_utils import to_checksum_address

from .errors import ConfigError

# Matched with fullmatch: "$" would also accept a trailing newline.
_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")
_AMOUNT_RE = re.compile(r"[0-9]+")


def is_address(value: str | None) -> bool:
    return bool(value) and _ADDRESS_RE.fullmatch(value) is not None


def require_address(value: str | None, what: str) -> str:
    """Validate a 0x-prefixed 20-byte hex address and return it checksummed."""
    if not is_address(value):
        raise ConfigError(f"Invalid {what}: {value!r}")
    return to_checksum_address(value)


def parse_amount(value: str | None, what: str) -> int:
    """Parse a base-10 integer amount (ASCII digits only) in the token's smallest unit."""
    if value is None or _AMOUNT_RE.fullmatch(value.strip()) is None:
        raise ConfigError(f"invalid {what}: {value!r}")
    return int(value.strip())
