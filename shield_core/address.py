"""
shield_core.address
-------------------
Address classification for shielded/transparent asset addresses.

Two layers, kept separate on purpose:

- classify(): cheap prefix heuristic used for routing
- is_valid_shielded(): stricter length gate for shielded recipients

Neither decodes the address or checks a checksum.
"""

from __future__ import annotations
from enum import Enum

from .constants import (
    SHIELDED_PREFIXES, TRANSPARENT_PREFIX, SHIELDED_MIN_LEN, SHIELDED_MAX_LEN,
)


class AddressKind(str, Enum):
    SHIELDED = "shielded"
    TRANSPARENT = "transparent"
    UNKNOWN = "unknown"


def classify(address: str) -> AddressKind:
    if not address:
        return AddressKind.UNKNOWN
    if address.startswith(SHIELDED_PREFIXES):
        return AddressKind.SHIELDED
    if address.startswith(TRANSPARENT_PREFIX):
        return AddressKind.TRANSPARENT
    return AddressKind.UNKNOWN


def is_valid_shielded(address: str) -> bool:
    if not address:
        return False
    # "zt" (testnet) and "z" (mainnet) share the same bounds
    if address.startswith(SHIELDED_PREFIXES):
        return SHIELDED_MIN_LEN <= len(address) <= SHIELDED_MAX_LEN
    return False


def is_transparent(address: str) -> bool:
    return bool(address) and address.startswith(TRANSPARENT_PREFIX)


def is_shielded(address: str) -> bool:
    return classify(address) is AddressKind.SHIELDED
