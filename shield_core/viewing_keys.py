"""
shield_core.viewing_keys
------------------------
Viewing-key metadata governance.

A ViewingKeyRecord never carries key material, only the 64-char hex digest
computed by the wallet backend. This module validates, masks, ages, and
exports those records; it never stores or deletes them.

Expiry is calendar based: a key created on 2024-03-15 expires once "now"
minus one calendar year is later than 2024-03-15.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from cryptography.hazmat.primitives import constant_time

from .constants import (
    KEY_HASH_LEN, MASK_MIN_LEN, MASK_PLACEHOLDER, EXPORT_INDENT, EXPIRY_YEARS,
)
from .errors import InvalidViewingKeyRecord, UnknownViewingPurpose
from .logger import get_logger
from .utils import Timestamp, format_ts, parse_ts, pretty_json, subtract_years, utcnow

log = get_logger("shield.viewing_keys")

_HASH_RE = re.compile(r"[0-9a-fA-F]{%d}" % KEY_HASH_LEN)


class ViewingPurpose(str, Enum):
    AUDIT = "audit"
    COMPLIANCE = "compliance"
    PERSONAL = "personal"

    @classmethod
    def parse(cls, value: Union[str, "ViewingPurpose"]) -> "ViewingPurpose":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownViewingPurpose(value) from None


_PURPOSE_LABELS = {
    ViewingPurpose.AUDIT: "Audit",
    ViewingPurpose.COMPLIANCE: "Compliance",
    ViewingPurpose.PERSONAL: "Personal",
}


@dataclass(frozen=True)
class ViewingKeyRecord:
    """
    Metadata for an exported viewing key.

    Built by the wallet backend when a key is derived; `last_used` is bumped
    by the same backend on each audit query. String timestamps are kept as
    given so exports reproduce the caller's exact text; datetimes are
    rendered as ISO-8601 UTC on export.
    """
    id: str
    address: str
    key_hash: str
    purpose: ViewingPurpose
    created_at: Timestamp
    last_used: Optional[Timestamp] = None

    @property
    def masked_hash(self) -> str:
        return mask(self.key_hash)

    def to_dict(self) -> Dict[str, Any]:
        # export field order, lastUsed always present
        return {
            "id": self.id,
            "address": self.address,
            "keyHash": self.key_hash,
            "purpose": ViewingPurpose.parse(self.purpose).value,
            "createdAt": format_ts(self.created_at),
            "lastUsed": format_ts(self.last_used) if self.last_used else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ViewingKeyRecord":
        """Validated parse of a backend record (camelCase keys)."""
        for f in ("id", "address", "keyHash", "purpose", "createdAt"):
            if not data.get(f):
                raise InvalidViewingKeyRecord(f, "missing")

        key_hash = data["keyHash"]
        if not is_valid_hash(key_hash):
            log.warning(f"[VK] rejected record id={data['id']} hash={mask(key_hash)}")
            raise InvalidViewingKeyRecord("keyHash", "expected 64 hex characters")

        try:
            purpose = ViewingPurpose.parse(data["purpose"])
        except UnknownViewingPurpose as e:
            raise InvalidViewingKeyRecord("purpose", str(e)) from e

        last_used = data.get("lastUsed")
        try:
            created_at = format_ts(data["createdAt"])
            last_used = format_ts(last_used) if last_used else None
            created = parse_ts(created_at)
            used = parse_ts(last_used) if last_used else None
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidViewingKeyRecord("createdAt/lastUsed", f"unparseable timestamp: {e}") from e
        if used is not None and used < created:
            raise InvalidViewingKeyRecord("lastUsed", "earlier than createdAt")

        return cls(
            id=str(data["id"]),
            address=str(data["address"]),
            key_hash=key_hash,
            purpose=purpose,
            created_at=created_at,
            last_used=last_used,
        )


def is_valid_hash(hash: str) -> bool:
    if not isinstance(hash, str):
        return False
    return _HASH_RE.fullmatch(hash) is not None


def mask(hash: Optional[str]) -> str:
    if not isinstance(hash, str) or len(hash) < MASK_MIN_LEN:
        return MASK_PLACEHOLDER
    return f"{hash[:4]}...{hash[-4:]}"


def is_expired(created_at: Timestamp, now: Optional[Timestamp] = None) -> bool:
    try:
        created = parse_ts(created_at)
        current = parse_ts(now) if now is not None else utcnow()
        cutoff = subtract_years(current, EXPIRY_YEARS)
    except (TypeError, ValueError, AttributeError, OverflowError):
        log.warning(f"[VK] unusable timestamp created_at={created_at!r} now={now!r}")
        return False
    return created < cutoff


def format_purpose(purpose: ViewingPurpose) -> str:
    return _PURPOSE_LABELS[ViewingPurpose.parse(purpose)]


def export_record(record: ViewingKeyRecord) -> str:
    log.debug(f"[VK EXPORT] id={record.id} hash={record.masked_hash}")
    return pretty_json(record.to_dict(), indent=EXPORT_INDENT)


def matches_hash(record: ViewingKeyRecord, candidate: str) -> bool:
    """Constant-time check of a presented digest against the record's digest."""
    if not is_valid_hash(candidate) or not is_valid_hash(record.key_hash):
        return False
    return constant_time.bytes_eq(
        candidate.lower().encode("ascii"),
        record.key_hash.lower().encode("ascii"),
    )


def active_records(records: Iterable[ViewingKeyRecord], now: Optional[Timestamp] = None) -> List[ViewingKeyRecord]:
    current = parse_ts(now) if now is not None else utcnow()
    return [r for r in records if not is_expired(r.created_at, current)]
