# shield_core/memo.py
from __future__ import annotations
from typing import Optional

from .constants import MEMO_MAX_CHARS, MEMO_PROTOCOL_BYTES


def format_memo(memo: Optional[str]) -> str:
    """
    Cap a free-text memo at MEMO_MAX_CHARS characters.

    This is a plain prefix cut on characters, not bytes. Anything that builds
    the on-chain memo field must still check memo_fits_protocol().
    """
    if not memo:
        return ""
    return memo[:MEMO_MAX_CHARS]


def memo_byte_length(memo: Optional[str]) -> int:
    return len((memo or "").encode("utf-8"))


def memo_fits_protocol(memo: Optional[str]) -> bool:
    return memo_byte_length(memo) <= MEMO_PROTOCOL_BYTES
