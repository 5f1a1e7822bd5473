"""
shield_core.policy
------------------
Privacy tiering for outgoing shielded transactions.

recommend_level() maps an amount onto the Low/Medium/High/Maximum ladder.
should_use_partial_notes() does NOT assume the level came from that ladder:
a user may override the level, and the amount-based rule still applies.
"""

from __future__ import annotations
from enum import Enum
from typing import Union

from .constants import (
    MEDIUM_THRESHOLD, HIGH_THRESHOLD, MAXIMUM_THRESHOLD,
    PARTIAL_NOTES, PARTIAL_NOTES_AMOUNT,
)
from .errors import UnknownPrivacyLevel
from .logger import get_logger

log = get_logger("shield.policy")

Amount = Union[int, float]


class PrivacyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    MAXIMUM = "maximum"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @classmethod
    def _coerce(cls, other):
        # plain strings compare by tier, never alphabetically
        if isinstance(other, cls):
            return other
        if isinstance(other, str):
            return cls.parse(other)
        return NotImplemented

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: Union[str, "PrivacyLevel"]) -> "PrivacyLevel":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownPrivacyLevel(value) from None


_ORDER = (PrivacyLevel.LOW, PrivacyLevel.MEDIUM, PrivacyLevel.HIGH, PrivacyLevel.MAXIMUM)


def recommend_level(amount: Amount) -> PrivacyLevel:
    # highest tier first, lower bounds inclusive
    if amount >= MAXIMUM_THRESHOLD:
        level = PrivacyLevel.MAXIMUM
    elif amount >= HIGH_THRESHOLD:
        level = PrivacyLevel.HIGH
    elif amount >= MEDIUM_THRESHOLD:
        level = PrivacyLevel.MEDIUM
    else:
        level = PrivacyLevel.LOW
    log.debug(f"[POLICY] amount={amount} -> level={level.value}")
    return level


def partial_notes_count(level: PrivacyLevel) -> int:
    return PARTIAL_NOTES[PrivacyLevel.parse(level).value]


def should_use_partial_notes(amount: Amount, level: PrivacyLevel) -> bool:
    level = PrivacyLevel.parse(level)
    return level in (PrivacyLevel.HIGH, PrivacyLevel.MAXIMUM) or amount >= PARTIAL_NOTES_AMOUNT
