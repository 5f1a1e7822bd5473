# shield_core/errors.py
from __future__ import annotations


class ShieldCoreError(Exception):
    pass


class InvalidViewingKeyRecord(ShieldCoreError):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid viewing key record field {field!r}: {reason}")


class UnknownPrivacyLevel(ShieldCoreError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown privacy level {value!r}")


class UnknownViewingPurpose(ShieldCoreError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown viewing key purpose {value!r}")
