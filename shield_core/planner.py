# shield_core/planner.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .address import AddressKind, classify, is_valid_shielded
from .memo import format_memo
from .policy import Amount, PrivacyLevel, partial_notes_count, recommend_level, should_use_partial_notes
from .errors import UnknownPrivacyLevel
from .logger import get_logger

log = get_logger("shield.planner")

_LEVEL_DESCRIPTIONS = {
    PrivacyLevel.MAXIMUM: "Uses 5 partial notes for maximum obfuscation",
    PrivacyLevel.HIGH: "Uses 3 partial notes for high privacy",
    PrivacyLevel.MEDIUM: "Uses 2 partial notes for enhanced privacy",
    PrivacyLevel.LOW: "Standard shielded transaction",
}


@dataclass(frozen=True)
class ShieldedSendPlan:
    """
    Shape of an outgoing shielded transaction, as decided before submission.

    The wallet backend still has to reject the send when `address_valid`
    is False; planning itself never raises.
    """
    recipient: str
    address_kind: AddressKind
    address_valid: bool
    amount: Amount
    privacy_level: PrivacyLevel
    level_overridden: bool
    use_partial_notes: bool
    partial_notes: int
    memo: str

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["address_kind"] = self.address_kind.value
        d["privacy_level"] = self.privacy_level.value
        return d


def describe_level(level: PrivacyLevel) -> str:
    return _LEVEL_DESCRIPTIONS[PrivacyLevel.parse(level)]


def plan_shielded_send(
    recipient: str,
    amount: Amount,
    memo: Optional[str] = "",
    level: Optional[PrivacyLevel] = None,
) -> ShieldedSendPlan:
    """
    Chain classification, tiering and memo formatting for one send.

    `level` is a user override; when given it replaces the recommended tier,
    but the amount-based partial-note rule is still evaluated against `amount`.
    An unrecognised override is ignored and the recommended tier is used.
    """
    overridden = False
    chosen = None
    if level is not None:
        try:
            chosen = PrivacyLevel.parse(level)
            overridden = True
        except UnknownPrivacyLevel:
            log.warning(f"[PLAN] ignoring unknown level override {level!r}")
    if chosen is None:
        chosen = recommend_level(amount)
    use_partial = should_use_partial_notes(amount, chosen)

    plan = ShieldedSendPlan(
        recipient=recipient,
        address_kind=classify(recipient),
        address_valid=is_valid_shielded(recipient),
        amount=amount,
        privacy_level=chosen,
        level_overridden=overridden,
        use_partial_notes=use_partial,
        partial_notes=partial_notes_count(chosen) if use_partial else 1,
        memo=format_memo(memo),
    )
    log.debug(
        f"[PLAN] kind={plan.address_kind.value} valid={plan.address_valid} "
        f"level={chosen.value} partial={use_partial}/{plan.partial_notes}"
    )
    return plan
