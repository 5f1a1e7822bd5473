# tests/test_planner.py

import logging

from shield_core.address import AddressKind
from shield_core.planner import describe_level, plan_shielded_send
from shield_core.policy import PrivacyLevel

Z_ADDR = "zs1" + "x" * 75


def test_plan_uses_recommended_level():
    plan = plan_shielded_send(Z_ADDR, 250, memo="rent")
    assert plan.address_kind == AddressKind.SHIELDED
    assert plan.address_valid
    assert plan.privacy_level is PrivacyLevel.HIGH
    assert not plan.level_overridden
    assert plan.use_partial_notes
    assert plan.partial_notes == 3
    assert plan.memo == "rent"


def test_plan_small_amount_single_note():
    plan = plan_shielded_send(Z_ADDR, 50)
    assert plan.privacy_level is PrivacyLevel.MEDIUM
    assert not plan.use_partial_notes
    assert plan.partial_notes == 1


def test_override_does_not_disable_amount_rule():
    plan = plan_shielded_send(Z_ADDR, 150, level=PrivacyLevel.LOW)
    assert plan.level_overridden
    assert plan.privacy_level is PrivacyLevel.LOW
    assert plan.use_partial_notes


def test_override_accepts_names():
    plan = plan_shielded_send(Z_ADDR, 1, level="maximum")
    assert plan.privacy_level is PrivacyLevel.MAXIMUM
    assert plan.partial_notes == 5


def test_invalid_recipient_never_raises():
    plan = plan_shielded_send("t1abc", 5000, memo="m" * 900)
    assert plan.address_kind == AddressKind.TRANSPARENT
    assert not plan.address_valid
    assert len(plan.memo) == 500
    assert plan.to_dict()["privacy_level"] == "maximum"
    assert plan.to_dict()["address_kind"] == "transparent"


def test_describe_level():
    assert describe_level(PrivacyLevel.MAXIMUM) == "Uses 5 partial notes for maximum obfuscation"
    assert describe_level(PrivacyLevel.LOW) == "Standard shielded transaction"


def test_unknown_override_falls_back_to_recommended(caplog):
    with caplog.at_level(logging.WARNING):
        plan = plan_shielded_send(Z_ADDR, 5, level="paranoid")
    assert plan.privacy_level is PrivacyLevel.LOW
    assert not plan.level_overridden
    assert not plan.use_partial_notes
    assert "paranoid" in caplog.text
