"""
shield_core.scoring
-------------------
Wallet-wide privacy score, as shown on the privacy dashboard.

Score weights (out of 100):

- 40  shielded balance ratio
- 30  shielded transaction ratio
- 20  privacy level weight
- 10  recent shielded activity (last 30 days, saturating at 10 txs)
- +0.5 per active viewing key, capped at +5
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from .constants import RECENT_ACTIVITY_DAYS, RECENT_ACTIVITY_SATURATION, MAX_VIEWING_KEY_BONUS
from .policy import PrivacyLevel
from .utils import Timestamp, now_ts, parse_ts, utcnow

_LEVEL_WEIGHT = {
    PrivacyLevel.LOW: 0.25,
    PrivacyLevel.MEDIUM: 0.5,
    PrivacyLevel.HIGH: 0.75,
    PrivacyLevel.MAXIMUM: 1.0,
}


@dataclass
class PrivacyScoreFactors:
    shielded_balance_ratio: float               # 0-1
    shielded_transaction_ratio: float           # 0-1
    viewing_keys_active: int
    privacy_level: PrivacyLevel
    recent_privacy_activity: float              # 0-1


@dataclass
class WalletBalance:
    balance: float = 0.0
    shielded: bool = False


@dataclass
class TransactionSummary:
    shielded: bool = False
    date: str = field(default_factory=now_ts)


@dataclass
class PrivacyMetrics:
    shielded_balance: float
    transparent_balance: float
    privacy_score: int
    recent_shielded_txs: int
    viewing_keys_active: int
    privacy_level: PrivacyLevel


def calculate_privacy_score(factors: PrivacyScoreFactors) -> int:
    score = 0.0
    score += factors.shielded_balance_ratio * 40
    score += factors.shielded_transaction_ratio * 30
    score += _LEVEL_WEIGHT[PrivacyLevel.parse(factors.privacy_level)] * 20
    score += factors.recent_privacy_activity * 10

    if factors.viewing_keys_active > 0:
        score += min(factors.viewing_keys_active * 0.5, MAX_VIEWING_KEY_BONUS)

    # half-up, not banker's rounding
    rounded = int(Decimal(str(score)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return min(rounded, 100)


def _level_from_ratios(balance_ratio: float, tx_ratio: float) -> PrivacyLevel:
    if balance_ratio >= 0.8 and tx_ratio >= 0.8:
        return PrivacyLevel.MAXIMUM
    if balance_ratio >= 0.6 and tx_ratio >= 0.6:
        return PrivacyLevel.HIGH
    if balance_ratio >= 0.3 or tx_ratio >= 0.3:
        return PrivacyLevel.MEDIUM
    return PrivacyLevel.LOW


def calculate_privacy_metrics(
    wallets: Iterable[WalletBalance],
    transactions: Iterable[TransactionSummary],
    viewing_keys_active: int = 0,
    now: Optional[Timestamp] = None,
) -> PrivacyMetrics:
    wallets = list(wallets)
    transactions = list(transactions)

    total_balance = sum(w.balance or 0 for w in wallets)
    shielded_balance = sum(w.balance or 0 for w in wallets if w.shielded)

    shielded_txs = [t for t in transactions if t.shielded]
    balance_ratio = shielded_balance / total_balance if total_balance > 0 else 0
    tx_ratio = len(shielded_txs) / len(transactions) if transactions else 0

    level = _level_from_ratios(balance_ratio, tx_ratio)

    current = parse_ts(now) if now is not None else utcnow()
    cutoff = current - timedelta(days=RECENT_ACTIVITY_DAYS)
    recent = sum(1 for t in shielded_txs if parse_ts(t.date) >= cutoff)
    activity = min(recent / RECENT_ACTIVITY_SATURATION, 1)

    score = calculate_privacy_score(PrivacyScoreFactors(
        shielded_balance_ratio=balance_ratio,
        shielded_transaction_ratio=tx_ratio,
        viewing_keys_active=viewing_keys_active,
        privacy_level=level,
        recent_privacy_activity=activity,
    ))

    return PrivacyMetrics(
        shielded_balance=shielded_balance,
        transparent_balance=total_balance - shielded_balance,
        privacy_score=score,
        recent_shielded_txs=recent,
        viewing_keys_active=viewing_keys_active,
        privacy_level=level,
    )


def privacy_recommendations(metrics: PrivacyMetrics) -> List[str]:
    recs: List[str] = []

    if metrics.shielded_balance < metrics.transparent_balance:
        recs.append("Consider moving more funds to shielded addresses for enhanced privacy")

    if metrics.privacy_score < 50:
        recs.append("Your privacy score is low. Enable privacy mode for better protection")

    if metrics.viewing_keys_active == 0 and metrics.recent_shielded_txs > 0:
        recs.append("Generate viewing keys for auditability while maintaining privacy")

    if metrics.privacy_level == PrivacyLevel.LOW:
        recs.append("Switch to shielded transactions for better privacy")

    if metrics.recent_shielded_txs == 0:
        recs.append("Start using shielded transactions to improve your privacy")

    return recs
