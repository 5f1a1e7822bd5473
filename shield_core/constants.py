# shield_core/constants.py
"""Fixed policy constants. These are intentionally not read from the environment."""

# --------- Address formats ----------
SHIELDED_PREFIXES = ("zt", "z")     # testnet first, mainnet
TRANSPARENT_PREFIX = "t"
SHIELDED_MIN_LEN = 70
SHIELDED_MAX_LEN = 80

# --------- Privacy ladder ----------
MEDIUM_THRESHOLD = 10
HIGH_THRESHOLD = 100
MAXIMUM_THRESHOLD = 1000
PARTIAL_NOTES_AMOUNT = 100          # amount override, independent of level

PARTIAL_NOTES = {
    "low": 1,
    "medium": 2,
    "high": 3,
    "maximum": 5,
}

# --------- Memo ----------
MEMO_MAX_CHARS = 500                # internal cap, headroom under the protocol limit
MEMO_PROTOCOL_BYTES = 512

# --------- Viewing keys ----------
KEY_HASH_LEN = 64
MASK_MIN_LEN = 8
MASK_PLACEHOLDER = "****"
EXPORT_INDENT = 2
EXPIRY_YEARS = 1

# --------- Scoring ----------
RECENT_ACTIVITY_DAYS = 30
RECENT_ACTIVITY_SATURATION = 10
MAX_VIEWING_KEY_BONUS = 5
