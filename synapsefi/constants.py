"""
Central constants for SynapseFi helpers.
All modules must import from here.
"""

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# === SCORE RANGE ===
MIN_SCORE = 0
MAX_SCORE = 850

# === RISK LABELS ===
RISK_LOW = "Low"
RISK_MEDIUM = "Medium"
RISK_HIGH = "High"

# (min clamped score, tier, color, risk); checked top-down, first match wins
SCORE_TIERS = (
    (800, "Excellent", "#10B981", RISK_LOW),
    (700, "Good", "#3B82F6", RISK_LOW),
    (600, "Fair", "#F59E0B", RISK_MEDIUM),
    (500, "Poor", "#EF4444", RISK_HIGH),
    (MIN_SCORE, "Very Poor", "#DC2626", RISK_HIGH),
)

# === DISPLAY ===
# babel locale for currency symbols
DEFAULT_LOCALE = "en_US"
DEFAULT_CURRENCY = "USD"
DEFAULT_DISPLAY_TZ = "UTC"
