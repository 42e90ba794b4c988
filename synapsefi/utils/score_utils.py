"""
Credit score helpers: clamp to [0, 850], classify into tiers, convert to progress.

Tiers (on the clamped score):
  >= 800 Excellent (Low risk); >= 700 Good (Low); >= 600 Fair (Medium);
  >= 500 Poor (High); below that Very Poor (High).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from synapsefi.constants import MAX_SCORE, MIN_SCORE, SCORE_TIERS
from synapsefi.utils.numeric import finite_or_zero, round_half_up


@dataclass(frozen=True)
class ScoreTier:
    """Display classification of a credit score."""

    tier: str
    color: str
    risk: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def clamp_score(score: Any) -> int:
    """
    Clamp a raw score into [0, 850] as an integer.

    Non-finite or non-numeric input is treated as 0.
    """
    s = finite_or_zero(score)
    return max(MIN_SCORE, min(MAX_SCORE, round_half_up(s)))


def get_score_tier(score: Any) -> ScoreTier:
    """Return the ScoreTier for a (raw) score; the score is clamped first."""
    s = clamp_score(score)
    for threshold, tier, color, risk in SCORE_TIERS:
        if s >= threshold:
            return ScoreTier(tier=tier, color=color, risk=risk)
    _, tier, color, risk = SCORE_TIERS[-1]
    return ScoreTier(tier=tier, color=color, risk=risk)


def score_to_progress(score: Any) -> int:
    """Clamped score as a whole percentage of MAX_SCORE (0-100)."""
    return round_half_up(clamp_score(score) / MAX_SCORE * 100)
