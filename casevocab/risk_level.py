"""Risk assessment level with an explicit severity order.

Each member declares ``(label, rank)``. Rank 0 is the lowest severity.
Comparisons (``<``, ``RiskLevel.compare``, ``is_at_least``) use the rank,
never the declaration position.
"""

from casevocab.base import RankedVocabulary, vocabulary
from casevocab.config import HIGH_RISK_THRESHOLD_RANK


@vocabulary
class RiskLevel(RankedVocabulary):
    """Assessed risk of a person, LOW through CRITICAL."""

    LOW = ("低危", 0)
    MEDIUM = ("中危", 1)
    HIGH = ("高危", 2)
    CRITICAL = ("极高危", 3)

    @property
    def is_high_risk(self) -> bool:
        """Whether this level is HIGH or above."""
        return self.rank >= HIGH_RISK_THRESHOLD_RANK


RISK_LEVEL_DESCRIPTIONS: dict[RiskLevel, str] = {
    RiskLevel.LOW: "上访次数较少，诉求合理，情绪稳定，无明显风险倾向",
    RiskLevel.MEDIUM: "多次上访，诉求复杂，情绪波动，需要重点关注和引导",
    RiskLevel.HIGH: "频繁上访，行为激进，存在安全隐患，需要严密监控",
    RiskLevel.CRITICAL: "存在极端倾向，可能危害公共安全，需24小时监控并采取预防措施",
}
"""One-line assessment guidance per risk level, keyed by code."""
