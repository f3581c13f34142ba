# risk label classification
# backend risk labels are free text. semester labels use the substring rule;
# roster labels try the canonical names first, then the legacy substring rule.

import enum
import logging

from dropout_client.errors import UnknownRiskLabel

logger = logging.getLogger(__name__)


class RiskLevel(str, enum.Enum):
    SAFE = "safe"
    WARNING = "warning"
    AT_RISK = "atRisk"


CANONICAL_LABELS = {
    "safe": RiskLevel.SAFE,
    "low": RiskLevel.SAFE,
    "low risk": RiskLevel.SAFE,
    "warning": RiskLevel.WARNING,
    "medium": RiskLevel.WARNING,
    "medium risk": RiskLevel.WARNING,
    "at risk": RiskLevel.AT_RISK,
    "at-risk": RiskLevel.AT_RISK,
    "atrisk": RiskLevel.AT_RISK,
    "high": RiskLevel.AT_RISK,
    "high risk": RiskLevel.AT_RISK,
}

# chart severity proxy per level
RISK_SCORES = {
    RiskLevel.SAFE: 10,
    RiskLevel.WARNING: 50,
    RiskLevel.AT_RISK: 90,
}


def _normalize(label) -> str:
    return str(label or "").strip().lower()


def canonical_risk_level(label):
    """exact canonical match, or none"""
    return CANONICAL_LABELS.get(_normalize(label))


def classify_semester_status(label) -> RiskLevel:
    """student semester rule: 'safe' -> safe, 'warning' -> warning, anything else is at risk"""
    text = _normalize(label)
    if "safe" in text:
        return RiskLevel.SAFE
    if "warning" in text:
        return RiskLevel.WARNING
    return RiskLevel.AT_RISK


def classify_roster_status(label) -> RiskLevel:
    """counselor roster rule, checked in precedence order.
    raises UnknownRiskLabel when no bucket matches."""
    level = canonical_risk_level(label)
    if level is not None:
        return level

    text = _normalize(label)
    if "low" in text or "safe" in text:
        return RiskLevel.SAFE
    if "medium" in text or "warning" in text:
        return RiskLevel.WARNING
    if "high" in text or "risk" in text:
        return RiskLevel.AT_RISK
    raise UnknownRiskLabel(str(label))
