"""
Heading → risk level classification.

Keyword rules are evaluated in order and the first substring match wins,
so a heading mentioning both "high" and "triggered" is HIGH.

The triggered rule matches the stem "trigger", not the full word: "Trigger
events" and "Triggers" classify as TRIGGERED as well as "Triggered Items".
"""

from typing import Optional, Tuple

from risk_reports.models.risk import RiskLevel

RISK_LEVEL_RULES: Tuple[Tuple[RiskLevel, str], ...] = (
    (RiskLevel.HIGH, 'high'),
    (RiskLevel.MEDIUM, 'medium'),
    (RiskLevel.LOW, 'low'),
    (RiskLevel.TRIGGERED, 'trigger'),
)


def classify_risk_level(text: Optional[str]) -> RiskLevel:
    """
    Classify heading text into a RiskLevel.

    Args:
        text: Heading text (normalized or not). None/empty → OTHER.

    Returns:
        First RiskLevel whose keyword occurs in the lower-cased text,
        RiskLevel.OTHER if none does

    Example:
        >>> classify_risk_level('HIGH risk - TRIGGERED items')
        <RiskLevel.HIGH: 'high'>
        >>> classify_risk_level('Appendix')
        <RiskLevel.OTHER: 'other'>
    """
    if not text:
        return RiskLevel.OTHER

    lowered = text.lower()
    for level, keyword in RISK_LEVEL_RULES:
        if keyword in lowered:
            return level

    return RiskLevel.OTHER
