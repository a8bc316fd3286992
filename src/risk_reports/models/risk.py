"""
Risk level taxonomy.

Every section heading classifies into exactly one RiskLevel. Only the four
named levels are counted in catalog entries; OTHER is implicit as
issues_count minus the named counts.
"""

from enum import Enum


class RiskLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    TRIGGERED = "triggered"
    OTHER = "other"


NAMED_RISK_LEVELS = (
    RiskLevel.HIGH,
    RiskLevel.MEDIUM,
    RiskLevel.LOW,
    RiskLevel.TRIGGERED,
)
