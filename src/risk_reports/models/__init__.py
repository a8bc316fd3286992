"""
Pydantic models for report descriptors, extracted issues and the catalog.
"""

from risk_reports.models.risk import RiskLevel, NAMED_RISK_LEVELS
from risk_reports.models.issue import Issue
from risk_reports.models.report import ReportDescriptor, ConversionResult, ReportDocument
from risk_reports.models.index import IndexEntry

__all__ = [
    'RiskLevel',
    'NAMED_RISK_LEVELS',
    'Issue',
    'ReportDescriptor',
    'ConversionResult',
    'ReportDocument',
    'IndexEntry',
]
