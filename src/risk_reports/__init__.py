"""
risk-report-builder: risk finding extraction from authored report documents.

Main package exports for user-facing API.
"""

from risk_reports.parsers import extract_issues_from_html, classify_risk_level
from risk_reports.api import (
    ReportBuildPipeline,
    ParallelReportBuildPipeline,
    build_report_document,
    build_catalog,
)
from risk_reports.services import ReportStorageService

__all__ = [
    'extract_issues_from_html',
    'classify_risk_level',
    'ReportBuildPipeline',
    'ParallelReportBuildPipeline',
    'build_report_document',
    'build_catalog',
    'ReportStorageService',
]
