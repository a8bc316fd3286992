"""
High-level API for building risk report documents and the catalog.
"""

from .catalog import count_issues_by_risk_level, build_index_entry, build_catalog
from .pipeline import ReportBuildPipeline, build_report_document
from .pipeline_parallel import ParallelReportBuildPipeline

__all__ = [
    'count_issues_by_risk_level',
    'build_index_entry',
    'build_catalog',
    'ReportBuildPipeline',
    'build_report_document',
    'ParallelReportBuildPipeline',
]
