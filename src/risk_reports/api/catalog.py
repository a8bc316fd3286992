"""
Cross-document aggregation: per-report risk counts and the
recency-ordered catalog.
"""

from collections import Counter
from typing import Dict, Iterable, List

from risk_reports.models.index import IndexEntry
from risk_reports.models.issue import Issue
from risk_reports.models.report import ReportDocument
from risk_reports.models.risk import NAMED_RISK_LEVELS


def count_issues_by_risk_level(issues: Iterable[Issue]) -> Dict[str, int]:
    """
    Count issues for each named risk level (high, medium, low, triggered).

    Levels without issues are present with 0. Issues under 'other'
    headings are not counted here.

    Example:
        >>> count_issues_by_risk_level(issues)  # 3 high, 2 medium
        {'high': 3, 'medium': 2, 'low': 0, 'triggered': 0}
    """
    tally = Counter(issue.risk_level for issue in issues)
    return {level.value: tally.get(level, 0) for level in NAMED_RISK_LEVELS}


def build_index_entry(document: ReportDocument, url: str) -> IndexEntry:
    """
    Summarize one report document as a catalog entry.

    Args:
        document: Processed report document
        url: Catalog URL of the report (built by the caller)

    Returns:
        IndexEntry with issues_count and named risk-level counts
    """
    return IndexEntry(
        slug=document.slug,
        version=document.version,
        title=document.title,
        date=document.date,
        url=url,
        docx=document.docx,
        issues_count=len(document.issues),
        counts=count_issues_by_risk_level(document.issues)
    )


def build_catalog(entries: Iterable[IndexEntry]) -> List[IndexEntry]:
    """
    Order catalog entries newest first.

    Dates are compared as plain strings (ISO dates sort lexicographically).
    Missing dates compare as '' and therefore sort last. The sort is stable:
    entries sharing a date keep their encounter order.
    """
    return sorted(entries, key=lambda entry: entry.date or '', reverse=True)
