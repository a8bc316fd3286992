"""
Markup → issues facade combining the parsing stages:
parse_blocks → segment_sections → extract_issues.
"""

import logging
from typing import List

from risk_reports.models.issue import Issue
from .html_parser import parse_blocks
from .section_segmenter import segment_sections, count_tables
from .issue_extractor import extract_issues

logger = logging.getLogger(__name__)


def extract_issues_from_html(markup: str) -> List[Issue]:
    """
    Extract all issues from converted report markup.

    Never raises on well-formed but unexpected markup: headings without
    tables, short tables and rows without target cells just produce fewer
    issues.

    Args:
        markup: HTML string

    Returns:
        Ordered list of Issues (ids issue-1 .. issue-N)

    Example:
        >>> html = (
        ...     '<h2>High Risk Findings</h2>'
        ...     '<table><tr><td>Finding</td><td>Action</td></tr>'
        ...     '<tr><td>Users lack MFA</td><td>Enable MFA</td></tr></table>'
        ... )
        >>> [i.finding for i in extract_issues_from_html(html)]
        ['Users lack MFA']
    """
    blocks = parse_blocks(markup)
    sections = segment_sections(blocks)
    issues = extract_issues(sections)

    logger.debug(
        f"Extracted {len(issues)} issues from {len(sections)} sections, "
        f"{count_tables(sections)} tables ({len(blocks)} blocks)"
    )

    return issues
