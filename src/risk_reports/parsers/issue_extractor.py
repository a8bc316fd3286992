"""
Table → Issue record extraction.

Columns are located by fuzzy header matching driven by COLUMN_RULES, an
ordered list of (field name, keywords) pairs. Adding a field (e.g. "owner")
means adding a rule, not a new code path.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple

from risk_reports.models.issue import Issue
from risk_reports.models.risk import RiskLevel

logger = logging.getLogger(__name__)

COLUMN_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ('finding', ('finding',)),
    ('recommendation', ('recommendation', 'action')),
)

MIN_TABLE_ROWS = 2


def resolve_columns(
    header_row: Sequence[str],
    rules: Sequence[Tuple[str, Sequence[str]]] = COLUMN_RULES
) -> Dict[str, int]:
    """
    Map each field to the index of its header cell.

    The leftmost header cell containing any of a field's keywords
    (case-insensitive) wins. Fields may resolve to the same index, in which
    case both copy that cell.

    Args:
        header_row: First row of the table
        rules: Ordered (field name, keywords) pairs

    Returns:
        Dictionary of field name → column index (-1 when not found)

    Example:
        >>> resolve_columns(['#', 'Key Findings', 'Corrective Action'])
        {'finding': 1, 'recommendation': 2}
    """
    header = [str(cell).lower() for cell in header_row]

    columns = {}
    for field_name, keywords in rules:
        columns[field_name] = next(
            (i for i, cell in enumerate(header) if any(k in cell for k in keywords)),
            -1
        )
    return columns


def _cell(row: Sequence[str], index: int) -> str:
    """Cell at index, or '' when the index is unresolved or past the row end."""
    if 0 <= index < len(row):
        return row[index] or ''
    return ''


def extract_issues_from_table(
    rows: List[List[str]],
    risk_level: RiskLevel,
    section_title: str,
    start: int = 0
) -> List[Issue]:
    """
    Turn one table's rows into Issue records.

    Args:
        rows: Table rows (row 0 is the header), cells already normalized
        risk_level: Risk level of the enclosing section
        section_title: Normalized heading text of the enclosing section
        start: Number of issues already emitted for this document; ids
               continue from start + 1

    Returns:
        Issues for every data row with a non-empty finding or
        recommendation. Tables with fewer than 2 rows yield [].
    """
    if len(rows) < MIN_TABLE_ROWS:
        logger.debug(
            f"Skipping table under '{section_title}': {len(rows)} row(s)"
        )
        return []

    columns = resolve_columns(rows[0])
    finding_index = columns['finding']
    recommendation_index = columns['recommendation']

    issues = []
    for row in rows[1:]:
        finding = _cell(row, finding_index)
        recommendation = _cell(row, recommendation_index)

        if not finding and not recommendation:
            continue

        issues.append(Issue(
            id=f"issue-{start + len(issues) + 1}",
            risk_level=risk_level,
            section_title=section_title,
            finding=finding,
            recommendation=recommendation,
            raw_row=list(row)
        ))

    return issues


def extract_issues(sections: List[Dict[str, Any]]) -> List[Issue]:
    """
    Extract issues from every table of every section, in document order.

    The running issue count is threaded through each table so ids are
    contiguous and scoped to this document only.

    Args:
        sections: Sections from segment_sections()

    Returns:
        Ordered list of Issues with ids issue-1 .. issue-N
    """
    issues: List[Issue] = []

    for section in sections:
        for rows in section['tables']:
            issues.extend(extract_issues_from_table(
                rows,
                risk_level=section['risk_level'],
                section_title=section['title'],
                start=len(issues)
            ))

    return issues
