"""
Parsing modules for converted risk report markup.

- Markup is FLAT: headings and tables are top-level siblings
- Sections are reconstructed by sibling order (heading → following tables)
- Risk level comes from keyword rules on heading text
- Table columns are located by keyword rules on the header row
"""

from .text import normalize_text
from .risk_classifier import classify_risk_level, RISK_LEVEL_RULES
from .html_parser import parse_blocks, parse_table_rows
from .section_segmenter import segment_sections
from .issue_extractor import (
    COLUMN_RULES,
    resolve_columns,
    extract_issues_from_table,
    extract_issues,
)
from .report_parser import extract_issues_from_html

__all__ = [
    'normalize_text',
    'classify_risk_level',
    'RISK_LEVEL_RULES',
    'parse_blocks',
    'parse_table_rows',
    'segment_sections',
    'COLUMN_RULES',
    'resolve_columns',
    'extract_issues_from_table',
    'extract_issues',
    'extract_issues_from_html',
]
