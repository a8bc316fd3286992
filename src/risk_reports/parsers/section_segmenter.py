"""
Heading-scoped section segmentation.

Walks the flat block sequence once, carrying the current section as an
explicit accumulator:
1. Every heading (h1-h3) opens a new section
2. Tables are attached to the most recent heading
3. Other blocks are ignored
"""

import logging
from typing import Any, Dict, List, Optional

from .risk_classifier import classify_risk_level
from .text import normalize_text

logger = logging.getLogger(__name__)


def segment_sections(blocks: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Group tables under their nearest preceding heading.

    Args:
        blocks: Block sequence from parse_blocks()

    Returns:
        Ordered list of section dictionaries:
        [
            {
                'title': 'High Risk Findings',
                'risk_level': RiskLevel.HIGH,
                'tables': [[['Finding', 'Action'], ['...', '...']], ...]
            },
            ...
        ]

        Headings without tables still yield a section (with an empty
        'tables' list). Tables before the first heading are dropped.
    """
    sections = []
    current: Optional[Dict[str, Any]] = None
    headless_tables = 0

    for block in blocks:
        kind = block.get('kind')

        if kind == 'heading':
            title = normalize_text(block.get('text'))
            current = {
                'title': title,
                'risk_level': classify_risk_level(title),
                'tables': []
            }
            sections.append(current)
        elif kind == 'table':
            if current is None:
                headless_tables += 1
                continue
            current['tables'].append(block.get('rows', []))

    if headless_tables:
        logger.debug(f"Dropped {headless_tables} table(s) appearing before any heading")

    return sections


def count_tables(sections: List[Dict[str, Any]]) -> int:
    """Total number of tables across all sections."""
    return sum(len(section['tables']) for section in sections)
