"""
Low-level HTML reading for converted report markup.

Converted reports are FLAT: headings and tables are siblings at the top
level, so a section is reconstructed from sibling order rather than from
nesting. This module only turns markup into that ordered block sequence;
grouping happens in section_segmenter.
"""

from typing import Any, Dict, List

from lxml import etree, html as lxml_html

from .text import normalize_text

HEADING_TAGS = {'h1': 1, 'h2': 2, 'h3': 3}


def parse_blocks(markup: str) -> List[Dict[str, Any]]:
    """
    Read the top-level block sequence of an HTML fragment.

    Args:
        markup: HTML string (e.g., mammoth output)

    Returns:
        Ordered list of block dictionaries:
        [
            {'kind': 'heading', 'level': 2, 'text': 'High Risk Findings'},
            {'kind': 'table', 'rows': [['Finding', 'Action'], ...]},
            {'kind': 'other'},
            ...
        ]
    """
    if not markup or not markup.strip():
        return []

    container = lxml_html.fragment_fromstring(markup, create_parent='div')

    blocks = []
    for child in container:
        # Comments and processing instructions have non-string tags
        if not isinstance(child.tag, str):
            continue

        tag = child.tag.lower()
        if tag in HEADING_TAGS:
            blocks.append({
                'kind': 'heading',
                'level': HEADING_TAGS[tag],
                'text': normalize_text(child.text_content())
            })
        elif tag == 'table':
            blocks.append({
                'kind': 'table',
                'rows': parse_table_rows(child)
            })
        else:
            blocks.append({'kind': 'other'})

    return blocks


def parse_table_rows(table_elem: etree._Element) -> List[List[str]]:
    """
    Extract every row of a table as normalized cell strings.

    Header (TH) and data (TD) cells are not distinguished; the first row is
    treated as the header downstream.

    Args:
        table_elem: lxml element for TABLE

    Returns:
        List of rows, each a list of cell strings, in document order
    """
    rows = []
    for tr in table_elem.iter('tr'):
        rows.append([
            normalize_text(cell.text_content())
            for cell in tr.iter('th', 'td')
        ])
    return rows
