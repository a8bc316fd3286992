"""
Whitespace normalization shared by every parsing stage.
"""

import re
from typing import Any

_WHITESPACE_RUN = re.compile(r'\s+')


def normalize_text(value: Any) -> str:
    """
    Collapse whitespace runs to a single space and strip both ends.

    Args:
        value: Text to normalize. None normalizes to ''; other non-string
               values are converted with str() first.

    Returns:
        Normalized string

    Example:
        >>> normalize_text('  High\\n  Risk\\tFindings ')
        'High Risk Findings'
        >>> normalize_text(None)
        ''
    """
    if value is None:
        return ''
    return _WHITESPACE_RUN.sub(' ', str(value)).strip()
