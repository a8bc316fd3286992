"""
Reusable field validators for Pydantic models.

These validators can be used with the Pydantic @field_validator decorator
for automatic input validation of report descriptors and issue records.
"""

import re
from typing import Optional


ISO_DATE_PATTERN = re.compile(r'^\d{4}(-\d{2}(-\d{2})?)?([T ].*)?$')
ISSUE_ID_PATTERN = re.compile(r'^issue-[1-9]\d*$')


def validate_non_empty(value: str) -> str:
    """
    Validate that a string field is not empty or whitespace-only.

    Args:
        value: String to validate

    Returns:
        The validated string, stripped of surrounding whitespace

    Raises:
        ValueError: If value is empty after stripping

    Example:
        >>> validate_non_empty(' acme-audit ')
        'acme-audit'
        >>> validate_non_empty('   ')  # Raises ValueError
    """
    if value is None or not str(value).strip():
        raise ValueError("Value must be a non-empty string")

    return str(value).strip()


def is_iso_date(date: Optional[str]) -> bool:
    """
    Check whether a date string is ISO-like.

    Catalog ordering compares dates as plain strings, which is only
    meaningful for ISO-formatted values. Accepts YYYY, YYYY-MM and
    YYYY-MM-DD, optionally followed by a time part. Callers decide what
    to do with other formats; descriptor dates are kept as authored.

    Args:
        date: Date string to check, or None

    Returns:
        True if date is ISO-like, False otherwise (including None/blank)

    Example:
        >>> is_iso_date('2024-01-01')
        True
        >>> is_iso_date('March 2024')
        False
    """
    if not date:
        return False

    return bool(ISO_DATE_PATTERN.match(str(date).strip()))


def validate_issue_id(issue_id: str) -> str:
    """
    Validate issue id format: 'issue-<n>' with n starting at 1.

    Example:
        >>> validate_issue_id('issue-1')
        'issue-1'
        >>> validate_issue_id('issue-0')  # Raises ValueError
    """
    if not issue_id or not ISSUE_ID_PATTERN.match(issue_id):
        raise ValueError(
            f"Issue id must be in format 'issue-<n>' (n >= 1), got: '{issue_id}'"
        )

    return issue_id
