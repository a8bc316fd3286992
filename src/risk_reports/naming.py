"""
Identifier helpers for report outputs.

Slugs are lower-case ASCII with '-' separators so they are safe as
directory names and URL segments. Punctuation is dropped rather than
turned into a separator, so 'v1.2' becomes 'v12'.
"""

import re

from slugify import slugify

# '-' acts as a word break; any other non-alphanumeric character is dropped
_SEPARATOR_PATTERN = re.compile(r'-')
_PUNCTUATION_PATTERN = re.compile(r'[^\w\s]|_')


def safe_slug(value) -> str:
    """
    Convert any value to a URL/filesystem-safe slug.

    Example:
        >>> safe_slug('ACME Security Audit')
        'acme-security-audit'
        >>> safe_slug('acme-audit')
        'acme-audit'
        >>> safe_slug('v1.2')
        'v12'
    """
    text = _SEPARATOR_PATTERN.sub(' ', str(value))
    text = _PUNCTUATION_PATTERN.sub('', text)
    return slugify(text, lowercase=True)


def build_report_url(slug: str, version: str, prefix: str = '/reports') -> str:
    """
    Build the catalog URL of a report version.

    Example:
        >>> build_report_url('acme-audit', 'v1')
        '/reports/acme-audit/v1'
    """
    return f"{prefix.rstrip('/')}/{slug}/{version}"
