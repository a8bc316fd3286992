"""
Unit tests for slug and URL helpers.
"""

import pytest


class TestSafeSlug:
    """Test suite for safe_slug()."""

    @pytest.mark.parametrize("value,expected", [
        ("ACME Security Audit", "acme-security-audit"),
        ("acme-audit", "acme-audit"),
        ("  Acme -- Audit  ", "acme-audit"),
        ("v1.2", "v12"),
        ("v1.0", "v10"),
        ("report_final", "reportfinal"),
        ("Q3 (draft)", "q3-draft"),
        ("Évaluation", "evaluation"),
    ])
    def test_slugs(self, value, expected):
        from risk_reports.naming import safe_slug

        assert safe_slug(value) == expected

    def test_non_string_value(self):
        from risk_reports.naming import safe_slug

        assert safe_slug(2024) == "2024"


class TestBuildReportUrl:
    """Test suite for build_report_url()."""

    def test_default_prefix(self):
        from risk_reports.naming import build_report_url

        assert build_report_url("acme", "v1") == "/reports/acme/v1"

    def test_trailing_slash_prefix(self):
        from risk_reports.naming import build_report_url

        assert build_report_url("acme", "v1", prefix="/docs/") == "/docs/acme/v1"
