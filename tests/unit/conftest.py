"""
Pytest configuration for unit tests.

Provides sample report markup, descriptors and config isolation shared by
all unit tests.
"""

import pytest


SAMPLE_HTML = (
    '<h1>ACME Security Review</h1>'
    '<p>Executive summary paragraph.</p>'
    '<h2>High Risk Findings</h2>'
    '<table>'
    '<tr><th>#</th><th>Finding</th><th>Recommended Action</th></tr>'
    '<tr><td>1</td><td>Users lack   MFA</td><td>Enable MFA</td></tr>'
    '<tr><td>2</td><td>Default admin password</td><td>Rotate credentials</td></tr>'
    '</table>'
    '<h2>Medium Risk Findings</h2>'
    '<table>'
    '<tr><td>Finding</td><td>Recommendation</td></tr>'
    '<tr><td></td><td></td></tr>'
    '<tr><td>Verbose error pages</td><td></td></tr>'
    '</table>'
    '<h3>Triggered Items</h3>'
    '<p>None this period.</p>'
    '<h2>Appendix</h2>'
    '<table>'
    '<tr><td>Finding</td><td>Action</td></tr>'
    '<tr><td>Stale DNS record</td><td>Remove record</td></tr>'
    '</table>'
)


@pytest.fixture
def sample_html():
    """Converted report markup with four headings and three tables."""
    return SAMPLE_HTML


@pytest.fixture
def sample_descriptor():
    """Report descriptor for the sample report."""
    from risk_reports.models import ReportDescriptor

    return ReportDescriptor(
        slug="ACME Security Review",
        version="v1.0",
        title="ACME Security Review",
        date="2024-01-01",
        notes="Quarterly review",
        docx="/reports/acme-v1.docx"
    )


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """
    Reset cached config singletons for every test.

    Prevents one test's environment overrides from leaking into another.
    """
    import risk_reports.config as config_module

    monkeypatch.setattr(config_module, '_app_config', None)
    monkeypatch.setattr(config_module, '_style_map', None)
    yield
