"""
Unit tests for ReportBuildPipeline and build_report_document.

The DOCX converter is mocked; descriptors and outputs use tmp_path.
"""

import json

import pandas as pd
import pytest
from unittest.mock import Mock

from risk_reports.models import ConversionResult, RiskLevel


HIGH_REPORT = (
    '<h2>High Risk Findings</h2>'
    '<table><tr><td>Finding</td><td>Action</td></tr>'
    '<tr><td>Users lack MFA</td><td>Enable MFA</td></tr>'
    '<tr><td>Open SSH</td><td>Restrict</td></tr></table>'
)

LOW_REPORT = (
    '<h2>Low Risk Findings</h2>'
    '<table><tr><td>Finding</td><td>Recommendation</td></tr>'
    '<tr><td>Banner leaks version</td><td>Hide banner</td></tr></table>'
)


@pytest.fixture
def project(tmp_path):
    """Content and public directories with three descriptors."""
    content = tmp_path / "content" / "reports"
    public = tmp_path / "public"
    (public / "reports").mkdir(parents=True)
    content.mkdir(parents=True)

    descriptors = {
        "a-old.json": {'slug': "Old Audit", 'version': "v1", 'date': "2023-05-01",
                       'docx': "/reports/old.docx"},
        "b-new.json": {'slug': "New Audit", 'version': "v2", 'title': "New Audit v2",
                       'date': "2024-01-01", 'docx': "/reports/new.docx", 'notes': "final"},
        "c-missing.json": {'slug': "Missing", 'version': "v1", 'date': "2025-01-01",
                           'docx': "/reports/missing.docx"},
    }
    for name, data in descriptors.items():
        (content / name).write_text(json.dumps(data), encoding='utf-8')

    (public / "reports" / "old.docx").write_bytes(b"old")
    (public / "reports" / "new.docx").write_bytes(b"new")

    return {'root': tmp_path, 'content': content, 'public': public, 'out': tmp_path / "generated"}


@pytest.fixture
def converter():
    """Mock converter returning markup based on the DOCX file name."""
    outputs = {
        "old.docx": ConversionResult(html=LOW_REPORT, messages=[]),
        "new.docx": ConversionResult(html=HIGH_REPORT, messages=["warning: Unrecognised style"]),
    }
    mock = Mock()
    mock.style_map = []
    mock.convert.side_effect = lambda path: outputs[path.name]
    return mock


@pytest.fixture
def pipeline(project, converter):
    from risk_reports.api import ReportBuildPipeline
    from risk_reports.services import ReportStorageService

    return ReportBuildPipeline(
        storage_service=ReportStorageService(project['out']),
        converter=converter,
        url_prefix="/reports"
    )


class TestBuildReportDocument:
    """Test suite for build_report_document()."""

    def test_assembles_document(self, sample_descriptor, sample_html):
        from risk_reports.api import build_report_document

        document = build_report_document(sample_descriptor, sample_html, ["info: converted"])

        assert document.slug == "acme-security-review"
        assert document.version == "v10"
        assert document.title == "ACME Security Review"
        assert document.date == "2024-01-01"
        assert document.notes == "Quarterly review"
        assert document.docx == "/reports/acme-v1.docx"
        assert document.html_body == sample_html
        assert len(document.issues) == 4
        assert document.conversion_messages == ["info: converted"]

    def test_title_falls_back_to_raw_slug_and_version(self):
        from risk_reports.api import build_report_document
        from risk_reports.models import ReportDescriptor

        document = build_report_document(ReportDescriptor(slug="Acme Audit", version="V1"), "")

        assert document.title == "Acme Audit V1"
        assert document.slug == "acme-audit"
        assert document.version == "v1"

    def test_is_idempotent(self, sample_descriptor, sample_html):
        """Identical inputs produce byte-identical output."""
        from risk_reports.api import build_report_document

        first = build_report_document(sample_descriptor, sample_html)
        second = build_report_document(sample_descriptor, sample_html)

        assert first == second
        assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)


class TestResolveDocxPath:
    """Test suite for resolve_docx_path()."""

    def test_existing_file(self, project):
        from risk_reports.api.pipeline import resolve_docx_path
        from risk_reports.models import ReportDescriptor

        descriptor = ReportDescriptor(slug="a", version="1", docx="/reports/old.docx")

        assert resolve_docx_path(descriptor, project['public']) == project['public'] / "reports" / "old.docx"

    def test_missing_file(self, project):
        from risk_reports.api.pipeline import resolve_docx_path
        from risk_reports.models import ReportDescriptor

        descriptor = ReportDescriptor(slug="a", version="1", docx="/reports/none.docx")

        assert resolve_docx_path(descriptor, project['public']) is None

    def test_no_docx_configured(self, project):
        from risk_reports.api.pipeline import resolve_docx_path
        from risk_reports.models import ReportDescriptor

        assert resolve_docx_path(ReportDescriptor(slug="a", version="1"), project['public']) is None


class TestReportBuildPipeline:
    """Test suite for ReportBuildPipeline.build()."""

    def test_statistics(self, pipeline, project):
        stats = pipeline.build(content_dir=project['content'], public_dir=project['public'])

        assert stats == {'reports': 2, 'issues': 3, 'skipped': 1}

    def test_writes_report_documents(self, pipeline, project):
        pipeline.build(content_dir=project['content'], public_dir=project['public'])

        new = json.loads((project['out'] / "new-audit" / "v2.json").read_text(encoding='utf-8'))

        assert new['title'] == "New Audit v2"
        assert new['notes'] == "final"
        assert new['conversionMessages'] == ["warning: Unrecognised style"]
        assert [i['id'] for i in new['issues']] == ["issue-1", "issue-2"]
        assert new['issues'][0]['riskLevel'] == "high"
        assert (project['out'] / "old-audit" / "v1.json").exists()

    def test_missing_docx_is_excluded_from_catalog(self, pipeline, project):
        """Reports without a DOCX are skipped; the run continues."""
        pipeline.build(content_dir=project['content'], public_dir=project['public'])

        index = json.loads((project['out'] / "index.json").read_text(encoding='utf-8'))

        assert [e['slug'] for e in index] == ["new-audit", "old-audit"]
        assert not (project['out'] / "missing").exists()

    def test_skipped_reports_csv(self, pipeline, project):
        pipeline.build(content_dir=project['content'], public_dir=project['public'])

        df = pd.read_csv(project['out'] / "skipped" / "skipped_reports.csv", dtype=str)

        assert df['descriptor'].tolist() == ["c-missing.json"]
        assert df['reason'].tolist() == ["missing_docx"]

    def test_catalog_entries(self, pipeline, project):
        pipeline.build(content_dir=project['content'], public_dir=project['public'])

        newest = pipeline.catalog[0]

        assert newest.url == "/reports/new-audit/v2"
        assert newest.issues_count == 2
        assert newest.counts == {'high': 2, 'medium': 0, 'low': 0, 'triggered': 0}
        assert pipeline.catalog[1].counts['low'] == 1

    def test_rebuild_is_byte_identical(self, pipeline, project):
        """Each run fully recomputes identical outputs."""
        pipeline.build(content_dir=project['content'], public_dir=project['public'])
        first = (project['out'] / "index.json").read_bytes()

        pipeline.build(content_dir=project['content'], public_dir=project['public'])
        second = (project['out'] / "index.json").read_bytes()

        assert first == second

    def test_conversion_failure_propagates(self, pipeline, project, converter):
        """Converter errors abort the run."""
        converter.convert.side_effect = RuntimeError("corrupt docx")

        with pytest.raises(RuntimeError):
            pipeline.build(content_dir=project['content'], public_dir=project['public'])

        assert not (project['out'] / "index.json").exists()

    def test_no_descriptors_writes_empty_index(self, pipeline, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()

        stats = pipeline.build(content_dir=empty, public_dir=tmp_path)

        assert stats == {'reports': 0, 'issues': 0, 'skipped': 0}
        assert pipeline.catalog == []

    def test_descriptor_without_docx_is_skipped(self, pipeline, tmp_path, converter):
        content = tmp_path / "c"
        content.mkdir()
        (content / "x.json").write_text(json.dumps({'slug': "x", 'version': "1"}), encoding='utf-8')

        stats = pipeline.build(content_dir=content, public_dir=tmp_path)

        assert stats['skipped'] == 1
        converter.convert.assert_not_called()

    def test_dates_pass_through_to_catalog(self, pipeline, tmp_path, converter):
        """Non-ISO and empty dates reach the index unchanged; ISO dates sort first."""
        content = tmp_path / "dated"
        public = tmp_path / "dated-public"
        content.mkdir()
        public.mkdir()
        descriptors = [
            ("1.json", {'slug': "spring", 'version': "v1", 'date': "March 2024", 'docx': "old.docx"}),
            ("2.json", {'slug': "undated", 'version': "v1", 'date': "", 'docx': "old.docx"}),
            ("3.json", {'slug': "iso", 'version': "v1", 'date': "2024-01-01", 'docx': "new.docx"}),
        ]
        for name, data in descriptors:
            (content / name).write_text(json.dumps(data), encoding='utf-8')
        (public / "old.docx").write_bytes(b"old")
        (public / "new.docx").write_bytes(b"new")

        stats = pipeline.build(content_dir=content, public_dir=public)

        index = json.loads((pipeline._storage.index_path).read_text(encoding='utf-8'))
        assert stats['reports'] == 3
        assert [(e['slug'], e['date']) for e in index] == [
            ("spring", "March 2024"),
            ("iso", "2024-01-01"),
            ("undated", ""),
        ]

    def test_rebuild_clears_resolved_skips(self, pipeline, project):
        """Once the missing DOCX appears, the next run leaves no skipped CSV."""
        pipeline.build(content_dir=project['content'], public_dir=project['public'])
        csv_path = project['out'] / "skipped" / "skipped_reports.csv"
        assert csv_path.exists()

        (project['content'] / "c-missing.json").unlink()
        stats = pipeline.build(content_dir=project['content'], public_dir=project['public'])

        assert stats['skipped'] == 0
        assert not csv_path.exists()
