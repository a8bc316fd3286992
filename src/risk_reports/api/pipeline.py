"""
High-level pipeline orchestrator for risk report builds.

ReportBuildPipeline coordinates the complete workflow:
- Load report descriptors (via DescriptorService)
- Convert DOCX to HTML (via DocxConverter)
- Extract issues from the markup
- Write report documents and the catalog (via ReportStorageService)

Design Philosophy:
- Explicit storage control (ReportStorageService injected by user)
- Missing source documents are skipped, everything else fails loudly
- Statistics-based monitoring (returns actionable metrics)
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from risk_reports.api.catalog import build_catalog, build_index_entry
from risk_reports.config import get_app_config
from risk_reports.models.index import IndexEntry
from risk_reports.models.report import ReportDescriptor, ReportDocument
from risk_reports.naming import build_report_url, safe_slug
from risk_reports.parsers import extract_issues_from_html
from risk_reports.services.descriptor_service import DescriptorService
from risk_reports.services.docx_converter import DocxConverter
from risk_reports.services.storage_service import ReportStorageService

logger = logging.getLogger(__name__)


def build_report_document(
    descriptor: ReportDescriptor,
    html: str,
    messages: Sequence[str] = ()
) -> ReportDocument:
    """
    Assemble a ReportDocument from descriptor metadata and converted markup.

    Pure: the same descriptor and markup always produce an identical
    document.

    Args:
        descriptor: Report metadata
        html: Converted markup
        messages: Conversion diagnostics, forwarded unchanged

    Returns:
        ReportDocument with extracted issues

    Example:
        >>> doc = build_report_document(descriptor, '<h2>Low Risk</h2>')
        >>> doc.issues
        []
    """
    slug = safe_slug(descriptor.slug)
    version = safe_slug(descriptor.version)

    return ReportDocument(
        slug=slug,
        version=version,
        title=descriptor.title or f"{descriptor.slug} {descriptor.version}",
        date=descriptor.date,
        notes=descriptor.notes,
        docx=descriptor.docx,
        html_body=html,
        issues=extract_issues_from_html(html),
        conversion_messages=list(messages)
    )


def resolve_docx_path(descriptor: ReportDescriptor, public_dir: Union[str, Path]) -> Optional[Path]:
    """
    Locate a descriptor's DOCX under the public directory.

    Returns:
        Path to an existing DOCX file, or None if unset or missing
    """
    relative = descriptor.docx_relative_path
    if not relative:
        return None

    docx_path = Path(public_dir) / relative
    return docx_path if docx_path.is_file() else None


class ReportBuildPipeline:
    """
    Orchestrator for building report documents and the catalog.

    Example:
        # Step 1: User chooses where outputs go
        storage = ReportStorageService('src/generated')

        # Step 2: Initialize pipeline with storage
        pipeline = ReportBuildPipeline(storage_service=storage)

        # Step 3: Build everything under content/reports
        stats = pipeline.build()
        print(f"Built {stats['reports']} reports, "
              f"{stats['issues']} issues, "
              f"{stats['skipped']} skipped")
    """

    def __init__(
        self,
        storage_service: ReportStorageService,
        converter: Optional[DocxConverter] = None,
        url_prefix: Optional[str] = None
    ):
        """
        Initialize pipeline with injected storage service.

        Args:
            storage_service: Output storage
            converter: DOCX converter (default: DocxConverter with configured style map)
            url_prefix: Catalog URL prefix (default: from config)
        """
        self._storage = storage_service
        self._converter = converter or DocxConverter()
        self._url_prefix = url_prefix if url_prefix is not None else get_app_config().url_prefix
        self.catalog: List[IndexEntry] = []
        logger.info("ReportBuildPipeline initialized with injected ReportStorageService")

    def build(
        self,
        content_dir: Optional[Union[str, Path]] = None,
        public_dir: Optional[Union[str, Path]] = None
    ) -> Dict[str, int]:
        """
        Complete workflow: load descriptors → convert → extract → write.

        Args:
            content_dir: Descriptor directory (default: from config)
            public_dir: Directory DOCX paths are relative to (default: from config)

        Returns:
            Statistics dictionary:
            {
                'reports': 3,    # Report versions written
                'issues': 42,    # Total issues extracted
                'skipped': 1     # Descriptors without an existing DOCX
            }

        Raises:
            pydantic.ValidationError: If a descriptor is invalid
            Exception: Conversion and write failures propagate unchanged
        """
        public_dir = Path(public_dir) if public_dir else get_app_config().public_path
        descriptors = DescriptorService(content_dir).load_all()

        stats = self._init_statistics()
        skipped: List[Dict[str, str]] = []
        pending: List[Tuple[ReportDescriptor, Path]] = []

        for filename, descriptor in descriptors:
            docx_path = resolve_docx_path(descriptor, public_dir)
            if docx_path is None:
                expected = public_dir / (descriptor.docx_relative_path or '')
                logger.warning(f"Missing DOCX for {filename}. Expected: {expected}")
                skipped.append(self._skipped_record(filename, descriptor, expected))
                continue
            pending.append((descriptor, docx_path))

        documents = self._process_documents(pending)
        self.catalog = self._write_outputs(documents, stats)

        stats['skipped'] = len(skipped)
        self._storage.save_skipped_csv(skipped)

        logger.info(
            f"Generated {stats['reports']} report versions "
            f"({stats['issues']} issues, {stats['skipped']} skipped) "
            f"into {self._storage.out_dir}"
        )
        return stats

    def process_document(self, descriptor: ReportDescriptor, docx_path: Path) -> ReportDocument:
        """Convert one DOCX and extract its issues."""
        try:
            conversion = self._converter.convert(docx_path)
        except Exception as e:
            logger.error(f"Conversion failed for {docx_path}: {e}", exc_info=True)
            raise

        document = build_report_document(descriptor, conversion.html, conversion.messages)
        logger.info(
            f"Processed {document.slug}/{document.version}: {len(document.issues)} issues"
        )
        return document

    def _process_documents(
        self,
        pending: List[Tuple[ReportDescriptor, Path]]
    ) -> List[ReportDocument]:
        """Process documents sequentially, preserving descriptor order."""
        return [self.process_document(descriptor, path) for descriptor, path in pending]

    def _write_outputs(
        self,
        documents: List[ReportDocument],
        stats: Dict[str, int]
    ) -> List[IndexEntry]:
        """Write every document, then fold entries into the ordered catalog."""
        entries = []
        for document in documents:
            self._storage.write_report(document)
            entries.append(build_index_entry(
                document,
                url=build_report_url(document.slug, document.version, self._url_prefix)
            ))
            stats['reports'] += 1
            stats['issues'] += len(document.issues)

        catalog = build_catalog(entries)
        self._storage.write_index(catalog)
        return catalog

    @staticmethod
    def _skipped_record(filename: str, descriptor: ReportDescriptor, expected: Path) -> Dict[str, str]:
        return {
            'descriptor': filename,
            'slug': descriptor.slug,
            'version': descriptor.version,
            'docx': descriptor.docx or '',
            'expected_path': str(expected),
            'reason': 'missing_docx' if descriptor.docx else 'no_docx_configured'
        }

    def _init_statistics(self) -> Dict[str, int]:
        """Initialize statistics dictionary."""
        return {
            'reports': 0,
            'issues': 0,
            'skipped': 0
        }
