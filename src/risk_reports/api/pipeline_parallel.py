"""
Parallel pipeline for risk report builds.

Converts and extracts report documents in a ProcessPoolExecutor; DOCX
conversion and markup parsing are CPU-bound and independent per document.

Design:
- Workers receive plain, picklable arguments and build their own converter
- No shared state between processes (results come back as return values)
- Results are collected in descriptor order, then written and folded into
  the catalog sequentially, so the stable date ordering is well-defined

Usage:
    storage = ReportStorageService()
    pipeline = ParallelReportBuildPipeline(storage_service=storage, max_workers=8)
    stats = pipeline.build()
"""

from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple
import logging

from risk_reports.api.pipeline import ReportBuildPipeline, build_report_document
from risk_reports.config import get_app_config
from risk_reports.models.report import ReportDescriptor, ReportDocument
from risk_reports.services.docx_converter import DocxConverter
from risk_reports.services.storage_service import ReportStorageService

logger = logging.getLogger(__name__)


def _build_report_worker(
    descriptor: ReportDescriptor,
    docx_path: str,
    style_map: List[str]
) -> ReportDocument:
    """
    Worker function for processing a single report in a child process.

    Args:
        descriptor: Report metadata
        docx_path: Path to the DOCX file
        style_map: mammoth style map lines

    Returns:
        Processed ReportDocument

    Raises:
        Exception: Conversion failures propagate to the parent via the future
    """
    converter = DocxConverter(style_map=style_map)
    conversion = converter.convert(docx_path)
    return build_report_document(descriptor, conversion.html, conversion.messages)


class ParallelReportBuildPipeline(ReportBuildPipeline):
    """
    Parallel version of ReportBuildPipeline.

    Key Differences from ReportBuildPipeline:
    - Conversion and extraction run in worker processes
    - Output writing and catalog aggregation stay in the parent process

    Example:
        storage = ReportStorageService('src/generated')
        pipeline = ParallelReportBuildPipeline(storage_service=storage, max_workers=4)
        stats = pipeline.build()
    """

    def __init__(
        self,
        storage_service: ReportStorageService,
        converter: Optional[DocxConverter] = None,
        url_prefix: Optional[str] = None,
        max_workers: Optional[int] = None
    ):
        """
        Args:
            storage_service: Output storage
            converter: DOCX converter whose style map is shipped to workers
            url_prefix: Catalog URL prefix (default: from config)
            max_workers: Worker processes (default: from config)
        """
        super().__init__(storage_service, converter=converter, url_prefix=url_prefix)

        max_workers = max_workers if max_workers is not None else get_app_config().max_workers
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers

    def _process_documents(
        self,
        pending: List[Tuple[ReportDescriptor, Path]]
    ) -> List[ReportDocument]:
        """Map documents over worker processes, preserving descriptor order."""
        if not pending:
            return []

        logger.info(
            f"Processing {len(pending)} report(s) with {self.max_workers} workers"
        )

        style_map = list(self._converter.style_map)
        with ProcessPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(_build_report_worker, descriptor, str(path), style_map)
                for descriptor, path in pending
            ]

            documents = []
            for (descriptor, path), future in zip(pending, futures):
                try:
                    document = future.result()
                except Exception as e:
                    logger.error(
                        f"Worker failed to process {path} ({descriptor.slug} {descriptor.version}): {e}",
                        exc_info=True
                    )
                    raise
                logger.info(
                    f"Processed {document.slug}/{document.version}: {len(document.issues)} issues"
                )
                documents.append(document)

        return documents
