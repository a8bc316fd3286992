"""
File storage service for generated report outputs.

Writes:
- <out_dir>/<slug>/<version>.json  one ReportDocument per report version
- <out_dir>/index.json             the catalog (list of IndexEntry)
- <out_dir>/skipped/skipped_reports.csv  descriptors skipped for missing DOCX

Write failures propagate to the caller.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd
from pydantic import TypeAdapter

from risk_reports.config import get_app_config
from risk_reports.models.index import IndexEntry
from risk_reports.models.report import ReportDocument

logger = logging.getLogger(__name__)

_catalog_adapter = TypeAdapter(List[IndexEntry])


class ReportStorageService:
    """
    Persist report documents and the catalog as JSON files.

    Usage:
        >>> storage = ReportStorageService('src/generated')
        >>> storage.write_report(document)
        PosixPath('src/generated/acme-audit/v1.json')
        >>> storage.write_index(catalog)
        PosixPath('src/generated/index.json')
    """

    INDEX_FILENAME = 'index.json'
    SKIPPED_DIRNAME = 'skipped'
    SKIPPED_FILENAME = 'skipped_reports.csv'

    def __init__(self, out_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            out_dir: Output directory (overrides config if provided)
        """
        self.out_dir = Path(out_dir) if out_dir else get_app_config().out_path

    def report_path(self, slug: str, version: str) -> Path:
        return self.out_dir / slug / f"{version}.json"

    @property
    def index_path(self) -> Path:
        return self.out_dir / self.INDEX_FILENAME

    def write_report(self, document: ReportDocument) -> Path:
        """
        Write one report document as camelCase JSON.

        Returns:
            Path of the written file
        """
        path = self.report_path(document.slug, document.version)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            document.model_dump_json(by_alias=True, indent=2),
            encoding='utf-8'
        )
        logger.debug(f"Wrote {path} ({len(document.issues)} issues)")
        return path

    def write_index(self, catalog: List[IndexEntry]) -> Path:
        """
        Write the catalog to index.json, preserving its order.

        Returns:
            Path of the written file
        """
        self.out_dir.mkdir(parents=True, exist_ok=True)
        self.index_path.write_bytes(
            _catalog_adapter.dump_json(catalog, by_alias=True, indent=2)
        )
        logger.debug(f"Wrote {self.index_path} ({len(catalog)} entries)")
        return self.index_path

    def read_index(self) -> List[IndexEntry]:
        """Load a previously written catalog."""
        return _catalog_adapter.validate_json(self.index_path.read_bytes())

    def save_skipped_csv(self, skipped: List[Dict[str, str]]) -> Optional[Path]:
        """
        Save skipped descriptors to CSV for follow-up.

        Args:
            skipped: List of dictionaries (descriptor, slug, version, docx, reason)

        Returns:
            Path of the CSV, or None when nothing was skipped (any CSV
            left by an earlier run is removed)
        """
        skipped_dir = self.out_dir / self.SKIPPED_DIRNAME
        csv_path = skipped_dir / self.SKIPPED_FILENAME

        if not skipped:
            csv_path.unlink(missing_ok=True)
            return None

        skipped_dir.mkdir(parents=True, exist_ok=True)
        df = pd.DataFrame(skipped)
        df.to_csv(csv_path, index=False, encoding='utf-8')

        logger.info(f"Saved {len(skipped)} skipped report(s) to {csv_path}")
        return csv_path
