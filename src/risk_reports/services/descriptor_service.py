"""
Report descriptor loading.

Each report version is described by one JSON file in the content
directory. Descriptors are loaded in sorted filename order so repeated
runs see the same sequence.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from risk_reports.config import get_app_config
from risk_reports.models.report import ReportDescriptor

logger = logging.getLogger(__name__)


class DescriptorService:
    """
    Load ReportDescriptor objects from <content_dir>/*.json.

    Usage:
        >>> service = DescriptorService('content/reports')
        >>> for filename, descriptor in service.load_all():
        ...     print(filename, descriptor.slug)
    """

    def __init__(self, content_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            content_dir: Descriptor directory (overrides config if provided)
        """
        self.content_dir = Path(content_dir) if content_dir else get_app_config().content_path

    def list_descriptor_files(self) -> List[Path]:
        """
        List descriptor JSON files.

        Raises:
            FileNotFoundError: If the content directory does not exist
        """
        if not self.content_dir.is_dir():
            raise FileNotFoundError(
                f"Content directory not found: {self.content_dir}. "
                f"Set CONTENT_DIR or create the directory."
            )
        return sorted(p for p in self.content_dir.iterdir() if p.suffix == '.json')

    def load(self, path: Union[str, Path]) -> ReportDescriptor:
        """
        Load and validate one descriptor file.

        Raises:
            pydantic.ValidationError: If the JSON is malformed or invalid
        """
        path = Path(path)
        return ReportDescriptor.model_validate_json(path.read_text(encoding='utf-8'))

    def load_all(self) -> List[Tuple[str, ReportDescriptor]]:
        """
        Load every descriptor in the content directory.

        Returns:
            List of (filename, descriptor) pairs in sorted filename order
        """
        descriptors = []
        for path in self.list_descriptor_files():
            try:
                descriptors.append((path.name, self.load(path)))
            except Exception as e:
                logger.error(f"Invalid report descriptor {path}: {e}", exc_info=True)
                raise

        logger.info(f"Loaded {len(descriptors)} report descriptor(s) from {self.content_dir}")
        return descriptors
