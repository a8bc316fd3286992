"""
DOCX → HTML conversion using mammoth.

The converter is an external collaborator of the extraction engine: it
produces the markup string and forwards mammoth's diagnostic messages
unchanged. Conversion errors are not caught here.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import mammoth

from risk_reports.config import get_style_map
from risk_reports.models.report import ConversionResult

logger = logging.getLogger(__name__)


class DocxConverter:
    """
    Convert report DOCX files to HTML with a heading style map.

    Usage:
        >>> converter = DocxConverter()
        >>> result = converter.convert('public/reports/acme-v1.docx')
        >>> result.html[:4]
        '<h2>'

    Args:
        style_map: mammoth style map lines. Defaults to config/style_map.yaml.
    """

    def __init__(self, style_map: Optional[List[str]] = None):
        self.style_map = list(style_map) if style_map is not None else get_style_map()

    def convert(self, docx_path: Union[str, Path]) -> ConversionResult:
        """
        Convert one DOCX file.

        Args:
            docx_path: Path to the DOCX file

        Returns:
            ConversionResult with html and formatted diagnostic messages

        Raises:
            FileNotFoundError: If the file does not exist
        """
        docx_path = Path(docx_path)

        with open(docx_path, 'rb') as docx_file:
            result = mammoth.convert_to_html(
                docx_file,
                style_map='\n'.join(self.style_map)
            )

        messages = [self._format_message(m) for m in result.messages]
        if messages:
            logger.info(f"Converted {docx_path.name} with {len(messages)} message(s)")
        else:
            logger.debug(f"Converted {docx_path.name}")

        return ConversionResult(html=result.value, messages=messages)

    @staticmethod
    def _format_message(message) -> str:
        """Render a mammoth message as '<type>: <text>'."""
        message_type = getattr(message, 'type', None)
        text = getattr(message, 'message', str(message))
        return f"{message_type}: {text}" if message_type else text
