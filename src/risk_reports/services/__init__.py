"""
Services layer for report conversion, descriptor loading and output storage.
"""

from .docx_converter import DocxConverter
from .descriptor_service import DescriptorService
from .storage_service import ReportStorageService

__all__ = [
    'DocxConverter',
    'DescriptorService',
    'ReportStorageService',
]
