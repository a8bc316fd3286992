"""
Pydantic models for report descriptors, conversion output and the
per-version report document written by the build pipeline.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from risk_reports.models.issue import Issue
from risk_reports.validators import is_iso_date, validate_non_empty

logger = logging.getLogger(__name__)


class ReportDescriptor(BaseModel):
    """
    Report metadata authored as content/reports/<name>.json.

    Example:
        >>> descriptor = ReportDescriptor.model_validate_json(
        ...     '{"slug": "Acme Audit", "version": "v1", '
        ...     '"date": "2024-01-01", "docx": "/docs/acme-v1.docx"}'
        ... )
        >>> descriptor.docx_relative_path
        'docs/acme-v1.docx'
    """

    slug: str = Field(..., description="Report family identifier (slugified on output)")
    version: str = Field(..., description="Report version label (slugified on output)")
    title: Optional[str] = Field(default=None, description="Display title")
    date: Optional[str] = Field(
        default=None,
        description="Publication date, kept as authored; ISO dates order the catalog correctly",
        examples=["2024-01-31"]
    )
    notes: str = Field(default="", description="Free-form notes")
    docx: Optional[str] = Field(
        default=None,
        description="DOCX path relative to the public directory",
        examples=["/reports/acme-v1.docx"]
    )

    model_config = ConfigDict(extra='ignore', frozen=True)

    @field_validator('slug', 'version', mode='before')
    @classmethod
    def validate_identifiers(cls, v) -> str:
        return validate_non_empty(v)

    @field_validator('date')
    @classmethod
    def warn_non_iso_date(cls, v: Optional[str]) -> Optional[str]:
        # Kept as authored
        if v and not is_iso_date(v):
            logger.warning(f"Date '{v}' is not ISO formatted (YYYY-MM-DD); catalog order may be off")
        return v

    @field_validator('notes', mode='before')
    @classmethod
    def default_missing_notes(cls, v):
        return v or ""

    @property
    def docx_relative_path(self) -> Optional[str]:
        """DOCX path with any leading '/' removed, or None when not set."""
        if not self.docx:
            return None
        return self.docx[1:] if self.docx.startswith('/') else self.docx


class ConversionResult(BaseModel):
    """Markup and diagnostic messages produced by the DOCX converter."""

    html: str = ""
    messages: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ReportDocument(BaseModel):
    """
    Processed report version: metadata, original markup, extracted issues
    and conversion diagnostics forwarded unchanged.
    """

    slug: str
    version: str
    title: str
    date: Optional[str] = None
    notes: str = ""
    docx: Optional[str] = None
    html_body: str = Field(default="", description="Markup the issues were extracted from")
    issues: List[Issue] = Field(default_factory=list)
    conversion_messages: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def __repr__(self) -> str:
        return (
            f"ReportDocument(slug='{self.slug}', "
            f"version='{self.version}', "
            f"date='{self.date}', "
            f"issues={len(self.issues)})"
        )
