"""
Catalog entry model: one summary per processed report version.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IndexEntry(BaseModel):
    """
    Summary of one report version in the cross-document catalog.

    `counts` always holds the four named risk levels (high, medium, low,
    triggered); issues under 'other' headings only appear in issues_count.
    """

    slug: str
    version: str
    title: str
    date: Optional[str] = None
    url: str
    docx: Optional[str] = None
    issues_count: int = Field(..., ge=0)
    counts: Dict[str, int] = Field(default_factory=dict)

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
