"""
Pydantic model for issues extracted from risk-finding tables.

One Issue per data row whose finding or recommendation cell is non-empty.
Ids are assigned per document ("issue-1", "issue-2", ...) by the extractor.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from risk_reports.models.risk import RiskLevel
from risk_reports.validators import validate_issue_id


class Issue(BaseModel):
    """
    One extracted row of a risk-finding table.

    Example:
        >>> issue = Issue(
        ...     id="issue-1",
        ...     risk_level=RiskLevel.HIGH,
        ...     section_title="High Risk Findings",
        ...     finding="Users lack MFA",
        ...     recommendation="Enable MFA",
        ...     raw_row=["Users lack MFA", "Enable MFA"]
        ... )
        >>> issue.model_dump(by_alias=True, mode='json')['riskLevel']
        'high'
    """

    id: str = Field(
        ...,
        description="Document-scoped identifier: issue-<n>",
        examples=["issue-1"]
    )

    risk_level: RiskLevel = Field(
        ...,
        description="Risk level classified from the enclosing heading"
    )

    section_title: str = Field(
        ...,
        description="Normalized text of the enclosing heading",
        examples=["High Risk Findings"]
    )

    finding: str = Field(
        default="",
        description="Cell from the 'finding' column (may be empty)"
    )

    recommendation: str = Field(
        default="",
        description="Cell from the 'recommendation'/'action' column (may be empty)"
    )

    raw_row: List[str] = Field(
        default_factory=list,
        description="All normalized cells of the source row, for audit"
    )

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator('id')
    @classmethod
    def validate_id_format(cls, v: str) -> str:
        return validate_issue_id(v)

    @model_validator(mode='after')
    def require_finding_or_recommendation(self) -> 'Issue':
        """An issue only exists when at least one target field has content."""
        if not self.finding and not self.recommendation:
            raise ValueError(
                f"Issue {self.id} must have a finding or a recommendation"
            )
        return self
