"""Pydantic models for detection rules."""

from pydantic import BaseModel, Field


class RuleIDOnly(BaseModel):
    """A detection rule reduced to its ``rule_id``."""

    rule_id: str = Field(description="Caller-assigned rule identifier")


class RuleNameOnly(BaseModel):
    """A detection rule reduced to its display name."""

    name: str


class DetectionRule(BaseModel):
    """A Kibana detection engine rule definition."""

    description: str
    name: str
    risk_score: int = Field(description="Risk score (0-100)")
    severity: str = Field(description="low, medium, high or critical")
    type: str = Field(description="Rule type (e.g., 'query')")
    query: str
    interval: str = Field(description="How often the rule runs (e.g., '5m')")
    from_: str = Field(alias="from", description="Start of the look-back window (e.g., 'now-6m')")
    rule_id: str

    model_config = {"populate_by_name": True}

    def id_only(self) -> RuleIDOnly:
        return RuleIDOnly(rule_id=self.rule_id)
