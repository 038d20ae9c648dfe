"""Pydantic models for the detection_engine/signals/search response body.

Only the fields the client reads are modeled. Everything else the search API
returns is ignored.
"""

from pydantic import BaseModel, Field

from kibana_rules.models.rules import RuleNameOnly


class SearchResultSignal(BaseModel):
    """The ``signal`` object of a hit; references the rule that fired."""

    rule: RuleNameOnly


class SearchResultSource(BaseModel):
    signal: SearchResultSignal


class SearchResultInnerHit(BaseModel):
    """One matched signal document."""

    source: SearchResultSource = Field(alias="_source")

    model_config = {"populate_by_name": True}


class SearchResultHitsTotal(BaseModel):
    value: int


class SearchResultHits(BaseModel):
    total: SearchResultHitsTotal
    hits: list[SearchResultInnerHit] = Field(default_factory=list)


class SearchResult(BaseModel):
    """Decoded signals search result."""

    hits: SearchResultHits

    @property
    def total(self) -> int:
        return self.hits.total.value

    def rule_names(self) -> list[str]:
        """Names of the rules behind each hit, in hit order."""
        return [hit.source.signal.rule.name for hit in self.hits.hits]
