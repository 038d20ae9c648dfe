from kibana_rules.models.rules import DetectionRule, RuleIDOnly, RuleNameOnly
from kibana_rules.models.signals import (
    SearchResult,
    SearchResultHits,
    SearchResultHitsTotal,
    SearchResultInnerHit,
    SearchResultSignal,
    SearchResultSource,
)

__all__ = [
    "DetectionRule", "RuleIDOnly", "RuleNameOnly",
    "SearchResult", "SearchResultHits", "SearchResultHitsTotal",
    "SearchResultInnerHit", "SearchResultSignal", "SearchResultSource",
]
