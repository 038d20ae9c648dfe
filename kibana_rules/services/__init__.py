from kibana_rules.services.rule_loader import encode_rules, load_rules
from kibana_rules.services.rules_client import RulesClient, Transport
from kibana_rules.services.transport import HttpTransport

__all__ = ["RulesClient", "Transport", "HttpTransport", "load_rules", "encode_rules"]
