"""Client for the Kibana detection engine rules and signals API."""

from kibana_rules.errors import APIError, DecodeError, KibanaError, TransportError
from kibana_rules.services.rules_client import RulesClient
from kibana_rules.services.transport import HttpTransport

__version__ = "0.1.0"

__all__ = [
    "RulesClient", "HttpTransport",
    "KibanaError", "TransportError", "APIError", "DecodeError",
]
