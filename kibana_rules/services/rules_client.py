"""Kibana detection engine rules client."""

import logging
from http import HTTPStatus
from typing import Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from kibana_rules.errors import APIError, DecodeError, TransportError
from kibana_rules.models.rules import RuleIDOnly
from kibana_rules.models.signals import SearchResult

log = logging.getLogger(__name__)

INDEX_PATH = "api/detection_engine/index"
BULK_CREATE_PATH = "api/detection_engine/rules/_bulk_create"
BULK_DELETE_PATH = "api/detection_engine/rules/_bulk_delete"
SIGNALS_SEARCH_PATH = "api/detection_engine/signals/search"
SIGNALS_STATUS_PATH = "api/detection_engine/signals/status"

OPEN_SIGNALS_QUERY = b'{"query":{"match":{"signal.status":"open"}}}'
CLOSE_SIGNALS_BODY = b'{"query":{"match":{"signal.status":"open"}},"status":"closed"}'

_rule_ids = TypeAdapter(list[RuleIDOnly])


class Transport(Protocol):
    """Anything that can POST/DELETE a raw body and return (status, body)."""

    def post(self, path: str, body: bytes | None = None) -> tuple[int, bytes]: ...

    def delete(self, path: str, body: bytes | None = None) -> tuple[int, bytes]: ...


class RulesClient:
    """Manages detection rules and their signals through the Kibana API.

    Every call is a single attempt. Failures surface as ``TransportError``,
    ``APIError`` or ``DecodeError``.
    """

    def __init__(self, transport: Transport):
        self.transport = transport

    def _call(self, method: str, path: str, body: bytes | None, step: str) -> bytes:
        """Send one request; return the body of a 200 response or raise."""
        send = self.transport.post if method == "POST" else self.transport.delete
        try:
            status_code, resp_body = send(path, body)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, OSError) as e:
            log.warning("%s: %s", step, e)
            raise TransportError(f"{step}: {e}") from e

        if status_code != HTTPStatus.OK:
            log.warning("%s: API status code %d", step, status_code)
            raise APIError(step, status_code, resp_body)
        return resp_body

    def ensure_detection_index(self) -> None:
        """Create the signals index; repeated calls are harmless."""
        self._call("POST", INDEX_PATH, None, "could not create detection index")

    def rules_bulk_create(self, rules: bytes) -> list[RuleIDOnly]:
        """Create rules from a JSON array of rule objects.

        The detection index is ensured first; if that fails the bulk create
        request is never sent. Empty input is a no-op.
        """
        if not rules:
            return []

        self.ensure_detection_index()
        resp_body = self._call("POST", BULK_CREATE_PATH, rules, "could not bulk create rules")
        try:
            created = _rule_ids.validate_json(resp_body)
        except ValidationError as e:
            raise DecodeError(f"could not unmarshal bulk create response: {e}") from e

        log.info("Bulk created %d rules", len(created))
        return created

    def rules_bulk_delete(self, rules: list[RuleIDOnly]) -> None:
        """Delete rules by rule_id. Empty input is a no-op."""
        if not rules:
            return

        body = _rule_ids.dump_json(list(rules))
        self._call("DELETE", BULK_DELETE_PATH, body, "could not bulk delete rules")
        log.info("Bulk deleted %d rules", len(rules))

    def rules_get_hits(self) -> SearchResult:
        """Search for open signals raised by any detection rule."""
        resp_body = self._call("POST", SIGNALS_SEARCH_PATH, OPEN_SIGNALS_QUERY, "could not search for hits")
        try:
            return SearchResult.model_validate_json(resp_body)
        except ValidationError as e:
            raise DecodeError(f"could not unmarshal search results: {e}") from e

    def rules_close_signals(self) -> None:
        """Close every open signal."""
        self._call("POST", SIGNALS_STATUS_PATH, CLOSE_SIGNALS_BODY, "could not close signals")
