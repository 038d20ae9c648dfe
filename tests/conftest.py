"""
Global pytest fixtures for the Kibana rules client tests.
"""

import json
from pathlib import Path

import pytest

from kibana_rules.services.rules_client import RulesClient


# ============================================================
# Pytest Configuration Hooks
# ============================================================

def pytest_collection_modifyitems(config, items):
    """Apply markers based on test location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# ============================================================
# Fake Transport
# ============================================================

class FakeTransport:
    """Records every request and replays scripted responses in order.

    Each scripted response is either a (status_code, body) tuple or an
    exception instance, which is raised instead of answering.
    """

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls: list[tuple[str, str, bytes | None]] = []

    def _answer(self, method, path, body):
        self.calls.append((method, path, body))
        if not self.responses:
            raise AssertionError(f"Unexpected {method} {path}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, path, body=None):
        return self._answer("POST", path, body)

    def delete(self, path, body=None):
        return self._answer("DELETE", path, body)

    @property
    def paths(self) -> list[str]:
        return [path for _, path, _ in self.calls]


@pytest.fixture
def transport() -> FakeTransport:
    """Empty fake transport; tests append responses as needed."""
    return FakeTransport()


@pytest.fixture
def client(transport) -> RulesClient:
    """RulesClient bound to the fake transport."""
    return RulesClient(transport)


# ============================================================
# Rule Fixtures
# ============================================================

SAMPLE_RULES = [
    {
        "description": "Detects whoami execution",
        "name": "Whoami Execution",
        "risk_score": 21,
        "severity": "low",
        "type": "query",
        "query": "process.name:whoami",
        "interval": "5m",
        "from": "now-6m",
        "rule_id": "r1",
    },
    {
        "description": "Detects curl to the metadata service",
        "name": "IMDS Access",
        "risk_score": 73,
        "severity": "high",
        "type": "query",
        "query": "process.name:curl and process.args:169.254.169.254",
        "interval": "1m",
        "from": "now-2m",
        "rule_id": "r2",
    },
]


@pytest.fixture
def sample_rules() -> list[dict]:
    return [dict(r) for r in SAMPLE_RULES]


@pytest.fixture
def rules_json_file(tmp_path, sample_rules) -> Path:
    """Write the sample rules to a JSON file and return its path."""
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(sample_rules), encoding="utf-8")
    return path
