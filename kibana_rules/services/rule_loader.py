"""Load detection rule definitions from JSON or YAML files."""

import json
from pathlib import Path

import yaml
from pydantic import TypeAdapter

from kibana_rules.models.rules import DetectionRule

_detection_rules = TypeAdapter(list[DetectionRule])


def load_rules(path: str | Path) -> list[DetectionRule]:
    """Read a rules file holding a list of rule objects (or a single object).

    Files ending in .yml/.yaml are parsed as YAML, anything else as JSON.
    """
    rules_path = Path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found: {rules_path}")

    text = rules_path.read_text(encoding="utf-8")
    if rules_path.suffix.lower() in {".yml", ".yaml"}:
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"{rules_path}: invalid YAML: {e}") from e
    else:
        raw = json.loads(text)

    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list) or not all(isinstance(r, dict) for r in raw):
        raise ValueError(f"{rules_path}: expected a list of rule objects")

    return _detection_rules.validate_python(raw)


def encode_rules(rules: list[DetectionRule]) -> bytes:
    """Serialize rules into the JSON array accepted by bulk create."""
    return _detection_rules.dump_json(list(rules), by_alias=True)
