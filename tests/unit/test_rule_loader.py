"""
Unit tests for the rules file loader and bulk create encoding.
"""

import json

import pytest
import yaml
from pydantic import ValidationError

from kibana_rules.models.rules import DetectionRule, RuleIDOnly
from kibana_rules.services.rule_loader import encode_rules, load_rules


@pytest.mark.unit
class TestLoadRules:
    """Tests for loading rule files."""

    def test_load_json(self, rules_json_file):
        rules = load_rules(rules_json_file)

        assert [r.rule_id for r in rules] == ["r1", "r2"]
        assert rules[0].from_ == "now-6m"
        assert rules[1].risk_score == 73

    def test_load_yaml(self, tmp_path, sample_rules):
        path = tmp_path / "rules.yml"
        path.write_text(yaml.safe_dump(sample_rules), encoding="utf-8")

        rules = load_rules(path)

        assert [r.name for r in rules] == ["Whoami Execution", "IMDS Access"]

    def test_single_object(self, tmp_path, sample_rules):
        path = tmp_path / "rule.json"
        path.write_text(json.dumps(sample_rules[0]), encoding="utf-8")

        assert [r.rule_id for r in load_rules(path)] == ["r1"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.json")

    def test_not_a_list_of_objects(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text('["r1", "r2"]', encoding="utf-8")

        with pytest.raises(ValueError, match="expected a list of rule objects"):
            load_rules(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("- name: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="invalid YAML"):
            load_rules(path)

    def test_missing_required_field(self, tmp_path, sample_rules):
        del sample_rules[0]["query"]
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(sample_rules), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_rules(path)


@pytest.mark.unit
class TestEncodeRules:
    """Tests for the bulk create payload."""

    def test_uses_api_field_names(self, rules_json_file, sample_rules):
        payload = json.loads(encode_rules(load_rules(rules_json_file)))

        assert payload == sample_rules
        assert "from_" not in payload[0]

    def test_empty(self):
        assert encode_rules([]) == b"[]"


@pytest.mark.unit
class TestModels:
    """Tests for rule model projections."""

    def test_id_only(self, sample_rules):
        rule = DetectionRule(**sample_rules[0])
        assert rule.id_only() == RuleIDOnly(rule_id="r1")

    def test_from_by_python_name(self, sample_rules):
        fields = dict(sample_rules[0])
        fields["from_"] = fields.pop("from")

        rule = DetectionRule(**fields)

        assert rule.model_dump(by_alias=True)["from"] == "now-6m"
