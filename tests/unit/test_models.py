"""
Unit tests for Pydantic data models.

Tests RuleSpec immutability and rendering, and ValidationReport consistency.
"""

import re

import pytest
from pydantic import ValidationError

from formrules.core.models import RuleSpec, TypeTag, ValidationReport


def starts_with_a(value):
    return str(value).startswith("a")


class TestRuleSpec:
    """Tests for RuleSpec model"""

    def test_defaults_are_unset(self):
        rule = RuleSpec()
        assert rule.to_dict() == {}
        assert rule.has_constraints() is False

    def test_accepts_malformed_constraints(self):
        """Constraint content is checked lazily, not at construction"""
        rule = RuleSpec(type="decimal", pattern="^a", maxlength=-3, enum="abc")
        assert rule.type == "decimal"
        assert rule.maxlength == -3
        assert rule.has_constraints() is True

    def test_type_name_resolved_to_tag(self):
        assert RuleSpec(type="integer").type is TypeTag.INTEGER
        assert RuleSpec(type=TypeTag.DATE).type is TypeTag.DATE
        assert RuleSpec(type=["string"]).type == ["string"]

    def test_message_alone_is_not_a_constraint(self):
        assert RuleSpec(message="Name is required").has_constraints() is False

    def test_unknown_keys_are_kept(self):
        rule = RuleSpec.model_validate({"required": True, "trigger": "blur"})
        assert rule.to_dict() == {"required": True, "trigger": "blur"}
        assert rule.has_constraints() is True

    def test_frozen(self):
        rule = RuleSpec(required=True)
        with pytest.raises(ValidationError):
            rule.required = False

    def test_with_message_returns_copy(self):
        rule = RuleSpec(required=True, message="static")
        overridden = rule.with_message("dynamic")

        assert overridden.message == "dynamic"
        assert overridden.required is True
        assert rule.message == "static"

    def test_describe_is_json_safe(self):
        rule = RuleSpec(
            type=TypeTag.INTEGER,
            pattern=re.compile(r"^\d+$"),
            validator=starts_with_a,
            enum=("a", 1),
            message="bad",
        )

        assert rule.describe() == {
            "type": "integer",
            "pattern": r"^\d+$",
            "validator": "starts_with_a",
            "enum": ["a", 1],
            "message": "bad",
        }


class TestTypeTag:
    """Tests for TypeTag enum"""

    def test_closed_set(self):
        assert {tag.value for tag in TypeTag} == {
            "string", "number", "boolean", "function", "float",
            "integer", "array", "object", "date", "regexp",
        }

    def test_compares_equal_to_plain_strings(self):
        assert TypeTag("integer") is TypeTag.INTEGER
        assert TypeTag.INTEGER == "integer"

    def test_unknown_tag(self):
        with pytest.raises(ValueError):
            TypeTag("decimal")


class TestValidationReport:
    """Tests for ValidationReport model"""

    def test_passed_with_failures_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ValidationReport(passed=True, failed_fields=["name"])
        assert "failed_fields" in str(exc_info.value)

    def test_from_errors(self):
        report = ValidationReport.from_errors(
            ["name", "phone"],
            {"phone": RuleSpec(pattern=re.compile(r"^\d{11}$"), message="bad format")},
        )

        assert report.passed is False
        assert report.failed_fields == ["phone"]
        assert report.errors == {"phone": {"pattern": r"^\d{11}$", "message": "bad format"}}

    def test_from_no_errors(self):
        report = ValidationReport.from_errors(["name"], {})
        assert report.passed is True
        assert report.errors == {}

    def test_serializes_to_json(self):
        report = ValidationReport.from_errors(["name"], {"name": RuleSpec(required=True)})
        assert '"failed_fields":["name"]' in report.model_dump_json()
