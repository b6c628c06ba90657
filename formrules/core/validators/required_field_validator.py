"""
RequiredFieldValidator - rejects empty values when a rule is marked required.
"""

from typing import Any

from formrules.core.models import RuleSpec
from formrules.core.predicates import is_empty

from .base_validator import BaseValidator, CheckResult


class RequiredFieldValidator(BaseValidator):
    """
    Fails when ``rule.required`` is truthy and the value is "" or None.

    This is the only check that runs on empty values.
    """

    skip_empty = False

    def check(self, rule: RuleSpec, value: Any, field_name: str) -> CheckResult:
        if rule.required and is_empty(value):
            return CheckResult.fail()
        return CheckResult.ok()

    @property
    def rule_type(self) -> str:
        return "required"
