"""
EnumValidator - restricts a field to a list of allowed values.
"""

from typing import Any

from formrules.core.models import RuleSpec
from formrules.core.predicates import is_array, one_of

from .base_validator import BaseValidator, CheckResult


class EnumValidator(BaseValidator):
    """Fails unless the value is a member of ``rule.enum`` (strict equality)."""

    def check(self, rule: RuleSpec, value: Any, field_name: str) -> CheckResult:
        allowed = rule.enum
        if allowed is None:
            return CheckResult.ok()

        if not is_array(allowed):
            self.warn_ignored(field_name, allowed, "is not a list")
            return CheckResult.ok()

        return CheckResult.of(one_of(value, allowed))

    @property
    def rule_type(self) -> str:
        return "enum"
