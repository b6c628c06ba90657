"""
TypeValidator - validates values against a TypeTag.
"""

from typing import Any

from formrules.core.models import RuleSpec
from formrules.core.predicates import resolve_type_predicate

from .base_validator import BaseValidator, CheckResult


class TypeValidator(BaseValidator):
    """
    Validates that a field matches the type named by ``rule.type``.

    Supported tags: string, number, boolean, function, float, integer, array,
    object, date, regexp. An unsupported tag is logged and ignored.
    """

    def check(self, rule: RuleSpec, value: Any, field_name: str) -> CheckResult:
        type_tag = rule.type
        if type_tag is None:
            return CheckResult.ok()

        predicate = resolve_type_predicate(type_tag)
        if predicate is None:
            self.warn_ignored(field_name, type_tag, "is unsupported")
            return CheckResult.ok()

        return CheckResult.of(predicate(value))

    @property
    def rule_type(self) -> str:
        return "type"
