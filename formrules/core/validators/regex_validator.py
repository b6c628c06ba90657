"""
RegexValidator - validates field values against a compiled regular expression.
"""

from typing import Any

from formrules.core.models import RuleSpec
from formrules.core.predicates import is_regexp

from .base_validator import BaseValidator, CheckResult


class RegexValidator(BaseValidator):
    """
    Validates that the text of a value contains a match for ``rule.pattern``.

    Matching uses ``search``; anchor the pattern to require a full match.
    Non-string values are matched on ``str(value)``.
    """

    def check(self, rule: RuleSpec, value: Any, field_name: str) -> CheckResult:
        pattern = rule.pattern
        if pattern is None:
            return CheckResult.ok()

        if not is_regexp(pattern):
            self.warn_ignored(field_name, pattern, "is not a compiled regular expression")
            return CheckResult.ok()

        value_str = value if isinstance(value, str) else str(value)
        return CheckResult.of(pattern.search(value_str) is not None)

    @property
    def rule_type(self) -> str:
        return "pattern"
