"""
Length validators - bound the len() of a value from above or below.
"""

from abc import abstractmethod
from typing import Any

from formrules.core.models import RuleSpec
from formrules.core.predicates import is_integer

from .base_validator import BaseValidator, CheckResult


class _LengthValidator(BaseValidator):
    """
    Shared logic for maxlength and minlength.

    The bound must be a positive integer, otherwise it is logged and ignored.
    A value without a length (a number, say) fails the check.
    """

    def check(self, rule: RuleSpec, value: Any, field_name: str) -> CheckResult:
        bound = getattr(rule, self.rule_type)
        if bound is None:
            return CheckResult.ok()

        if not is_integer(bound) or bound <= 0:
            self.warn_ignored(field_name, bound, "is not a positive integer")
            return CheckResult.ok()

        try:
            length = len(value)
        except TypeError:
            return CheckResult.fail()

        return CheckResult.of(self.within(length, int(bound)))

    @abstractmethod
    def within(self, length: int, bound: int) -> bool:
        """Return True when length satisfies bound."""
        pass


class MaxLengthValidator(_LengthValidator):
    """Fails when ``len(value) > rule.maxlength``."""

    def within(self, length: int, bound: int) -> bool:
        return length <= bound

    @property
    def rule_type(self) -> str:
        return "maxlength"


class MinLengthValidator(_LengthValidator):
    """Fails when ``len(value) < rule.minlength``."""

    def within(self, length: int, bound: int) -> bool:
        return length >= bound

    @property
    def rule_type(self) -> str:
        return "minlength"
