"""
Base interface for the checks that make up a field validation chain.

Each check evaluates one rule against one field value and reports a
CheckResult, so the chain can be reordered or extended without changing the
loop that drives it.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable

from formrules.core.models import RuleSpec
from formrules.core.predicates import is_empty

logger = logging.getLogger(__name__)


class RuleViolation(Exception):
    """
    Raised by custom validators to fail a rule with a specific message.

    The message replaces the rule's own message in the reported failure.
    """

    def __init__(self, message: str | None = None):
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check: a pass, or a failure with an optional overriding message."""

    passed: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> "CheckResult":
        return cls(True)

    @classmethod
    def fail(cls, message: str | None = None) -> "CheckResult":
        return cls(False, message)

    @classmethod
    def of(cls, passed: bool) -> "CheckResult":
        return cls(bool(passed))


class BaseValidator(ABC):
    """
    Abstract base class for chain checks.

    Checks hold no state; one instance serves every rule and field. Empty
    values ("" or None) pass every check except the required check, which
    sets ``skip_empty`` to False.
    """

    skip_empty = True

    def evaluate(
        self, rule: RuleSpec, value: Any, field_name: str
    ) -> CheckResult | Awaitable[CheckResult]:
        """
        Run this check unless the value is empty and the check skips empties.

        Args:
            rule: The rule being evaluated
            value: The (transformed) field value
            field_name: Name of the field, for diagnostics

        Returns:
            A CheckResult, or an awaitable resolving to one
        """
        if self.skip_empty and is_empty(value):
            return CheckResult.ok()
        return self.check(rule, value, field_name)

    @abstractmethod
    def check(
        self, rule: RuleSpec, value: Any, field_name: str
    ) -> CheckResult | Awaitable[CheckResult]:
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule key this check reads."""
        pass

    def warn_ignored(self, field_name: str, setting: Any, reason: str) -> None:
        """Log a malformed constraint; the check then passes."""
        logger.warning(
            f"There is a {self.rule_type} in field {field_name} that {reason}",
            extra={
                "field_name": field_name,
                "check": self.rule_type,
                "setting": repr(setting),
            },
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule_type={self.rule_type})"
