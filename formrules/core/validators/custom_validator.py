"""
CustomValidator - validates using a caller-supplied function, sync or async.
"""

import inspect
from collections.abc import Mapping
from typing import Any

from formrules.core.models import RuleSpec

from .base_validator import BaseValidator, CheckResult


class CustomValidator(BaseValidator):
    """
    Validates using ``rule.validator``.

    The function receives the field value. Outcomes:
    - it returns an awaitable: the awaitable is awaited and the rule passes
      unless it raises
    - it returns a falsy value: the rule fails with the rule's own message
    - it raises (directly or from the awaitable): the rule fails, and a
      message carried by the exception overrides the rule's message

    Example:
        async def username_available(value):
            if await users.exists(value):
                raise RuleViolation("Username is taken")
    """

    async def check(self, rule: RuleSpec, value: Any, field_name: str) -> CheckResult:
        validator_func = rule.validator
        if validator_func is None:
            return CheckResult.ok()

        if not callable(validator_func):
            self.warn_ignored(field_name, validator_func, "is not callable")
            return CheckResult.ok()

        try:
            outcome = validator_func(value)
            if inspect.isawaitable(outcome):
                await outcome
            elif not outcome:
                return CheckResult.fail()
        except Exception as e:
            return CheckResult.fail(violation_message(e))

        return CheckResult.ok()

    @property
    def rule_type(self) -> str:
        return "validator"


def violation_message(error: Exception) -> str | None:
    """
    Extract an overriding message from an exception raised by a custom validator.

    Looks at a string ``message`` attribute first, then at the first argument
    when it is a string or a mapping with a string "message" entry.
    """
    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message

    if error.args:
        payload = error.args[0]
        if isinstance(payload, str):
            return payload
        if isinstance(payload, Mapping) and isinstance(payload.get("message"), str):
            return payload["message"]

    return None
