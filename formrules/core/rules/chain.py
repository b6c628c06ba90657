"""
The field validation chain.

A chain is an ordered tuple of checks. Each rule is run through every check in
order and evaluation stops at the first failure.
"""

import inspect
import logging
from typing import Any, Sequence

from formrules.core.models import RuleSpec
from formrules.core.validators import (
    BaseValidator,
    CheckResult,
    CustomValidator,
    EnumValidator,
    MaxLengthValidator,
    MinLengthValidator,
    RegexValidator,
    RequiredFieldValidator,
    TypeValidator,
)

logger = logging.getLogger(__name__)

# Custom validators run last so they only see values that already satisfy
# every declarative constraint.
DEFAULT_CHAIN: tuple[BaseValidator, ...] = (
    RequiredFieldValidator(),
    TypeValidator(),
    RegexValidator(),
    MaxLengthValidator(),
    MinLengthValidator(),
    EnumValidator(),
    CustomValidator(),
)


async def run_chain(
    rule: RuleSpec,
    value: Any,
    field_name: str,
    chain: Sequence[BaseValidator] = DEFAULT_CHAIN,
) -> CheckResult:
    """
    Evaluate one rule against one value.

    Args:
        rule: The rule to evaluate
        value: The field value, already transformed
        field_name: Field name, for diagnostics
        chain: Checks to apply, in order

    Returns:
        The first failing CheckResult, or a passing one
    """
    for step in chain:
        result = step.evaluate(rule, value, field_name)
        if inspect.isawaitable(result):
            result = await result

        if not result.passed:
            logger.debug(
                f"Field {field_name} failed {step.rule_type} check",
                extra={"field_name": field_name, "check": step.rule_type},
            )
            return result

    return CheckResult.ok()
