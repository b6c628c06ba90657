"""
Exception types raised by formrules.

ConfigError signals misuse by the calling code and is raised immediately.
ValidationFailure subclasses carry data-dependent outcomes and are only ever
raised from the awaitables returned by FormValidator.
"""

from typing import Any


class ConfigError(ValueError):
    """Raised when rules, options or call arguments have the wrong shape."""


class ValidationFailure(Exception):
    """Base class for validation outcomes carrying structured failure data."""


class FieldValidationError(ValidationFailure):
    """
    A single field failed one of its rules.

    Attributes:
        field: Name of the failing field
        rule: The failing rule, with its message resolved
    """

    def __init__(self, field: str, rule: Any):
        self.field = field
        self.rule = rule
        super().__init__(f"Field '{field}' failed validation: {_render(rule.message)}")

    @property
    def message(self) -> Any:
        return self.rule.message


class FormValidationError(ValidationFailure):
    """
    One or more fields failed validation.

    Attributes:
        errors: Mapping of failing field name to its failing rule
    """

    def __init__(self, errors: dict[str, Any]):
        self.errors = errors
        super().__init__(
            f"{len(errors)} field(s) failed validation: {', '.join(sorted(errors))}"
        )

    @property
    def messages(self) -> dict[str, Any]:
        return {field: rule.message for field, rule in self.errors.items()}


def _render(message: Any) -> str:
    if message is None:
        return "no message"
    if callable(message):
        return getattr(message, "__qualname__", repr(message))
    return str(message)
