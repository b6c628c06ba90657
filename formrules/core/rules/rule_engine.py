"""
Rule engine for validating data mappings against per-field rules.

The engine normalizes the rule configuration once at construction, then
validates single fields or whole mappings. Field evaluations are independent
and run concurrently when validating a whole mapping.
"""

import asyncio
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping, Sequence

from pydantic import ValidationError

from formrules.core.exceptions import ConfigError, FieldValidationError, FormValidationError
from formrules.core.models import PREDICATE_KEYS, RuleSpec, ValidationReport
from formrules.core.predicates import is_array, is_object
from formrules.core.validators import BaseValidator

from .chain import DEFAULT_CHAIN, run_chain
from .messages import dispatch_message, resolve_message

logger = logging.getLogger(__name__)

Transform = Callable[[Any], Any]
MessageHook = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def normalize_rules(rules: Mapping[str, Any]) -> dict[str, tuple[RuleSpec, ...]]:
    """
    Convert a field -> rule(s) mapping into field -> ordered tuple of RuleSpec.

    Args:
        rules: Mapping of field name to a single rule or a list of rules. A
               rule is a RuleSpec or a mapping of RuleSpec keys.

    Returns:
        Dictionary of field name to its rules, in configuration order

    Raises:
        ConfigError: If rules is not a mapping
    """
    if not is_object(rules):
        raise ConfigError("rules must be a mapping of field name to rule(s)")

    normalized: dict[str, tuple[RuleSpec, ...]] = {}
    for field_name, item in rules.items():
        items = item if is_array(item) else [item]
        normalized[field_name] = tuple(_to_rule_spec(field_name, entry) for entry in items)
    return normalized


def _to_rule_spec(field_name: str, entry: Any) -> RuleSpec:
    if isinstance(entry, RuleSpec):
        spec = entry
    elif is_object(entry):
        spec = _validate_rule_mapping(field_name, entry)
    else:
        logger.warning(
            f"Rule for field {field_name} is not a mapping and is ignored",
            extra={"field_name": field_name, "setting": repr(entry)},
        )
        return RuleSpec()

    if not spec.has_constraints():
        logger.warning(
            f"Rule for field {field_name} has no recognized constraint and always passes",
            extra={"field_name": field_name},
        )
    return spec


def _validate_rule_mapping(field_name: str, entry: Mapping[Any, Any]) -> RuleSpec:
    # Rule keys are attribute names; anything else is dropped.
    rule = {}
    for key, value in entry.items():
        if isinstance(key, str):
            rule[key] = value
        else:
            logger.warning(
                f"Rule for field {field_name} has a non-string key {key!r} that is ignored",
                extra={"field_name": field_name, "setting": repr(key)},
            )

    try:
        return RuleSpec.model_validate(rule)
    except ValidationError as e:
        raise ConfigError(f"Invalid rule for field '{field_name}': {e}") from e


class FormValidator:
    """
    Validates data mappings against per-field rules.

    Each rule runs through the chain required -> type -> pattern -> maxlength
    -> minlength -> enum -> validator and stops at the first failing check.
    For a field, rules run in order and the first failing rule is reported.

    validate() and validate_field() check their ``data`` argument immediately
    and raise ConfigError if it is not a mapping; otherwise they return an
    awaitable that completes with None on success and raises a
    ValidationFailure on failure. The instance is read-only after
    construction, so concurrent calls are safe.

    Example:
        validator = FormValidator(
            {"name": {"required": True, "message": "Name is required"}},
            transform={"name": str.strip},
        )
        await validator.validate({"name": "Ada"})
    """

    def __init__(
        self,
        rules: Mapping[str, Any],
        transform: Mapping[str, Transform] | None = None,
        message_hook: MessageHook | None = None,
        chain: Sequence[BaseValidator] = DEFAULT_CHAIN,
    ):
        """
        Initialize the validator.

        Args:
            rules: Mapping of field name to a rule or list of rules
            transform: Optional mapping of field name to a function applied to
                       the raw value before it is validated
            message_hook: Optional callback receiving the resolved message of
                          every failure whose message is not callable
            chain: Checks applied to each rule, in order

        Raises:
            ConfigError: If an argument has the wrong shape
        """
        if transform is not None and not is_object(transform):
            raise ConfigError("transform must be a mapping of field name to callable")
        for field_name, func in (transform or {}).items():
            if not callable(func):
                raise ConfigError(f"transform for field '{field_name}' must be callable")
        if message_hook is not None and not callable(message_hook):
            raise ConfigError("message_hook must be callable")

        self._rules = MappingProxyType(normalize_rules(rules))
        self._transform = MappingProxyType(dict(transform or {}))
        self._message_hook = message_hook
        self._chain = tuple(chain)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "FormValidator":
        """
        Build a validator from a configuration mapping.

        Recognized keys: ``rules`` (required), ``transform`` and
        ``message_hook`` (``messageHook`` is accepted as well).
        """
        if not is_object(config):
            raise ConfigError("config must be a mapping")
        hook = config.get("message_hook", config.get("messageHook"))
        return cls(config.get("rules"), transform=config.get("transform"), message_hook=hook)

    @classmethod
    def from_yaml(
        cls,
        config_path: str | Path,
        transform: Mapping[str, Transform] | None = None,
        message_hook: MessageHook | None = None,
    ) -> "FormValidator":
        """Build a validator from a YAML rule file (see RuleConfigLoader)."""
        from .rule_config import RuleConfigLoader

        rules = RuleConfigLoader(config_path).load_rules()
        return cls(rules, transform=transform, message_hook=message_hook)

    @property
    def fields(self) -> list[str]:
        """Names of the fields that have rules configured."""
        return list(self._rules)

    def rules_for(self, field_name: str) -> tuple[RuleSpec, ...]:
        return self._rules.get(field_name, ())

    def validate_field(self, field_name: str, data: Mapping[str, Any]) -> Awaitable[None]:
        """
        Validate one field of ``data``.

        Fields without rules always pass.

        Raises:
            ConfigError: Immediately, if data is not a mapping
            FieldValidationError: From the returned awaitable, on failure
        """
        self._ensure_mapping(data)
        return self._validate_field(field_name, data)

    def validate(self, data: Mapping[str, Any]) -> Awaitable[None]:
        """
        Validate every configured field of ``data``.

        All fields are evaluated, even after one of them fails.

        Raises:
            ConfigError: Immediately, if data is not a mapping
            FormValidationError: From the returned awaitable, carrying the
                                 failing rule of every failing field
        """
        self._ensure_mapping(data)
        return self._validate_all(data)

    def check(self, data: Mapping[str, Any]) -> Awaitable[ValidationReport]:
        """Validate every configured field and return a report instead of raising."""
        self._ensure_mapping(data)
        return self._check(data)

    def check_field(self, field_name: str, data: Mapping[str, Any]) -> Awaitable[ValidationReport]:
        """Validate one field and return a report instead of raising."""
        self._ensure_mapping(data)
        return self._check_field(field_name, data)

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of configured rules.

        Returns:
            Dictionary with field and rule counts and counts per constraint
        """
        return {
            "total_fields": len(self._rules),
            "total_rules": sum(len(rules) for rules in self._rules.values()),
            "rules_by_constraint": self._count_by_constraint(),
        }

    async def _validate_field(self, field_name: str, data: Mapping[str, Any]) -> None:
        rules = self._rules.get(field_name)
        if rules is None:
            return

        transform = self._transform.get(field_name, _identity)
        for rule in rules:
            value = transform(data.get(field_name))
            result = await run_chain(rule, value, field_name, self._chain)
            if not result.passed:
                message = resolve_message(rule, result.message)
                dispatch_message(message, self._message_hook)
                raise FieldValidationError(field_name, rule.with_message(message))

    async def _validate_all(self, data: Mapping[str, Any]) -> None:
        outcomes = await asyncio.gather(
            *(self._validate_field(field_name, data) for field_name in self._rules),
            return_exceptions=True,
        )

        errors: dict[str, RuleSpec] = {}
        for outcome in outcomes:
            if isinstance(outcome, FieldValidationError):
                errors[outcome.field] = outcome.rule
            elif isinstance(outcome, BaseException):
                raise outcome

        if errors:
            raise FormValidationError(errors)

    async def _check(self, data: Mapping[str, Any]) -> ValidationReport:
        try:
            await self._validate_all(data)
        except FormValidationError as e:
            return ValidationReport.from_errors(self.fields, e.errors)
        return ValidationReport.from_errors(self.fields, {})

    async def _check_field(self, field_name: str, data: Mapping[str, Any]) -> ValidationReport:
        checked = [field_name] if field_name in self._rules else []
        try:
            await self._validate_field(field_name, data)
        except FieldValidationError as e:
            return ValidationReport.from_errors(checked, {e.field: e.rule})
        return ValidationReport.from_errors(checked, {})

    def _count_by_constraint(self) -> dict[str, int]:
        """Count rules by the constraint keys they set."""
        counts: dict[str, int] = {}
        for rules in self._rules.values():
            for rule in rules:
                for key in PREDICATE_KEYS:
                    if getattr(rule, key) is not None:
                        counts[key] = counts.get(key, 0) + 1
        return counts

    @staticmethod
    def _ensure_mapping(data: Any) -> None:
        if not is_object(data):
            raise ConfigError(f"data must be a mapping, got {type(data).__name__}")

    def __repr__(self) -> str:
        return f"FormValidator(fields={self.fields})"
