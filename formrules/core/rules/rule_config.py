"""
Rule configuration management.

Loads field rules from YAML files and provides a builder for assembling rule
configurations in code.
"""

import re
from pathlib import Path
from typing import Any, Callable, Iterable

import yaml

from formrules.core.exceptions import ConfigError
from formrules.core.patterns import PATTERNS
from formrules.core.predicates import FORMAT_PREDICATES


class RuleConfigLoader:
    """
    Loads field rules from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      name:
        required: true
        message: Name is required

      phone:
        - required: true
          message: Phone is required
        - format: phone
          message: Phone number is malformed

      role:
        enum: [admin, editor, viewer]

      contact:
        validator: is_email
        message: Contact must be an email address
    ```

    ``pattern`` strings are compiled, ``format`` names a preset pattern and
    ``validator`` names a built-in format predicate. Every other key is passed
    through unchanged.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> dict[str, list[dict[str, Any]]]:
        """
        Load and parse field rules from the YAML file.

        Returns:
            Mapping of field name to its list of rule dictionaries, suitable
            for FormValidator

        Raises:
            ConfigError: If the YAML is invalid or the rules are malformed
        """
        with open(self.config_path, encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e
            except UnicodeDecodeError as e:
                raise ConfigError(f"{self.config_path} is not valid UTF-8: {e}") from e

        if not isinstance(config, dict) or "rules" not in config:
            raise ConfigError("Configuration file must contain 'rules' section")

        field_rules = config["rules"]
        if not isinstance(field_rules, dict):
            raise ConfigError("'rules' section must map field names to rules")

        rules: dict[str, list[dict[str, Any]]] = {}
        for field_name, rule_defs in field_rules.items():
            field_name = str(field_name)
            items = rule_defs if isinstance(rule_defs, list) else [rule_defs]
            rules[field_name] = [
                self._parse_rule(field_name, rule_def, idx) for idx, rule_def in enumerate(items)
            ]

        return rules

    def _parse_rule(self, field_name: str, rule_def: Any, idx: int) -> Any:
        """
        Parse a single rule definition.

        Args:
            field_name: The field this rule applies to
            rule_def: The rule definition from YAML
            idx: Position of this rule for the field (for error messages)

        Returns:
            Parsed rule dictionary, or rule_def unchanged when it is not a mapping

        Raises:
            ConfigError: If the rule definition is invalid
        """
        # Null or scalar rules are left for normalize_rules, which keeps them
        # as always-passing rules and logs a warning.
        if not isinstance(rule_def, dict):
            return rule_def

        rule = dict(rule_def)

        if "format" in rule:
            if "pattern" in rule:
                raise ConfigError(
                    f"Rule {idx} for field '{field_name}' sets both 'format' and 'pattern'"
                )
            rule["pattern"] = _preset_pattern(rule.pop("format"), field_name)
        elif isinstance(rule.get("pattern"), str):
            try:
                rule["pattern"] = re.compile(rule["pattern"])
            except re.error as e:
                raise ConfigError(
                    f"Invalid regex pattern in rule {idx} for field '{field_name}': {e}"
                ) from e

        if isinstance(rule.get("validator"), str):
            name = rule["validator"]
            if name not in FORMAT_PREDICATES:
                raise ConfigError(
                    f"Unknown validator '{name}' for field '{field_name}'. "
                    f"Available: {', '.join(sorted(FORMAT_PREDICATES))}"
                )
            rule["validator"] = FORMAT_PREDICATES[name]

        return rule


class RuleConfigBuilder:
    """
    Programmatically build rule configurations.

    Example:
        rules = RuleConfigBuilder() \\
            .add_required_field("phone", message="Phone is required") \\
            .add_format("phone", "phone", message="Phone number is malformed") \\
            .build()
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: dict[str, list[dict[str, Any]]] = {}

    def add_required_field(self, field_name: str, message: Any = None) -> "RuleConfigBuilder":
        """Add a required field rule."""
        return self._add(field_name, {"required": True}, message)

    def add_type_check(
        self, field_name: str, expected_type: str, message: Any = None
    ) -> "RuleConfigBuilder":
        """Add a type check rule."""
        return self._add(field_name, {"type": expected_type}, message)

    def add_regex(
        self, field_name: str, pattern: str | re.Pattern, message: Any = None
    ) -> "RuleConfigBuilder":
        """Add a regex validation rule."""
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise ConfigError(f"Invalid regex pattern for field '{field_name}': {e}") from e
        return self._add(field_name, {"pattern": pattern}, message)

    def add_format(self, field_name: str, preset: str, message: Any = None) -> "RuleConfigBuilder":
        """Add a rule matching one of the preset patterns."""
        return self._add(field_name, {"pattern": _preset_pattern(preset, field_name)}, message)

    def add_length(
        self,
        field_name: str,
        min_length: int | None = None,
        max_length: int | None = None,
        message: Any = None,
    ) -> "RuleConfigBuilder":
        """Add a length bound rule."""
        if min_length is None and max_length is None:
            raise ConfigError("add_length requires at least one of: min_length, max_length")

        rule: dict[str, Any] = {}
        if max_length is not None:
            rule["maxlength"] = max_length
        if min_length is not None:
            rule["minlength"] = min_length
        return self._add(field_name, rule, message)

    def add_enum(
        self, field_name: str, values: Iterable[Any], message: Any = None
    ) -> "RuleConfigBuilder":
        """Add an allowed-values rule."""
        return self._add(field_name, {"enum": list(values)}, message)

    def add_custom(
        self, field_name: str, validator: Callable[[Any], Any], message: Any = None
    ) -> "RuleConfigBuilder":
        """Add a custom validator rule."""
        return self._add(field_name, {"validator": validator}, message)

    def build(self) -> dict[str, list[dict[str, Any]]]:
        """Build and return the rule configuration."""
        return {field_name: list(rules) for field_name, rules in self.rules.items()}

    def _add(self, field_name: str, rule: dict[str, Any], message: Any) -> "RuleConfigBuilder":
        if message is not None:
            rule["message"] = message
        self.rules.setdefault(field_name, []).append(rule)
        return self


def _preset_pattern(preset: Any, field_name: str) -> re.Pattern:
    if not isinstance(preset, str) or preset not in PATTERNS:
        raise ConfigError(
            f"Unknown format {preset!r} for field '{field_name}'. "
            f"Available: {', '.join(sorted(PATTERNS))}"
        )
    return PATTERNS[preset]
