"""
formrules - declarative field validation for data mappings.

Per-field rules are evaluated through a fixed chain of checks (required, type,
pattern, length bounds, enum, custom validator) with support for asynchronous
custom validators.
"""

from formrules.core.exceptions import (
    ConfigError,
    FieldValidationError,
    FormValidationError,
    ValidationFailure,
)
from formrules.core.models import RuleSpec, TypeTag, ValidationReport
from formrules.core.patterns import PATTERNS
from formrules.core.predicates import (
    FORMAT_PREDICATES,
    TYPE_PREDICATES,
    capitalize,
    is_array,
    is_boolean,
    is_chinese,
    is_date,
    is_email,
    is_empty,
    is_float,
    is_function,
    is_id_card,
    is_integer,
    is_ip,
    is_number,
    is_object,
    is_phone,
    is_postal_code,
    is_regexp,
    is_string,
    is_tel,
    is_url,
    is_valid_date,
    one_of,
)
from formrules.core.rules import FormValidator, RuleConfigBuilder, RuleConfigLoader
from formrules.core.validators import RuleViolation

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "FieldValidationError",
    "FormValidationError",
    "FormValidator",
    "FORMAT_PREDICATES",
    "PATTERNS",
    "RuleConfigBuilder",
    "RuleConfigLoader",
    "RuleSpec",
    "RuleViolation",
    "TYPE_PREDICATES",
    "TypeTag",
    "ValidationFailure",
    "ValidationReport",
    "capitalize",
    "is_array",
    "is_boolean",
    "is_chinese",
    "is_date",
    "is_email",
    "is_empty",
    "is_float",
    "is_function",
    "is_id_card",
    "is_integer",
    "is_ip",
    "is_number",
    "is_object",
    "is_phone",
    "is_postal_code",
    "is_regexp",
    "is_string",
    "is_tel",
    "is_url",
    "is_valid_date",
    "one_of",
]
