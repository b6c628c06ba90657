"""
Chain checks for field rules.

Provides one validator per rule key: required, type, pattern, maxlength,
minlength, enum and custom validator functions.
"""

from .base_validator import BaseValidator, CheckResult, RuleViolation
from .custom_validator import CustomValidator, violation_message
from .enum_validator import EnumValidator
from .length_validator import MaxLengthValidator, MinLengthValidator
from .regex_validator import RegexValidator
from .required_field_validator import RequiredFieldValidator
from .type_validator import TypeValidator

__all__ = [
    "BaseValidator",
    "CheckResult",
    "RuleViolation",
    "RequiredFieldValidator",
    "TypeValidator",
    "RegexValidator",
    "MaxLengthValidator",
    "MinLengthValidator",
    "EnumValidator",
    "CustomValidator",
    "violation_message",
]
