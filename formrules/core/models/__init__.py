"""
Core data models for formrules.

Rules and reports use Pydantic for runtime validation.
"""

from .rule_spec import PREDICATE_KEYS, RuleSpec, TypeTag
from .validation_result import ValidationReport

__all__ = [
    "PREDICATE_KEYS",
    "RuleSpec",
    "TypeTag",
    "ValidationReport",
]
