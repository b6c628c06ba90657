"""
RuleSpec model representing one validation rule for one field.
"""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator

# Keys that carry a constraint; "message" only describes a failure.
PREDICATE_KEYS = ("required", "type", "pattern", "maxlength", "minlength", "enum", "validator")


class TypeTag(str, Enum):
    """Value types accepted by the ``type`` key of a rule."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FUNCTION = "function"
    FLOAT = "float"
    INTEGER = "integer"
    ARRAY = "array"
    OBJECT = "object"
    DATE = "date"
    REGEXP = "regexp"


class RuleSpec(BaseModel):
    """
    A single validation rule applied to a field.

    Every constraint is optional. Values are accepted as given and checked
    lazily when the rule runs, so a malformed constraint (an unknown type tag,
    a pattern that is not a compiled regex, a non-positive length bound) only
    disables that constraint instead of rejecting the whole rule set.

    Attributes:
        required: Reject empty values ("" or None)
        type: A TypeTag value the field must match
        pattern: Compiled regular expression the value must match
        validator: Callable receiving the value; may return an awaitable
        maxlength: Maximum len() of the value
        minlength: Minimum len() of the value
        enum: List of allowed values
        message: Failure message, or a callable invoked on failure
    """

    required: Any = None
    type: Any = None
    pattern: Any = None
    validator: Any = None
    maxlength: Any = None
    minlength: Any = None
    enum: Any = None
    message: Any = None

    class Config:
        frozen = True
        extra = "allow"
        arbitrary_types_allowed = True
        json_schema_extra = {
            "example": {
                "required": True,
                "pattern": r"^\d{11}$",
                "maxlength": 11,
                "message": "Phone number must have 11 digits",
            }
        }

    @field_validator("type", mode="before")
    @classmethod
    def resolve_type_tag(cls, v):
        """Resolve a recognized type name to its TypeTag; keep anything else as given."""
        if v is None or isinstance(v, TypeTag):
            return v
        try:
            return TypeTag(v)
        except (ValueError, TypeError):
            return v

    def with_message(self, message: Any) -> "RuleSpec":
        """Return a copy of this rule carrying ``message``."""
        return self.model_copy(update={"message": message})

    def has_constraints(self) -> bool:
        return any(getattr(self, key) is not None for key in PREDICATE_KEYS)

    def to_dict(self) -> dict[str, Any]:
        """Return the keys that are set on this rule, including unknown ones."""
        data = {
            key: getattr(self, key)
            for key in type(self).model_fields
            if getattr(self, key) is not None
        }
        data.update(self.model_extra or {})
        return data

    def describe(self) -> dict[str, Any]:
        """Return a JSON-safe rendering of the rule for reports."""
        return {key: _describe_value(value) for key, value in self.to_dict().items()}


def _describe_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [_describe_value(item) for item in value]
    if callable(value):
        return getattr(value, "__qualname__", repr(value))
    return repr(value)
