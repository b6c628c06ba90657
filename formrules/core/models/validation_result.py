"""
ValidationReport model representing the outcome of validating a data mapping (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Mapping

from .rule_spec import RuleSpec


class ValidationReport(BaseModel):
    """
    Outcome of validating a data mapping, as returned by FormValidator.check().

    Attributes:
        passed: Overall validation status
        checked_fields: Fields that had rules configured
        failed_fields: Fields whose rules failed
        errors: Failing rule per field, rendered JSON-safe
    """

    passed: bool
    checked_fields: List[str] = Field(default_factory=list)
    failed_fields: List[str] = Field(default_factory=list)
    errors: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    @field_validator('failed_fields')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_fields is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but failed_fields is not empty")
        return v

    @classmethod
    def from_errors(
        cls, checked_fields: List[str], errors: Mapping[str, RuleSpec]
    ) -> "ValidationReport":
        failed = [field for field in checked_fields if field in errors]
        return cls(
            passed=not errors,
            checked_fields=list(checked_fields),
            failed_fields=failed,
            errors={field: errors[field].describe() for field in failed},
        )

    class Config:
        json_schema_extra = {
            "example": {
                "passed": False,
                "checked_fields": ["name", "phone"],
                "failed_fields": ["phone"],
                "errors": {
                    "phone": {"pattern": r"^\d{11}$", "message": "bad format"}
                },
            }
        }
