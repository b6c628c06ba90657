"""
Pytest configuration and fixtures for formrules tests

This module provides shared fixtures for unit and integration tests.
"""
import logging
import re
import textwrap

import pytest


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise the CLI and rule files end to end"
    )


# =======================
# RULE FIXTURES
# =======================

PHONE_PATTERN = re.compile(r"^\d{11}$")


@pytest.fixture
def phone_pattern() -> re.Pattern:
    """Eleven-digit phone pattern shared by rule fixtures"""
    return PHONE_PATTERN


@pytest.fixture
def signup_rules() -> dict:
    """
    Rules for a signup form

    Returns:
        Mapping of field name to rule(s)
    """
    return {
        "name": {"required": True, "message": "Name is required"},
        "phone": [
            {"required": True, "message": "Phone is required"},
            {"pattern": PHONE_PATTERN, "message": "Phone must have 11 digits"},
        ],
        "role": {"enum": ["admin", "editor", "viewer"], "message": "Unknown role"},
        "bio": {"maxlength": 20, "message": "Bio is too long"},
    }


@pytest.fixture
def valid_signup() -> dict:
    """A signup payload that satisfies signup_rules"""
    return {
        "name": "Ada",
        "phone": "13800138000",
        "role": "editor",
        "bio": "Engineer",
    }


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def rules_yaml(tmp_path):
    """
    Write a YAML rule file for the signup form

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the rule file
    """
    path = tmp_path / "signup_rules.yaml"
    path.write_text(textwrap.dedent(r"""
        rules:
          name:
            required: true
            message: Name is required
          phone:
            - required: true
              message: Phone is required
            - format: phone
              message: Phone number is malformed
          contact:
            validator: is_email
            message: Contact must be an email address
          role:
            enum: [admin, editor, viewer]
            message: Unknown role
          code:
            pattern: '^[A-Z]{3}-\d{3}$'
            message: Code must look like ABC-123
    """), encoding="utf-8")
    return path


# =======================
# LOGGING FIXTURES
# =======================

@pytest.fixture(autouse=True, scope="function")
def reset_formrules_logger():
    """
    Undo setup_logger() changes after each test so caplog keeps working

    setup_logger() disables propagation on the "formrules" logger.
    """
    yield
    logger = logging.getLogger("formrules")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
