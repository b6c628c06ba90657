"""
Rule engine, validation chain and rule configuration management.
"""

from .chain import DEFAULT_CHAIN, run_chain
from .messages import dispatch_message, resolve_message
from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import FormValidator, normalize_rules

__all__ = [
    "DEFAULT_CHAIN",
    "FormValidator",
    "RuleConfigBuilder",
    "RuleConfigLoader",
    "dispatch_message",
    "normalize_rules",
    "resolve_message",
    "run_chain",
]
