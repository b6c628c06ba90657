"""
Failure message resolution and dispatch.
"""

from typing import Any, Callable

from formrules.core.models import RuleSpec


def resolve_message(rule: RuleSpec, override: str | None = None) -> Any:
    """Return the overriding message if it is non-empty, else the rule's own."""
    return override or rule.message


def dispatch_message(message: Any, hook: Callable[[Any], Any] | None = None) -> None:
    """
    Notify about a failure.

    A callable message is invoked with no arguments and the hook is skipped.
    Otherwise the hook, when configured, receives the message (possibly None).
    """
    if callable(message):
        message()
    elif hook is not None:
        hook(message)
