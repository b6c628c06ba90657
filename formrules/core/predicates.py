"""
Value classification predicates.

Type predicates back the ``type`` key of a rule through TYPE_PREDICATES.
Format predicates match values against the preset pattern table and are
exported for use inside custom validators.
"""

import math
import re
from collections.abc import Mapping
from datetime import datetime
from numbers import Real
from types import MappingProxyType
from typing import Any, Callable

from formrules.core.exceptions import ConfigError
from formrules.core.models import TypeTag
from formrules.core.patterns import PATTERNS

MAX_URL_LENGTH = 2048


def is_empty(value: Any) -> bool:
    """Return True for the empty string and None (absent fields read as None)."""
    return value is None or (isinstance(value, str) and value == "")


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Real numbers except bool and NaN. Infinities are numbers."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # NaN is the only value not equal to itself
    return value == value


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_function(value: Any) -> bool:
    return callable(value)


def is_regexp(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_integer(value: Any) -> bool:
    """A number whose truncation equals itself, so 5.0 counts."""
    if not is_number(value):
        return False
    if isinstance(value, int):
        return True
    try:
        return math.trunc(value) == value
    except (OverflowError, ValueError):
        return False


def is_float(value: Any) -> bool:
    return is_number(value) and not is_integer(value)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_date(value: Any) -> bool:
    """Date-like objects exposing year, month and a usable ordinal."""
    if not (hasattr(value, "year") and hasattr(value, "month")):
        return False
    to_ordinal = getattr(value, "toordinal", None)
    if not callable(to_ordinal):
        return False
    try:
        to_ordinal()
    except (OverflowError, ValueError, TypeError):
        return False
    return True


def is_valid_date(value: Any) -> bool:
    """
    Check whether a text value denotes a calendar date.

    Only strings qualify: numbers, numeric strings and date objects do not
    (use is_date for those). Strings must parse as ISO 8601 dates or
    datetimes.
    """
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not text or _is_numeric_text(text):
        return False
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def is_url(value: Any) -> bool:
    return (
        isinstance(value, str)
        and len(value) <= MAX_URL_LENGTH
        and PATTERNS["url"].search(value) is not None
    )


def is_phone(value: Any) -> bool:
    return _matches("phone", value)


def is_tel(value: Any) -> bool:
    return _matches("tel", value)


def is_email(value: Any) -> bool:
    return _matches("email", value)


def is_chinese(value: Any) -> bool:
    return _matches("chinese", value)


def is_id_card(value: Any) -> bool:
    return _matches("id_card", value)


def is_ip(value: Any) -> bool:
    return _matches("ip", value)


def is_postal_code(value: Any) -> bool:
    return _matches("postal_code", value)


def one_of(value: Any, items: Any) -> bool:
    """
    Strict membership test.

    Raises:
        ConfigError: If items is not a list or tuple
    """
    if not is_array(items):
        raise ConfigError(f"one_of expects a list or tuple, got {type(items).__name__}")
    return any(_strict_equal(value, item) for item in items)


def capitalize(text: Any) -> str:
    """
    Upper-case the first character of a string.

    Raises:
        ConfigError: If text is not a string
    """
    if not is_string(text):
        raise ConfigError(f"capitalize expects a string, got {type(text).__name__}")
    return text[:1].upper() + text[1:]


TYPE_PREDICATES: Mapping[TypeTag, Callable[[Any], bool]] = MappingProxyType({
    TypeTag.STRING: is_string,
    TypeTag.NUMBER: is_number,
    TypeTag.BOOLEAN: is_boolean,
    TypeTag.FUNCTION: is_function,
    TypeTag.FLOAT: is_float,
    TypeTag.INTEGER: is_integer,
    TypeTag.ARRAY: is_array,
    TypeTag.OBJECT: is_object,
    TypeTag.DATE: is_date,
    TypeTag.REGEXP: is_regexp,
})

# Built-in validators addressable by name from rule configuration files
FORMAT_PREDICATES: Mapping[str, Callable[[Any], bool]] = MappingProxyType({
    "is_url": is_url,
    "is_phone": is_phone,
    "is_tel": is_tel,
    "is_email": is_email,
    "is_chinese": is_chinese,
    "is_id_card": is_id_card,
    "is_ip": is_ip,
    "is_postal_code": is_postal_code,
    "is_valid_date": is_valid_date,
})


def resolve_type_predicate(type_tag: Any) -> Callable[[Any], bool] | None:
    """
    Return the predicate for a TypeTag, or None for anything else.

    RuleSpec resolves type names to TypeTag when the rule is built, so an
    unrecognized tag reaches this point as its raw value.
    """
    if not isinstance(type_tag, TypeTag):
        return None
    return TYPE_PREDICATES[type_tag]


def _matches(name: str, value: Any) -> bool:
    text = _as_text(value)
    return text is not None and PATTERNS[name].search(text) is not None


def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if is_number(value):
        return str(value)
    return None


def _is_numeric_text(text: str) -> bool:
    try:
        number = float(text)
    except ValueError:
        return False
    return number == number


def _strict_equal(left: Any, right: Any) -> bool:
    # bool is an int subclass; True must not match 1
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    return left == right
