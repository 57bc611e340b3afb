"""Typed access to tag attributes with default-or-fail semantics."""

import math
from typing import Any, Optional, Union

from tagwire.domain import Tag
from tagwire.errors import AttributeMissingError, InvalidConfigurationError

__all__ = ["MISSING", "get_attribute", "get_flag", "numeric_order"]


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()
"""Sentinel meaning "no default supplied"; ``None`` and ``False`` are real defaults."""


_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


def get_attribute(component_id: str, tag: Tag, name: str, default: Any = MISSING) -> Any:
    """Read an attribute off a tag.

    Args:
        component_id: Id of the component declaring the tag, for error reporting.
        tag: The tag to read from.
        name: The attribute name.
        default: Value returned when the attribute is absent. If not given,
            the attribute is mandatory.

    Returns:
        The attribute value, or the default.

    Raises:
        AttributeMissingError: If the attribute is absent and no default was given.
    """
    if name in tag:
        return tag[name]
    if default is not MISSING:
        return default
    raise AttributeMissingError(component_id, name, tag.name)


def get_flag(component_id: str, tag: Tag, name: str, default: Any = MISSING) -> Any:
    """Read a boolean attribute off a tag.

    Tags loaded from text formats carry their flags as strings, so
    ``"true"``/``"false"`` (and ``yes``/``no``, ``on``/``off``, ``1``/``0``)
    are accepted alongside real booleans. An absent attribute yields the
    default unchanged, so ``None`` can be used to tell "unset" from ``False``.

    Raises:
        AttributeMissingError: If the attribute is absent and no default was given.
        InvalidConfigurationError: If the value cannot be read as a boolean.
    """
    value = get_attribute(component_id, tag, name, default)
    if name not in tag or isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise InvalidConfigurationError(
        f'Component "{component_id}" declares "{name}" = {value!r} on "{tag.name}" '
        "tags, which is not a boolean"
    )


def numeric_order(value: Any) -> Optional[Union[int, float]]:
    """Return the numeric value of an ``order`` attribute, or None if it has none.

    Example:
        >>> numeric_order(10)      # 10
        >>> numeric_order("-2")    # -2
        >>> numeric_order("1.5")   # 1.5
        >>> numeric_order("high")  # None
        >>> numeric_order(True)    # None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text.isascii() or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None
