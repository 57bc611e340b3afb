"""Injection of collected dependencies into a consumer's wiring target."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from tagwire.attributes import get_attribute, get_flag
from tagwire.collector import Dependencies
from tagwire.domain import Tag
from tagwire.registry import WiringTarget

__all__ = ["WiringDirectives", "resolve_directives", "apply_directives", "wire_consumer"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WiringDirectives:
    """How a consumer tag asks for its dependencies to be delivered.

    Attributes:
        method: Method to call with the dependencies, or None to pass them
            as constructor arguments.
        bulk: Whether to deliver the whole collection at once. None when the
            consumer tag leaves it unset.
    """

    method: Optional[str]
    bulk: Optional[bool]


def resolve_directives(component_id: str, consumer_tag: Tag) -> WiringDirectives:
    """Read the ``method`` and ``bulk`` attributes off a consumer tag.

    Args:
        component_id: Id of the consumer component, for error reporting.
        consumer_tag: One occurrence of the consumer tag on that component.

    Returns:
        The delivery directives; ``bulk`` is None when the tag leaves it unset.

    Raises:
        InvalidConfigurationError: If ``bulk`` cannot be read as a boolean.
    """
    return WiringDirectives(
        get_attribute(component_id, consumer_tag, "method", None),
        get_flag(component_id, consumer_tag, "bulk", None),
    )


def apply_directives(
    target: WiringTarget, directives: WiringDirectives, dependencies: Dependencies
) -> None:
    """Record the delivery of ``dependencies`` on ``target``.

    With a method, a bulk tag issues a single call taking the whole collection
    and any other tag issues one ``method(handle, name)`` call per entry.
    Without a method, the collection becomes a single constructor argument
    unless ``bulk`` is explicitly false, in which case each entry becomes an
    argument of its own.
    """
    if directives.method is not None:
        if directives.bulk:
            target.add_method_call(directives.method, [dependencies])
        else:
            for name, handle in _entries(dependencies):
                target.add_method_call(directives.method, [handle, name])
    elif directives.bulk is False:
        for _name, handle in _entries(dependencies):
            target.add_argument(handle)
    else:
        target.add_argument(dependencies)


def wire_consumer(
    target: WiringTarget,
    component_id: str,
    consumer_tag: Tag,
    dependencies: Dependencies,
) -> None:
    directives = resolve_directives(component_id, consumer_tag)
    apply_directives(target, directives, dependencies)
    logger.debug(
        "Wired %d dependencies into %r via %s",
        len(dependencies),
        component_id,
        f"{directives.method}()" if directives.method else "arguments",
    )


def _entries(dependencies: Dependencies) -> Iterable[tuple[Any, Any]]:
    if isinstance(dependencies, dict):
        return dependencies.items()
    return enumerate(dependencies)
