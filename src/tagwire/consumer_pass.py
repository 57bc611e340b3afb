"""
The tag consumer pass.

A component becomes a tag consumer by declaring the consumer tag
(``tag.consumer`` by default). Each occurrence of that tag names a target tag,
and every component declaring the target tag is injected into the consumer,
either through calls to ``method`` or as constructor arguments:

    registry.register(
        "application",
        Application,
        tags=[tag("tag.consumer", tag="console.command", method="add", key="alias")],
    )
    registry.register(
        "greet_command",
        GreetCommand,
        tags=[tag("console.command", alias="greet")],
    )

    TagConsumerPass().process(registry)
    # application now carries the call add(Reference("greet_command"), "greet")
"""

import logging
from typing import Protocol

from tagwire.collector import collect_dependencies
from tagwire.domain import Tag
from tagwire.options import resolve_options
from tagwire.registry import Registry, WiringTarget
from tagwire.wiring import apply_directives, resolve_directives

__all__ = ["DEFAULT_CONSUMER_TAG", "ConsumerRegistry", "TagConsumerPass"]

logger = logging.getLogger(__name__)


DEFAULT_CONSUMER_TAG = "tag.consumer"


class ConsumerRegistry(Registry, Protocol):
    """A registry which also hands out the wiring target of each component."""

    def get_definition(self, component_id: str) -> WiringTarget:
        ...


class TagConsumerPass:
    """Find every tag consumer in a registry and inject its tagged dependencies."""

    def __init__(self, tag_name: str = DEFAULT_CONSUMER_TAG):
        """
        Args:
            tag_name: Name of the tag marking components as tag consumers.
        """
        self.tag_name = tag_name

    def process(self, registry: ConsumerRegistry) -> int:
        """Wire every consumer in the registry.

        All occurrences of the consumer tag on a component are resolved and
        collected before any of them is wired, so a failing occurrence leaves
        its consumer untouched.

        Args:
            registry: The registry to read tags from and whose definitions are wired.

        Returns:
            The number of consumer tag occurrences wired.

        Raises:
            WiringError: On the first malformed consumer or dependency; the
                pass stops there.
        """
        wired = 0
        consumers = registry.find_by_tag(self.tag_name)

        for component_id, consumer_tags in consumers.items():
            target = registry.get_definition(component_id)
            plan = [
                self._plan(registry, component_id, consumer_tag)
                for consumer_tag in consumer_tags
            ]
            for directives, dependencies in plan:
                apply_directives(target, directives, dependencies)
            logger.debug("Wired %d consumer tags into %r", len(plan), component_id)
            wired += len(plan)

        logger.info(
            "Wired %d %r tags across %d consumers", wired, self.tag_name, len(consumers)
        )
        return wired

    def _plan(self, registry: Registry, component_id: str, consumer_tag: Tag):
        options = resolve_options(component_id, consumer_tag)
        directives = resolve_directives(component_id, consumer_tag)
        return directives, collect_dependencies(registry, options)
