"""High level entry points for wiring tag consumers."""

from tagwire.consumer_pass import DEFAULT_CONSUMER_TAG, ConsumerRegistry, TagConsumerPass

__all__ = ["make_consumer_pass", "wire_consumers"]


def make_consumer_pass(tag_name: str = DEFAULT_CONSUMER_TAG) -> TagConsumerPass:
    """Create a :class:`TagConsumerPass` recognising consumers by ``tag_name``."""
    return TagConsumerPass(tag_name)


def wire_consumers(
    registry: ConsumerRegistry, tag_name: str = DEFAULT_CONSUMER_TAG
) -> int:
    """
    Inject tagged dependencies into every consumer in a registry.

    Args:
        registry: The registry whose consumers are wired in place.
        tag_name: Name of the tag marking components as tag consumers.

    Returns:
        The number of consumer tag occurrences wired.

    Raises:
        AttributeMissingError: If a consumer tag lacks ``tag``, or a dependency
            lacks the attribute it is indexed by.
        InvalidConfigurationError: If a consumer tag's options are inconsistent.
        TypeMismatchError: If a dependency fails a consumer's ``instanceof``.

    Example:
        >>> registry = ComponentRegistry()
        >>> registry.register("app", Application, [tag("tag.consumer", tag="command")])
        >>> registry.register("greet", GreetCommand, [tag("command")])
        >>> wire_consumers(registry)
        1
        >>> registry.get_definition("app").arguments
        [[Reference(component_id='greet')]]
    """
    return make_consumer_pass(tag_name).process(registry)
