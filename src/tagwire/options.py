"""Resolution of a consumer tag's attributes into :class:`ResolvedOptions`."""

from tagwire.attributes import get_attribute, get_flag
from tagwire.domain import ResolvedOptions, Tag
from tagwire.errors import InvalidConfigurationError

__all__ = ["INDEX_MODES", "resolve_options"]


INDEX_MODES = (None, "key", "class")


def resolve_options(component_id: str, consumer_tag: Tag) -> ResolvedOptions:
    """Parse and validate the options declared on a consumer tag.

    A ``key`` attribute without ``index-by`` implies ``index-by: key``.

    Args:
        component_id: Id of the consumer component.
        consumer_tag: One occurrence of the consumer tag on that component.

    Returns:
        The normalised options.

    Raises:
        AttributeMissingError: If the ``tag`` attribute is absent.
        InvalidConfigurationError: If ``index-by`` is not ``key`` or ``class``,
            or indexes by key without naming the ``key`` attribute.
    """
    key = get_attribute(component_id, consumer_tag, "key", None)
    index_mode = get_attribute(component_id, consumer_tag, "index-by", None)
    if index_mode is None and key is not None:
        index_mode = "key"

    options = ResolvedOptions(
        target_tag=get_attribute(component_id, consumer_tag, "tag"),
        index_mode=index_mode,
        key_attribute=key,
        use_reference=get_flag(component_id, consumer_tag, "reference", True),
        required_type=get_attribute(component_id, consumer_tag, "instanceof", None),
        multiple=get_flag(component_id, consumer_tag, "multiple", False),
    )

    if options.index_mode not in INDEX_MODES:
        raise InvalidConfigurationError(
            f'Component "{component_id}" declares "index-by" = {index_mode!r} on '
            f'"{consumer_tag.name}" tags; expected one of "key" or "class"'
        )
    if options.index_mode == "key" and options.key_attribute is None:
        raise InvalidConfigurationError(
            f'Component "{component_id}" indexes by key on "{consumer_tag.name}" '
            'tags but does not define the "key" attribute'
        )

    return options
