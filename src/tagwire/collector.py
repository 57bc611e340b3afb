"""
Collection of the components declaring a tag into an ordered, optionally indexed group.

Every occurrence of the target tag contributes one dependency handle. Occurrences
with a numeric ``order`` attribute are grouped by that value and the groups are
folded in ascending order; occurrences without one are folded in last.

Within and across groups, the shape of the result depends on the options:

- no index: a list of handles, in the order described above;
- index by key or class, single: a dict of index to handle, where a later
  contribution replaces an earlier one at the same index;
- index by key or class, multiple: a dict of index to a list of handles,
  where contributions at the same index accumulate.
"""

import logging
from functools import reduce
from typing import Any, Union

from tagwire.attributes import get_attribute, numeric_order
from tagwire.domain import DependencyHandle, Identity, Reference, ResolvedOptions
from tagwire.errors import TypeMismatchError
from tagwire.registry import Registry

__all__ = ["Dependencies", "collect_dependencies"]

logger = logging.getLogger(__name__)


Dependencies = Union[list[DependencyHandle], dict[Any, Any]]
"""A collected group: a list of handles, or a mapping of index to handle(s)."""


def collect_dependencies(registry: Registry, options: ResolvedOptions) -> Dependencies:
    """
    Collect the handles of every component declaring ``options.target_tag``.

    Args:
        registry: The registry to scan.
        options: Resolved options of the consumer tag.

    Returns:
        The merged group of handles. An empty list (or dict, when indexing)
        if no component declares the tag.

    Raises:
        TypeMismatchError: If a component does not satisfy ``options.required_type``.
        AttributeMissingError: If indexing by key and an occurrence of the
            target tag lacks the key attribute.
    """
    ordered: dict[Union[int, float], Dependencies] = {}
    unordered = _empty_group(options)

    for component_id, occurrences in registry.find_by_tag(options.target_tag).items():
        if options.required_type is not None:
            _check_type(registry, component_id, options.required_type)

        handle = (
            Reference(component_id) if options.use_reference else Identity(component_id)
        )
        declared_class = (
            registry.get_declared_class(component_id)
            if options.index_mode == "class"
            else None
        )

        for occurrence in occurrences:
            order = numeric_order(occurrence.attributes.get("order"))
            if order is None:
                group = unordered
            else:
                if order not in ordered:
                    ordered[order] = _empty_group(options)
                group = ordered[order]

            if options.index_mode is None:
                group.append(handle)
                continue

            if options.index_mode == "key":
                index = get_attribute(component_id, occurrence, options.key_attribute)
            else:
                index = declared_class

            if options.multiple:
                group.setdefault(index, []).append(handle)
            else:
                group[index] = handle

    groups = [ordered[order] for order in sorted(ordered)] + [unordered]
    merged = reduce(
        lambda merged, group: _merge(merged, group, options),
        groups,
        _empty_group(options),
    )

    logger.debug(
        "Collected %d dependencies tagged %r from %d order groups",
        len(merged),
        options.target_tag,
        len(ordered),
    )
    return merged


def _empty_group(options: ResolvedOptions) -> Dependencies:
    return [] if options.index_mode is None else {}


def _merge(merged: Dependencies, group: Dependencies, options: ResolvedOptions) -> Dependencies:
    """Fold one group into the accumulated result.

    Lists are concatenated. Indexed groups accumulate per index when
    ``multiple`` is set; otherwise the later group's value replaces the
    earlier one, keeping the index in its original position.
    """
    if options.index_mode is None:
        merged.extend(group)
        return merged

    for index, value in group.items():
        if options.multiple:
            merged.setdefault(index, []).extend(value)
        else:
            merged[index] = value
    return merged


def _check_type(registry: Registry, component_id: str, required_type: str) -> None:
    if required_type not in registry.declared_types(component_id):
        raise TypeMismatchError(
            component_id, registry.get_declared_class(component_id), required_type
        )
