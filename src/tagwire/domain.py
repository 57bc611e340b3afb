"""Domain models used throughout the framework."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional, Union

__all__ = [
    "Scalar",
    "Tag",
    "tag",
    "Reference",
    "Identity",
    "DependencyHandle",
    "IndexMode",
    "ResolvedOptions",
    "MethodCall",
]


Scalar = Union[str, int, float, bool]
"""Type of the values a tag attribute may hold."""


@dataclass(frozen=True)
class Tag:
    """A named piece of metadata attached to a component.

    Attributes keep their declaration order and cannot be modified once the
    tag is built.

    Attributes:
        name: The tag name, e.g. ``"console.command"``.
        attributes: Read-only mapping of attribute names to scalar values.
    """

    name: str
    attributes: Mapping[str, Scalar] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes))
        )

    def __contains__(self, attribute: str) -> bool:
        return attribute in self.attributes

    def __getitem__(self, attribute: str) -> Scalar:
        return self.attributes[attribute]

    def __hash__(self) -> int:
        return hash((self.name, tuple(self.attributes.items())))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self.name == other.name and dict(self.attributes) == dict(
            other.attributes
        )


def tag(name: str, attributes: Optional[Mapping[str, Scalar]] = None, **kwargs) -> Tag:
    """Build a :class:`Tag`.

    Attribute names that are not valid identifiers (``index-by``) can be
    passed in the ``attributes`` mapping; the rest may be given as keywords.

    Example:
        >>> tag("tag.consumer", {"index-by": "class"}, tag="console.command")
    """
    merged = dict(attributes or {})
    merged.update(kwargs)
    return Tag(name, merged)


@dataclass(frozen=True)
class Reference:
    """A lazy pointer to a component, resolved when the consumer is instantiated."""

    component_id: str

    def __str__(self) -> str:
        return f"@{self.component_id}"


@dataclass(frozen=True)
class Identity:
    """The bare id of a component, for consumers that only need to know which one."""

    component_id: str

    def __str__(self) -> str:
        return self.component_id


DependencyHandle = Union[Reference, Identity]


IndexMode = Optional[Literal["key", "class"]]


@dataclass(frozen=True)
class ResolvedOptions:
    """Normalised options of a single consumer tag.

    Attributes:
        target_tag: Name of the tag whose components are collected.
        index_mode: ``None`` for a plain sequence, ``"key"`` to index by a tag
            attribute, ``"class"`` to index by declared class name.
        key_attribute: Name of the tag attribute used when indexing by key.
        use_reference: Whether to collect references or bare identities.
        required_type: Fully qualified type name every collected component
            must satisfy.
        multiple: Whether an index holds a list of handles rather than one.
    """

    target_tag: str
    index_mode: IndexMode = None
    key_attribute: Optional[str] = None
    use_reference: bool = True
    required_type: Optional[str] = None
    multiple: bool = False


@dataclass(frozen=True)
class MethodCall:
    """A method call to be issued on a consumer after it is instantiated."""

    method_name: str
    arguments: list[Any]
