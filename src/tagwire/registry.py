"""Registration and lookup of tagged components."""

import inspect
from typing import Any, Callable, Iterable, Optional, Protocol

from tagwire.domain import MethodCall, Tag
from tagwire.errors import (
    DuplicateComponentError,
    InvalidComponentError,
    UnknownComponentError,
)

__all__ = [
    "Registry",
    "WiringTarget",
    "ComponentDefinition",
    "ComponentRegistry",
    "qualified_name",
]


class Registry(Protocol):
    """Read-only view of the components a pass operates on."""

    def find_by_tag(self, tag_name: str) -> dict[str, list[Tag]]:
        ...

    def get_declared_class(self, component_id: str) -> str:
        ...

    def declared_types(self, component_id: str) -> list[str]:
        ...


class WiringTarget(Protocol):
    """Mutable description of a consumer that receives its dependencies."""

    def add_method_call(self, method_name: str, arguments: list[Any]) -> None:
        ...

    def add_argument(self, value: Any) -> None:
        ...


def qualified_name(target: Any) -> str:
    """Return the fully qualified name of a class, or a string unchanged.

    Example:
        >>> qualified_name(collections.OrderedDict)  # "collections.OrderedDict"
        >>> qualified_name("acme.Command")           # "acme.Command"
    """
    if isinstance(target, str):
        return target
    if not inspect.isclass(target):
        raise ValueError(f"{target} is not a class")
    return f"{target.__module__}.{target.__qualname__}"


class ComponentDefinition:
    """A registered component and the wiring collected for it.

    Instances serve as the :class:`WiringTarget` of consumer components: the
    consumer pass appends method calls and constructor arguments, which are
    applied when the component is eventually instantiated.

    Attributes:
        id: Unique id of the component in its registry.
        declared_class: The class the component will be an instance of.
        tags: Tags declared on the component, in declaration order.
        interfaces: Extra type names the component satisfies beyond its MRO.
        method_calls: Method calls recorded by wiring, in issue order.
        arguments: Positional constructor arguments recorded by wiring.
    """

    def __init__(
        self,
        component_id: str,
        declared_class: Any,
        tags: Iterable[Tag] = (),
        interfaces: Iterable[Any] = (),
    ):
        self.id = component_id
        self.declared_class = declared_class
        self.tags = list(tags)
        self.interfaces = [qualified_name(i) for i in interfaces]
        self.method_calls: list[MethodCall] = []
        self.arguments: list[Any] = []

    def add_method_call(self, method_name: str, arguments: list[Any]) -> None:
        self.method_calls.append(MethodCall(method_name, list(arguments)))

    def add_argument(self, value: Any) -> None:
        self.arguments.append(value)

    def tags_named(self, tag_name: str) -> list[Tag]:
        return [t for t in self.tags if t.name == tag_name]

    def __repr__(self) -> str:
        return (
            f"ComponentDefinition({self.id!r}, "
            f"{qualified_name(self.declared_class)}, tags={self.tags!r})"
        )


class ComponentRegistry:
    """Registry of component definitions, kept in registration order."""

    def __init__(self):
        self._definitions: dict[str, ComponentDefinition] = {}

    def register(
        self,
        component_id: str,
        declared_class: Any,
        tags: Iterable[Tag] = (),
        interfaces: Iterable[Any] = (),
    ) -> ComponentDefinition:
        """Register a component explicitly.

        Args:
            component_id: Unique id of the component.
            declared_class: The component's class, or its fully qualified name
                when the class cannot be imported at build time.
            tags: Tags declared on the component.
            interfaces: Additional types (or type names) the component satisfies.

        Returns:
            The new :class:`ComponentDefinition`.

        Raises:
            DuplicateComponentError: If the id is already registered.
            InvalidComponentError: If the class or an interface is neither a
                class nor a class name.
        """
        interfaces = list(interfaces)
        for declared in [declared_class, *interfaces]:
            if not (isinstance(declared, str) or inspect.isclass(declared)):
                raise InvalidComponentError(
                    f"Component '{component_id}' declares {declared!r}, "
                    "which is neither a class nor a class name"
                )

        if component_id in self._definitions:
            raise DuplicateComponentError(
                f"Duplicate component id '{component_id}' "
                f"for classes {qualified_name(self._definitions[component_id].declared_class)} "
                f"and {qualified_name(declared_class)}"
            )
        definition = ComponentDefinition(component_id, declared_class, tags, interfaces)
        self._definitions[component_id] = definition
        return definition

    def provides(
        self,
        name: Optional[str] = None,
        tags: Iterable[Tag] = (),
        interfaces: Iterable[Any] = (),
    ) -> Callable:
        """Decorator to register a class as a component.

        Args:
            name: Optional component id; defaults to the class name.
            tags: Tags to declare on the component.
            interfaces: Additional types the component satisfies.

        Returns:
            A decorator that registers the class and returns it unchanged.

        Example:
            @registry.provides(tags=[tag("console.command", alias="greet")])
            class GreetCommand(Command):
                ...
        """

        def decorator(cls):
            if not inspect.isclass(cls):
                raise ValueError(f"{cls} is not a class")
            self.register(name or cls.__name__, cls, tags, interfaces)
            return cls

        return decorator

    def get_definition(self, component_id: str) -> ComponentDefinition:
        try:
            return self._definitions[component_id]
        except KeyError:
            raise UnknownComponentError(
                f"No component registered with id '{component_id}'"
            ) from None

    def find_by_tag(self, tag_name: str) -> dict[str, list[Tag]]:
        """Find every component declaring a tag.

        Args:
            tag_name: The tag to look for.

        Returns:
            Mapping of component ids to the occurrences of the tag on each
            component, both in declaration order.
        """
        found = {}
        for component_id, definition in self._definitions.items():
            occurrences = definition.tags_named(tag_name)
            if occurrences:
                found[component_id] = occurrences
        return found

    def get_declared_class(self, component_id: str) -> str:
        """Return the fully qualified name of a component's class."""
        return qualified_name(self.get_definition(component_id).declared_class)

    def declared_types(self, component_id: str) -> list[str]:
        """Return the names of every type a component satisfies.

        For a class this is its full MRO (``object`` included) followed by
        any interfaces given at registration. A class given only by name
        satisfies that name and its interfaces.
        """
        definition = self.get_definition(component_id)
        declared = definition.declared_class
        if inspect.isclass(declared):
            names = [qualified_name(t) for t in inspect.getmro(declared)]
        else:
            names = [qualified_name(declared)]
        return names + [i for i in definition.interfaces if i not in names]

    def __contains__(self, component_id: str) -> bool:
        return component_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
