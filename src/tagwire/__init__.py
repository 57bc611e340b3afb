"""Tagwire: tag-based dependency wiring.

Tagwire collects the components of a registry that declare a given tag and
injects them into the components that consume that tag. It runs once, at build
time, over a registry of component definitions: consumers end up with the
method calls or constructor arguments that deliver their dependencies, and
nothing is instantiated.

Key Features:
    - Consumers are declared with a tag, not with code
    - Deterministic ordering through a numeric ``order`` attribute
    - Indexing of dependencies by tag attribute or by class
    - References or bare ids, one call per dependency or one bulk call
    - Type constraints on collected components

Basic Usage:
    >>> from tagwire.builders import wire_consumers
    >>> from tagwire.domain import tag
    >>> from tagwire.registry import ComponentRegistry
    >>>
    >>> registry = ComponentRegistry()
    >>> registry.register(
    ...     "application",
    ...     Application,
    ...     [tag("tag.consumer", tag="console.command", method="add", key="alias")],
    ... )
    >>> registry.register("greet", GreetCommand, [tag("console.command", alias="greet")])
    >>> wire_consumers(registry)
    >>> registry.get_definition("application").method_calls
    [MethodCall(method_name='add', arguments=[Reference(component_id='greet'), 'greet'])]

The framework consists of several modules:
    - registry: Component registration and tag lookup
    - builders: High-level entry points
    - consumer_pass: The pass finding and wiring consumers
    - options: Parsing of consumer tag options
    - collector: Ordering and indexing of tagged dependencies
    - wiring: Delivery of dependencies to a consumer
    - attributes: Typed access to tag attributes
    - domain: Core domain models (Tag, Reference, Identity, ResolvedOptions)
    - errors: Framework-specific exceptions
"""
