from abc import ABC

import pytest

from tagwire.domain import MethodCall, Reference, tag
from tagwire.errors import (
    DuplicateComponentError,
    InvalidComponentError,
    UnknownComponentError,
)
from tagwire.registry import ComponentRegistry, qualified_name


class Command(ABC):
    pass


class GreetCommand(Command):
    pass


@pytest.fixture
def registry():
    return ComponentRegistry()


def test_component_is_registered(registry):
    definition = registry.register(
        "greet", GreetCommand, [tag("console.command", alias="greet")]
    )

    assert registry.get_definition("greet") is definition
    assert definition.declared_class is GreetCommand
    assert definition.tags == [tag("console.command", alias="greet")]
    assert "greet" in registry
    assert len(registry) == 1


def test_id_can_be_resolved_from_declaring_class_name(registry):
    @registry.provides(tags=[tag("console.command")])
    class FarewellCommand(Command):
        pass

    assert registry.get_definition("FarewellCommand").declared_class is FarewellCommand


def test_provides_returns_class_unchanged(registry):
    decorated = registry.provides(name="greet")(GreetCommand)

    assert decorated is GreetCommand
    assert registry.get_definition("greet").declared_class is GreetCommand


def test_provides_rejects_functions(registry):
    with pytest.raises(ValueError, match="is not a class"):

        @registry.provides()
        def make_command():
            pass


def test_duplicate_id_raises(registry):
    registry.register("greet", GreetCommand)

    with pytest.raises(DuplicateComponentError, match="Duplicate component id 'greet'"):
        registry.register("greet", Command)


def test_unknown_id_raises(registry):
    with pytest.raises(UnknownComponentError, match="No component registered"):
        registry.get_definition("missing")


def test_find_by_tag_keeps_registration_order_and_all_occurrences(registry):
    registry.register("b", GreetCommand, [tag("t", order=2), tag("other"), tag("t", order=1)])
    registry.register("a", GreetCommand, [tag("other")])
    registry.register("c", GreetCommand, [tag("t")])

    found = registry.find_by_tag("t")

    assert list(found) == ["b", "c"]
    assert found["b"] == [tag("t", order=2), tag("t", order=1)]
    assert found["c"] == [tag("t")]
    assert registry.find_by_tag("nothing") == {}


def test_declared_class_is_fully_qualified(registry):
    registry.register("greet", GreetCommand)
    registry.register("named", "acme.commands.Named")

    assert registry.get_declared_class("greet") == f"{GreetCommand.__module__}.GreetCommand"
    assert registry.get_declared_class("named") == "acme.commands.Named"


def test_declared_types_cover_the_class_hierarchy(registry):
    registry.register("greet", GreetCommand, interfaces=["acme.Greeter"])

    assert registry.declared_types("greet") == [
        qualified_name(GreetCommand),
        qualified_name(Command),
        qualified_name(ABC),
        "builtins.object",
        "acme.Greeter",
    ]


def test_declared_types_of_class_given_by_name(registry):
    registry.register("named", "acme.Named", interfaces=[Command])

    assert registry.declared_types("named") == ["acme.Named", qualified_name(Command)]


def test_definition_records_wiring(registry):
    definition = registry.register("app", object)

    definition.add_method_call("add", [Reference("greet"), "greet"])
    definition.add_argument([Reference("greet")])

    assert definition.method_calls == [
        MethodCall("add", [Reference("greet"), "greet"])
    ]
    assert definition.arguments == [[Reference("greet")]]


def test_qualified_name_rejects_non_classes():
    with pytest.raises(ValueError, match="is not a class"):
        qualified_name(42)


@pytest.mark.parametrize("declared_class", [len, GreetCommand(), 42])
def test_register_rejects_non_classes(registry, declared_class):
    with pytest.raises(InvalidComponentError, match="neither a class nor a class name"):
        registry.register("bad", declared_class, [tag("t")])

    assert "bad" not in registry


def test_register_rejects_non_class_interfaces(registry):
    with pytest.raises(InvalidComponentError, match="'greet'"):
        registry.register("greet", GreetCommand, interfaces=[len])
