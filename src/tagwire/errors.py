__all__ = [
    "WiringError",
    "AttributeMissingError",
    "InvalidConfigurationError",
    "TypeMismatchError",
    "DuplicateComponentError",
    "InvalidComponentError",
    "UnknownComponentError",
]


class WiringError(Exception):
    """Base class for all errors raised while wiring tag consumers."""

    pass


class AttributeMissingError(WiringError):
    """Raised when a tag lacks an attribute that must be declared on it."""

    def __init__(self, component_id: str, attribute: str, tag_name: str):
        super().__init__(
            f'Component "{component_id}" must define the "{attribute}" '
            f'attribute on "{tag_name}" tags.'
        )
        self.component_id = component_id
        self.attribute = attribute
        self.tag_name = tag_name


class InvalidConfigurationError(WiringError):
    """Raised when a consumer tag's attributes are inconsistent or malformed."""

    pass


class TypeMismatchError(WiringError):
    """Raised when a tagged component is not of the type a consumer requires."""

    def __init__(self, component_id: str, declared_class: str, required_type: str):
        super().__init__(
            f'Component "{component_id}" of class {declared_class} '
            f"is not an instance of {required_type}"
        )
        self.component_id = component_id
        self.declared_class = declared_class
        self.required_type = required_type


class DuplicateComponentError(WiringError):
    """Raised when two components are registered under the same id."""

    pass


class InvalidComponentError(WiringError):
    """Raised when a component is registered with something other than a class or class name."""

    pass


class UnknownComponentError(WiringError, KeyError):
    """Raised when a component id is not present in the registry."""

    pass
