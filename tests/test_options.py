import pytest

from tagwire.domain import ResolvedOptions, tag
from tagwire.errors import AttributeMissingError, InvalidConfigurationError
from tagwire.options import resolve_options


def consumer(**attributes):
    return tag("tag.consumer", attributes)


def test_defaults():
    assert resolve_options("app", consumer(tag="t")) == ResolvedOptions(
        target_tag="t",
        index_mode=None,
        key_attribute=None,
        use_reference=True,
        required_type=None,
        multiple=False,
    )


def test_key_implies_index_by_key():
    options = resolve_options("app", consumer(tag="t", key="alias"))

    assert options.index_mode == "key"
    assert options.key_attribute == "alias"


def test_explicit_index_by_class_keeps_key():
    options = resolve_options(
        "app", tag("tag.consumer", {"index-by": "class"}, tag="t", key="alias")
    )

    assert options.index_mode == "class"
    assert options.key_attribute == "alias"


def test_all_options():
    options = resolve_options(
        "app",
        tag(
            "tag.consumer",
            {"index-by": "key"},
            tag="t",
            key="alias",
            reference="false",
            instanceof="acme.Command",
            multiple=True,
        ),
    )

    assert options == ResolvedOptions("t", "key", "alias", False, "acme.Command", True)


def test_missing_tag_raises():
    with pytest.raises(AttributeMissingError) as raised:
        resolve_options("app", consumer(method="add"))

    assert raised.value.component_id == "app"
    assert raised.value.attribute == "tag"


def test_unknown_index_mode_raises():
    with pytest.raises(InvalidConfigurationError, match="'name'.*expected one of"):
        resolve_options("app", tag("tag.consumer", {"index-by": "name"}, tag="t"))


def test_index_by_key_without_key_raises():
    with pytest.raises(InvalidConfigurationError, match='does not define the "key"'):
        resolve_options("app", tag("tag.consumer", {"index-by": "key"}, tag="t"))


def test_malformed_flag_raises():
    with pytest.raises(InvalidConfigurationError, match='"multiple"'):
        resolve_options("app", consumer(tag="t", multiple="several"))
