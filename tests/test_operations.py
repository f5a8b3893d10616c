"""Tests for mapping operations."""
from types import SimpleNamespace

import pytest

from objmap.configuration.options import Options
from objmap.mapping_operation import (
    DefaultMappingOperation,
    FromProperty,
    Ignore,
    MapFrom,
    Operation,
    SetTo,
)
from objmap.naming import CamelCaseNamingConvention, SnakeCaseNamingConvention


@pytest.fixture
def naming_options():
    """Options translating camelCase destinations to snake_case sources"""
    return Options(
        source_member_naming_convention=SnakeCaseNamingConvention(),
        destination_member_naming_convention=CamelCaseNamingConvention(),
    )


class TestOperationFactory:
    """Test the Operation factory."""

    def test_factory_variants(self):
        """Test each factory method builds its variant."""
        assert isinstance(Operation.map_from(len), MapFrom)
        assert isinstance(Operation.ignore(), Ignore)
        assert isinstance(Operation.from_property("name"), FromProperty)
        assert isinstance(Operation.set_to(1), SetTo)
        assert isinstance(Operation.default(), DefaultMappingOperation)

    def test_new_operation_has_no_options(self):
        """Test options are only set by injection."""
        operation = Operation.ignore()
        assert operation.get_options() is None

        options = Options()
        operation.set_options(options)
        assert operation.get_options() is options

    def test_equality_ignores_options(self):
        """Test operations compare by configuration."""
        first = Operation.from_property("name")
        second = Operation.from_property("name")
        first.set_options(Options())

        assert first == second
        assert Operation.from_property("name") != Operation.from_property("email")
        assert Operation.ignore() != Operation.default()

    def test_operations_are_hashable(self):
        """Test operations can be used in sets and as dict keys."""
        operations = {Operation.ignore(), Operation.ignore(), Operation.from_property("name")}
        assert len(operations) == 2

        first = Operation.set_to(1)
        second = Operation.set_to(1.0)
        assert first == second
        assert hash(first) == hash(second)
        assert {first: "constant"}[second] == "constant"


class TestDefaultMappingOperation:
    """Test the convention based fallback."""

    def test_copies_same_name_from_dict(self):
        """Test same-named dict key is copied."""
        destination = {}
        DefaultMappingOperation().map_property("name", {"name": "Ada"}, destination)

        assert destination == {"name": "Ada"}

    def test_copies_same_name_from_object(self):
        """Test same-named attribute is copied."""
        destination = SimpleNamespace()
        DefaultMappingOperation().map_property("age", SimpleNamespace(age=36), destination)

        assert destination.age == 36

    def test_missing_source_property_is_skipped(self):
        """Test nothing is written when the source lacks the property."""
        destination = {}
        DefaultMappingOperation().map_property("age", {"name": "Ada"}, destination)

        assert destination == {}

    def test_naming_conventions_translate_name(self, naming_options):
        """Test destination names are translated to the source convention."""
        operation = DefaultMappingOperation()
        operation.set_options(naming_options)
        destination = {}

        operation.map_property("firstName", {"first_name": "Ada"}, destination)

        assert operation.get_source_property_name("firstName") == "first_name"
        assert destination == {"firstName": "Ada"}

    def test_ignore_null_properties(self):
        """Test None values are skipped when configured."""
        operation = DefaultMappingOperation()
        operation.set_options(Options(ignore_null_properties=True))
        destination = {"name": "kept"}

        operation.map_property("name", {"name": None}, destination)

        assert destination == {"name": "kept"}

    def test_null_is_copied_by_default(self):
        """Test None values are copied unless configured otherwise."""
        destination = {"name": "old"}
        DefaultMappingOperation().map_property("name", {"name": None}, destination)

        assert destination == {"name": None}


class TestCustomOperations:
    """Test MapFrom, Ignore, FromProperty and SetTo."""

    def test_map_from_receives_source(self):
        """Test the callback gets the whole source object."""
        operation = MapFrom(lambda source: f"{source['first']} {source['last']}")
        destination = {}

        operation.map_property("full_name", {"first": "Ada", "last": "Lovelace"}, destination)

        assert destination == {"full_name": "Ada Lovelace"}

    def test_ignore_leaves_destination(self):
        """Test ignore does nothing."""
        destination = {"password": "secret"}
        Ignore().map_property("password", {"password": "changed"}, destination)

        assert destination == {"password": "secret"}

    def test_from_property(self):
        """Test reading a differently named property."""
        destination = SimpleNamespace()
        FromProperty("mail").map_property("email", SimpleNamespace(mail="a@b.c"), destination)

        assert destination.email == "a@b.c"

    def test_set_to(self):
        """Test constant values."""
        destination = {}
        SetTo("active").map_property("status", {}, destination)

        assert destination == {"status": "active"}

    def test_describe(self):
        """Test human readable descriptions."""
        def full_name(source):
            return source

        assert MapFrom(full_name).describe().startswith("MapFrom(")
        assert "full_name" in MapFrom(full_name).describe()
        assert FromProperty("mail").describe() == "FromProperty('mail')"
        assert SetTo(1).describe() == "SetTo(1)"
        assert repr(Ignore()) == "<Ignore>"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
