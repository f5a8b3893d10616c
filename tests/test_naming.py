"""Tests for naming conventions."""
import pytest

from objmap.naming import (
    CamelCaseNamingConvention,
    PascalCaseNamingConvention,
    SnakeCaseNamingConvention,
    get_naming_convention,
    split_words,
)


class TestNamingConventions:
    """Test name translation."""

    def test_split_words(self):
        """Test word splitting across styles."""
        assert split_words("first_name") == ["first", "name"]
        assert split_words("firstName") == ["first", "name"]
        assert split_words("FirstName") == ["first", "name"]
        assert split_words("HTTPServer") == ["http", "server"]
        assert split_words("userID") == ["user", "id"]

    def test_snake_case(self):
        """Test snake_case output."""
        convention = SnakeCaseNamingConvention()
        assert convention.translate("firstName") == "first_name"
        assert convention.translate("FirstName") == "first_name"
        assert convention.translate("first_name") == "first_name"

    def test_camel_case(self):
        """Test camelCase output."""
        convention = CamelCaseNamingConvention()
        assert convention.translate("first_name") == "firstName"
        assert convention.translate("FirstName") == "firstName"
        assert convention.translate("email") == "email"

    def test_pascal_case(self):
        """Test PascalCase output."""
        convention = PascalCaseNamingConvention()
        assert convention.translate("first_name") == "FirstName"
        assert convention.translate("firstName") == "FirstName"

    def test_equality_by_type(self):
        """Test conventions compare by type."""
        assert SnakeCaseNamingConvention() == SnakeCaseNamingConvention()
        assert SnakeCaseNamingConvention() != CamelCaseNamingConvention()

    def test_get_naming_convention(self):
        """Test lookup by short name."""
        assert isinstance(get_naming_convention("snake"), SnakeCaseNamingConvention)
        assert isinstance(get_naming_convention(" Camel "), CamelCaseNamingConvention)
        assert isinstance(get_naming_convention("pascal"), PascalCaseNamingConvention)

    def test_get_unknown_naming_convention(self):
        """Test unknown names are rejected."""
        with pytest.raises(ValueError):
            get_naming_convention("kebab")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
