"""Tests for identifiers.py - Norwegian identifier display formatting."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from nordlocale.runtime.identifiers import (
    format_norwegian_organization_number,
    format_norwegian_person_number,
)


class TestPersonNumber:
    """Test fødselsnummer grouping."""

    def test_eleven_characters(self) -> None:
        """11 characters split 6 + 5."""
        assert format_norwegian_person_number("12345678901") == "123456 78901"

    def test_wrong_length_unchanged(self) -> None:
        """Other lengths are returned unchanged."""
        assert format_norwegian_person_number("1234567890") == "1234567890"
        assert format_norwegian_person_number("123456789012") == "123456789012"
        assert format_norwegian_person_number("") == ""

    def test_no_checksum_validation(self) -> None:
        """Any 11 characters are formatted, digits or not."""
        assert format_norwegian_person_number("abcdefghijk") == "abcdef ghijk"

    @given(st.text(max_size=20).filter(lambda s: len(s) != 11))
    def test_wrong_length_property(self, value: str) -> None:
        """Input whose length is not 11 is returned unchanged."""
        assert format_norwegian_person_number(value) == value

    @given(st.text(alphabet="0123456789", min_size=11, max_size=11))
    def test_removing_space_restores_input(self, value: str) -> None:
        """Formatting only inserts a single space at position 6."""
        formatted = format_norwegian_person_number(value)
        assert formatted[6] == " "
        assert formatted.replace(" ", "") == value


class TestOrganizationNumber:
    """Test organisasjonsnummer grouping."""

    def test_nine_characters(self) -> None:
        """9 characters split 3 + 3 + 3."""
        assert format_norwegian_organization_number("123456789") == "123 456 789"

    def test_wrong_length_unchanged(self) -> None:
        """Other lengths are returned unchanged."""
        assert format_norwegian_organization_number("12345678") == "12345678"
        assert format_norwegian_organization_number("123 456 789") == "123 456 789"

    @given(st.text(max_size=20).filter(lambda s: len(s) != 9))
    def test_wrong_length_property(self, value: str) -> None:
        """Input whose length is not 9 is returned unchanged."""
        assert format_norwegian_organization_number(value) == value

    @given(st.text(alphabet="0123456789", min_size=9, max_size=9))
    def test_groups_of_three(self, value: str) -> None:
        """Output is three space-separated groups of the input."""
        assert format_norwegian_organization_number(value).split(" ") == [
            value[:3],
            value[3:6],
            value[6:],
        ]
