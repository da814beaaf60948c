"""
Tests for usage tracking.
"""

from ssp_blueprints.utils.usage import (
    USAGE_ID,
    parse_usage_identifier,
    with_usage_tracking,
)


class TestWithUsageTracking:
    """Tests for with_usage_tracking."""

    def test_no_props(self):
        """Test tracking without any stack props."""
        result = with_usage_tracking("qs-test")

        assert result == {"description": "SSP tracking (qs-test)"}

    def test_appends_to_description(self):
        """Test tracking appended to an existing description."""
        result = with_usage_tracking("qs-test", {"description": "foo"})

        assert result["description"] == "foo SSP tracking (qs-test)"

    def test_none_description(self):
        """Test a None description is treated as empty."""
        result = with_usage_tracking("qs-test", {"description": None})

        assert result["description"] == "SSP tracking (qs-test)"

    def test_empty_description(self):
        """Test an empty description yields no leading space."""
        result = with_usage_tracking("qs-test", {"description": ""})

        assert result["description"] == "SSP tracking (qs-test)"

    def test_leading_whitespace_stripped(self):
        """Test leading whitespace never appears in the output."""
        result = with_usage_tracking("qs-test", {"description": "  \n foo"})

        assert result["description"] == "foo SSP tracking (qs-test)"
        assert not result["description"][0].isspace()

    def test_other_fields_preserved(self):
        """Test non-description fields are passed through."""
        env = object()
        props = {"description": "foo", "env": env, "termination_protection": True}

        result = with_usage_tracking("qs-test", props)

        assert result["env"] is env
        assert result["termination_protection"] is True

    def test_input_not_mutated(self):
        """Test the input mapping is left untouched."""
        props = {"description": "foo", "stack_name": "bar"}

        result = with_usage_tracking("qs-test", props)

        assert props == {"description": "foo", "stack_name": "bar"}
        assert result is not props


class TestParseUsageIdentifier:
    """Tests for parse_usage_identifier."""

    def test_round_trip_default_id(self):
        """Test the identifier is recovered from a tracked description."""
        description = with_usage_tracking(USAGE_ID, {"description": "My blueprint"})["description"]

        assert parse_usage_identifier(description) == USAGE_ID

    def test_untracked_description(self):
        """Test descriptions without a tracking suffix."""
        assert parse_usage_identifier("Plain stack") is None
        assert parse_usage_identifier("") is None
        assert parse_usage_identifier(None) is None

    def test_identifier_with_parentheses(self):
        """Test identifiers containing parentheses are recovered whole."""
        description = with_usage_tracking("team (a)", {"description": "Shared (prod)"})["description"]

        assert parse_usage_identifier(description) == "team (a)"
