"""Test the error taxonomy."""

import pytest

from ant_path_matcher import (
    ConfigurationError,
    InconsistentMatchStateError,
    InvalidArgumentError,
    PathMatcherError,
    PatternMismatchError,
)


class TestExceptions:
    def test_hierarchy(self):
        """Test that every error shares the package base class"""
        for error in (
            InvalidArgumentError,
            InconsistentMatchStateError,
            PatternMismatchError,
            ConfigurationError,
        ):
            assert issubclass(error, PathMatcherError)

    def test_builtin_bases(self):
        """Test the builtin exception each kind maps onto"""
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InconsistentMatchStateError, RuntimeError)
        assert issubclass(PatternMismatchError, LookupError)

    def test_pattern_mismatch_message(self):
        error = PatternMismatchError("/a/{b}", "/c")
        assert error.pattern == "/a/{b}"
        assert error.path == "/c"
        assert str(error) == "Pattern '/a/{b}' is not a match for '/c'"

    def test_catch_by_base(self, matcher):
        with pytest.raises(PathMatcherError):
            matcher.extract_uri_template_variables("/a", "/b")
