"""Shared pytest fixtures for path matcher tests."""

from unittest.mock import Mock

import pytest

from ant_path_matcher import AntPathMatcher


@pytest.fixture
def matcher():
    """Create a matcher with the default configuration.

    Returns:
        AntPathMatcher: Matcher using "/" as separator
    """
    return AntPathMatcher()


@pytest.fixture
def insensitive_matcher():
    """Create a case-insensitive matcher.

    Returns:
        AntPathMatcher: Matcher ignoring case
    """
    return AntPathMatcher(case_sensitive=False)


@pytest.fixture
def mock_cache_logger(monkeypatch):
    """Mock the cache logger to capture log messages.

    Returns:
        Mock: Mocked logger
    """
    mock_log = Mock()
    monkeypatch.setattr("ant_path_matcher.cache.logger", mock_log)
    return mock_log


@pytest.fixture
def hotel_patterns():
    """Patterns competing for /hotels/new, most specific first.

    Returns:
        list: Patterns in their expected order
    """
    return [
        "/hotels/new",
        "/hotels/{id}/bookings",
        "/hotels/{id}",
        "/hotels/*",
        "/hotels/*/**",
        "/hotels/**",
        "/**",
    ]
