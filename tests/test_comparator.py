"""Tests for pattern specificity ordering."""

import itertools
import random

from ant_path_matcher import AntPathMatcher
from ant_path_matcher.comparator import AntPatternComparator, PatternInfo


class TestPatternInfo:
    """Test PatternInfo counters"""

    def test_counts(self):
        info = PatternInfo("/hotels/{hotel}/*/**")
        assert info.uri_vars == 1
        assert info.single_wildcards == 1
        assert info.double_wildcards == 1
        assert info.total_count == 4
        assert info.prefix_pattern
        assert not info.catch_all_pattern

    def test_catch_all(self):
        info = PatternInfo("/**")
        assert info.catch_all_pattern
        assert not info.prefix_pattern
        assert info.least_specific

    def test_none_is_least_specific(self):
        info = PatternInfo(None)
        assert info.least_specific
        assert info.length == 0

    def test_trailing_extension_wildcard_not_counted(self):
        """Test that a final .* is not a single wildcard"""
        assert PatternInfo("/hotels/new.*").single_wildcards == 0
        assert PatternInfo("/hotels/*.html").single_wildcards == 1

    def test_length_counts_variables_as_one(self):
        assert PatternInfo("/hotels/{hotel}").length == len("/hotels/#")
        assert PatternInfo("/hotels/{hotel:[0-9]+}/x").length == len("/hotels/#/x")
        assert PatternInfo("/hotels/*").length == len("/hotels/*")

    def test_custom_separator(self):
        assert PatternInfo("::**", "::").catch_all_pattern
        assert PatternInfo("::a::**", "::").prefix_pattern
        assert not PatternInfo("/**", "::").catch_all_pattern


class TestAntPatternComparator:
    """Test AntPatternComparator ordering rules"""

    def setup_method(self):
        self.comparator = AntPathMatcher().get_pattern_comparator("/hotels/new")

    def test_none_patterns(self):
        assert self.comparator(None, None) == 0
        assert self.comparator(None, "/hotels/new") > 0
        assert self.comparator("/hotels/new", None) < 0

    def test_equal_patterns(self):
        assert self.comparator("/hotels/new", "/hotels/new") == 0
        assert self.comparator("/hotels/*", "/hotels/*") == 0
        assert self.comparator("/hotels/{hotel}", "/hotels/{hotel}") == 0

    def test_catch_all_last(self):
        assert self.comparator("/**", "/hotels/{hotel}") > 0
        assert self.comparator("/hotels/{hotel}", "/**") < 0
        assert self.comparator("/**", "/**") == 0

    def test_exact_path_first(self):
        assert self.comparator("/hotels/new", "/hotels/*") < 0
        assert self.comparator("/hotels/*", "/hotels/new") > 0
        assert self.comparator("/hotels/new", "/hotels/{hotel}") < 0
        assert self.comparator("/hotels/new", "/hotels/new.*") < 0

    def test_prefix_patterns(self):
        """Test longer prefix patterns sort first"""
        assert self.comparator("/hotels/*/**", "/hotels/**") < 0
        assert self.comparator("/hotels/**", "/hotels/*/**") > 0
        assert self.comparator("/hotels/**", "/hotels/{hotel}") > 0
        assert self.comparator("/hotels/*", "/hotels/*/**") < 0

    def test_specificity_count(self):
        assert self.comparator(
            "/hotels/{hotel}/booking", "/hotels/{hotel}/bookings/{booking}"
        ) < 0
        assert self.comparator(
            "/hotels/{hotel}/bookings/{booking}/customers/{customer}", "/hotels/**/x"
        ) > 0

    def test_length(self):
        assert self.comparator("/hotels/{hotel}", "/hotels/{hotel}.*") > 0
        assert self.comparator("/hotels/ne*", "/hotels/n*") < 0

    def test_single_wildcards_before_variables(self):
        """Test that variables beat single wildcards when all else ties"""
        assert self.comparator("/hotels/{hotel}", "/hotels/*") < 0
        assert self.comparator("/hotels/*", "/hotels/{hotel}") > 0

    def test_sort(self, hotel_patterns):
        shuffled = list(hotel_patterns)
        random.Random(7).shuffle(shuffled)
        assert self.comparator.sort(shuffled) == hotel_patterns
        assert sorted(shuffled, key=self.comparator.sort_key()) == hotel_patterns

    def test_sort_with_none(self):
        assert self.comparator.sort([None, "/hotels/new"]) == ["/hotels/new", None]

    def test_sort_examples(self):
        assert AntPatternComparator("/hotels/new.html").sort(
            ["/hotels/{hotel}", "/hotels/new.*"]
        ) == ["/hotels/new.*", "/hotels/{hotel}"]

        assert AntPatternComparator("/web/endUser/action/login.html").sort(
            ["/**/login.*", "/**/endUser/action/login.*"]
        ) == ["/**/endUser/action/login.*", "/**/login.*"]

    def test_transitivity(self, hotel_patterns):
        """Test that A <= B and B <= C imply A <= C for the hotel routes"""
        patterns = hotel_patterns + ["/hotels/{id}/**", None]

        for a, b, c in itertools.product(patterns, repeat=3):
            if self.comparator(a, b) <= 0 and self.comparator(b, c) <= 0:
                assert self.comparator(a, c) <= 0, (a, b, c)

    def test_known_cycle_between_prefix_and_double_wildcard_patterns(self):
        """Test the ordering rules are not transitive for every pattern set.

        Prefix patterns are compared by length among themselves but by
        wildcard count against other ``**`` patterns, so these three form a
        cycle for /hotels/new. sort() still returns each pattern once.
        """
        shorter_prefix = "/hotels/**"
        interior = "/**/new"
        longer_prefix = "/hotels/*/**"

        assert self.comparator(shorter_prefix, interior) < 0
        assert self.comparator(interior, longer_prefix) < 0
        assert self.comparator(longer_prefix, shorter_prefix) < 0

        ordered = AntPatternComparator("/hotels/new").sort(
            [shorter_prefix, interior, longer_prefix]
        )
        assert sorted(ordered) == sorted([shorter_prefix, interior, longer_prefix])

    def test_antisymmetry(self, hotel_patterns):
        for a, b in itertools.product(hotel_patterns, repeat=2):
            forward = self.comparator(a, b)
            backward = self.comparator(b, a)
            assert (forward > 0) == (backward < 0)
            assert (forward == 0) == (backward == 0)
