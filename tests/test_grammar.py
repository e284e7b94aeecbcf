"""
Marker grammar tests

Tests which strings the marker pattern accepts, how the accepted ones are
split into marker / left colon / classes / right colon, and which
ill-formed markers fall through to plain text.
"""

import time

import pytest

from flexigraph.lib.grammar import REGEX, marker_has, marker_search, markers_find


# input, (marker, left, classes, right)
ACCEPTED = [
    ("~>", ("~", False, "", False)),
    ("=>", ("=", False, "", False)),
    ("=|>", ("=", False, "|", False)),
    ("=:|>", ("=", True, "|", False)),
    ("=|:>", ("=", False, "|", True)),
    ("=::>", ("=", True, "", True)),
    ("=a>", ("=", False, "a", False)),
    ("=1>", ("=", False, "1", False)),
    ("~s>", ("~", False, "s", False)),
    ("~s|>", ("~", False, "s|", False)),
    ("~|s>", ("~", False, "|s", False)),
    ("~:s:>", ("~", True, "s", True)),
    ("~:s>", ("~", True, "s", False)),
    ("~s:>", ("~", False, "s", True)),
    ("~gw>", ("~", False, "gw", False)),
    ("~gw:>", ("~", False, "gw", True)),
    ("~:gw>", ("~", True, "gw", False)),
    ("~:gw:>", ("~", True, "gw", True)),
    ("~|gw>", ("~", False, "|gw", False)),
    ("~g|w>", ("~", False, "g|w", False)),
    ("~gw|>", ("~", False, "gw|", False)),
    ("=:g2c>", ("=", True, "g2c", False)),
    ("=g2c:>", ("=", False, "g2c", True)),
    ("=:g2c:>", ("=", True, "g2c", True)),
    ("=|g2c>", ("=", False, "|g2c", False)),
    ("=g|2c>", ("=", False, "g|2c", False)),
    ("=g2|c>", ("=", False, "g2|c", False)),
    ("=g2c|>", ("=", False, "g2c|", False)),
    ("~w:>", ("~", False, "w", True)),
    ("~:|:>", ("~", True, "|", True)),
]

REJECTED = [
    "~A>",
    "~ç>",
    "=ç>",
    "~_>",
    "=_>",
    "~dg::>",
    "~::dg>",
    "~:::>",
    "~::|>",
    "~|::>",
    "~w||>",
    "-> content",
    "~ > content",
]


class TestAcceptedMarkers:
    """Markers the grammar must recognize"""

    @pytest.mark.parametrize("text, expected", ACCEPTED)
    def test_marker_parts(self, text, expected):
        """Marker character, colons and class run are captured"""
        match = marker_search(text)

        assert match is not None
        assert (match.marker, match.left, match.classes, match.right) == expected
        assert match.start == 0
        assert match.end == len(text)

    def test_unanchored_search_tilde_equals(self):
        """'~=>' matches on the '=' and leaves the '~' in front"""
        match = marker_search("~=>")

        assert match.marker == "="
        assert match.start == 1

    def test_unanchored_search_equals_tilde(self):
        """'=~>' matches on the '~'"""
        match = marker_search("=~>")

        assert match.marker == "~"
        assert match.start == 1

    def test_trailing_whitespace_consumed(self):
        """Spaces and newlines after '>' belong to the marker"""
        match = marker_search("~w> \n\t hello")

        assert match.end == len("~w> \n\t ")

    def test_no_whitespace_needed(self):
        """Content may follow '>' directly"""
        match = marker_search("~|>continue")

        assert match.classes == "|"
        assert match.end == 3

    def test_marker_in_the_middle(self):
        """Markers are found anywhere, not only at line start"""
        match = marker_search("abc ~w|> hello")

        assert match.start == 4
        assert match.classes == "w|"


class TestRejectedMarkers:
    """Ill-formed markers must not match at all"""

    @pytest.mark.parametrize("text", REJECTED)
    def test_no_match(self, text):
        assert REGEX.search(text) is None
        assert marker_search(text) is None
        assert not marker_has(text)

    def test_uppercase_after_valid_prefix(self):
        """An uppercase letter inside the run breaks the marker"""
        assert marker_search("~wA>") is None


class TestFindAll:
    """Global, non-overlapping scan"""

    def test_two_markers(self):
        text = "~w:> hello\n~:s> xxx"
        matches = markers_find(text)

        assert [m.start for m in matches] == [0, 11]
        assert [m.classes for m in matches] == ["w", "s"]

    def test_many_markers_in_one_text(self):
        text = " bbb ~>\nccc\n~|> yyy\n~0:> zzz"
        matches = markers_find(text)

        assert len(matches) == 3
        assert text[matches[0].end:matches[1].start] == "ccc\n"
        assert text[matches[2].end:] == "zzz"

    def test_no_markers(self):
        assert markers_find("plain text -> arrow") == []

    def test_double_marker_char(self):
        """'~~>' holds one marker, starting at the second '~'"""
        matches = markers_find("~~> content")

        assert len(matches) == 1
        assert matches[0].start == 1


class TestLongClassRuns:
    """Scanning stays linear on unterminated class runs"""

    @pytest.mark.parametrize("text", [
        "~" + "a" * 50000,
        "=:" + "a" * 25000 + "|" + "b" * 25000,
        ("~" + "a" * 5000 + " ") * 10,
    ])
    def test_unterminated_run(self, text):
        started = time.perf_counter()

        assert markers_find(text) == []
        assert not marker_has(text)
        assert time.perf_counter() - started < 1.0

    def test_long_run_still_matches(self):
        text = "~" + "a" * 50000 + ":> tail"
        (match,) = markers_find(text)

        assert match.classes == "a" * 50000
        assert match.right
        assert text[match.end:] == "tail"
