"""Unit tests for scanner.patterns module."""

from pathlib import Path

import pytest

from harvester.models import Garbage, Movie, ShowEpisode
from harvester.scanner.patterns import (
    GARBAGE_EXTENSIONS,
    RULES,
    VIDEO_EXTENSIONS,
    classify,
    classify_name,
    classify_with_reason,
    get_extension,
    is_garbage_file,
    is_video_file,
    match_dash_episode,
    match_movie_year,
    match_quoted_episode,
    match_season_episode,
    match_trailing_episode,
    normalize_stem,
)


class TestNormalizeStem:
    """Tests for normalize_stem() function."""

    @pytest.mark.parametrize("stem,expected", [
        ("Show Name", "show name"),
        ("Some.Movie.1999.BluRay", "some movie 1999 bluray"),
        ("Show_Name_S01E02_x", "show name s01e02 x"),
        ("[Group] Show Name - 01", "show name - 01"),
        ("[Group] Show_Name - 01 [1080p]", "show name - 01"),
        ("Show.Name.[Group].S01E01.x", "show name s01e01 x"),
        ("[A][B] Show - 02", "show - 02"),
    ])
    def test_normalize_stem(self, stem, expected):
        assert normalize_stem(stem) == expected


class TestGarbage:
    """Tests for recognized non-media extensions."""

    @pytest.mark.parametrize("extension", sorted(GARBAGE_EXTENSIONS))
    def test_garbage_regardless_of_name(self, extension):
        """Test that garbage extensions never go through name parsing."""
        assert classify(f"Show Name S01E02 x.{extension}") == Garbage()
        assert classify(f"Some Movie 1999.{extension}") == Garbage()
        assert classify(f"gibberish.{extension}") == Garbage()

    def test_garbage_case_insensitive(self):
        assert classify("COVER.JPG") == Garbage()

    def test_garbage_has_no_reason(self):
        assert classify_with_reason("movie.nfo") == (Garbage(), None)


class TestVideoClassification:
    """Tests for the classification cascade on video files."""

    @pytest.mark.parametrize("filename,expected", [
        # Explicit season/episode marker
        ("Show Name S02E05 extra.mkv", ShowEpisode("show name", 2, 5)),
        ("Show.Name.s10e100.720p.mkv", ShowEpisode("show name", 10, 100)),
        ("[Group] Show_Name_S01E03_1080p_[ABCD1234].mkv", ShowEpisode("show name", 1, 3)),
        # Dash-separated episode
        ("Series Name - 13.mkv", ShowEpisode("series name", 1, 13)),
        ("[Group] Series_Name - 07v2 [720p].mkv", ShowEpisode("series name", 1, 7)),
        ("Show - 12 END.mp4", ShowEpisode("show", 1, 12)),
        ("Show - 03 (BD 1080p).mkv", ShowEpisode("show", 1, 3)),
        # Quoted episode title
        ("Show E07 'The Title'.mkv", ShowEpisode("show", 1, 7)),
        ("Show e12 END 'Finale'.mkv", ShowEpisode("show", 1, 12)),
        # Bare trailing episode number
        ("Show Name 12 (BD) v2.mkv", ShowEpisode("show name", 1, 12)),
        ("Show 12 END.mkv", ShowEpisode("show", 1, 12)),
        ("Show Name 1071.mkv", ShowEpisode("show name", 1, 1071)),
        ("Show 0.mkv", ShowEpisode("show", 1, 0)),
        # Movie with year
        ("Some Movie 1999.mkv", Movie("some movie", 1999)),
        ("Some.Movie.1999.1080p.BluRay.mkv", Movie("some movie", 1999)),
        ("2001 A Space Odyssey 1968 Remastered.mp4", Movie("2001 a space odyssey", 1968)),
        ("Some Movie 2019 (Director's Cut).mkv", Movie("some movie", 2019)),
    ])
    def test_classify(self, filename, expected):
        assert classify(filename) == expected

    def test_video_extension_case_insensitive(self):
        assert classify("Show - 01.MKV") == ShowEpisode("show", 1, 1)

    def test_full_path_uses_file_name_only(self):
        path = Path("/downloads/Season 3 pack/Show - 04.mkv")
        assert classify(path) == ShowEpisode("show", 1, 4)

    def test_unknown_pattern(self):
        record, reason = classify_with_reason("randomname.mkv")
        assert record is None
        assert reason == "unknown filename pattern: 'randomname'"

    @pytest.mark.parametrize("filename", [
        "movie- 1999 x.mkv",
        "movie 1999 -x.mkv",
        "Show S00E01 x.mkv",
        "Show S01E02.mkv",
    ])
    def test_misses(self, filename):
        """Test names no rule accepts, including out-of-range seasons."""
        assert classify(filename) is None


class TestCascadeOrder:
    """Tests that overlapping rules resolve in priority order."""

    def test_rules_order(self):
        assert RULES == (
            match_season_episode,
            match_dash_episode,
            match_quoted_episode,
            match_trailing_episode,
            match_movie_year,
        )

    def test_explicit_marker_beats_year(self):
        assert classify_name("show 2019 s01e02 x") == ShowEpisode("show 2019", 1, 2)

    def test_dash_beats_trailing_number(self):
        assert match_trailing_episode("show 2 - 05") == ShowEpisode("show 2 -", 1, 5)
        assert classify_name("show 2 - 05") == ShowEpisode("show 2", 1, 5)

    def test_trailing_number_defers_years(self):
        assert match_trailing_episode("some movie 1999") is None
        assert match_movie_year("some movie 1999") == Movie("some movie", 1999)

    def test_quoted_before_trailing(self):
        assert match_quoted_episode("show e05 'x'") == ShowEpisode("show", 1, 5)
        assert match_trailing_episode("show e05 'x'") is None

    def test_each_rule_misses_unrelated_names(self):
        for rule in RULES:
            assert rule("just a name") is None


class TestNumericCaptures:
    """Captures that int() rejects make the rule miss instead of raising."""

    HUGE = "9" * 5000

    @pytest.mark.parametrize("filename", [
        f"show s01e{HUGE} x.mkv",
        f"show s{HUGE}e01 x.mkv",
        f"show - {HUGE}.mkv",
        f"show e{HUGE} 'title'.mkv",
        f"show {HUGE}.mkv",
    ])
    def test_oversized_number_is_a_miss(self, filename):
        assert classify(filename) is None

    def test_oversized_number_reports_pattern(self):
        record, reason = classify_with_reason(f"show - {self.HUGE}.mkv")
        assert record is None
        assert reason.startswith("unknown filename pattern:")


class TestExtensions:
    """Tests for extension dispatch."""

    def test_default_sets_are_disjoint(self):
        assert not VIDEO_EXTENSIONS & GARBAGE_EXTENSIONS

    @pytest.mark.parametrize("filename,expected", [
        ("a.MKV", "mkv"),
        ("a.b.mp4", "mp4"),
        ("README", ""),
    ])
    def test_get_extension(self, filename, expected):
        assert get_extension(filename) == expected

    def test_unknown_extension(self):
        record, reason = classify_with_reason("file.xyz")
        assert record is None
        assert reason.startswith("unknown extension:")

    def test_no_extension(self):
        assert classify("README") is None

    def test_is_video_and_garbage(self):
        assert is_video_file("a.mkv") is True
        assert is_video_file("a.srt") is False
        assert is_garbage_file("a.srt") is True
        assert is_garbage_file("a.mkv") is False

    def test_classification_uses_extension_helpers(self, mocker):
        mocker.patch("harvester.scanner.patterns.is_garbage_file", return_value=True)
        assert classify("Show - 01.mkv") == Garbage()

        mocker.patch("harvester.scanner.patterns.is_garbage_file", return_value=False)
        mocker.patch("harvester.scanner.patterns.is_video_file", return_value=False)
        assert classify("Show - 01.mkv") is None

    def test_custom_video_extensions(self):
        assert classify("Show - 01.avi") is None
        assert classify("Show - 01.avi", video_extensions=[".AVI"]) == ShowEpisode("show", 1, 1)

    def test_custom_garbage_extensions(self):
        assert classify("poster.webp") is None
        assert classify("poster.webp", garbage_extensions=["webp"]) == Garbage()
