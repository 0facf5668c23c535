# SPDX-License-Identifier: MIT
"""Unit tests for version string parsing."""

from dataclasses import FrozenInstanceError

import pytest

from cet_version import (
    ExtraType,
    ParsedVersion,
    classify_extra,
    parse_version_string,
)


class TestParseVersionString:
    """Tests for parse_version_string function."""

    def test_plain_word(self):
        """Test that a bare word becomes an arbitrary qualifier."""
        v = parse_version_string("develop")
        assert v.as_dict() == {
            "extra": "develop",
            "extra_text": "develop",
            "extra_type": 101,
        }

    def test_dotted_release_candidate(self):
        """Test parsing a release candidate after a dotted numeric run."""
        v = parse_version_string("1.5.rc7")
        assert v.as_dict() == {
            "major": "1",
            "minor": "5",
            "bits": ["1", "5"],
            "extra": "rc7",
            "extra_text": "rc",
            "extra_num": "7",
            "extra_type": -1,
        }

    def test_empty_segment_is_zero(self):
        """Test that consecutive delimiters produce a zero segment."""
        v = parse_version_string("1..5.")
        assert v.as_dict() == {
            "major": "1",
            "minor": "0",
            "patch": "5",
            "bits": ["1", "0", "5"],
        }

    def test_underscore_delimiters(self):
        """Test parsing underscore-delimited UPS style versions."""
        v = parse_version_string("v1_5_rc7")
        assert v.bits == ("1", "5")
        assert v.extra == "rc7"
        assert v.extra_type is ExtraType.PRERELEASE

    def test_leading_zeros_preserved(self):
        """Test that leading zeros are kept in the textual fields."""
        v = parse_version_string("02.04.03.rc07")
        assert v.major == "02"
        assert v.minor == "04"
        assert v.patch == "03"
        assert v.bits == ("02", "04", "03")
        assert v.extra_text == "rc"
        assert v.extra_num == "07"

    def test_patch_qualifier(self):
        """Test parsing a patch qualifier directly after the numeric run."""
        v = parse_version_string("1.2.0.0p1")
        assert v.bits == ("1", "2", "0", "0")
        assert v.patch == "0"
        assert v.extra == "p1"
        assert v.extra_text == "p"
        assert v.extra_num == "1"
        assert v.extra_type is ExtraType.PATCH

    def test_snapshot_timestamp(self):
        """Test parsing a snapshot qualifier with a dotted timestamp."""
        v = parse_version_string("2.3-snapshot-20210615000000.20003")
        assert v.bits == ("2", "3")
        assert v.extra == "snapshot-20210615000000.20003"
        assert v.extra_text == "snapshot-"
        assert v.extra_num == "20210615000000.20003"
        assert v.extra_type is ExtraType.SNAPSHOT

    def test_snapshot_without_numeric_part(self):
        """Test parsing a snapshot tag with no version numbers."""
        v = parse_version_string("snapshot-29100")
        assert v.bits == ()
        assert v.major is None
        assert v.extra_num == "29100"
        assert v.extra_type is ExtraType.SNAPSHOT

    def test_nightly(self):
        """Test parsing a nightly build tag."""
        v = parse_version_string("nightly-276")
        assert v.extra_text == "nightly-"
        assert v.extra_num == "276"
        assert v.extra_type is ExtraType.NIGHTLY

    def test_compound_tag(self):
        """Test that dash-joined words form a compound tag."""
        v = parse_version_string("art-develop-nightly")
        assert v.extra_text == "art-develop-nightly"
        assert v.extra_num is None
        assert v.extra_type == 103

    def test_numeric_only_tail(self):
        """Test a tail made only of digits."""
        v = parse_version_string("1.2-5")
        assert v.bits == ("1", "2")
        assert v.extra == "5"
        assert v.extra_text is None
        assert v.extra_num == "5"
        assert v.extra_type is ExtraType.PATCH

    def test_numeric_led_tail(self):
        """Test a tail starting with digits that is not a plain number."""
        v = parse_version_string("1.2-3b")
        assert v.extra_text == "3b"
        assert v.extra_num is None
        assert v.extra_type is ExtraType.NUMERIC_ARBITRARY

    def test_text_after_qualifier_number(self):
        """Test that text after the qualifier number is kept as a suffix."""
        v = parse_version_string("1.0-rc1-final")
        assert v.extra == "rc1-final"
        assert v.extra_text == "rc"
        assert v.extra_num == "1"
        assert v.extra_suffix == "-final"
        assert v.extra_type is ExtraType.PRERELEASE

    @pytest.mark.parametrize("version", ["1.0rc1.", "1.0rc1-", "1.0rc1_"])
    def test_trailing_separator_after_qualifier(self, version):
        """Test that a separator after the qualifier is ignored."""
        v = parse_version_string(version)
        assert v.extra == "rc1"
        assert v.extra_text == "rc"
        assert v.extra_num == "1"
        assert v.extra_suffix is None
        assert v.extra_type is ExtraType.PRERELEASE

    def test_trailing_separator_after_keyword(self):
        """Test that rc1. and rc. classify the same way."""
        assert parse_version_string("1.0rc.").extra_type is ExtraType.PRERELEASE
        assert parse_version_string("1.0rc.") == parse_version_string("1.0rc")

    def test_snapshot_with_extra_dotted_parts(self):
        """Test that a snapshot timestamp with more dotted parts stays a snapshot."""
        v = parse_version_string("2.3-snapshot-20210615.1.2")
        assert v.extra_text == "snapshot-"
        assert v.extra_num == "20210615.1"
        assert v.extra_suffix == ".2"
        assert v.extra_type is ExtraType.SNAPSHOT

    def test_empty_string(self):
        """Test that the empty string produces an empty record."""
        v = parse_version_string("")
        assert v == ParsedVersion()
        assert v.as_dict() == {}
        assert v.has_numeric is False

    def test_only_separators(self):
        """Test that separators alone produce an empty record."""
        assert parse_version_string("-") == ParsedVersion()
        assert parse_version_string("v.") == ParsedVersion()

    def test_same_string_parses_equal(self):
        """Test that two parses of the same string are equal."""
        assert parse_version_string("1.2.3rc4") == parse_version_string("1.2.3rc4")


class TestPrefixStripping:
    """Tests for the optional v / dot prefix."""

    @pytest.mark.parametrize("version", ["develop", "vdevelop", ".develop"])
    def test_prefixes_equivalent(self, version):
        """Test that v and dot prefixes carry no meaning."""
        assert parse_version_string(version) == parse_version_string("develop")

    def test_only_one_prefix_stripped(self):
        """Test that only a single prefix character is removed."""
        v = parse_version_string("vvdevelop")
        assert v.extra == "vdevelop"

    def test_uppercase_v_not_stripped(self):
        """Test that the v prefix is case sensitive."""
        v = parse_version_string("V1.2")
        assert v.bits == ()
        assert v.extra == "V1.2"

    @pytest.mark.parametrize("version", ["1pre7", "1.pre7", "1..-pre7", "1_pre7", "1-pre7"])
    def test_tail_separator_ignored(self, version):
        """Test that the separator before the qualifier is not significant."""
        v = parse_version_string(version)
        assert v.bits == ("1",)
        assert v.extra == "pre7"
        assert v.extra_text == "pre"
        assert v.extra_num == "7"


class TestSegmentCounts:
    """Tests for how numeric segments fill major/minor/patch and bits."""

    def test_one_segment(self):
        """Test a single numeric segment."""
        v = parse_version_string("7")
        assert (v.major, v.minor, v.patch) == ("7", None, None)
        assert v.bits == ("7",)

    def test_two_segments(self):
        """Test two numeric segments."""
        v = parse_version_string("7.1")
        assert (v.major, v.minor, v.patch) == ("7", "1", None)
        assert v.bits == ("7", "1")

    def test_three_segments(self):
        """Test three numeric segments."""
        v = parse_version_string("7.1.2")
        assert (v.major, v.minor, v.patch) == ("7", "1", "2")
        assert v.bits == ("7", "1", "2")

    def test_four_segments(self):
        """Test that a fourth segment only appears in bits."""
        v = parse_version_string("1.2.0.0")
        assert (v.major, v.minor, v.patch) == ("1", "2", "0")
        assert v.bits == ("1", "2", "0", "0")

    def test_six_segments(self):
        """Test a long dotted run."""
        v = parse_version_string("1_2_3_4_5_6")
        assert (v.major, v.minor, v.patch) == ("1", "2", "3")
        assert v.bits == ("1", "2", "3", "4", "5", "6")
        assert v.extra is None


class TestClassifyExtra:
    """Tests for qualifier classification."""

    @pytest.mark.parametrize("text", ["alpha", "a", "beta", "b", "pre", "preview", "rc", "c"])
    def test_prerelease_keywords(self, text):
        """Test recognized pre-release keywords."""
        assert classify_extra(text) is ExtraType.PRERELEASE

    def test_keywords_case_insensitive(self):
        """Test that keywords are matched regardless of case."""
        assert classify_extra("RC") is ExtraType.PRERELEASE
        assert classify_extra("Snapshot-") is ExtraType.SNAPSHOT

    def test_patch_keywords(self):
        """Test patch keywords."""
        assert classify_extra("p") is ExtraType.PATCH
        assert classify_extra("patch") is ExtraType.PATCH

    def test_no_qualifier(self):
        """Test that no text and no number means no qualifier."""
        assert classify_extra(None) is None
        assert classify_extra("") is None

    def test_arbitrary(self):
        """Test free text qualifiers."""
        assert classify_extra("versatility") is ExtraType.ARBITRARY
        assert classify_extra("art-develop-nightly") is ExtraType.COMPOUND
        assert classify_extra("3b") is ExtraType.NUMERIC_ARBITRARY


class TestInvalidInput:
    """Tests for input that is not a string."""

    def test_non_string_input(self):
        """Test that non-string input raises TypeError."""
        with pytest.raises(TypeError):
            parse_version_string(123)  # type: ignore

    def test_none_input(self):
        """Test that None input raises TypeError."""
        with pytest.raises(TypeError):
            parse_version_string(None)  # type: ignore


class TestParsedVersionRecord:
    """Tests for ParsedVersion equality and immutability."""

    def test_hashable(self):
        """Test that records are hashable."""
        v = parse_version_string("1.0.0")
        assert v in {v}

    def test_frozen(self):
        """Test that ParsedVersion is immutable."""
        v = parse_version_string("1.0.0")
        with pytest.raises(FrozenInstanceError):
            v.major = "2"  # type: ignore

    def test_is_prerelease(self):
        """Test the is_prerelease property."""
        assert parse_version_string("1.0beta2").is_prerelease is True
        assert parse_version_string("1.0p2").is_prerelease is False
        assert parse_version_string("1.0").is_prerelease is False
