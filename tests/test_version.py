"""Tests for NuGet version parsing and ordering."""

import pytest

from versioning import NuGetVersion, VersionFormatError


class TestNuGetVersionParse:
    """Test version parsing."""

    def test_short_version_keeps_literal_text(self):
        """Short versions pad with zeros but str() keeps what was written."""
        version = NuGetVersion.parse("1.0")
        assert (version.major, version.minor, version.patch, version.revision) == (1, 0, 0, 0)
        assert str(version) == "1.0"
        assert version.to_normalized_string() == "1.0.0"

    def test_prerelease_and_metadata(self):
        """Release labels and metadata are split out."""
        version = NuGetVersion.parse("1.0.1-alpha.2+build.7")
        assert version.is_prerelease
        assert version.release_labels == ("alpha", "2")
        assert version.release == "alpha.2"
        assert version.metadata == "build.7"

    def test_four_part_version(self):
        """A non-zero revision is kept in the normalized form."""
        assert NuGetVersion.parse("1.2.3.4").to_normalized_string() == "1.2.3.4"
        assert NuGetVersion.parse("1.2.3.0").to_normalized_string() == "1.2.3"

    def test_version_text_drops_release_label(self):
        """version_text is the numeric part as written."""
        assert NuGetVersion.parse("2.0.1-beta").version_text == "2.0.1"
        assert NuGetVersion.parse("2.0+meta").version_text == "2.0"
        assert NuGetVersion(3, 1).version_text == "3.1.0"

    def test_surrounding_whitespace_ignored(self):
        """Whitespace around the version is not part of it."""
        assert str(NuGetVersion.parse("  1.2.3 ")) == "1.2.3"

    @pytest.mark.parametrize("text", ["", "a.b", "1.0.0.0.0", "1.0-", "1..0", "1.0.0-beta..1", "-1.0"])
    def test_invalid_versions(self, text):
        """Malformed versions raise VersionFormatError carrying the text."""
        with pytest.raises(VersionFormatError) as excinfo:
            NuGetVersion.parse(text)
        assert excinfo.value.text == text

    def test_none_is_rejected(self):
        """None is not a version."""
        with pytest.raises(VersionFormatError):
            NuGetVersion.parse(None)


class TestNuGetVersionComparison:
    """Test equality and precedence."""

    def test_equality_is_semantic(self):
        """Padding and metadata do not affect equality."""
        assert NuGetVersion.parse("1.0") == NuGetVersion.parse("1.0.0")
        assert NuGetVersion.parse("1.0.0+abc") == NuGetVersion.parse("1.0.0")
        assert NuGetVersion.parse("1.0.0.0") == NuGetVersion.parse("1.0.0")

    def test_release_labels_case_insensitive(self):
        """Labels compare and hash case-insensitively."""
        upper = NuGetVersion.parse("1.0.0-ALPHA")
        lower = NuGetVersion.parse("1.0.0-alpha")
        assert upper == lower
        assert hash(upper) == hash(lower)

    def test_prerelease_precedence(self):
        """Prereleases sort below the release, numeric labels numerically."""
        ordered = ["1.0.0-alpha", "1.0.0-beta.2", "1.0.0-beta.10", "1.0.0", "1.0.0.1", "1.0.1"]
        versions = [NuGetVersion.parse(v) for v in ordered]
        assert sorted(reversed(versions)) == versions

    def test_not_equal_to_other_types(self):
        """Comparison with a plain string is not equality."""
        assert NuGetVersion.parse("1.0.0") != "1.0.0"
