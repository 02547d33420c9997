"""Tests for target framework parsing and identity."""

import pytest

from frameworks import ANY, FrameworkIdentity


def fw(text):
    """Shorthand for FrameworkIdentity.parse."""
    return FrameworkIdentity.parse(text)


class TestFrameworkParse:
    """Test recognized framework monikers."""

    def test_short_and_full_names_equal(self):
        """net45 and its full name are the same framework."""
        assert fw("net45") == fw(".NETFramework,Version=v4.5")
        assert str(fw("net45")) == ".NETFramework,Version=v4.5"

    def test_identifier_case_insensitive(self):
        """Identifier spelling case does not matter for known frameworks."""
        assert fw("NET45") == fw("net45")

    def test_client_profile(self):
        """net40-client carries the Client profile and differs from net40."""
        client = fw("net40-client")
        assert client.profile == "Client"
        assert str(client) == ".NETFramework,Version=v4.0,Profile=Client"
        assert client != fw("net40")
        assert client.short_folder_name == "net40-client"

    def test_silverlight_windows_phone_profile(self):
        """sl4-wp is Silverlight 4 with the WindowsPhone profile."""
        framework = fw("sl4-wp")
        assert framework.identifier == "Silverlight"
        assert framework.version == (4, 0, 0, 0)
        assert framework.profile == "WindowsPhone"
        assert framework.short_folder_name == "sl40-wp"

    def test_undotted_version_digits(self):
        """Each undotted digit is one version component."""
        framework = fw("net403")
        assert framework.version == (4, 0, 3, 0)
        assert framework.framework_name == ".NETFramework,Version=v4.0.3"

    def test_dotted_version(self):
        """Dotted versions allow components above nine."""
        framework = fw("uap10.0")
        assert framework.version == (10, 0, 0, 0)
        assert framework.short_folder_name == "uap10.0"

    def test_windows_phone(self):
        """wp8 is WindowsPhone 8.0."""
        assert fw("wp8") == fw("WindowsPhone,Version=v8.0")

    def test_full_name_with_profile(self):
        """The Profile key in full names is honored."""
        assert fw(".NETFramework,Version=v4.0,Profile=Client") == fw("net40-client")

    def test_portable_member_order_ignored(self):
        """Portable profiles compare by their member set."""
        assert fw("portable-net45+win8") == fw("portable-win8+net45")
        assert not fw("portable-net45+win8").is_unsupported

    def test_empty_means_any(self):
        """Missing and empty monikers resolve to ANY."""
        assert fw(None) is ANY
        assert fw("  ") == FrameworkIdentity.ANY
        assert ANY.is_any
        assert str(ANY) == "Any,Version=v0.0"


class TestUnsupportedFrameworks:
    """Test the Unsupported marker."""

    @pytest.mark.parametrize("text", [
        "future51",
        "futurevnext10.0",
        "some4~new5^conventions10",
        ".NETPortable0.0-net403+sl5+netcore45+wp8+MonoAndroid1+MonoTouch1",
        "portable-net45+future1",
        "net12345",
        "net40-client, net40",
        ".NETFramework,Version=vX",
    ])
    def test_unrecognized_is_unsupported(self, text):
        """Unrecognized text keeps its raw string."""
        framework = fw(text)
        assert framework.is_unsupported
        assert framework.raw == text
        assert str(framework) == text

    def test_unsupported_equality_uses_raw_string(self):
        """Unsupported frameworks are equal only for identical raw strings."""
        assert fw("future51") == fw("future51")
        assert fw("future51") != fw("future50")
        assert fw("Future51") != fw("future51")

    def test_unsupported_never_equals_known(self):
        """A known framework never equals an unsupported one."""
        assert fw("future51") != fw("net45")
        assert len({fw("future51"), fw("future50"), fw("net45"), fw("net45")}) == 3


class TestCompatibility:
    """Test the exact-match compatibility predicate."""

    def test_exact_match_only(self):
        """Only identical frameworks are compatible at this layer."""
        assert fw("net45").is_compatible_with(fw(".NETFramework,Version=v4.5"))
        assert not fw("net45").is_compatible_with(fw("net40"))
        assert not fw("net40").is_compatible_with(fw("net45"))
