import pytest

from n8lang.semver import SemVer, validate_semver


def test_parse_plain_version():
    version = SemVer.parse("1.2.3")
    assert version == SemVer(1, 2, 3)
    assert version.pre_release is None
    assert version.build_metadata is None


def test_parse_with_pre_release_and_build():
    version = SemVer.parse("1.0.0-alpha.1+build.5")
    assert (version.major, version.minor, version.patch) == (1, 0, 0)
    assert version.pre_release == "alpha.1"
    assert version.build_metadata == "build.5"


def test_parse_build_only():
    version = SemVer.parse("2.4.6+exp-sha")
    assert version.pre_release is None
    assert version.build_metadata == "exp-sha"


def test_default_string_form():
    assert str(SemVer(1, 0, 0)) == "1.0.0"


@pytest.mark.parametrize(
    "text",
    ["0.0.1", "1.0.0", "10.20.30", "1.0.0-rc.1", "1.0.0+20130313", "3.1.4-beta-2+meta.data"],
)
def test_round_trip(text):
    assert validate_semver(text) is True
    assert str(SemVer.parse(text)) == text


@pytest.mark.parametrize(
    "text",
    ["", "1.2", "v1.2.3", "1.2.3-", "1.2.3+", "1.2.3.4", "1.2.3\n", "a.b.c", "1.2.3-a_b", "\u0661.2.3"],
)
def test_invalid_versions(text):
    assert validate_semver(text) is False
    assert SemVer.parse(text) is None


def test_fields_can_be_changed():
    version = SemVer.parse("1.2.3")
    version.major = 4
    version.pre_release = "dev"
    version.build_metadata = "local"
    assert str(version) == "4.2.3-dev+local"
    assert validate_semver(str(version)) is True


def test_leading_zeros_are_read_as_numbers():
    version = SemVer.parse("01.002.3")
    assert (version.major, version.minor, version.patch) == (1, 2, 3)