import pytest

from zigo.versions import cmp_version, sort_versions, version_key


def test_dev_version_key():
    assert version_key("0.12.0-dev.1127+32bc07767") == (0, 12, 0, 1127)


def test_release_version_key():
    assert version_key("0.11.0") == (0, 11, 0, 0)


def test_non_numeric_parts_count_as_zero():
    assert version_key("abc") == (0, 0, 0, 0)


def test_too_many_components():
    with pytest.raises(ValueError):
        version_key("1.2.3.4.5")


def test_hash_ignored():
    assert cmp_version("0.12.0-dev.1127+32bc07767", "0.12.0-dev.1127+ffffffff") == 0


def test_ordering_of_dev_builds():
    assert cmp_version("0.11.0", "0.12.0-dev.1127+32bc07767") == -1
    assert cmp_version("0.12.0-dev.1127+32bc07767", "0.11.0") == 1
    assert cmp_version("0.12.0-dev.900+a", "0.12.0-dev.1127+b") == -1


@pytest.mark.parametrize(
    "a, b",
    [
        ("0.11.0", "0.10.1"),
        ("0.12.0-dev.1+abc", "0.12.0"),
        ("1.0.0", "1.0.0"),
        ("0.9.1", "0.13.0"),
    ],
)
def test_cmp_is_antisymmetric(a, b):
    assert cmp_version(a, b) == -cmp_version(b, a)
    assert cmp_version(a, a) == 0


def test_sort_versions():
    versions = ["0.13.0", "0.9.1", "0.12.0-dev.1127+32bc07767", "0.11.0", "0.10.1"]
    result = sort_versions(versions)
    assert result == ["0.9.1", "0.10.1", "0.11.0", "0.12.0-dev.1127+32bc07767", "0.13.0"]
    assert sorted(result) == sorted(versions)


def test_sort_versions_is_monotonic():
    result = sort_versions(["2.0.0", "0.1.0", "1.5.3", "1.5.3-dev.7+x", "0.0.1"])
    for left, right in zip(result, result[1:]):
        assert cmp_version(left, right) <= 0