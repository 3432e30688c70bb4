from __future__ import annotations

import pytest

from rtpx import CSRC, SSRC, Version, VersionError, classify_version


@pytest.mark.parametrize(
    "value, expected",
    [(0, Version.RTP0), (1, Version.RTP1), (2, Version.RTP2)],
)
def test_classify_known_versions(value: int, expected: Version) -> None:
    assert classify_version(value) is expected


@pytest.mark.parametrize("value", [3, 4, -1, 255])
def test_classify_rejects_unknown_values(value: int) -> None:
    with pytest.raises(VersionError) as excinfo:
        classify_version(value)
    assert excinfo.value.value == value
    assert str(excinfo.value) == f"invalid version: {value}"


def test_version_error_equality() -> None:
    assert VersionError(3) == VersionError(3)
    assert VersionError(3) != VersionError(4)
    assert len({VersionError(3), VersionError(3)}) == 1


def test_identifiers_are_distinct_types() -> None:
    assert SSRC(7) == SSRC(7)
    assert CSRC(7) == CSRC(7)
    assert SSRC(7) != CSRC(7)
    assert int(SSRC(7)) == int(CSRC(7)) == 7


def test_identifier_string_is_hex() -> None:
    assert str(SSRC(0xCAFEBABE)) == "0xcafebabe"
    assert str(CSRC(1)) == "0x00000001"


@pytest.mark.parametrize("cls", [SSRC, CSRC])
@pytest.mark.parametrize("value", [-1, 0x1_0000_0000])
def test_identifiers_reject_out_of_range(cls, value: int) -> None:
    with pytest.raises(ValueError):
        cls(value)


@pytest.mark.parametrize("cls", [SSRC, CSRC])
def test_identifiers_reject_non_int(cls) -> None:
    with pytest.raises(TypeError):
        cls("1")
    with pytest.raises(TypeError):
        cls(True)
