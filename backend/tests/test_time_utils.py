from datetime import datetime, timedelta, timezone

import pytest

from skitrack.core.time_utils import format_rfc3339, normalize_rfc3339, parse_rfc3339


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-02-20T10:00:00Z", datetime(2024, 2, 20, 10, 0, tzinfo=timezone.utc)),
        ("2024-02-20T10:00:01.2Z", datetime(2024, 2, 20, 10, 0, 1, 200000, tzinfo=timezone.utc)),
        ("2024-02-20t10:00:01.123456789z", datetime(2024, 2, 20, 10, 0, 1, 123456, tzinfo=timezone.utc)),
        ("2024-02-20T11:00:00+01:00", datetime(2024, 2, 20, 10, 0, tzinfo=timezone.utc)),
        ("2024-02-20 04:30:00-05:30", datetime(2024, 2, 20, 10, 0, tzinfo=timezone.utc)),
    ],
)
def test_parse_valid(value, expected):
    parsed = parse_rfc3339(value)
    assert parsed == expected
    assert parsed.utcoffset() == timedelta(0)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "yesterday",
        "2024-02-20",
        "2024-02-20T10:00:00",  # no offset
        "2024-02-20T10:00Z",  # no seconds
        "2024-13-01T10:00:00Z",
        "2024-02-30T10:00:00Z",
        "2024-02-20T10:00:00+25:00",
        "2024-02-20T10:00:00.Z",
        1708423200,
        None,
    ],
)
def test_parse_invalid(value):
    with pytest.raises(ValueError):
        parse_rfc3339(value)


def test_format_is_fixed_width_utc():
    cet = timezone(timedelta(hours=1))
    assert format_rfc3339(datetime(2024, 2, 20, 11, 0, 1, 200000, tzinfo=cet)) == (
        "2024-02-20T10:00:01.200000+00:00"
    )
    # naive is taken as UTC
    assert format_rfc3339(datetime(2024, 2, 20, 10, 0)) == "2024-02-20T10:00:00.000000+00:00"


def test_canonical_form_sorts_chronologically():
    values = ["2024-02-20T10:00:01.5Z", "2024-02-20T10:00:01Z", "2024-02-20T10:00:00.9Z"]
    canonical = [normalize_rfc3339(v) for v in values]
    assert sorted(canonical) == [canonical[2], canonical[1], canonical[0]]
