import pytest

from trantorkit.date import Date
from trantorkit.dateparse import from_db_string, from_db_string_local, from_iso_string


def _ms(date):
    return (date.micro_seconds_since_epoch % 1000000) // 1000


def _us(date):
    return date.micro_seconds_since_epoch % 1000000


def test_now_round_trips():
    now = Date.now()
    assert from_db_string_local(now.to_db_string_local()) == now
    assert from_db_string(now.to_db_string()) == now


@pytest.mark.parametrize(
    "text, millis",
    [
        ("2018-01-01 00:00:00.123", 123),
        ("2018-01-01 00:00:00.023", 23),
        ("2018-01-01 00:00:00.003", 3),
    ],
)
def test_local_milliseconds(text, millis):
    date = from_db_string_local(text)
    assert _ms(date) == millis
    assert from_db_string_local(date.to_db_string_local()) == date
    assert from_db_string(date.to_db_string()) == date


@pytest.mark.parametrize(
    "text, micros",
    [
        ("2018-01-01 00:00:00.000123", 123),
        ("2018-01-01 00:00:00.000023", 23),
        ("2018-01-01 00:00:00.000003", 3),
    ],
)
def test_local_microseconds(text, micros):
    date = from_db_string_local(text)
    assert _us(date) == micros
    assert from_db_string_local(date.to_db_string_local()) == date
    assert from_db_string(date.to_db_string()) == date


def test_whole_second_has_no_fraction():
    assert _ms(from_db_string_local("2018-01-01 00:00:00")) == 0


def test_timezone_offset_is_whole_minutes():
    local = from_db_string_local("2018-01-01 00:00:00")
    gmt = from_db_string("2018-01-01 00:00:00")
    sec_local = local.micro_seconds_since_epoch // 1000000
    sec_gmt = gmt.micro_seconds_since_epoch // 1000000
    assert (sec_local - sec_gmt) % 60 == 0


@pytest.mark.parametrize(
    "text, millis",
    [
        ("2018-01-01 00:00:00.123", 123),
        ("2018-01-01 00:00:00.023", 23),
        ("2018-01-01 00:00:00.003", 3),
    ],
)
def test_utc_milliseconds(text, millis):
    assert _ms(from_db_string(text)) == millis


@pytest.mark.parametrize(
    "text, micros",
    [
        ("2018-01-01 00:00:00.000123", 123),
        ("2018-01-01 00:00:00.000023", 23),
        ("2018-01-01 00:00:00.000003", 3),
    ],
)
def test_utc_microseconds(text, micros):
    assert _us(from_db_string(text)) == micros


def test_epoch_date_only():
    assert from_db_string("1970-01-01").micro_seconds_since_epoch == 0


@pytest.mark.parametrize(
    "text",
    ["", "   ", "2018-01", "2018-01-01 00:00:00 extra", "x-y-z", "2018-01-01 00:00:."],
)
def test_db_string_errors(text):
    with pytest.raises(ValueError):
        from_db_string_local(text)


ISO_STRINGS = [
    "2024-01-01 04:00:00.123Z",
    "2024-01-01 12:00:00.123 +08:00",
    "2024-01-01 11:00:00.123+0700",
    "2024-01-01 10:00:00.123 0600",
    "2024-01-01 09:00:00.123 +0500",
    "2024-01-01 08:00:00.123 04",
    "2024-01-01 07:00:00.123+03",
    "2024-01-01 06:30:00.123+02:30",
    "2024-01-01 03:00:00.123 -01:00",
    "2024-01-01 02:00:00.123-02:00",
    "2024-01-01 01:00:00.123 -0300",
    "2024-01-01 00:00:00.123-04",
    "2023-12-31 23:00:00.123 -05",
    "2024-01-01T04:00:00.123000Z",
    "2024-01-01T12:00:00.123 +08:00",
    "2024-01-01T04:00:00.123+0",
    "2024-01-01T04:00:00.123-",
]


@pytest.mark.parametrize("text", ISO_STRINGS)
def test_iso_with_timezone(text):
    expected = from_db_string("2024-01-01 04:00:00.123")
    assert from_iso_string(text).micro_seconds_since_epoch == expected.micro_seconds_since_epoch


def test_iso_without_timezone_is_local():
    text = "2024-01-01 04:00:00.123"
    assert from_iso_string(text) == from_db_string_local(text)


def test_iso_date_only():
    local = from_db_string_local("2024-01-01 04:00:00.123")
    assert local.seconds_since_epoch() - 4 * 3600 == from_iso_string("2024-01-01").seconds_since_epoch()


@pytest.mark.parametrize("text", ["", "2024-01", "2024-01-01T04", "2024-01-01 1:2:3:4", "a-b-c"])
def test_iso_errors(text):
    with pytest.raises(ValueError):
        from_iso_string(text)