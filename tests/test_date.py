import time

import pytest

from trantorkit.date import Date

FMT = "%Y-%m-%d %H:%M:%S"
DAY_US = 86_400 * 1_000_000


def test_constructor_local_formatting():
    assert Date.from_parts(1985, 1, 1).to_custom_formatted_string_local(FMT) == "1985-01-01 00:00:00"
    assert (
        Date.from_parts(2004, 2, 29).to_custom_formatted_string_local(FMT, True)
        == "2004-02-29 00:00:00.000000"
    )
    assert (
        Date.from_parts(2001, 2, 29).to_custom_formatted_string_local(FMT, True)
        != "2001-02-29 00:00:00.000000"
    )
    assert (
        Date.from_parts(2018, 1, 1, 12, 12, 12, 2321).round_day().to_custom_formatted_string_local(FMT, True)
        == "2018-01-01 00:00:00.000000"
    )


def test_invalid_day_normalises_to_next_month():
    assert Date.from_parts(2001, 2, 29).to_custom_formatted_string_local("%Y-%m-%d") == "2001-03-01"


def test_default_is_epoch():
    assert Date().micro_seconds_since_epoch == 0
    assert Date().to_formatted_string(False) == "19700101 00:00:00"


def test_formatted_string_utc():
    d = Date(DAY_US + 123_456)
    assert d.to_formatted_string(False) == "19700102 00:00:00"
    assert d.to_formatted_string(True) == "19700102 00:00:00.123456"


def test_custom_formatted_string_utc():
    d = Date(DAY_US + 61 * 1_000_000 + 7)
    assert d.to_custom_formatted_string(FMT) == "1970-01-02 00:01:01"
    assert d.to_custom_formatted_string(FMT, True) == "1970-01-02 00:01:01.000007"


def test_custom_formatted_string_too_long_is_empty():
    assert Date(0).to_custom_formatted_string("x" * 300) == ""


def test_tm_struct_is_utc():
    tm = Date(DAY_US * 365).tm_struct()
    assert (tm.tm_year, tm.tm_mon, tm.tm_mday, tm.tm_hour) == (1971, 1, 1, 0)


def test_seconds_and_rounding():
    d = Date(5_999_999)
    assert d.seconds_since_epoch() == 5
    assert d.round_second() == Date(5_000_000)
    assert Date(-1).seconds_since_epoch() == 0
    assert Date(-1).round_second() == Date(0)
    assert Date(-1_500_000).round_second() == Date(-1_000_000)


def test_is_same_second():
    assert Date(1_000_000).is_same_second(Date(1_999_999))
    assert not Date(1_999_999).is_same_second(Date(2_000_000))


def test_after():
    assert Date(0).after(1.5) == Date(1_500_000)
    assert Date(2_000_000).after(-2) == Date(0)


def test_ordering():
    assert Date(1) < Date(2)
    assert Date(3) >= Date(3)
    assert Date(4) != Date(5)
    assert sorted([Date(9), Date(1), Date(5)]) == [Date(1), Date(5), Date(9)]


def test_now_is_close_to_system_time():
    before = time.time_ns() // 1000
    current = Date.now().micro_seconds_since_epoch
    after = time.time_ns() // 1000
    assert before <= current <= after


def test_timezone_offset_matches_epoch_construction():
    assert Date.from_parts(1970, 1, 1).seconds_since_epoch() == -Date.timezone_offset()
    assert Date.timezone_offset() % 60 == 0


def test_round_day_local_midnight():
    d = Date.from_parts(2018, 1, 1, 12, 12, 12, 2321)
    assert d.round_day() == Date.from_parts(2018, 1, 1)


def test_formatted_string_local():
    d = Date.from_parts(2018, 1, 1, 10, 10, 25, 102414)
    assert d.to_formatted_string_local(False) == "20180101 10:10:25"
    assert d.to_formatted_string_local(True) == "20180101 10:10:25.102414"


@pytest.mark.parametrize(
    "parts, expected",
    [
        ((2018, 1, 1), "2018-01-01"),
        ((2018, 1, 1, 10, 10, 25), "2018-01-01 10:10:25"),
        ((2018, 1, 1, 0, 0, 0, 123), "2018-01-01 00:00:00.000123"),
        ((2018, 1, 1, 10, 10, 25, 102414), "2018-01-01 10:10:25.102414"),
    ],
)
def test_db_string_local(parts, expected):
    assert Date.from_parts(*parts).to_db_string_local() == expected


def test_db_string_utc():
    assert Date(0).to_db_string() == "1970-01-01"
    assert Date(DAY_US + 3_600_000_000).to_db_string() == "1970-01-02 01:00:00"
    assert Date(DAY_US + 3).to_db_string() == "1970-01-02 00:00:00.000003"


def test_dates_are_hashable_and_immutable():
    assert len({Date(1), Date(1), Date(2)}) == 2
    with pytest.raises(AttributeError):
        Date(1).micro_seconds_since_epoch = 5