from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from hurricane.errors import MalformedRowError, MalformedTableError, StreamError
from hurricane.table_parser import parse_hurricanes_data

from hurricane_fakes import chunked


def test_parses_sheet_into_month_records(sheet_text):
    data = parse_hurricanes_data(sheet_text)

    assert list(data) == ["May", "Jun", "Aug", "Dec"]
    assert data["May"] == {"2005": 0, "2006": 1, "2007": 0, "Average": Decimal("0.10")}
    assert data["Aug"]["2005"] == 6
    for record in data.values():
        assert set(record) == {"2005", "2006", "2007", "Average"}


def test_counts_are_ints_and_average_has_two_places(sheet_text):
    data = parse_hurricanes_data(sheet_text)

    assert all(type(data["Jun"][year]) is int for year in ("2005", "2006", "2007"))
    assert isinstance(data["Jun"]["Average"], Decimal)
    assert str(data["Jun"]["Average"]) == "0.70"
    assert str(data["Dec"]["Average"]) == "0.00"


@pytest.mark.parametrize("size", [1, 2, 7, 13, 4096])
def test_chunk_boundaries_do_not_change_result(sheet_text, size):
    assert parse_hurricanes_data(chunked(sheet_text, size)) == parse_hurricanes_data(sheet_text)


def test_chunk_may_bundle_several_lines():
    chunks = ['Month,2010,Average\nJan,1,0.5\nFeb,', '2,1.25\n']
    data = parse_hurricanes_data(chunks)
    assert data == {
        "Jan": {"2010": 1, "Average": Decimal("0.50")},
        "Feb": {"2010": 2, "Average": Decimal("1.25")},
    }


def test_unquoted_and_crlf_lines_are_accepted():
    text = "Month,2001,Average\r\nSep,3,2.345\r\n"
    data = parse_hurricanes_data(text)
    assert data == {"Sep": {"2001": 3, "Average": Decimal("2.35")}}


def test_average_rounds_half_up():
    data = parse_hurricanes_data('Month,Average\nOct,0.125\n')
    assert data["Oct"]["Average"] == Decimal("0.13")


def test_header_only_yields_empty_dataset():
    assert parse_hurricanes_data('"Month", "2005", "Average"\n') == {}


def test_header_with_only_average_column():
    data = parse_hurricanes_data('"Month","Average"\n"Jul",1.7\n"Aug",4.1')
    assert data == {"Jul": {"Average": Decimal("1.70")}, "Aug": {"Average": Decimal("4.10")}}


@pytest.mark.parametrize("source", ["", "\n\n  \n", [], ["", ""]])
def test_empty_input_is_malformed_table(source):
    with pytest.raises(MalformedTableError):
        parse_hurricanes_data(source)


def test_empty_input_is_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="hurricane"):
        with pytest.raises(MalformedTableError):
            parse_hurricanes_data("")
    assert "Failed to parse hurricanes data - Invalid data format" in caplog.text


@pytest.mark.parametrize("header", [
    '"Year","2005","Average"',
    '"Month","2005","2006"',
    '"Month"',
    '"Month","2005","2005","Average"',
    '"Month","Total","Average"',
])
def test_bad_header_is_malformed_table(header):
    with pytest.raises(MalformedTableError):
        parse_hurricanes_data(header + "\n")


def test_non_numeric_count_names_month_and_column():
    with pytest.raises(MalformedRowError) as ex:
        parse_hurricanes_data('Month,2005,2006,Average\nMay,0,x,0.1\n')
    assert ex.value.month == "May"
    assert ex.value.column == "2006"
    assert ex.value.value == "x"


@pytest.mark.parametrize("row", ["May,1,abc", "May,1,", "May,1,NaN", "May,1,-0.5"])
def test_bad_average_is_malformed_row(row):
    with pytest.raises(MalformedRowError) as ex:
        parse_hurricanes_data("Month,2005,Average\n" + row + "\n")
    assert ex.value.column == "Average"


@pytest.mark.parametrize("row", ["May,-1,0.1", "May,1.5,0.1", "May,,0.1"])
def test_bad_count_is_malformed_row(row):
    with pytest.raises(MalformedRowError):
        parse_hurricanes_data("Month,2005,Average\n" + row + "\n")


def test_unknown_month_is_malformed_row():
    with pytest.raises(MalformedRowError) as ex:
        parse_hurricanes_data('Month,2005,Average\n"Sept",1,0.1\n')
    assert ex.value.month == "Sept"


def test_wrong_field_count_is_malformed_row():
    with pytest.raises(MalformedRowError):
        parse_hurricanes_data('Month,2005,2006,Average\nMay,1,0.1\n')


def test_duplicate_month_is_malformed_row():
    with pytest.raises(MalformedRowError):
        parse_hurricanes_data('Month,2005,Average\nMay,1,0.1\nMay,2,0.2\n')


def test_stream_failure_mid_parse_is_stream_error(caplog):
    def broken_stream():
        yield "Month,2005,Average\nMay,1,0.1\n"
        raise OSError("connection reset by peer")

    with caplog.at_level(logging.ERROR, logger="hurricane"):
        with pytest.raises(StreamError):
            parse_hurricanes_data(broken_stream())
    assert "connection reset by peer" in caplog.text


def test_stream_error_from_source_propagates():
    def broken_stream():
        yield "Month,2005,Average\n"
        raise StreamError("Hurricanes data stream was interrupted")

    with pytest.raises(StreamError):
        parse_hurricanes_data(broken_stream())


def test_each_parse_returns_a_new_dataset(sheet_text):
    first = parse_hurricanes_data(sheet_text)
    second = parse_hurricanes_data(sheet_text)
    assert first == second
    assert first is not second
    assert first["May"] is not second["May"]


@pytest.mark.parametrize("cell", ["1_0", "١", "²", "+1", " 1 2", "1e1"])
def test_count_must_be_ascii_digits(cell):
    with pytest.raises(MalformedRowError) as ex:
        parse_hurricanes_data(f"Month,2005,Average\nMay,{cell},0.1\n")
    assert ex.value.column == "2005"
    assert ex.value.value == cell.strip()


@pytest.mark.parametrize("cell", ["0_1", "٠.5", "1e-1", "Infinity", "+0.5", "1" * 40])
def test_average_must_be_plain_ascii_decimal(cell):
    with pytest.raises(MalformedRowError) as ex:
        parse_hurricanes_data(f"Month,2005,Average\nMay,1,{cell}\n")
    assert ex.value.column == "Average"


@pytest.mark.parametrize("year", ["²", "2_005", "٢٠٠٥"])
def test_non_ascii_year_header_is_malformed_table(year):
    with pytest.raises(MalformedTableError):
        parse_hurricanes_data(f"Month,{year},Average\nMay,1,0.1\n")


@pytest.mark.parametrize("cell, expected", [("4", Decimal("4.00")), ("4.", Decimal("4.00")), (".5", Decimal("0.50"))])
def test_plain_decimal_averages_are_accepted(cell, expected):
    data = parse_hurricanes_data(f"Month,Average\nMay,{cell}\n")
    assert data["May"]["Average"] == expected


def test_leading_byte_order_mark_is_ignored():
    data = parse_hurricanes_data(["\ufeff\"Month\", \"2005\", \"Average\"\n", '"May", 1, 0.1\n'])
    assert data == {"May": {"2005": 1, "Average": Decimal("0.10")}}
