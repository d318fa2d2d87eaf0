import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict, Iterable, Iterator, List, Tuple, Union

from hurricane.constants import AVERAGE_KEY, MONTH_HEADER, MONTH_NAMES
from hurricane.errors import (
    MalformedRowError,
    MalformedTableError,
    ParseError,
    StreamError,
)
from hurricane.logger import get_logger

logger = get_logger(__name__)

Count = int
AverageValue = Decimal
MonthRecord = Dict[str, Union[Count, AverageValue]]
Dataset = Dict[str, MonthRecord]

TWO_PLACES = Decimal("0.01")

# ASCII only: int() and Decimal() also take underscores and non-ASCII digits.
COUNT_PATTERN = re.compile(r"\d+", re.ASCII)
AVERAGE_PATTERN = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)
BYTE_ORDER_MARK = "\ufeff"


def _clean(cell: str) -> str:
    """Strips whitespace and surrounding double quotes from a cell."""
    return cell.strip().strip('"').strip()


def _iter_lines(source: Iterable[str]) -> Iterator[str]:
    """
    Re-cuts a stream of text chunks into lines.
    Chunk boundaries are arbitrary, so the tail of each chunk is carried over.
    """
    carry = ""
    try:
        for chunk in source:
            carry += chunk
            *lines, carry = carry.split("\n")
            for line in lines:
                yield line.rstrip("\r")
    except OSError as e:
        raise StreamError(f"Hurricanes data stream was interrupted: {e}") from e
    if carry:
        yield carry.rstrip("\r")


def parse_header(line: str) -> List[str]:
    """Returns the column keys of a header row, without the leading Month cell."""
    cells = [_clean(cell) for cell in line.lstrip(BYTE_ORDER_MARK).split(",")]
    if not cells or cells[0] != MONTH_HEADER:
        raise MalformedTableError(f"Invalid data format: header must start with '{MONTH_HEADER}'")

    columns = cells[1:]
    if not columns or columns[-1] != AVERAGE_KEY:
        raise MalformedTableError(f"Invalid data format: header must end with '{AVERAGE_KEY}'")
    if len(set(columns)) != len(columns):
        raise MalformedTableError("Invalid data format: duplicate header columns")
    for year in columns[:-1]:
        if not COUNT_PATTERN.fullmatch(year):
            raise MalformedTableError(f"Invalid data format: '{year}' is not a year column")
    return columns


def _parse_count(month: str, year: str, raw: str) -> Count:
    if not COUNT_PATTERN.fullmatch(raw):
        raise MalformedRowError(
            f"Invalid occurrence count '{raw}' for {month} {year}",
            month=month, column=year, value=raw,
        )
    return int(raw)


def _parse_average(month: str, raw: str) -> AverageValue:
    try:
        if AVERAGE_PATTERN.fullmatch(raw):
            return Decimal(raw).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        pass
    raise MalformedRowError(
        f"Invalid {AVERAGE_KEY} '{raw}' for {month}",
        month=month, column=AVERAGE_KEY, value=raw,
    )


def parse_row(line: str, columns: List[str]) -> Tuple[str, MonthRecord]:
    """Parses one data row into its month key and record."""
    values = [_clean(cell) for cell in line.split(",")]
    month = values[0]
    if month not in MONTH_NAMES:
        raise MalformedRowError(f"Unknown month '{month}'", month=month)
    if len(values) - 1 != len(columns):
        raise MalformedRowError(
            f"Row for {month} has {len(values) - 1} values, expected {len(columns)}",
            month=month,
        )

    record: MonthRecord = {}
    for column, raw in zip(columns, values[1:]):
        if column == AVERAGE_KEY:
            record[column] = _parse_average(month, raw)
        else:
            record[column] = _parse_count(month, column, raw)
    return month, record


def parse_hurricanes_data(source: Union[str, Iterable[str]]) -> Dataset:
    """
    Parses the hurricanes table into {month: {year: count, ..., "Average": Decimal}}.

    `source` is the raw text or any iterable of text chunks (for example a streamed
    HTTP body). The dataset is built locally and only returned once the whole stream
    has been consumed without error, so a failure never leaks a partial result.

    Raises MalformedTableError when no header can be read, MalformedRowError for a bad
    row and StreamError when the source fails mid-stream.
    """
    if isinstance(source, str):
        source = [source]

    dataset: Dataset = {}
    columns = None
    try:
        for line in _iter_lines(source):
            if not line.strip():
                continue
            if columns is None:
                columns = parse_header(line)
                continue
            month, record = parse_row(line, columns)
            if month in dataset:
                raise MalformedRowError(f"Duplicate row for {month}", month=month)
            dataset[month] = record

        if columns is None:
            raise MalformedTableError("Invalid data format")
    except (ParseError, StreamError) as e:
        logger.error(f"Failed to parse hurricanes data - {e}")
        raise

    logger.info(f"Parsed hurricanes data: {len(dataset)} months, {len(columns) - 1} years")
    return dataset
