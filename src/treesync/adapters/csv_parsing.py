"""CSV reading and lenient number parsing shared by the file and sheet loaders."""

from __future__ import annotations

import csv
import io
import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

_FLOAT_PREFIX: Final = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX: Final = re.compile(r"\s*([+-]?\d+)")
_DELIMITERS: Final[str] = ",;\t|"


def blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def parse_float_prefix(value: str | None) -> float | None:
    """Parse the leading number of ``value`` (``"3,5"`` gives ``3.0``)."""

    if not value:
        return None
    match = _FLOAT_PREFIX.match(value)
    return float(match.group(1)) if match else None


def parse_int_prefix(value: str | None) -> int | None:
    if not value:
        return None
    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else None


def parse_decimal_comma(value: str | None) -> float | None:
    """Parse numbers written with a decimal comma (``"12,5"`` gives ``12.5``)."""

    if not value:
        return None
    return parse_float_prefix(value.replace(",", ".", 1))


def sniff_delimiter(text: str) -> str:
    """Pick the candidate delimiter occurring most often in the header line."""

    header = text.split("\n", 1)[0]
    counts = {delimiter: header.count(delimiter) for delimiter in _DELIMITERS}
    best = max(counts, key=lambda delimiter: counts[delimiter])
    return best if counts[best] else ","


def iter_csv_rows(text: str) -> Iterator[tuple[int, dict[str, str]]]:
    """Yield ``(line_number, row)`` for non-empty rows of a CSV text with a header."""

    if text.startswith("\ufeff"):
        text = text[1:]
    reader = csv.DictReader(io.StringIO(text, newline=""), delimiter=sniff_delimiter(text))
    for row in reader:
        values = [value for key, value in row.items() if key is not None]
        if not any(value and value.strip() for value in values):
            continue
        yield reader.line_num, {key: value or "" for key, value in row.items() if key is not None}
