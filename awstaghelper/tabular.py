"""CSV files of resource identifiers and their tag values."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Iterator, Mapping, Sequence


def write_csv(data: Iterable[Sequence[str]], filename: str) -> None:
    """Write rows to ``filename`` as CSV, replacing any existing file."""
    with open(filename, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerows(data)


def read_csv(filename: str) -> list[list[str]]:
    """Read every record of a CSV file; all records must have the same width."""
    with open(filename, newline="", encoding="utf-8") as handle:
        rows = [row for row in csv.reader(handle) if row]
    if rows:
        width = len(rows[0])
        for number, row in enumerate(rows, start=1):
            if len(row) != width:
                raise ValueError(
                    f"record {number} has {len(row)} fields, expected {width}"
                )
    return rows


def header_row(tags_to_read: str, resource_id_header: str) -> list[str]:
    """Build the header: the identifier column followed by the requested tag keys."""
    return [resource_id_header, *tags_to_read.split(",")]


def tag_row(tags_to_read: str, tags: Mapping[str, str], resource_id: str) -> list[str]:
    """Build one data row; tags the resource does not carry come out empty."""
    return [resource_id, *(tags.get(key, "") for key in tags_to_read.split(","))]


def tag_requests(
    csv_data: Sequence[Sequence[str]],
) -> Iterator[tuple[str, list[tuple[str, str]]]]:
    """Yield ``(resource_id, [(key, value), ...])`` for every data row of a tag CSV."""
    if not csv_data:
        return
    header, *records = csv_data
    keys = list(header[1:])
    for record in records:
        if len(record) < len(header):
            raise ValueError(
                f"row {list(record)!r} has fewer fields than the header {list(header)!r}"
            )
        yield record[0], list(zip(keys, record[1:]))