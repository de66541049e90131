"""
Quote-aware splitter for CSV documents published from spreadsheets.

Lines are split on CRLF or LF before fields are scanned, so a quoted field
cannot span a line break. Spreadsheet exports used here never do; a document
that does will produce broken rows rather than an error.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

from mis_dashboard.data.errors import EmptyDocumentError
from mis_dashboard.data.schema import RecordSchema

logger = logging.getLogger(__name__)

R = TypeVar("R")

LINE_BREAK = re.compile(r"\r?\n")
QUOTE = '"'


@dataclass
class ParsedDocument:
    header: List[str]
    rows: List[List[str]]
    # 1-based source line numbers of each row, counted over non-blank lines
    line_numbers: List[int] = field(default_factory=list)


@dataclass
class ParseResult(Generic[R]):
    header: List[str]
    records: List[R]
    skipped_lines: List[int] = field(default_factory=list)
    raw_line_count: int = 0
    # every data row as split, including the ones too short to bind
    rows: List[List[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.header)


def split_lines(text: str) -> List[str]:
    """Split on CRLF/LF and drop lines that are blank after trimming."""
    return [line for line in LINE_BREAK.split(text) if line.strip()]


def split_fields(line: str, delimiter: str = ",") -> List[str]:
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == QUOTE:
            # "" inside a quoted field is one literal quote
            if in_quotes and i + 1 < len(line) and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    fields.append("".join(current).strip())
    return fields


def parse_rows(text: str | None, delimiter: str = ",", source: str = "document") -> ParsedDocument:
    """Split a document into a header row and data rows, in input order.

    Raises EmptyDocumentError when the text holds no non-blank line.
    """
    lines = split_lines(text or "")
    if not lines:
        raise EmptyDocumentError(source)
    header = split_fields(lines[0], delimiter)
    rows = [split_fields(line, delimiter) for line in lines[1:]]
    return ParsedDocument(header=header, rows=rows, line_numbers=list(range(2, len(lines) + 1)))


def bind_rows(
    rows: Sequence[Sequence[str]],
    schema: RecordSchema[R],
    line_numbers: Sequence[int] | None = None,
) -> tuple[List[R], List[int]]:
    """Bind rows to typed records; rows shorter than the schema minimum are skipped."""
    if line_numbers is None:
        line_numbers = range(2, len(rows) + 2)
    records: List[R] = []
    skipped: List[int] = []
    for line_no, row in zip(line_numbers, rows):
        if len(row) < schema.min_fields:
            logger.warning(
                "Skipping malformed %s row %d: %d columns, need at least %d",
                schema.name,
                line_no,
                len(row),
                schema.min_fields,
            )
            skipped.append(line_no)
            continue
        records.append(schema.bind(row))
    return records, skipped


def parse_records(text: str | None, schema: RecordSchema[R], delimiter: str = ",") -> ParseResult[R]:
    document = parse_rows(text, delimiter=delimiter, source=f"the {schema.name} sheet")
    records, skipped = bind_rows(document.rows, schema, document.line_numbers)
    return ParseResult(
        header=document.header,
        records=records,
        skipped_lines=skipped,
        raw_line_count=len(document.rows) + 1,
        rows=document.rows,
    )
