import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, TypeVar

import requests

from mis_dashboard.config import DEFAULT_REQUEST_TIMEOUT_SECONDS, DashboardSettings
from mis_dashboard.data.csv_parser import parse_records
from mis_dashboard.data.errors import ConfigurationError, EmptyDocumentError, TransportError
from mis_dashboard.data.schema import (
    ACTIVITY_SCHEMA,
    CONTEST_SCHEMA,
    EMPLOYEE_SCHEMA,
    ActivityRecord,
    ContestRecord,
    EmployeeRecord,
    RecordSchema,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")

ERROR_BODY_EXCERPT = 200


@dataclass
class LoadedTable(Generic[R]):
    source_url: str
    header: List[str]
    records: List[R]
    fetched_at: datetime
    diagnostics: Dict[str, Any] = field(default_factory=dict)
    rows: List[List[str]] = field(default_factory=list, repr=False)


def fetch_csv_text(url: str, timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS) -> str:
    """Download a published CSV in one GET. No retries: any failure raises TransportError."""
    logger.info("Fetching CSV from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("CSV fetch failed for %s", url, exc_info=True)
        raise TransportError(url, detail=str(exc)) from exc
    if not response.ok:
        excerpt = (response.text or "")[:ERROR_BODY_EXCERPT]
        logger.warning("CSV fetch for %s returned HTTP %s", url, response.status_code)
        raise TransportError(url, status=response.status_code, detail=excerpt)
    text = response.text
    logger.info("CSV fetched successfully. Data length: %d", len(text))
    return text


def load_table(
    url: str,
    schema: RecordSchema[R],
    timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    allow_empty: bool = False,
) -> LoadedTable[R]:
    """Fetch, parse and bind one sheet.

    A sheet with no usable rows raises EmptyDocumentError unless `allow_empty`
    is set; a document without a single non-blank line always raises.
    """
    text = fetch_csv_text(url, timeout=timeout)
    result = parse_records(text, schema)
    if not result.records and not allow_empty:
        raise EmptyDocumentError(f"the {schema.name} sheet")

    diagnostics = {
        "schema": schema.name,
        "raw_line_count": result.raw_line_count,
        "header_column_count": result.column_count,
        "record_count": len(result.records),
        "skipped_row_count": len(result.skipped_lines),
        "skipped_lines": result.skipped_lines,
        "min_fields": schema.min_fields,
    }
    logger.info("Parsed %d %s rows (%d skipped)", len(result.records), schema.name, len(result.skipped_lines))
    return LoadedTable(
        source_url=url,
        header=result.header,
        records=result.records,
        fetched_at=datetime.now(timezone.utc),
        diagnostics=diagnostics,
        rows=result.rows,
    )


def load_contest_table(settings: DashboardSettings) -> LoadedTable[ContestRecord]:
    return load_table(settings.mis_csv_url, CONTEST_SCHEMA, timeout=settings.request_timeout)


def load_master_employees(settings: DashboardSettings) -> LoadedTable[EmployeeRecord]:
    return load_table(settings.master_employees_csv_url, EMPLOYEE_SCHEMA, timeout=settings.request_timeout)


def load_activities(settings: DashboardSettings) -> LoadedTable[ActivityRecord]:
    if not settings.canvassing_csv_url:
        raise ConfigurationError("CANVASSING_CSV_URL env var missing (env or secrets).")
    # A month with no canvassing yet is a valid, empty activity log
    return load_table(
        settings.canvassing_csv_url,
        ACTIVITY_SCHEMA,
        timeout=settings.request_timeout,
        allow_empty=True,
    )
