"""
Exceptions raised while fetching and parsing published sheets.

Only whole-document failures are raised. Malformed rows are skipped and
malformed fields coerce to safe defaults, so neither appears here.
"""

from __future__ import annotations

from typing import Optional


class ReportDataError(RuntimeError):
    """Base class for failures that stop a report from being generated."""


class ConfigurationError(ReportDataError):
    """A sheet link the report needs is not configured."""


class TransportError(ReportDataError):
    """Non-success HTTP status or network failure while downloading a sheet."""

    def __init__(self, url: str, status: Optional[int] = None, detail: str = "") -> None:
        self.url = url
        self.status = status
        self.detail = detail
        if status is None:
            message = f"Network error while fetching {url}: {detail}"
        else:
            message = f"HTTP error! Status: {status} from {url}"
            if detail:
                message = f"{message} - {detail}"
        super().__init__(message)


class EmptyDocumentError(ReportDataError):
    """The document had no usable lines, or no data rows after the header."""

    def __init__(self, source: str = "document") -> None:
        self.source = source
        super().__init__(f"No data found in {source} or parsing failed.")
