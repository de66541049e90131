"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("mis_snapshot", "MIS Snapshot"),
    TabConfig("company_report", "Company Report"),
    TabConfig("staff_report", "Staff Report"),
    TabConfig("non_participants", "Non-Participants"),
    TabConfig("data_quality", "Data Quality"),
]

# "Publish to web" CSV links of the source spreadsheets
DEFAULT_MIS_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/2PACX-1vQib5xPHilSGhwL-6Wib6ZS2VsTR5ehFZ6EmEhKOHP7l1TaXlVdKKzOeLqlLrutqIscwRKqvF6zdko_"
    "/pub?gid=1429991894&single=true&output=csv"
)
DEFAULT_MASTER_EMPLOYEES_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/2PACX-1vTO7LujC4VSa2wGkJ2YEYSN7UeXR221ny3THaVegYfNfRm2JQGg7QR9Bxxh9SadXtK8Pi6-psl2tGsb"
    "/pub?gid=2120288173&single=true&output=csv"
)
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class DashboardSettings:
    mis_csv_url: str
    master_employees_csv_url: str
    canvassing_csv_url: Optional[str]
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def _get_secret(name: str, default: str | None = None) -> str | None:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        logger.debug("st.secrets lookup failed for %s", name, exc_info=True)
    return default


def _parse_timeout(raw: str | None) -> float:
    if raw is None:
        return DEFAULT_REQUEST_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_REQUEST_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_REQUEST_TIMEOUT_SECONDS


def load_settings() -> DashboardSettings:
    """Resolve dashboard settings from env / st.secrets with published-sheet defaults.

    The canvassing sheet has no default link; the non-participant report asks
    for it to be configured.
    """
    return DashboardSettings(
        mis_csv_url=_get_secret("MIS_CSV_URL", DEFAULT_MIS_CSV_URL) or DEFAULT_MIS_CSV_URL,
        master_employees_csv_url=_get_secret("MASTER_EMPLOYEES_CSV_URL", DEFAULT_MASTER_EMPLOYEES_CSV_URL)
        or DEFAULT_MASTER_EMPLOYEES_CSV_URL,
        canvassing_csv_url=_get_secret("CANVASSING_CSV_URL"),
        request_timeout=_parse_timeout(_get_secret("REQUEST_TIMEOUT_SECONDS")),
        log_level=(_get_secret("LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Attach a single stream handler to the package logger; safe to call on every rerun."""
    logger = logging.getLogger("mis_dashboard")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
