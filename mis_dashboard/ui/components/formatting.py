"""
Utility helpers for formatting report numbers.

Amounts follow the Indian (en-IN) digit grouping used by the branch MIS:
the last three digits, then groups of two (12,34,567).
"""

from __future__ import annotations

import math
from typing import Optional

PLACEHOLDER = "N/A"
MET_LABEL = "Met/Exceeded"
NOT_APPLICABLE_LABEL = "Not Applicable"


def _as_finite(value) -> Optional[float]:
    if value is None:
        return None
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(numeric) or math.isinf(numeric):
        return None
    return numeric


def _group_indian(whole: str) -> str:
    if len(whole) <= 3:
        return whole
    head, tail = whole[:-3], whole[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_indian(value: Optional[float], max_decimals: int = 3) -> str:
    numeric = _as_finite(value)
    if numeric is None:
        return PLACEHOLDER
    text = f"{abs(numeric):.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    whole, _, frac = text.partition(".")
    sign = "-" if numeric < 0 and text != "0" else ""
    grouped = _group_indian(whole)
    return f"{sign}{grouped}.{frac}" if frac else f"{sign}{grouped}"


def format_number(value: Optional[float], decimals: int = 0) -> str:
    numeric = _as_finite(value)
    if numeric is None:
        return PLACEHOLDER
    return f"{numeric:,.{decimals}f}"


def format_shortfall(shortfall: Optional[float]) -> str:
    """A missing or non-positive shortfall means the target was met."""
    if shortfall is None or shortfall <= 0:
        return MET_LABEL
    return format_indian(shortfall)
