from __future__ import annotations

from dataclasses import dataclass

from mis_dashboard.config import DashboardSettings
from mis_dashboard.data.session import ReportSession


@dataclass
class PageContext:
    settings: DashboardSettings
    session: ReportSession
