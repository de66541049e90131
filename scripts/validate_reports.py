"""Quick validation script for the parse -> aggregate pipeline.

Run with `python scripts/validate_reports.py` to check a small synthetic
contest sheet and roster produce the expected report figures.
"""

from __future__ import annotations

from mis_dashboard.data.aggregate import build_non_participant_report, summarize_company
from mis_dashboard.data.csv_parser import parse_records
from mis_dashboard.data.schema import ACTIVITY_SCHEMA, CONTEST_SCHEMA, EMPLOYEE_SCHEMA


def _contest_line(company: str, staff: str, foreign: str, fresh_t: str, fresh_a: str, growth: str, net: str) -> str:
    cells = [""] * 19
    cells[1], cells[3] = company, staff
    cells[6], cells[7], cells[11] = foreign, fresh_t, fresh_a
    cells[14], cells[17] = growth, net
    return ",".join(cells)


def main() -> None:
    contest_csv = "\n".join(
        [
            ",".join(f"H{i}" for i in range(19)),
            _contest_line("Acme", "Asha", "100", "2", "3", '"1,000"', "150"),
            _contest_line("Acme", "Ravi", "100", "2", "1", "500", "150"),
            "short,row",
        ]
    )
    contest = parse_records(contest_csv, CONTEST_SCHEMA)
    summary = summarize_company(contest.records, "Acme")
    assert contest.skipped_lines == [4], contest.skipped_lines
    assert summary.staff_count == 2
    assert summary.total_net_growth == 1500.0
    assert summary.foreign_trip_winners == 1

    roster = parse_records("Code,Name,Branch,Designation,Division\nE1,A,B,C,D\nE2,A,B,C,D\n", EMPLOYEE_SCHEMA)
    activity = parse_records("Date,Code,Type\n03/07/2024,E1,Visit\n", ACTIVITY_SCHEMA)
    report = build_non_participant_report(roster.records, activity.records, month="2024-07")
    assert [e.code for e in report.visit] == ["E2"]
    assert [e.code for e in report.calls] == ["E1", "E2"]

    print("Report validation passed. Contest rows:", len(contest.records))


if __name__ == "__main__":
    main()
