from datetime import date

from conftest import contest_fields
from mis_dashboard.data.aggregate import CompanySummary, build_staff_report
from mis_dashboard.data.csv_parser import parse_records
from mis_dashboard.data.schema import CONTEST_SCHEMA, ContestRecord, EmployeeRecord
from mis_dashboard.ui.components.formatting import MET_LABEL, NOT_APPLICABLE_LABEL
from mis_dashboard.ui.pages.company_report import leaderboard_frame, month_labels
from mis_dashboard.ui.pages.mis_snapshot import display_captions, snapshot_frame
from mis_dashboard.ui.pages.non_participants import roster_frame
from mis_dashboard.ui.pages.staff_report import target_table


def test_display_captions_fill_blanks_and_repeats():
    header = [f"H{i}" for i in range(19)]
    header[2] = ""
    header[5] = "H0"
    captions = display_captions(header)
    assert captions[:5] == ["H0", "H1", "Column 3", "H3", "Column 6"]
    assert len(captions) == 13


def test_snapshot_frame_projects_and_hides_empty_rows():
    header = [f"H{i}" for i in range(19)]
    full = [f"v{i}" for i in range(19)]
    empty = [""] * 19
    short = contest_fields(company_name="Acme")[:18]
    frame = snapshot_frame(header, [full, empty, short])
    assert len(frame) == 2
    assert list(frame.iloc[0]) == [f"v{i}" for i in (0, 1, 2, 3, 5, 6, 7, 8, 10, 11, 14, 17, 18)]
    assert frame.iloc[1]["H18"] == ""


def test_month_labels_cross_year_boundary():
    assert month_labels(date(2024, 2, 10), count=3) == ["February 2024", "January 2024", "December 2023"]


def test_leaderboard_sorted_by_net_growth():
    frame = leaderboard_frame(
        [CompanySummary("A", 1, 10.0, 0, 0), CompanySummary("B", 2, 30.0, 1, 0)]
    )
    assert list(frame["Company"]) == ["B", "A"]


def test_target_table_marks_met_and_not_applicable():
    record = ContestRecord.from_fields(
        contest_fields(
            foreign_trip_target="100",
            contest_total_net="100",
            domestic_trip_target="0",
            fresh_customer_target="4",
            fresh_customer_achievement="1",
        )
    )
    table = target_table(build_staff_report(record))
    assert list(table["Shortfall"]) == [MET_LABEL, "N/A", "3"]
    assert table.iloc[1]["Target Value"] == NOT_APPLICABLE_LABEL


def test_roster_frame_numbers_rows():
    frame = roster_frame([EmployeeRecord("E1", "Asha", "Kochi", "Officer", "Retail")])
    assert frame.iloc[0].to_dict() == {
        "SL.No.": 1,
        "Employee Code": "E1",
        "Employee Name": "Asha",
        "Division": "Retail",
        "Designation": "Officer",
    }


def test_snapshot_keeps_rows_too_short_for_contest_records():
    header = ",".join(f"H{i}" for i in range(19))
    full = ",".join(f"v{i}" for i in range(19))
    result = parse_records("\n".join([header, full, "2024,Acme,Kochi,Asha,x,500", ",,,"]), CONTEST_SCHEMA)
    assert len(result.records) == 1

    frame = snapshot_frame(result.header, result.rows)
    assert len(frame) == 2
    short = frame.iloc[1]
    assert list(short[["H0", "H1", "H2", "H3", "H5"]]) == ["2024", "Acme", "Kochi", "Asha", "500"]
    assert list(short[["H6", "H14", "H18"]]) == ["", "", ""]
