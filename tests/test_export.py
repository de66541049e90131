from mis_dashboard.data.csv_parser import parse_rows
from mis_dashboard.data.export import NON_PARTICIPANT_HEADERS, non_participants_csv, to_delimited
from mis_dashboard.data.schema import EmployeeRecord


def test_values_are_always_quoted_with_doubled_quotes():
    text = to_delimited(["a", "b"], [["x", 'say "hi"'], [None, 3]])
    assert text.split("\n") == ["a,b", '"x","say ""hi"""', '"","3"']


def test_header_only_when_no_rows():
    assert to_delimited(["a", "b"], []) == "a,b"


def test_non_participants_csv_layout():
    employees = [
        EmployeeRecord("E1", "Asha", "Kochi", "Officer", "Retail"),
        EmployeeRecord("E7", "Ravi, K", "Kochi", 'Sr "A"', "Corporate"),
    ]
    text = non_participants_csv(employees)
    lines = text.split("\n")
    assert lines[0] == ",".join(NON_PARTICIPANT_HEADERS)
    assert lines[1] == '"1","E1","Asha","Retail","Officer"'


def test_export_parses_back_to_same_values():
    employees = [
        EmployeeRecord("E1", "Asha", "Kochi", "Officer", "Retail"),
        EmployeeRecord("E7", "Ravi, K", "Kochi", 'Sr "A"', "Corporate"),
        EmployeeRecord("E9", "", "Kochi", "", "Retail"),
    ]
    doc = parse_rows(non_participants_csv(employees))
    assert doc.header == NON_PARTICIPANT_HEADERS
    assert doc.rows == [
        ["1", "E1", "Asha", "Retail", "Officer"],
        ["2", "E7", "Ravi, K", "Corporate", 'Sr "A"'],
        ["3", "E9", "", "Retail", ""],
    ]


def test_header_captions_with_delimiter_or_quote_round_trip():
    header = ["Net Growth, Total", 'Staff "Name"', "Plain"]
    text = to_delimited(header, [["1,500", "Asha", "x"]])
    assert text.split("\n")[0] == '"Net Growth, Total","Staff ""Name""",Plain'
    doc = parse_rows(text)
    assert doc.header == header
    assert doc.rows == [["1,500", "Asha", "x"]]
