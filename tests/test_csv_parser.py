import pytest

from mis_dashboard.data.csv_parser import parse_records, parse_rows, split_fields, split_lines
from mis_dashboard.data.errors import EmptyDocumentError
from mis_dashboard.data.schema import EMPLOYEE_SCHEMA


def test_split_lines_handles_crlf_and_drops_blank_lines():
    text = "a,b\r\n\r\n  \nc,d\n\n"
    assert split_lines(text) == ["a,b", "c,d"]


def test_quoted_field_keeps_embedded_delimiter():
    assert split_fields('A,"B, C",D') == ["A", "B, C", "D"]


def test_doubled_quotes_collapse_to_one():
    assert split_fields('A,"He said ""hi""",C') == ["A", 'He said "hi"', "C"]


def test_fields_are_trimmed():
    assert split_fields("  a ,  b,c  ") == ["a", "b", "c"]


def test_trailing_delimiter_yields_empty_field():
    assert split_fields("a,b,") == ["a", "b", ""]


def test_empty_fields_between_delimiters():
    assert split_fields(",,") == ["", "", ""]


def test_parse_rows_separates_header_and_keeps_order():
    doc = parse_rows("h1,h2\nz,1\na,2\nz,1\n")
    assert doc.header == ["h1", "h2"]
    assert doc.rows == [["z", "1"], ["a", "2"], ["z", "1"]]
    assert doc.line_numbers == [2, 3, 4]


@pytest.mark.parametrize("text", ["", "\n\n", "   \r\n", None])
def test_parse_rows_rejects_empty_document(text):
    with pytest.raises(EmptyDocumentError):
        parse_rows(text)


def test_parse_records_skips_short_rows():
    text = "\n".join(
        [
            "Employee Code,Employee Name,Branch Name,Designation,Division",
            "E1,Asha,Kochi,Officer,Retail",
            "E2,Ravi,Kochi",
            "E3,Meera,Thrissur,Manager,Retail,extra",
        ]
    )
    result = parse_records(text, EMPLOYEE_SCHEMA)
    assert [r.code for r in result.records] == ["E1", "E3"]
    assert result.skipped_lines == [3]
    assert result.raw_line_count == 4
    assert result.column_count == 5
    assert result.records[0].as_dict() == {
        "Employee Code": "E1",
        "Employee Name": "Asha",
        "Branch Name": "Kochi",
        "Designation": "Officer",
        "Division": "Retail",
    }


def test_header_only_document_has_no_records():
    result = parse_records("a,b,c,d,e\n", EMPLOYEE_SCHEMA)
    assert result.records == []
    assert result.skipped_lines == []


def test_field_count_never_exceeds_source_columns():
    lines = ['a,"b,c",d', "e,f", '"g"', "h,,", '"x,y,z"']
    for line in lines:
        assert len(split_fields(line)) <= line.count(",") + 1
