import pytest

from json_schema_defaults.utils import pascal_to_upper_snake_case, snake_to_pascal_case, to_upper_camel_case


@pytest.mark.parametrize(
    "text,expected",
    [
        ("medium", "Medium"),
        ("Medium", "Medium"),
        ("in_progress", "InProgress"),
        ("in-progress", "InProgress"),
        ("in progress", "InProgress"),
        ("application/json", "ApplicationJson"),
        ("inProgress", "InProgress"),
        ("HTTPError", "HTTPError"),
        ("2nd", "_2nd"),
        ("", ""),
        ("__", ""),
    ],
)
def test_to_upper_camel_case(text, expected):
    assert to_upper_camel_case(text, True) == expected


def test_to_upper_camel_case_keeps_first_character():
    assert to_upper_camel_case("in_progress", False) == "inProgress"
    assert to_upper_camel_case("Done", False) == "Done"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("first_name", "FirstName"),
        ("FIRST_NAME", "FirstName"),
        ("actionTemplate", "ActionTemplate"),
        ("first 3 rows", "First3Rows"),
        ("", ""),
    ],
)
def test_snake_to_pascal_case(text, expected):
    assert snake_to_pascal_case(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("InProgress", "IN_PROGRESS"),
        ("Medium", "MEDIUM"),
        ("First3Rows", "FIRST3ROWS"),
        ("_2nd", "_2ND"),
        ("V2", "V2"),
        ("HTTPError", "HTTPERROR"),
        ("", ""),
    ],
)
def test_pascal_to_upper_snake_case(text, expected):
    assert pascal_to_upper_snake_case(text) == expected
