import pytest

from alumni_portal.core.exceptions import ValidationError
from alumni_portal.services.filters import AlumniOnly, AnyRole, StudentsOnly, parse_role_filter
from alumni_portal.utils.params import MAX_ID, MAX_PAGE, parse_id, parse_page


@pytest.mark.parametrize("raw, expected", [
    ("0", 0),
    ("42", 42),
    (" 7 ", 7),
    ("0009", 9),
    ("9223372036854775807", MAX_ID),
])
def test_parse_id_accepts_decimal_strings(raw, expected):
    assert parse_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "", "abc", "-1", "1.5", "12a", "+3",
    "9223372036854775808",
    "99999999999999999999999",
])
def test_parse_id_rejects_malformed_or_out_of_range(raw):
    with pytest.raises(ValidationError) as info:
        parse_id(raw)
    assert info.value.status_code == 400


def test_parse_id_uses_custom_message():
    with pytest.raises(ValidationError, match="Invalid enrollment number"):
        parse_id("x", "Invalid enrollment number")


@pytest.mark.parametrize("raw, expected", [
    (None, 1),
    ("", 1),
    ("abc", 1),
    ("0", 1),
    ("-4", 1),
    ("3", 3),
    ("2abc", 2),
    (" 5", 5),
])
def test_parse_page_is_lenient(raw, expected):
    assert parse_page(raw) == expected


def test_parse_page_rejects_offsets_that_overflow():
    assert parse_page(str(MAX_PAGE)) == MAX_PAGE
    with pytest.raises(ValidationError, match="Invalid page"):
        parse_page(str(MAX_PAGE + 1))
    with pytest.raises(ValidationError):
        parse_page("1" * 40)


def test_parse_role_filter_variants():
    assert parse_role_filter(None) == AnyRole()
    assert parse_role_filter("") == AnyRole()
    assert parse_role_filter("ALUMNI") == AlumniOnly()
    assert parse_role_filter("STUDENT") == StudentsOnly()


def test_parse_role_filter_ignores_unknown_role_by_default():
    assert parse_role_filter("alumni") == AnyRole()
    assert parse_role_filter("TEACHER") == AnyRole()


def test_parse_role_filter_strict_rejects_unknown_role():
    with pytest.raises(ValidationError, match="Invalid role"):
        parse_role_filter("alumni", strict=True)
    assert parse_role_filter("ALUMNI", strict=True) == AlumniOnly()
