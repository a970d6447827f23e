import pytest

from app.schemas.query import (
    MAX_DB_INT,
    MAX_PAGE,
    GetReservationQuery,
    GetUserQuery,
    GetUserReservationQuery,
    SelectAllType,
)
from app.utils.validation import validate_query


def test_defaults_applied_when_absent():
    result = validate_query(GetUserQuery, {})
    assert result.ok
    assert result.value.take == 20
    assert result.value.page == 0


def test_numeric_strings_are_coerced():
    result = validate_query(GetUserQuery, {"take": "50", "page": "3"})
    assert result.ok
    assert (result.value.take, result.value.page) == (50, 3)


@pytest.mark.parametrize("take", ["0", "-5", "101", "1000"])
def test_take_out_of_range_fails(take):
    result = validate_query(GetUserQuery, {"take": take})
    assert not result.ok
    assert [e.field for e in result.errors] == ["take"]


@pytest.mark.parametrize("take", ["1", "100"])
def test_take_bounds_are_inclusive(take):
    assert validate_query(GetUserQuery, {"take": take}).ok


def test_negative_page_fails():
    result = validate_query(GetUserQuery, {"page": "-1"})
    assert not result.ok
    assert result.errors[0].field == "page"


def test_non_integer_fails_with_field_detail():
    result = validate_query(GetUserQuery, {"take": "abc", "page": "x"})
    assert not result.ok
    assert {e.field for e in result.errors} == {"take", "page"}
    assert all(e.message for e in result.errors)


def test_empty_take_fails():
    result = validate_query(GetUserQuery, {"take": ""})
    assert not result.ok
    assert result.errors[0].field == "take"


def test_page_upper_bound_keeps_offset_in_range():
    assert validate_query(GetUserQuery, {"take": "100", "page": str(MAX_PAGE)}).ok
    assert MAX_PAGE * 100 <= MAX_DB_INT

    result = validate_query(GetUserQuery, {"page": "99999999999999999999"})
    assert not result.ok
    assert result.errors[0].field == "page"


def test_filter_id_above_db_range_fails():
    result = validate_query(GetReservationQuery, {"category_id": str(MAX_DB_INT + 1)})
    assert not result.ok
    assert result.errors[0].field == "category_id"


def test_unknown_keys_ignored():
    assert validate_query(GetUserQuery, {"foo": "bar"}).ok


def test_active_flag_parsing():
    assert validate_query(GetUserReservationQuery, {}).value.active is True
    assert validate_query(GetUserReservationQuery, {"active": "false"}).value.active is False
    assert validate_query(GetUserReservationQuery, {"active": "true"}).value.active is True
    assert not validate_query(GetUserReservationQuery, {"active": "maybe"}).ok


def test_reservation_filters_default_to_select_all():
    query = validate_query(GetReservationQuery, {}).value
    assert query.hashtag_id == SelectAllType.ALL
    assert query.category_id == SelectAllType.ALL


def test_reservation_filter_rejects_negative_id():
    result = validate_query(GetReservationQuery, {"hashtag_id": "-2"})
    assert not result.ok
    assert result.errors[0].field == "hashtag_id"
