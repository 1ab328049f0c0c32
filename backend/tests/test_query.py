"""Tests for list query parsing, sorting and page math."""

import pytest

from app.db.models import Note
from app.errors import FieldValidationError
from app.repositories.query import PageResult, PageWindow, parse_list_query, sort_clauses, total_pages
from app.repositories.resources import NOTES
from app.schemas.assignments import AssignmentListQuery
from app.schemas.notes import NoteListQuery


def test_page_window_skip() -> None:
    assert PageWindow(page=1, limit=10).skip == 0
    assert PageWindow(page=3, limit=5).skip == 10


@pytest.mark.parametrize(
    ("total", "limit", "expected"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (12, 5, 3), (100, 100, 1)],
)
def test_total_pages(total: int, limit: int, expected: int) -> None:
    assert total_pages(total, limit) == expected


def test_page_result_total_pages() -> None:
    result = PageResult(items=[], total=12, window=PageWindow(page=4, limit=5))
    assert result.total_pages == 3


def test_parse_defaults() -> None:
    query = parse_list_query({}, NoteListQuery, default_limit=10)

    assert query.page == 1
    assert query.limit == 10
    assert query.order == "desc"
    assert query.sort_by is None


def test_parse_camel_case_params() -> None:
    query = parse_list_query(
        {"sortBy": "title", "order": "asc", "page": "2", "limit": "5", "isPublished": "false", "year": "2079"},
        NoteListQuery,
    )

    assert query.sort_by == "title"
    assert query.order == "asc"
    assert (query.page, query.limit) == (2, 5)
    assert query.is_published is False
    assert query.year == 2079


def test_parse_ignores_unknown_params() -> None:
    query = parse_list_query({"utm_source": "newsletter"}, NoteListQuery)
    assert not hasattr(query, "utm_source")


def test_parse_reports_every_bad_param() -> None:
    with pytest.raises(FieldValidationError) as exc_info:
        parse_list_query({"page": "0", "order": "sideways"}, NoteListQuery)

    fields = {error["field"] for error in exc_info.value.errors}
    assert fields == {"page", "order"}


def test_parse_limit_above_maximum() -> None:
    with pytest.raises(FieldValidationError) as exc_info:
        parse_list_query({"limit": "500"}, NoteListQuery, max_limit=100)

    assert exc_info.value.errors == [{"field": "limit", "message": "limit must be at most 100"}]


def test_parse_difficulty_filter() -> None:
    assert parse_list_query({"difficulty": "hard"}, AssignmentListQuery).difficulty == "hard"
    with pytest.raises(FieldValidationError):
        parse_list_query({"difficulty": "impossible"}, AssignmentListQuery)


def test_sort_defaults_to_created_at_desc() -> None:
    clauses = sort_clauses(Note, NOTES.sort_fields, None)

    assert len(clauses) == 2
    assert "created_at DESC" in str(clauses[0])
    assert "id DESC" in str(clauses[1])


def test_sort_ascending_by_whitelisted_key() -> None:
    clauses = sort_clauses(Note, NOTES.sort_fields, "views", "asc")
    assert "views ASC" in str(clauses[0])


def test_sort_rejects_unknown_key() -> None:
    with pytest.raises(FieldValidationError) as exc_info:
        sort_clauses(Note, NOTES.sort_fields, "password_hash")

    assert exc_info.value.errors[0]["field"] == "sortBy"


def test_parse_order_case_insensitive() -> None:
    assert parse_list_query({"order": "ASC"}, NoteListQuery).order == "asc"
    assert parse_list_query({"order": "Desc"}, NoteListQuery).order == "desc"


def test_parse_rejects_out_of_range_integers() -> None:
    with pytest.raises(FieldValidationError) as exc_info:
        parse_list_query({"page": str(2**31), "year": "99999"}, NoteListQuery)

    assert {error["field"] for error in exc_info.value.errors} == {"page", "year"}
