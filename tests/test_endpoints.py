"""Tests for request URI construction."""

import pytest
from pydantic import ValidationError

from shelfloom.endpoints import (
    BOOKS,
    SEARCH,
    Filter,
    ListingOptions,
    SearchOptions,
    content_permissions_path,
    resolve_endpoint,
)


def test_resolve_appends_to_base_with_trailing_slash():
    assert resolve_endpoint(BOOKS, "http://h/api/") == "http://h/api/books"


def test_resolve_replaces_last_segment_without_trailing_slash():
    assert resolve_endpoint(BOOKS, "http://h/api") == "http://h/books"


def test_resolve_nested_path():
    assert resolve_endpoint("books/3/export/pdf", "http://h/api/") == (
        "http://h/api/books/3/export/pdf"
    )


def test_resolve_listing_options_in_fixed_order():
    """Offset, count, sorts, then filters, none of them escaped."""
    options = ListingOptions(
        offset=10,
        count=5,
        sorts=("name",),
        filters=(Filter(field="name:like", expr="abc%"),),
    )
    assert resolve_endpoint(BOOKS, "http://h/api/", options) == (
        "http://h/api/books?offset=10&count=5&sort=name&filter[name:like]=abc%"
    )


def test_resolve_multiple_sorts_and_filters_keep_order():
    options = ListingOptions(
        sorts=("-updated_at", "+id"),
        filters=[("book_id", "3"), ("draft", "false")],
    )
    assert resolve_endpoint("pages", "http://h/api/", options) == (
        "http://h/api/pages?sort=-updated_at&sort=+id"
        "&filter[book_id]=3&filter[draft]=false"
    )


def test_resolve_only_count():
    options = ListingOptions(count=0)
    assert resolve_endpoint(BOOKS, "http://h/api/", options) == (
        "http://h/api/books?count=0"
    )


def test_resolve_empty_options_add_no_query():
    assert resolve_endpoint(BOOKS, "http://h/api/", ListingOptions()) == (
        "http://h/api/books"
    )


def test_resolve_search_options():
    options = SearchOptions(query="cats {type:page}", page=2, count=10)
    assert resolve_endpoint(SEARCH, "http://h/api/", options) == (
        "http://h/api/search?query=cats {type:page}&page=2&count=10"
    )


def test_resolve_search_query_only():
    assert resolve_endpoint(SEARCH, "http://h/api/", SearchOptions(query="x")) == (
        "http://h/api/search?query=x"
    )


def test_resolve_does_not_mutate_options():
    options = ListingOptions(offset=1, sorts=("name",), filters=[("id", "1")])
    before = options.model_dump()
    resolve_endpoint(BOOKS, "http://h/api/", options)
    resolve_endpoint(BOOKS, "http://h/api/", options)
    assert options.model_dump() == before


def test_listing_options_reject_negative_offset():
    with pytest.raises(ValidationError):
        ListingOptions(offset=-1)


def test_search_options_reject_page_zero():
    with pytest.raises(ValidationError):
        SearchOptions(query="x", page=0)


def test_content_permissions_path():
    assert content_permissions_path("book", 3) == "content-permissions/book/3"
