"""Unit tests for pagination and sort validation"""

import pytest

from backend.app.core.exceptions import ValidationException
from backend.app.core.pagination import ListParams, PageInfo, SortOrder, validate_sort_field


class TestPageInfo:

    def test_first_of_several_pages(self):
        info = PageInfo.build(page=1, limit=10, total=25)

        assert info.total_pages == 3
        assert info.has_next_page is True
        assert info.has_prev_page is False

    def test_last_page(self):
        info = PageInfo.build(page=3, limit=10, total=25)

        assert info.has_next_page is False
        assert info.has_prev_page is True

    def test_empty_collection(self):
        info = PageInfo.build(page=1, limit=10, total=0)

        assert info.total_pages == 0
        assert info.total_items == 0
        assert info.has_next_page is False
        assert info.has_prev_page is False

    def test_page_past_the_end(self):
        info = PageInfo.build(page=9, limit=10, total=25)

        assert info.current_page == 9
        assert info.has_next_page is False
        assert info.has_prev_page is True


class TestListParams:

    def test_defaults(self):
        params = ListParams()

        assert (params.page, params.limit) == (1, 10)
        assert params.sort_by == "createdAt"
        assert params.sort_order == SortOrder.DESC
        assert params.offset == 0

    def test_offset(self):
        assert ListParams(page=4, limit=25).offset == 75


class TestSortValidation:

    def test_allowed_field_returned(self):
        assert validate_sort_field("title", ["createdAt", "title"]) == "title"

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationException) as exc_info:
            validate_sort_field("password_hash", ["createdAt", "title"])

        assert exc_info.value.status_code == 400
        error = exc_info.value.errors[0]
        assert error["field"] == "sortBy"
        assert "password_hash" in error["message"]
