"""Unit tests for mailerlite_cli.api.pagination — the three pagination fetchers."""

from __future__ import annotations

import pytest

from mailerlite_cli.api.pagination import (
    PAGE_SIZE,
    Deadline,
    fetch_all,
    fetch_all_cursor,
    fetch_all_string_cursor,
    page_size,
)
from mailerlite_cli.core.exceptions import ApiError, FetchTimeoutError

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class PagedSource:
    """Serves ``total`` integers in pages and records every request."""

    def __init__(self, total: int) -> None:
        self.items = list(range(total))
        self.requests: list[tuple[object, int]] = []

    def by_page(self, page: int, per_page: int) -> tuple[list[int], bool]:
        self.requests.append((page, per_page))
        start = (page - 1) * per_page
        return self.items[start : start + per_page], start + per_page < len(self.items)

    def by_string_cursor(self, cursor: str, per_page: int) -> tuple[list[int], str]:
        self.requests.append((cursor, per_page))
        start = int(cursor or 0)
        end = start + per_page
        return self.items[start:end], str(end) if end < len(self.items) else ""

    def by_offset(self, after: int, per_page: int) -> tuple[list[int], int]:
        self.requests.append((after, per_page))
        end = after + per_page
        return self.items[after:end], end if end < len(self.items) else 0


# ---------------------------------------------------------------------------
# Page size
# ---------------------------------------------------------------------------


class TestPageSize:
    def test_default(self) -> None:
        assert page_size(0) == PAGE_SIZE == 25

    def test_small_limit_shrinks_page(self) -> None:
        assert page_size(10) == 10

    def test_large_limit_keeps_default(self) -> None:
        assert page_size(100) == 25


# ---------------------------------------------------------------------------
# Page-number mode
# ---------------------------------------------------------------------------


class TestFetchAll:
    def test_fetches_every_page_when_unlimited(self) -> None:
        src = PagedSource(60)
        assert fetch_all(src.by_page, 0) == list(range(60))
        assert [page for page, _ in src.requests] == [1, 2, 3]

    def test_truncates_to_limit(self) -> None:
        src = PagedSource(60)
        result = fetch_all(src.by_page, 30)
        assert result == list(range(30))
        assert len(src.requests) == 2

    def test_small_limit_single_request(self) -> None:
        src = PagedSource(60)
        assert fetch_all(src.by_page, 5) == list(range(5))
        assert src.requests == [(1, 5)]

    def test_stops_when_no_next_page(self) -> None:
        src = PagedSource(7)
        assert fetch_all(src.by_page, 100) == list(range(7))
        assert len(src.requests) == 1

    def test_empty_source(self) -> None:
        assert fetch_all(PagedSource(0).by_page, 100) == []

    @pytest.mark.parametrize("total,limit", [(0, 0), (3, 0), (50, 50), (51, 50), (75, 26), (10, 100)])
    def test_length_bound(self, total: int, limit: int) -> None:
        result = fetch_all(PagedSource(total).by_page, limit)
        expected = total if limit == 0 else min(total, limit)
        assert len(result) == expected

    def test_error_aborts_without_partial_result(self) -> None:
        calls = []

        def fetch(page: int, per_page: int) -> tuple[list[int], bool]:
            calls.append(page)
            if page == 2:
                raise ApiError(500, "boom")
            return [1, 2, 3], True

        with pytest.raises(ApiError):
            fetch_all(fetch, 0)
        assert calls == [1, 2]


# ---------------------------------------------------------------------------
# String-cursor mode
# ---------------------------------------------------------------------------


class TestFetchAllStringCursor:
    def test_follows_cursor_to_the_end(self) -> None:
        src = PagedSource(55)
        assert fetch_all_string_cursor(src.by_string_cursor, 0) == list(range(55))
        assert [cursor for cursor, _ in src.requests] == ["", "25", "50"]

    def test_truncates_to_limit(self) -> None:
        src = PagedSource(55)
        assert fetch_all_string_cursor(src.by_string_cursor, 40) == list(range(40))

    def test_empty_page_with_cursor_terminates(self) -> None:
        calls = []

        def fetch(cursor: str, per_page: int) -> tuple[list[int], str]:
            calls.append(cursor)
            if cursor == "":
                return [1, 2], "next"
            return [], "still-more"

        assert fetch_all_string_cursor(fetch, 0) == [1, 2]
        assert calls == ["", "next"]

    def test_error_propagates(self) -> None:
        def fetch(cursor: str, per_page: int) -> tuple[list[int], str]:
            raise FetchTimeoutError("late")

        with pytest.raises(FetchTimeoutError):
            fetch_all_string_cursor(fetch, 10)


# ---------------------------------------------------------------------------
# Integer-offset mode
# ---------------------------------------------------------------------------


class TestFetchAllCursor:
    def test_follows_offsets(self) -> None:
        src = PagedSource(30)
        assert fetch_all_cursor(src.by_offset, 0) == list(range(30))
        assert [after for after, _ in src.requests] == [0, 25]

    def test_zero_next_after_stops(self) -> None:
        calls = []

        def fetch(after: int, per_page: int) -> tuple[list[int], int]:
            calls.append(after)
            return [after], 0

        assert fetch_all_cursor(fetch, 0) == [0]
        assert calls == [0]

    def test_empty_page_stops(self) -> None:
        def fetch(after: int, per_page: int) -> tuple[list[int], int]:
            return [], 99

        assert fetch_all_cursor(fetch, 0) == []

    def test_limit(self) -> None:
        assert fetch_all_cursor(PagedSource(100).by_offset, 60) == list(range(60))


# ---------------------------------------------------------------------------
# Deadline
# ---------------------------------------------------------------------------


class TestDeadline:
    def test_remaining_counts_down(self) -> None:
        now = [100.0]
        deadline = Deadline(30, clock=lambda: now[0])
        assert deadline.remaining() == pytest.approx(30)
        now[0] = 110.0
        assert deadline.remaining() == pytest.approx(20)

    def test_expired_raises(self) -> None:
        now = [0.0]
        deadline = Deadline(30, clock=lambda: now[0])
        now[0] = 30.0
        with pytest.raises(FetchTimeoutError, match="30s"):
            deadline.remaining()
