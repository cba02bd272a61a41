"""
Pagination fetchers — drain a paginated endpoint into one list.

MailerLite paginates three different ways:

  page number     ``fetch_page(page, per_page) -> (items, has_next)``
  string cursor   ``fetch_page(cursor, per_page) -> (items, next_cursor)``
  integer offset  ``fetch_page(after, per_page) -> (items, next_after)``

Each fetcher requests pages of ``PAGE_SIZE`` (or ``limit`` when smaller),
stops as soon as ``limit`` items are collected (truncating the last page),
and otherwise stops when the protocol reports no further page.  ``limit=0``
means unlimited.  Any exception from ``fetch_page`` propagates immediately;
no partial result is returned.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TypeVar

from mailerlite_cli.core.exceptions import FetchTimeoutError

T = TypeVar("T")

PAGE_SIZE = 25


def page_size(limit: int) -> int:
    if 0 < limit < PAGE_SIZE:
        return limit
    return PAGE_SIZE


def fetch_all(fetch_page: Callable[[int, int], tuple[list[T], bool]], limit: int = 0) -> list[T]:
    """Page-number pagination; pages start at 1."""
    per_page = page_size(limit)
    collected: list[T] = []
    page = 1
    while True:
        items, has_next = fetch_page(page, per_page)
        collected.extend(items)
        if limit > 0 and len(collected) >= limit:
            return collected[:limit]
        if not has_next:
            return collected
        page += 1


def fetch_all_string_cursor(
    fetch_page: Callable[[str, int], tuple[list[T], str]], limit: int = 0
) -> list[T]:
    """Opaque string-cursor pagination; the first request sends an empty cursor."""
    per_page = page_size(limit)
    collected: list[T] = []
    cursor = ""
    while True:
        items, next_cursor = fetch_page(cursor, per_page)
        collected.extend(items)
        if limit > 0 and len(collected) >= limit:
            return collected[:limit]
        # An empty page with a cursor would otherwise loop forever.
        if not next_cursor or not items:
            return collected
        cursor = next_cursor


def fetch_all_cursor(fetch_page: Callable[[int, int], tuple[list[T], int]], limit: int = 0) -> list[T]:
    """Integer-offset pagination; ``next_after == 0`` means no further page."""
    per_page = page_size(limit)
    collected: list[T] = []
    after = 0
    while True:
        items, next_after = fetch_page(after, per_page)
        collected.extend(items)
        if limit > 0 and len(collected) >= limit:
            return collected[:limit]
        if next_after == 0 or not items:
            return collected
        after = next_after


class Deadline:
    """
    Wall-clock budget shared by every page request of one fetch.

    Pass ``deadline.remaining()`` as the per-request timeout; it raises
    FetchTimeoutError once the budget is spent, which aborts the fetcher.
    """

    def __init__(self, seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.seconds = seconds
        self.expires_at = clock() + seconds

    def remaining(self) -> float:
        left = self.expires_at - self._clock()
        if left <= 0:
            raise FetchTimeoutError(f"fetch exceeded {self.seconds:g}s deadline")
        return left
