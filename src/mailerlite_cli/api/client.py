"""
HTTP client for the MailerLite REST API (https://connect.mailerlite.com/api).

Thin wrapper over a shared ``httpx.Client``.  Each ``list_*`` method fetches
exactly one page and returns the decoded items together with the
continuation value the matching pagination fetcher expects:

  subscribers           (items, next_cursor)   meta.next_cursor
  segment subscribers   (items, next_after)    meta.last
  everything else       (items, has_next)      links.next

Errors are raised as ApiError (HTTP status >= 400 or transport failure) or
FetchTimeoutError (request timed out).
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from mailerlite_cli import __version__
from mailerlite_cli.api.models import (
    Automation,
    Campaign,
    Form,
    Group,
    Segment,
    Subscriber,
)
from mailerlite_cli.core.config import DEFAULT_BASE_URL
from mailerlite_cli.core.exceptions import ApiError, FetchTimeoutError

logger = structlog.get_logger()

DEFAULT_TIMEOUT = 30.0
FORM_TYPES = ("popup", "embedded", "promotion")


class MailerLiteClient:
    """Synchronous MailerLite API client; safe to share across worker threads."""

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verbose: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.verbose = verbose
        hooks: dict[str, list[Any]] = {}
        if verbose:
            hooks = {"request": [self._log_request], "response": [self._log_response]}
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport or httpx.HTTPTransport(retries=2),
            headers={
                "Authorization": f"Bearer {api_token}",
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": f"mailerlite-cli/{__version__}",
            },
            event_hooks=hooks,
        )

    # -- lifecycle --

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> MailerLiteClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # -- helpers --

    @staticmethod
    def _log_request(request: httpx.Request) -> None:
        logger.debug("http_request", method=request.method, url=str(request.url))

    @staticmethod
    def _log_response(response: httpx.Response) -> None:
        logger.debug(
            "http_response",
            method=response.request.method,
            url=str(response.request.url),
            status=response.status_code,
        )

    @staticmethod
    def _raise_on_error(resp: httpx.Response) -> None:
        if resp.status_code < 400:
            return
        message = f"HTTP {resp.status_code}"
        errors: dict[str, list[str]] = {}
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = str(body.get("message") or message)
            raw_errors = body.get("errors")
            if isinstance(raw_errors, dict):
                errors = {
                    str(k): [str(m) for m in v] if isinstance(v, list) else [str(v)]
                    for k, v in raw_errors.items()
                }
        raise ApiError(resp.status_code, message, errors)

    def _get(
        self, path: str, params: dict[str, Any], timeout: float | None = None
    ) -> dict[str, Any]:
        query = {k: v for k, v in params.items() if v not in (None, "")}
        try:
            if timeout is None:
                resp = self._http.get(path, params=query)
            else:
                resp = self._http.get(path, params=query, timeout=timeout)
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(f"GET {path} timed out") from exc
        except httpx.HTTPError as exc:
            raise ApiError(0, f"GET {path} failed: {exc}") from exc

        self._raise_on_error(resp)
        try:
            body = resp.json()
        except ValueError as exc:
            raise ApiError(resp.status_code, f"GET {path} returned invalid JSON") from exc
        if not isinstance(body, dict):
            raise ApiError(resp.status_code, f"GET {path} returned an unexpected payload")
        return body

    @staticmethod
    def _data(body: dict[str, Any]) -> list[dict[str, Any]]:
        data = body.get("data") or []
        return [item for item in data if isinstance(item, dict)]

    @staticmethod
    def _has_next(body: dict[str, Any]) -> bool:
        links = body.get("links")
        return isinstance(links, dict) and bool(links.get("next"))

    # -- subscribers --

    def list_subscribers(
        self,
        cursor: str = "",
        limit: int = 25,
        *,
        status: str = "",
        email: str = "",
        timeout: float | None = None,
    ) -> tuple[list[Subscriber], str]:
        body = self._get(
            "/subscribers",
            {
                "cursor": cursor,
                "limit": limit,
                "filter[status]": status,
                "filter[email]": email,
            },
            timeout,
        )
        meta = body.get("meta") if isinstance(body.get("meta"), dict) else {}
        next_cursor = meta.get("next_cursor") or ""
        return [Subscriber.from_dict(d) for d in self._data(body)], str(next_cursor)

    # -- page-numbered resources --

    def list_campaigns(
        self,
        page: int = 1,
        limit: int = 25,
        *,
        status: str = "",
        timeout: float | None = None,
    ) -> tuple[list[Campaign], bool]:
        body = self._get(
            "/campaigns", {"page": page, "limit": limit, "filter[status]": status}, timeout
        )
        return [Campaign.from_dict(d) for d in self._data(body)], self._has_next(body)

    def list_automations(
        self, page: int = 1, limit: int = 25, *, timeout: float | None = None
    ) -> tuple[list[Automation], bool]:
        body = self._get("/automations", {"page": page, "limit": limit}, timeout)
        return [Automation.from_dict(d) for d in self._data(body)], self._has_next(body)

    def list_groups(
        self, page: int = 1, limit: int = 25, *, timeout: float | None = None
    ) -> tuple[list[Group], bool]:
        body = self._get("/groups", {"page": page, "limit": limit}, timeout)
        return [Group.from_dict(d) for d in self._data(body)], self._has_next(body)

    def list_forms(
        self,
        form_type: str,
        page: int = 1,
        limit: int = 25,
        *,
        timeout: float | None = None,
    ) -> tuple[list[Form], bool]:
        if form_type not in FORM_TYPES:
            raise ValueError(f"form_type must be one of {', '.join(FORM_TYPES)}")
        body = self._get(f"/forms/{form_type}", {"page": page, "limit": limit}, timeout)
        return [Form.from_dict(d) for d in self._data(body)], self._has_next(body)

    def list_segments(
        self, page: int = 1, limit: int = 25, *, timeout: float | None = None
    ) -> tuple[list[Segment], bool]:
        body = self._get("/segments", {"page": page, "limit": limit}, timeout)
        return [Segment.from_dict(d) for d in self._data(body)], self._has_next(body)

    # -- integer-offset resources --

    def list_segment_subscribers(
        self,
        segment_id: str,
        after: int = 0,
        limit: int = 25,
        *,
        timeout: float | None = None,
    ) -> tuple[list[Subscriber], int]:
        body = self._get(
            f"/segments/{segment_id}/subscribers",
            {"limit": limit, "after": after or None},
            timeout,
        )
        meta = body.get("meta") if isinstance(body.get("meta"), dict) else {}
        try:
            last = int(meta.get("last") or 0)
        except (TypeError, ValueError):
            last = 0
        return [Subscriber.from_dict(d) for d in self._data(body)], max(last, 0)
