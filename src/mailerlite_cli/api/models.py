"""
Typed records decoded from MailerLite API responses.

Only the fields the dashboard and the list commands display are modelled.
Decoding is lenient: absent or null fields fall back to empty values, since
the API omits stats on drafts and returns ``null`` for unset timestamps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    try:
        return int(value) if value is not None else 0
    except (TypeError, ValueError):
        return 0


def _float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    try:
        return float(value) if value is not None else 0.0
    except (TypeError, ValueError):
        return 0.0


@dataclass
class Rate:
    """A rate as the API reports it: ``{"float": 0.25, "string": "25%"}``."""

    value: float = 0.0
    text: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Rate:
        if not isinstance(data, dict):
            return cls()
        return cls(value=_float(data, "float"), text=_str(data, "string"))


@dataclass
class Subscriber:
    id: str
    email: str
    status: str = ""
    source: str = ""
    opens_count: int = 0
    clicks_count: int = 0
    open_rate: float = 0.0
    click_rate: float = 0.0
    subscribed_at: str = ""
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subscriber:
        return cls(
            id=_str(data, "id"),
            email=_str(data, "email"),
            status=_str(data, "status"),
            source=_str(data, "source"),
            opens_count=_int(data, "opens_count"),
            clicks_count=_int(data, "clicks_count"),
            open_rate=_float(data, "open_rate"),
            click_rate=_float(data, "click_rate"),
            subscribed_at=_str(data, "subscribed_at"),
            created_at=_str(data, "created_at"),
        )


@dataclass
class CampaignStats:
    sent: int = 0
    opens_count: int = 0
    clicks_count: int = 0
    open_rate: Rate = field(default_factory=Rate)
    click_rate: Rate = field(default_factory=Rate)

    @classmethod
    def from_dict(cls, data: Any) -> CampaignStats:
        if not isinstance(data, dict):
            return cls()
        return cls(
            sent=_int(data, "sent"),
            opens_count=_int(data, "opens_count"),
            clicks_count=_int(data, "clicks_count"),
            open_rate=Rate.from_dict(data.get("open_rate")),
            click_rate=Rate.from_dict(data.get("click_rate")),
        )


@dataclass
class Campaign:
    id: str
    name: str
    type: str = ""
    type_for_humans: str = ""
    status: str = ""
    created_at: str = ""
    scheduled_for: str = ""
    stats: CampaignStats = field(default_factory=CampaignStats)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Campaign:
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            type=_str(data, "type"),
            type_for_humans=_str(data, "type_for_humans") or _str(data, "type"),
            status=_str(data, "status"),
            created_at=_str(data, "created_at"),
            scheduled_for=_str(data, "scheduled_for"),
            stats=CampaignStats.from_dict(data.get("stats")),
        )


@dataclass
class AutomationStats:
    sent: int = 0
    opens_count: int = 0
    clicks_count: int = 0
    completed_subscribers_count: int = 0
    subscribers_in_queue_count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> AutomationStats:
        if not isinstance(data, dict):
            return cls()
        return cls(
            sent=_int(data, "sent"),
            opens_count=_int(data, "opens_count"),
            clicks_count=_int(data, "clicks_count"),
            completed_subscribers_count=_int(data, "completed_subscribers_count"),
            subscribers_in_queue_count=_int(data, "subscribers_in_queue_count"),
        )


@dataclass
class Automation:
    id: str
    name: str
    enabled: bool = False
    emails_count: int = 0
    created_at: str = ""
    stats: AutomationStats = field(default_factory=AutomationStats)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Automation:
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            enabled=bool(data.get("enabled")),
            emails_count=_int(data, "emails_count"),
            created_at=_str(data, "created_at"),
            stats=AutomationStats.from_dict(data.get("stats")),
        )


@dataclass
class Group:
    id: str
    name: str
    active_count: int = 0
    sent_count: int = 0
    opens_count: int = 0
    open_rate: Rate = field(default_factory=Rate)
    clicks_count: int = 0
    click_rate: Rate = field(default_factory=Rate)
    unsubscribed_count: int = 0
    bounced_count: int = 0
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Group:
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            active_count=_int(data, "active_count"),
            sent_count=_int(data, "sent_count"),
            opens_count=_int(data, "opens_count"),
            open_rate=Rate.from_dict(data.get("open_rate")),
            clicks_count=_int(data, "clicks_count"),
            click_rate=Rate.from_dict(data.get("click_rate")),
            unsubscribed_count=_int(data, "unsubscribed_count"),
            bounced_count=_int(data, "bounced_count"),
            created_at=_str(data, "created_at"),
        )


@dataclass
class Form:
    id: str
    name: str
    type: str = ""
    active: bool = False
    conversions_count: int = 0
    conversions_rate: Rate = field(default_factory=Rate)
    opens_count: int = 0
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Form:
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            type=_str(data, "type"),
            active=bool(data.get("active")),
            conversions_count=_int(data, "conversions_count"),
            conversions_rate=Rate.from_dict(data.get("conversions_rate")),
            opens_count=_int(data, "opens_count"),
            created_at=_str(data, "created_at"),
        )


@dataclass
class Segment:
    id: str
    name: str
    total: int = 0
    open_rate: Rate = field(default_factory=Rate)
    click_rate: Rate = field(default_factory=Rate)
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Segment:
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            total=_int(data, "total"),
            open_rate=Rate.from_dict(data.get("open_rate")),
            click_rate=Rate.from_dict(data.get("click_rate")),
            created_at=_str(data, "created_at"),
        )
