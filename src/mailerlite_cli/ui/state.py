"""
Dashboard state types — pure Python, no Textual imports.

Everything the dashboard loop passes around is defined here so the model and
views can be constructed and tested without a running Textual app.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any, ClassVar


class ViewType(IntEnum):
    """The five resource views; the value is the sidebar index."""

    SUBSCRIBERS = 0
    CAMPAIGNS = 1
    AUTOMATIONS = 2
    GROUPS = 3
    FORMS = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def icon(self) -> str:
        return _ICONS[self]


_ICONS = {
    ViewType.SUBSCRIBERS: "◉",
    ViewType.CAMPAIGNS: "◈",
    ViewType.AUTOMATIONS: "◆",
    ViewType.GROUPS: "◇",
    ViewType.FORMS: "◌",
}


class FocusArea(Enum):
    SIDEBAR = auto()
    CONTENT = auto()


# ---------------------------------------------------------------------------
# Loop messages
# ---------------------------------------------------------------------------


@dataclass
class WindowSize:
    width: int
    height: int


@dataclass
class KeyPress:
    key: str


@dataclass
class SpinnerTick:
    pass


@dataclass
class ErrorMessage:
    """A model-scoped failure; shown in the header, never clears view data."""

    error: Exception


@dataclass
class LoadedMessage:
    """
    Completion of one view fetch.

    ``generation`` is the fetch counter of the view at dispatch time; the view
    drops the message if a newer fetch has been dispatched since.  ``None``
    means the message is applied unconditionally.
    """

    view_type: ClassVar[ViewType]

    items: list[Any] = field(default_factory=list)
    error: Exception | None = None
    generation: int | None = None


@dataclass
class SubscribersLoaded(LoadedMessage):
    view_type: ClassVar[ViewType] = ViewType.SUBSCRIBERS


@dataclass
class CampaignsLoaded(LoadedMessage):
    view_type: ClassVar[ViewType] = ViewType.CAMPAIGNS


@dataclass
class AutomationsLoaded(LoadedMessage):
    view_type: ClassVar[ViewType] = ViewType.AUTOMATIONS


@dataclass
class GroupsLoaded(LoadedMessage):
    view_type: ClassVar[ViewType] = ViewType.GROUPS


@dataclass
class FormsLoaded(LoadedMessage):
    view_type: ClassVar[ViewType] = ViewType.FORMS


Message = WindowSize | KeyPress | SpinnerTick | ErrorMessage | LoadedMessage

# A command runs off the UI thread and yields exactly one message.
Command = Callable[[], Message]
