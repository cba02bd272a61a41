"""
DashboardModel — the root state machine of the dashboard.

Pure Python, no Textual imports.  The Textual shell feeds every event into
``update()`` and executes the commands it returns; the model is only ever
mutated from the shell's message loop.

Key routing order (first match wins):

  1. help overlay open  → only ``?`` / ``esc`` (close); everything else dropped
  2. quit               → ``ctrl+c`` always, ``q`` unless it closes a detail panel
  3. ``?``              → open help
  4. ``tab``            → toggle sidebar/content focus
  5. ``1``–``5``        → switch view
  6. sidebar focus      → ``j``/``k`` move and switch, ``enter``/``l``/``→`` focus content
     content focus      → active view's ``handle_key``
"""

from __future__ import annotations

from typing import Any

import structlog
from rich.console import Group, RenderableType
from rich.table import Table as RichTable
from rich.text import Text

from mailerlite_cli.ui import keys
from mailerlite_cli.ui.components.chrome import (
    SIDEBAR_WIDTH,
    HelpOverlay,
    Sidebar,
    Spinner,
    StatusBar,
)
from mailerlite_cli.ui.state import (
    Command,
    ErrorMessage,
    FocusArea,
    KeyPress,
    LoadedMessage,
    ViewType,
    WindowSize,
)
from mailerlite_cli.ui.views import ResourceView, build_views

logger = structlog.get_logger()

# Header (2 rows) + status bar (2 rows).
CHROME_ROWS = 4
TITLE = "MailerLite Dashboard"


class DashboardModel:
    def __init__(
        self,
        client: Any | None,
        profile: str = "",
        views: dict[ViewType, ResourceView[Any]] | None = None,
    ) -> None:
        self.client = client
        self.profile = profile
        self.views = views if views is not None else build_views(client)
        self.sidebar = Sidebar()
        self.status_bar = StatusBar()
        self.spinner = Spinner()
        self.help = HelpOverlay()

        self.active_view = ViewType.SUBSCRIBERS
        self.focus = FocusArea.CONTENT
        self.show_help = False
        self.error: Exception | None = None
        self.width = 0
        self.height = 0
        self.initialized = False
        self.should_quit = False

        self.sidebar.set_active(self.active_view)
        self._apply_focus()
        self._update_status_bar()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def current_view(self) -> ResourceView[Any]:
        return self.views[self.active_view]

    # ------------------------------------------------------------------
    # Loop entry points
    # ------------------------------------------------------------------

    def init(self) -> list[Command]:
        """Commands to run once at startup: the first fetch of the active view."""
        return [self._fetch_current_view()]

    def update(self, msg: object) -> list[Command]:
        commands: list[Command] = []

        if isinstance(msg, WindowSize):
            self.width = msg.width
            self.height = msg.height
            self._update_layout()
            self.initialized = True
        elif isinstance(msg, KeyPress):
            cmd = self._handle_key(msg.key)
            if cmd is not None:
                commands.append(cmd)
            # View-level refetches (r, form tabs) flip the view to loading.
            self._update_status_bar()
        elif isinstance(msg, LoadedMessage):
            view = self.views[msg.view_type]
            cmd = view.update(msg)
            if cmd is not None:
                commands.append(cmd)
            self._update_status_bar()
        elif isinstance(msg, ErrorMessage):
            logger.warning("dashboard_error", error=str(msg.error))
            self.error = msg.error

        self.spinner.update(msg)
        return commands

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def _handle_key(self, key: str) -> Command | None:
        if self.show_help:
            if key in keys.HELP or key in keys.BACK:
                self.show_help = False
            return None

        if self._is_quit(key):
            self.should_quit = True
            return None
        if key in keys.HELP:
            self.show_help = True
            return None
        if key in keys.TOGGLE_FOCUS:
            self.toggle_focus()
            return None
        if key in keys.VIEW_SHORTCUTS:
            return self.switch_view(ViewType(keys.VIEW_SHORTCUTS.index(key)))

        if self.focus is FocusArea.SIDEBAR:
            return self._handle_sidebar_key(key)
        return self.current_view.handle_key(key)

    def _is_quit(self, key: str) -> bool:
        if key not in keys.QUIT:
            return False
        # q closes an open detail panel before it quits.
        if key == "q" and self.focus is FocusArea.CONTENT and self.current_view.showing_detail:
            return False
        return True

    def _handle_sidebar_key(self, key: str) -> Command | None:
        if key in keys.DOWN:
            return self.switch_view(self.sidebar.next())
        if key in keys.UP:
            return self.switch_view(self.sidebar.prev())
        if key in keys.SIDEBAR_CONFIRM:
            self.focus = FocusArea.CONTENT
            self._apply_focus()
        return None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def toggle_focus(self) -> None:
        if self.focus is FocusArea.SIDEBAR:
            self.focus = FocusArea.CONTENT
        else:
            self.focus = FocusArea.SIDEBAR
        self._apply_focus()

    def switch_view(self, view_type: ViewType) -> Command | None:
        if view_type is self.active_view:
            return None

        self.current_view.set_focused(False)
        self.active_view = view_type
        self.sidebar.set_active(view_type)
        self._apply_focus()
        self._update_status_bar()
        logger.debug("view_switched", view=view_type.label)
        return self._fetch_current_view()

    def _apply_focus(self) -> None:
        self.sidebar.set_focused(self.focus is FocusArea.SIDEBAR)
        self.current_view.set_focused(self.focus is FocusArea.CONTENT)

    def _fetch_current_view(self) -> Command:
        view = self.current_view
        cmd = view.fetch()
        self.spinner.start(f"Loading {self.active_view.label}...")
        self._update_status_bar()
        return cmd

    def _update_layout(self) -> None:
        content_width = max(self.width - SIDEBAR_WIDTH - 2, 0)
        content_height = max(self.height - CHROME_ROWS, 0)
        for view in self.views.values():
            view.set_size(content_width, content_height)
        self.sidebar.set_height(content_height)
        self.status_bar.set_width(self.width)
        self._update_status_bar()

    def _update_status_bar(self) -> None:
        view = self.current_view
        if view.is_loading:
            self.status_bar.set_view(self.active_view.label, None)
            self.spinner.start(f"Loading {self.active_view.label}...")
        else:
            self.status_bar.set_view(self.active_view.label, view.item_count)
            self.spinner.stop()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_header(self) -> RenderableType:
        grid = RichTable.grid(expand=True)
        grid.add_column(ratio=1)
        grid.add_column(justify="right")
        grid.add_row(
            Text(TITLE, style="bold magenta"),
            Text(f"profile: {self.profile or '-'}", style="dim"),
        )
        return grid

    def render_sidebar(self) -> RenderableType:
        return self.sidebar.render()

    def render_content(self) -> RenderableType:
        content = self.current_view.render()
        if self.error is None:
            return content
        return Group(Text(f"Error: {self.error}", style="bold red"), Text(""), content)

    def render_status(self) -> RenderableType:
        return self.status_bar.render(self.spinner)

    def render_help(self) -> RenderableType:
        return self.help.render()
