"""
Key names as delivered by Textual (``events.Key.key``).

Printable keys arrive as themselves ("j", "G"); a few arrive by name
("question_mark", "escape").  Both spellings are listed where they differ so
the tables also accept keys fed in by tests or other front ends.
"""

from __future__ import annotations

QUIT = ("q", "ctrl+c")
HELP = ("?", "question_mark")
BACK = ("escape", "esc")
TOGGLE_FOCUS = ("tab",)

VIEW_SHORTCUTS = ("1", "2", "3", "4", "5")

UP = ("k", "up")
DOWN = ("j", "down")
TOP = ("g",)
BOTTOM = ("G", "shift+g")
OPEN = ("enter",)
REFRESH = ("r",)
CLOSE_DETAIL = ("escape", "esc", "backspace", "q")

TAB_PREV = ("h", "left")
TAB_NEXT = ("l", "right")

SIDEBAR_CONFIRM = ("enter", "right", "l")

# (keys, description) pairs for the help overlay.
HELP_ENTRIES: list[tuple[str, str]] = [
    ("tab", "toggle sidebar / content focus"),
    ("1-5", "jump to view"),
    ("j / ↓", "move down"),
    ("k / ↑", "move up"),
    ("g / G", "top / bottom"),
    ("enter", "open details"),
    ("esc", "close details"),
    ("r", "refresh current view"),
    ("h / l", "switch form type"),
    ("?", "toggle help"),
    ("q", "quit"),
]
