"""Render-only widgets shared by the dashboard views (no Textual imports)."""

from mailerlite_cli.ui.components.detail import DetailPanel, DetailRow
from mailerlite_cli.ui.components.table import Cell, Column, Table

__all__ = ["Cell", "Column", "DetailPanel", "DetailRow", "Table"]
