"""Unit tests for FormsView — tab cycling and scoped refetches."""

from __future__ import annotations

from fakes import FakeClient
from rich.console import Console

from mailerlite_cli.ui.views import FormsView, FormType


def render_text(view: FormsView) -> str:
    console = Console(width=120, color_system=None)
    with console.capture() as capture:
        console.print(view.render())
    return capture.get()


def _loaded(client: FakeClient) -> FormsView:
    view = FormsView(client)
    view.set_size(90, 30)
    view.set_focused(True)
    view.update(view.fetch()())
    return view


def _form_types_requested(client: FakeClient) -> list[str]:
    return [args[0] for name, args in client.calls if name == "list_forms"]


class TestTabs:
    def test_starts_on_popup(self, fake_client: FakeClient) -> None:
        view = _loaded(fake_client)
        assert view.active_tab is FormType.POPUP
        assert view.item_count == 2

    def test_cycle_right_dispatches_three_scoped_fetches(self, fake_client: FakeClient) -> None:
        view = _loaded(fake_client)
        seen = []
        for _ in range(3):
            cmd = view.handle_key("l")
            assert cmd is not None
            assert view.is_loading
            seen.append(view.active_tab)
            view.update(cmd())
        assert seen == [FormType.EMBEDDED, FormType.PROMOTION, FormType.POPUP]
        assert _form_types_requested(fake_client) == ["popup", "embedded", "promotion", "popup"]

    def test_cycle_left_wraps(self, fake_client: FakeClient) -> None:
        view = _loaded(fake_client)
        view.handle_key("h")
        assert view.active_tab is FormType.PROMOTION
        view.handle_key("left")
        assert view.active_tab is FormType.EMBEDDED

    def test_arrow_keys(self, fake_client: FakeClient) -> None:
        view = _loaded(fake_client)
        view.handle_key("right")
        assert view.active_tab is FormType.EMBEDDED

    def test_items_follow_active_tab(self, fake_client: FakeClient) -> None:
        view = _loaded(fake_client)
        cmd = view.handle_key("l")
        view.update(cmd())
        assert view.item_count == 3
        assert all(form.type == "embedded" for form in view.items)

    def test_slow_earlier_tab_cannot_overwrite(self, fake_client: FakeClient) -> None:
        view = _loaded(fake_client)
        to_embedded = view.handle_key("l")
        to_promotion = view.handle_key("l")
        view.update(to_promotion())
        view.update(to_embedded())
        assert view.item_count == 1
        assert view.items[0].type == "promotion"

    def test_tabs_inert_while_detail_open(self, fake_client: FakeClient) -> None:
        view = _loaded(fake_client)
        view.handle_key("enter")
        assert view.handle_key("l") is None
        assert view.active_tab is FormType.POPUP
        assert view.showing_detail


class TestLayout:
    def test_reserves_tab_strip_rows(self) -> None:
        view = FormsView(None)
        view.set_size(80, 30)
        assert view.table.height == 26

    def test_render_tab_strip_and_hint(self, fake_client: FakeClient) -> None:
        out = render_text(_loaded(fake_client))
        assert "Popup" in out and "Embedded" in out and "Promotion" in out
        assert "← → to switch types | 2 forms" in out
        assert "CONVERSIONS" in out

    def test_detail_rows(self, fake_client: FakeClient) -> None:
        view = _loaded(fake_client)
        view.handle_key("enter")
        rows = {row.label: row.value for row in view.detail.rows}
        assert view.detail.title == "Form: Popup form 0"
        assert rows["Active"] == "Yes"
        assert rows["Conversion Rate"] == "10%"
        assert rows["Created"] == "2024-05-05 05:05:05"
        assert "switch types" not in render_text(view)
