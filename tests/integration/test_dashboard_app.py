"""Integration tests: DashboardApp driven headlessly through Textual's pilot."""

from __future__ import annotations

import pytest
from fakes import FakeClient

from mailerlite_cli.core.exceptions import ApiError
from mailerlite_cli.ui.app import DashboardApp
from mailerlite_cli.ui.state import FocusArea, ViewType


async def settle(pilot) -> None:  # type: ignore[no-untyped-def]
    """Wait for fetch workers to finish and their results to be processed."""
    await pilot.app.workers.wait_for_complete()
    await pilot.pause()
    await pilot.pause()


class TestDashboardApp:
    @pytest.mark.asyncio()
    async def test_starts_on_subscribers_without_client(self) -> None:
        app = DashboardApp(None, "demo")
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            model = app.model
            assert model.initialized
            assert model.active_view is ViewType.SUBSCRIBERS
            assert not model.current_view.is_loading
            assert model.status_bar.count == 0
            assert model.width == 120

    @pytest.mark.asyncio()
    async def test_loads_and_opens_detail(self, fake_client: FakeClient) -> None:
        app = DashboardApp(fake_client, "work")
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            view = app.model.current_view
            assert view.item_count == 5

            await pilot.press("G", "enter")
            assert view.showing_detail
            assert view.detail.title == "Subscriber: user4@example.com"

            await pilot.press("escape")
            assert not view.showing_detail
            assert view.table.cursor == 4

    @pytest.mark.asyncio()
    async def test_tab_toggles_focus_instead_of_cycling_widgets(self) -> None:
        app = DashboardApp(None)
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            await pilot.press("tab")
            assert app.model.focus is FocusArea.SIDEBAR
            await pilot.press("j")
            assert app.model.active_view is ViewType.CAMPAIGNS
            await pilot.press("tab")
            assert app.model.focus is FocusArea.CONTENT

    @pytest.mark.asyncio()
    async def test_view_shortcuts_fetch(self, fake_client: FakeClient) -> None:
        app = DashboardApp(fake_client)
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            await pilot.press("5")
            await settle(pilot)
            assert app.model.active_view is ViewType.FORMS
            assert app.model.current_view.item_count == 2

            await pilot.press("l")
            await settle(pilot)
            assert app.model.current_view.item_count == 3
            assert ("list_forms", ("embedded", 1, 25)) in fake_client.calls

    @pytest.mark.asyncio()
    async def test_fetch_error_is_shown_not_raised(self, fake_client: FakeClient) -> None:
        fake_client.fail["list_campaigns"] = ApiError(500, "Server Error")
        app = DashboardApp(fake_client)
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            await pilot.press("2")
            await settle(pilot)
            view = app.model.current_view
            assert isinstance(view.error, ApiError)
            assert not view.is_loading
            assert app.model.views[ViewType.SUBSCRIBERS].item_count == 5

    @pytest.mark.asyncio()
    async def test_help_overlay_gates_keys(self) -> None:
        app = DashboardApp(None)
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            await pilot.press("question_mark")
            assert app.model.show_help
            await pilot.press("3")
            assert app.model.active_view is ViewType.SUBSCRIBERS
            await pilot.press("escape")
            assert not app.model.show_help

    @pytest.mark.asyncio()
    async def test_q_quits(self) -> None:
        app = DashboardApp(None)
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            await pilot.press("q")
            await pilot.pause()
            assert app.model.should_quit
        assert app.return_code == 0
