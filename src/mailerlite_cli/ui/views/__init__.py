"""Dashboard resource views, one per MailerLite resource."""

from __future__ import annotations

from typing import Any

from mailerlite_cli.ui.state import ViewType
from mailerlite_cli.ui.views.automations import AutomationsView
from mailerlite_cli.ui.views.base import ResourceView
from mailerlite_cli.ui.views.campaigns import CampaignsView
from mailerlite_cli.ui.views.forms import FormsView, FormType
from mailerlite_cli.ui.views.groups import GroupsView
from mailerlite_cli.ui.views.subscribers import SubscribersView

VIEW_CLASSES: dict[ViewType, type[ResourceView[Any]]] = {
    ViewType.SUBSCRIBERS: SubscribersView,
    ViewType.CAMPAIGNS: CampaignsView,
    ViewType.AUTOMATIONS: AutomationsView,
    ViewType.GROUPS: GroupsView,
    ViewType.FORMS: FormsView,
}


def build_views(client: Any | None) -> dict[ViewType, ResourceView[Any]]:
    """One freshly constructed (loading, empty) view per ViewType."""
    return {view_type: cls(client) for view_type, cls in VIEW_CLASSES.items()}


__all__ = [
    "AutomationsView",
    "CampaignsView",
    "FormType",
    "FormsView",
    "GroupsView",
    "ResourceView",
    "SubscribersView",
    "VIEW_CLASSES",
    "build_views",
]
