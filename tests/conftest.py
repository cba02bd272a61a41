from __future__ import annotations

import pytest
from fakes import FakeClient, make_automations, make_campaigns, make_forms, make_groups, make_subscribers


@pytest.fixture()
def fake_client() -> FakeClient:
    return FakeClient(
        subscribers=make_subscribers(5),
        campaigns=make_campaigns(3),
        automations=make_automations(2),
        groups=make_groups(4),
        forms={
            "popup": make_forms(2, "popup"),
            "embedded": make_forms(3, "embedded"),
            "promotion": make_forms(1, "promotion"),
        },
    )
