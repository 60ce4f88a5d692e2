"""Shared test fixtures, HTTP helpers and hypothesis strategies."""

from __future__ import annotations

import json

import httpx
import pytest
from hypothesis import strategies as st

from brevo_client.client import BrevoClient
from brevo_client.config.settings import BrevoSettings

TEST_API_KEY = "xkeysib-test-key-0123456789"
TEST_BASE_URL = "https://api.brevo.test/v3"


# ---------------------------------------------------------------------------
# Settings / client fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> BrevoSettings:
    """Test settings pointing at a fake host."""
    return BrevoSettings(api_key=TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def client(settings: BrevoSettings) -> BrevoClient:
    return BrevoClient(settings)


def make_client() -> BrevoClient:
    """Client for hypothesis tests, where function-scoped fixtures don't fit."""
    return BrevoClient(BrevoSettings(api_key=TEST_API_KEY, base_url=TEST_BASE_URL))


# ---------------------------------------------------------------------------
# HTTP response helpers
# ---------------------------------------------------------------------------

def make_response(
    status: int,
    body: object = None,
    content: bytes | None = None,
) -> httpx.Response:
    """Build a real httpx.Response; ``content`` wins over ``body``."""
    request = httpx.Request("GET", TEST_BASE_URL)
    if content is not None:
        return httpx.Response(status, content=content, request=request)
    if body is None:
        return httpx.Response(status, request=request)
    return httpx.Response(status, json=body, request=request)


def page_response(field: str, size: int, start: int = 0) -> httpx.Response:
    """One 200 page holding ``size`` items numbered from ``start``."""
    items = [{"id": start + i} for i in range(size)]
    return make_response(200, body={field: items, "count": 1000})


def sent_json(call) -> object:  # noqa: ANN001
    """Decode the JSON body of a recorded ``AsyncClient.request`` call."""
    content = call.kwargs.get("content")
    return None if content is None else json.loads(content)


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

error_statuses = st.integers(min_value=400, max_value=599)
success_statuses = st.sampled_from([200, 201, 202, 204])

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**31), max_value=2**31),
    st.text(max_size=20),
)
json_bodies = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(min_size=1, max_size=8), children, max_size=4),
    ),
    max_leaves=10,
)

page_sizes = st.integers(min_value=1, max_value=20)
