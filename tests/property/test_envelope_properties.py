"""Property tests for response envelope consistency.

Every call resolves to { status, data, error }: non-2xx statuses become an
error envelope carrying the same status, never an exception, and successful
bodies pass through unchanged.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

from hypothesis import given, settings
from hypothesis import strategies as st

from tests.conftest import (
    error_statuses,
    json_bodies,
    make_client,
    make_response,
    success_statuses,
)

endpoints = st.sampled_from(["/account", "/contacts/5", "/contacts/lists/3", "/contacts/folders"])
error_bodies = st.one_of(
    st.none(),
    json_bodies,
    st.fixed_dictionaries(
        {"message": st.text(min_size=1, max_size=30)},
        optional={"code": st.sampled_from(["invalid_parameter", "not_found", "unauthorized"])},
    ),
)


def _run(response, endpoint: str = "/account"):  # noqa: ANN001, ANN202
    async def _call():  # noqa: ANN202
        with patch(
            "httpx.AsyncClient.request", new_callable=AsyncMock, return_value=response
        ):
            return await make_client().request(endpoint)

    return asyncio.run(_call())


@settings(max_examples=100)
@given(status=error_statuses, body=error_bodies, endpoint=endpoints)
def test_error_statuses_return_error_envelope(status: int, body: object, endpoint: str) -> None:
    result = _run(make_response(status, body=body), endpoint)

    assert result.status == status
    assert result.data is None
    assert result.error is not None
    assert result.error.status == status
    assert result.error.details == body
    if isinstance(body, dict) and body.get("message"):
        assert result.error.message == str(body["message"])


@settings(max_examples=100)
@given(status=success_statuses, body=json_bodies)
def test_success_bodies_round_trip_unchanged(status: int, body: object) -> None:
    result = _run(make_response(status, body=body))

    assert result.status == status
    assert result.error is None
    assert result.data == body


@settings(max_examples=100)
@given(
    status=st.one_of(success_statuses, error_statuses),
    raw=st.sampled_from([b"", b"not json", b"{truncated", b"\xff\xfe"]),
)
def test_unparsable_bodies_never_raise(status: int, raw: bytes) -> None:
    result = _run(make_response(status, content=raw))

    assert result.status == status
    assert result.data is None
    if status >= 400:
        assert result.error.details is None
