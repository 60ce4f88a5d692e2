"""Property tests for offset pagination aggregation.

For any sequence of page sizes ending in a short page, the aggregator makes
exactly one call per page, requests consecutive offsets, and returns every
item in order. Any non-200 page aborts the walk and is surfaced unchanged.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

from hypothesis import given, settings
from hypothesis import strategies as st

from tests.conftest import error_statuses, make_client, make_response, page_response, page_sizes


@st.composite
def page_plans(draw) -> tuple[int, list[int]]:  # noqa: ANN001
    """A page size plus item counts: zero or more full pages, then one short page."""
    size = draw(page_sizes)
    full_pages = draw(st.integers(min_value=0, max_value=5))
    last = draw(st.integers(min_value=0, max_value=size - 1))
    return size, [size] * full_pages + [last]


def _paginate(responses: list, page_size: int):  # noqa: ANN202
    async def _call():  # noqa: ANN202
        with patch(
            "httpx.AsyncClient.request", new_callable=AsyncMock, side_effect=responses
        ) as mock_request:
            result = await make_client().fetch_all_paginated(
                "/contacts/lists", "lists", page_size=page_size
            )
        return result, mock_request

    return asyncio.run(_call())


@settings(max_examples=100)
@given(plan=page_plans())
def test_collects_every_item_in_order(plan: tuple[int, list[int]]) -> None:
    size, counts = plan
    responses = []
    start = 0
    for count in counts:
        responses.append(page_response("lists", count, start=start))
        start += count

    result, mock_request = _paginate(responses, size)

    assert mock_request.call_count == len(counts)
    assert result.status == 200
    assert result.data["count"] == sum(counts)
    assert [item["id"] for item in result.data["lists"]] == list(range(sum(counts)))

    offsets = [call.kwargs["params"]["offset"] for call in mock_request.call_args_list]
    assert offsets == [i * size for i in range(len(counts))]


@settings(max_examples=100)
@given(
    size=page_sizes,
    full_pages=st.integers(min_value=0, max_value=4),
    status=st.one_of(error_statuses, st.sampled_from([201, 204])),
)
def test_non_200_page_aborts_walk(size: int, full_pages: int, status: int) -> None:
    responses = [page_response("lists", size, start=i * size) for i in range(full_pages)]
    responses.append(make_response(status, body={"message": "stop"}))

    result, mock_request = _paginate(responses, size)

    assert mock_request.call_count == full_pages + 1
    assert result.status == status
    if status >= 400:
        assert result.data is None
        assert result.error.message == "stop"
    else:
        assert result.data == {"message": "stop"}
