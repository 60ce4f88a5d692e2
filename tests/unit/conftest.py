"""Unit-test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_brevo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's real BREVO_* environment out of the tests."""
    for key in ("BREVO_API_KEY", "BREVO_BASE_URL", "BREVO_TIMEOUT_SECONDS", "BREVO_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
