"""Shared fixtures."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_client():
    """WebClient stand-in with a loaded bot identity."""
    client = MagicMock()
    client.token = "xoxb-test"
    client.auth_test.return_value = {
        "ok": True,
        "bot_id": "B123BOT",
        "user": "testbot",
        "user_id": "U123BOT",
    }
    client.chat_postMessage.return_value = {"ok": True, "ts": "111.222"}
    client.chat_update.return_value = {"ok": True, "ts": "111.222"}
    return client
