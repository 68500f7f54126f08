"""Tests for slack_bot_kit.slack"""

from unittest.mock import MagicMock, patch

import pytest

from slack_bot_kit.slack import Slack, supports_subscription


@pytest.fixture
def events():
    return MagicMock()


@pytest.fixture
def slack(mock_client, events):
    return Slack(mock_client, events=events, interactions=MagicMock(), app_id="A1")


class TestInit:
    def test_subscribes_to_messages(self, slack, events):
        events.event.assert_called_once_with("message")
        events.event.return_value.assert_called_once_with(slack.handle_message)

    def test_loads_identity(self, slack):
        assert slack.bot.id == "B123BOT"
        assert slack.bot.user_id == "U123BOT"

    def test_source_without_subscription_is_ignored(self, mock_client, caplog):
        slack = Slack(mock_client, events=object())
        assert slack.events is None
        assert "does not support subscription" in caplog.text

    @patch.dict("os.environ", {"SLACK_APP_ID": "A_ENV"})
    def test_app_id_from_env(self, mock_client):
        assert Slack(mock_client).app_id == "A_ENV"

    @patch.dict("os.environ", {}, clear=True)
    def test_app_id_defaults_empty(self, mock_client):
        assert Slack(mock_client).app_id == ""

    def test_supports_subscription(self):
        assert supports_subscription(MagicMock())
        assert not supports_subscription(object())


class TestHandleMessage:
    def test_dispatches_commands(self, slack):
        handler = MagicMock()
        slack.dot_command("hello", handler)

        slack.handle_message({"text": ".hello", "user": "U5", "channel": "C1"})

        handler.assert_called_once()

    def test_drops_bot_messages(self, slack):
        handler = MagicMock()
        slack.dot_command("hello", handler)

        assert slack.handle_message({"text": ".hello", "bot_id": "B123BOT"}) == 0
        assert slack.handle_message({"text": ".hello", "message": {"user": "U123BOT"}}) == 0
        handler.assert_not_called()

    def test_unloaded_identity_does_not_filter(self, mock_client):
        mock_client.auth_test.side_effect = Exception("network down")
        slack = Slack(mock_client)
        handler = MagicMock()
        slack.dot_command("hello", handler)

        slack.handle_message({"text": ".hello", "bot_id": "B123BOT"})

        handler.assert_called_once()


class TestPassThrough:
    def test_options(self, slack):
        slack.store_options("x", [{"label": "A", "value": "1"}])
        assert slack.get_options("x") == [{"label": "A", "value": "1"}]
        assert slack.get_options("y") is None

    def test_post_message(self, slack, mock_client):
        slack.post_message(channel="C1", text="hi")
        mock_client.chat_postMessage.assert_called_once_with(channel="C1", text="hi")

    def test_post_error(self, slack, mock_client):
        slack.post_error("C1", "boom")
        assert mock_client.chat_postMessage.call_args.kwargs["icon_emoji"] == ":x:"

    def test_view_readers(self, slack):
        view = {"state": {"values": {"b": {"selection": {"selected_option": {"value": "v"}}}}}}
        assert slack.get_selected_option(view, "b") == "v"
        assert slack.get_selected_options(view, "b") == []
        assert slack.get_plain_text_value(view, "b", "selection") is None
