"""Tests for slack_bot_kit.runner"""

from unittest.mock import MagicMock, patch

import pytest

from slack_bot_kit.config import SlackConfig
from slack_bot_kit.runner import PluginInfo, SlackBotRunner


@pytest.fixture
def config():
    return SlackConfig(
        bot_token="xoxb-test",
        app_token="xapp-test",
        app_id="A1",
        bot_name="Test Bot",
        version="1.0.0",
        status_channel="C_STATUS",
    )


@pytest.fixture
def mock_app(mock_client):
    app = MagicMock()
    app.client = mock_client
    return app


def echo_plugin(slack):
    slack.dot_command("echo", lambda event: slack.post_message(channel=event["channel"], text="echo"))
    return PluginInfo(name="echo", description="Repeats", version="2.0.0")


def broken_plugin(slack):
    raise RuntimeError("cannot install")


class TestPlugins:
    def test_loads_plugins(self, config, mock_app):
        runner = SlackBotRunner(config, plugins=[echo_plugin], app=mock_app)

        assert runner.loaded == [PluginInfo(name="echo", description="Repeats", version="2.0.0")]
        assert ".echo" in runner.slack.commands.names

    def test_broken_plugin_is_skipped(self, config, mock_app, caplog):
        runner = SlackBotRunner(config, plugins=[broken_plugin, echo_plugin], app=mock_app)

        assert [p.name for p in runner.loaded] == ["echo"]
        assert "Error loading plugin" in caplog.text

    def test_facade_uses_app(self, config, mock_app):
        runner = SlackBotRunner(config, app=mock_app)
        assert runner.slack.client is mock_app.client
        assert runner.slack.app_id == "A1"
        mock_app.event.assert_called_with("message")


class TestDiagnostics:
    def test_diagnostic_command_replies_in_thread(self, config, mock_app, mock_client):
        runner = SlackBotRunner(config, plugins=[echo_plugin], app=mock_app)

        runner.slack.handle_message({"text": ".status", "user": "U5", "channel": "C1", "ts": "9.9"})

        kwargs = mock_client.chat_postMessage.call_args.kwargs
        assert kwargs["channel"] == "C1"
        assert kwargs["thread_ts"] == "9.9"
        assert "Test Bot Diagnostics" in kwargs["text"]
        assert "1.0.0" in kwargs["text"]
        assert "echo v2.0.0" in kwargs["text"]

    def test_diagnostics_without_plugins(self, config, mock_app):
        runner = SlackBotRunner(config, app=mock_app)
        assert "*Plugins:* none" in runner._get_diagnostic_info()


class TestStatus:
    def test_post_status_with_channel(self, config, mock_app, mock_client):
        runner = SlackBotRunner(config, app=mock_app)
        runner._post_status("Test message")
        mock_client.chat_postMessage.assert_called_once_with(channel="C_STATUS", text="Test message")

    def test_post_status_without_channel(self, config, mock_app, mock_client):
        config.status_channel = None
        runner = SlackBotRunner(config, app=mock_app)
        runner._post_status("Test message")
        mock_client.chat_postMessage.assert_not_called()

    def test_post_status_failure_is_logged(self, config, mock_app, mock_client, caplog):
        mock_client.chat_postMessage.return_value = {"ok": False, "error": "channel_not_found"}
        runner = SlackBotRunner(config, app=mock_app)
        runner._post_status("Test message")
        assert "Error posting status message" in caplog.text


class TestStart:
    @patch("slack_bot_kit.runner.SocketModeHandler")
    @patch("slack_bot_kit.runner.signal.signal")
    def test_start_runs_socket_mode(self, mock_signal, mock_handler_class, config, mock_app, mock_client):
        runner = SlackBotRunner(config, app=mock_app)

        runner.start()

        mock_handler_class.assert_called_once_with(mock_app, "xapp-test")
        mock_handler_class.return_value.start.assert_called_once()
        assert mock_signal.call_count == 2
        assert "is online" in mock_client.chat_postMessage.call_args.kwargs["text"]

    def test_shutdown_posts_status_and_exits(self, config, mock_app, mock_client):
        runner = SlackBotRunner(config, app=mock_app)

        with pytest.raises(SystemExit):
            runner._shutdown_handler(None, None)
        assert "shutting down" in mock_client.chat_postMessage.call_args.kwargs["text"]


class TestDiagnosticsConfig:
    def test_empty_list_disables_diagnostics(self, config, mock_app, mock_client):
        config.diagnostic_commands = []
        runner = SlackBotRunner(config, app=mock_app)

        assert runner.slack.handle_message({"text": ".status", "user": "U5", "channel": "C1"}) == 0
        mock_client.chat_postMessage.assert_not_called()

    def test_plugin_command_sharing_prefix_also_fires_diagnostics(self, config, mock_app, mock_client):
        plugin_handler = MagicMock()

        def statusx_plugin(slack):
            slack.dot_command("statusx", plugin_handler)
            return PluginInfo(name="statusx", description="", version="1.0.0")

        runner = SlackBotRunner(config, plugins=[statusx_plugin], app=mock_app)
        runner.slack.handle_message({"text": ".statusx", "user": "U5", "channel": "C1", "ts": "1.1"})

        plugin_handler.assert_called_once()
        assert "Diagnostics" in mock_client.chat_postMessage.call_args.kwargs["text"]
