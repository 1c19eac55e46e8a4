"""Unit tests for CLI commands."""

import json
import re

from typer.testing import CliRunner

from cli import app

runner = CliRunner()

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


def _sent_body(mock_request) -> dict:
    return json.loads(mock_request.call_args.kwargs["content"])


class TestLabelsList:
    """Tests for labels_list."""

    def test_builds_query_string(self, session_file, mock_request) -> None:
        result = runner.invoke(app, ["labels_list", "-s", "g", "-p", "2", "-z", "5"])

        assert result.exit_code == 0
        method, url = mock_request.call_args.args
        assert method == "GET"
        assert url == "https://harbor.test/api/labels?scope=g&name=&project_id=0&page=2&page_size=5"
        assert "<== Rsp Status: 200 OK" in result.stdout

    def test_long_flags(self, session_file, mock_request) -> None:
        result = runner.invoke(
            app,
            ["labels_list", "--scope", "p", "--name", "qa", "--project_id", "3"],
        )

        assert result.exit_code == 0
        assert mock_request.call_args.args[1] == (
            "https://harbor.test/api/labels?scope=p&name=qa&project_id=3&page=1&page_size=10"
        )

    def test_missing_scope_fails_before_request(self, session_file, mock_request) -> None:
        result = runner.invoke(app, ["labels_list"])

        assert result.exit_code == 2
        mock_request.assert_not_called()

    def test_invalid_scope_is_usage_error(self, session_file, mock_request) -> None:
        result = runner.invoke(app, ["labels_list", "-s", "x"])

        assert result.exit_code == 2
        mock_request.assert_not_called()

    def test_project_scope_without_project_is_usage_error(self, session_file, mock_request) -> None:
        result = runner.invoke(app, ["labels_list", "-s", "p"])

        assert result.exit_code == 2
        mock_request.assert_not_called()

    def test_missing_session_file_aborts(self, mock_request) -> None:
        result = runner.invoke(app, ["labels_list", "-s", "g"])

        assert result.exit_code == 1
        assert "Error:" in result.stdout
        mock_request.assert_not_called()


class TestLabelCreate:
    """Tests for label_create."""

    def test_posts_body_with_defaults(self, session_file, mock_request) -> None:
        result = runner.invoke(app, ["label_create", "-n", "qa", "-d", "QA passed"])

        assert result.exit_code == 0
        method, url = mock_request.call_args.args
        assert (method, url) == ("POST", "https://harbor.test/api/labels")
        body = _sent_body(mock_request)
        assert body["id"] == 0
        assert body["name"] == "qa"
        assert body["description"] == "QA passed"
        assert body["color"] == "#000000"
        assert body["scope"] == "g"
        assert body["project_id"] == 0
        assert body["deleted"] is False
        assert TIMESTAMP_RE.match(body["creation_time"])
        assert TIMESTAMP_RE.match(body["update_time"])
        assert "==> request body:" in result.stdout

    def test_all_flags(self, session_file, mock_request) -> None:
        result = runner.invoke(
            app,
            [
                "label_create",
                "-i", "100",
                "-n", "qa",
                "-d", "QA passed",
                "-c", "#A9B6BE",
                "-s", "p",
                "-p", "3",
                "--creation_time", "2018-01-01T00:00:00Z",
                "--update_time", "2018-01-02T00:00:00Z",
                "--deleted",
            ],
        )

        assert result.exit_code == 0
        assert _sent_body(mock_request) == {
            "id": 100,
            "name": "qa",
            "description": "QA passed",
            "color": "#A9B6BE",
            "scope": "p",
            "project_id": 3,
            "creation_time": "2018-01-01T00:00:00Z",
            "update_time": "2018-01-02T00:00:00Z",
            "deleted": True,
        }

    def test_missing_description_fails_before_request(self, session_file, mock_request) -> None:
        result = runner.invoke(app, ["label_create", "-n", "qa"])

        assert result.exit_code == 2
        mock_request.assert_not_called()


class TestLabelById:
    """Tests for label_get_by_id and label_del_by_id."""

    def test_get_appends_id(self, session_file, mock_request) -> None:
        result = runner.invoke(app, ["label_get_by_id", "-i", "100"])

        assert result.exit_code == 0
        assert mock_request.call_args.args == ("GET", "https://harbor.test/api/labels/100")

    def test_delete_appends_id(self, session_file, mock_request) -> None:
        result = runner.invoke(app, ["label_del_by_id", "--id", "100"])

        assert result.exit_code == 0
        assert mock_request.call_args.args == ("DELETE", "https://harbor.test/api/labels/100")
        assert "==> DELETE https://harbor.test/api/labels/100" in result.stdout

    def test_missing_id_fails_before_request(self, session_file, mock_request) -> None:
        result = runner.invoke(app, ["label_get_by_id"])

        assert result.exit_code == 2
        mock_request.assert_not_called()


class TestLabelUpdate:
    """Tests for label_update."""

    def test_puts_body_without_timestamps(self, session_file, mock_request) -> None:
        result = runner.invoke(
            app,
            ["label_update", "-i", "100", "-n", "qa", "-d", "QA done", "-c", "#FF0000"],
        )

        assert result.exit_code == 0
        assert mock_request.call_args.args == ("PUT", "https://harbor.test/api/labels/100")
        assert _sent_body(mock_request) == {
            "id": 100,
            "name": "qa",
            "description": "QA done",
            "color": "#FF0000",
            "scope": "g",
            "project_id": 0,
            "deleted": False,
        }
        assert mock_request.call_args.kwargs["headers"]["Content-Type"] == "application/json"

    def test_server_error_exits_non_zero(self, session_file, mock_request) -> None:
        import httpx

        mock_request.return_value = httpx.Response(500, text="boom")

        result = runner.invoke(app, ["label_update", "-i", "1", "-n", "qa", "-d", "d"])

        assert result.exit_code == 1
        assert "<== Rsp Status: 500 Internal Server Error" in result.stdout
        assert "<== Rsp Body: boom" in result.stdout


class TestSystemCommands:
    """Tests for system commands."""

    def test_system_info(self) -> None:
        result = runner.invoke(app, ["system", "info"])
        assert result.exit_code == 0
        assert "Application Info" in result.stdout
        assert "https://harbor.test" in result.stdout

    def test_system_version(self) -> None:
        result = runner.invoke(app, ["system", "version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout

    def test_system_config_section(self) -> None:
        result = runner.invoke(app, ["system", "config", "logging"])
        assert result.exit_code == 0
        assert "handlers" in result.stdout

    def test_system_config_unknown_section(self) -> None:
        result = runner.invoke(app, ["system", "config", "nope"])
        assert result.exit_code == 1
        assert "Unknown section" in result.stdout


class TestMainApp:
    """Tests for main app options."""

    def test_help_lists_label_commands(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for name in ["labels_list", "label_create", "label_del_by_id", "label_get_by_id", "label_update"]:
            assert name in result.stdout

    def test_verbose_flag(self) -> None:
        result = runner.invoke(app, ["-v", "system", "version"])
        assert result.exit_code == 0

    def test_debug_flag(self) -> None:
        result = runner.invoke(app, ["--debug", "system", "version"])
        assert result.exit_code == 0
        assert "Debug mode enabled" in result.stdout
