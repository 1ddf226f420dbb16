"""Tests for the top-level CLI."""

from typer.testing import CliRunner

from cli.main import app
from demo.pages import HOME_PAGE

runner = CliRunner()


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "serve" in result.output
    assert "page" in result.output


def test_page_prints_home_page():
    result = runner.invoke(app, ["page"])
    assert result.exit_code == 0
    assert result.stdout == HOME_PAGE


def test_show_config(monkeypatch):
    monkeypatch.setattr("demo.config.settings.port", 9090)
    result = runner.invoke(app, ["show-config"])
    assert result.exit_code == 0
    assert "port = 9090" in result.stdout
    assert "host = " in result.stdout


def test_serve_forwards_options(monkeypatch):
    calls = []
    monkeypatch.setattr("demo.server.serve", lambda **kwargs: calls.append(kwargs))

    result = runner.invoke(
        app, ["serve", "--host", "127.0.0.1", "--port", "9090", "--log-level", "debug"]
    )

    assert result.exit_code == 0
    assert calls == [{"host": "127.0.0.1", "port": 9090, "log_level": "debug"}]


def test_serve_defaults_are_left_to_settings(monkeypatch):
    calls = []
    monkeypatch.setattr("demo.server.serve", lambda **kwargs: calls.append(kwargs))

    result = runner.invoke(app, ["serve"])

    assert result.exit_code == 0
    assert calls == [{"host": None, "port": None, "log_level": None}]


def test_serve_rejects_out_of_range_port(monkeypatch):
    calls = []
    monkeypatch.setattr("demo.server.serve", lambda **kwargs: calls.append(kwargs))

    result = runner.invoke(app, ["serve", "--port", "70000"])

    assert result.exit_code == 2
    assert calls == []


def test_serve_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setattr("demo.server.serve", lambda **kwargs: None)
    result = runner.invoke(app, ["serve", "--log-level", "loud"])
    assert result.exit_code == 2
