"""Tests for the sauron CLI — run main(argv) against a fake transport."""

import base64

import pytest

import sauron.cli as cli
import sauron.core.config as config_module
from sauron.client import SauronClient


@pytest.fixture
def run(monkeypatch, transport):
    """Run the CLI with a client wired to the fake transport."""
    built = {}

    def fake_build_client(args):
        client = SauronClient(transport=transport)
        if args.token:
            client.set_token(args.token)
        built["client"] = client
        return client

    monkeypatch.setattr(cli, "build_client", fake_build_client)
    monkeypatch.setattr(cli, "setup_logging", lambda level=None: None)

    def _run(*argv):
        return cli.main(list(argv))

    return _run


def test_health(run, transport, capsys):
    transport.respond("GET", "/health", 200, {"status": "ok"})
    assert run("health") == 0
    assert "ok" in capsys.readouterr().out


def test_login_prints_token(run, transport, capsys):
    transport.respond("POST", "/auth/login", 200, {"token": "abc123"})
    assert run("login", "--api-key", "sk-1", "--provider", "mistral") == 0
    assert "abc123" in capsys.readouterr().out
    assert transport.calls[0]["body"] == {"api_key": "sk-1", "provider": "mistral"}


def test_query_without_token_reports_auth_error(run, transport, capsys):
    assert run("query", "hello") == 1
    assert "auth: login required" in capsys.readouterr().err
    assert transport.call_count == 0


def test_query_prints_response(run, transport, capsys):
    transport.respond("POST", "/ai/query", 200, {"response": "General Kenobi"})
    assert run("--token", "jwt", "query", "hello there", "--model", "m1") == 0
    assert "General Kenobi" in capsys.readouterr().out
    assert transport.calls[0]["body"]["model"] == "m1"


def test_query_stream(run, transport, capsys):
    transport.stream("/ai/query/stream", ["Hel", "lo"])
    assert run("--token", "jwt", "query", "greet", "--stream") == 0
    assert "Hello" in capsys.readouterr().out


def test_query_algorithm(run, transport, capsys):
    transport.respond(
        "POST",
        "/ai/query/algorithm",
        200,
        {
            "explanation": "walk the list once",
            "response": "def f(xs): return max(xs)",
            "complexity": {
                "time": {"value": "O(n)", "explanation": "single pass"},
                "space": {"value": "O(1)", "explanation": "no copies"},
            },
        },
    )
    assert run("--token", "jwt", "query", "max of list", "--algorithm") == 0
    out = capsys.readouterr().out
    assert "walk the list once" in out
    assert "O(n)" in out


def test_query_attaches_images(run, transport, tmp_path):
    image = tmp_path / "pic.png"
    image.write_bytes(b"\x89PNG")
    transport.respond("POST", "/ai/query", 200, {"response": "a picture"})

    assert run("--token", "jwt", "query", "what is this", "--image", str(image)) == 0

    assert transport.calls[0]["body"]["images"] == [base64.b64encode(b"\x89PNG").decode("ascii")]


def test_missing_image_file_fails(run, transport, capsys):
    assert run("--token", "jwt", "query", "x", "--image", "/nonexistent/pic.png") == 1
    assert transport.call_count == 0


def test_api_error_exit_code(run, transport, capsys):
    transport.respond("POST", "/auth/login", 401, {"error": "invalid credentials"})
    assert run("login", "--api-key", "bad") == 1
    assert "api: invalid credentials" in capsys.readouterr().err


def test_stream_and_algorithm_are_exclusive(run):
    with pytest.raises(SystemExit):
        run("--token", "jwt", "query", "x", "--stream", "--algorithm")


# ── build_client ───────────────────────────────────────────


@pytest.fixture
def restore_config():
    previous = config_module.config
    yield
    config_module.config = previous


def test_build_client_flags_override_env(monkeypatch, restore_config):
    monkeypatch.setenv("SAURON_BASE_URL", "http://from-env:3000")
    monkeypatch.setenv("SAURON_TOKEN", "env-jwt")
    args = cli.build_parser().parse_args(
        ["--base-url", "http://from-flag:4000", "--token", "flag-jwt", "health"]
    )

    with cli.build_client(args) as client:
        assert client.transport.base_url == "http://from-flag:4000"
        assert client.get_token() == "flag-jwt"
        assert client.is_authenticated


def test_build_client_falls_back_to_env(monkeypatch, restore_config):
    monkeypatch.setenv("SAURON_BASE_URL", "http://from-env:3000")
    monkeypatch.setenv("SAURON_TOKEN", "env-jwt")
    args = cli.build_parser().parse_args(["health"])

    with cli.build_client(args) as client:
        assert client.transport.base_url == "http://from-env:3000"
        assert client.get_token() == "env-jwt"


def test_build_client_without_token_is_unauthenticated(monkeypatch, restore_config):
    monkeypatch.delenv("SAURON_TOKEN", raising=False)
    args = cli.build_parser().parse_args(["health"])

    with cli.build_client(args) as client:
        assert not client.is_authenticated
