"""Tests for command line option handling."""

from pathlib import Path

import pytest

from mumbot.cli import build_parser, config_overrides, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("IRC_SERVER", "IRC_PORT", "IRC_CHANNEL", "IRC_SECURE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_no_options_gives_no_overrides() -> None:
    """Given no options, when building overrides, then nothing is overridden."""
    args = build_parser().parse_args([])

    assert config_overrides(args) == {}


def test_short_options_map_to_config_fields() -> None:
    """Given the short options, when building overrides, then each maps to its config field."""
    args = build_parser().parse_args(
        [
            "-s", "irc.example.net",
            "-p", "6667",
            "-c", "#mumble",
            "-n", "bot",
            "-P", "secret",
            "-f", "/tmp/mumble.log",
            "-d", "60",
        ]
    )  # fmt: skip

    assert config_overrides(args) == {
        "irc_server": "irc.example.net",
        "irc_port": 6667,
        "irc_channel": "#mumble",
        "irc_nick": "bot",
        "irc_password": "secret",
        "log_file": "/tmp/mumble.log",
        "min_delay_seconds": 60,
    }


def test_flags_map_to_tls_and_log_level() -> None:
    """Given --insecure and -v, when building overrides, then TLS is off and logging is DEBUG."""
    args = build_parser().parse_args(["--insecure", "-v"])

    assert config_overrides(args) == {"irc_secure": False, "log_level": "DEBUG"}


def test_load_config_prefers_options_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a server in env and on the command line, when loading, then the option wins and env fills the rest."""
    monkeypatch.setenv("IRC_SERVER", "irc.fromenv.net")
    monkeypatch.setenv("IRC_CHANNEL", "#fromenv")

    config = load_config(["--server", "irc.example.net"])

    assert config.irc_server == "irc.example.net"
    assert config.irc_channel == "#fromenv"


def test_non_numeric_port_exits() -> None:
    """Given a non-numeric port, when parsing, then argparse exits with an error."""
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-p", "abc"])
