"""Command line options for mumbot."""

import argparse
from collections.abc import Sequence

from mumbot.adapters.config import AppConfig

# Command line destination -> AppConfig field
_OPTION_FIELDS = {
    "server": "irc_server",
    "port": "irc_port",
    "chan": "irc_channel",
    "nick": "irc_nick",
    "password": "irc_password",
    "logfile": "log_file",
    "mindelay": "min_delay_seconds",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Every option is optional; anything left out falls back to the
    environment and then to the defaults in ``AppConfig``.
    """
    parser = argparse.ArgumentParser(
        prog="mumbot",
        description="Announce users joining a Mumble server in an IRC channel",
        epilog="Send SIGHUP to restart following the log, e.g. after log rotation.",
    )
    parser.add_argument("-s", "--server", help="IRC server to connect to")
    parser.add_argument("-p", "--port", type=int, help="IRC port to connect to")
    parser.add_argument("-c", "--chan", help="IRC channel to join")
    parser.add_argument("-n", "--nick", help="IRC nick")
    parser.add_argument("-P", "--pass", dest="password", help="IRC server password")
    parser.add_argument("-f", "--logfile", help="Mumble server log path")
    parser.add_argument("-d", "--mindelay", type=int, help="Min time between chats in seconds")
    parser.add_argument(
        "--insecure", action="store_true", help="Connect to IRC without TLS"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output including raw IRC lines"
    )
    return parser


def config_overrides(args: argparse.Namespace) -> dict[str, object]:
    """Map parsed options to AppConfig field overrides."""
    overrides: dict[str, object] = {
        field: getattr(args, option)
        for option, field in _OPTION_FIELDS.items()
        if getattr(args, option) is not None
    }
    if args.insecure:
        overrides["irc_secure"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return overrides


def load_config(argv: Sequence[str] | None = None) -> AppConfig:
    """Parse the command line and build the configuration.

    Raises:
        pydantic.ValidationError: If a value is invalid.
    """
    args = build_parser().parse_args(argv)
    return AppConfig(**config_overrides(args))
