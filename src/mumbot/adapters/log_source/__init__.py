"""Log source adapters."""

from mumbot.adapters.log_source.subprocess_log_source import SubprocessLogSource

__all__ = ["SubprocessLogSource"]
