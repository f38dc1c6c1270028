"""Configuration adapters."""

from mumbot.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
