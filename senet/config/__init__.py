"""
Senet Configuration.

Environment variables, settings, and logging configuration.
"""

from senet.config.settings import Settings, configure_logging, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
