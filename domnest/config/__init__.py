"""
Config Module

Checker settings and their YAML loader.
"""

from domnest.config.loader import find_settings, load_settings, resolve_settings
from domnest.config.schema import CheckerSettings

__all__ = [
    "CheckerSettings",
    "find_settings",
    "load_settings",
    "resolve_settings",
]
