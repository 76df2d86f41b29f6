"""
Configuration Package

Settings are read once from the environment and `.env`; import the
shared `settings` instance rather than constructing `Settings` again.
"""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
