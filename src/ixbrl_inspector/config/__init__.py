"""
Config package export.

Keeps import sites clean and stable:
    from ixbrl_inspector.config import get_settings, InspectorSettings
"""

from __future__ import annotations

from .settings import Environment, InspectorSettings, get_settings

__all__ = ["Environment", "InspectorSettings", "get_settings"]
