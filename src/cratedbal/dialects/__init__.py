"""
Platform strategy registry.
"""

from .base import Platform, PlatformCapabilities
from .crate import CratePlatform
from .registry import available_platforms, get_platform, platform_from_env
from .type_mapping import TypeMapping

__all__ = [
    "Platform",
    "PlatformCapabilities",
    "CratePlatform",
    "TypeMapping",
    "available_platforms",
    "get_platform",
    "platform_from_env",
]
