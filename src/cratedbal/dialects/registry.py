"""
Lookup of platform implementations by name.
"""

from __future__ import annotations

import os
from typing import Callable, Dict

from ..errors import PlatformConfigurationError
from .base import Platform
from .crate import get_crate_platform

PLATFORM_ENV_VAR = "CRATEDBAL_PLATFORM"

PlatformFactory = Callable[[], Platform]

_PLATFORMS: Dict[str, PlatformFactory] = {
    "crate": get_crate_platform,
    "cratedb": get_crate_platform,
}


def available_platforms() -> list[str]:
    return sorted(_PLATFORMS)


def get_platform(name: str) -> Platform:
    """
    Return a new platform for ``name``. Driver-qualified names such as
    ``crate+http`` resolve through their base name.
    """
    key = name.strip().lower().split("+", 1)[0]
    try:
        factory = _PLATFORMS[key]
    except KeyError as exc:
        raise PlatformConfigurationError(
            f"Unknown platform '{name}'; expected one of {', '.join(available_platforms())}"
        ) from exc
    return factory()


def platform_from_env(env_var: str = PLATFORM_ENV_VAR, *, default: str | None = "crate") -> Platform:
    """
    Resolve the platform named by ``env_var``, falling back to ``default``.
    """
    value = os.getenv(env_var, "").strip() or default
    if not value:
        raise PlatformConfigurationError(f"Environment variable {env_var} is not set")
    return get_platform(value)
