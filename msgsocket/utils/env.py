"""Environment helper utilities."""

from __future__ import annotations

import os


def env_flag(name: str, default: bool) -> bool:
    """Return True/False for typical truthy env encodings."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Split a comma-separated env var into stripped, non-empty entries.

    An unset variable yields ``default``; a set but blank variable yields an
    empty tuple so operators can switch a list off explicitly.
    """
    value = os.getenv(name)
    if value is None:
        return tuple(default)
    return tuple(item.strip() for item in value.split(",") if item.strip())


__all__ = ["env_flag", "env_list"]
