"""Small shared utilities."""

from .env import env_flag, env_list

__all__ = ["env_flag", "env_list"]
