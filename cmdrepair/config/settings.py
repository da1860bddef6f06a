"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from cmdrepair.config.shell_config import BuiltinArgumentsPolicy
from cmdrepair.exceptions import ConfigurationError

RUNNER_CHOICES = ("auto", "native", "repaired")
TRUTHY = {"1", "true", "yes", "on"}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, environ: Optional[dict[str, str]] = None):
        if environ is None:
            # Load environment variables from .env file
            _ = load_dotenv()
        self._environ = environ

        self.runner: str = self._get_choice(
            "CMDREPAIR_RUNNER", "auto", RUNNER_CHOICES
        )
        policy = self._get_choice(
            "CMDREPAIR_BUILTIN_ARGS",
            BuiltinArgumentsPolicy.JOIN.value,
            tuple(p.value for p in BuiltinArgumentsPolicy),
        )
        self.builtin_arguments: BuiltinArgumentsPolicy = BuiltinArgumentsPolicy(policy)
        self.allow_exec: bool = (
            self._get_env("CMDREPAIR_ALLOW_EXEC", "0").strip().lower() in TRUTHY
        )
        self.log_level: str = self._get_env("CMDREPAIR_LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(
                f"Invalid value for CMDREPAIR_LOG_LEVEL: {self.log_level!r}"
            )
        self.comspec: Optional[str] = self._get_env("COMSPEC", "") or None

        self.server_host: str = self._get_env("HOST", "127.0.0.1")
        self.server_port: int = self._get_port("PORT", "8000")
        self.server_reload: bool = self._get_env("RELOAD", "0").strip().lower() in TRUTHY

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        if self._environ is not None:
            return self._environ.get(key, default)
        return os.getenv(key, default)

    def _get_choice(self, key: str, default: str, choices: tuple[str, ...]) -> str:
        """Get an environment variable restricted to a set of choices."""
        value = self._get_env(key, default).strip().lower() or default
        if value not in choices:
            raise ConfigurationError(
                f"Invalid value for {key}: {value!r} (expected one of {', '.join(choices)})"
            )
        return value

    def _get_port(self, key: str, default: str) -> int:
        """Get a TCP port number from an environment variable."""
        value = self._get_env(key, default).strip()
        if not value.isdigit() or not 0 < int(value) < 65536:
            raise ConfigurationError(f"Invalid value for {key}: {value!r}")
        return int(value)
