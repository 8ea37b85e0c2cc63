"""
Configuration module for vault-core.

Uses pydantic-settings for configuration management with environment variable support.
Environment variables use OBSIDIAN_ prefix (e.g., OBSIDIAN_VAULT_PATH).
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import ConfigurationError


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Environment variables:
    - OBSIDIAN_VAULT_PATH: Path to the vault root (required)
    - OBSIDIAN_INBOX_DIR: Inbox subdirectory used by note capture
    - OBSIDIAN_ALIAS_COLLISION_POLICY: "last" or "first"
    - OBSIDIAN_LOG_LEVEL: Log level name
    """

    vault_path: Path | None = None
    inbox_dir: str = "Inbox"
    alias_collision_policy: Literal["last", "first"] = "last"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="OBSIDIAN_")


def require_vault_root(vault_path: Path | str | None) -> Path:
    """Validate a configured vault root and return it resolved.

    Raises:
        ConfigurationError: If the root is unset, missing, or not a directory
    """
    if vault_path is None or not str(vault_path).strip():
        raise ConfigurationError("Vault root is not set (OBSIDIAN_VAULT_PATH)")

    root = Path(vault_path).expanduser()
    if not root.exists():
        raise ConfigurationError(f"Vault root does not exist: {root}")
    if not root.is_dir():
        raise ConfigurationError(f"Vault root is not a directory: {root}")

    return root.resolve()


# Global settings instance
settings = Settings()
