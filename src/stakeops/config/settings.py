"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, production.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stakeops.domain.value_objects.stake_policy import (
    AFFORDABILITY_GAS_LIMIT,
    MINIMUM_STAKE_BALANCE,
    SUBMISSION_GAS_LIMIT,
    StakePolicy,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    PRIVATE_KEY must come from environment variables, not YAML files.
    """

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "stakeops"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")

    # Ledger node
    NODE_URL: str = Field(
        default="http://localhost:8545",
        description="JSON-RPC endpoint of the ledger node",
    )
    RPC_TIMEOUT: float = Field(
        default=15.0,
        gt=0,
        description="RPC request timeout in seconds",
    )

    # Mining account and contract (REQUIRED)
    PRIVATE_KEY: str = Field(
        ...,
        repr=False,
        description="Hex-encoded private key of the mining account",
    )
    CONTRACT_ADDRESS: str = Field(..., description="Stake contract address")

    # Stake policy
    STAKE_AFFORDABILITY_GAS_LIMIT: int = Field(
        default=AFFORDABILITY_GAS_LIMIT,
        gt=0,
        description="Gas units used to estimate deposit fee",
    )
    STAKE_SUBMISSION_GAS_LIMIT: int = Field(
        default=SUBMISSION_GAS_LIMIT,
        gt=0,
        description="Gas limit attached to the deposit transaction",
    )
    STAKE_MINIMUM_BALANCE: int = Field(
        default=MINIMUM_STAKE_BALANCE,
        ge=0,
        description="Token base units required before depositing",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: Optional[str] = Field(default=None)
    LOG_VERBOSE: int = Field(default=1, ge=0, le=3)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("NODE_URL")
    @classmethod
    def validate_node_url(cls, v: str) -> str:
        """Validate node URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("NODE_URL must be an http(s) URL")
        return v

    def stake_policy(self) -> StakePolicy:
        """Build stake policy from configured thresholds."""
        return StakePolicy(
            affordability_gas_limit=self.STAKE_AFFORDABILITY_GAS_LIMIT,
            submission_gas_limit=self.STAKE_SUBMISSION_GAS_LIMIT,
            minimum_stake_balance=self.STAKE_MINIMUM_BALANCE,
        )


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
    config_dir: Optional[Path] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")
        config_dir: Optional directory holding YAML files

    Returns:
        Settings instance

    Raises:
        ValidationError: If required fields are missing
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = config_dir or project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    default_env_file, default_config_file = env_map.get(
        environment, (".env.production", "production.yaml")
    )
    env_file = env_file or default_env_file
    config_file = config_file or default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    merged_config = {}

    default_config_path = config_dir / "default.yaml"
    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    env_config_path = config_dir / config_file
    if env_config_path.exists():
        with open(env_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config.update(loaded)

    merged_config.setdefault("ENV", environment)

    # Environment variables win over YAML values
    for key in list(merged_config):
        if key in os.environ:
            merged_config.pop(key)

    return Settings(**merged_config)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
