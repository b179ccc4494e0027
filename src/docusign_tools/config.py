"""Configuration management for DocuSign tools."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from platformdirs import user_config_dir

from .exceptions import ConfigurationError

APP_NAME = "docusign-tools"
CONFIG_DIR = Path(user_config_dir(APP_NAME))
SETTINGS_FILE = CONFIG_DIR / "settings.yaml"

DEFAULT_BASE_URL = "https://demo.docusign.net/restapi"
DEFAULT_TIMEOUT = 30.0


@dataclass
class Config:
    """Application configuration."""

    access_token: str
    base_url: str = DEFAULT_BASE_URL
    account_id: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    verbose: bool = False

    def require_account_id(self, account_id: Optional[str] = None) -> str:
        """Return the explicit account ID, falling back to the configured one."""
        resolved = account_id or self.account_id
        if not resolved:
            raise ConfigurationError(
                "No account ID given. Pass --account-id or set DOCUSIGN_ACCOUNT_ID"
            )
        return resolved

    @property
    def masked_token(self) -> str:
        """Access token with all but the last four characters hidden."""
        if len(self.access_token) <= 4:
            return "****"
        return "*" * 8 + self.access_token[-4:]


def ensure_config_dir() -> None:
    """Ensure the configuration directory exists."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def load_settings_file(path: Optional[Path] = None) -> dict:
    """Load optional settings from YAML file.

    The YAML file can have the following structure:
    ```yaml
    base_url: https://demo.docusign.net/restapi
    account_id: "00000000-0000-0000-0000-000000000000"
    timeout: 30
    ```
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid settings file {path}: expected a mapping")
    return data


def load_config(settings_path: Optional[Path] = None) -> Config:
    """Load complete application configuration.

    Environment variables (including those from a .env file) override
    values from the settings file.
    """
    load_dotenv()
    settings = load_settings_file(settings_path)

    access_token = os.getenv("DOCUSIGN_ACCESS_TOKEN")
    if not access_token:
        raise ConfigurationError("Missing DOCUSIGN_ACCESS_TOKEN")

    base_url = os.getenv("DOCUSIGN_BASE_URL") or settings.get("base_url") or DEFAULT_BASE_URL
    account_id = os.getenv("DOCUSIGN_ACCOUNT_ID") or settings.get("account_id")

    raw_timeout = os.getenv("DOCUSIGN_TIMEOUT") or settings.get("timeout") or DEFAULT_TIMEOUT
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid timeout value: {raw_timeout!r}") from e

    return Config(
        access_token=access_token,
        base_url=str(base_url),
        account_id=str(account_id) if account_id else None,
        timeout=timeout,
    )


def save_settings(base_url: Optional[str] = None, account_id: Optional[str] = None, timeout: Optional[float] = None) -> Path:
    """Merge the given values into the settings file."""
    ensure_config_dir()
    settings = load_settings_file()
    if base_url is not None:
        settings["base_url"] = base_url
    if account_id is not None:
        settings["account_id"] = account_id
    if timeout is not None:
        settings["timeout"] = timeout

    with open(SETTINGS_FILE, "w") as f:
        yaml.safe_dump(settings, f, default_flow_style=False, sort_keys=True)
    return SETTINGS_FILE
