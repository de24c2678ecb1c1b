"""Configuration management for the Inghams E2E suite."""

from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .environments import DEFAULT_ENVIRONMENTS, GOOGLE_TEST_LINK
from .errors import ConfigError, MissingCredentialsError

# Load .env file at import time
load_dotenv()

CONFIG_FILE_NAMES = ["inghams_e2e.yaml", "inghams_e2e.yml", ".inghams_e2e.yaml"]


class EnvironmentUrls(BaseModel):
    """Base URLs of one deployed environment."""

    e_cms: str
    p_cms: str
    inghams: str
    en_gb: str = ""
    google_link: str = GOOGLE_TEST_LINK

    @field_validator("e_cms", "p_cms", "inghams", "en_gb")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def inghams_error_page(self) -> str:
        return f"{self.inghams}/error-500"

    @property
    def ecms_login(self) -> str:
        return f"{self.e_cms}/umbraco/login"

    @property
    def ecms_content(self) -> str:
        return f"{self.e_cms}/umbraco#/content"


class Credentials(BaseModel):
    """Back-office login."""

    username: str
    password: str


class BrowserConfig(BaseModel):
    """Timeouts and run settings shared by every browser test."""

    timeout_ms: int = 60_000
    expect_timeout_ms: int = 60_000
    navigation_timeout_ms: int = 60_000
    headless: bool = True
    ci_retries: int = 2
    slow_settle_ms: int = 10_000


class Config(BaseSettings):
    """Main configuration for the suite."""

    model_config = SettingsConfigDict(
        env_prefix="INGHAMS_",
        env_nested_delimiter="__",
        populate_by_name=True,
        extra="ignore",
    )

    env: str = Field(default="qa", validation_alias=AliasChoices("env", "ENV", "INGHAMS_ENV"))

    ecms_username: str | None = Field(default=None, validation_alias=AliasChoices("ecms_username", "ECMS_USERNAME"))
    ecms_password: str | None = Field(default=None, validation_alias=AliasChoices("ecms_password", "ECMS_PASSWORD"))
    pcms_username: str | None = Field(default=None, validation_alias=AliasChoices("pcms_username", "PCMS_USERNAME"))
    pcms_password: str | None = Field(default=None, validation_alias=AliasChoices("pcms_password", "PCMS_PASSWORD"))
    pcms_api_key: str | None = Field(default=None, validation_alias=AliasChoices("pcms_api_key", "PCMS_API_KEY"))

    # Paths
    auth_dir: Path = Path(".auth")
    data_dir: Path = Path("tests/e2e/uat_data")
    failures_dir: Path = Path("failures")

    # Sub-configurations
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    environments: dict[str, EnvironmentUrls] = Field(
        default_factory=lambda: {name: EnvironmentUrls(**urls) for name, urls in DEFAULT_ENVIRONMENTS.items()}
    )

    @classmethod
    def settings_customise_sources(cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings):
        # Environment variables override values read from YAML
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @field_validator("env")
    @classmethod
    def _normalise_env(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("environments", mode="before")
    @classmethod
    def _merge_environments(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        merged: dict[str, Any] = {name: dict(urls) for name, urls in DEFAULT_ENVIRONMENTS.items()}
        for name, urls in value.items():
            if isinstance(urls, EnvironmentUrls):
                urls = urls.model_dump()
            merged[name] = {**merged.get(name, {}), **urls}
        return merged

    @property
    def urls(self) -> EnvironmentUrls:
        """URLs of the selected environment."""
        try:
            return self.environments[self.env]
        except KeyError:
            known = ", ".join(sorted(self.environments))
            raise ConfigError(f"Unknown environment '{self.env}' (known: {known})") from None

    def ecms_credentials(self) -> Credentials:
        if not (self.ecms_username and self.ecms_password):
            raise MissingCredentialsError("ECMS_USERNAME and ECMS_PASSWORD must be set")
        return Credentials(username=self.ecms_username, password=self.ecms_password)

    def pcms_credentials(self) -> Credentials:
        if not (self.pcms_username and self.pcms_password):
            raise MissingCredentialsError("PCMS_USERNAME and PCMS_PASSWORD must be set")
        return Credentials(username=self.pcms_username, password=self.pcms_password)

    def require_api_key(self) -> str:
        if not self.pcms_api_key:
            raise MissingCredentialsError("PCMS_API_KEY must be set for availability/delivery API checks")
        return self.pcms_api_key

    def storage_state_path(self, system: str) -> Path:
        """Storage state file written by `setup-auth`, e.g. `.auth/ecmsUserStorageState.json`."""
        return self.auth_dir / f"{system.lower()}UserStorageState.json"


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    config_data: dict = {}

    # Try to find config file
    if config_path is None:
        for name in CONFIG_FILE_NAMES:
            if Path(name).exists():
                config_path = Path(name)
                break

    if config_path and config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
        if raw and "inghams_e2e" in raw:
            config_data = raw["inghams_e2e"] or {}
        elif raw:
            config_data = raw

    return Config(**config_data)
