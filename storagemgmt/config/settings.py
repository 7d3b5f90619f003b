from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, PrivateAttr, field_validator
from typing import Any, Optional
from dotenv import load_dotenv, find_dotenv
from azure.identity import AzureAuthorityHosts

from .. import __version__


# Resource Manager endpoint and Entra ID authority per Azure cloud
CLOUD_ENVIRONMENTS = {
    "AzurePublicCloud": {
        "resource_manager": "https://management.azure.com/",
        "authority_host": AzureAuthorityHosts.AZURE_PUBLIC_CLOUD,
    },
    "AzureChinaCloud": {
        "resource_manager": "https://management.chinacloudapi.cn/",
        "authority_host": AzureAuthorityHosts.AZURE_CHINA,
    },
    "AzureUSGovernmentCloud": {
        "resource_manager": "https://management.usgovcloudapi.net/",
        "authority_host": AzureAuthorityHosts.AZURE_GOVERNMENT,
    },
}

DEFAULT_USER_AGENT = f"storagemgmt/{__version__}"


class ManagementConfig(BaseSettings):
    """Azure Resource Manager endpoint configuration."""

    cloud_env: str = Field(default="AzurePublicCloud")
    resource_manager_endpoint: Optional[str] = Field(default=None)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    model_config = SettingsConfigDict(
        env_prefix="AZURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )

    def __init__(self, **kwargs):
        # Force load environment variables before validation
        load_dotenv(find_dotenv())
        super().__init__(**kwargs)

    @field_validator("cloud_env")
    @classmethod
    def validate_cloud_env(cls, v):
        if v not in CLOUD_ENVIRONMENTS:
            raise ValueError(
                f"Unknown Azure cloud environment: {v}. "
                f"Supported environments: {list(CLOUD_ENVIRONMENTS.keys())}"
            )
        return v

    @property
    def base_uri(self) -> str:
        """Resource Manager base URI; an explicit endpoint wins over the cloud default."""
        return self.resource_manager_endpoint or CLOUD_ENVIRONMENTS[self.cloud_env]["resource_manager"]

    @property
    def authority_host(self) -> str:
        return CLOUD_ENVIRONMENTS[self.cloud_env]["authority_host"]

    @property
    def credential_scope(self) -> str:
        return self.base_uri.rstrip("/") + "/.default"


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="INFO")
    enable_console: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )


class StorageMgmtConfig(BaseSettings):
    """Main configuration class."""

    app_name: str = Field(default="storagemgmt")
    app_version: str = Field(default=__version__)
    provider: str = Field(default="azure")

    model_config = SettingsConfigDict(
        env_prefix="STORAGEMGMT_",
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )

    _management: Optional[ManagementConfig] = PrivateAttr(default=None)
    _logging: Optional[LoggingConfig] = PrivateAttr(default=None)
    _credentials: Optional[Any] = PrivateAttr(default=None)

    def __init__(self, **kwargs):
        # Force load environment variables before initializing
        load_dotenv(find_dotenv())
        super().__init__(**kwargs)

    @property
    def management(self) -> ManagementConfig:
        if self._management is None:
            self._management = ManagementConfig()
        return self._management

    @property
    def logging(self) -> LoggingConfig:
        if self._logging is None:
            self._logging = LoggingConfig()
        return self._logging

    @property
    def credentials(self) -> "Credentials":
        if self._credentials is None:
            # Imported here, credentials depend on this module
            from ..providers.credentials import Credentials
            self._credentials = Credentials()
        return self._credentials
