"""
Azure credentials and authorization for the Resource Manager API.

Authentication priority:
1. Service principal (tenant, client id and client secret)
2. Managed Identity (when enabled)
3. Azure CLI credentials, then DefaultAzureCredential
"""

from typing import Optional
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv, find_dotenv
from azure.core.credentials_async import AsyncTokenCredential
from azure.identity.aio import (
    AzureCliCredential,
    ChainedTokenCredential,
    ClientSecretCredential,
    DefaultAzureCredential,
    ManagedIdentityCredential,
)
from loguru import logger

from ..config.settings import ManagementConfig
from ..exceptions import AuthorizationError
from .base import Authorizer


class Credentials(BaseSettings):
    """Subscription identity and authentication material, read from AZURE_* variables."""

    subscription_id: str = Field(...)
    tenant_id: Optional[str] = Field(default=None)
    client_id: Optional[str] = Field(default=None)
    client_secret: Optional[SecretStr] = Field(default=None)
    use_managed_identity: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="AZURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
        extra="ignore",
        case_sensitive=False
    )

    def __init__(self, **kwargs):
        # Force load environment variables before validation
        load_dotenv(find_dotenv())
        super().__init__(**kwargs)

    @property
    def has_service_principal(self) -> bool:
        return bool(self.tenant_id and self.client_id and self.client_secret)


class ResourceManagementAuthorizer(Authorizer):
    """Builds an async token credential and proves it by fetching a management token."""

    def __init__(self, config: Optional[ManagementConfig] = None):
        self.config = config or ManagementConfig()

    def build_credential(self, credentials: Credentials) -> AsyncTokenCredential:
        if credentials.has_service_principal:
            logger.info("Using service principal authentication")
            return ClientSecretCredential(
                credentials.tenant_id,
                credentials.client_id,
                credentials.client_secret.get_secret_value(),
                authority=self.config.authority_host,
            )

        if credentials.use_managed_identity:
            logger.info("Using Managed Identity authentication")
            return ManagedIdentityCredential(client_id=credentials.client_id)

        logger.info("Using Azure credential chain (CLI -> Default)")
        return ChainedTokenCredential(
            AzureCliCredential(tenant_id=credentials.tenant_id),
            DefaultAzureCredential(authority=self.config.authority_host),
        )

    async def authorize(self, credentials: Credentials) -> AsyncTokenCredential:
        """
        Get an authorization handle for the Resource Manager API.

        Args:
            credentials: Credentials to authorize

        Returns:
            Async token credential that already holds a valid management token

        Raises:
            AuthorizationError: If the credential cannot be built or no token is issued
        """
        try:
            credential = self.build_credential(credentials)
        except Exception as e:
            logger.error(f"Failed to build Azure credential: {e}")
            raise AuthorizationError(
                f"Failed to build Azure credential: {e}",
                details={"original_exception": type(e).__name__},
            ) from e

        try:
            await credential.get_token(self.config.credential_scope)
        except Exception as e:
            await credential.close()
            logger.error(f"Failed to acquire management token for subscription {credentials.subscription_id}: {e}")
            raise AuthorizationError(
                f"Failed to acquire management token: {e}",
                details={
                    "original_exception": type(e).__name__,
                    "scope": self.config.credential_scope,
                },
            ) from e

        logger.debug(f"Acquired management token for scope {self.config.credential_scope}")
        return credential
