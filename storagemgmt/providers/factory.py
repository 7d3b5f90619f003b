from typing import Dict, Optional, Type
from loguru import logger

from .base import BlobContainerProvider
from .azure_providers import AzureBlobContainerManager
from .credentials import Credentials
from ..exceptions import ConfigurationException
from ..config.settings import StorageMgmtConfig
from ..utils.logging_config import log_manager


class ProviderFactory:
    """Factory class for creating provider instances."""

    _blob_container_providers: Dict[str, Type[BlobContainerProvider]] = {
        'azure': AzureBlobContainerManager,
    }

    @classmethod
    def create_blob_container_provider(
        cls,
        provider_name: str = None,
        credentials: Optional[Credentials] = None,
        config: Optional[StorageMgmtConfig] = None,
    ) -> BlobContainerProvider:
        """
        Create blob container provider instance.

        Args:
            provider_name: Name of the provider (optional, defaults to config)
            credentials: Credentials to use (optional, read from the environment)
            config: Configuration (optional, read from the environment)

        Returns:
            BlobContainerProvider instance

        Raises:
            ConfigurationException: If provider is not supported
        """
        config = config or StorageMgmtConfig()
        log_manager.configure(config.logging)
        if provider_name is None:
            provider_name = config.provider

        if provider_name not in cls._blob_container_providers:
            raise ConfigurationException(
                f"Unknown blob container provider: {provider_name}. "
                f"Supported providers: {list(cls._blob_container_providers.keys())}"
            )

        provider_class = cls._blob_container_providers[provider_name]
        logger.info(f"Creating blob container provider: {provider_name}")
        return provider_class(credentials or config.credentials, config=config.management)

    @classmethod
    def register_blob_container_provider(cls, name: str, provider_class: Type[BlobContainerProvider]):
        """Register a custom blob container provider."""
        if not issubclass(provider_class, BlobContainerProvider):
            raise ConfigurationException(
                f"{provider_class.__name__} must subclass BlobContainerProvider"
            )
        cls._blob_container_providers[name] = provider_class
        logger.info(f"Registered blob container provider: {name}")

    @classmethod
    def get_supported_providers(cls) -> Dict[str, list]:
        """Get list of supported providers by type."""
        return {
            "blob_container": list(cls._blob_container_providers.keys()),
        }


# Global provider factory instance
provider_factory = ProviderFactory()
