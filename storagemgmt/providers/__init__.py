from .base import Authorizer, BlobContainerProvider
from .credentials import Credentials, ResourceManagementAuthorizer
from .azure_providers import AzureBlobContainerManager, build_storage_client
from .factory import ProviderFactory, provider_factory

__all__ = [
    "Authorizer",
    "BlobContainerProvider",
    "Credentials",
    "ResourceManagementAuthorizer",
    "AzureBlobContainerManager",
    "build_storage_client",
    "ProviderFactory",
    "provider_factory",
]
