"""
storagemgmt - Azure blob container management through the Resource Manager API.
"""

__version__ = "1.0.0"

from .exceptions import (
    StorageMgmtException,
    ConfigurationException,
    ValidationException,
    AuthorizationError,
    RemoteOperationError,
    CancellationError,
)
from .models import AccessLevel, SyntheticResponse
from .config import ManagementConfig, LoggingConfig, StorageMgmtConfig
from .providers import (
    Credentials,
    ResourceManagementAuthorizer,
    BlobContainerProvider,
    AzureBlobContainerManager,
    ProviderFactory,
    provider_factory,
)

__all__ = [
    "__version__",
    "StorageMgmtException",
    "ConfigurationException",
    "ValidationException",
    "AuthorizationError",
    "RemoteOperationError",
    "CancellationError",
    "AccessLevel",
    "SyntheticResponse",
    "ManagementConfig",
    "LoggingConfig",
    "StorageMgmtConfig",
    "Credentials",
    "ResourceManagementAuthorizer",
    "BlobContainerProvider",
    "AzureBlobContainerManager",
    "ProviderFactory",
    "provider_factory",
]
