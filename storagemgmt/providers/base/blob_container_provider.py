from abc import ABC, abstractmethod
from typing import Optional


class BlobContainerProvider(ABC):
    """Abstract base class for blob container management providers."""

    @abstractmethod
    async def create_blob_container(
        self,
        resource_group_name: str,
        account_name: str,
        container_name: str,
        access_level,
        timeout: Optional[float] = None,
    ):
        """Create a blob container in a storage account."""
        pass

    @abstractmethod
    async def get_blob_container(
        self,
        resource_group_name: str,
        account_name: str,
        container_name: str,
        timeout: Optional[float] = None,
    ):
        """Get the description of a blob container."""
        pass

    @abstractmethod
    async def delete_blob_container(
        self,
        resource_group_name: str,
        account_name: str,
        container_name: str,
        timeout: Optional[float] = None,
    ):
        """Delete a blob container and return the service response."""
        pass
