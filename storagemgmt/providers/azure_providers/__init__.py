from .blob_container_provider import AzureBlobContainerManager, build_storage_client

__all__ = [
    "AzureBlobContainerManager",
    "build_storage_client",
]
