from .authorizer import Authorizer
from .blob_container_provider import BlobContainerProvider

__all__ = [
    'Authorizer',
    'BlobContainerProvider',
]
