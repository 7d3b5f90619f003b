import asyncio
from contextlib import asynccontextmanager
from enum import Enum
from typing import Callable, Optional, Union

from azure.core.credentials_async import AsyncTokenCredential
from azure.core.exceptions import AzureError
from azure.mgmt.storage.aio import StorageManagementClient
from azure.mgmt.storage.models import BlobContainer, PublicAccess
from loguru import logger

from ...config.settings import ManagementConfig
from ...exceptions import AuthorizationError, CancellationError, RemoteOperationError, ValidationException
from ...models import AccessLevel, SyntheticResponse
from ...utils.error_handler import convert_exceptions, log_exceptions
from ..base import Authorizer, BlobContainerProvider
from ..credentials import Credentials, ResourceManagementAuthorizer


def build_storage_client(
    credential: AsyncTokenCredential,
    subscription_id: str,
    config: ManagementConfig,
) -> StorageManagementClient:
    """Build a storage management client bound to the configured Resource Manager endpoint."""
    return StorageManagementClient(
        credential=credential,
        subscription_id=subscription_id,
        base_url=config.base_uri,
        credential_scopes=[config.credential_scope],
        user_agent=config.user_agent,
    )


def _raw_response(pipeline_response, deserialized, headers):
    return pipeline_response.http_response


def to_public_access(access_level: Union[AccessLevel, PublicAccess, str]) -> PublicAccess:
    value = access_level.value if isinstance(access_level, Enum) else access_level
    try:
        return PublicAccess(AccessLevel(value).value)
    except ValueError as e:
        raise ValidationException(
            f"Invalid access level: {access_level}. "
            f"Supported access levels: {[level.value for level in AccessLevel]}",
            error_code="INVALID_ACCESS_LEVEL",
        ) from e


class AzureBlobContainerManager(BlobContainerProvider):
    """Blob container management through the Azure Resource Manager storage API.

    A fresh authorization handle and management client are built for every
    call and closed when it completes; the manager itself keeps no mutable
    state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[ManagementConfig] = None,
        authorizer: Optional[Authorizer] = None,
        client_builder: Callable[..., StorageManagementClient] = build_storage_client,
    ):
        """
        Initialize the blob container manager.

        Args:
            credentials: Subscription identity and authentication material
            config: Resource Manager endpoint configuration (read from the environment if omitted)
            authorizer: Produces authorization handles (ResourceManagementAuthorizer by default)
            client_builder: Builds the management client from (handle, subscription id, config)
        """
        self.credentials = credentials
        self.config = config or ManagementConfig()
        self.authorizer = authorizer or ResourceManagementAuthorizer(self.config)
        self.client_builder = client_builder

    @asynccontextmanager
    async def _get_container_client(self):
        handle = await self.authorizer.authorize(self.credentials)
        try:
            client = self.client_builder(handle, self.credentials.subscription_id, self.config)
            async with client:
                yield client.blob_containers
        finally:
            await handle.close()

    async def _with_deadline(self, operation: str, coro, timeout: Optional[float]):
        if timeout is None:
            return await coro
        try:
            return await asyncio.wait_for(coro, timeout)
        except asyncio.TimeoutError as e:
            raise CancellationError(
                f"{operation} did not complete within {timeout}s",
                error_code="DEADLINE_EXCEEDED",
                details={"operation": operation, "timeout": timeout},
            ) from e

    @log_exceptions(log_level="ERROR", include_traceback=False, custom_message="Failed to create blob container")
    async def create_blob_container(
        self,
        resource_group_name: str,
        account_name: str,
        container_name: str,
        access_level: Union[AccessLevel, PublicAccess, str],
        timeout: Optional[float] = None,
    ) -> BlobContainer:
        """
        Create a blob container in a storage account.

        Args:
            resource_group_name: Name of the resource group within the Azure subscription
            account_name: Name of the storage account
            container_name: Name of the container
            access_level: PUBLIC_ACCESS_CONTAINER, PUBLIC_ACCESS_BLOB or PUBLIC_ACCESS_NONE
            timeout: Deadline in seconds for the whole operation

        Returns:
            The BlobContainer returned by the service

        Raises:
            ValidationException: If access_level is not a known access level
            AuthorizationError: If the management client could not be authorized
            RemoteOperationError: If the service rejected or failed the request
            CancellationError: If the deadline was exceeded
        """
        public_access = to_public_access(access_level)
        logger.info(
            f"Creating blob container {account_name}/{container_name} "
            f"in resource group {resource_group_name} with public access {public_access.value}"
        )
        container = await self._with_deadline(
            "create_blob_container",
            self._create(resource_group_name, account_name, container_name, public_access),
            timeout,
        )
        logger.info(f"Created blob container {account_name}/{container_name}")
        return container

    @convert_exceptions({AzureError: RemoteOperationError.from_sdk_error})
    async def _create(self, resource_group_name, account_name, container_name, public_access):
        async with self._get_container_client() as containers:
            return await containers.create(
                resource_group_name,
                account_name,
                container_name,
                BlobContainer(public_access=public_access),
            )

    @log_exceptions(log_level="ERROR", include_traceback=False, custom_message="Failed to get blob container")
    async def get_blob_container(
        self,
        resource_group_name: str,
        account_name: str,
        container_name: str,
        timeout: Optional[float] = None,
    ) -> BlobContainer:
        """
        Get the description of the specified blob container.

        Args:
            resource_group_name: Name of the resource group within the Azure subscription
            account_name: Name of the storage account
            container_name: Name of the container
            timeout: Deadline in seconds for the whole operation

        Returns:
            The BlobContainer returned by the service
        """
        logger.info(f"Fetching blob container {account_name}/{container_name} in resource group {resource_group_name}")
        return await self._with_deadline(
            "get_blob_container",
            self._get(resource_group_name, account_name, container_name),
            timeout,
        )

    @convert_exceptions({AzureError: RemoteOperationError.from_sdk_error})
    async def _get(self, resource_group_name, account_name, container_name):
        async with self._get_container_client() as containers:
            return await containers.get(resource_group_name, account_name, container_name)

    @log_exceptions(log_level="ERROR", include_traceback=False, custom_message="Failed to delete blob container")
    async def delete_blob_container(
        self,
        resource_group_name: str,
        account_name: str,
        container_name: str,
        timeout: Optional[float] = None,
    ):
        """
        Delete a blob container in a storage account.

        If the management client cannot be authorized, the raised
        AuthorizationError carries a synthetic response with status code 500
        in ``response``.

        Args:
            resource_group_name: Name of the resource group within the Azure subscription
            account_name: Name of the storage account
            container_name: Name of the container
            timeout: Deadline in seconds for the whole operation

        Returns:
            The raw HTTP response of the delete request
        """
        logger.info(f"Deleting blob container {account_name}/{container_name} in resource group {resource_group_name}")
        try:
            response = await self._with_deadline(
                "delete_blob_container",
                self._delete(resource_group_name, account_name, container_name),
                timeout,
            )
        except AuthorizationError as e:
            e.response = SyntheticResponse(status_code=500)
            raise
        logger.info(f"Deleted blob container {account_name}/{container_name}")
        return response

    @convert_exceptions({AzureError: RemoteOperationError.from_sdk_error})
    async def _delete(self, resource_group_name, account_name, container_name):
        async with self._get_container_client() as containers:
            return await containers.delete(
                resource_group_name,
                account_name,
                container_name,
                cls=_raw_response,
            )
