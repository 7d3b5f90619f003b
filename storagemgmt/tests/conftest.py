"""
Shared fixtures for the storagemgmt test suite.

The authorizer and the management client are replaced with in-memory fakes,
so no test talks to Azure.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from storagemgmt.config.settings import ManagementConfig
from storagemgmt.exceptions import AuthorizationError
from storagemgmt.providers.base import Authorizer
from storagemgmt.providers.credentials import Credentials
from storagemgmt.providers.azure_providers import AzureBlobContainerManager


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings independent from the developer's shell."""
    for name in list(os.environ):
        if name.startswith(("AZURE_", "LOG_", "STORAGEMGMT_")):
            monkeypatch.delenv(name, raising=False)


class FakeAuthorizer(Authorizer):
    """Hands out mock token credentials, or fails every time when ``fail`` is set."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []
        self.handles = []

    async def authorize(self, credentials):
        self.calls.append(credentials)
        if self.fail:
            raise AuthorizationError("token acquisition failed")
        handle = AsyncMock()
        self.handles.append(handle)
        return handle


class FakeStorageClient:
    def __init__(self, credential, subscription_id, config, blob_containers):
        self.credential = credential
        self.subscription_id = subscription_id
        self.config = config
        self.blob_containers = blob_containers
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True


class FakeClientBuilder:
    """Records every client it builds; all clients share ``blob_containers``."""

    def __init__(self, blob_containers=None):
        self.blob_containers = blob_containers or MagicMock()
        self.clients = []

    def __call__(self, credential, subscription_id, config):
        client = FakeStorageClient(credential, subscription_id, config, self.blob_containers)
        self.clients.append(client)
        return client


@pytest.fixture
def credentials():
    return Credentials(subscription_id="00000000-0000-0000-0000-0000000000aa")


@pytest.fixture
def management_config():
    return ManagementConfig(user_agent="storagemgmt-tests/1.0")


@pytest.fixture
def authorizer():
    return FakeAuthorizer()


@pytest.fixture
def failing_authorizer():
    return FakeAuthorizer(fail=True)


@pytest.fixture
def client_builder():
    return FakeClientBuilder()


@pytest.fixture
def manager(credentials, management_config, authorizer, client_builder):
    return AzureBlobContainerManager(
        credentials,
        config=management_config,
        authorizer=authorizer,
        client_builder=client_builder,
    )


@pytest.fixture
def unauthorized_manager(credentials, management_config, failing_authorizer, client_builder):
    return AzureBlobContainerManager(
        credentials,
        config=management_config,
        authorizer=failing_authorizer,
        client_builder=client_builder,
    )
