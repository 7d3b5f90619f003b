from abc import ABC, abstractmethod


class Authorizer(ABC):
    """Abstract base class for resource management authorizers."""

    @abstractmethod
    async def authorize(self, credentials):
        """Return an authorization handle for ``credentials`` or raise AuthorizationError.

        The handle is an async token credential; the caller closes it.
        """
        pass
