from .settings import (
    ManagementConfig,
    LoggingConfig,
    StorageMgmtConfig,
    CLOUD_ENVIRONMENTS,
    DEFAULT_USER_AGENT,
)

__all__ = [
    "ManagementConfig",
    "LoggingConfig",
    "StorageMgmtConfig",
    "CLOUD_ENVIRONMENTS",
    "DEFAULT_USER_AGENT",
]
