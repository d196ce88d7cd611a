from nexusblog.configs.settings import (
    ClientConfig,
    LimiterConfig,
    file_logger,
    settings,
)

__all__ = [
    "ClientConfig",
    "LimiterConfig",
    "file_logger",
    "settings",
]
