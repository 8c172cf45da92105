"""Course Catalog Common - errors, logging and settings shared by all packages."""

from course_catalog_common.config import Settings, get_settings
from course_catalog_common.errors import (
    CatalogError,
    CatalogFormatError,
    CatalogIOError,
    CatalogValidationError,
    ConfigurationError,
    KeeperResolutionError,
)
from course_catalog_common.logging_config import configure_logging, get_logger

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
    # Errors
    "CatalogError",
    "CatalogIOError",
    "CatalogFormatError",
    "ConfigurationError",
    "CatalogValidationError",
    "KeeperResolutionError",
]
