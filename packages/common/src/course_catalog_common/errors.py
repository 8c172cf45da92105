"""Custom error types for the course catalog pipeline.

All errors follow the "fail fast" principle with explicit messages.
"""

from typing import Optional


class CatalogError(Exception):
    """Base exception for all course catalog errors."""

    pass


class CatalogIOError(CatalogError):
    """Input catalog unreadable or output artifact unwritable."""

    pass


class CatalogFormatError(CatalogError):
    """Catalog text (or a persisted artifact) does not have the expected layout.

    Raised when the start-of-listings sentinel is missing, since every
    extraction offset depends on it.
    """

    pass


class ConfigurationError(CatalogError):
    """A static dataset is malformed or a run option (such as the output format) is invalid."""

    pass


class CatalogValidationError(CatalogError):
    """Final catalog violates an invariant and must not be written.

    The individual violations are kept on ``problems`` so callers can
    report all of them at once.
    """

    def __init__(self, message: str, problems: Optional[list[str]] = None):
        self.problems = list(problems or [])
        if self.problems:
            message = f"{message}: " + "; ".join(self.problems)
        super().__init__(message)


class KeeperResolutionError(CatalogValidationError):
    """Strict mode: a cross-listed title group has no registered keeper code."""

    def __init__(self, orphan_titles: list[str]):
        self.orphan_titles = list(orphan_titles)
        super().__init__(
            f"{len(self.orphan_titles)} cross-listed title group(s) have no keeper code",
            [f"no keeper for title {title!r}" for title in self.orphan_titles],
        )
