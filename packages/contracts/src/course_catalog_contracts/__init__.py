"""Course Catalog Contracts - Pure Pydantic schemas.

This package contains ONLY the output schema shared with downstream
consumers (scheduling, enrollment, reporting). No business logic.
Dependencies: pydantic only.
"""

from course_catalog_contracts.models import CATALOG_COLUMNS, CourseRecord

__version__ = "1.0.0"

__all__ = [
    "CATALOG_COLUMNS",
    "CourseRecord",
]
