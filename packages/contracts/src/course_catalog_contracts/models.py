"""Pydantic schema for one row of the canonical course table."""

from pydantic import BaseModel, ConfigDict, Field

# Column names of the persisted catalog. Downstream stages index by these.
CATALOG_COLUMNS = ("CourseCode", "CourseTitle", "Department", "CourseLevel")


class CourseRecord(BaseModel):
    """A single course offering.

    Records are frozen; stages that change a field build a new record with
    ``model_copy(update=...)`` so a code rewrite and its department rewrite
    land together.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    course_code: str = Field(alias="CourseCode", description="e.g. 'HIST 264', 'AVC 212A'")
    course_title: str = Field(alias="CourseTitle", description="Human-readable course name")
    department: str = Field(alias="Department", description="Alphabetic prefix of the code")
    course_level: int = Field(
        alias="CourseLevel", ge=0, le=999, description="3-digit numeric part of the code"
    )

    def to_row(self) -> dict:
        """Return the record keyed by contract column names, in column order."""
        return self.model_dump(by_alias=True)
