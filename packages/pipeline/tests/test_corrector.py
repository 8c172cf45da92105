"""Tests for title and department corrections."""

import pytest

from course_catalog_pipeline.corrector import (
    apply_corrections,
    correct_departments,
    correct_titles,
    rewrite_department,
)
from course_catalog_pipeline.datasets import CatalogDatasets
from course_catalog_pipeline.stats import PipelineStats

pytestmark = pytest.mark.unit


class TestCorrectTitles:
    """Tests for correct_titles."""

    def test_replaces_listed_title(self, make_record):
        """Test a code in the table gets the override title."""
        records = [make_record("PHYS 107", "Introductory Physics of Living")]

        corrected, changed = correct_titles(
            records, {"PHYS 107": "Introductory Physics of Living Systems I/Lab"}
        )

        assert corrected[0].course_title == "Introductory Physics of Living Systems I/Lab"
        assert changed == 1

    def test_other_records_unchanged(self, make_record):
        """Test records not in the table pass through as-is."""
        original = make_record("HIST 264", "Topics in World History")

        corrected, changed = correct_titles([original], {"PHYS 107": "Fixed"})

        assert corrected == [original]
        assert changed == 0

    def test_does_not_mutate_input(self, make_record):
        """Test input records keep their original titles."""
        original = make_record("PHYS 107", "Truncated")

        correct_titles([original], {"PHYS 107": "Fixed"})

        assert original.course_title == "Truncated"


class TestCorrectDepartments:
    """Tests for correct_departments."""

    def test_rewrites_code_and_department(self, make_record):
        """Test department and code prefix change together."""
        records = [make_record("ENGS 121G", "Writing About Place")]

        corrected, changed = correct_departments(records, {"ENGS 121G": "ENG"})

        record = corrected[0]
        assert record.course_code == "ENG 121G"
        assert record.department == "ENG"
        assert record.course_level == 121
        assert record.course_title == "Writing About Place"
        assert changed == 1

    def test_unlisted_codes_untouched(self, make_record):
        """Test other codes from the same department are not rewritten."""
        records = [make_record("ENGS 200", "Environmental Studies")]

        corrected, changed = correct_departments(records, {"ENGS 121G": "ENG"})

        assert corrected[0].course_code == "ENGS 200"
        assert changed == 0

    def test_rewrite_department_keeps_suffix(self, make_record):
        """Test the level and letter suffix survive the rewrite."""
        fixed = rewrite_department(make_record("ENGS 395Q", "Senior Seminar"), "ENG")

        assert fixed.course_code == "ENG 395Q"


class TestApplyCorrections:
    """Tests for apply_corrections."""

    def test_row_count_unchanged(self, make_record, small_datasets):
        """Test corrections never add or remove rows."""
        records = [
            make_record("PHYS 107", "Truncated"),
            make_record("ENGS 121G", "Writing About Place"),
            make_record("HIST 264", "Topics in World History"),
        ]
        stats = PipelineStats()

        corrected = apply_corrections(records, small_datasets, stats=stats)

        assert len(corrected) == 3
        assert [r.course_code for r in corrected] == ["PHYS 107", "ENG 121G", "HIST 264"]
        assert stats.titles_corrected == 1
        assert stats.departments_corrected == 1

    def test_title_lookup_uses_extracted_code(self, make_record, small_datasets):
        """Test title fixes run before the code is rewritten."""
        datasets = CatalogDatasets(
            departments=small_datasets.departments,
            title_corrections={"ENGS 121G": "Writing About Place and Home"},
            department_corrections={"ENGS 121G": "ENG"},
        )

        corrected = apply_corrections([make_record("ENGS 121G", "Writing")], datasets)

        assert corrected[0].course_code == "ENG 121G"
        assert corrected[0].course_title == "Writing About Place and Home"
