"""Load the curated static datasets that drive the pipeline.

Each table of domain knowledge (department vocabulary, title fixes,
department fixes, deletions, independent-work levels, keeper codes,
manually added courses) lives in its own YAML file so it can be edited
and versioned independently of the transformation code.

Defaults ship in the ``data/`` directory next to this module.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from course_catalog_common import ConfigurationError, get_logger
from course_catalog_contracts import CourseRecord

logger = get_logger(__name__)

DEFAULT_DATASETS_DIR = Path(__file__).parent / "data"

DEPARTMENTS_FILE = "departments.yaml"
TITLE_CORRECTIONS_FILE = "title_corrections.yaml"
DEPARTMENT_CORRECTIONS_FILE = "department_corrections.yaml"
DELETIONS_FILE = "deletions.yaml"
INDEPENDENT_WORK_FILE = "independent_work.yaml"
KEEPERS_FILE = "keepers.yaml"
MANUAL_COURSES_FILE = "manual_courses.yaml"


@dataclass(frozen=True)
class CatalogDatasets:
    """All static tables for one pipeline run."""

    departments: tuple[str, ...]
    title_corrections: dict[str, str] = field(default_factory=dict)
    department_corrections: dict[str, str] = field(default_factory=dict)
    deleted_codes: frozenset[str] = frozenset()
    excluded_levels: frozenset[int] = frozenset()
    independent_levels: frozenset[int] = frozenset()
    keeper_codes: frozenset[str] = frozenset()
    manual_courses: tuple[CourseRecord, ...] = ()

    def sizes(self) -> dict[str, int]:
        """Entry count per dataset, for reporting."""
        return {
            "departments": len(self.departments),
            "title_corrections": len(self.title_corrections),
            "department_corrections": len(self.department_corrections),
            "deleted_codes": len(self.deleted_codes),
            "excluded_levels": len(self.excluded_levels),
            "independent_levels": len(self.independent_levels),
            "keeper_codes": len(self.keeper_codes),
            "manual_courses": len(self.manual_courses),
        }


# ---------------------------------------------------------------------------
# Raw YAML access
# ---------------------------------------------------------------------------


def _load_yaml(path: Path) -> dict:
    """Load one dataset file as a mapping."""
    if not path.exists():
        raise ConfigurationError(f"Dataset not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Dataset {path} must be a mapping at top level")
    return data


def _require(data: dict, key: str, kind: type, path: Path) -> Any:
    if key not in data:
        raise ConfigurationError(f"Dataset {path} is missing key '{key}'")
    value = data[key]
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise ConfigurationError(
            f"'{key}' in {path} must be a {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _string_list(values: list, key: str, path: Path) -> list[str]:
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(f"'{key}' in {path} contains non-string entry {value!r}")
    return [value.strip() for value in values]


def _int_list(values: list, key: str, path: Path) -> list[int]:
    for value in values:
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"'{key}' in {path} contains non-integer entry {value!r}")
    return list(values)


def _string_mapping(values: dict, key: str, path: Path) -> dict[str, str]:
    for code, replacement in values.items():
        if not isinstance(code, str) or not isinstance(replacement, str):
            raise ConfigurationError(
                f"'{key}' in {path} must map strings to strings, got {code!r}: {replacement!r}"
            )
    return {code.strip(): replacement.strip() for code, replacement in values.items()}


# ---------------------------------------------------------------------------
# Per-dataset loaders
# ---------------------------------------------------------------------------


def load_departments(path: Path) -> tuple[str, ...]:
    """Load the department vocabulary, dropping duplicate entries.

    Matching is by set membership, so duplicates are harmless; they are
    removed (first position kept) and reported so the file can be tidied.
    """
    data = _load_yaml(path)
    tokens = _string_list(_require(data, "departments", list, path), "departments", path)

    seen: set[str] = set()
    unique: list[str] = []
    duplicates: list[str] = []
    for token in tokens:
        if token in seen:
            duplicates.append(token)
            continue
        seen.add(token)
        unique.append(token)

    if duplicates:
        logger.warning(
            "duplicate_department_codes",
            path=str(path),
            duplicates=sorted(set(duplicates)),
        )
    if not unique:
        raise ConfigurationError(f"Department vocabulary in {path} is empty")
    return tuple(unique)


def load_manual_courses(path: Path) -> tuple[CourseRecord, ...]:
    """Load manually known courses as complete records."""
    data = _load_yaml(path)
    entries = _require(data, "courses", list, path)
    courses = []
    for entry in entries:
        try:
            courses.append(CourseRecord.model_validate(entry))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid manual course in {path}: {e}") from e
    return tuple(courses)


def load_datasets(directory: Optional[Path] = None) -> CatalogDatasets:
    """Load every dataset from ``directory`` (packaged defaults if None).

    Raises:
        ConfigurationError: If any file is missing or malformed
    """
    base = Path(directory) if directory is not None else DEFAULT_DATASETS_DIR

    titles_path = base / TITLE_CORRECTIONS_FILE
    dept_path = base / DEPARTMENT_CORRECTIONS_FILE
    deletions_path = base / DELETIONS_FILE
    independent_path = base / INDEPENDENT_WORK_FILE
    keepers_path = base / KEEPERS_FILE

    deletions = _load_yaml(deletions_path)

    datasets = CatalogDatasets(
        departments=load_departments(base / DEPARTMENTS_FILE),
        title_corrections=_string_mapping(
            _require(_load_yaml(titles_path), "title_corrections", dict, titles_path),
            "title_corrections",
            titles_path,
        ),
        department_corrections=_string_mapping(
            _require(_load_yaml(dept_path), "department_corrections", dict, dept_path),
            "department_corrections",
            dept_path,
        ),
        deleted_codes=frozenset(
            _string_list(_require(deletions, "codes", list, deletions_path), "codes", deletions_path)
        ),
        excluded_levels=frozenset(
            _int_list(
                _require(deletions, "excluded_levels", list, deletions_path),
                "excluded_levels",
                deletions_path,
            )
        ),
        independent_levels=frozenset(
            _int_list(
                _require(_load_yaml(independent_path), "levels", list, independent_path),
                "levels",
                independent_path,
            )
        ),
        keeper_codes=frozenset(
            _string_list(
                _require(_load_yaml(keepers_path), "keepers", list, keepers_path),
                "keepers",
                keepers_path,
            )
        ),
        manual_courses=load_manual_courses(base / MANUAL_COURSES_FILE),
    )

    logger.info("datasets_loaded", directory=str(base), **datasets.sizes())
    return datasets
