"""
Validation of stored project lists.

A project file is a JSON array checked in two passes: the record shape
against schemas/projects.schema.json, then the collection rules the schema
can't express (ids unique across the list). Runs on every read and every
write of JsonFileStore.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import jsonschema

logger = logging.getLogger(__name__)

PROJECTS_SCHEMA = "projects"


class ValidationError(Exception):
    """Stored project data is unusable."""

    def __init__(self, schema_name: str, message: str, path: Optional[str] = None):
        self.schema_name = schema_name
        self.path = path
        super().__init__(f"[{schema_name}] {message}" + (f" at {path}" if path else ""))


_validators: dict[str, jsonschema.Draft7Validator] = {}


def _schema_path(schema_name: str) -> Path:
    return Path(__file__).parent.parent / "schemas" / f"{schema_name}.schema.json"


def _get_validator(schema_name: str = PROJECTS_SCHEMA) -> jsonschema.Draft7Validator:
    """Compiled validator for a bundled schema, loaded once."""
    if schema_name not in _validators:
        schema_path = _schema_path(schema_name)
        if not schema_path.exists():
            raise ValidationError(schema_name, f"Schema file not found: {schema_path}")
        _validators[schema_name] = jsonschema.Draft7Validator(json.loads(schema_path.read_text()))
    return _validators[schema_name]


def _check_shape(data: Any) -> None:
    errors = sorted(_get_validator().iter_errors(data), key=lambda e: list(e.absolute_path))
    if not errors:
        return
    first = errors[0]
    if len(errors) > 1:
        logger.debug(f"{len(errors)} schema errors in project list, reporting the first")
    path = ".".join(str(p) for p in first.absolute_path) if first.absolute_path else "(root)"
    raise ValidationError(PROJECTS_SCHEMA, first.message, path)


def _check_unique_ids(records: list[dict]) -> None:
    seen: dict[str, int] = {}
    for index, record in enumerate(records):
        project_id = record["id"]
        if project_id in seen:
            raise ValidationError(
                PROJECTS_SCHEMA,
                f"duplicate id '{project_id}' (first used at index {seen[project_id]})",
                f"{index}.id",
            )
        seen[project_id] = index


def validate_projects(data: Any) -> list[dict]:
    """Check a decoded project list and return it.

    Raises:
        ValidationError: On a schema violation or a repeated id
    """
    _check_shape(data)
    _check_unique_ids(data)
    return data


def read_projects_file(filepath: Path) -> list[dict]:
    """Load a project file and validate it.

    Raises:
        ValidationError: If the file is missing, not JSON, or not a valid list
    """
    if not filepath.exists():
        raise ValidationError(PROJECTS_SCHEMA, f"File not found: {filepath}")

    try:
        data = json.loads(filepath.read_text())
    except json.JSONDecodeError as e:
        raise ValidationError(PROJECTS_SCHEMA, f"Invalid JSON in {filepath}: {e}") from None

    return validate_projects(data)


def check_before_write(records: list[dict], filepath: Path) -> None:
    """Never write a project list that could not be read back."""
    try:
        validate_projects(records)
    except ValidationError as e:
        raise ValidationError(
            PROJECTS_SCHEMA,
            f"Refusing to write invalid data to {filepath}: {e}",
        ) from None
