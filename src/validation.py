"""Schema validation for review payloads."""

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent.parent / "schemas"


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_review_result(data: dict) -> None:
    """Validate a `ReviewResult.to_dict()` payload. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("review_result")
    jsonschema.validate(data, schema)


def validate_run_report(data: dict) -> None:
    """Validate a run report against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("run_report")
    jsonschema.validate(data, schema)
