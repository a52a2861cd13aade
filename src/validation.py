"""Schema validation for submitted receipts."""

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent.parent / "schemas"


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_receipt(data) -> None:
    """Validate a decoded receipt payload. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("receipt")
    jsonschema.validate(data, schema)


def receipt_errors(data) -> list[str]:
    """All schema violations as '<path>: <message>' strings, sorted by path."""
    schema = _load_schema("receipt")
    validator_cls = jsonschema.validators.validator_for(schema)
    validator = validator_cls(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    return [f"{format_error_path(e)}: {e.message}" for e in errors]


def format_error_path(error: jsonschema.ValidationError) -> str:
    """'items[2].price' style path for an error; '$' for the document root."""
    path = ""
    for part in error.absolute_path:
        path += f"[{part}]" if isinstance(part, int) else (f".{part}" if path else part)
    return path or "$"
