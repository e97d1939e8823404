"""JSON Schema validation for emote manifests.

The schema ships with the package (schemas/emote-manifest.schema.json) and is
checked before a manifest is ever registered as a build output.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import ValidationError
from jsonschema.exceptions import best_match
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from .types import Manifest

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "emote-manifest.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the bundled manifest schema.

    Raises:
        FileNotFoundError: If the schema file is missing from the package
        json.JSONDecodeError: If the schema is not valid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


@lru_cache(maxsize=1)
def _validator() -> Validator:
    schema = load_schema()
    validator_cls = validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def validate_manifest(manifest: Manifest) -> None:
    """Validate a manifest against the bundled schema.

    Raises:
        ValidationError: The most relevant violation, if any
        FileNotFoundError: If the schema file is missing
        json.JSONDecodeError: If the schema is invalid
    """
    error = best_match(_validator().iter_errors(manifest))
    if error is not None:
        raise error


def describe_error(error: ValidationError) -> str:
    """Render a violation as ``emotes -> 3 -> versions -> 0 -> size: <message>``."""
    location = " -> ".join(str(p) for p in error.absolute_path) or "root"
    return f"Validation error at {location}: {error.message}"


def validate_manifest_with_error_details(manifest: Manifest) -> tuple[bool, str | None]:
    """Validate a manifest and describe the first violation.

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_manifest(manifest)
    except ValidationError as e:
        return False, describe_error(e)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
    return True, None
