"""Validation of fact-check results returned by the model."""
from typing import Any, Optional

from pydantic import ValidationError

from schemas.factcheck.v0 import MODULE
from schemas.factcheck.v1 import FactCheckResult
from schemas.registry import load_schema
from lucidad.utils.exceptions import ResultValidationError

ROOT_FIELD = "(root)"


def validate_result(candidate: Any, version: Optional[str] = None) -> FactCheckResult:
    """
    Validate an arbitrary JSON value as a fact-check result.

    Args:
        candidate: Parsed JSON, typically a dict.
        version: Schema version to validate against. Defaults to the newest.

    Raises:
        ResultValidationError: listing every failing field.
    """
    schema = load_schema(MODULE, version)
    try:
        return schema.model_validate(candidate)
    except ValidationError as e:
        raise ResultValidationError(flatten_errors(e)) from e


def flatten_errors(exc: ValidationError) -> list[dict[str, str]]:
    """Turn a pydantic error tree into [{"field": "sources.0.url", "reason": ...}]."""
    flat = []
    for err in exc.errors(include_url=False):
        field = ".".join(str(part) for part in err["loc"]) or ROOT_FIELD
        flat.append({"field": field, "reason": err["msg"]})
    return flat


def result_json_schema() -> dict:
    return FactCheckResult.json_contract()
