"""Input Decoding — turns raw payloads into validated schema instances.

Invariants:
    - Already-validated schema instances pass through unchanged
    - Any pydantic failure surfaces as InputValidationError naming the first bad field
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from workbench.core.errors import InputValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def decode(schema: type[SchemaT], payload: SchemaT | Mapping[str, Any]) -> SchemaT:
    """Validate payload against schema."""
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "__root__"
        raise InputValidationError(first["msg"], field) from e
