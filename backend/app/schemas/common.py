"""
Folio Backend - Shared Schema Building Blocks
==============================================

What:  Base classes, normalizers and response models shared by every resource.
How:   Input models accept camelCase keys (the site frontend sends `applyUrl`,
       `isActive`, ...) and snake_case keys alike. Output models are built from
       ORM objects and serialize with camelCase aliases, `_id` for the record
       identifier and `date` for the creation timestamp.

Normalizers:
    split_list("a, b ,c")        → ["a", "b", "c"]
    split_list(["a ", "", "b"])  → ["a", "b"]
    coerce_flag("true")          → True   (only True and "true" are truthy)
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Sequence, Type, TypeVar

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.exceptions import ValidationError


def split_list(value: Any) -> List[str]:
    """
    Normalize a comma-separated string or a list into a list of trimmed strings.

    Empty entries are dropped; None and "" become [].
    """
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [str(item) for item in value if item is not None]
    else:
        raise ValueError("must be a list of strings or a comma-separated string")
    return [item.strip() for item in items if item.strip()]


def coerce_flag(value: Any) -> bool:
    """Boolean form/JSON flag: true only for `True` or the string "true"."""
    return value is True or value == "true"


class InputModel(BaseModel):
    """Base for request bodies: camelCase or snake_case keys, surrounding whitespace stripped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class RecordResponse(BaseModel):
    """Base for records returned to clients."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: uuid.UUID = Field(serialization_alias="_id", description="Store-assigned identifier")
    created_at: datetime = Field(serialization_alias="date", description="Creation time (UTC)")


class MessageResponse(BaseModel):
    """Plain acknowledgement body, e.g. {"message": "Product deleted successfully"}."""

    message: str


class ErrorResponse(BaseModel):
    """
    Error body for every failure.

    Example:
        {"message": "Blog post not found"}
    """

    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Liveness probe body."""

    status: str = Field(description='Always "OK" while the process serves requests')
    message: str = Field(description="Human-readable status")
    timestamp: str = Field(description="Server time, ISO 8601 (UTC)")
    uptime: float = Field(ge=0, description="Seconds since the process started")


# Leading `loc` segments that name where a value came from, not which field.
_LOCATION_ROOTS = {"body", "query", "path", "form", "header"}


def describe_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Flatten pydantic/FastAPI error entries into one readable sentence.

    Example:
        [{"loc": ("body", "title"), "msg": "Field required"}]
        → "title: Field required"
    """
    parts = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_ROOTS]
        msg = error.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid input"


InputT = TypeVar("InputT", bound=BaseModel)


def validate_input(model: Type[InputT], data: Dict[str, Any]) -> InputT:
    """
    Build an input model from loose values (multipart form fields).

    None means "field not sent", so model defaults apply to it.

    Raises:
        ValidationError: the values do not satisfy the model (→ 400)
    """
    try:
        return model.model_validate({k: v for k, v in data.items() if v is not None})
    except PydanticValidationError as e:
        raise ValidationError(
            message=describe_errors(e.errors()),
            context={"model": model.__name__},
        )
