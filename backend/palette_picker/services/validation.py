"""
Palette Picker Backend — Request Body Validation
==================================================

What:  Required-field checks applied to submitted JSON bodies before any
       database work.
How:   find_missing_field() is a pure probe; require_fields() turns its
       answer into a ValidationError carrying the expected body shape;
       build_model() converts a checked body into its Pydantic schema.
Who:   Called by the POST route handlers.

Missing-field policy:
    A field counts as missing when it is absent, null, or falsy. Empty
    strings, 0, false, [] and {} are all rejected. Clients of the original
    service rely on this, so 0 / false are not accepted as values.
"""

from typing import Any, Mapping, Optional, Sequence, Type, TypeVar

import pydantic
from pydantic import BaseModel

from palette_picker.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def find_missing_field(
    body: Optional[Mapping[str, Any]],
    required_fields: Sequence[str],
) -> Optional[str]:
    """
    Return the first required field missing from ``body``, or None.

    Fields are checked in the order given, so the caller controls which
    field is reported when several are missing.
    """
    body = body or {}
    for field in required_fields:
        if not body.get(field):
            return field
    return None


def require_fields(
    body: Optional[Mapping[str, Any]],
    required_fields: Sequence[str],
    expected_format: str,
) -> None:
    """
    Raise ValidationError naming the first missing field and the full body shape.

    Example:
        >>> require_fields({}, ["project_name"], "{ project_name: <String> }")
        Traceback (most recent call last):
        ...
        ValidationError: Expected format: { project_name: <String> }. You are missing a "project_name" property.
    """
    missing = find_missing_field(body, required_fields)
    if missing is not None:
        raise ValidationError(
            message=(
                f"Expected format: {expected_format}. "
                f'You are missing a "{missing}" property.'
            ),
            field=missing,
        )


def build_model(model_cls: Type[ModelT], body: Optional[Mapping[str, Any]]) -> ModelT:
    """
    Validate ``body`` against ``model_cls``, reporting type errors as ValidationError.

    Runs after require_fields(), so it only fails on wrongly typed values
    (e.g. a number where a string is expected, or a non-integer project_id).
    """
    try:
        return model_cls.model_validate(dict(body or {}))
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ValidationError(
            message=f'Invalid "{field}" property: {first.get("msg", "invalid value")}.',
            field=field,
            context={"errors": e.error_count()},
        ) from e
