"""Shared validation for the product add/edit forms.

Form fields arrive one at a time as raw values (usually strings from an input
box). ``coerce_field_value`` turns them into the types the Product model holds;
``validate_product_draft`` collects the reasons a draft cannot be added.

Malformed input raises `FormValidationError` so the API can return HTTP 422
with structured `field_errors`. An incomplete draft is not an error: the add
operation simply refuses it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from catalog.integrations.contracts.interfaces import ProductDraft


@dataclass
class FormValidationError(Exception):
    """Exception raised for form validation failures.

    Attributes:
        field_errors: mapping of field name -> human-readable error message.
        message: optional top-level message.
    """

    field_errors: Dict[str, str]
    message: str = "Validation failed"

    def __str__(self) -> str:  # pragma: no cover
        return self.message


TEXT_FIELDS = {"name", "image_url", "weight"}
INT_FIELDS = {"count"}
SIZE_FIELDS = {"width", "height"}

# Wire/form spellings accepted for the python attribute names
_FIELD_ALIASES = {"imageUrl": "image_url"}


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def _strip(v: Any) -> str:
    return _as_str(v).strip()


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def require_str(payload: Dict[str, Any], field: str, errors: Dict[str, str], *, label: Optional[str] = None) -> str:
    value = _strip(payload.get(field))
    if not value:
        add_error(errors, field, f"{label or field} is required")
    return value


def require_positive(payload: Dict[str, Any], field: str, errors: Dict[str, str], *, label: Optional[str] = None) -> float:
    value = payload.get(field)
    if value is None or not math.isfinite(value) or value <= 0:
        add_error(errors, field, f"{label or field} must be greater than 0")
    return value


def parse_int(field: str, raw: Any) -> int:
    if isinstance(raw, bool):
        raise FormValidationError({field: f"{field} must be a whole number"})
    if isinstance(raw, int):
        return raw
    s = _strip(raw)
    if s == "":
        return 0
    try:
        val = float(s)
    except ValueError:
        raise FormValidationError({field: f"{field} must be a whole number"})
    if not val.is_integer():
        raise FormValidationError({field: f"{field} must be a whole number"})
    return int(val)


def parse_number(field: str, raw: Any) -> Union[int, float]:
    if isinstance(raw, bool):
        raise FormValidationError({field: f"{field} must be a number"})
    if isinstance(raw, (int, float)):
        val = float(raw)
    else:
        s = _strip(raw)
        if s == "":
            return 0
        try:
            val = float(s)
        except ValueError:
            raise FormValidationError({field: f"{field} must be a number"})
    if not math.isfinite(val):
        raise FormValidationError({field: f"{field} must be a finite number"})
    return int(val) if val.is_integer() else val


def format_weight(raw: Any) -> str:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(parse_number("weight", raw))
    return _as_str(raw)


def normalize_field_name(field: str) -> str:
    name = _FIELD_ALIASES.get(field, field)
    if name not in TEXT_FIELDS | INT_FIELDS | SIZE_FIELDS:
        raise FormValidationError({field: f"Unknown product field '{field}'"})
    return name


def coerce_field_value(field: str, raw: Any) -> Any:
    """Convert one form input to the type stored on the product (weight stays text)."""
    name = normalize_field_name(field)
    if name in INT_FIELDS:
        return parse_int(name, raw)
    if name in SIZE_FIELDS:
        return parse_number(name, raw)
    if name == "weight":
        return format_weight(raw)
    return _as_str(raw)


def apply_field_value(record: Any, field: str, raw: Any) -> None:
    """Set one coerced form field on a ProductDraft or Product; width/height live on ``size``."""
    apply_field_values(record, {field: raw})


def apply_field_values(record: Any, payload: Dict[str, Any]) -> None:
    """Set several form fields at once; nothing is written unless every field coerces."""
    coerced: Dict[str, Any] = {}
    errors: Dict[str, str] = {}
    for field, raw in payload.items():
        try:
            name = normalize_field_name(field)
            coerced[name] = coerce_field_value(name, raw)
        except FormValidationError as exc:
            for key, message in exc.field_errors.items():
                add_error(errors, key, message)
    if errors:
        raise FormValidationError(errors)

    for name, value in coerced.items():
        if name in SIZE_FIELDS:
            setattr(record.size, name, value)
        else:
            setattr(record, name, value)


def validate_product_draft(draft: ProductDraft) -> Dict[str, str]:
    """Return field errors that keep a draft from being added; empty means addable."""
    errors: Dict[str, str] = {}
    payload = {
        "name": draft.name,
        "imageUrl": draft.image_url,
        "weight": draft.weight,
        "count": draft.count,
        "width": draft.size.width,
        "height": draft.size.height,
    }
    require_str(payload, "name", errors, label="Name")
    require_str(payload, "imageUrl", errors, label="Image URL")
    require_str(payload, "weight", errors, label="Weight")
    require_positive(payload, "count", errors, label="Count")
    require_positive(payload, "width", errors, label="Width")
    require_positive(payload, "height", errors, label="Height")
    return errors

