import pytest

from catalog.integrations.contracts.interfaces import ProductDraft, Size
from catalog.validation import (
    FormValidationError,
    apply_field_value,
    apply_field_values,
    coerce_field_value,
    validate_product_draft,
)


def test_complete_draft_has_no_errors():
    draft = ProductDraft(name="Widget", image_url="http://x/img.png", count=5, size=Size(2, 3), weight="100g")
    assert validate_product_draft(draft) == {}


def test_empty_draft_reports_every_field():
    errors = validate_product_draft(ProductDraft())
    assert set(errors) == {"name", "imageUrl", "weight", "count", "width", "height"}
    assert errors["name"] == "Name is required"
    assert errors["count"] == "Count must be greater than 0"


@pytest.mark.parametrize(
    "field,raw,expected",
    [
        ("count", "12", 12),
        ("count", "", 0),
        ("count", 3, 3),
        ("count", "4.0", 4),
        ("width", "2.5", 2.5),
        ("height", "", 0),
        ("weight", 250, "250"),
        ("weight", "250g", "250g"),
        ("imageUrl", "http://x", "http://x"),
        ("name", None, ""),
    ],
)
def test_coerce_field_value(field, raw, expected):
    assert coerce_field_value(field, raw) == expected


@pytest.mark.parametrize(
    "field,raw",
    [
        ("count", "1.5"),
        ("count", "abc"),
        ("width", "wide"),
        ("count", True),
        ("width", "nan"),
        ("height", "inf"),
        ("width", float("-inf")),
        ("count", "nan"),
    ],
)
def test_malformed_numbers_raise(field, raw):
    with pytest.raises(FormValidationError) as exc_info:
        coerce_field_value(field, raw)
    assert field in exc_info.value.field_errors


def test_unknown_field_raises():
    with pytest.raises(FormValidationError):
        coerce_field_value("price", "10")


def test_apply_field_value_routes_size_fields():
    draft = ProductDraft()
    apply_field_value(draft, "width", "4")
    apply_field_value(draft, "imageUrl", "http://x")
    assert draft.size == Size(width=4, height=0)
    assert draft.image_url == "http://x"


def test_non_finite_size_fails_draft_check():
    draft = ProductDraft(name="Widget", image_url="http://x/img.png", count=5, size=Size(float("nan"), 3), weight="100g")
    errors = validate_product_draft(draft)
    assert set(errors) == {"width"}
    assert errors["width"] == "Width must be greater than 0"


def test_apply_field_values_reports_every_bad_field_and_writes_nothing():
    draft = ProductDraft()
    with pytest.raises(FormValidationError) as exc_info:
        apply_field_values(draft, {"name": "Widget", "count": "many", "price": "10"})
    assert set(exc_info.value.field_errors) == {"count", "price"}
    assert draft == ProductDraft()
