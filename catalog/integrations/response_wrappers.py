from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from catalog.integrations.contracts.interfaces import Comment, Product, Size


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload if payload is not None else {}


class CatalogFetchError(IntegrationResponseError):
    """Single outcome for every failed catalogue read: transport, HTTP status or malformed body."""


class SizeModel(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    width: float
    height: float


class CommentModel(BaseModel):
    id: int
    # "pruductId" is the legacy spelling some service payloads still carry
    product_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("productId", "product_id", "pruductId"),
    )
    description: str = ""
    date: str = ""


class ProductRecordModel(BaseModel):
    id: int
    image_url: str = Field(validation_alias=AliasChoices("imageUrl", "image_url"))
    name: str
    count: int
    size: SizeModel
    weight: str = ""
    comments: List[CommentModel] = Field(default_factory=list)

    @field_validator("weight", mode="before")
    @classmethod
    def _weight_as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return _format_number(value)
        return value


def normalize_product_payload(raw: Any) -> Product:
    if not isinstance(raw, dict):
        raise IntegrationResponseError(
            f"Expected a product object, got {type(raw).__name__}.",
            payload=raw,
        )

    record: ProductRecordModel = _build_model(ProductRecordModel, raw)
    return Product(
        id=record.id,
        image_url=record.image_url,
        name=record.name,
        count=record.count,
        size=Size(width=_narrow(record.size.width), height=_narrow(record.size.height)),
        weight=record.weight,
        comments=[
            Comment(
                id=c.id,
                product_id=c.product_id if c.product_id is not None else record.id,
                description=c.description,
                date=c.date,
            )
            for c in record.comments
        ],
    )


def normalize_product_list(raw: Any) -> List[Product]:
    if not isinstance(raw, list):
        raise IntegrationResponseError(
            f"Expected a list of products, got {type(raw).__name__}.",
            payload=raw,
        )
    return [normalize_product_payload(item) for item in raw]


def _narrow(value: float):
    """Keep whole-number sizes as ints so they round-trip the way the service sent them."""
    return int(value) if float(value).is_integer() else value


def _format_number(value: Any) -> str:
    return str(_narrow(float(value)))


def _build_model(model_type, raw: Dict[str, Any]):
    try:
        return model_type.model_validate(raw)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
