"""
List and detail routes. Every mutation here changes view memory only.
"""

from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from catalog.integrations.contracts.interfaces import ProductDraft, Size, SortOption
from catalog.state_manager import StateManager
from catalog.validation import format_weight, validate_product_draft
from catalog.views.product_detail import ProductDetailView

router = APIRouter()


# Will be set by main.py after import
state_manager: StateManager = None


class SizeRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    width: float = 0
    height: float = 0


class ProductDraftRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    count: int = 0
    size: SizeRequest = Field(default_factory=SizeRequest)
    weight: Union[str, float] = ""

    def to_draft(self) -> ProductDraft:
        return ProductDraft(
            image_url=self.image_url,
            name=self.name,
            count=self.count,
            size=Size(width=_narrow(self.size.width), height=_narrow(self.size.height)),
            weight=format_weight(self.weight),
        )


class CommentRequest(BaseModel):
    text: str = ""


def _narrow(value: float):
    return int(value) if float(value).is_integer() else value


def _loaded_detail(session_id: str, product_id: int) -> ProductDetailView:
    view = state_manager.get_detail_view(session_id, product_id)
    if view.is_loading:
        raise HTTPException(status_code=409, detail="Product is still loading")
    return view


# --------------------------------------------------------------------------- #
# Sessions
# --------------------------------------------------------------------------- #
@router.post("/sessions", tags=["Sessions"])
async def create_session():
    return {"success": True, "session_id": state_manager.create_session()}


@router.delete("/sessions/{session_id}", tags=["Sessions"])
async def end_session(session_id: str):
    if not state_manager.end_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"success": True}


# --------------------------------------------------------------------------- #
# List route
# --------------------------------------------------------------------------- #
@router.get("/sessions/{session_id}/products", tags=["Products"])
async def list_products(session_id: str, sort: Optional[SortOption] = None):
    view = state_manager.get_list_view(session_id)
    await view.activate()
    if sort is not None:
        view.set_sort(sort)
    return view.snapshot()


@router.post("/sessions/{session_id}/products", tags=["Products"])
async def add_product(session_id: str, body: ProductDraftRequest):
    view = state_manager.get_list_view(session_id)
    draft = body.to_draft()
    product = view.add_product(draft)
    if product is None:
        return {"success": False, "error": "Product draft is incomplete", "field_errors": validate_product_draft(draft)}
    return {"success": True, "product": product.to_dict()}


@router.post("/sessions/{session_id}/products/add/open", tags=["Products"])
async def open_add_form(session_id: str):
    view = state_manager.get_list_view(session_id)
    view.open_add()
    return view.snapshot()["add_form"]


@router.post("/sessions/{session_id}/products/add/close", tags=["Products"])
async def close_add_form(session_id: str):
    view = state_manager.get_list_view(session_id)
    view.close_add()
    return view.snapshot()["add_form"]


@router.patch("/sessions/{session_id}/products/add/draft", tags=["Products"])
async def update_add_draft(session_id: str, payload: Dict[str, Any] = Body(...)):
    view = state_manager.get_list_view(session_id)
    view.update_draft_fields(payload)
    return view.snapshot()["add_form"]


@router.post("/sessions/{session_id}/products/add/confirm", tags=["Products"])
async def confirm_add(session_id: str):
    view = state_manager.get_list_view(session_id)
    errors = validate_product_draft(view.draft)
    product = view.confirm_add()
    if product is None:
        return {"success": False, "error": "Product draft is incomplete", "field_errors": errors}
    return {"success": True, "product": product.to_dict()}


@router.post("/sessions/{session_id}/products/{product_id}/delete", tags=["Products"])
async def request_delete(session_id: str, product_id: int):
    view = state_manager.get_list_view(session_id)
    view.request_delete(product_id)
    return {"success": True, "delete_candidate": view.delete_candidate}


@router.post("/sessions/{session_id}/products/delete/confirm", tags=["Products"])
async def confirm_delete(session_id: str):
    view = state_manager.get_list_view(session_id)
    candidate = view.delete_candidate
    removed = view.confirm_delete()
    return {"success": removed, "deleted": candidate if removed else None}


@router.post("/sessions/{session_id}/products/delete/cancel", tags=["Products"])
async def cancel_delete(session_id: str):
    view = state_manager.get_list_view(session_id)
    view.cancel_delete()
    return {"success": True}


# --------------------------------------------------------------------------- #
# Detail route
# --------------------------------------------------------------------------- #
@router.get("/sessions/{session_id}/products/{product_id}", tags=["Product Detail"])
async def get_product(session_id: str, product_id: int):
    view = state_manager.get_detail_view(session_id, product_id)
    await view.activate()
    return view.snapshot()


@router.delete("/sessions/{session_id}/products/{product_id}/view", tags=["Product Detail"])
async def close_product(session_id: str, product_id: int):
    return {"success": state_manager.close_detail_view(session_id, product_id)}


@router.post("/sessions/{session_id}/products/{product_id}/edit", tags=["Product Detail"])
async def open_edit(session_id: str, product_id: int):
    view = _loaded_detail(session_id, product_id)
    view.open_edit()
    return view.snapshot()["edit"]


@router.patch("/sessions/{session_id}/products/{product_id}/edit", tags=["Product Detail"])
async def update_edit(session_id: str, product_id: int, payload: Dict[str, Any] = Body(...)):
    view = _loaded_detail(session_id, product_id)
    if not view.edit_open:
        raise HTTPException(status_code=409, detail="Editor is not open")
    view.update_edit_fields(payload)
    return view.snapshot()["edit"]


@router.post("/sessions/{session_id}/products/{product_id}/edit/save", tags=["Product Detail"])
async def save_edit(session_id: str, product_id: int):
    view = _loaded_detail(session_id, product_id)
    if not view.save_edit():
        raise HTTPException(status_code=409, detail="Editor is not open")
    return view.snapshot()


@router.post("/sessions/{session_id}/products/{product_id}/edit/cancel", tags=["Product Detail"])
async def cancel_edit(session_id: str, product_id: int):
    view = _loaded_detail(session_id, product_id)
    view.cancel_edit()
    return view.snapshot()


@router.post("/sessions/{session_id}/products/{product_id}/comments", tags=["Product Detail"])
async def add_comment(session_id: str, product_id: int, body: CommentRequest):
    view = _loaded_detail(session_id, product_id)
    comment = view.add_comment(body.text)
    if comment is None:
        return {"success": False, "error": "Comment text is empty"}
    return {"success": True, "comment": comment.to_dict()}


@router.delete("/sessions/{session_id}/products/{product_id}/comments/{comment_id}", tags=["Product Detail"])
async def delete_comment(session_id: str, product_id: int, comment_id: int):
    view = _loaded_detail(session_id, product_id)
    return {"success": view.delete_comment(comment_id)}
