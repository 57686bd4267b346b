"""
Product endpoints.

These routes expose CRUD, paginated listing with an optional category
filter, and keyword search over the in‑memory catalog.  All of them
require the API key; the middleware chain enforces that before any
handler runs.

Request bodies are accepted as any JSON value (or none) and validated
explicitly, so an update for an unknown id answers 404 before the
payload is inspected.  Only a body that is not valid JSON at all is
rejected by FastAPI before the handler runs.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from product_catalog_api.app.schemas.product import (
    InvalidProductData,
    ProductDeleted,
    ProductPage,
    ProductRead,
    parse_product_create,
    parse_product_update,
)
from product_catalog_api.app.services.product_service import ProductService, get_product_service

router = APIRouter()

MAX_PAGE_LIMIT = 1000
NOT_FOUND_MESSAGE = "Product not found"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)


@router.get("", response_model=ProductPage)
async def list_products(
    category: Optional[str] = Query(None, description="Case‑insensitive category filter"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=MAX_PAGE_LIMIT),
    service: ProductService = Depends(get_product_service),
) -> ProductPage:
    """Return a page of products in insertion order.

    ``total`` in the response counts all products matching the
    category filter, not just those on the returned page.
    """
    return service.list_products(category=category, page=page, limit=limit)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    product = service.get_product(product_id)
    if product is None:
        raise _not_found()
    return product


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: Any = Body(None),
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Create a product; ``inStock`` defaults to ``true``."""
    try:
        data = parse_product_create(payload)
    except InvalidProductData as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return service.create_product(data)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: str,
    payload: Any = Body(None),
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Update only the fields present in the payload."""
    if service.get_product(product_id) is None:
        raise _not_found()
    try:
        data = parse_product_update(payload)
    except InvalidProductData as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    product = service.update_product(product_id, data)
    if product is None:
        # Deleted between the existence check and the update.
        raise _not_found()
    return product


@router.delete("/{product_id}", response_model=ProductDeleted)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductDeleted:
    product = service.delete_product(product_id)
    if product is None:
        raise _not_found()
    return ProductDeleted(message="Product deleted", product=product)


@router.get("/search", response_model=List[ProductRead])
async def search_products(
    query: Optional[str] = Query(None, description="Substring matched against name and description"),
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    """Case‑insensitive keyword search over product names and descriptions.

    Declared after ``/{product_id}``; the literal‑first route ordering
    applied in ``api.router`` still routes ``/search`` here.
    """
    if not query:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search query is required")
    return service.search_products(query)
