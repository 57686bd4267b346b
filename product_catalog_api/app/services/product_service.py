"""
In‑memory product store.

``ProductService`` owns the product collection for one application
instance.  Records keep insertion order, which is also the order of
listings and search results.  Every operation holds a single lock so
that concurrent requests (threaded servers, sync callers) observe the
same serial behaviour as a single‑threaded event loop.  Records are
copied on the way in and out; callers never hold references into the
store.

Nothing is persisted: the catalog resets whenever the process restarts.
"""

import logging
import threading
import uuid
from typing import Iterable, List, Optional

from fastapi import Request

from ..schemas.product import ProductCreate, ProductPage, ProductRead, ProductUpdate

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = (
    ProductRead(
        id="1",
        name="Laptop",
        description="High-performance laptop with 16GB RAM",
        price=1200,
        category="electronics",
        in_stock=True,
    ),
    ProductRead(
        id="2",
        name="Smartphone",
        description="Latest model with 128GB storage",
        price=800,
        category="electronics",
        in_stock=True,
    ),
    ProductRead(
        id="3",
        name="Coffee Maker",
        description="Programmable coffee maker with timer",
        price=50,
        category="kitchen",
        in_stock=False,
    ),
)


class ProductService:
    """Owns the product collection and implements its query and mutation rules."""

    def __init__(self, products: Iterable[ProductRead] = ()) -> None:
        self._products: List[ProductRead] = [product.model_copy() for product in products]
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return -1

    def _new_id(self) -> str:
        while True:
            product_id = str(uuid.uuid4())
            if self._index_of(product_id) == -1:
                return product_id

    def list_products(self, category: Optional[str] = None, page: int = 1, limit: int = 10) -> ProductPage:
        """Return one page of products, optionally filtered by category.

        The category comparison is case‑insensitive; an empty category
        means no filter.  ``total`` is the size of the filtered set.
        Both ``page`` and ``limit`` start at 1.
        """
        if page < 1 or limit < 1:
            raise ValueError("page and limit must be positive integers")
        with self._lock:
            if category:
                wanted = category.lower()
                matches = [p for p in self._products if p.category.lower() == wanted]
            else:
                matches = list(self._products)
            start = (page - 1) * limit
            return ProductPage(
                page=page,
                total=len(matches),
                products=[p.model_copy() for p in matches[start:start + limit]],
            )

    def get_product(self, product_id: str) -> Optional[ProductRead]:
        """Return the product with ``product_id`` or ``None``."""
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None
            return self._products[index].model_copy()

    def create_product(self, data: ProductCreate) -> ProductRead:
        """Store a validated product under a freshly generated id."""
        with self._lock:
            product = ProductRead(id=self._new_id(), **data.model_dump())
            self._products.append(product)
        logger.info("Created product %s", product.id)
        return product.model_copy()

    def update_product(self, product_id: str, data: ProductUpdate) -> Optional[ProductRead]:
        """Apply the supplied fields of ``data`` to an existing product.

        Fields absent from the payload keep their value; ``id`` never
        changes.  Returns the updated product or ``None`` if the record
        does not exist.
        """
        changes = data.changes()
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None
            updated = self._products[index].model_copy(update=changes)
            self._products[index] = updated
        logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(changes)) or "no changes")
        return updated.model_copy()

    def delete_product(self, product_id: str) -> Optional[ProductRead]:
        """Remove a product and return its last state, or ``None`` if absent."""
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None
            removed = self._products.pop(index)
        logger.info("Deleted product %s", product_id)
        return removed

    def search_products(self, query: str) -> List[ProductRead]:
        """Return products whose name or description contains ``query``.

        Matching is a case‑insensitive substring test.  An empty query
        is rejected rather than matching everything.
        """
        if not query:
            raise ValueError("search query must not be empty")
        needle = query.lower()
        with self._lock:
            return [
                p.model_copy()
                for p in self._products
                if needle in p.name.lower() or needle in p.description.lower()
            ]


def get_product_service(request: Request) -> ProductService:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.product_service
