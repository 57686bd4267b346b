"""
Top‑level API router and route ordering.

``router`` aggregates the resource routers under a unified prefix
(``/api`` in the application factory).  Starlette tries routes in
registration order, so a parametric route such as
``/products/{product_id}`` would capture ``/products/search`` if it
were registered first.  ``prefer_literal_routes`` removes that
dependency on declaration order: it reorders a router's own route
table so that, segment by segment, literal segments are tried before
parameter captures.  It must run on each endpoint router before that
router is included, because included routers are not flattened into
the parent's route list by every FastAPI release.
"""

from typing import List, Tuple

from fastapi import APIRouter
from starlette.routing import BaseRoute

from .endpoints import products


def _route_specificity(route: BaseRoute) -> Tuple[int, ...]:
    path = getattr(route, "path", "")
    return tuple(1 if "{" in segment else 0 for segment in path.strip("/").split("/"))


def prefer_literal_routes(routes: List[BaseRoute]) -> None:
    """Stable in‑place sort of ``routes``, literal segments first.

    Routes whose paths are equal segment‑for‑segment in kind keep
    their relative order, so method‑specific routes on the same path
    are unaffected.
    """
    routes.sort(key=_route_specificity)


prefer_literal_routes(products.router.routes)

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
