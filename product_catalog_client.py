"""Product Catalog API client.

A small wrapper around the product REST API using the ``requests``
library.  It exposes one method per route:

* :meth:`list_products` – one page of products, optionally filtered by category.
* :meth:`get_product` – fetch a single product by its identifier.
* :meth:`search_products` – keyword search over names and descriptions.
* :meth:`create_product` – add a product to the catalog.
* :meth:`update_product` – change some fields of a product.
* :meth:`delete_product` – remove a product, returning its last state.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message`` (the server's ``error``
field when it sent one).

Authentication uses the shared API key, sent as
``Authorization: Bearer <api_key>`` when one is configured.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

PRODUCTS_PATH = "/api/products"


class ProductCatalogAPI:
    """Client for interacting with the product catalog API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/products``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request (for POST/PUT).
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _product_path(product_id: Any) -> str:
        return f"{PRODUCTS_PATH}/{quote(str(product_id), safe='')}"

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(
        self, *, category: Optional[str] = None, page: int = 1, limit: int = 10
    ) -> Tuple[Dict[str, Any], Optional[Error]]:
        """Retrieve one page of products.

        Returns:
            A tuple ``(page, error)``.  ``page`` has the keys ``page``,
            ``total`` and ``products``; it is empty on failure.
        """
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if category:
            params["category"] = category
        data, error = self._request("GET", PRODUCTS_PATH, params=params)
        if error:
            return {}, error
        return data or {}, None

    def get_product(self, product_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single product by ID."""
        return self._request("GET", self._product_path(product_id))

    def search_products(self, query: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search products whose name or description contains ``query``."""
        data, error = self._request("GET", f"{PRODUCTS_PATH}/search", params={"query": query})
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def create_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a product from ``name``, ``description``, ``price``, ``category`` and optional ``inStock``."""
        return self._request("POST", PRODUCTS_PATH, json_body=payload)

    def update_product(
        self, product_id: Any, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update the given fields of a product."""
        return self._request("PUT", self._product_path(product_id), json_body=changes)

    def delete_product(self, product_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a product.

        Returns:
            A tuple ``(product, error)`` where ``product`` is the deleted
            record as it was just before removal.
        """
        data, error = self._request("DELETE", self._product_path(product_id))
        if error:
            return None, error
        return (data or {}).get("product"), None
