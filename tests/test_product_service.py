from concurrent.futures import ThreadPoolExecutor

import pytest

from product_catalog_api.app.schemas.product import ProductCreate, ProductUpdate
from product_catalog_api.app.services.product_service import SAMPLE_PRODUCTS, ProductService


def _create(service, **overrides):
    fields = {"name": "Mouse", "description": "Wireless mouse", "price": 25, "category": "electronics"}
    fields.update(overrides)
    return service.create_product(ProductCreate(**fields))


def test_list_defaults_returns_everything_in_insertion_order(service):
    page = service.list_products()
    assert page.page == 1
    assert page.total == 3
    assert [p.id for p in page.products] == ["1", "2", "3"]


def test_list_filters_category_case_insensitively(service):
    page = service.list_products(category="ELECTRONICS")
    assert page.total == 2
    assert {p.category for p in page.products} == {"electronics"}


def test_list_empty_category_means_no_filter(service):
    assert service.list_products(category="").total == 3


def test_pagination_returns_requested_slice_and_filtered_total(service):
    page = service.list_products(page=2, limit=1)
    assert [p.id for p in page.products] == ["2"]
    assert page.total == 3
    assert page.page == 2


def test_pagination_past_the_end_is_empty(service):
    page = service.list_products(category="kitchen", page=3, limit=5)
    assert page.products == []
    assert page.total == 1


@pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (-1, 5)])
def test_list_rejects_non_positive_page_or_limit(service, page, limit):
    with pytest.raises(ValueError):
        service.list_products(page=page, limit=limit)


def test_get_product_returns_copy(service):
    product = service.get_product("1")
    product.name = "Changed"
    assert service.get_product("1").name == "Laptop"


def test_get_unknown_product_returns_none(service):
    assert service.get_product("missing") is None


def test_create_assigns_unique_ids_and_defaults_in_stock(service):
    first = _create(service)
    second = _create(service)
    assert first.id != second.id
    assert first.id not in {"1", "2", "3"}
    assert first.in_stock is True
    assert len(service) == 5
    assert service.list_products(limit=10).products[-1].id == second.id


def test_create_keeps_explicit_out_of_stock(service):
    assert _create(service, inStock=False).in_stock is False


def test_update_only_touches_supplied_fields(service):
    updated = service.update_product("1", ProductUpdate(price=999))
    assert updated.price == 999
    assert updated.name == "Laptop"
    assert updated.description == "High-performance laptop with 16GB RAM"
    assert updated.category == "electronics"
    assert updated.in_stock is True
    assert service.get_product("1") == updated


def test_update_applies_falsy_values(service):
    updated = service.update_product("1", ProductUpdate(price=0, inStock=False))
    assert updated.price == 0
    assert updated.in_stock is False


def test_update_unknown_product_returns_none(service):
    assert service.update_product("missing", ProductUpdate(name="x")) is None


def test_delete_returns_snapshot_and_removes_record(service):
    before = service.get_product("2")
    deleted = service.delete_product("2")
    assert deleted == before
    assert service.get_product("2") is None
    assert service.delete_product("2") is None
    assert len(service) == 2


def test_search_matches_name_or_description_case_insensitively(service):
    _create(service, name="Keys", description="Mechanical Keyboard")
    results = service.search_products("keyboard")
    assert [p.name for p in results] == ["Keys"]
    assert [p.id for p in service.search_products("LAPTOP")] == ["1"]


def test_search_rejects_empty_query(service):
    with pytest.raises(ValueError):
        service.search_products("")


def test_store_does_not_share_sample_records():
    first = ProductService(SAMPLE_PRODUCTS)
    first.update_product("1", ProductUpdate(name="Renamed"))
    assert ProductService(SAMPLE_PRODUCTS).get_product("1").name == "Laptop"
    assert SAMPLE_PRODUCTS[0].name == "Laptop"


def test_concurrent_creates_get_unique_ids(service):
    workers, per_worker = 8, 50

    def create_batch(worker):
        return [_create(service, name=f"w{worker}-{n}").id for n in range(per_worker)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        ids = [pid for batch in pool.map(create_batch, range(workers)) for pid in batch]

    assert len(ids) == workers * per_worker
    assert len(set(ids)) == len(ids)
    assert len(service) == 3 + workers * per_worker
    listed = service.list_products(limit=1000).products
    assert len({p.id for p in listed}) == len(listed)


def test_concurrent_deletes_remove_each_record_once(service):
    created = [_create(service, name=f"p{n}").id for n in range(100)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(service.delete_product, created + created))

    assert sum(1 for r in results if r is not None) == 100
    assert len(service) == 3
