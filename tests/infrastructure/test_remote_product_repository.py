"""Tests for the HTTP repository against a fake requests session."""

import pytest
import requests

from ims.domain.exceptions import (
    DuplicateSkuError,
    EntityNotFoundError,
    RemoteServiceError,
    ValidationError,
)
from ims.domain.model.product_form import ProductChanges
from ims.domain.model.value_objects import Money
from ims.infrastructure.remote_product_repository import RemoteProductRepository
from tests.fakes import FakeResponse, FakeSession, make_form

RECORD = {
    "id": "42",
    "sku": "A-1",
    "name": "Widget",
    "category": "Electronics",
    "price": 10.0,
    "quantity": 5,
    "minStock": 2,
    "status": "active",
    "createdAt": "2024-01-01T00:00:00.000Z",
    "updatedAt": "2024-01-02T00:00:00.000Z",
}


def _repo(*responses, error=None):
    session = FakeSession(*responses, error=error)
    repo = RemoteProductRepository("http://api.test/", session=session, timeout=2.5)
    return session, repo


class TestReads:

    def test_list_all(self):
        session, repo = _repo(FakeResponse(body=[RECORD]))
        products = repo.list_all()
        assert [p.id for p in products] == ["42"]
        assert products[0].price == Money.of("10")
        assert session.requests == [("GET", "http://api.test/api/products", None, 2.5)]

    def test_get_by_id(self):
        session, repo = _repo(FakeResponse(body=RECORD))
        assert repo.get_by_id("42").sku == "A-1"
        assert session.requests[0][1] == "http://api.test/api/products/42"

    def test_get_missing_returns_none(self):
        _, repo = _repo(FakeResponse(status_code=404))
        assert repo.get_by_id("nope") is None

    def test_dashboard_stats(self):
        session, repo = _repo(FakeResponse(body={
            "totalProducts": 4, "totalValue": 82799.22,
            "lowStockItems": 1, "outOfStockItems": 1,
        }))
        stats = repo.dashboard_stats()
        assert stats.total_products == 4
        assert stats.total_value == Money.of("82799.22")
        assert session.requests[0][1] == "http://api.test/api/dashboard/stats"

    def test_transport_failure(self):
        _, repo = _repo(error=requests.ConnectionError("refused"))
        with pytest.raises(RemoteServiceError, match="unreachable"):
            repo.list_all()

    def test_server_error(self):
        _, repo = _repo(FakeResponse(status_code=503))
        with pytest.raises(RemoteServiceError, match="HTTP 503"):
            repo.list_all()

    def test_unexpected_body(self):
        _, repo = _repo(FakeResponse(body=[{"id": "1"}]))
        with pytest.raises(RemoteServiceError, match="unexpected body"):
            repo.list_all()

    @pytest.mark.parametrize("price", [None, "abc", "NaN", -1])
    def test_unusable_price_in_body(self, price):
        _, repo = _repo(FakeResponse(body=[dict(RECORD, price=price)]))
        with pytest.raises(RemoteServiceError, match="unexpected body"):
            repo.list_all()

    def test_product_id_is_escaped_in_path(self):
        session, repo = _repo(FakeResponse(status_code=404))
        assert repo.get_by_id("a/b?c#d") is None
        assert session.requests[0][1] == "http://api.test/api/products/a%2Fb%3Fc%23d"


class TestWrites:

    def test_add_posts_camel_case_json(self):
        session, repo = _repo(FakeResponse(status_code=201, body=RECORD))
        product = repo.add(make_form(sku="A-1", min_stock=2, image_url="https://x.io/a.png"))

        method, url, body, _ = session.requests[0]
        assert (method, url) == ("POST", "http://api.test/api/products")
        assert body["sku"] == "A-1"
        assert body["price"] == 10.0
        assert body["minStock"] == 2
        assert body["imageUrl"] == "https://x.io/a.png"
        assert body["status"] == "active"
        assert product.id == "42"

    def test_update_sends_only_supplied_fields(self):
        session, repo = _repo(FakeResponse(body=RECORD))
        repo.update("42", ProductChanges(quantity=9))
        method, url, body, _ = session.requests[0]
        assert (method, url, body) == ("PUT", "http://api.test/api/products/42", {"quantity": 9})

    def test_delete(self):
        session, repo = _repo(FakeResponse(status_code=204))
        repo.delete("42")
        assert session.requests[0][:2] == ("DELETE", "http://api.test/api/products/42")

    def test_conflict_maps_to_duplicate_sku(self):
        _, repo = _repo(FakeResponse(status_code=409))
        with pytest.raises(DuplicateSkuError):
            repo.add(make_form(sku="A-1"))

    def test_missing_product_on_update(self):
        _, repo = _repo(FakeResponse(status_code=404))
        with pytest.raises(EntityNotFoundError):
            repo.update("nope", ProductChanges())

    def test_missing_product_on_delete(self):
        _, repo = _repo(FakeResponse(status_code=404))
        with pytest.raises(EntityNotFoundError):
            repo.delete("nope")

    def test_rejected_payload(self):
        _, repo = _repo(FakeResponse(status_code=422, body={"detail": "bad"}))
        with pytest.raises(ValidationError, match="rejected"):
            repo.add(make_form())

    def test_write_transport_failure(self):
        _, repo = _repo(error=requests.Timeout("slow"))
        with pytest.raises(RemoteServiceError):
            repo.delete("42")
