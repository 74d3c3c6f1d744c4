import inspect
import json
import logging
import os
import sys
from datetime import datetime

import httpx
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from lexoffice_delivery.client import LexofficeClient
from lexoffice_delivery.config import LexofficeConfig
from lexoffice_delivery.models import Address, Order, OrderProduct, OrderService, Price


@pytest.fixture(autouse=True)
def log_test_start(request):
    doc = inspect.getdoc(request.node.obj) if hasattr(request.node, "obj") else None
    if doc:
        first_line = doc.splitlines()[0]
        logging.info(f"START {request.node.name} - {first_line}")
    else:
        logging.info(f"START {request.node.name}")
    yield
    logging.info(f"END {request.node.name}")


class FakeLexoffice:
    """Answers requests by method and path and records them."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def route(self, method, path, status=200, json=None, content=None):
        self.routes[(method, path)] = (status, json, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body, content = self.routes.get(
            (request.method, request.url.path), (404, {"message": "not found"}, None)
        )
        if content is not None:
            return httpx.Response(status, content=content)
        return httpx.Response(status, json=body)

    def body(self, index):
        return json.loads(self.requests[index].content)

    def calls(self):
        return [(r.method, r.url.path) for r in self.requests]


@pytest.fixture
def fake_api():
    return FakeLexoffice()


@pytest.fixture
def client(fake_api):
    http = httpx.Client(transport=httpx.MockTransport(fake_api.handler))
    with LexofficeClient("xyz", http_client=http) as lex:
        yield lex
    http.close()


@pytest.fixture
def config():
    return LexofficeConfig(api_key="xyz", shipping_days=1, payment_days=10)


@pytest.fixture
def company_address():
    return Address(
        company="ACME",
        vat_id="DE999999999",
        salutation="mr",
        first_name="Max",
        last_name="Mustermann",
        email="a@x.com",
        telephone="+49 123 456789",
        address1="Beispielweg 5",
        address2="Hinterhaus",
        postal="12345",
        city="Beispielstadt",
        country_id="DE",
    )


@pytest.fixture
def person_address(company_address):
    return company_address.model_copy(update={"company": "", "vat_id": "", "salutation": "ms"})


def make_order(address=None, tax_flag=True, delivery=True, payment=True, ship_to=()):
    services = {}
    if delivery:
        services["delivery"] = [
            OrderService(
                code="lexoffice",
                name="DHL",
                type="delivery",
                price=Price(costs=5.0, tax_rate=19.0, tax_flag=tax_flag),
            )
        ]
    if payment:
        services["payment"] = [OrderService(code="invoice", name="Rechnung", type="payment")]

    addresses = {}
    if address is not None:
        addresses["payment"] = [address]
    if ship_to:
        addresses["delivery"] = list(ship_to)

    return Order(
        id="1001",
        time_created=datetime(2024, 5, 1, 10, 30, 0),
        language_id="de",
        price=Price(value=20.0, costs=5.0, tax_rate=19.0, tax_flag=tax_flag),
        products=[
            OrderProduct(
                name="Schraube",
                description="Edelstahl",
                quantity=2,
                price=Price(value=10.0, tax_rate=19.0, tax_flag=tax_flag),
            )
        ],
        services=services,
        addresses=addresses,
    )


@pytest.fixture
def order(company_address):
    return make_order(company_address)


@pytest.fixture
def order_factory():
    return make_order
