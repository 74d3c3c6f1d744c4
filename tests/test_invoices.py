from datetime import datetime

import pytest

from lexoffice_delivery.exceptions import LexofficeInvoiceError
from lexoffice_delivery.i18n import CatalogTranslator
from lexoffice_delivery.invoices import submit_invoice


def test_submit_invoice(client, fake_api, order, config):
    fake_api.route("POST", "/v1/invoices", 201, {"id": "inv-1", "version": 1})

    invoice_id = submit_invoice(
        client, order, "c-1", config, CatalogTranslator(), datetime(2024, 5, 1, 12, 0)
    )

    assert invoice_id == "inv-1"
    request = fake_api.requests[0]
    assert request.url.params["finalize"] == "true"
    body = fake_api.body(0)
    assert body["address"] == {"contactId": "c-1"}
    assert body["shippingConditions"]["shippingDate"] == "2024-05-02T12:00:00.000+01:00"


@pytest.mark.parametrize("status, payload", [(400, {"message": "invalid"}), (200, {"id": "inv-1"}), (201, {})])
def test_submit_invoice_failure(client, fake_api, order, config, status, payload):
    """Anything but HTTP 201 with an id raises"""
    fake_api.route("POST", "/v1/invoices", status, payload)

    with pytest.raises(LexofficeInvoiceError) as excinfo:
        submit_invoice(client, order, None, config, CatalogTranslator())

    assert excinfo.value.status_code == status
    assert excinfo.value.payload == payload
    assert len(fake_api.requests) == 1


def test_submit_invoice_introduction_without_placeholder(client, fake_api, order, config):
    """A translation without the order id is sent unchanged"""
    fake_api.route("POST", "/v1/invoices", 201, {"id": "inv-1"})
    translator = CatalogTranslator({"lexoffice": {"Invoice for your order %s": "Vielen Dank für Ihre Bestellung"}})

    assert submit_invoice(client, order, "c-1", config, translator) == "inv-1"
    assert fake_api.body(0)["introduction"] == "Vielen Dank für Ihre Bestellung"
