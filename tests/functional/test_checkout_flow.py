from urllib.parse import urlparse, parse_qs

ORIGIN = "http://localhost:5500"


def test_storefront_checkout_flow(client, paypal_stub):
    """Parcours complet: preflight, création de l'ordre, retour PayPal, capture."""
    preflight = client.options(
        "/paypalCreateOrder",
        headers={"Origin": ORIGIN, "Access-Control-Request-Method": "POST"},
    )
    assert preflight.status_code == 204
    assert preflight.headers["Access-Control-Allow-Origin"] == ORIGIN

    created = client.post(
        "/paypalCreateOrder",
        json={"teamName": "  Blue Wolves ", "packageId": "pack_5"},
        headers={"Origin": ORIGIN},
    )
    assert created.status_code == 200
    order = created.json()
    assert order["orderID"] == "O1"
    assert order["approveUrl"] == "https://x/approve"

    sent = paypal_stub.json_of(1)
    unit = sent["purchase_units"][0]
    assert unit["amount"] == {"currency_code": "EUR", "value": "30.00"}
    assert unit["description"] == "Skillboll Survivor Train – Pacchetto 5 vite – Blue Wolves"

    # PayPal renvoie le navigateur sur la page de retour du storefront
    return_url = urlparse(sent["application_context"]["return_url"])
    assert f"{return_url.scheme}://{return_url.netloc}" == ORIGIN
    assert return_url.path == "/area.html"
    assert parse_qs(return_url.query) == {"paypal": ["success"], "src": ["paypal"]}

    captured = client.post(
        "/paypalCaptureOrder",
        json={"orderID": order["orderID"]},
        headers={"Origin": ORIGIN},
    )
    assert captured.status_code == 200
    assert captured.json()["capture"]["status"] == "COMPLETED"
    assert captured.headers["Access-Control-Allow-Origin"] == ORIGIN

    assert paypal_stub.paths() == [
        "/v1/oauth2/token",
        "/v2/checkout/orders",
        "/v1/oauth2/token",
        "/v2/checkout/orders/O1/capture",
    ]


def test_checkout_cancelled_payment_is_reported(client, paypal_stub):
    paypal_stub.capture_response = (201, {"status": "VOIDED", "id": "O1"})
    created = client.post("/paypalCreateOrder", json={"teamName": "Red", "packageId": "3"})
    assert created.status_code == 200

    captured = client.post("/paypalCaptureOrder", json={"orderID": created.json()["orderID"]})
    assert captured.status_code == 400
    assert captured.json()["error"] == "Pagamento non completato (VOIDED)"
    assert captured.json()["capture"]["status"] == "VOIDED"
