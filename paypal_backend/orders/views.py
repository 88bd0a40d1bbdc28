"""Endpoints de paiement PayPal appelés par le storefront.
- POST /paypalCreateOrder: crée un ordre pour un paquet et renvoie l'URL d'approbation.
- POST /paypalCaptureOrder: capture un ordre approuvé et vérifie son règlement.
Sécurité:
- Garde d'origine (CORS) appliquée par le middleware app_setup/cors.py, preflight compris.
- optional_rate_limit: limite la fréquence des appels par client et par chemin.
- Les erreurs PaymentError sont converties en enveloppe JSON par app_setup/exceptions.py.
"""
import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from paypal_backend.config import Settings
from paypal_backend.utils.body import safe_json_parse
from paypal_backend.utils.rate_limit import optional_rate_limit
from paypal_backend.orders import service as orders_service
from paypal_backend.orders.errors import PaymentError
from paypal_backend.orders.paypal_client import PayPalClient

logger = logging.getLogger(__name__)
router = APIRouter(tags=["PayPal Orders"])


def get_settings(request: Request) -> Settings:
    """Configuration construite au démarrage (create_app) et partagée en lecture seule."""
    return request.app.state.settings


def get_paypal_client(settings: Settings = Depends(get_settings)) -> PayPalClient:
    return PayPalClient.from_settings(settings)


async def _rate_limit(request: Request, response: Response):
    settings = get_settings(request)
    return await optional_rate_limit(times=settings.order_rate_limit, seconds=60)(request, response)


# module paypal_backend.orders.views
@router.post("/paypalCreateOrder", dependencies=[Depends(_rate_limit)])
async def paypal_create_order(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: PayPalClient = Depends(get_paypal_client),
):
    """
    Entrée JSON: { "teamName": "<1..40>", "packageId": "1|3|5|pack_1|pack_3|pack_5", "siteBase"?: "<url>" }
    Sortie 200: { orderID, approveUrl, env, links: [{rel, href}] }
    Erreurs: 400 validation, 405 méthode, 500 configuration ou PayPal.
    """
    body = safe_json_parse(await request.body())
    try:
        result = await orders_service.create_order(
            body,
            origin=request.headers.get("origin"),
            settings=settings,
            client=client,
        )
    except PaymentError:
        raise
    except Exception:
        logger.exception("Erreur paypal_create_order")
        raise PaymentError("Errore server")
    return JSONResponse(result)


@router.post("/paypalCaptureOrder", dependencies=[Depends(_rate_limit)])
async def paypal_capture_order(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: PayPalClient = Depends(get_paypal_client),
):
    """
    Entrée JSON: { "orderID": "<id PayPal>" }
    Sortie 200: { capture: <payload PayPal brut> }
    Erreurs: 400 orderID manquant ou paiement non COMPLETED (avec capture), 500 configuration ou PayPal.
    """
    body = safe_json_parse(await request.body())
    try:
        result = await orders_service.capture_order(body, settings=settings, client=client)
    except PaymentError:
        raise
    except Exception:
        logger.exception("Erreur paypal_capture_order")
        raise PaymentError("Errore server")
    return JSONResponse(result)
