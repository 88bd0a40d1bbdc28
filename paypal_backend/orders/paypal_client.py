"""
Adaptateur PayPal (Orders v2): centralise les appels REST et le choix d'environnement.
- Un client par requête entrante, construit depuis Settings (voir views.get_paypal_client).
- Aucun retry: un appel distant en échec fait échouer toute la requête.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from paypal_backend.config import CURRENCY, Settings
from .errors import UpstreamAuthError, UpstreamCaptureError, UpstreamOrderError
from .urls import RedirectUrls, api_base

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteOrder:
    id: str
    status: str = ""
    links: List[Dict[str, Any]] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CaptureResult:
    status: str
    raw: Dict[str, Any]


def _read_json(resp: httpx.Response) -> Dict[str, Any]:
    """Corps JSON tolérant: vide, non-JSON ou non-objet -> {}."""
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


# module paypal_backend.orders.paypal_client
class PayPalClient:
    def __init__(
        self,
        env: str,
        client_id: str,
        secret: str,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.env = env
        self.base_url = api_base(env)
        self._client_id = client_id
        self._secret = secret
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "PayPalClient":
        return cls(settings.env, settings.client_id, settings.secret, **kwargs)

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, transport=self._transport)

    async def get_access_token(self) -> str:
        """
        Jeton OAuth2 (client_credentials) via Basic auth sur /v1/oauth2/token.
        Soulève UpstreamAuthError si PayPal répond en erreur ou sans access_token.
        """
        try:
            async with self._http() as http:
                resp = await http.post(
                    "/v1/oauth2/token",
                    auth=(self._client_id, self._secret),
                    data={"grant_type": "client_credentials"},
                )
        except httpx.HTTPError as e:
            logger.error("PayPal token transport error env=%s error=%s", self.env, e)
            raise UpstreamAuthError("Errore autenticazione PayPal") from e

        data = _read_json(resp)
        if not resp.is_success:
            logger.error("PayPal token error status=%s body=%s", resp.status_code, data or resp.text)
            raise UpstreamAuthError("Errore autenticazione PayPal")
        token = data.get("access_token")
        if not token:
            raise UpstreamAuthError("Token PayPal mancante")
        return token

    async def create_order(
        self,
        access_token: str,
        amount: str,
        description: str,
        redirect_urls: RedirectUrls,
    ) -> RemoteOrder:
        """
        Crée un ordre intent=CAPTURE avec une seule purchase_unit.
        - amount: montant déjà formaté ("20.00")
        - redirect_urls: return_url/cancel_url pour le flux d'approbation par redirection
        """
        payload = {
            "intent": "CAPTURE",
            "purchase_units": [
                {
                    "amount": {"currency_code": CURRENCY, "value": amount},
                    "description": description,
                }
            ],
            "application_context": {
                "return_url": redirect_urls.return_url,
                "cancel_url": redirect_urls.cancel_url,
                "shipping_preference": "NO_SHIPPING",
                "user_action": "PAY_NOW",
            },
        }
        try:
            async with self._http() as http:
                resp = await http.post(
                    "/v2/checkout/orders",
                    json=payload,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logger.error("PayPal create order transport error env=%s error=%s", self.env, e)
            raise UpstreamOrderError("Errore creazione ordine PayPal") from e

        data = _read_json(resp)
        if not resp.is_success:
            logger.error("PayPal create order error status=%s body=%s", resp.status_code, data or resp.text)
            raise UpstreamOrderError("Errore creazione ordine PayPal")
        if not data.get("id"):
            raise UpstreamOrderError("Order ID PayPal mancante")
        links = data.get("links") if isinstance(data.get("links"), list) else []
        return RemoteOrder(id=str(data["id"]), status=str(data.get("status") or ""), links=links, raw=data)

    async def capture_order(self, access_token: str, order_id: str) -> CaptureResult:
        """
        Capture les fonds d'un ordre approuvé.
        En cas d'échec, UpstreamCaptureError porte le statut HTTP, les details et le debug_id PayPal.
        """
        path = f"/v2/checkout/orders/{quote(order_id, safe='')}/capture"
        try:
            async with self._http() as http:
                resp = await http.post(
                    path,
                    headers={
                        "Authorization": f"Bearer {access_token}",
                        "Content-Type": "application/json",
                    },
                )
        except httpx.HTTPError as e:
            logger.error("PayPal capture transport error env=%s error=%s", self.env, e)
            raise UpstreamCaptureError("Errore cattura pagamento PayPal") from e

        data = _read_json(resp)
        if not resp.is_success:
            logger.error("PayPal capture error status=%s body=%s", resp.status_code, data or resp.text)
            details = data.get("details")
            raise UpstreamCaptureError(
                data.get("message") or data.get("name") or "Errore cattura pagamento PayPal",
                status=resp.status_code,
                details=details if isinstance(details, list) else None,
                debug_id=data.get("debug_id"),
            )
        return CaptureResult(status=str(data.get("status") or ""), raw=data)
